# perfil_view.py
from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QGroupBox, QGridLayout
)
from PyQt5.QtCore import Qt

from models.perfil import Perfil
from services.theme_context import ThemeContext


class PerfilView(QWidget):
    """Pestaña Inicio: datos del desarrollador + cambio de tema."""

    def __init__(self, perfil: Perfil, theme_ctx: ThemeContext, parent=None):
        super().__init__(parent)
        self.perfil = perfil
        self.theme_ctx = theme_ctx
        self._ui()
        self.theme_ctx.subscribe(lambda _t: self._refrescar_boton_tema())

    def _ui(self):
        layout = QVBoxLayout(self)

        cab = QHBoxLayout()
        titulo = QLabel("Tableros Eléctricos")
        titulo.setObjectName("Titulo")
        cab.addWidget(titulo)
        cab.addStretch()
        self.btn_tema = QPushButton()
        self.btn_tema.clicked.connect(self.theme_ctx.toggle)
        cab.addWidget(self.btn_tema)
        layout.addLayout(cab)

        box = QGroupBox("Perfil")
        g = QVBoxLayout(box)
        lbl_nombre = QLabel(self.perfil.nombre_completo)
        lbl_nombre.setStyleSheet("font-size: 20px; font-weight: bold;")
        g.addWidget(lbl_nombre)
        lbl_email = QLabel(f"✉ {self.perfil.email}")
        lbl_email.setObjectName("Secundario")
        lbl_email.setTextInteractionFlags(Qt.TextSelectableByMouse)
        g.addWidget(lbl_email)
        desc = QLabel(self.perfil.descripcion)
        desc.setWordWrap(True)
        g.addWidget(desc)
        layout.addWidget(box)

        skills = QGroupBox("Habilidades")
        grid = QGridLayout(skills)
        for i, h in enumerate(self.perfil.habilidades):
            chip = QLabel(h)
            chip.setAlignment(Qt.AlignCenter)
            chip.setStyleSheet("border: 1px solid #ff8c42; border-radius: 10px; padding: 4px 10px;")
            grid.addWidget(chip, i // 3, i % 3)
        layout.addWidget(skills)
        layout.addStretch()

        self._refrescar_boton_tema()

    def _refrescar_boton_tema(self):
        self.btn_tema.setText("☀ Tema claro" if self.theme_ctx.is_dark else "🌙 Tema oscuro")
