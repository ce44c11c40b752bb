# form_tablero.py
from datetime import date

from PyQt5.QtWidgets import (
    QApplication, QDialog, QWidget, QVBoxLayout, QHBoxLayout, QFormLayout, QLabel,
    QLineEdit, QSpinBox, QComboBox, QPushButton, QMessageBox, QGroupBox
)
from PyQt5.QtCore import Qt, pyqtSignal

from models.tablero import Tablero, EstadoTablero
from services.estado_pantalla import MaquinaFormulario
from services.tableros_service import TablerosService


class FormTablero(QWidget):
    """
    Formulario de alta/edición. Sin tablero -> crea; con tablero -> actualiza.
    Emite `guardado(Tablero)` cuando la API confirma.
    """
    guardado = pyqtSignal(object)

    def __init__(self, service: TablerosService, tablero: Tablero = None, parent=None):
        super().__init__(parent)
        self.service = service
        self.tablero = tablero
        self.maquina = MaquinaFormulario()
        self._ui()
        if self.tablero:
            self._cargar()
        else:
            self.limpiar()

    def _ui(self):
        layout = QVBoxLayout(self)
        titulo = QLabel("Editar tablero" if self.tablero else "Nuevo tablero")
        titulo.setObjectName("Titulo")
        layout.addWidget(titulo)

        box = QGroupBox("Datos del tablero")
        form = QFormLayout(box)
        self.txt_nombre = QLineEdit()
        self.txt_nombre.setPlaceholderText("Ej: Tablero Principal")
        self.txt_ubicacion = QLineEdit()
        self.txt_ubicacion.setPlaceholderText("Ej: Sala de máquinas, Sótano 1")
        self.txt_marca = QLineEdit()
        self.txt_marca.setPlaceholderText("Ej: Schneider Electric")
        self.spn_capacidad = QSpinBox()
        self.spn_capacidad.setRange(0, 100000)
        self.spn_capacidad.setSuffix(" A")
        self.spn_fabricacion = QSpinBox()
        self.spn_fabricacion.setRange(0, 3000)
        self.spn_instalacion = QSpinBox()
        self.spn_instalacion.setRange(0, 3000)
        self.cmb_estado = QComboBox()
        self.cmb_estado.addItems(EstadoTablero.valores())

        form.addRow("Nombre *", self.txt_nombre)
        form.addRow("Ubicación *", self.txt_ubicacion)
        form.addRow("Marca *", self.txt_marca)
        form.addRow("Capacidad (amperios) *", self.spn_capacidad)
        form.addRow("Año de fabricación *", self.spn_fabricacion)
        form.addRow("Año de instalación *", self.spn_instalacion)
        form.addRow("Estado", self.cmb_estado)
        layout.addWidget(box)

        self.lbl_errores = QLabel()
        self.lbl_errores.setObjectName("Errores")
        self.lbl_errores.setWordWrap(True)
        layout.addWidget(self.lbl_errores)

        h = QHBoxLayout()
        self.btn_guardar = QPushButton("Guardar cambios" if self.tablero else "Crear tablero")
        self.btn_guardar.setObjectName("PrimaryButton")
        self.btn_guardar.clicked.connect(self.guardar)
        h.addStretch()
        h.addWidget(self.btn_guardar)
        layout.addLayout(h)
        layout.addStretch()

        # ENTER avanza
        self.txt_nombre.returnPressed.connect(self.txt_ubicacion.setFocus)
        self.txt_ubicacion.returnPressed.connect(self.txt_marca.setFocus)
        self.txt_marca.returnPressed.connect(self.spn_capacidad.setFocus)

        # errores a medida que se completa
        for txt in (self.txt_nombre, self.txt_ubicacion, self.txt_marca):
            txt.textChanged.connect(self._revisar)
        for spn in (self.spn_capacidad, self.spn_fabricacion, self.spn_instalacion):
            spn.valueChanged.connect(self._revisar)

    def _revisar(self, *_):
        validacion = self.service.validar(self.datos())
        self.lbl_errores.setText("\n".join(validacion.errores))

    def _cargar(self):
        t = self.tablero
        self.txt_nombre.setText(t.nombre or "")
        self.txt_ubicacion.setText(t.ubicacion or "")
        self.txt_marca.setText(t.marca or "")
        self.spn_capacidad.setValue(int(t.capacidad_amperios or 0))
        self.spn_fabricacion.setValue(int(t.ano_fabricacion or 0))
        self.spn_instalacion.setValue(int(t.ano_instalacion or 0))
        self.cmb_estado.setCurrentText(t.estado.value)

    def limpiar(self):
        anio = date.today().year
        self.txt_nombre.clear()
        self.txt_ubicacion.clear()
        self.txt_marca.clear()
        self.spn_capacidad.setValue(0)
        self.spn_fabricacion.setValue(anio)
        self.spn_instalacion.setValue(anio)
        self.cmb_estado.setCurrentText(EstadoTablero.OPERATIVO.value)
        # formulario nuevo: sin errores hasta que se escriba algo
        self.lbl_errores.clear()
        self.txt_nombre.setFocus()

    def datos(self) -> dict:
        return {
            "nombre": self.txt_nombre.text().strip(),
            "ubicacion": self.txt_ubicacion.text().strip(),
            "marca": self.txt_marca.text().strip(),
            "capacidad_amperios": self.spn_capacidad.value(),
            "ano_fabricacion": self.spn_fabricacion.value(),
            "ano_instalacion": self.spn_instalacion.value(),
            "estado": self.cmb_estado.currentText(),
        }

    def guardar(self):
        if self.maquina.ocupado:
            return
        self.maquina.enviar()
        self.btn_guardar.setEnabled(False)
        QApplication.setOverrideCursor(Qt.WaitCursor)
        try:
            if self.tablero:
                res = self.service.actualizar_tablero(self.tablero.id, self.datos())
            else:
                res = self.service.crear_tablero(self.datos())
        finally:
            QApplication.restoreOverrideCursor()
            self.btn_guardar.setEnabled(True)

        if not res.success:
            self.maquina.fallo()
            QMessageBox.warning(self, "Error", res.error or "No se pudo guardar el tablero")
            self.maquina.reiniciar()
            return

        self.maquina.exito()
        if self.tablero:
            QMessageBox.information(self, "Éxito", "Tablero actualizado correctamente")
        else:
            QMessageBox.information(self, "Éxito", "Tablero creado correctamente")
            self.limpiar()
        self.maquina.reiniciar()
        self.guardado.emit(res.data)


class EditarTableroDialog(QDialog):
    def __init__(self, service: TablerosService, tablero: Tablero, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Editar tablero")
        self.setMinimumWidth(520)
        layout = QVBoxLayout(self)
        self.form = FormTablero(service, tablero, self)
        self.form.guardado.connect(lambda _t: self.accept())
        layout.addWidget(self.form)

        h = QHBoxLayout()
        b = QPushButton("Cancelar")
        b.clicked.connect(self.reject)
        h.addStretch()
        h.addWidget(b)
        layout.addLayout(h)
