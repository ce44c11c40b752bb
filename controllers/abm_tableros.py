# abm_tableros.py
from PyQt5.QtWidgets import (
    QApplication, QDialog, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QComboBox,
    QTableWidget, QTableWidgetItem, QPushButton, QMessageBox, QHeaderView, QAbstractItemView,
    QStackedWidget
)
from PyQt5.QtGui import QColor
from PyQt5.QtCore import Qt, QSize

from controllers.form_tablero import EditarTableroDialog
from controllers.ui_theme import ESTADO_COLORES
from models.tablero import Tablero
from services.estado_pantalla import EstadoPantalla, MaquinaLista
from services.lista_tableros import ListaTablerosState
from services.tableros_service import TablerosService


COLUMNAS = ["ID", "Nombre", "Ubicación", "Marca", "Capacidad", "Estado", "Fabricación", "Instalación", "Acciones"]
TODOS_LOS_ANIOS = "Todos los años"


class ABMTableros(QWidget):
    def __init__(self, service: TablerosService, page_size: int = 10, parent=None):
        super().__init__(parent)
        self.service = service
        self.lista = ListaTablerosState(page_size=page_size)
        self.maquina = MaquinaLista()
        self._ui()

    # ---------------- UI ----------------
    def _ui(self):
        layout = QVBoxLayout(self)

        cab = QHBoxLayout()
        titulo = QLabel("Tableros Eléctricos")
        titulo.setObjectName("Titulo")
        cab.addWidget(titulo)
        cab.addStretch()
        self.btn_refrescar = QPushButton("⟳ Actualizar")
        self.btn_refrescar.clicked.connect(lambda: self.cargar(forzar=True))
        cab.addWidget(self.btn_refrescar)
        layout.addLayout(cab)

        filtros = QHBoxLayout()
        self.filtro = QLineEdit()
        self.filtro.setPlaceholderText("🔍 Buscar por nombre / ubicación / marca / estado…")
        self.filtro.textChanged.connect(self._on_busqueda)
        self.cmb_anio = QComboBox()
        self.cmb_anio.addItem(TODOS_LOS_ANIOS, None)
        self.cmb_anio.currentIndexChanged.connect(self._on_anio)
        filtros.addWidget(QLabel("Filtro:"))
        filtros.addWidget(self.filtro, 1)
        filtros.addWidget(QLabel("Año fab.:"))
        filtros.addWidget(self.cmb_anio)
        layout.addLayout(filtros)

        # lista / cargando / error
        self.stack = QStackedWidget()

        pag_lista = QWidget()
        pl = QVBoxLayout(pag_lista)
        pl.setContentsMargins(0, 0, 0, 0)
        self.table = QTableWidget(0, len(COLUMNAS))
        self.table.setHorizontalHeaderLabels(COLUMNAS)
        self.table.setEditTriggers(QTableWidget.NoEditTriggers)
        self.table.setSelectionBehavior(QTableWidget.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SingleSelection)
        self.table.setAlternatingRowColors(True)
        self.table.setColumnHidden(0, True)
        self.table.itemDoubleClicked.connect(lambda *_: self.editar(self.table.currentRow()))
        hdr = self.table.horizontalHeader()
        hdr.setSectionResizeMode(QHeaderView.ResizeToContents)
        hdr.setSectionResizeMode(1, QHeaderView.Stretch)
        self.table.verticalScrollBar().valueChanged.connect(self._on_scroll)
        pl.addWidget(self.table)

        pie = QHBoxLayout()
        self.lbl_contador = QLabel()
        self.lbl_contador.setObjectName("Secundario")
        self.btn_mas = QPushButton("Cargar más")
        self.btn_mas.clicked.connect(self.cargar_mas)
        pie.addWidget(self.lbl_contador)
        pie.addStretch()
        pie.addWidget(self.btn_mas)
        pl.addLayout(pie)

        self.lbl_vacio = QLabel("No hay tableros registrados")
        self.lbl_vacio.setAlignment(Qt.AlignCenter)
        self.lbl_vacio.setObjectName("Secundario")
        pl.addWidget(self.lbl_vacio)

        pag_cargando = QLabel("Cargando tableros...")
        pag_cargando.setAlignment(Qt.AlignCenter)

        pag_error = QWidget()
        pe = QVBoxLayout(pag_error)
        self.lbl_error = QLabel("Error al cargar tableros")
        self.lbl_error.setAlignment(Qt.AlignCenter)
        self.lbl_error.setWordWrap(True)
        btn_reintentar = QPushButton("Reintentar")
        btn_reintentar.setObjectName("PrimaryButton")
        btn_reintentar.clicked.connect(lambda: self.cargar(forzar=True))
        pe.addStretch()
        pe.addWidget(self.lbl_error)
        h = QHBoxLayout()
        h.addStretch()
        h.addWidget(btn_reintentar)
        h.addStretch()
        pe.addLayout(h)
        pe.addStretch()

        self.stack.addWidget(pag_lista)      # 0
        self.stack.addWidget(pag_cargando)   # 1
        self.stack.addWidget(pag_error)      # 2
        layout.addWidget(self.stack)

    # ---------------- datos ----------------
    def cargar(self, forzar: bool = False):
        if self.maquina.estado != EstadoPantalla.LOADING:
            self.maquina.cargando()
        self.stack.setCurrentIndex(1)
        QApplication.setOverrideCursor(Qt.WaitCursor)
        try:
            res = self.service.obtener_tableros(forzar=forzar)
        finally:
            QApplication.restoreOverrideCursor()

        if not res.success:
            self.maquina.error()
            self.lbl_error.setText(f"Error al cargar tableros\n{res.error or ''}")
            self.stack.setCurrentIndex(2)
            return

        self.lista.set_fuente(res.data)
        self._llenar_anios()
        self.maquina.listo()
        self.stack.setCurrentIndex(0)
        self._render()

    def _llenar_anios(self):
        actual = self.lista.anio
        self.cmb_anio.blockSignals(True)
        self.cmb_anio.clear()
        self.cmb_anio.addItem(TODOS_LOS_ANIOS, None)
        for a in self.lista.anios_disponibles:
            self.cmb_anio.addItem(str(a), a)
        idx = self.cmb_anio.findData(actual)
        if idx < 0:
            # el año elegido ya no existe en la colección
            idx = 0
            self.lista.set_anio(None)
        self.cmb_anio.setCurrentIndex(idx)
        self.cmb_anio.blockSignals(False)

    def _on_busqueda(self, texto):
        self.lista.set_busqueda(texto)
        self._render()

    def _on_anio(self, _idx):
        self.lista.set_anio(self.cmb_anio.currentData())
        self._render()

    def _on_scroll(self, valor):
        bar = self.table.verticalScrollBar()
        if bar.maximum() > 0 and valor >= bar.maximum():
            self.cargar_mas()

    def cargar_mas(self):
        if self.maquina.estado != EstadoPantalla.READY or not self.lista.hay_mas:
            return
        self.maquina.cargando_mas()
        try:
            self.lista.cargar_mas()
            self._render()
        finally:
            self.maquina.listo()

    # ---------------- render ----------------
    def _render(self):
        visibles = self.lista.visibles
        total = len(self.lista.filtrados)
        self.table.setUpdatesEnabled(False)
        try:
            self.table.setRowCount(len(visibles))
            for r, t in enumerate(visibles):
                self._fila(r, t)
        finally:
            self.table.setUpdatesEnabled(True)

        self.lbl_contador.setText(f"Mostrando {len(visibles)} de {total}")
        self.btn_mas.setVisible(self.lista.hay_mas)
        self.lbl_vacio.setVisible(total == 0)
        if not self.lista.fuente:
            self.lbl_vacio.setText("No hay tableros registrados")
        elif total == 0:
            self.lbl_vacio.setText("Ningún tablero coincide con el filtro")

    def _fila(self, r: int, t: Tablero):
        self.table.setItem(r, 0, QTableWidgetItem(str(t.id)))
        self.table.setItem(r, 1, QTableWidgetItem(t.nombre))
        self.table.setItem(r, 2, QTableWidgetItem(t.ubicacion))
        self.table.setItem(r, 3, QTableWidgetItem(t.marca))
        it = QTableWidgetItem(f"{t.capacidad_amperios} A")
        it.setTextAlignment(Qt.AlignRight | Qt.AlignVCenter)
        self.table.setItem(r, 4, it)
        est = QTableWidgetItem(t.estado.value)
        est.setTextAlignment(Qt.AlignCenter)
        est.setForeground(QColor(ESTADO_COLORES.get(t.estado.value, "#6b6b6b")))
        self.table.setItem(r, 5, est)
        self.table.setItem(r, 6, QTableWidgetItem(str(t.ano_fabricacion or "")))
        self.table.setItem(r, 7, QTableWidgetItem(str(t.ano_instalacion or "")))

        cell = QWidget()
        h = QHBoxLayout(cell)
        h.setContentsMargins(0, 0, 0, 0)
        b1 = QPushButton("✏")
        b1.setToolTip("Editar")
        b1.setFixedSize(QSize(30, 26))
        b1.clicked.connect(lambda _, row=r: self.editar(row))
        b2 = QPushButton("🗑")
        b2.setToolTip("Eliminar")
        b2.setObjectName("DangerButton")
        b2.setFixedSize(QSize(30, 26))
        b2.clicked.connect(lambda _, row=r: self.eliminar(row))
        h.addWidget(b1)
        h.addWidget(b2)
        self.table.setCellWidget(r, 8, cell)

    # ---------------- acciones ----------------
    def _tablero_en(self, row) -> Tablero | None:
        visibles = self.lista.visibles
        return visibles[row] if 0 <= row < len(visibles) else None

    def editar(self, row):
        t = self._tablero_en(row)
        if t is None:
            return
        dlg = EditarTableroDialog(self.service, t, self)
        if dlg.exec_() == QDialog.Accepted:
            self.cargar()

    def eliminar(self, row):
        t = self._tablero_en(row)
        if t is None:
            return
        if QMessageBox.question(self, "Confirmar eliminación",
                                f"¿Estás seguro de eliminar el tablero \"{t.nombre}\"?",
                                QMessageBox.Yes | QMessageBox.No) != QMessageBox.Yes:
            return
        QApplication.setOverrideCursor(Qt.WaitCursor)
        try:
            res = self.service.eliminar_tablero(t.id)
        finally:
            QApplication.restoreOverrideCursor()
        if not res.success:
            QMessageBox.warning(self, "Error", res.error or "No se pudo eliminar el tablero")
            return
        QMessageBox.information(self, "Éxito", "Tablero eliminado correctamente")
        self.cargar()
