# splash.py
from PyQt5.QtWidgets import QSplashScreen
from PyQt5.QtGui import QPixmap, QColor, QPainter, QFont
from PyQt5.QtCore import Qt, QTimer, QPropertyAnimation

from services.theme_context import Tema


def _pixmap(tema: Tema, ancho=480, alto=300) -> QPixmap:
    pm = QPixmap(ancho, alto)
    pm.fill(QColor(tema.background))
    p = QPainter(pm)
    try:
        p.setPen(QColor(tema.primary))
        p.setFont(QFont("Arial", 48, QFont.Bold))
        p.drawText(0, 30, ancho, 90, Qt.AlignCenter, "⚡")
        p.setFont(QFont("Arial", 24, QFont.Bold))
        p.drawText(0, 130, ancho, 40, Qt.AlignCenter, "Tableros Eléctricos")
        p.setPen(QColor(tema.text_secondary))
        p.setFont(QFont("Arial", 14))
        p.drawText(0, 175, ancho, 30, Qt.AlignCenter, "Sistema de Gestión")
    finally:
        p.end()
    return pm


class SplashTableros(QSplashScreen):
    """Splash con fundido de entrada/salida; llama on_finish al terminar."""

    def __init__(self, tema: Tema, duracion_ms: int = 2500):
        super().__init__(_pixmap(tema), Qt.WindowStaysOnTopHint)
        self.duracion_ms = duracion_ms
        self._on_finish = None
        self._anim = None
        self.showMessage("Cargando...", Qt.AlignBottom | Qt.AlignHCenter, QColor(tema.primary))

    def iniciar(self, on_finish):
        self._on_finish = on_finish
        self.setWindowOpacity(0.0)
        self.show()
        self._fundido(0.0, 1.0, 800)
        QTimer.singleShot(self.duracion_ms, self._salir)

    def _fundido(self, desde, hasta, ms, al_terminar=None):
        self._anim = QPropertyAnimation(self, b"windowOpacity", self)
        self._anim.setDuration(ms)
        self._anim.setStartValue(desde)
        self._anim.setEndValue(hasta)
        if al_terminar:
            self._anim.finished.connect(al_terminar)
        self._anim.start()

    def _salir(self):
        self._fundido(1.0, 0.0, 500, self._terminar)

    def _terminar(self):
        # abrir la principal antes de cerrar, si no la app se queda sin ventanas
        if self._on_finish:
            self._on_finish()
        self.close()
