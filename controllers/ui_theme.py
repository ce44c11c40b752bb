# ui_theme.py
from PyQt5.QtWidgets import QApplication
from PyQt5.QtGui import QPalette, QColor
from PyQt5.QtCore import QLocale

from services.theme_context import Tema

ESTADO_COLORES = {
    "Operativo": "#4caf50",
    "Mantenimiento": "#ff9d42",
    "Fuera de servicio": "#e05353",
}


def build_qss(t: Tema) -> str:
    return f"""
/* base */
QWidget {{
  font-size: 16px;
  color: {t.text};
}}
QDialog, QMainWindow, QWidget {{
  background: {t.background};
}}
QGroupBox {{
  border: 1px solid {t.border};
  border-radius: 10px;
  margin-top: 10px;
  padding: 8px;
  background: {t.card};
}}
QGroupBox::title {{
  subcontrol-origin: margin;
  left: 12px; padding: 0 6px; color: {t.primary};
}}
QLabel#Titulo {{ font-size: 24px; font-weight: bold; color: {t.primary}; }}
QLabel#Secundario {{ color: {t.text_secondary}; }}
QLabel#Errores {{ color: {t.error}; }}
/* inputs */
QLineEdit, QComboBox, QTextEdit, QSpinBox {{
  background: {t.card};
  border: 1px solid {t.border};
  border-radius: 8px;
  padding: 6px 8px;
}}
QLineEdit:focus, QComboBox:focus, QTextEdit:focus, QSpinBox:focus {{
  border: 1px solid {t.primary};
}}
/* tabs */
QTabWidget::pane {{
  border: 1px solid {t.border}; border-radius: 10px; background: {t.card};
}}
QTabBar::tab {{
  padding: 6px 12px; margin: 2px; border: 1px solid {t.border};
  border-bottom: none; border-top-left-radius: 10px; border-top-right-radius: 10px;
  background: {t.card_background};
}}
QTabBar::tab:selected {{
  background: {t.card}; border-color: {t.primary}; color: {t.primary};
}}
/* tabla */
QTableView {{
  background: {t.card}; border: 1px solid {t.border}; border-radius: 10px;
  gridline-color: {t.border}; alternate-background-color: {t.card_background};
}}
QHeaderView::section {{
  background: {t.card_background};
  padding: 6px; border: none; font-weight: 600; color: {t.text};
}}
QTableView::item:selected {{
  background: {t.secondary}; color: {t.text};
}}
/* botones */
QPushButton {{
  border: 1px solid {t.border}; background: {t.card}; padding: 6px 12px; border-radius: 10px;
}}
QPushButton#PrimaryButton {{
  background: {t.primary}; color: white; border: 1px solid {t.primary}; font-weight: bold;
}}
QPushButton#PrimaryButton:hover {{ background: {t.secondary}; }}
QPushButton#PrimaryButton:disabled {{ background: {t.border}; color: {t.text_secondary}; }}
QPushButton#DangerButton {{
  background: {t.error}; color: white; border: 1px solid {t.error};
}}
"""


def apply_theme(app: QApplication, tema: Tema):
    # estilo consistente
    app.setStyle("Fusion")
    QLocale.setDefault(QLocale(QLocale.Spanish, QLocale.Peru))
    pal = app.palette()
    pal.setColor(QPalette.Window, QColor(tema.background))
    pal.setColor(QPalette.Base, QColor(tema.card))
    pal.setColor(QPalette.AlternateBase, QColor(tema.card_background))
    pal.setColor(QPalette.Text, QColor(tema.text))
    pal.setColor(QPalette.WindowText, QColor(tema.text))
    app.setPalette(pal)
    app.setStyleSheet(build_qss(tema))
