import sys
import logging
from PyQt5.QtWidgets import QApplication, QMainWindow, QTabWidget, QAction, QStatusBar, QLabel

from config import settings
from utils.logging_config import configure_logging
from utils.db import SessionLocal, init_db
from controllers.ui_theme import apply_theme
from controllers.splash import SplashTableros
from controllers.perfil_view import PerfilView
from controllers.abm_tableros import ABMTableros
from controllers.form_tablero import FormTablero
from models.perfil import PERFIL
from services.preferencias_service import PreferenciasService
from services.theme_context import ThemeContext
from services.tablero_gateway import TableroGateway
from services.tablero_store import CollectionStore
from services.tableros_service import TablerosService

logger = logging.getLogger(__name__)

TAB_INICIO, TAB_TABLEROS, TAB_CREAR = range(3)


class MainWindow(QMainWindow):
    def __init__(self, service: TablerosService, theme_ctx: ThemeContext):
        super().__init__()
        self.service = service
        self.theme_ctx = theme_ctx
        self.setWindowTitle(settings.app_name)
        self.setGeometry(0, 0, 1200, 760)

        self.tabs = QTabWidget()
        self.setCentralWidget(self.tabs)

        self.perfil = PerfilView(PERFIL, theme_ctx)
        self.abm_tableros = ABMTableros(service, page_size=settings.page_size)
        self.form_crear = FormTablero(service)
        self.form_crear.guardado.connect(self._tablero_creado)

        self.tabs.addTab(self.perfil, "Inicio")
        self.tabs.addTab(self.abm_tableros, "Tableros")
        self.tabs.addTab(self.form_crear, "Crear")
        self.tabs.currentChanged.connect(self._on_tab)

        self.init_menu()
        self.init_status_bar()

    def init_menu(self):
        menubar = self.menuBar()
        self.menu_ver = menubar.addMenu("Ver")

        action_tema = QAction("Cambiar tema claro/oscuro", self)
        action_tema.setShortcut("Ctrl+T")
        action_tema.triggered.connect(self.theme_ctx.toggle)
        self.menu_ver.addAction(action_tema)

        action_refrescar = QAction("Actualizar tableros", self)
        action_refrescar.setShortcut("F5")
        action_refrescar.triggered.connect(self.refrescar_tableros)
        self.menu_ver.addAction(action_refrescar)

    def init_status_bar(self):
        status = QStatusBar()
        status.addWidget(QLabel(f"API: {settings.api_base_url}"))
        self.setStatusBar(status)

    def _on_tab(self, idx):
        # la lista se pide recién cuando se abre (y la caché decide si va a la red)
        if idx == TAB_TABLEROS:
            self.abm_tableros.cargar()

    def refrescar_tableros(self):
        self.tabs.setCurrentIndex(TAB_TABLEROS)
        self.abm_tableros.cargar(forzar=True)

    def _tablero_creado(self, _tablero):
        self.tabs.setCurrentIndex(TAB_TABLEROS)


def build_service() -> TablerosService:
    gateway = TableroGateway(settings.api_base_url, timeout=settings.request_timeout)
    store = CollectionStore(stale_seconds=settings.stale_seconds)
    return TablerosService(gateway, store, reintentos=settings.query_retries)


def main():
    configure_logging()
    init_db()
    app = QApplication(sys.argv)

    theme_ctx = ThemeContext(PreferenciasService(SessionLocal))
    apply_theme(app, theme_ctx.theme)
    theme_ctx.subscribe(lambda tema: apply_theme(app, tema))

    service = build_service()
    ventanas = {}

    def abrir_principal():
        main_win = MainWindow(service, theme_ctx)
        ventanas["main"] = main_win
        main_win.show()
        logger.info("Aplicación iniciada")

    splash = SplashTableros(theme_ctx.theme, settings.splash_ms)
    splash.iniciar(abrir_principal)
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
