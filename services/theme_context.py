# services/theme_context.py
from dataclasses import dataclass
from typing import Callable

from services.preferencias_service import PreferenciasService


@dataclass(frozen=True)
class Tema:
    primary: str
    secondary: str
    background: str
    card: str
    text: str
    text_secondary: str
    border: str
    error: str
    success: str
    warning: str
    card_background: str
    dark: bool


LIGHT = Tema(
    primary="#ff8c42",        # naranja principal
    secondary="#ffa867",
    background="#fff7f2",     # fondo claro cálido
    card="#ffffff",
    text="#2c2c2c",
    text_secondary="#6b6b6b",
    border="#ffd8b8",
    error="#e05353",
    success="#4caf50",
    warning="#ff9d42",
    card_background="#fff3e7",
    dark=False,
)

DARK = Tema(
    primary="#ff8c42",
    secondary="#ffb57a",
    background="#1a1a1a",
    card="#262626",
    text="#f5f5f5",
    text_secondary="#cfcfcf",
    border="#ff7a1f",
    error="#ff6b6b",
    success="#63e06d",
    warning="#ff9d42",
    card_background="#2e2e2e",
    dark=True,
)


class ThemeContext:
    """
    Estado del tema, creado en main.py e inyectado a las pantallas.
    Los listeners se llaman con el Tema nuevo cada vez que cambia.
    """

    def __init__(self, preferencias: PreferenciasService):
        self._preferencias = preferencias
        self._listeners: list[Callable[[Tema], None]] = []
        self.is_dark = preferencias.cargar_modo_oscuro()

    @property
    def theme(self) -> Tema:
        return DARK if self.is_dark else LIGHT

    def subscribe(self, listener: Callable[[Tema], None]):
        self._listeners.append(listener)

    def toggle(self) -> Tema:
        self.is_dark = not self.is_dark
        self._preferencias.guardar_modo_oscuro(self.is_dark)
        for cb in list(self._listeners):
            cb(self.theme)
        return self.theme
