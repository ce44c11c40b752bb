# services/tablero_store.py
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable

logger = logging.getLogger(__name__)

CLAVE_TABLEROS = "tableros"


@dataclass
class Entrada:
    data: Any
    last_fetched: float


class CollectionStore:
    """
    Caché explícita: nombre de colección -> (data, last_fetched).
    Una entrada vencida o invalidada obliga a ir de nuevo a la red.
    """

    def __init__(self, stale_seconds: float = 5 * 60, clock: Callable[[], float] = time.monotonic):
        self.stale_seconds = stale_seconds
        self._clock = clock
        self._entradas: dict[str, Entrada] = {}

    def get(self, nombre: str) -> Entrada | None:
        return self._entradas.get(nombre)

    def is_fresh(self, nombre: str) -> bool:
        e = self._entradas.get(nombre)
        if e is None:
            return False
        return (self._clock() - e.last_fetched) < self.stale_seconds

    def set(self, nombre: str, data) -> Entrada:
        e = Entrada(data=data, last_fetched=self._clock())
        self._entradas[nombre] = e
        return e

    def invalidate(self, nombre: str):
        if self._entradas.pop(nombre, None) is not None:
            logger.info(f"Caché '{nombre}' invalidada")

    def clear(self):
        self._entradas.clear()
