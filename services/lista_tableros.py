# services/lista_tableros.py
from typing import Iterable, Optional, Sequence

from models.tablero import Tablero

PAGE_SIZE = 10


def _coincide_texto(t: Tablero, termino: str) -> bool:
    if not termino:
        return True
    campos = (t.nombre, t.ubicacion, t.marca, t.estado.value)
    return any(termino in (c or "").lower() for c in campos)


def filtrar_tableros(tableros: Iterable[Tablero], busqueda: str = "",
                     anio: Optional[int] = None) -> list[Tablero]:
    """
    Texto (nombre/ubicación/marca/estado, sin distinguir mayúsculas) Y año de
    fabricación. Conserva el orden en que vinieron del servidor.
    """
    termino = (busqueda or "").strip().lower()
    return [
        t for t in tableros
        if _coincide_texto(t, termino) and (anio is None or t.ano_fabricacion == anio)
    ]


def componer_visibles(tableros: Sequence[Tablero], busqueda: str = "", anio: Optional[int] = None,
                      pagina: int = 1, page_size: int = PAGE_SIZE) -> list[Tablero]:
    """Prefijo de pagina * page_size del conjunto filtrado."""
    filtrados = filtrar_tableros(tableros, busqueda, anio)
    return filtrados[:max(pagina, 1) * page_size]


class ListaTablerosState:
    """Estado de la pantalla de lista: fuente + filtros + página."""

    def __init__(self, page_size: int = PAGE_SIZE):
        self.page_size = page_size
        self.fuente: list[Tablero] = []
        self.busqueda = ""
        self.anio: Optional[int] = None
        self.pagina = 1

    # ---- disparadores (todos vuelven a la página 1) ----
    def set_fuente(self, tableros: Iterable[Tablero]):
        self.fuente = list(tableros or [])
        self.pagina = 1

    def set_busqueda(self, texto: str):
        self.busqueda = texto or ""
        self.pagina = 1

    def set_anio(self, anio: Optional[int]):
        self.anio = anio
        self.pagina = 1

    def cargar_mas(self) -> bool:
        """Avanza una página; False si ya se ve todo."""
        if not self.hay_mas:
            return False
        self.pagina += 1
        return True

    # ---- derivados ----
    @property
    def filtrados(self) -> list[Tablero]:
        return filtrar_tableros(self.fuente, self.busqueda, self.anio)

    @property
    def visibles(self) -> list[Tablero]:
        return componer_visibles(self.fuente, self.busqueda, self.anio, self.pagina, self.page_size)

    @property
    def hay_mas(self) -> bool:
        return self.pagina * self.page_size < len(self.filtrados)

    @property
    def anios_disponibles(self) -> list[int]:
        return sorted({t.ano_fabricacion for t in self.fuente if t.ano_fabricacion is not None}, reverse=True)
