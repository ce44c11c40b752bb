# models/tablero.py
import logging
from datetime import date
from enum import Enum
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class EstadoTablero(str, Enum):
    OPERATIVO = "Operativo"
    MANTENIMIENTO = "Mantenimiento"
    FUERA_DE_SERVICIO = "Fuera de servicio"

    @classmethod
    def valores(cls) -> list[str]:
        return [e.value for e in cls]


def _anio_actual() -> int:
    return date.today().year


class Tablero(BaseModel):
    """
    Tablero eléctrico tal como lo expone la API.
    No valida rangos: eso lo hace services.tablero_validator.
    """
    id: Optional[Union[int, str]] = None
    nombre: str = ""
    ubicacion: str = ""
    marca: str = ""
    capacidad_amperios: Optional[int] = 0
    ano_fabricacion: Optional[int] = Field(default_factory=_anio_actual)
    ano_instalacion: Optional[int] = Field(default_factory=_anio_actual)
    estado: EstadoTablero = EstadoTablero.OPERATIVO

    model_config = {
        "extra": "ignore",
    }

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "Tablero":
        # valores vacíos -> defaults del modelo
        limpio = {k: v for k, v in dict(data or {}).items() if v not in (None, "")}
        estado = limpio.get("estado")
        if estado is not None and estado not in EstadoTablero.valores():
            logger.warning(f"Estado desconocido '{estado}' en tablero {limpio.get('id')}, se usa Operativo")
            limpio.pop("estado")
        return cls(**limpio)

    def to_api(self) -> dict:
        """Cuerpo JSON para POST/PATCH. El id solo va si existe."""
        exclude = None if self.id not in (None, "") else {"id"}
        return self.model_dump(mode="json", exclude=exclude)
