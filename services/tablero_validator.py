# services/tablero_validator.py
from dataclasses import dataclass, field
from typing import Any, Mapping

from models.tablero import Tablero

ANIO_MINIMO = 1900

MSG_NOMBRE = "El nombre es requerido"
MSG_UBICACION = "La ubicación es requerida"
MSG_MARCA = "La marca es requerida"
MSG_CAPACIDAD = "La capacidad en amperios debe ser mayor a 0"
MSG_ANIO_FABRICACION = "El año de fabricación no es válido"
MSG_ANIO_INSTALACION = "El año de instalación no es válido"
MSG_ORDEN_ANIOS = "El año de instalación no puede ser anterior al año de fabricación"


@dataclass
class ResultadoValidacion:
    valido: bool
    errores: list[str] = field(default_factory=list)


def _texto(v) -> str:
    # solo str: el modelo no convierte números a texto
    return v.strip() if isinstance(v, str) else ""


def _entero(v) -> int | None:
    """int o None si falta / no es numérico (lo que viene de un QLineEdit, p.ej.)."""
    if v is None or isinstance(v, bool):
        return None
    if isinstance(v, int):
        return v
    if isinstance(v, float):
        return int(v) if v.is_integer() else None
    try:
        return int(str(v).strip())
    except (TypeError, ValueError):
        return None


def validar_tablero(candidato: Tablero | Mapping[str, Any]) -> ResultadoValidacion:
    """
    Chequea las siete reglas de un tablero, todas, sin cortar en la primera.
    Devuelve un mensaje por regla violada.
    """
    datos = candidato.model_dump() if isinstance(candidato, Tablero) else dict(candidato or {})
    errores = []

    if not _texto(datos.get("nombre")):
        errores.append(MSG_NOMBRE)
    if not _texto(datos.get("ubicacion")):
        errores.append(MSG_UBICACION)
    if not _texto(datos.get("marca")):
        errores.append(MSG_MARCA)

    capacidad = _entero(datos.get("capacidad_amperios"))
    if capacidad is None or capacidad <= 0:
        errores.append(MSG_CAPACIDAD)

    fabricacion = _entero(datos.get("ano_fabricacion"))
    if fabricacion is None or fabricacion < ANIO_MINIMO:
        errores.append(MSG_ANIO_FABRICACION)

    instalacion = _entero(datos.get("ano_instalacion"))
    if instalacion is None or instalacion < ANIO_MINIMO:
        errores.append(MSG_ANIO_INSTALACION)

    if fabricacion is not None and instalacion is not None and instalacion < fabricacion:
        errores.append(MSG_ORDEN_ANIOS)

    return ResultadoValidacion(valido=not errores, errores=errores)
