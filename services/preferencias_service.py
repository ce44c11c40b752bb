# services/preferencias_service.py
import logging
from typing import Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.preferencia import Preferencia

logger = logging.getLogger(__name__)

CLAVE_TEMA = "@theme_preference"
TEMA_OSCURO = "dark"
TEMA_CLARO = "light"


class PreferenciasService:
    """Única preferencia persistida: tema claro/oscuro."""

    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def cargar_modo_oscuro(self) -> bool:
        session = self._session_factory()
        try:
            pref = session.get(Preferencia, CLAVE_TEMA)
            return pref is not None and pref.valor == TEMA_OSCURO
        except SQLAlchemyError as e:
            logger.error(f"Error al cargar preferencia de tema: {e}")
            return False
        finally:
            session.close()

    def guardar_modo_oscuro(self, oscuro: bool) -> bool:
        valor = TEMA_OSCURO if oscuro else TEMA_CLARO
        session = self._session_factory()
        try:
            pref = session.get(Preferencia, CLAVE_TEMA)
            if pref is None:
                session.add(Preferencia(clave=CLAVE_TEMA, valor=valor))
            else:
                pref.valor = valor
            session.commit()
            return True
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Error al guardar preferencia de tema: {e}")
            return False
        finally:
            session.close()
