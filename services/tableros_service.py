# services/tableros_service.py
import logging
from typing import Any, Mapping

from pydantic import ValidationError

from models.tablero import Tablero
from services.tablero_gateway import Resultado, TableroGateway
from services.tablero_store import CLAVE_TABLEROS, CollectionStore
from services.tablero_validator import ResultadoValidacion, validar_tablero

logger = logging.getLogger(__name__)

MSG_ID_INVALIDO = "ID de tablero no válido"
MSG_DATOS_INVALIDOS = "Datos de tablero inválidos"
MSG_RESPUESTA_INVALIDA = "Respuesta inválida del servidor al {accion}"


class TablerosService:
    """
    Valida, llama al gateway e invalida la caché después de cada escritura.
    Nunca lanza: devuelve Resultado.
    """

    def __init__(self, gateway: TableroGateway, store: CollectionStore, reintentos: int = 2):
        self.gateway = gateway
        self.store = store
        self.reintentos = max(int(reintentos), 1)

    # ============== CONVERSIÓN ==============
    def _a_tablero(self, data, accion: str) -> Tablero | None:
        """Tablero desde un cuerpo de la API; None si no se puede interpretar."""
        if not isinstance(data, Mapping):
            logger.error(f"Respuesta al {accion}: se esperaba un objeto, llegó {type(data).__name__}")
            return None
        try:
            return Tablero.from_api(data)
        except (ValidationError, TypeError, ValueError) as e:
            logger.error(f"Respuesta al {accion} con datos inválidos: {e}")
            return None

    # ============== LECTURA ==============
    def obtener_tableros(self, forzar: bool = False) -> Resultado:
        if not forzar and self.store.is_fresh(CLAVE_TABLEROS):
            return Resultado.ok(self.store.get(CLAVE_TABLEROS).data)

        res = Resultado.fallo("Error al obtener tableros")
        for intento in range(1, self.reintentos + 1):
            res = self.gateway.listar()
            if res.success:
                break
            logger.warning(f"Listado de tableros falló (intento {intento}/{self.reintentos}): {res.error}")
        if not res.success:
            return res

        if not isinstance(res.data, list):
            logger.error(f"Se esperaba una lista de tableros, llegó {type(res.data).__name__}")
            return Resultado.fallo(MSG_RESPUESTA_INVALIDA.format(accion="obtener tableros"))

        tableros = [self._a_tablero(d, "obtener tableros") for d in res.data]
        if any(t is None for t in tableros):
            return Resultado.fallo(MSG_RESPUESTA_INVALIDA.format(accion="obtener tableros"))
        self.store.set(CLAVE_TABLEROS, tableros)
        return Resultado.ok(tableros)

    # ============== ESCRITURA ==============
    def _candidato(self, data, tablero_id=None) -> Tablero | Resultado:
        """Valida y arma el Tablero a enviar, o devuelve el Resultado de fallo."""
        if not isinstance(data, Mapping):
            return Resultado.fallo(MSG_DATOS_INVALIDOS)
        validacion = validar_tablero(data)
        if not validacion.valido:
            return Resultado.fallo(", ".join(validacion.errores))
        cuerpo = {k: v for k, v in data.items() if k != "id"}
        if tablero_id is not None:
            cuerpo["id"] = tablero_id
        try:
            return Tablero.from_api(cuerpo)
        except (ValidationError, TypeError, ValueError) as e:
            logger.warning(f"Datos de tablero inválidos: {e}")
            return Resultado.fallo(MSG_DATOS_INVALIDOS)

    def _tras_escritura(self, res: Resultado, accion: str) -> Resultado:
        # la escritura ya se hizo en el servidor: se invalida aunque la respuesta sea rara
        self.store.invalidate(CLAVE_TABLEROS)
        guardado = self._a_tablero(res.data, accion)
        if guardado is None:
            return Resultado.fallo(MSG_RESPUESTA_INVALIDA.format(accion=accion))
        return Resultado.ok(guardado)

    def crear_tablero(self, data: Mapping[str, Any]) -> Resultado:
        tablero = self._candidato(data)
        if isinstance(tablero, Resultado):
            return tablero

        res = self.gateway.crear(tablero.to_api())
        if not res.success:
            return res
        logger.info(f"Tablero creado: {tablero.nombre}")
        return self._tras_escritura(res, "crear tablero")

    def actualizar_tablero(self, tablero_id, data: Mapping[str, Any]) -> Resultado:
        if tablero_id in (None, ""):
            return Resultado.fallo(MSG_ID_INVALIDO)
        tablero = self._candidato(data, tablero_id)
        if isinstance(tablero, Resultado):
            return tablero

        res = self.gateway.actualizar(tablero_id, tablero.to_api())
        if not res.success:
            return res
        logger.info(f"Tablero {tablero_id} actualizado")
        return self._tras_escritura(res, "actualizar tablero")

    def eliminar_tablero(self, tablero_id) -> Resultado:
        if tablero_id in (None, ""):
            return Resultado.fallo(MSG_ID_INVALIDO)
        res = self.gateway.eliminar(tablero_id)
        if res.success:
            self.store.invalidate(CLAVE_TABLEROS)
            logger.info(f"Tablero {tablero_id} eliminado")
        return res

    # ============== UTIL ==============
    def validar(self, data: Mapping[str, Any]) -> ResultadoValidacion:
        """Validación sin red, para mostrar errores mientras se completa el formulario."""
        return validar_tablero(data)
