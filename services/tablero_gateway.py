# services/tablero_gateway.py
"""
Acceso HTTP a la colección /tableros/ de la API.

Cada operación hace exactamente un request y nunca lanza: todo termina en un
Resultado(success, data, error). Los reintentos, si los hay, son cosa de quien
llama (ver services.tableros_service).
"""
import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests

logger = logging.getLogger(__name__)

RECURSO = "tableros"

HEADERS_LECTURA = {"Accept": "application/json"}
HEADERS_ESCRITURA = {"Accept": "application/json", "Content-Type": "application/json"}

MSG_ELIMINADO = "Eliminado exitosamente"


@dataclass
class Resultado:
    success: bool
    data: Any = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data) -> "Resultado":
        return cls(success=True, data=data, error=None)

    @classmethod
    def fallo(cls, error: str) -> "Resultado":
        return cls(success=False, data=None, error=error)


class RespuestaHTTPError(Exception):
    def __init__(self, status_code: int, mensaje: str):
        super().__init__(mensaje)
        self.status_code = status_code


class RespuestaInvalida(Exception):
    pass


def _detalle_error(resp: requests.Response) -> Optional[str]:
    """'detail' del cuerpo si el servidor lo manda (FastAPI), o None."""
    try:
        cuerpo = resp.json()
    except ValueError:
        return None
    if not isinstance(cuerpo, dict) or not cuerpo.get("detail"):
        return None
    detalle = cuerpo["detail"]
    if isinstance(detalle, list):
        # errores de validación 422: [{"loc": [...], "msg": "..."}]
        msgs = [d.get("msg", str(d)) if isinstance(d, dict) else str(d) for d in detalle]
        return ", ".join(msgs)
    return str(detalle)


class TableroGateway:
    def __init__(self, base_url: str, session: requests.Session | None = None,
                 timeout: float | None = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ---------------- urls ----------------
    def _url_coleccion(self) -> str:
        return f"{self.base_url}/{RECURSO}/"

    def _url_item(self, tablero_id) -> str:
        return f"{self.base_url}/{RECURSO}/{tablero_id}"

    # ---------------- núcleo ----------------
    def _enviar(self, metodo: str, url: str, accion: str, *, body=None,
                leer_detalle: bool = True, cuerpo_opcional: bool = False) -> Resultado:
        headers = HEADERS_ESCRITURA if body is not None else HEADERS_LECTURA
        try:
            resp = self.session.request(metodo, url, headers=headers, json=body, timeout=self.timeout)

            if not 200 <= resp.status_code < 300:
                detalle = _detalle_error(resp) if leer_detalle else None
                raise RespuestaHTTPError(resp.status_code, detalle or f"Error al {accion}: {resp.status_code}")

            try:
                data = resp.json()
            except ValueError as e:
                if not cuerpo_opcional:
                    raise RespuestaInvalida(f"Respuesta inválida del servidor al {accion}") from e
                # DELETE suele volver vacío (204)
                data = {"message": MSG_ELIMINADO}
            return Resultado.ok(data)

        except RespuestaHTTPError as e:
            logger.error(f"{metodo} {url} -> {e.status_code}: {e}")
            return Resultado.fallo(str(e))
        except RespuestaInvalida as e:
            logger.error(f"{metodo} {url}: {e} ({e.__cause__})")
            return Resultado.fallo(str(e))
        except requests.RequestException as e:
            logger.error(f"{metodo} {url} falló: {e}")
            return Resultado.fallo(str(e) or f"Error de red al {accion}")
        except Exception as e:
            logger.exception(f"Error inesperado en {metodo} {url}: {e}")
            return Resultado.fallo(f"Error inesperado al {accion}")

    # ---------------- API ----------------
    def listar(self) -> Resultado:
        return self._enviar("GET", self._url_coleccion(), "obtener tableros", leer_detalle=False)

    def crear(self, data: dict) -> Resultado:
        return self._enviar("POST", self._url_coleccion(), "crear tablero", body=data)

    def actualizar(self, tablero_id, data: dict) -> Resultado:
        return self._enviar("PATCH", self._url_item(tablero_id), "actualizar tablero", body=data)

    def eliminar(self, tablero_id) -> Resultado:
        return self._enviar("DELETE", self._url_item(tablero_id), "eliminar tablero", cuerpo_opcional=True)
