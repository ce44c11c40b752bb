# services/estado_pantalla.py
from enum import Enum


class EstadoPantalla(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"
    LOADING = "loading"
    READY = "ready"
    LOADING_MORE = "loading-more"


class TransicionInvalida(Exception):
    pass


class _Maquina:
    TRANSICIONES: dict = {}
    INICIAL: EstadoPantalla

    def __init__(self):
        self.estado = self.INICIAL

    def _ir(self, nuevo: EstadoPantalla):
        if nuevo not in self.TRANSICIONES.get(self.estado, ()):
            raise TransicionInvalida(f"{self.estado.value} -> {nuevo.value}")
        self.estado = nuevo


class MaquinaFormulario(_Maquina):
    """idle -> submitting -> success | error -> idle"""
    INICIAL = EstadoPantalla.IDLE
    TRANSICIONES = {
        EstadoPantalla.IDLE: (EstadoPantalla.SUBMITTING,),
        EstadoPantalla.SUBMITTING: (EstadoPantalla.SUCCESS, EstadoPantalla.ERROR),
        EstadoPantalla.ERROR: (EstadoPantalla.IDLE,),
        EstadoPantalla.SUCCESS: (EstadoPantalla.IDLE,),
    }

    @property
    def ocupado(self) -> bool:
        return self.estado == EstadoPantalla.SUBMITTING

    def enviar(self):
        self._ir(EstadoPantalla.SUBMITTING)

    def exito(self):
        self._ir(EstadoPantalla.SUCCESS)

    def fallo(self):
        self._ir(EstadoPantalla.ERROR)

    def reiniciar(self):
        self._ir(EstadoPantalla.IDLE)


class MaquinaLista(_Maquina):
    """loading -> ready <-> loading-more; ready -> loading al refrescar."""
    INICIAL = EstadoPantalla.LOADING
    TRANSICIONES = {
        EstadoPantalla.LOADING: (EstadoPantalla.READY, EstadoPantalla.ERROR),
        EstadoPantalla.READY: (EstadoPantalla.LOADING_MORE, EstadoPantalla.LOADING),
        EstadoPantalla.LOADING_MORE: (EstadoPantalla.READY,),
        EstadoPantalla.ERROR: (EstadoPantalla.LOADING,),
    }

    def listo(self):
        self._ir(EstadoPantalla.READY)

    def error(self):
        self._ir(EstadoPantalla.ERROR)

    def cargando(self):
        self._ir(EstadoPantalla.LOADING)

    def cargando_mas(self):
        self._ir(EstadoPantalla.LOADING_MORE)
