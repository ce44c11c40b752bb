import pytest

from models.tablero import Tablero
from services.tablero_gateway import TableroGateway
from services.tablero_store import CLAVE_TABLEROS, CollectionStore
from services.tablero_validator import MSG_CAPACIDAD, MSG_NOMBRE, MSG_ORDEN_ANIOS
from services.tableros_service import (
    MSG_DATOS_INVALIDOS, MSG_ID_INVALIDO, MSG_RESPUESTA_INVALIDA, TablerosService,
)

from tests.conftest import FakeSession, respuesta, tablero_api


class Reloj:
    def __init__(self):
        self.t = 0.0

    def __call__(self):
        return self.t


def _service(*respuestas, reintentos=2, reloj=None):
    session = FakeSession(*respuestas)
    store = CollectionStore(stale_seconds=300, clock=reloj or Reloj())
    svc = TablerosService(TableroGateway("https://api.test", session=session), store, reintentos=reintentos)
    return svc, session, store


def test_obtener_convierte_a_modelo_y_cachea():
    svc, session, store = _service(respuesta(200, [tablero_api(1), tablero_api(2)]))
    res = svc.obtener_tableros()
    assert res.success
    assert all(isinstance(t, Tablero) for t in res.data)
    assert [t.id for t in res.data] == [1, 2]

    # segunda lectura sale de la caché
    res2 = svc.obtener_tableros()
    assert res2.data == res.data
    assert len(session.llamadas) == 1
    assert store.is_fresh(CLAVE_TABLEROS)


def test_obtener_vencido_vuelve_a_la_red():
    reloj = Reloj()
    svc, session, _ = _service(respuesta(200, [tablero_api(1)]), respuesta(200, []), reloj=reloj)
    svc.obtener_tableros()
    reloj.t = 301
    assert svc.obtener_tableros().data == []
    assert len(session.llamadas) == 2


def test_obtener_reintenta_hasta_dos_veces():
    svc, session, _ = _service(respuesta(503), respuesta(200, [tablero_api(1)]))
    res = svc.obtener_tableros()
    assert res.success
    assert len(session.llamadas) == 2


def test_obtener_falla_despues_de_los_reintentos():
    svc, session, store = _service(respuesta(503), respuesta(503), respuesta(200, []))
    res = svc.obtener_tableros()
    assert not res.success
    assert res.error == "Error al obtener tableros: 503"
    assert len(session.llamadas) == 2
    assert store.get(CLAVE_TABLEROS) is None


def test_obtener_respuesta_que_no_es_lista():
    svc, _, _ = _service(respuesta(200, {"items": []}))
    assert not svc.obtener_tableros().success


def test_crear_invalido_no_llama_a_la_api(datos_validos):
    svc, session, _ = _service()
    datos_validos["capacidad_amperios"] = 0
    res = svc.crear_tablero(datos_validos)
    assert not res.success
    assert res.error == MSG_CAPACIDAD
    assert session.llamadas == []


def test_errores_de_validacion_se_unen_con_coma():
    svc, _, _ = _service()
    res = svc.crear_tablero({"nombre": "", "ubicacion": "", "marca": "x",
                             "capacidad_amperios": 1, "ano_fabricacion": 2000, "ano_instalacion": 2000})
    assert res.error == "El nombre es requerido, La ubicación es requerida"


def test_crear_ok_invalida_la_cache(datos_validos):
    svc, session, store = _service(respuesta(200, [tablero_api(1)]),
                                   respuesta(201, {**datos_validos, "id": 99}))
    svc.obtener_tableros()
    res = svc.crear_tablero(datos_validos)
    assert res.success
    assert res.data.id == 99
    assert "id" not in session.llamadas[1]["json"]
    assert session.llamadas[1]["json"]["nombre"] == "Tablero Principal"
    assert store.get(CLAVE_TABLEROS) is None


def test_crear_error_api_no_invalida(datos_validos):
    svc, _, store = _service(respuesta(200, []), respuesta(400, {"detail": "Duplicado"}))
    svc.obtener_tableros()
    res = svc.crear_tablero(datos_validos)
    assert res.error == "Duplicado"
    assert store.get(CLAVE_TABLEROS) is not None


def test_actualizar_orden_de_anios_invalido(datos_validos):
    svc, session, _ = _service()
    datos_validos.update(ano_instalacion=2019, ano_fabricacion=2021)
    res = svc.actualizar_tablero(5, datos_validos)
    assert res.error == MSG_ORDEN_ANIOS
    assert session.llamadas == []


def test_actualizar_ok_reenvia_registro_completo(datos_validos):
    svc, session, store = _service(respuesta(200, {**datos_validos, "id": 5}))
    store.set(CLAVE_TABLEROS, [])
    res = svc.actualizar_tablero(5, datos_validos)
    assert res.success
    llamada = session.llamadas[0]
    assert llamada["url"].endswith("/tableros/5")
    assert llamada["json"] == {**datos_validos, "id": 5}
    assert store.get(CLAVE_TABLEROS) is None


def test_eliminar_sin_id():
    svc, session, _ = _service()
    assert svc.eliminar_tablero("").error == MSG_ID_INVALIDO
    assert svc.eliminar_tablero(None).error == MSG_ID_INVALIDO
    assert session.llamadas == []


def test_eliminar_ok_invalida():
    svc, _, store = _service(respuesta(204))
    store.set(CLAVE_TABLEROS, [])
    assert svc.eliminar_tablero(4).success
    assert store.get(CLAVE_TABLEROS) is None


def test_forzar_ignora_cache():
    svc, session, _ = _service(respuesta(200, []), respuesta(200, [tablero_api(1)]))
    svc.obtener_tableros()
    assert len(svc.obtener_tableros(forzar=True).data) == 1
    assert len(session.llamadas) == 2


# ---------------- datos malformados ----------------
def test_obtener_con_un_registro_malformado_falla_sin_cachear():
    svc, _, store = _service(respuesta(200, [tablero_api(1), tablero_api(2, capacidad_amperios="N/A")]))
    res = svc.obtener_tableros()
    assert not res.success
    assert res.error == MSG_RESPUESTA_INVALIDA.format(accion="obtener tableros")
    assert store.get(CLAVE_TABLEROS) is None


def test_obtener_con_elemento_que_no_es_objeto():
    svc, _, store = _service(respuesta(200, [tablero_api(1), "tablero"]))
    assert not svc.obtener_tableros().success
    assert store.get(CLAVE_TABLEROS) is None


def test_crear_respuesta_con_anio_decimal_falla_pero_invalida(datos_validos):
    svc, session, store = _service(respuesta(201, {"id": 1, "ano_fabricacion": 2020.5}))
    store.set(CLAVE_TABLEROS, [])
    res = svc.crear_tablero(datos_validos)
    assert not res.success
    assert res.error == MSG_RESPUESTA_INVALIDA.format(accion="crear tablero")
    assert len(session.llamadas) == 1
    # el POST ya se hizo
    assert store.get(CLAVE_TABLEROS) is None


@pytest.mark.parametrize("cuerpo", [[1, 2], "creado", 7])
def test_crear_respuesta_que_no_es_objeto(datos_validos, cuerpo):
    svc, _, store = _service(respuesta(201, cuerpo))
    store.set(CLAVE_TABLEROS, [])
    res = svc.crear_tablero(datos_validos)
    assert res.error == MSG_RESPUESTA_INVALIDA.format(accion="crear tablero")
    assert store.get(CLAVE_TABLEROS) is None


@pytest.mark.parametrize("cuerpo", [[{"id": 5}], "ok"])
def test_actualizar_respuesta_que_no_es_objeto(datos_validos, cuerpo):
    svc, _, store = _service(respuesta(200, cuerpo))
    store.set(CLAVE_TABLEROS, [])
    res = svc.actualizar_tablero(5, datos_validos)
    assert res.error == MSG_RESPUESTA_INVALIDA.format(accion="actualizar tablero")
    assert store.get(CLAVE_TABLEROS) is None


def test_actualizar_respuesta_con_campo_invalido(datos_validos):
    svc, _, _ = _service(respuesta(200, {**datos_validos, "id": 5, "capacidad_amperios": "mucha"}))
    res = svc.actualizar_tablero(5, datos_validos)
    assert res.error == MSG_RESPUESTA_INVALIDA.format(accion="actualizar tablero")


def test_crear_nombre_numerico_no_llama_a_la_api(datos_validos):
    svc, session, _ = _service()
    datos_validos["nombre"] = 123
    res = svc.crear_tablero(datos_validos)
    assert res.error == MSG_NOMBRE
    assert session.llamadas == []


@pytest.mark.parametrize("datos", [None, "tablero", [("nombre", "x")]])
def test_crear_con_datos_que_no_son_mapping(datos):
    svc, session, _ = _service()
    res = svc.crear_tablero(datos)
    assert res.error == MSG_DATOS_INVALIDOS
    assert session.llamadas == []


def test_actualizar_con_id_no_convertible(datos_validos):
    svc, session, _ = _service()
    res = svc.actualizar_tablero([5], datos_validos)
    assert res.error == MSG_DATOS_INVALIDOS
    assert session.llamadas == []


def test_validar_no_llama_a_la_api(datos_validos):
    svc, session, _ = _service()
    assert svc.validar(datos_validos).valido
    datos_validos["marca"] = "  "
    assert not svc.validar(datos_validos).valido
    assert session.llamadas == []
