import pytest

from models.tablero import Tablero
from services.tablero_validator import (
    MSG_ANIO_FABRICACION, MSG_ANIO_INSTALACION, MSG_CAPACIDAD, MSG_MARCA, MSG_NOMBRE,
    MSG_ORDEN_ANIOS, MSG_UBICACION, validar_tablero,
)


def test_tablero_valido(datos_validos):
    res = validar_tablero(datos_validos)
    assert res.valido
    assert res.errores == []


def test_acepta_instancia_del_modelo(datos_validos):
    assert validar_tablero(Tablero(**datos_validos)).valido


def test_capacidad_cero_solo_reporta_capacidad(datos_validos):
    datos_validos["capacidad_amperios"] = 0
    res = validar_tablero(datos_validos)
    assert not res.valido
    assert res.errores == [MSG_CAPACIDAD]


def test_instalacion_anterior_a_fabricacion(datos_validos):
    datos_validos.update(ano_instalacion=2019, ano_fabricacion=2021)
    res = validar_tablero(datos_validos)
    assert res.errores == [MSG_ORDEN_ANIOS]


@pytest.mark.parametrize("campo,mensaje", [
    ("nombre", MSG_NOMBRE),
    ("ubicacion", MSG_UBICACION),
    ("marca", MSG_MARCA),
])
def test_texto_solo_espacios_es_vacio(datos_validos, campo, mensaje):
    datos_validos[campo] = "   "
    assert validar_tablero(datos_validos).errores == [mensaje]


def test_candidato_vacio_reporta_todas_las_reglas_de_presencia():
    res = validar_tablero({})
    assert res.errores == [
        MSG_NOMBRE, MSG_UBICACION, MSG_MARCA, MSG_CAPACIDAD,
        MSG_ANIO_FABRICACION, MSG_ANIO_INSTALACION,
    ]


def test_no_corta_en_el_primer_error():
    res = validar_tablero({
        "nombre": "", "ubicacion": "Sala", "marca": "",
        "capacidad_amperios": -5, "ano_fabricacion": 1850, "ano_instalacion": 1800,
    })
    assert res.errores == [
        MSG_NOMBRE, MSG_MARCA, MSG_CAPACIDAD,
        MSG_ANIO_FABRICACION, MSG_ANIO_INSTALACION, MSG_ORDEN_ANIOS,
    ]


def test_texto_no_numerico_cuenta_como_ausente(datos_validos):
    datos_validos["capacidad_amperios"] = "abc"
    datos_validos["ano_fabricacion"] = ""
    res = validar_tablero(datos_validos)
    assert res.errores == [MSG_CAPACIDAD, MSG_ANIO_FABRICACION]


def test_numeros_como_texto_se_aceptan(datos_validos):
    datos_validos.update(capacidad_amperios="63", ano_fabricacion="2000", ano_instalacion="2000")
    assert validar_tablero(datos_validos).valido


def test_limite_1900_es_valido(datos_validos):
    datos_validos.update(ano_fabricacion=1900, ano_instalacion=1900)
    assert validar_tablero(datos_validos).valido


def test_texto_que_no_es_str_cuenta_como_ausente(datos_validos):
    datos_validos.update(nombre=123, marca=["Schneider"])
    res = validar_tablero(datos_validos)
    assert res.errores == [MSG_NOMBRE, MSG_MARCA]
