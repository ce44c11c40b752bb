from typing import Generator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from models.base import Base
from models.tablero import Tablero
import models.preferencia  # noqa: F401

_SIN_CUERPO = object()


class FakeResponse:
    def __init__(self, status_code: int = 200, json_data=_SIN_CUERPO):
        self.status_code = status_code
        self._json = json_data

    def json(self):
        if self._json is _SIN_CUERPO:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._json


class FakeSession:
    """Reemplaza requests.Session: devuelve (o lanza) las respuestas en orden."""

    def __init__(self, *respuestas):
        self.respuestas = list(respuestas)
        self.llamadas = []

    def request(self, method, url, headers=None, json=None, timeout=None):
        self.llamadas.append({"method": method, "url": url, "headers": headers, "json": json, "timeout": timeout})
        r = self.respuestas.pop(0)
        if isinstance(r, Exception):
            raise r
        return r


def respuesta(status_code: int = 200, json_data=_SIN_CUERPO) -> FakeResponse:
    return FakeResponse(status_code, json_data)


def tablero_api(i: int, **extra) -> dict:
    data = {
        "id": i,
        "nombre": f"Tablero {i}",
        "ubicacion": f"Piso {i}",
        "marca": "Schneider",
        "capacidad_amperios": 100,
        "ano_fabricacion": 2015,
        "ano_instalacion": 2016,
        "estado": "Operativo",
    }
    data.update(extra)
    return data


@pytest.fixture()
def datos_validos() -> dict:
    return {
        "nombre": "Tablero Principal",
        "ubicacion": "Sótano 1",
        "marca": "Schneider Electric",
        "capacidad_amperios": 250,
        "ano_fabricacion": 2018,
        "ano_instalacion": 2019,
        "estado": "Operativo",
    }


@pytest.fixture()
def veinticinco_tableros() -> list[Tablero]:
    return [Tablero.from_api(tablero_api(i)) for i in range(1, 26)]


@pytest.fixture()
def session_factory() -> Generator:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(bind=engine, expire_on_commit=False)
    Base.metadata.drop_all(bind=engine)
    engine.dispose()
