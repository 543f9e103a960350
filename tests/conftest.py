"""Fixtures compartidas: base de datos falsa y cliente HTTP con el servicio inyectado."""

from datetime import datetime
from functools import partial

import pytest
from fastapi.testclient import TestClient

from main import app
from repositorios.repositorio_entidades import RepositorioEntidades
from servicios.fabrica_servicios import crear_servicio_entidades
from servicios.servicio_entidades import ServicioEntidades
from servicios.utilidades.encriptacion_bcrypt import encriptar
from tests.dobles import ConexionFalsa, ControlConexionFalso


@pytest.fixture
def conexion() -> ConexionFalsa:
    conexion = ConexionFalsa()
    conexion.catalogo.update({
        ("usuario", "id"): "int",
        ("usuario", "email"): "varchar",
        ("usuario", "activo"): "bit",
        ("usuario", "saldo"): "decimal",
        ("usuario", "creado"): "datetime",
        ("usuario", "foto"): "varbinary",
        ("usuario", "notas"): None,
    })
    conexion.tablas["usuario"] = [
        {"id": 1, "email": "ana@empresa.com", "activo": True,
         "creado": datetime(2024, 3, 1, 10, 30)},
        {"id": 2, "email": "luis@empresa.com", "activo": False,
         "creado": datetime(2024, 3, 2, 8, 0)},
    ]
    conexion.tablas["vacia"] = []
    return conexion


@pytest.fixture
def control(conexion: ConexionFalsa) -> ControlConexionFalso:
    return ControlConexionFalso(conexion)


@pytest.fixture
def servicio(control: ControlConexionFalso) -> ServicioEntidades:
    # Costo mínimo de BCrypt
    return ServicioEntidades(RepositorioEntidades(control), partial(encriptar, costo=4))


@pytest.fixture
def cliente(servicio: ServicioEntidades):
    app.dependency_overrides[crear_servicio_entidades] = lambda: servicio
    with TestClient(app) as cliente:
        yield cliente
    app.dependency_overrides.clear()
