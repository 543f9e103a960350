import pytest
from fastapi.testclient import TestClient

from config import DatabaseSettings, Settings
from main import app
from repositorios.repositorio_entidades import RepositorioEntidades
from servicios import fabrica_servicios
from servicios.errores import ErrorConfiguracion
from servicios.fabrica_servicios import crear_repositorio_entidades


def test_repositorio_con_identificadores_citados():
    settings = Settings(database=DatabaseSettings(provider="mysql", identificadores="citado"))

    repositorio = crear_repositorio_entidades(settings)

    assert isinstance(repositorio, RepositorioEntidades)
    sentencia = repositorio._constructor.construir_seleccion_total("usuario")
    assert sentencia.sql == "SELECT * FROM `usuario`"


def test_repositorio_literal_no_exige_proveedor():
    settings = Settings(database=DatabaseSettings(provider="", identificadores="literal"))

    repositorio = crear_repositorio_entidades(settings)

    assert repositorio._constructor.construir_seleccion_total("usuario").sql == "SELECT * FROM usuario"


def test_estrategia_desconocida_es_error_de_configuracion():
    settings = Settings(database=DatabaseSettings(provider="postgres", identificadores="mayusculas"))

    with pytest.raises(ErrorConfiguracion, match="mayusculas"):
        crear_repositorio_entidades(settings)


def test_configuracion_invalida_responde_500_clasificado(monkeypatch):
    settings = Settings(database=DatabaseSettings(provider="oracle", identificadores="citado"))
    monkeypatch.setattr(fabrica_servicios, "get_settings", lambda: settings)

    with TestClient(app) as cliente:
        respuesta = cliente.get("/api/miapp/usuario")

    assert respuesta.status_code == 500
    detalle = respuesta.json()["detail"]
    assert detalle["estado"] == 500
    assert "oracle" in detalle["mensaje"]
