"""Ciclo abrir/ejecutar/cerrar contra SQLite real (aiosqlite)."""

import pytest
from sqlalchemy.exc import IntegrityError

from modelos.sentencia import ParametroTipado, Sentencia
from repositorios.repositorio_entidades import RepositorioEntidades
from servicios.clasificador_errores import clasificar_error
from servicios.conexion.control_conexion import ControlConexion


class ProveedorSqlite:
    def __init__(self, ruta):
        self.ruta = ruta

    @property
    def proveedor_actual(self) -> str:
        return "sqlite"

    def obtener_cadena_conexion(self) -> str:
        return f"sqlite+aiosqlite:///{self.ruta}"


@pytest.fixture
def control(tmp_path):
    return ControlConexion(ProveedorSqlite(tmp_path / "pruebas.sqlite"))


async def _crear_tabla(control: ControlConexion) -> None:
    async with control.abrir() as conexion:
        await conexion.ejecutar_comando(Sentencia(
            sql="CREATE TABLE producto (codigo INTEGER PRIMARY KEY, nombre TEXT, precio REAL)"
        ))


def _insercion(codigo, nombre, precio=None) -> Sentencia:
    return Sentencia(
        sql="INSERT INTO producto (codigo, nombre, precio) VALUES (:v0, :v1, :v2)",
        parametros=[
            ParametroTipado(nombre="v0", valor=codigo),
            ParametroTipado(nombre="v1", valor=nombre),
            ParametroTipado(nombre="v2", valor=precio),
        ]
    )


def test_requiere_proveedor():
    with pytest.raises(ValueError):
        ControlConexion(None)


@pytest.mark.asyncio
async def test_insertar_y_consultar(control):
    try:
        await _crear_tabla(control)

        async with control.abrir() as conexion:
            afectadas = await conexion.ejecutar_comando(_insercion(1, "Lápiz"))

        async with control.abrir() as conexion:
            filas = await conexion.ejecutar_consulta(Sentencia(sql="SELECT * FROM producto"))

        assert afectadas == 1
        assert filas == [{"codigo": 1, "nombre": "Lápiz", "precio": None}]
    finally:
        await ControlConexion.cerrar_motores()


@pytest.mark.asyncio
async def test_comando_fallido_se_revierte(control):
    try:
        await _crear_tabla(control)
        async with control.abrir() as conexion:
            await conexion.ejecutar_comando(_insercion(1, "Lápiz", 1.5))

        with pytest.raises(IntegrityError) as error:
            async with control.abrir() as conexion:
                await conexion.ejecutar_comando(_insercion(1, "Borrador"))

        # SQLite no trae código numérico: se reporta como 500
        assert clasificar_error(error.value).estado == 500

        repositorio = RepositorioEntidades(control)
        assert await repositorio.obtener_filas("producto") == [
            {"codigo": 1, "nombre": "Lápiz", "precio": 1.5}
        ]
    finally:
        await ControlConexion.cerrar_motores()


@pytest.mark.asyncio
async def test_repositorio_inserta_fila_completa(control):
    try:
        await _crear_tabla(control)
        repositorio = RepositorioEntidades(control)

        creado = await repositorio.crear("producto", {"codigo": 7, "nombre": "Regla", "precio": 2.0})

        assert creado is True
        assert await repositorio.obtener_filas("producto") == [
            {"codigo": 7, "nombre": "Regla", "precio": 2.0}
        ]
    finally:
        await ControlConexion.cerrar_motores()


@pytest.mark.asyncio
async def test_cerrar_motores_libera_los_pools(control):
    await _crear_tabla(control)
    assert ControlConexion._motores

    await ControlConexion.cerrar_motores()

    assert ControlConexion._motores == {}
