"""
control_conexion.py — Acceso a la base de datos por petición
Ubicación: servicios/conexion/control_conexion.py

Cada petición toma una conexión del pool, la usa para su ciclo
abrir/ejecutar/cerrar y la devuelve en TODAS las salidas (éxito, error
de validación o excepción). El pool (AsyncEngine de SQLAlchemy) es
compartido por todo el proceso; la conexión no.

Uso:
    control = ControlConexion(ProveedorConexion())
    async with control.abrir() as conexion:
        filas = await conexion.ejecutar_consulta(sentencia)
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine

from modelos.sentencia import Sentencia
from servicios.abstracciones.i_proveedor_conexion import IProveedorConexion


logger = logging.getLogger(__name__)


class ConexionBd:
    """
    Conexión abierta durante una petición.

    Sin reintentos: cualquier error del motor sale tal cual hacia el
    clasificador de errores.
    """

    def __init__(self, conexion: AsyncConnection):
        self._conexion = conexion

    async def ejecutar_consulta(self, sentencia: Sentencia) -> list[dict[str, Any]]:
        """
        Ejecuta una consulta y devuelve las filas como diccionarios.

        Returns:
            Lista de filas (columna → valor); NULL llega como None
        """
        logger.debug(
            "Ejecutando consulta SQL: %s | Parámetros: %s",
            sentencia.sql,
            sentencia.descripcion_parametros()
        )
        resultado = await self._conexion.execute(sentencia.a_clausula())
        return [dict(fila) for fila in resultado.mappings().all()]

    async def ejecutar_comando(self, sentencia: Sentencia) -> int:
        """
        Ejecuta un comando (INSERT) y lo confirma.

        Si falla se revierte, de modo que nunca queda una fila a medias.

        Returns:
            Número de filas afectadas
        """
        logger.debug(
            "Ejecutando comando SQL: %s | Parámetros: %s",
            sentencia.sql,
            sentencia.descripcion_parametros()
        )
        try:
            resultado = await self._conexion.execute(sentencia.a_clausula())
            await self._conexion.commit()
        except Exception:
            await self._conexion.rollback()
            raise
        return resultado.rowcount


class ControlConexion:
    """
    Entrega conexiones tomadas del pool del proceso.

    Hay un AsyncEngine por cadena de conexión, creado la primera vez
    que se necesita.
    """

    _motores: dict[str, AsyncEngine] = {}

    def __init__(self, proveedor_conexion: IProveedorConexion):
        if proveedor_conexion is None:
            raise ValueError("proveedor_conexion no puede ser None")

        self._proveedor_conexion = proveedor_conexion

    def _obtener_motor(self) -> AsyncEngine:
        """Obtiene o crea el engine de SQLAlchemy (lazy initialization)."""
        cadena = self._proveedor_conexion.obtener_cadena_conexion()
        motor = self._motores.get(cadena)
        if motor is None:
            logger.info(
                "Creando pool de conexiones para proveedor: %s",
                self._proveedor_conexion.proveedor_actual
            )
            motor = create_async_engine(cadena, echo=False, pool_pre_ping=True)
            self._motores[cadena] = motor
        return motor

    @asynccontextmanager
    async def abrir(self) -> AsyncIterator[ConexionBd]:
        """Toma una conexión del pool y la devuelve al salir del bloque."""
        motor = self._obtener_motor()
        async with motor.connect() as conexion:
            yield ConexionBd(conexion)

    @classmethod
    async def cerrar_motores(cls) -> None:
        """Libera todos los pools (apagado de la aplicación)."""
        for motor in cls._motores.values():
            await motor.dispose()
        cls._motores.clear()
