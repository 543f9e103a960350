"""
i_control_conexion.py — Protocols del servicio de conexión
Ubicación: servicios/abstracciones/i_control_conexion.py

Principios SOLID aplicados:
- DIP: Los repositorios dependen de estos contratos, no de SQLAlchemy
- ISP: Solo lo que el núcleo necesita: abrir, consultar, ejecutar, cerrar
"""

from contextlib import AbstractAsyncContextManager
from typing import Any, Protocol

from modelos.sentencia import Sentencia


class IConexionBd(Protocol):
    """Conexión abierta durante una sola petición."""

    async def ejecutar_consulta(self, sentencia: Sentencia) -> list[dict[str, Any]]:
        """Ejecuta una consulta y devuelve las filas (columna → valor)."""
        ...

    async def ejecutar_comando(self, sentencia: Sentencia) -> int:
        """Ejecuta un comando y devuelve el número de filas afectadas."""
        ...


class IControlConexion(Protocol):
    """
    Fuente de conexiones.

    abrir() es un context manager async: la conexión se cierra (vuelve
    al pool) al salir del bloque, pase lo que pase dentro.
    """

    def abrir(self) -> AbstractAsyncContextManager[IConexionBd]:
        ...
