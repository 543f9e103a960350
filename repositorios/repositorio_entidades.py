"""
repositorio_entidades.py — Acceso a datos para cualquier tabla, sin modelos
Ubicación: repositorios/repositorio_entidades.py

Características:
- Detección del tipo de la columna clave vía information_schema
- Conversión del valor de la URL al tipo de la columna
- Búsqueda DATE vs DATETIME con CAST(columna AS DATE)
- Inserción de filas completas con parámetros enlazados

Cada operación abre UNA conexión del pool y la devuelve al terminar.
Los errores del motor salen como ErrorNoEncontrado, ErrorConflicto o
ErrorTransporte, con la excepción del driver como __cause__.
"""

import base64
import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from sqlalchemy.exc import DBAPIError

from repositorios.abstracciones.i_repositorio_entidades import IRepositorioEntidades
from repositorios.constructor_sql import ConstructorSql
from repositorios.inspector_esquema import InspectorEsquema
from servicios.abstracciones.i_control_conexion import IControlConexion
from servicios.clasificador_errores import traducir_error_bd
from servicios.conversion_valores import convertir_valor
from servicios.errores import ErrorNoEncontrado


logger = logging.getLogger(__name__)


def convertir_fila(fila: dict[str, Any]) -> dict[str, Any]:
    """Convierte tipos especiales para que la fila se pueda serializar a JSON."""
    resultado = {}
    for columna, valor in fila.items():
        if isinstance(valor, (datetime, date)):
            valor = valor.isoformat()
        elif isinstance(valor, Decimal):
            valor = float(valor)
        elif isinstance(valor, UUID):
            valor = str(valor)
        elif isinstance(valor, (bytes, bytearray, memoryview)):
            # varbinary / bytea / blob viajan en base64
            valor = base64.b64encode(bytes(valor)).decode("ascii")
        resultado[columna] = valor
    return resultado


class RepositorioEntidades(IRepositorioEntidades):
    """
    Implementación del repositorio genérico.

    El SQL es el mismo para todos los proveedores; lo que cambia entre
    motores (comillas de identificadores) lo decide el formateador del
    ConstructorSql.
    """

    def __init__(
        self,
        control_conexion: IControlConexion,
        constructor: ConstructorSql | None = None,
        inspector: InspectorEsquema | None = None
    ):
        if control_conexion is None:
            raise ValueError("control_conexion no puede ser None")

        self._control_conexion = control_conexion
        self._constructor = constructor or ConstructorSql()
        self._inspector = inspector or InspectorEsquema(self._constructor)

    async def obtener_filas(self, nombre_tabla: str) -> list[dict[str, Any]]:
        """
        Obtiene todas las filas de una tabla.

        Returns:
            Lista de diccionarios (vacía si la tabla no tiene registros)
        """
        sentencia = self._constructor.construir_seleccion_total(nombre_tabla)

        try:
            async with self._control_conexion.abrir() as conexion:
                filas = await conexion.ejecutar_consulta(sentencia)
        except DBAPIError as error:
            raise traducir_error_bd(error) from error

        return [convertir_fila(fila) for fila in filas]

    async def obtener_por_clave(
        self,
        nombre_tabla: str,
        nombre_clave: str,
        valor: str
    ) -> list[dict[str, Any]]:
        """
        Obtiene las filas cuya columna clave es igual al valor.

        Proceso:
        1. Resolver el tipo de la columna en el catálogo
        2. Convertir el valor al tipo de la columna
        3. Ejecutar el SELECT con el valor enlazado

        Raises:
            ErrorNoEncontrado: Si el catálogo no conoce tabla.columna
            ErrorValidacion: Si el valor no es válido para el tipo
            TipoNoSoportado: Si el tipo de la columna no tiene conversión
            ErrorNoEncontrado / ErrorConflicto / ErrorTransporte: Falla del motor
        """
        try:
            async with self._control_conexion.abrir() as conexion:
                descriptor = await self._inspector.resolver_tipo_columna(
                    conexion, nombre_tabla, nombre_clave
                )
                if descriptor is None:
                    raise ErrorNoEncontrado("No se pudo determinar el tipo de dato.")

                valor_convertido = convertir_valor(valor, descriptor.tipo, descriptor.tipo_sql)

                sentencia = self._constructor.construir_seleccion_por_clave(
                    nombre_tabla, nombre_clave, valor_convertido, descriptor.tipo
                )
                filas = await conexion.ejecutar_consulta(sentencia)
        except DBAPIError as error:
            raise traducir_error_bd(error) from error

        return [convertir_fila(fila) for fila in filas]

    async def crear(self, nombre_tabla: str, datos: dict[str, Any]) -> bool:
        """
        Inserta una fila con los datos ya decodificados y transformados.

        Returns:
            True si se insertó la fila
        """
        sentencia = self._constructor.construir_insercion(nombre_tabla, datos)

        try:
            async with self._control_conexion.abrir() as conexion:
                filas_afectadas = await conexion.ejecutar_comando(sentencia)
        except DBAPIError as error:
            raise traducir_error_bd(error) from error

        logger.debug("INSERT en %s - filas afectadas: %s", nombre_tabla, filas_afectadas)
        # Algunos drivers reportan -1 cuando no conocen el conteo
        return filas_afectadas != 0
