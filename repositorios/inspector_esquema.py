"""
inspector_esquema.py — Resolución del tipo declarado de una columna
Ubicación: repositorios/inspector_esquema.py

Consulta information_schema.columns en cada llamada (sin caché): el tipo
siempre está al día, a cambio de un viaje extra a la BD por petición.
"""

import logging

from modelos.tipos_columna import DescriptorColumna, TipoColumna
from repositorios.constructor_sql import ConstructorSql
from servicios.abstracciones.i_control_conexion import IConexionBd


logger = logging.getLogger(__name__)


class InspectorEsquema:
    """Lee el catálogo del motor para conocer el tipo de una columna."""

    def __init__(self, constructor: ConstructorSql | None = None):
        self._constructor = constructor or ConstructorSql()

    async def resolver_tipo_columna(
        self,
        conexion: IConexionBd,
        nombre_tabla: str,
        nombre_columna: str
    ) -> DescriptorColumna | None:
        """
        Resuelve el tipo declarado de tabla.columna.

        Args:
            conexion: Conexión abierta de la petición
            nombre_tabla: Tabla (parámetro enlazado, no interpolado)
            nombre_columna: Columna (parámetro enlazado, no interpolado)

        Returns:
            DescriptorColumna, o None si el catálogo no tiene la columna
            o reporta un tipo nulo

        Raises:
            Cualquier error de conectividad se propaga; no se confunde con
            "no encontrado".
        """
        sentencia = self._constructor.construir_consulta_catalogo(nombre_tabla, nombre_columna)
        filas = await conexion.ejecutar_consulta(sentencia)

        if not filas:
            logger.info(
                "Columna no encontrada en el catálogo - Tabla: %s, Columna: %s",
                nombre_tabla,
                nombre_columna
            )
            return None

        # Algunos motores devuelven DATA_TYPE en mayúsculas como nombre de columna
        fila = {str(clave).lower(): valor for clave, valor in filas[0].items()}
        tipo_sql = fila.get("data_type")
        if tipo_sql is None or not str(tipo_sql).strip():
            return None

        tipo_sql = str(tipo_sql).strip()
        logger.debug(
            "Tipo de dato detectado para la columna %s.%s: %s",
            nombre_tabla,
            nombre_columna,
            tipo_sql
        )

        return DescriptorColumna(
            nombre_tabla=nombre_tabla,
            nombre_columna=nombre_columna,
            tipo_sql=tipo_sql,
            tipo=TipoColumna.desde_tipo_sql(tipo_sql)
        )
