"""
tipos_columna.py — Categorías internas de tipos de columna
Ubicación: modelos/tipos_columna.py

El catálogo de cada motor reporta el tipo declarado como texto
('int', 'character varying', 'datetime2', ...). Aquí se normaliza a un
conjunto cerrado de categorías, con una variante explícita para lo que
no se sabe convertir (binary, xml, uuid, ...).
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class TipoColumna(str, Enum):
    """Categoría de tipo usada para convertir valores y armar predicados."""

    ENTERO = "entero"
    DECIMAL = "decimal"
    BOOLEANO = "booleano"
    FLOTANTE = "flotante"
    TEXTO = "texto"
    FECHA = "fecha"
    NO_SOPORTADO = "no_soportado"

    @classmethod
    def desde_tipo_sql(cls, tipo_sql: str | None) -> "TipoColumna":
        """
        Normaliza el nombre de tipo reportado por information_schema.

        Args:
            tipo_sql: Valor de la columna data_type del catálogo

        Returns:
            La categoría correspondiente, o NO_SOPORTADO si no hay mapeo
        """
        if not tipo_sql:
            return cls.NO_SOPORTADO
        return _TIPOS_SQL.get(tipo_sql.strip().lower(), cls.NO_SOPORTADO)


# Nombres de tipo de SQL Server, PostgreSQL y MySQL/MariaDB
_TIPOS_SQL: dict[str, TipoColumna] = {
    # Enteros
    "int": TipoColumna.ENTERO,
    "integer": TipoColumna.ENTERO,
    "bigint": TipoColumna.ENTERO,
    "smallint": TipoColumna.ENTERO,
    "tinyint": TipoColumna.ENTERO,
    "mediumint": TipoColumna.ENTERO,
    "int2": TipoColumna.ENTERO,
    "int4": TipoColumna.ENTERO,
    "int8": TipoColumna.ENTERO,
    # Decimales
    "decimal": TipoColumna.DECIMAL,
    "numeric": TipoColumna.DECIMAL,
    "money": TipoColumna.DECIMAL,
    "smallmoney": TipoColumna.DECIMAL,
    # Booleanos
    "bit": TipoColumna.BOOLEANO,
    "boolean": TipoColumna.BOOLEANO,
    "bool": TipoColumna.BOOLEANO,
    # Flotantes
    "float": TipoColumna.FLOTANTE,
    "real": TipoColumna.FLOTANTE,
    "double": TipoColumna.FLOTANTE,
    "double precision": TipoColumna.FLOTANTE,
    "float4": TipoColumna.FLOTANTE,
    "float8": TipoColumna.FLOTANTE,
    # Texto
    "nvarchar": TipoColumna.TEXTO,
    "varchar": TipoColumna.TEXTO,
    "nchar": TipoColumna.TEXTO,
    "char": TipoColumna.TEXTO,
    "text": TipoColumna.TEXTO,
    "ntext": TipoColumna.TEXTO,
    "character varying": TipoColumna.TEXTO,
    "character": TipoColumna.TEXTO,
    "tinytext": TipoColumna.TEXTO,
    "mediumtext": TipoColumna.TEXTO,
    "longtext": TipoColumna.TEXTO,
    # Fechas
    "date": TipoColumna.FECHA,
    "datetime": TipoColumna.FECHA,
    "datetime2": TipoColumna.FECHA,
    "smalldatetime": TipoColumna.FECHA,
    "timestamp": TipoColumna.FECHA,
    "timestamp without time zone": TipoColumna.FECHA,
    "timestamp with time zone": TipoColumna.FECHA,
}


class DescriptorColumna(BaseModel):
    """
    Tipo declarado de una columna, resuelto en cada petición.

    No se guarda en caché: cada búsqueda por clave vuelve a consultar
    el catálogo.
    """

    model_config = ConfigDict(frozen=True)

    nombre_tabla: str
    nombre_columna: str
    tipo_sql: str
    tipo: TipoColumna
