"""
Paquete de repositorios.
Contiene el acceso a datos genérico: catálogo, armado de SQL y ejecución.
"""

from .constructor_sql import ConstructorSql, formatear_identificador, obtener_formateador
from .inspector_esquema import InspectorEsquema
from .repositorio_entidades import RepositorioEntidades

__all__ = [
    "ConstructorSql",
    "formatear_identificador",
    "obtener_formateador",
    "InspectorEsquema",
    "RepositorioEntidades"
]
