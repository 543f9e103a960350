"""
fabrica_servicios.py — Fábrica centralizada de dependencias
Ubicación: servicios/fabrica_servicios.py

Este es el ÚNICO lugar donde se arma la cadena
ProveedorConexion → ControlConexion → RepositorioEntidades → ServicioEntidades.
Los controladores NUNCA saben qué implementación concreta se usa; la
reciben con Depends(), y las pruebas la reemplazan con
app.dependency_overrides.
"""

from functools import partial

from config import Settings, get_settings
from repositorios.constructor_sql import ConstructorSql, obtener_formateador
from repositorios.repositorio_entidades import RepositorioEntidades
from servicios.conexion.control_conexion import ControlConexion
from servicios.conexion.proveedor_conexion import ProveedorConexion
from servicios.errores import ErrorConfiguracion
from servicios.servicio_entidades import ServicioEntidades
from servicios.utilidades.encriptacion_bcrypt import encriptar


def crear_repositorio_entidades(settings: Settings | None = None) -> RepositorioEntidades:
    """
    Crea el repositorio con el formateador de identificadores configurado.

    El proveedor solo se lee si la estrategia es 'citado' (las comillas
    dependen del motor); con 'literal' la configuración de conexión se
    valida recién al abrir la conexión.

    Raises:
        ErrorConfiguracion: DB_IDENTIFICADORES o DB_PROVIDER no reconocidos
    """
    proveedor = ProveedorConexion(settings)
    estrategia = proveedor.estrategia_identificadores
    nombre_proveedor = proveedor.proveedor_actual if estrategia == "citado" else ""

    try:
        formateador = obtener_formateador(estrategia, nombre_proveedor)
    except ValueError as error:
        raise ErrorConfiguracion(str(error)) from error

    constructor = ConstructorSql(formateador)
    return RepositorioEntidades(ControlConexion(proveedor), constructor)


def crear_servicio_entidades() -> ServicioEntidades:
    """
    Crea ServicioEntidades con sus dependencias resueltas.
    Usado por: entidades_controller (vía Depends).
    """
    settings = get_settings()
    hasher = partial(encriptar, costo=settings.seguridad.bcrypt_costo)
    return ServicioEntidades(crear_repositorio_entidades(settings), hasher)
