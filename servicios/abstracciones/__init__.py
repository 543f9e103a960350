"""Paquete de abstracciones (Protocols) para servicios."""

from .i_proveedor_conexion import IProveedorConexion
from .i_control_conexion import IConexionBd, IControlConexion
from .i_servicio_entidades import IServicioEntidades

__all__ = ["IProveedorConexion", "IConexionBd", "IControlConexion", "IServicioEntidades"]
