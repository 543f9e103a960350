"""
Paquete de utilidades para servicios.
Contiene funciones auxiliares como la encriptación de credenciales.
"""

from .encriptacion_bcrypt import encriptar, verificar

__all__ = ["encriptar", "verificar"]
