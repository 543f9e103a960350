"""
errores.py — Taxonomía de errores de la API de entidades
Ubicación: servicios/errores.py

Cada excepción lleva el código HTTP con el que se reporta al cliente.
Las de validación y "no encontrado" heredan de ValueError y LookupError
para que los controladores las atrapen igual que el resto de la API.
"""


class ErrorApi(Exception):
    """Error base con código de estado HTTP asociado."""

    estado: int = 500
    # Código del motor cuando el error viene de la base de datos
    codigo_bd: int | str | None = None


class ErrorValidacion(ErrorApi, ValueError):
    """Entrada mal formada o ausente (400)."""

    estado = 400


class TipoNoSoportado(ErrorValidacion):
    """El tipo declarado de la columna no tiene conversión conocida (400)."""

    def __init__(self, nombre_tipo: str):
        self.nombre_tipo = nombre_tipo
        super().__init__(f"Tipo de dato no soportado: {nombre_tipo}")


class ErrorNoEncontrado(ErrorApi, LookupError):
    """Tabla, columna o fila inexistente (404)."""

    estado = 404


class ErrorConflicto(ErrorApi):
    """Violación de restricción (409)."""

    estado = 409


class ErrorConfiguracion(ErrorApi):
    """Falta un valor de configuración obligatorio (500)."""

    estado = 500


class ErrorTransporte(ErrorApi):
    """Falla de conectividad o inesperada (500)."""

    estado = 500
