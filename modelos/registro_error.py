"""
registro_error.py — Resultado de clasificar una falla
Ubicación: modelos/registro_error.py
"""

from pydantic import BaseModel, Field


class RegistroError(BaseModel):
    """Código HTTP y mensaje de una línea que se devuelven al cliente."""

    estado: int = Field(description="Código de estado HTTP")
    mensaje: str = Field(description="Mensaje de una sola línea")
    codigo_bd: int | str | None = Field(
        default=None,
        description="Código de error del motor, si la falla lo traía"
    )
