"""Controladores HTTP de la API."""
from .entidades_controller import router as entidades_controller

__all__ = [
    "entidades_controller"
]
