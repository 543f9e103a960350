"""Abstracciones de repositorios."""
from .i_repositorio_entidades import IRepositorioEntidades

__all__ = ["IRepositorioEntidades"]
