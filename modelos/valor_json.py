"""
valor_json.py — Unión etiquetada para los valores JSON del cuerpo de una petición
Ubicación: modelos/valor_json.py

El cuerpo de un POST llega como dict[str, Any]. Cada valor se clasifica
una sola vez, en el borde, en una de seis variantes cerradas; a partir de
ahí el resto del código decide por la etiqueta y no por el tipo Python.
"""

import json
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class TipoJson(str, Enum):
    """Variantes posibles de un valor JSON."""

    NULO = "nulo"
    BOOLEANO = "booleano"
    NUMERO = "numero"
    TEXTO = "texto"
    OBJETO = "objeto"
    ARREGLO = "arreglo"


class ValorJson(BaseModel):
    """
    Valor JSON etiquetado.

    - NULO: valor es None
    - BOOLEANO: valor es bool
    - NUMERO: valor es int si el literal era entero, float en otro caso
    - TEXTO: valor es str
    - OBJETO / ARREGLO: valor es el texto JSON serializado, sin descomponer
    """

    model_config = ConfigDict(frozen=True)

    tipo: TipoJson
    valor: Any = None

    @classmethod
    def desde_python(cls, dato: Any) -> "ValorJson":
        """
        Clasifica un valor ya decodificado por el parser JSON.

        Raises:
            ValueError: Si el dato no proviene de un documento JSON
        """
        if dato is None:
            return cls(tipo=TipoJson.NULO)
        # bool va antes que int: en Python True es un int
        if isinstance(dato, bool):
            return cls(tipo=TipoJson.BOOLEANO, valor=dato)
        if isinstance(dato, (int, float)):
            return cls(tipo=TipoJson.NUMERO, valor=dato)
        if isinstance(dato, str):
            return cls(tipo=TipoJson.TEXTO, valor=dato)
        if isinstance(dato, dict):
            return cls(tipo=TipoJson.OBJETO, valor=json.dumps(dato, ensure_ascii=False))
        if isinstance(dato, list):
            return cls(tipo=TipoJson.ARREGLO, valor=json.dumps(dato, ensure_ascii=False))
        raise ValueError(f"Tipo de valor JSON no soportado: {type(dato).__name__}")
