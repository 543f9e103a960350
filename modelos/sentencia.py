"""
sentencia.py — Sentencia SQL con parámetros tipados
Ubicación: modelos/sentencia.py

Todo valor de datos que llega a SQL viaja como parámetro enlazado.
El tipo del parámetro se infiere del tipo del valor en tiempo de
ejecución, y None se enlaza como NULL (nunca como parámetro ausente).
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import bindparam, text
from sqlalchemy.sql.elements import TextClause
from sqlalchemy.types import (
    BigInteger,
    Boolean,
    Date,
    DateTime,
    Float,
    NullType,
    Numeric,
    TypeEngine,
    Unicode,
)


def inferir_tipo_bd(valor: Any) -> TypeEngine:
    """
    Infiere el tipo SQLAlchemy a partir del valor.

    El orden importa: bool es subclase de int y datetime de date.
    """
    if valor is None:
        return NullType()
    if isinstance(valor, bool):
        return Boolean()
    if isinstance(valor, int):
        return BigInteger()
    if isinstance(valor, Decimal):
        return Numeric()
    if isinstance(valor, float):
        return Float()
    if isinstance(valor, datetime):
        return DateTime()
    if isinstance(valor, date):
        return Date()
    if isinstance(valor, str):
        return Unicode()
    return NullType()


class ParametroTipado(BaseModel):
    """Valor enlazado a un marcador :nombre de la sentencia."""

    model_config = ConfigDict(frozen=True)

    nombre: str
    valor: Any = None

    @property
    def tipo_bd(self) -> TypeEngine:
        return inferir_tipo_bd(self.valor)

    def a_bindparam(self):
        return bindparam(self.nombre, value=self.valor, type_=self.tipo_bd)


class Sentencia(BaseModel):
    """Texto SQL más sus parámetros, en el orden en que aparecen."""

    model_config = ConfigDict(frozen=True)

    sql: str
    parametros: list[ParametroTipado] = Field(default_factory=list)

    def a_clausula(self) -> TextClause:
        """Convierte la sentencia en un TextClause de SQLAlchemy con parámetros tipados."""
        clausula = text(self.sql)
        if self.parametros:
            clausula = clausula.bindparams(*(p.a_bindparam() for p in self.parametros))
        return clausula

    def valores(self) -> dict[str, Any]:
        """Diccionario nombre → valor, útil para registro y pruebas."""
        return {p.nombre: p.valor for p in self.parametros}

    def descripcion_parametros(self) -> str:
        """Nombres y tipos de los parámetros, sin los valores."""
        return ", ".join(
            f"{p.nombre}: {type(p.tipo_bd).__name__}" for p in self.parametros
        ) or "sin parámetros"
