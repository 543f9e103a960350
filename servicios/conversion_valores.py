"""
conversion_valores.py — Conversión de valores sin tipo a valores tipados
Ubicación: servicios/conversion_valores.py

Dos direcciones:
- convertir_valor(): texto de la URL → valor Python según el tipo de la
  columna resuelto en el catálogo (búsqueda por clave).
- decodificar_valor_json(): valor JSON del cuerpo → valor Python listo
  para enlazar en un INSERT.

Fechas:
    En la búsqueda por clave solo importa la parte de fecha; el predicado
    compara CAST(columna AS DATE), así que una hora guardada en la columna
    no impide la igualdad.
"""

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Callable

from modelos.tipos_columna import TipoColumna
from modelos.valor_json import TipoJson, ValorJson
from servicios.errores import ErrorValidacion, TipoNoSoportado


_PATRON_ENTERO = re.compile(r"^[+-]?\d+$")

# Fecha ISO con hora y zona opcionales: 2024-03-01, 2024-03-01T10:30:00Z, ...
_PATRON_FECHA_ISO = re.compile(
    r"^\d{4}-\d{2}-\d{2}"
    r"(?:[T ]\d{2}:\d{2}(?::\d{2}(?:\.\d{1,7})?)?(?:Z|[+-]\d{2}:?\d{2})?)?$"
)


# =========================================================================
# TEXTO → VALOR TIPADO (búsqueda por clave)
# =========================================================================

def _a_entero(valor: str) -> int:
    texto = valor.strip()
    if not _PATRON_ENTERO.match(texto):
        raise ErrorValidacion(
            "El valor proporcionado no es válido para el tipo de datos entero."
        )
    return int(texto)


def _a_decimal(valor: str) -> Decimal:
    try:
        resultado = Decimal(valor.strip())
    except InvalidOperation:
        resultado = None
    if resultado is None or not resultado.is_finite():
        raise ErrorValidacion(
            "El valor proporcionado no es válido para el tipo de datos decimal."
        )
    return resultado


def _a_booleano(valor: str) -> bool:
    texto = valor.strip().lower()
    if texto == "true":
        return True
    if texto == "false":
        return False
    raise ErrorValidacion(
        "El valor proporcionado no es válido para el tipo de datos booleano."
    )


def _a_flotante(valor: str) -> float:
    try:
        return float(valor.strip())
    except ValueError:
        raise ErrorValidacion(
            "El valor proporcionado no es válido para el tipo de datos flotante."
        ) from None


def _a_texto(valor: str) -> str:
    return valor


def _a_fecha(valor: str) -> date:
    fecha = interpretar_fecha(valor)
    if fecha is None:
        raise ErrorValidacion(
            "El valor proporcionado no es válido para el tipo de datos fecha."
        )
    # Solo la parte de fecha: el predicado compara CAST(columna AS DATE)
    return fecha.date() if isinstance(fecha, datetime) else fecha


_CONVERTIDORES: dict[TipoColumna, Callable[[str], Any]] = {
    TipoColumna.ENTERO: _a_entero,
    TipoColumna.DECIMAL: _a_decimal,
    TipoColumna.BOOLEANO: _a_booleano,
    TipoColumna.FLOTANTE: _a_flotante,
    TipoColumna.TEXTO: _a_texto,
    TipoColumna.FECHA: _a_fecha,
}


def interpretar_fecha(valor: str) -> date | datetime | None:
    """
    Interpreta una fecha ISO (con o sin hora).

    Returns:
        date si el texto no trae hora, datetime si la trae,
        None si el texto no es una fecha
    """
    texto = valor.strip()
    if not _PATRON_FECHA_ISO.match(texto):
        return None
    try:
        if len(texto) == 10:
            return date.fromisoformat(texto)
        return datetime.fromisoformat(texto.replace("Z", "+00:00"))
    except ValueError:
        # Forma válida pero fecha imposible (2024-02-30)
        return None


def convertir_valor(
    valor: str,
    tipo: TipoColumna,
    tipo_sql: str | None = None
) -> Any:
    """
    Convierte el texto recibido al tipo Python de la columna.

    Args:
        valor: Valor tal como llegó en la ruta
        tipo: Categoría de la columna
        tipo_sql: Nombre de tipo del catálogo, para el mensaje de error

    Returns:
        int, Decimal, bool, float, str o date según la categoría

    Raises:
        ErrorValidacion: Si el texto no es un literal válido para el tipo
        TipoNoSoportado: Si la categoría es NO_SOPORTADO
    """
    convertidor = _CONVERTIDORES.get(tipo)
    if convertidor is None:
        raise TipoNoSoportado(tipo_sql or tipo.value)
    return convertidor(valor)


# =========================================================================
# VALOR JSON → VALOR TIPADO (inserción)
# =========================================================================

# Rango de BIGINT; un entero fuera de él se enlaza como double
_ENTERO_MINIMO = -(2 ** 63)
_ENTERO_MAXIMO = 2 ** 63 - 1


def _numero(numero: int | float) -> int | float:
    if isinstance(numero, int) and not _ENTERO_MINIMO <= numero <= _ENTERO_MAXIMO:
        try:
            return float(numero)
        except OverflowError:
            raise ErrorValidacion(
                "El valor numérico está fuera del rango admitido."
            ) from None
    return numero


def _texto_o_fecha(valor: str) -> Any:
    fecha = interpretar_fecha(valor)
    return valor if fecha is None else fecha


_DECODIFICADORES: dict[TipoJson, Callable[[Any], Any]] = {
    TipoJson.NULO: lambda _: None,
    TipoJson.BOOLEANO: bool,
    # El parser entrega int para literales enteros y float para el resto
    TipoJson.NUMERO: _numero,
    TipoJson.TEXTO: _texto_o_fecha,
    TipoJson.OBJETO: str,
    TipoJson.ARREGLO: str,
}


def decodificar_valor_json(valor: ValorJson) -> Any:
    """Normaliza un valor JSON etiquetado al valor que se enlaza en SQL."""
    return _DECODIFICADORES[valor.tipo](valor.valor)


def decodificar_entidad(datos: dict[str, Any]) -> dict[str, Any]:
    """
    Decodifica todos los campos de un cuerpo JSON.

    Los objetos y arreglos se conservan como su texto JSON; no se
    descomponen en columnas.
    """
    return {
        campo: decodificar_valor_json(ValorJson.desde_python(valor))
        for campo, valor in datos.items()
    }
