"""
clasificador_errores.py — Traducción de fallas a código HTTP y mensaje
Ubicación: servicios/clasificador_errores.py

Solo etiqueta: nunca reintenta.

Códigos de motor reconocidos:

    | Situación              | SQL Server | MySQL/MariaDB | PostgreSQL | HTTP |
    |------------------------|------------|---------------|------------|------|
    | Tabla/columna no existe| 208, 207   | 1146, 1054    | 42P01, 42703 | 404 |
    | Llave foránea          | 547        | 1451, 1452    | 23503      | 409  |
    | Llave única            | 2627, 2601 | 1062          | 23505      | 409  |
    | Cualquier otro código  |            |               |            | 500  |
"""

import re

from sqlalchemy.exc import DBAPIError

from modelos.registro_error import RegistroError
from servicios.errores import ErrorApi, ErrorConflicto, ErrorNoEncontrado, ErrorTransporte


_CODIGOS_NO_ENCONTRADO: frozenset[int | str] = frozenset({208, 207, 1146, 1054, "42P01", "42703"})
_CODIGOS_LLAVE_FORANEA: frozenset[int | str] = frozenset({547, 1451, 1452, "23503"})
_CODIGOS_LLAVE_UNICA: frozenset[int | str] = frozenset({2627, 2601, 1062, "23505"})

# El driver ODBC incluye el número nativo de SQL Server entre paréntesis:
# "[SQL Server]Invalid object name 'x'. (208) (SQLExecDirectW)"
_PATRON_NUMERO_ODBC = re.compile(r"\((\d+)\)")


def _buscar_error_bd(excepcion: BaseException) -> DBAPIError | None:
    """Busca un DBAPIError en la excepción o en su cadena de causas."""
    actual: BaseException | None = excepcion
    visitadas = set()
    while actual is not None and id(actual) not in visitadas:
        if isinstance(actual, DBAPIError):
            return actual
        visitadas.add(id(actual))
        actual = actual.__cause__ or actual.__context__
    return None


def extraer_codigo_error(error_bd: DBAPIError) -> int | str | None:
    """
    Extrae el código de error del motor a partir de la excepción del driver.

    - PostgreSQL (asyncpg): atributo sqlstate / pgcode ('23505')
    - MySQL/MariaDB (aiomysql): primer argumento entero (1062)
    - SQL Server (aioodbc/pyodbc): número nativo en el mensaje ('(2627)')
    """
    original = error_bd.orig
    if original is None:
        return None

    for atributo in ("sqlstate", "pgcode"):
        codigo = getattr(original, atributo, None)
        if isinstance(codigo, str) and codigo:
            return codigo

    argumentos = getattr(original, "args", ())
    if argumentos and isinstance(argumentos[0], int) and not isinstance(argumentos[0], bool):
        return argumentos[0]

    # El número nativo es el último entre paréntesis; antes puede venir
    # el valor duplicado: "The duplicate key value is (5). (2627)"
    numeros = _PATRON_NUMERO_ODBC.findall(str(original))
    if numeros:
        return int(numeros[-1])

    return None


def _una_linea(texto: str) -> str:
    return " ".join(texto.split())


def estado_para_codigo(codigo: int | str | None) -> int:
    """Código HTTP que corresponde a un código de error del motor."""
    if codigo in _CODIGOS_NO_ENCONTRADO:
        return 404
    if codigo in _CODIGOS_LLAVE_FORANEA or codigo in _CODIGOS_LLAVE_UNICA:
        return 409
    return 500


def clasificar_error(excepcion: BaseException) -> RegistroError:
    """
    Traduce una falla a RegistroError.

    - Error del motor con código reconocido → 404 / 409
    - Error del motor con otro código o sin código → 500
    - Errores de la API (ErrorApi) → su propio código
    - Cualquier otra cosa → 500

    El mensaje conserva el texto original del error, en una sola línea.
    """
    error_bd = _buscar_error_bd(excepcion)
    if error_bd is not None:
        codigo = extraer_codigo_error(error_bd)
        estado = estado_para_codigo(codigo)
        texto = str(error_bd.orig) if error_bd.orig is not None else str(error_bd)
        return RegistroError(
            estado=estado,
            mensaje=_una_linea(f"Error ({estado}): {texto}"),
            codigo_bd=codigo
        )

    if isinstance(excepcion, ErrorApi):
        return RegistroError(estado=excepcion.estado, mensaje=_una_linea(str(excepcion)))

    return RegistroError(
        estado=500,
        mensaje=_una_linea(f"Error interno del servidor: {excepcion}")
    )


_ERRORES_POR_ESTADO: dict[int, type[ErrorApi]] = {
    404: ErrorNoEncontrado,
    409: ErrorConflicto,
}


def traducir_error_bd(error_bd: DBAPIError) -> ErrorApi:
    """
    Convierte un error del motor en el error de la API que le corresponde.

    El mensaje es el mismo que produce clasificar_error(); quien lo lance
    debe encadenar el original (raise ... from error_bd).
    """
    registro = clasificar_error(error_bd)
    clase = _ERRORES_POR_ESTADO.get(registro.estado, ErrorTransporte)
    error = clase(registro.mensaje)
    error.codigo_bd = registro.codigo_bd
    return error
