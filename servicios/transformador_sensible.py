"""
transformador_sensible.py — Hash de campos tipo contraseña antes de insertar
Ubicación: servicios/transformador_sensible.py

La detección es por NOMBRE de campo, no por esquema: un campo de
contraseña con otro nombre se guarda tal cual. Se conserva el mismo
conjunto de tokens y la regla de "solo el primero" por compatibilidad
con los datos ya almacenados.
"""

import logging
import re
from typing import Any, Callable

from servicios.utilidades.encriptacion_bcrypt import encriptar


logger = logging.getLogger(__name__)

# Fragmentos que delatan un campo de contraseña (comparación sin mayúsculas)
TOKENS_CONTRASENA: tuple[str, ...] = ("password", "contrasena", "passw", "clave")

# $2b$12$ + 53 caracteres de salt y hash
_PATRON_HASH_BCRYPT = re.compile(r"^\$2[abxy]\$\d{2}\$[./A-Za-z0-9]{53}$")


def buscar_campo_contrasena(nombres_campos) -> str | None:
    """
    Devuelve el primer campo (en orden de iteración) cuyo nombre contiene
    alguno de los tokens, o None si ninguno coincide.
    """
    for nombre in nombres_campos:
        nombre_minusculas = nombre.lower()
        if any(token in nombre_minusculas for token in TOKENS_CONTRASENA):
            return nombre
    return None


def es_hash_bcrypt(valor: str) -> bool:
    """Indica si el valor ya es un hash BCrypt (no se vuelve a hashear)."""
    return bool(_PATRON_HASH_BCRYPT.match(valor))


def transformar_campos_sensibles(
    entidad: dict[str, Any],
    hasher: Callable[[str], str] = encriptar
) -> dict[str, Any]:
    """
    Reemplaza el texto plano del primer campo de contraseña por su hash.

    Args:
        entidad: Campos ya decodificados del cuerpo JSON
        hasher: Función de hash de una vía

    Returns:
        Copia de la entidad; el original no se modifica.
        Solo se transforma un campo, y solo si su valor es texto no vacío
        que no sea ya un hash.
    """
    resultado = dict(entidad)

    campo = buscar_campo_contrasena(resultado.keys())
    if campo is None:
        return resultado

    valor = resultado[campo]
    if isinstance(valor, str) and valor and not es_hash_bcrypt(valor):
        resultado[campo] = hasher(valor)
        logger.debug("Campo sensible '%s' reemplazado por su hash", campo)

    return resultado
