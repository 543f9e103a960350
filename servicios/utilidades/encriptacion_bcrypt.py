"""
encriptacion_bcrypt.py — Hash de credenciales con BCrypt
Ubicación: servicios/utilidades/encriptacion_bcrypt.py

Principios SOLID aplicados:
- SRP: Este módulo solo se encarga de generar y verificar hashes
- OCP: Se puede cambiar el costo sin tocar a quienes lo usan
"""

import bcrypt

# Costo por defecto de BCrypt (12 es balance entre seguridad y rendimiento)
COSTO_POR_DEFECTO: int = 12

# BCrypt solo usa los primeros 72 bytes; bcrypt 5.x rechaza entradas más largas
LIMITE_BYTES: int = 72


def _a_bytes(valor: str) -> bytes:
    """UTF-8 recortado a LIMITE_BYTES, igual al generar y al verificar."""
    return valor.encode("utf-8")[:LIMITE_BYTES]


def encriptar(valor_original: str, costo: int = COSTO_POR_DEFECTO) -> str:
    """
    Genera el hash BCrypt de un valor, con salt automático.

    El resultado es un string de 60 caracteres que contiene:
    - Identificador del algoritmo ($2b$)
    - Costo utilizado
    - Salt generado
    - Hash resultante

    Ejemplo: $2b$12$R9h/cIPz0gi.URNNX3kh2OPST9/PgBkqquzi.Ss7KIUgO2t0jWMUW

    Args:
        valor_original: Valor a encriptar (contraseña, PIN, etc.)
        costo: Costo computacional del hashing (entre 4 y 31)

    Returns:
        Hash BCrypt de 60 caracteres. Los bytes posteriores al 72 no
        influyen en el hash.

    Raises:
        ValueError: Si el valor está vacío o el costo está fuera de rango
    """
    if not valor_original:
        raise ValueError("El valor a encriptar no puede estar vacío.")

    if not 4 <= costo <= 31:
        raise ValueError(
            f"El costo de BCrypt debe estar entre 4 y 31. Recibido: {costo}. "
            "Recomendado: 10-15."
        )

    # bcrypt trabaja con bytes
    salt = bcrypt.gensalt(rounds=costo)
    hash_bytes = bcrypt.hashpw(_a_bytes(valor_original), salt)

    return hash_bytes.decode("utf-8")


def verificar(valor_original: str, hash_existente: str) -> bool:
    """
    Verifica si un valor corresponde a un hash BCrypt.

    Lo usan los flujos de inicio de sesión; el hash no es reversible.

    Returns:
        True si el valor corresponde al hash, False si no o si el hash
        no tiene formato BCrypt
    """
    if not valor_original or not hash_existente:
        return False

    try:
        return bcrypt.checkpw(
            _a_bytes(valor_original),
            hash_existente.encode("utf-8")
        )
    except ValueError:
        # Salt inválido: el valor guardado no es un hash BCrypt
        return False
