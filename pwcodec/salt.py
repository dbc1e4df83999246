# --------------------------------------------------------------
# File: salt.py
# Description: Generación de salts alfanuméricas a partir del CSPRNG del sistema.
# --------------------------------------------------------------
"""Generador de salts para nuevas credenciales."""

import os

ALPHABET = b"0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
MAX_SALT_LENGTH = 256


def generate_salt(length: int) -> bytes:
    """Genera una salt de `length` bytes restringida a `[0-9A-Za-z]`.

    Cada byte aleatorio se proyecta como `ALPHABET[byte % 62]`. El sesgo del
    módulo hacia los 8 primeros símbolos se mantiene para conservar la
    compatibilidad con los registros existentes.

    Args:
        length (int): Número de bytes, entre 1 y 256.

    Returns:
        bytes: Salt ASCII alfanumérica.

    """

    if not 0 < length <= MAX_SALT_LENGTH:
        raise ValueError(f"salt length must be in 1..{MAX_SALT_LENGTH}, got {length}")

    raw = os.urandom(length)
    return bytes(ALPHABET[byte % len(ALPHABET)] for byte in raw)
