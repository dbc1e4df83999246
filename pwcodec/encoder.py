# --------------------------------------------------------------
# File: encoder.py
# Description: Alta de credenciales: salt nueva, derivación y registro.
# --------------------------------------------------------------
"""Codificación de contraseñas en registros persistibles."""

from __future__ import annotations

from typing import Tuple

from pwcodec.crypto_kdf import derive_key, password_bytes
from pwcodec.models import DEFAULT_OPTIONS, Options
from pwcodec.record import pack_record
from pwcodec.salt import generate_salt


def encode(password: bytes, options: Options | None = None) -> Tuple[bytes, bytes]:
    """Genera una salt nueva y deriva la clave de la contraseña.

    Args:
        password (bytes): Contraseña en claro.
        options (Options | None): Parámetros de coste; `None` usa los valores
            por defecto.

    Returns:
        Tuple[bytes, bytes]: Salt generada y clave derivada.

    """

    opts = options or DEFAULT_OPTIONS
    salt = generate_salt(opts.salt_length)
    derived = derive_key(
        password,
        salt,
        iterations=opts.iterations,
        key_length=opts.key_length,
        hash_primitive=opts.hash_primitive,
    )
    return salt, derived


def encode_to_record(password: str, options: Options | None = None) -> str:
    """Codifica la contraseña como registro hexadecimal listo para almacenar."""

    salt, derived = encode(password_bytes(password), options)
    return pack_record(salt, derived)


def encode_password(plaintext: str) -> str:
    """Codifica con los parámetros por defecto del esquema."""

    return encode_to_record(plaintext)
