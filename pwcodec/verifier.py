# --------------------------------------------------------------
# File: verifier.py
# Description: Verificación de contraseñas frente a registros almacenados.
# --------------------------------------------------------------
"""Re-derivación y comparación en tiempo constante de credenciales."""

from __future__ import annotations

from cryptography.hazmat.primitives.constant_time import bytes_eq

from pwcodec.crypto_kdf import derive_key, password_bytes
from pwcodec.exceptions import PasswordMismatchError
from pwcodec.models import DEFAULT_OPTIONS, Options
from pwcodec.record import unpack_record


def verify(
    password: bytes,
    salt: bytes,
    derived_key: bytes,
    options: Options | None = None,
) -> bool:
    """Comprueba si la contraseña produce la clave derivada almacenada.

    Args:
        password (bytes): Contraseña candidata.
        salt (bytes): Salt del registro.
        derived_key (bytes): Clave derivada almacenada.
        options (Options | None): Parámetros usados al codificar.

    Returns:
        bool: `True` si la clave re-derivada coincide.

    """

    opts = options or DEFAULT_OPTIONS
    candidate = derive_key(
        password,
        salt,
        iterations=opts.iterations,
        key_length=opts.key_length,
        hash_primitive=opts.hash_primitive,
    )
    # bytes_eq recorre ambos buffers completos sin salida anticipada.
    return bytes_eq(candidate, derived_key)


def verify_record(password: str, record: str, options: Options | None = None) -> bool:
    """Analiza el registro y verifica la contraseña contra él.

    Args:
        password (str): Contraseña candidata.
        record (str): Registro hexadecimal almacenado.
        options (Options | None): Parámetros usados al codificar.

    Returns:
        bool: Siempre `True`; los fallos se señalan con excepciones.

    Raises:
        MalformedRecordError: El registro no pertenece a este esquema.
        PasswordMismatchError: La contraseña no coincide.

    """

    decoded = unpack_record(record, options)
    if not verify(password_bytes(password), decoded.salt, decoded.derived_key, options):
        raise PasswordMismatchError("password does not match")
    return True


def verify_password(plaintext: str, record: str) -> bool:
    """Verifica con los parámetros por defecto del esquema."""

    return verify_record(plaintext, record)
