# --------------------------------------------------------------
# File: crypto_kdf.py
# Description: Derivación de claves de contraseña mediante PBKDF2-HMAC.
# --------------------------------------------------------------
"""Adaptador sobre la implementación PBKDF2 de `cryptography`."""

from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from pwcodec.models import HashPrimitive


def derive_key(
    password: bytes,
    salt: bytes,
    *,
    iterations: int = 32,
    key_length: int = 32,
    hash_primitive: HashPrimitive = HashPrimitive.SHA512,
) -> bytes:
    """Deriva una clave a partir de la contraseña usando PBKDF2-HMAC.

    Args:
        password (bytes): Contraseña en claro.
        salt (bytes): Salt asociada a la credencial.
        iterations (int): Iteraciones de estiramiento.
        key_length (int): Longitud en bytes de la clave resultante.
        hash_primitive (HashPrimitive): Hash interno de HMAC.

    Returns:
        bytes: Clave derivada de `key_length` bytes.

    """

    kdf = PBKDF2HMAC(
        algorithm=hash_primitive.algorithm(),
        length=key_length,
        salt=salt,
        iterations=iterations,
    )
    return kdf.derive(password)


def password_bytes(password: str) -> bytes:
    """Codifica la contraseña en UTF-8; los surrogates sueltos se conservan."""

    return password.encode("utf-8", "surrogatepass")
