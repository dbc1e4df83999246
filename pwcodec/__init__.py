# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del códec de contraseñas PBKDF2.
# --------------------------------------------------------------
"""Inicializa el paquete `pwcodec` y reexporta su API pública."""

from pwcodec.encoder import encode, encode_password, encode_to_record
from pwcodec.exceptions import MalformedRecordError, PasswordCodecError, PasswordMismatchError
from pwcodec.hasher import PasswordHasher
from pwcodec.models import DEFAULT_OPTIONS, HashPrimitive, Options
from pwcodec.record import FORMAT_TAG
from pwcodec.verifier import verify, verify_password, verify_record

__all__ = [
    "DEFAULT_OPTIONS",
    "FORMAT_TAG",
    "HashPrimitive",
    "MalformedRecordError",
    "Options",
    "PasswordCodecError",
    "PasswordHasher",
    "PasswordMismatchError",
    "encode",
    "encode_password",
    "encode_to_record",
    "verify",
    "verify_password",
    "verify_record",
]
