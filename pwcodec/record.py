# --------------------------------------------------------------
# File: record.py
# Description: Formato binario y hexadecimal del registro de credenciales.
# --------------------------------------------------------------
"""Empaquetado y análisis del registro `salt || etiqueta || clave`."""

from __future__ import annotations

import binascii

from pwcodec.exceptions import MalformedRecordError
from pwcodec.models import DEFAULT_OPTIONS, TAG_LENGTH, DecodedRecord, Options

__all__ = ["FORMAT_TAG", "pack_record", "unpack_record"]

# Marca de versión del esquema PBKDF2; no cambia en tiempo de ejecución.
FORMAT_TAG = b"pbkdf2"


def pack_record(salt: bytes, derived_key: bytes) -> str:
    """Concatena salt, etiqueta y clave derivada y lo codifica en hexadecimal."""

    return (salt + FORMAT_TAG + derived_key).hex()


def unpack_record(record: str, options: Options | None = None) -> DecodedRecord:
    """Separa un registro hexadecimal en sus tres campos.

    Args:
        record (str): Registro tal y como se almacenó.
        options (Options | None): Parámetros con los que se generó.

    Returns:
        DecodedRecord: Salt, etiqueta y clave derivada.

    Raises:
        MalformedRecordError: Hexadecimal inválido, longitud incorrecta o
        etiqueta distinta de `FORMAT_TAG`.

    """

    opts = options or DEFAULT_OPTIONS
    try:
        raw = binascii.unhexlify(record)
    except ValueError as exc:
        raise MalformedRecordError("record is not valid hex") from exc

    if len(raw) != opts.record_size:
        raise MalformedRecordError(
            f"record has {len(raw)} bytes, expected {opts.record_size}"
        )

    tag_end = opts.salt_length + TAG_LENGTH
    decoded = DecodedRecord(
        salt=raw[: opts.salt_length],
        tag=raw[opts.salt_length : tag_end],
        derived_key=raw[tag_end:],
    )
    if decoded.tag != FORMAT_TAG:
        raise MalformedRecordError("unknown format tag")
    return decoded
