# --------------------------------------------------------------
# File: models.py
# Description: Modelos de parámetros y registros del códec de contraseñas.
# --------------------------------------------------------------
"""Modelos Pydantic que describen los parámetros y el registro persistido."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Type

from cryptography.hazmat.primitives import hashes
from pydantic import BaseModel, ConfigDict, Field

# Longitud fija de la etiqueta de formato incrustada en cada registro.
TAG_LENGTH = 6


class HashPrimitive(str, Enum):
    """Primitiva hash usada dentro de PBKDF2-HMAC."""

    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"
    SHA3_256 = "sha3_256"
    SHA3_512 = "sha3_512"

    def algorithm(self) -> hashes.HashAlgorithm:
        """Devuelve una instancia nueva del algoritmo de `cryptography`."""

        return _ALGORITHMS[self]()


_ALGORITHMS: Dict[HashPrimitive, Type[hashes.HashAlgorithm]] = {
    HashPrimitive.SHA256: hashes.SHA256,
    HashPrimitive.SHA384: hashes.SHA384,
    HashPrimitive.SHA512: hashes.SHA512,
    HashPrimitive.SHA3_256: hashes.SHA3_256,
    HashPrimitive.SHA3_512: hashes.SHA3_512,
}


class Options(BaseModel):
    """Parámetros de coste y tamaño de una derivación.

    Attributes:
        salt_length (int): Bytes de salt, entre 1 y 256.
        iterations (int): Iteraciones de PBKDF2.
        key_length (int): Bytes de la clave derivada.
        hash_primitive (HashPrimitive): Hash interno de HMAC.

    """

    model_config = ConfigDict(frozen=True)

    salt_length: int = Field(default=16, gt=0, le=256)
    iterations: int = Field(default=32, gt=0)
    key_length: int = Field(default=32, gt=0)
    hash_primitive: HashPrimitive = HashPrimitive.SHA512

    @property
    def record_size(self) -> int:
        """Bytes de un registro decodificado: salt, etiqueta y clave."""

        return self.salt_length + TAG_LENGTH + self.key_length


DEFAULT_OPTIONS = Options()


class DecodedRecord(BaseModel):
    """Campos de un registro ya separado.

    Attributes:
        salt (bytes): Salt alfanumérica de la credencial.
        tag (bytes): Etiqueta de formato.
        derived_key (bytes): Clave derivada almacenada.

    """

    model_config = ConfigDict(frozen=True)

    salt: bytes
    tag: bytes
    derived_key: bytes
