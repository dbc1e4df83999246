# --------------------------------------------------------------
# File: exceptions.py
# Description: Jerarquía de errores de verificación de credenciales.
# --------------------------------------------------------------
"""Errores que distinguen un registro corrupto de una contraseña incorrecta."""

__all__ = ["PasswordCodecError", "MalformedRecordError", "PasswordMismatchError"]


class PasswordCodecError(Exception):
    """Base común de los fallos de verificación."""


class MalformedRecordError(PasswordCodecError):
    """El texto almacenado no es un registro válido para este esquema.

    Se produce por hexadecimal inválido, longitud incorrecta o etiqueta de
    formato distinta. Nunca indica una contraseña errónea.
    """


class PasswordMismatchError(PasswordCodecError):
    """El registro es válido pero la clave re-derivada no coincide."""
