# --------------------------------------------------------------
# File: test_hasher.py
# Description: Pruebas de la fachada PasswordHasher.
# --------------------------------------------------------------

import pytest

from pwcodec import DEFAULT_OPTIONS, MalformedRecordError, PasswordHasher, PasswordMismatchError, verify_password


def test_hasher_defaults_match_module_api():
    """Sin Options, PasswordHasher genera registros del esquema por defecto.

    Returns:
        None: Las aserciones cruzan la fachada con la API funcional.
    """
    ph = PasswordHasher()
    assert ph.options == DEFAULT_OPTIONS
    assert ph.record_length == 108
    record = ph.hash("123456")
    assert verify_password("123456", record)


def test_hasher_with_custom_options(fast_options):
    """Los parámetros de la instancia se usan al codificar y verificar."""
    ph = PasswordHasher(fast_options)
    record = ph.hash("s3cret")
    assert len(record) == ph.record_length == 2 * (24 + 6 + 48)
    assert ph.verify(record, "s3cret") is True
    with pytest.raises(PasswordMismatchError):
        ph.verify(record, "S3cret")
    # con los valores por defecto el mismo registro no tiene formato válido
    with pytest.raises(MalformedRecordError):
        PasswordHasher().verify(record, "s3cret")


def test_hasher_repr(fast_options):
    """La representación incluye los parámetros."""
    assert "iterations=8" in repr(PasswordHasher(fast_options))


def test_hasher_public_methods_documented():
    """hash y verify llevan docstring."""
    assert PasswordHasher.hash.__doc__
    assert PasswordHasher.verify.__doc__
