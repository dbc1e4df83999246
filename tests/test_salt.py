# --------------------------------------------------------------
# File: test_salt.py
# Description: Pruebas del generador de salts alfanuméricas.
# --------------------------------------------------------------

import pytest

from pwcodec import salt as salt_module
from pwcodec.salt import ALPHABET, generate_salt


@pytest.mark.parametrize("length", [1, 16, 255, 256])
def test_salt_length_and_alphabet(length):
    """Comprueba longitud y alfabeto de la salt generada.

    Args:
        length (int): Longitud solicitada.

    Returns:
        None: Las aserciones validan tamaño y símbolos.
    """
    salt = generate_salt(length)
    assert len(salt) == length
    assert all(byte in ALPHABET for byte in salt)


@pytest.mark.parametrize("length", [0, -1, 257])
def test_salt_rejects_out_of_range_length(length):
    """Una longitud fuera de 1..256 es un error del llamante."""
    with pytest.raises(ValueError):
        generate_salt(length)


def test_salt_maps_bytes_modulo_alphabet(monkeypatch):
    """Verifica la proyección `ALPHABET[byte % 62]`, sesgo incluido.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para fijar la entropía.

    Returns:
        None: Las aserciones comparan con la salida esperada.
    """
    monkeypatch.setattr(salt_module.os, "urandom", lambda n: bytes([0, 61, 62, 255, 200])[:n])
    # 255 % 62 == 7 y 200 % 62 == 14
    assert generate_salt(5) == b"0z07E"


def test_salt_uniqueness():
    """Evalúa que las salts generadas no se repitan en el muestreo."""
    salts = {generate_salt(16) for _ in range(200)}
    assert len(salts) == 200


def test_salt_entropy_failure_propagates(monkeypatch):
    """Un fallo del CSPRNG no se degrada a otra fuente."""

    def broken(_n):
        raise OSError("no entropy")

    monkeypatch.setattr(salt_module.os, "urandom", broken)
    with pytest.raises(OSError):
        generate_salt(16)
