# --------------------------------------------------------------
# File: hasher.py
# Description: Fachada orientada a objetos con parámetros fijados por instancia.
# --------------------------------------------------------------
"""`PasswordHasher` agrupa codificación y verificación con unas mismas Options."""

from __future__ import annotations

from pwcodec.encoder import encode_to_record
from pwcodec.models import DEFAULT_OPTIONS, Options
from pwcodec.verifier import verify_record


class PasswordHasher:
    """Codifica y verifica registros con unos parámetros fijos.

    Example:
        >>> ph = PasswordHasher(Options(iterations=10_000))
        >>> record = ph.hash("s3cret")
        >>> ph.verify(record, "s3cret")
        True

    """

    def __init__(self, options: Options | None = None) -> None:
        self.options = options or DEFAULT_OPTIONS

    @property
    def record_length(self) -> int:
        """Caracteres hexadecimales de cada registro generado."""

        return 2 * self.options.record_size

    def hash(self, password: str) -> str:
        """Codifica `password` con las Options de la instancia.

        Args:
            password (str): Contraseña en claro.

        Returns:
            str: Registro hexadecimal de `record_length` caracteres.

        """

        return encode_to_record(password, self.options)

    def verify(self, record: str, password: str) -> bool:
        """Verifica `password` contra `record`; lanza excepción si no coincide."""

        return verify_record(password, record, self.options)

    def __repr__(self) -> str:
        return f"PasswordHasher({self.options!r})"
