# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para parámetros rápidos y logging aislado.
# --------------------------------------------------------------

from typing import Iterator

import pytest

from pwcodec import config as settings
from pwcodec.models import Options


@pytest.fixture(autouse=True)
def _isolate_logging(tmp_path, monkeypatch) -> Iterator[None]:
    """Redirige el logging configurado por entorno a un fichero temporal.

    Args:
        tmp_path (Path): Carpeta temporal proporcionada por pytest.
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar la configuración.

    Returns:
        Iterator[None]: Control del fixture autouse durante cada test.
    """
    monkeypatch.setattr(settings, "LOG_MODE", "production")
    monkeypatch.setattr(settings, "LOG_FILES", [str(tmp_path / "logs" / "pwcodec.log")])
    monkeypatch.setattr(settings, "LOG_ROLL_FILE", "")
    monkeypatch.setattr(settings, "LOG_SAMPLING", "")
    yield


@pytest.fixture
def fast_options() -> Options:
    """Parámetros no por defecto con un coste bajo para las pruebas."""
    return Options(salt_length=24, iterations=8, key_length=48)
