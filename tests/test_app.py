# --------------------------------------------------------------
# File: test_app.py
# Description: Pruebas de la página Streamlit de registro y verificación.
# --------------------------------------------------------------

import json
from pathlib import Path

import pytest
import streamlit as st
from streamlit.testing.v1 import AppTest

from pwcodec import config as settings
from pwcodec import encode_password, verify_password

APP = str(Path(__file__).resolve().parents[1] / "app_streamlit" / "Home.py")


@pytest.fixture
def app() -> AppTest:
    """Arranca la página con la caché de recursos vacía."""
    st.cache_resource.clear()
    return AppTest.from_file(APP, default_timeout=30).run()


def test_encode_tab_generates_verifiable_record(app):
    """El registro mostrado verifica la passphrase introducida.

    Args:
        app (AppTest): Página en ejecución.

    Returns:
        None: Las aserciones validan el registro generado.
    """
    app.text_input(key="reg_pass").input("s3cret").run()
    app.button(key="btn_encode").click().run()
    record = app.code[0].value
    assert len(record) == 108
    assert verify_password("s3cret", record)


def test_verify_tab_outcomes(app):
    """La pestaña de verificación distingue éxito, fallo y formato inválido."""
    record = encode_password("s3cret")

    app.text_input(key="ver_record").input(record)
    app.text_input(key="ver_pass").input("s3cret")
    app.button(key="btn_verify").click().run()
    assert app.success[0].value == "Passphrase correcta."

    app.text_input(key="ver_pass").input("wrong")
    app.button(key="btn_verify").click().run()
    assert app.error[0].value == "Passphrase incorrecta."

    app.text_input(key="ver_record").input(record[:-1])
    app.button(key="btn_verify").click().run()
    assert app.error[0].value == "El registro no tiene un formato válido."

    (log_path,) = [Path(p) for p in settings.LOG_FILES]
    events = [json.loads(line)["event"] for line in log_path.read_text(encoding="utf-8").splitlines()]
    assert events == ["password_mismatch", "malformed_record"]
