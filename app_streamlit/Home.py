# --------------------------------------------------------------
# File: Home.py
# Description: Página Streamlit para generar y comprobar registros de contraseña.
# --------------------------------------------------------------

import streamlit as st

from pwcodec import MalformedRecordError, PasswordMismatchError, encode_password, verify_password
from pwcodec.log import configure_from_env


@st.cache_resource
def _logger():
    return configure_from_env()


# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="pwcodec", page_icon="🔐", layout="centered")

st.title("🔐 pwcodec")
st.write("Registros PBKDF2-HMAC-SHA512 con salt alfanumérica, en hexadecimal.")

tab_reg, tab_ver = st.tabs(["Registro", "Verificación"])

# Genera un registro nuevo para la passphrase introducida.
with tab_reg:
    passphrase = st.text_input("Passphrase", type="password", key="reg_pass")

    if st.button("Generar registro", disabled=not passphrase, key="btn_encode"):
        record = encode_password(passphrase)
        st.success("Registro generado. Guárdalo tal cual junto a la cuenta.")
        st.code(record)

# Comprueba una passphrase contra un registro almacenado.
with tab_ver:
    record_v = st.text_input("Registro", key="ver_record")
    passphrase_v = st.text_input("Passphrase", type="password", key="ver_pass")

    if st.button("Verificar", key="btn_verify"):
        try:
            verify_password(passphrase_v, record_v.strip())
        except MalformedRecordError as exc:
            _logger().warning("malformed_record", reason=str(exc))
            st.error("El registro no tiene un formato válido.")
        except PasswordMismatchError:
            _logger().info("password_mismatch")
            st.error("Passphrase incorrecta.")
        else:
            st.success("Passphrase correcta.")
