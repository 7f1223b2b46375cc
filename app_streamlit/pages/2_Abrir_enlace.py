# --------------------------------------------------------------
# File: 2_Abrir_enlace.py
# Description: Descifra el token del fragmento de un enlace desde Streamlit.
# --------------------------------------------------------------

import streamlit as st

from gcmlink.errors import DecryptionError
from gcmlink.share_link import open_link

# Presenta el título de la sección orientada al descifrado.
st.title("🔓 Abrir enlace")

link = st.text_input("Enlace o token")
password = st.text_input("Contraseña", type="password")

if st.button("Descifrar", disabled=not link):
    try:
        plaintext = open_link(link, password)
    except DecryptionError:
        # SECURITY: un único mensaje para contraseña errónea o token alterado.
        st.error("No se ha podido descifrar: contraseña incorrecta o enlace dañado.")
        st.stop()

    st.success("Contenido descifrado.")
    st.code(plaintext)
