# --------------------------------------------------------------
# File: 1_Crear_enlace.py
# Description: Cifra un texto y genera el enlace compartible desde Streamlit.
# --------------------------------------------------------------

import streamlit as st

from gcmlink import config
from gcmlink.errors import EncryptionError
from gcmlink.share_link import seal_to_link

# Presenta el título de la sección dedicada al cifrado.
st.title("🔗 Crear enlace")

plaintext = st.text_area("Texto a cifrar")
password = st.text_input(
    "Contraseña compartida",
    type="password",
    help="Se admite cualquier contraseña, incluida la vacía; su robustez es responsabilidad de quien la elige.",
)
base_url = st.text_input("Origen del enlace", value=config.LINK_BASE_URL)

if st.button("Cifrar con AES-GCM"):
    try:
        link = seal_to_link(plaintext, password, base_url=base_url)
    except EncryptionError as exc:
        st.error(f"No se ha podido cifrar: {exc}")
        st.stop()

    st.success("Enlace generado. Comparte la contraseña por otro canal.")
    st.code(link)
