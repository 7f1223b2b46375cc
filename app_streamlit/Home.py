# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen del flujo.
# --------------------------------------------------------------

import streamlit as st

from gcmlink.log import configure_logging

configure_logging()

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="GCM Link", page_icon="🔐", layout="centered")

# Presenta el nombre del producto y su propósito general.
st.title("🔐 GCM Link")
st.write(
    "Cifra un texto con AES-256-GCM y compártelo en el fragmento (#) de un enlace. "
    "El fragmento nunca llega al servidor: solo quien conozca la contraseña puede leerlo."
)
st.info("Ve a **Crear enlace** para cifrar un texto o a **Abrir enlace** para descifrarlo.")
st.caption(
    "La clave se deriva con un único SHA-256 de la contraseña: sirve para ofuscación "
    "casual, no resiste fuerza bruta offline contra contraseñas débiles."
)
