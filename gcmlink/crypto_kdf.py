# --------------------------------------------------------------
# File: crypto_kdf.py
# Description: Derivación de la clave AES-256 a partir de la contraseña compartida.
# --------------------------------------------------------------
"""Funciones de derivación de claves para el cifrado basado en contraseña."""

import hashlib

from gcmlink.constants import TEXT_ENCODING


def derive_key(password: str) -> bytes:
    """Deriva una clave AES-256 como SHA-256 de la contraseña en UTF-8.

    Es determinista y no usa sal: la misma contraseña produce siempre la misma
    clave. Un hash rápido no resiste ataques de fuerza bruta offline; para
    confidencialidad real debería sustituirse por un KDF lento (p. ej. Argon2id)
    junto con un marcador de versión en el token.

    Args:
        password (str): Contraseña compartida, incluida la cadena vacía.

    Returns:
        bytes: Resumen de 32 bytes utilizable como clave simétrica.

    """

    return hashlib.sha256(password.encode(TEXT_ENCODING)).digest()
