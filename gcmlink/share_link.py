# --------------------------------------------------------------
# File: share_link.py
# Description: Transporte de tokens cifrados en el fragmento (#) de una URL.
# --------------------------------------------------------------
"""Construcción y lectura de enlaces cuyo fragmento contiene el token cifrado.

El fragmento de una URL no se envía al servidor, así que el token solo se
descifra en el cliente que conoce la contraseña.
"""

import os
from typing import Optional
from urllib.parse import quote, unquote

from gcmlink import config
from gcmlink.crypto_sym import RandomSource, aes_gcm_decrypt, aes_gcm_encrypt
from gcmlink.errors import DecryptionError

# Caracteres que `encodeURI` deja sin escapar en navegadores.
_URI_SAFE = ";,/?:@&=+$-_.!~*'()#"


def encode_fragment(token: str) -> str:
    """Escapa el token para incluirlo literalmente en una URL."""

    return quote(token, safe=_URI_SAFE)


def build_share_link(token: str, base_url: Optional[str] = None) -> str:
    """Compone ``{base}/#{token}``.

    Args:
        token (str): Token base64 devuelto por `aes_gcm_encrypt`.
        base_url (Optional[str]): Origen del enlace; por defecto `LINK_BASE_URL`.

    Returns:
        str: Enlace listo para compartir.
    """

    base = (base_url if base_url is not None else config.LINK_BASE_URL).rstrip("/")
    return f"{base}/#{encode_fragment(token)}"


def extract_token(link: str) -> str:
    """Recupera el token de un enlace, o acepta directamente un token suelto."""

    _, sep, fragment = link.partition("#")
    token = unquote(fragment if sep else link).strip()
    if not token:
        raise DecryptionError()
    return token


def seal_to_link(
    plaintext: str,
    password: str,
    *,
    base_url: Optional[str] = None,
    random_source: RandomSource = os.urandom,
) -> str:
    """Cifra el texto y devuelve directamente el enlace compartible."""

    token = aes_gcm_encrypt(plaintext, password, random_source=random_source)
    return build_share_link(token, base_url)


def open_link(link: str, password: str) -> str:
    """Descifra el token contenido en un enlace generado por `seal_to_link`."""

    return aes_gcm_decrypt(extract_token(link), password)
