# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Cifrado y descifrado AES-256-GCM de textos con contraseña compartida.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico que producen un token base64 autocontenido."""

import os
from typing import Callable

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from loguru import logger

from gcmlink.constants import NONCE_SIZE, TEXT_ENCODING
from gcmlink.crypto_kdf import derive_key
from gcmlink.errors import DecryptionError, EncryptionError
from gcmlink.models import AesGcmResult

# Fuente de aleatoriedad: recibe un número de bytes y los devuelve.
RandomSource = Callable[[int], bytes]


def aes_gcm_encrypt(
    plaintext: str, password: str, *, random_source: RandomSource = os.urandom
) -> str:
    """Cifra un texto con AES-256-GCM usando una clave derivada de la contraseña.

    Cada llamada genera un nonce nuevo de 96 bits, por lo que cifrar dos veces
    el mismo texto produce tokens distintos. No hay datos asociados.

    Args:
        plaintext (str): Texto en claro, se codifica en UTF-8.
        password (str): Contraseña compartida con quien descifrará.
        random_source (RandomSource): Generador criptográficamente seguro;
            solo debe sustituirse en pruebas.

    Returns:
        str: Token base64 de ``nonce ‖ ciphertext ‖ tag``.

    Raises:
        EncryptionError: Si la fuente de azar falla o no da 12 bytes, o si
            la primitiva rechaza la contraseña, la clave o los datos.

    """

    try:
        nonce = random_source(NONCE_SIZE)
    except (OSError, NotImplementedError, ValueError, TypeError) as exc:
        raise EncryptionError(f"random source failed: {exc}") from exc
    if not isinstance(nonce, bytes) or len(nonce) != NONCE_SIZE:
        raise EncryptionError(f"random source must return {NONCE_SIZE} bytes")

    try:
        key = derive_key(password)
        data = plaintext.encode(TEXT_ENCODING)
        sealed = AESGCM(key).encrypt(nonce, data, None)
    except (ValueError, TypeError, OverflowError) as exc:
        raise EncryptionError(f"AES-GCM encryption failed: {exc}") from exc

    token = AesGcmResult.from_sealed(nonce, sealed).to_token()
    logger.debug("AES-GCM-256 cifrado: claro={} bytes token={} caracteres", len(data), len(token))
    return token


def aes_gcm_decrypt(token: str, password: str) -> str:
    """Descifra un token generado por `aes_gcm_encrypt`.

    El resultado es todo o nada: o se devuelve el texto original completo o se
    lanza `DecryptionError`, sin distinguir la causa.

    Args:
        token (str): Token base64 de ``nonce ‖ ciphertext ‖ tag``.
        password (str): Contraseña con la que se cifró.

    Returns:
        str: Texto original.

    Raises:
        DecryptionError: Contraseña incorrecta, token alterado, truncado,
            base64 inválido o contenido que no es UTF-8.

    """

    try:
        parts = AesGcmResult.from_token(token)
        plain = AESGCM(derive_key(password)).decrypt(parts.nonce, parts.sealed, None)
        text = plain.decode(TEXT_ENCODING)
    except (InvalidTag, ValueError, TypeError):
        # Misma señal para cualquier causa: no se encadena la excepción original.
        logger.warning("AES-GCM-256 descifrado rechazado")
        raise DecryptionError() from None

    logger.debug("AES-GCM-256 descifrado: claro={} bytes", len(plain))
    return text
