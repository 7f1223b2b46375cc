# --------------------------------------------------------------
# File: constants.py
# Description: Tamaños fijos del formato de token AES-256-GCM.
# --------------------------------------------------------------
"""Constantes criptográficas compartidas por el paquete."""

# AES-256-GCM
KEY_SIZE = 32
NONCE_SIZE = 12
TAG_SIZE = 16

TEXT_ENCODING = "utf-8"
