# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones del cifrado basado en contraseña.
# --------------------------------------------------------------
"""Excepciones públicas que señalan fallos de cifrado y descifrado."""


class GcmLinkError(Exception):
    """Error base de todas las operaciones de `gcmlink`."""


class EncryptionError(GcmLinkError):
    """La primitiva AES-GCM no pudo inicializarse o invocarse.

    Indica un defecto de programación o de entorno; nunca se reintenta.
    """


class DecryptionError(GcmLinkError):
    """El token no pudo descifrarse con la contraseña indicada.

    Agrupa tag inválido, base64 corrupto, token truncado y UTF-8 inválido en
    una única señal para no ofrecer un oráculo al atacante.
    """

    def __init__(self, message: str = "Decrypt failed") -> None:
        super().__init__(message)
