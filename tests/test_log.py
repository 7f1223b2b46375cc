# --------------------------------------------------------------
# File: test_log.py
# Description: Pruebas de la configuración de trazas con Loguru.
# --------------------------------------------------------------

import pytest

from gcmlink.crypto_sym import aes_gcm_decrypt, aes_gcm_encrypt
from gcmlink.errors import DecryptionError
from gcmlink.log import configure_logging


def test_logs_never_contain_secrets(capsys):
    """Comprueba que las trazas informen del resultado sin revelar secretos.

    Args:
        capsys (pytest.CaptureFixture): Captura de la salida de error.

    Returns:
        None: Las aserciones inspeccionan stderr.
    """
    configure_logging("DEBUG")
    token = aes_gcm_encrypt("texto-muy-secreto", "clave-secreta")
    with pytest.raises(DecryptionError):
        aes_gcm_decrypt(token, "otra-clave")

    err = capsys.readouterr().err
    assert "AES-GCM-256 cifrado" in err
    assert "descifrado rechazado" in err
    for secret in ("texto-muy-secreto", "clave-secreta", "otra-clave", token):
        assert secret not in err


def test_library_is_silent_until_configured(capsys):
    """Sin configure_logging el paquete no emite trazas.

    Args:
        capsys (pytest.CaptureFixture): Captura de la salida de error.

    Returns:
        None: La salida de error debe quedar vacía.
    """
    aes_gcm_encrypt("msg", "pw")
    assert capsys.readouterr().err == ""
