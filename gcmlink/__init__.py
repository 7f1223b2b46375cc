# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de utilidades criptográficas del paquete gcmlink.
# --------------------------------------------------------------
"""Inicializa el paquete `gcmlink` y documenta sus módulos principales."""

from loguru import logger

# Como librería no emitimos trazas hasta que la aplicación llame a configure_logging().
logger.disable("gcmlink")

__all__ = [
    "config",
    "constants",
    "crypto_kdf",
    "crypto_sym",
    "demo",
    "errors",
    "log",
    "models",
    "share_link",
]
