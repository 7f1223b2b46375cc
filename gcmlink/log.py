# --------------------------------------------------------------
# File: log.py
# Description: Configuración de trazas con Loguru para la aplicación.
# --------------------------------------------------------------
"""
Envoltorio mínimo sobre Loguru para que cada módulo solo necesite:

    from loguru import logger
"""

import sys
from typing import Optional

from loguru import logger

from gcmlink import config


def configure_logging(level: Optional[str] = None) -> None:
    """Sustituye los sinks por defecto y activa las trazas del paquete.

    Args:
        level (Optional[str]): Nivel mínimo; si falta se usa `LOG_LEVEL`.
    """

    logger.remove()
    logger.add(
        sys.stderr,
        level=level or config.LOG_LEVEL,
        diagnose=False,  # nunca volcar variables locales (claves, contraseñas)
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> "
               "| <level>{level: <8}</level> "
               "| <cyan>{name}</cyan>:<cyan>{function}</cyan> "
               "- <level>{message}</level>",
    )

    if config.LOG_FILE:
        logger.add(
            config.LOG_FILE,
            rotation="00:00",
            retention="7 days",
            level="DEBUG",
            diagnose=False,
            backtrace=False,
        )

    logger.enable("gcmlink")
