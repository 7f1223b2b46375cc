# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar la configuración y fijar el azar.
# --------------------------------------------------------------

import importlib
from typing import Callable, Iterator

import pytest


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch) -> Iterator[None]:
    """Fija LINK_BASE_URL y desactiva el log a fichero recargando gcmlink.config.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    monkeypatch.setenv("LINK_BASE_URL", "localhost:3000")
    monkeypatch.setenv("LOG_FILE", "")

    import gcmlink.config as config_module

    importlib.reload(config_module)

    yield


@pytest.fixture
def fixed_random() -> Callable[[int], bytes]:
    """Fuente determinista que sustituye a os.urandom en las pruebas.

    Returns:
        Callable[[int], bytes]: Devuelve siempre los bytes 0, 1, 2, ... n-1.
    """
    return lambda n: bytes(range(n))


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Retira los sinks añadidos por configure_logging al terminar cada test.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    yield

    from loguru import logger

    logger.remove()
    logger.disable("gcmlink")
