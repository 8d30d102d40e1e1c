import logging
from collections.abc import Generator

import pytest

# Environment variables that may affect test behavior - clear before each test
_SUPAVITE_ENV_VARS = [
    "SUPAVITE_EXECUTOR",
    "SUPAVITE_EXECUTABLE_PATH",
    "SUPAVITE_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_supavite_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear Supavite-related environment variables before each test for isolation."""
    for var in _SUPAVITE_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture(autouse=True)
def restore_supavite_logger() -> Generator[None, None, None]:
    """Undo handler and level changes made to the ``supavite`` logger by the CLI."""
    logger = logging.getLogger("supavite")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
