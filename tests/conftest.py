"""Shared test configuration and fixtures."""

import os
from collections.abc import Iterator
from unittest.mock import patch

import pytest

import polymarket_gamma.core.config as config_module

_GAMMA_ENV_VARS = ("GAMMA_BASE_URL", "GAMMA_TIMEOUT_MS")


@pytest.fixture(autouse=True)
def _isolate_config() -> Iterator[None]:  # pyright: ignore[reportUnusedFunction]
    """Give every test a fresh settings singleton and a clean ``GAMMA_*`` environment.

    ``get_config()`` caches the loader for the whole process and the default
    ``settings.yaml`` reads ``${GAMMA_BASE_URL}`` and ``${GAMMA_TIMEOUT_MS}``,
    so a developer's shell would otherwise leak into the assertions.
    """
    cleaned = {k: v for k, v in os.environ.items() if k not in _GAMMA_ENV_VARS}
    with patch.dict(os.environ, cleaned, clear=True):
        config_module._config = None
        yield
        config_module._config = None
