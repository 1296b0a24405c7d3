"""
Root Pytest Fixtures.

Shared fixtures available to all test types.
"""

import logging
from collections.abc import Generator

import pytest
import structlog

from buttondown_cli.core.config import get_app_config, get_settings


@pytest.fixture(autouse=True)
def _clear_config_cache() -> Generator[None, None, None]:
    """Clear lru_cache between tests so each test gets a fresh load."""
    get_settings.cache_clear()
    get_app_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_app_config.cache_clear()


@pytest.fixture(autouse=True)
def _no_ambient_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's real key out of the tests."""
    monkeypatch.delenv("BUTTONDOWN_API_KEY", raising=False)


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None, None, None]:
    """Drop handlers installed by setup_logging so they never outlive a CliRunner stream."""
    yield
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(logging.WARNING)
