"""Shared fixtures."""

import pytest

from wslister.log import logger


@pytest.fixture(autouse=True)
def reset_logger():
    """The CLI changes the module logger level; put it back."""
    logger.set_level("info")
    yield
    logger.set_level("info")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("WSLISTER_WORKSPACE", raising=False)
