"""Pytest configuration and fixtures.

Provides environment isolation and configuration cache resets. All fixtures
here are autouse unless noted.
"""

from __future__ import annotations

import os

import pytest

from monad.config import get_config

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    monkeypatch.setattr("monad.config.load_dotenv", lambda *_args, **_kwargs: False)


@pytest.fixture(autouse=True)
def isolate_monad_env(monkeypatch):
    """Clear MONAD_* env vars and the cached config around each test."""
    for key in list(os.environ.keys()):
        if key.startswith("MONAD_"):
            monkeypatch.delenv(key, raising=False)
    get_config.cache_clear()
    yield
    get_config.cache_clear()


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast, isolated tests")
    config.addinivalue_line("markers", "allow_dotenv: let python-dotenv read .env files")
