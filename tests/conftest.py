"""Pytest configuration and fixtures.

Provides environment isolation, logging configuration and small call-recording
doubles. Fixtures marked autouse apply to every test unless opted out.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import os
from typing import Any

import pytest

from fallible.config import active_config

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class Recorder:
    """Callable double that records its arguments and returns a canned value.

    Use it wherever a callback must be observed: consumers, mappers,
    suppliers and fallbacks.
    """

    returns: Any = None
    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.returns

    @property
    def call_count(self) -> int:
        return len(self.calls)


@pytest.fixture
def recorder() -> type[Recorder]:
    """Return the Recorder class so tests can build one per callback."""
    return Recorder


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    ``fallible.config`` loads ``.env`` lazily on first resolution, so patching
    the name it binds is enough. Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    monkeypatch.setattr(
        "fallible.config.load_dotenv", lambda *_args, **_kwargs: False
    )


@pytest.fixture(autouse=True)
def reset_active_config():
    """Drop the cached Config so each test resolves from its own environment."""
    active_config.cache_clear()
    yield
    active_config.cache_clear()


@pytest.fixture(autouse=True)
def isolate_fallible_env(request, monkeypatch):
    """Clear FALLIBLE_* variables so each test starts from default Config.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("FALLIBLE_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("hypothesis").setLevel(logging.WARNING)
