"""Configuration: frozen Config resolved from FALLIBLE_* environment variables."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cache
import os

from dotenv import load_dotenv

from fallible.errors import ConfigurationError

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})

LOG_CAPTURED_FAULTS_ENV = "FALLIBLE_LOG_CAPTURED_FAULTS"
VALIDATE_CALLABLES_ENV = "FALLIBLE_VALIDATE_CALLABLES"


def _env_flag(name: str, *, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"Invalid value for {name}: {raw!r}",
        hint="Use 1/0, true/false, yes/no or on/off.",
    )


@dataclass(frozen=True)
class Config:
    """Immutable runtime switches for fallible.

    Example:
        config = Config.from_env()
        # FALLIBLE_VALIDATE_CALLABLES=1 turns on supplier signature checks
    """

    #: Emit a DEBUG record whenever ``of()`` captures a fault.
    log_captured_faults: bool = True
    #: Require suppliers to be zero-argument callables before invoking them.
    validate_callables: bool = False

    @classmethod
    def from_env(cls) -> Config:
        """Resolve a Config from the current environment."""
        return cls(
            log_captured_faults=_env_flag(LOG_CAPTURED_FAULTS_ENV, default=True),
            validate_callables=_env_flag(VALIDATE_CALLABLES_ENV, default=False),
        )


@cache
def active_config() -> Config:
    """Return the process-wide Config, resolved once.

    Project ``.env`` files are loaded on first resolution. Call
    ``active_config.cache_clear()`` to pick up environment changes.
    """
    load_dotenv()
    return Config.from_env()
