"""Exception hierarchy for fallible."""

from __future__ import annotations


class FallibleError(Exception):
    """Base exception for all fallible errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class InvalidArgumentError(FallibleError, ValueError):
    """A required payload or callback was absent or unusable."""


class NoSuchElementError(FallibleError, LookupError):
    """A Result was unwrapped as the variant it is not."""


class NoValuePresentError(FallibleError):
    """Failure payload synthesized when a value is absent.

    Carried by the failures built by ``of_nullable(value)``, ``of_optional``
    and ``of`` when there is no value to wrap.
    """


class ConfigurationError(FallibleError):
    """Configuration resolution from the environment failed."""
