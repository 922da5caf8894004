"""Internal validation helpers shared by the Result variants.

These helpers centralize the presence checks every constructor and
combinator performs, so the error type and messages stay consistent.
"""

from __future__ import annotations

import inspect
import typing

from fallible.errors import InvalidArgumentError


def _require(
    *,
    condition: bool,
    message: str,
    exc: type[Exception] = InvalidArgumentError,
    field_name: str | None = None,
) -> None:
    """Centralized validation with optional field context for clearer errors."""
    if not condition:
        if field_name:
            raise exc(f"{field_name}: {message}")
        raise exc(message)


def _require_present(value: object, message: str) -> None:
    """Reject ``None``, the absence marker at every input boundary."""
    _require(condition=value is not None, message=message)


def _require_callable(func: typing.Any, message: str) -> None:
    """Reject a missing or non-callable callback with the caller's message."""
    _require_present(func, message)
    _require(
        condition=callable(func),
        message=f"must be callable, got {type(func).__name__}",
        field_name=message.removesuffix(" cannot be None"),
    )


def _require_zero_arg_callable(func: typing.Any, field_name: str) -> None:
    """Validate callable takes no arguments for predictable execution."""
    # Validate signature if introspectable
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        # Some builtins have no introspectable signature; accept them
        return
    has_required_params = any(
        p.default is p.empty
        and p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD, p.KEYWORD_ONLY)
        for p in sig.parameters.values()
    )
    _require(
        condition=not has_required_params,
        message="must be a zero-argument callable",
        field_name=field_name,
    )
