"""Result: a Success or a Failure, composed without exceptions as control flow.

A ``Result[T, E]`` is exactly one of two immutable variants:

- ``Success`` wraps a computed value of type ``T``.
- ``Failure`` wraps a failure payload of type ``E``. The payload can be any
  object (an exception, an error code, a dataclass); the container never
  interprets it.

Neither variant holds ``None``. Results are built with the free-standing
constructors (``success``, ``failure``, ``of``, ``of_nullable``,
``of_optional``) and transformed with combinators that dispatch on the
variant and always return a new Result or a plain value.

Usage:
    def parse_port(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return failure(f"not a number: {raw!r}")
        return success(int(raw))

    port = parse_port("8080").map(lambda p: p + 1).get_or_else(lambda: 80)

    match of(lambda: load_settings()):
        case Success(settings):
            apply(settings)
        case Failure(error):
            report(error)

Unwrapping policy:
    ``get()`` on a Failure and ``get_error()`` on a Success raise
    ``NoSuchElementError``. The captured failure payload is never re-raised;
    when it is an exception it is attached as ``__cause__`` for diagnostics.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, Any, Final, Generic, TypeVar, overload

from fallible._validation import (
    _require,
    _require_callable,
    _require_present,
    _require_zero_arg_callable,
)
from fallible.config import active_config
from fallible.errors import NoSuchElementError, NoValuePresentError

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")
F = TypeVar("F")

logger = logging.getLogger(__name__)

_MISSING: Final = object()

_VALUE_CONSUMER = "the value consumer cannot be None"
_ERROR_CONSUMER = "the error consumer cannot be None"
_VALUE_MAPPER = "the value mapper cannot be None"
_VALUE_FLAT_MAPPER = "the value flat-mapper cannot be None"
_ERROR_MAPPER = "the error mapper cannot be None"
_FALLBACK = "the fallback method cannot be None"
_VALUE_SUPPLIER = "the value supplier cannot be None"
_ERROR_SUPPLIER = "the error supplier cannot be None"
_SUPPLIER = "the supplier cannot be None"


def _require_supplier(supplier: Any, message: str) -> None:
    _require_callable(supplier, message)
    if active_config().validate_callables:
        _require_zero_arg_callable(supplier, message.removesuffix(" cannot be None"))


def _require_result(candidate: object, producer: str) -> None:
    _require(
        condition=isinstance(candidate, Result),
        message=f"must return a Result, got {type(candidate).__name__}",
        exc=TypeError,
        field_name=producer,
    )


class Result(abc.ABC, Generic[T, E]):
    """Either a ``Success`` holding a value or a ``Failure`` holding an error.

    Subclassed only by ``Success`` and ``Failure``. Every callback argument is
    validated before dispatch on both variants: a missing callback raises
    ``InvalidArgumentError`` even when the variant would not call it.
    Exceptions raised by callbacks propagate unmodified.

    Results compare by variant and payload. Hashing hashes the payload, so
    ``hash()`` raises ``TypeError`` for an unhashable payload (a list, a
    dict) even though equality still works.
    """

    __slots__ = ()

    @abc.abstractmethod
    def is_ok(self) -> bool:
        """Return True iff this is a Success."""

    @abc.abstractmethod
    def is_error(self) -> bool:
        """Return True iff this is a Failure."""

    @abc.abstractmethod
    def if_ok(self, consumer: Callable[[T], object]) -> None:
        """Call ``consumer`` once with the value of a Success; no-op on Failure."""

    @abc.abstractmethod
    def if_error(self, consumer: Callable[[E], object]) -> None:
        """Call ``consumer`` once with the payload of a Failure; no-op on Success."""

    @abc.abstractmethod
    def map(self, mapper: Callable[[T], U]) -> Result[U, E]:
        """Transform the value of a Success.

        Args:
            mapper: Applied exactly once to the wrapped value. Must not
                return ``None``.

        Returns:
            A new Success wrapping the mapped value, or an equal Failure
            when this is a Failure (``mapper`` is not called).
        """

    @abc.abstractmethod
    def flat_map(self, mapper: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain a Result-returning computation onto a Success.

        The Result returned by ``mapper`` is passed through as is. On a
        Failure, ``mapper`` is not called and an equal Failure is returned.

        Raises:
            TypeError: If ``mapper`` returns something other than a Result.
        """

    @abc.abstractmethod
    def map_error(self, mapper: Callable[[E], F]) -> Result[T, F]:
        """Transform the payload of a Failure; a Success is returned unchanged."""

    @abc.abstractmethod
    def switch_if_error(self, fallback: Callable[[E], Result[T, E]]) -> Result[T, E]:
        """Recover from a Failure with another Result.

        ``fallback`` receives the failure payload and its Result is returned
        verbatim, so recovery can itself fail. A Success is returned as is.
        """

    @abc.abstractmethod
    def get(self) -> T:
        """Return the value of a Success.

        Raises:
            NoSuchElementError: On a Failure ("result is an error").
        """

    @abc.abstractmethod
    def get_or_else(self, supplier: Callable[[], T]) -> T:
        """Return the value of a Success, or call ``supplier`` once on a Failure."""

    @abc.abstractmethod
    def get_error(self) -> E:
        """Return the payload of a Failure.

        Raises:
            NoSuchElementError: On a Success ("result contains a value: ...").
        """


@dataclass(frozen=True, slots=True)
class Success(Result[T, E]):
    """A successful result holding a non-None value."""

    value: T

    def __post_init__(self) -> None:
        _require_present(self.value, "a success value cannot be None")

    def __str__(self) -> str:
        return f"Success{{value={self.value}}}"

    def is_ok(self) -> bool:
        return True

    def is_error(self) -> bool:
        return False

    def if_ok(self, consumer: Callable[[T], object]) -> None:
        _require_callable(consumer, _VALUE_CONSUMER)
        consumer(self.value)

    def if_error(self, consumer: Callable[[E], object]) -> None:
        _require_callable(consumer, _ERROR_CONSUMER)

    def map(self, mapper: Callable[[T], U]) -> Result[U, E]:
        _require_callable(mapper, _VALUE_MAPPER)
        return Success(mapper(self.value))

    def flat_map(self, mapper: Callable[[T], Result[U, E]]) -> Result[U, E]:
        _require_callable(mapper, _VALUE_FLAT_MAPPER)
        mapped = mapper(self.value)
        _require_result(mapped, "the value flat-mapper")
        return mapped

    def map_error(self, mapper: Callable[[E], F]) -> Result[T, F]:
        _require_callable(mapper, _ERROR_MAPPER)
        return Success(self.value)

    def switch_if_error(self, fallback: Callable[[E], Result[T, E]]) -> Result[T, E]:
        _require_callable(fallback, _FALLBACK)
        return self

    def get(self) -> T:
        return self.value

    def get_or_else(self, supplier: Callable[[], T]) -> T:
        _require_callable(supplier, _VALUE_SUPPLIER)
        return self.value

    def get_error(self) -> E:
        raise NoSuchElementError(
            f"result contains a value: {self.value}",
            hint="Check is_error() first, or use if_error().",
        )


@dataclass(frozen=True, slots=True)
class Failure(Result[T, E]):
    """A failed result holding a non-None error payload."""

    error: E

    def __post_init__(self) -> None:
        _require_present(self.error, "a failure error cannot be None")

    def __str__(self) -> str:
        return f"Failure{{error={self.error}}}"

    def is_ok(self) -> bool:
        return False

    def is_error(self) -> bool:
        return True

    def if_ok(self, consumer: Callable[[T], object]) -> None:
        _require_callable(consumer, _VALUE_CONSUMER)

    def if_error(self, consumer: Callable[[E], object]) -> None:
        _require_callable(consumer, _ERROR_CONSUMER)
        consumer(self.error)

    def map(self, mapper: Callable[[T], U]) -> Result[U, E]:
        _require_callable(mapper, _VALUE_MAPPER)
        return Failure(self.error)

    def flat_map(self, mapper: Callable[[T], Result[U, E]]) -> Result[U, E]:
        _require_callable(mapper, _VALUE_FLAT_MAPPER)
        return Failure(self.error)

    def map_error(self, mapper: Callable[[E], F]) -> Result[T, F]:
        _require_callable(mapper, _ERROR_MAPPER)
        return Failure(mapper(self.error))

    def switch_if_error(self, fallback: Callable[[E], Result[T, E]]) -> Result[T, E]:
        _require_callable(fallback, _FALLBACK)
        recovered = fallback(self.error)
        _require_result(recovered, "the fallback method")
        return recovered

    def get(self) -> T:
        cause = self.error if isinstance(self.error, BaseException) else None
        raise NoSuchElementError(
            "result is an error",
            hint="Check is_ok() first, or use get_or_else().",
        ) from cause

    def get_or_else(self, supplier: Callable[[], T]) -> T:
        _require_supplier(supplier, _VALUE_SUPPLIER)
        return supplier()

    def get_error(self) -> E:
        return self.error


# --- Constructors ---


def success(value: T) -> Result[T, Any]:
    """Wrap ``value`` in a Success.

    Raises:
        InvalidArgumentError: If ``value`` is None.
    """
    return Success(value)


def failure(error: E) -> Result[Any, E]:
    """Wrap ``error`` in a Failure.

    Raises:
        InvalidArgumentError: If ``error`` is None.
    """
    return Failure(error)


def of(supplier: Callable[[], T | None]) -> Result[T, Exception]:
    """Run ``supplier`` once and capture its outcome as a Result.

    This is the only place where a raised exception becomes a Failure. Any
    ``Exception`` raised by the supplier is captured; ``BaseException``
    subclasses such as ``KeyboardInterrupt`` propagate. A supplier returning
    None yields a Failure carrying ``NoValuePresentError``.

    Raises:
        InvalidArgumentError: If ``supplier`` is None or not callable.
    """
    _require_supplier(supplier, _SUPPLIER)
    try:
        value = supplier()
    except Exception as exc:
        if active_config().log_captured_faults:
            logger.debug(
                "Captured %s from supplier %r: %s", type(exc).__name__, supplier, exc
            )
        return Failure(exc)
    if value is None:
        return Failure(NoValuePresentError("supplier returned None"))
    return Success(value)


@overload
def of_nullable(value: T | None) -> Result[T, NoValuePresentError]: ...


@overload
def of_nullable(
    value: T | None, error_supplier: Callable[[], E]
) -> Result[T, E]: ...


def of_nullable(value: Any, error_supplier: Any = _MISSING) -> Result[Any, Any]:
    """Wrap a possibly-None value, building the error lazily when it is None.

    Args:
        value: The value to wrap. None selects the Failure variant.
        error_supplier: Called exactly once, only when ``value`` is None, to
            produce the failure payload. When omitted, the payload is a
            ``NoValuePresentError``.

    Raises:
        InvalidArgumentError: If ``error_supplier`` is passed as None.
    """
    if error_supplier is _MISSING:
        if value is None:
            return Failure(NoValuePresentError("value is absent"))
        return Success(value)

    if value is not None:
        _require_callable(error_supplier, _ERROR_SUPPLIER)
        return Success(value)
    _require_supplier(error_supplier, _ERROR_SUPPLIER)
    return failure(error_supplier())


def of_optional(value: T | None) -> Result[T, NoValuePresentError]:
    """Convert an optional value (``T | None``) into a Result."""
    if value is None:
        return Failure(NoValuePresentError("no value present"))
    return Success(value)
