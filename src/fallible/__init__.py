"""fallible: a Result type for composing computations that may fail.

Public API:
    - Result, Success, Failure: The container and its two variants
    - success(), failure(): Wrap a value or an error payload
    - of(): Capture a supplier's return value or raised exception
    - of_nullable(), of_optional(): Bridge from possibly-None values
    - Config: Environment-driven runtime switches
"""

from __future__ import annotations

import logging

from fallible.config import Config
from fallible.errors import (
    ConfigurationError,
    FallibleError,
    InvalidArgumentError,
    NoSuchElementError,
    NoValuePresentError,
)
from fallible.result import (
    Failure,
    Result,
    Success,
    failure,
    of,
    of_nullable,
    of_optional,
    success,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("fallible")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("fallible").addHandler(logging.NullHandler())

__all__ = [
    "Config",
    "ConfigurationError",
    "Failure",
    "FallibleError",
    "InvalidArgumentError",
    "NoSuchElementError",
    "NoValuePresentError",
    "Result",
    "Success",
    "failure",
    "of",
    "of_nullable",
    "of_optional",
    "success",
]
