"""monad: a value/error Result container.

Public API:
    - Result: success-with-value XOR failure-with-signal
    - ErrorSignal: failure reason with deferred stack capture
    - Config / get_config(): environment-driven settings
"""

from __future__ import annotations

import logging

from monad.config import Config, get_config
from monad.errors import (
    ConfigurationError,
    InvalidArgumentError,
    MonadError,
    NotFoundError,
    OpFailedError,
)
from monad.result import ItemSequence, Result
from monad.signal import ErrorSignal

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("monad-result")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("monad").addHandler(logging.NullHandler())

__all__ = [
    "Config",
    "ConfigurationError",
    "ErrorSignal",
    "InvalidArgumentError",
    "ItemSequence",
    "MonadError",
    "NotFoundError",
    "OpFailedError",
    "Result",
    "get_config",
]
