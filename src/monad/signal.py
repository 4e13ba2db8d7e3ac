"""Failure reasons as plain values.

An ``ErrorSignal`` records why an operation failed without paying for a
stack walk up front. Most signals are created, inspected, maybe remapped,
and dropped without ever being raised, so the stack is only captured when
the signal is raised (deferred mode) unless the caller asks for it at
construction (capturing mode).
"""

from __future__ import annotations

import dataclasses
import logging
import os
import traceback
from typing import NoReturn

from monad._validation import require_not_blank, require_not_none
from monad.config import get_config
from monad.errors import InvalidArgumentError, OpFailedError

logger = logging.getLogger(__name__)

# Matches co_filename of this package's modules as the import system recorded it.
_PACKAGE_PREFIX = os.path.dirname(__file__) + os.sep


def _is_internal(filename: str) -> bool:
    return filename.startswith(_PACKAGE_PREFIX)


def _capture_stack() -> traceback.StackSummary:
    """Extract the caller's stack, dropping frames that belong to this package."""
    limit = get_config().stack_limit
    frames = [frame for frame in traceback.extract_stack() if not _is_internal(frame.filename)]
    if limit is not None:
        frames = frames[-limit:]
    return traceback.StackSummary.from_list(frames)


def _message_of(cause: BaseException) -> str:
    text = str(cause)
    return text if text.strip() else type(cause).__name__


@dataclasses.dataclass(frozen=True, slots=True)
class ErrorSignal:
    """A failure reason: message, optional cause, and diagnostic-capture mode.

    Equality is structural over ``message``, ``cause`` and ``captured``; the
    stack itself never takes part in comparisons.
    """

    message: str
    cause: BaseException | None = None
    captured: bool = False
    stack: traceback.StackSummary | None = dataclasses.field(
        default=None, compare=False, repr=False
    )

    def __post_init__(self) -> None:
        require_not_blank(self.message, "message")
        if self.cause is not None and not isinstance(self.cause, BaseException):
            raise InvalidArgumentError(
                f"cause: must be an exception, got {type(self.cause).__name__}"
            )

    @classmethod
    def _create(
        cls, message: str, cause: BaseException | None, *, capture: bool
    ) -> ErrorSignal:
        capture = capture or get_config().capture_stacks
        return cls(
            message=message,
            cause=cause,
            captured=capture,
            stack=_capture_stack() if capture else None,
        )

    @classmethod
    def from_message(cls, message: str, *, capture: bool = False) -> ErrorSignal:
        """Create a signal with only a message."""
        require_not_blank(message, "message")
        return cls._create(message, None, capture=capture)

    @classmethod
    def from_cause(cls, cause: BaseException, *, capture: bool = False) -> ErrorSignal:
        """Wrap an existing exception; the message is taken from it."""
        require_not_none(cause, "cause")
        if not isinstance(cause, BaseException):
            raise InvalidArgumentError(
                f"cause: must be an exception, got {type(cause).__name__}"
            )
        return cls._create(_message_of(cause), cause, capture=capture)

    @classmethod
    def from_message_and_cause(
        cls, message: str, cause: BaseException, *, capture: bool = False
    ) -> ErrorSignal:
        """Create a signal with an explicit message and an underlying cause."""
        require_not_blank(message, "message")
        require_not_none(cause, "cause")
        return cls._create(message, cause, capture=capture)

    def materialize(self) -> ErrorSignal:
        """Return a signal that carries a stack, capturing one now if deferred."""
        if self.stack is not None:
            return self
        logger.debug("Materializing deferred stack for failure: %s", self.message)
        return dataclasses.replace(self, stack=_capture_stack())

    def to_exception(self) -> OpFailedError:
        """Build the raisable form of this signal."""
        signal = self.materialize()
        return OpFailedError(
            signal,
            stack=signal.stack,
            captured_at_construction=self.captured,
        )

    def raise_(self) -> NoReturn:
        """Raise this signal as an ``OpFailedError``."""
        raise self.to_exception()

    def __str__(self) -> str:
        return self.message
