"""Exception hierarchy for monad."""

from __future__ import annotations

import dataclasses
import traceback
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from traceback import StackSummary

    from monad.signal import ErrorSignal


class MonadError(Exception):
    """Base exception for all monad errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class InvalidArgumentError(MonadError, ValueError):
    """A required argument was None or a required text was blank."""


class NotFoundError(MonadError, LookupError):
    """A failure-only accessor was used on a success."""


class ConfigurationError(MonadError):
    """Configuration validation or resolution failed."""


class OpFailedError(MonadError):
    """The raised form of an ``ErrorSignal``.

    Carries the signal it was built from and the call stack materialized
    for it, so callers that catch it can still inspect the original
    failure reason.
    """

    def __init__(
        self,
        signal: ErrorSignal,
        *,
        stack: StackSummary | None = None,
        captured_at_construction: bool = False,
    ) -> None:
        super().__init__(signal.message)
        self.signal = signal
        self.stack = stack
        self.captured_at_construction = captured_at_construction
        self.__cause__ = signal.cause

    def __reduce__(self) -> tuple[Any, ...]:
        # Frame summaries may hold code objects; ship plain frame tuples instead.
        stack = _portable_stack(self.stack)
        signal = dataclasses.replace(self.signal, stack=_portable_stack(self.signal.stack))
        return (
            type(self),
            (signal,),
            {
                "stack": stack,
                "captured_at_construction": self.captured_at_construction,
                "hint": self.hint,
            },
        )

    def format_stack(self) -> str:
        """Render the materialized stack, innermost frame last."""
        if self.stack is None:
            return ""
        return "".join(traceback.format_list(self.stack))


def _portable_stack(stack: StackSummary | None) -> StackSummary | None:
    if stack is None:
        return None
    return traceback.StackSummary.from_list(
        [(frame.filename, frame.lineno, frame.name, frame.line) for frame in stack]
    )
