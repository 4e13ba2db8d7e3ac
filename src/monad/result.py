"""Result container for explicit, value-based error handling.

A ``Result`` is either a success holding a non-None value or a failure
holding an ``ErrorSignal``, never both and never neither. Operations never
mutate the receiver: they return a new ``Result`` or the receiver itself,
and only the extraction methods documented as raising will raise.

Example:
    >>> Result.success("a").map(lambda s: s + "b").unwrap()
    'ab'
    >>> Result.failure("boom").map(len).or_else(-1)
    -1
"""

from __future__ import annotations

from collections.abc import Sequence
import dataclasses
from typing import TYPE_CHECKING, Any, Generic, TypeVar, overload

from monad._validation import require_callable, require_not_blank, require_not_none
from monad.errors import InvalidArgumentError, NotFoundError, OpFailedError
from monad.signal import ErrorSignal

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

_NO_FAILURE_MSG = "Requested result object represents a success"


@dataclasses.dataclass(frozen=True, slots=True, repr=False)
class Result(Generic[T]):
    """The outcome of one operation: a value XOR an ``ErrorSignal``.

    Build instances with ``Result.success`` or ``Result.failure``.
    """

    _value: T | None = None
    _failure: ErrorSignal | None = None

    def __post_init__(self) -> None:
        """Enforce the value/failure exclusivity invariant."""
        if (self._value is None) == (self._failure is None):
            raise InvalidArgumentError(
                "Result must hold exactly one of a value or a failure",
                hint="Use Result.success(...) or Result.failure(...).",
            )
        if self._failure is not None and not isinstance(self._failure, ErrorSignal):
            raise InvalidArgumentError(
                f"failure: must be an ErrorSignal, got {type(self._failure).__name__}"
            )

    # --- Construction ---

    @classmethod
    def success(cls, value: T) -> Result[T]:
        """Create a success; None is not a value and is rejected."""
        require_not_none(value, "value")
        return cls(_value=value)

    @classmethod
    def failure(cls, reason: str | BaseException | ErrorSignal) -> Result[Any]:
        """Create a failure from a message, an exception, or a ready signal.

        Messages and exceptions are wrapped into a deferred-mode signal, so no
        stack is captured until the failure is raised.
        """
        require_not_none(reason, "reason")
        if isinstance(reason, ErrorSignal):
            return cls(_failure=reason)
        if isinstance(reason, BaseException):
            return cls(_failure=ErrorSignal.from_cause(reason))
        if isinstance(reason, str):
            require_not_blank(reason, "reason")
            return cls(_failure=ErrorSignal.from_message(reason))
        raise InvalidArgumentError(
            f"reason: expected str, exception or ErrorSignal, got {type(reason).__name__}"
        )

    # --- State ---

    def is_success(self) -> bool:
        return self._failure is None

    def is_failure(self) -> bool:
        return self._failure is not None

    # --- Transforms ---

    def map(self, transform: Callable[[T], U]) -> Result[U]:
        """Apply ``transform`` to the value; failures pass through untouched."""
        require_callable(transform, "transform")
        if self._failure is not None:
            return Result(_failure=self._failure)
        return Result.success(transform(self._value))  # type: ignore[arg-type]

    def map_error(
        self, transform: Callable[[ErrorSignal], ErrorSignal | BaseException]
    ) -> Result[T]:
        """Apply ``transform`` to the failure signal; successes return ``self``.

        An ``ErrorSignal`` output is held as-is, an exception output is wrapped
        into a new deferred signal.
        """
        require_callable(transform, "transform")
        if self._failure is None:
            return self
        return Result.failure(transform(self._failure))

    # --- Extraction ---

    def or_else(self, fallback: T | None) -> T | None:
        """Return the value, or ``fallback`` unchanged (None allowed)."""
        if self._failure is not None:
            return fallback
        return self._value

    def or_else_compute(self, factory: Callable[[], T]) -> T:
        """Return the value, or whatever ``factory()`` produces."""
        require_callable(factory, "factory")
        if self._failure is None:
            return self._value  # type: ignore[return-value]
        return factory()

    def unwrap(self) -> T:
        """Return the value or raise the held failure as ``OpFailedError``."""
        if self._failure is not None:
            self._failure.raise_()
        return self._value  # type: ignore[return-value]

    def unwrap_or_raise(self, remap: Callable[[OpFailedError], BaseException]) -> T:
        """Return the value or raise the exception ``remap`` builds from the failure.

        ``remap`` receives a freshly built ``OpFailedError`` with its stack
        materialized. A different exception returned by ``remap`` is chained
        to it unless it already has a ``__cause__``.
        """
        require_callable(remap, "remap")
        if self._failure is None:
            return self._value  # type: ignore[return-value]
        failure = self._failure.to_exception()
        remapped = remap(failure)
        if not isinstance(remapped, BaseException):
            raise InvalidArgumentError(
                f"remap: must return an exception, got {type(remapped).__name__}"
            )
        if remapped is not failure and remapped.__cause__ is None:
            raise remapped from failure
        raise remapped

    def get_failure(self) -> ErrorSignal:
        """Return the held signal; raises ``NotFoundError`` on a success."""
        if self._failure is None:
            raise NotFoundError(_NO_FAILURE_MSG)
        return self._failure

    def get_failure_as(self, remap: Callable[[ErrorSignal], R]) -> R:
        """Return ``remap`` applied to the held signal."""
        require_callable(remap, "remap")
        return remap(self.get_failure())

    def raise_if_failure(self) -> None:
        """Raise the held failure as ``OpFailedError``; no-op on a success."""
        if self._failure is not None:
            self._failure.raise_()

    # --- Conversions ---

    def to_optional(self) -> T | None:
        """Return the value, or None on a failure (the error is discarded)."""
        return self._value

    def to_sequence(self) -> ItemSequence[T]:
        """Return a lazy, re-iterable view with zero or one item."""
        return ItemSequence(self)

    def __repr__(self) -> str:
        if self._failure is not None:
            return f"Result[fail={self._failure!r}]"
        return f"Result[ok={self._value!r}]"


class ItemSequence(Sequence[T]):
    """Read-only sequence over a ``Result``'s value: one item or none."""

    __slots__ = ("_result",)

    def __init__(self, result: Result[T]) -> None:
        self._result = result

    def __len__(self) -> int:
        return 1 if self._result.is_success() else 0

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[T, ...]: ...

    def __getitem__(self, index: int | slice) -> T | tuple[T, ...]:
        items = (self._result.to_optional(),) if self._result.is_success() else ()
        return items[index]  # type: ignore[return-value]

    def __iter__(self) -> Iterator[T]:
        if self._result.is_success():
            yield self._result.to_optional()  # type: ignore[misc]

    def __repr__(self) -> str:
        return f"ItemSequence({list(self)!r})"
