"""Internal validation helpers used across the package.

Every public operation checks its arguments up front through these helpers
so that contract violations surface as ``InvalidArgumentError`` with a
consistent, field-prefixed message.
"""

from __future__ import annotations

import typing

from monad.errors import InvalidArgumentError

T = typing.TypeVar("T")


def _require(
    *,
    condition: bool,
    message: str,
    field_name: str | None = None,
    hint: str | None = None,
) -> None:
    """Centralized validation with optional field context for clearer errors."""
    if not condition:
        if field_name:
            raise InvalidArgumentError(f"{field_name}: {message}", hint=hint)
        raise InvalidArgumentError(message, hint=hint)


def require_not_none(value: T | None, field_name: str) -> T:
    """Return ``value`` unchanged, or raise if it is None."""
    _require(condition=value is not None, message="must not be None", field_name=field_name)
    return typing.cast("T", value)


def require_not_blank(text: str | None, field_name: str) -> str:
    """Return ``text`` unchanged, or raise if it is None, not a str, or blank."""
    require_not_none(text, field_name)
    _require(
        condition=isinstance(text, str),
        message=f"must be a str, got {type(text).__name__}",
        field_name=field_name,
    )
    _require(
        condition=bool(typing.cast("str", text).strip()),
        message="must not be blank",
        field_name=field_name,
    )
    return typing.cast("str", text)


def require_callable(func: typing.Any, field_name: str) -> None:
    """Validate that ``func`` is present and callable."""
    require_not_none(func, field_name)
    _require(condition=callable(func), message="must be callable", field_name=field_name)
