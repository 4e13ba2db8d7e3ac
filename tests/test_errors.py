from __future__ import annotations

import pickle

import pytest

from monad import (
    ConfigurationError,
    ErrorSignal,
    InvalidArgumentError,
    MonadError,
    NotFoundError,
    OpFailedError,
    Result,
)
from monad._validation import require_callable, require_not_blank, require_not_none

pytestmark = pytest.mark.unit


def test_subclass_hierarchy() -> None:
    """Every library error is catchable as MonadError and as its builtin kin."""
    assert issubclass(InvalidArgumentError, MonadError)
    assert issubclass(InvalidArgumentError, ValueError)
    assert issubclass(NotFoundError, MonadError)
    assert issubclass(NotFoundError, LookupError)
    assert issubclass(ConfigurationError, MonadError)
    assert issubclass(OpFailedError, MonadError)


def test_hint_defaults_to_none() -> None:
    err = MonadError("fail")
    assert str(err) == "fail"
    assert err.hint is None
    assert MonadError("fail", hint="do this").hint == "do this"


def test_op_failed_error_without_stack_formats_empty() -> None:
    err = OpFailedError(ErrorSignal.from_message("x"))

    assert err.stack is None
    assert err.format_stack() == ""
    assert err.__cause__ is None


def test_require_not_none_returns_value() -> None:
    value = object()
    assert require_not_none(value, "value") is value

    with pytest.raises(InvalidArgumentError, match="^value: must not be None$"):
        require_not_none(None, "value")


def test_require_not_blank() -> None:
    assert require_not_blank("ok", "text") == "ok"

    with pytest.raises(InvalidArgumentError, match="must not be blank"):
        require_not_blank("   ", "text")
    with pytest.raises(InvalidArgumentError, match="must be a str"):
        require_not_blank(42, "text")  # type: ignore[arg-type]


def test_require_callable() -> None:
    require_callable(len, "func")

    with pytest.raises(InvalidArgumentError, match="must be callable"):
        require_callable("len", "func")
    with pytest.raises(InvalidArgumentError, match="must not be None"):
        require_callable(None, "func")


def test_op_failed_error_survives_pickling() -> None:
    """Raised failures can cross process boundaries (e.g. process pools)."""
    result = Result.failure("boom")
    with pytest.raises(OpFailedError) as exc:
        result.unwrap()

    restored = pickle.loads(pickle.dumps(exc.value))

    assert isinstance(restored, OpFailedError)
    assert str(restored) == "boom"
    assert restored.signal == result.get_failure()
    assert restored.captured_at_construction is False
    assert restored.stack is not None
    assert [f.name for f in restored.stack] == [f.name for f in exc.value.stack]
    assert "test_errors.py" in restored.format_stack()


def test_pickled_op_failed_error_keeps_cause_and_hint() -> None:
    signal = ErrorSignal.from_message_and_cause("save failed", OSError("disk"), capture=True)
    err = signal.to_exception()
    err.hint = "check free space"

    restored = pickle.loads(pickle.dumps(err))

    assert isinstance(restored.__cause__, OSError)
    assert restored.__cause__.args == ("disk",)
    assert restored.hint == "check free space"
    assert restored.captured_at_construction is True
    assert restored.signal.message == "save failed"
    assert restored.signal.stack is not None
