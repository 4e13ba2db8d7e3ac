"""Configuration: frozen Config resolved once from the environment."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cache
import os

from dotenv import load_dotenv

from monad.errors import ConfigurationError

_CAPTURE_STACKS_ENV = "MONAD_CAPTURE_STACKS"
_STACK_LIMIT_ENV = "MONAD_STACK_LIMIT"


@dataclass(frozen=True)
class Config:
    """Immutable configuration for signal construction.

    Example:
        config = Config(capture_stacks=True, stack_limit=20)
    """

    #: Capture the call stack for every signal at construction time.
    capture_stacks: bool = False
    #: Upper bound on captured frames; *None* keeps the full stack.
    stack_limit: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.stack_limit is not None and self.stack_limit < 1:
            raise ConfigurationError(
                f"stack_limit must be ≥ 1, got {self.stack_limit}",
                hint=f"Unset {_STACK_LIMIT_ENV} to keep the full stack.",
            )

    @classmethod
    def from_env(cls) -> Config:
        """Resolve configuration from ``MONAD_*`` environment variables."""
        load_dotenv()
        raw_limit = os.environ.get(_STACK_LIMIT_ENV, "").strip()
        stack_limit: int | None = None
        if raw_limit:
            try:
                stack_limit = int(raw_limit)
            except ValueError as exc:
                raise ConfigurationError(
                    f"{_STACK_LIMIT_ENV} must be an integer, got {raw_limit!r}",
                    hint="Use a positive frame count, e.g. MONAD_STACK_LIMIT=30.",
                ) from exc
        return cls(
            capture_stacks=os.environ.get(_CAPTURE_STACKS_ENV) == "1",
            stack_limit=stack_limit,
        )


@cache
def get_config() -> Config:
    """Return the process-wide configuration, resolved on first use."""
    return Config.from_env()
