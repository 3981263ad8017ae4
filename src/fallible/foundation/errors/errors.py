"""Exception hierarchy for fallible.

Provides error codes and the exceptions raised by the toolkit itself.
Failures raised by user callables are never rewrapped into these types,
except by silence_exceptions, which reclassifies them as UncheckedError.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence


class ErrorCode(StrEnum):
    """Machine-readable codes for toolkit failures."""
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    ILLEGAL_STATE = "ILLEGAL_STATE"
    UNCHECKED = "UNCHECKED"
    CLEANUP_FAILED = "CLEANUP_FAILED"
    SCOPE_REUSED = "SCOPE_REUSED"


class FallibleError(Exception):
    """Base exception for all fallible errors."""

    code: ErrorCode = ErrorCode.ILLEGAL_STATE

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def __str__(self) -> str:
        base = super().__str__()
        return f"{base} (hint: {self.hint})" if self.hint else base


class InvalidArgumentError(FallibleError, ValueError):
    """A precondition on an argument was violated (e.g. None payload)."""

    code = ErrorCode.INVALID_ARGUMENT


class IllegalStateError(FallibleError, RuntimeError):
    """Operation is not valid for the object's current state."""

    code = ErrorCode.ILLEGAL_STATE


class ScopeReusedError(IllegalStateError):
    """A single-use scoped execution was entered a second time."""

    code = ErrorCode.SCOPE_REUSED


class UncheckedError(FallibleError, RuntimeError):
    """Undeclared fault carrying an original failure as its cause.

    Raised by silence_exceptions. The wrapped failure is available both as
    ``__cause__`` and through the ``cause`` property.
    """

    code = ErrorCode.UNCHECKED

    @classmethod
    def wrap(cls, exc: BaseException) -> Self:
        """Build an unchecked fault around *exc*. Raise it ``from exc``."""
        err = cls(f"{type(exc).__name__}: {exc}")
        err.__cause__ = exc
        return err

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__


class CleanupError(FallibleError):
    """One or more disposers failed while cleanup isolated their failures."""

    code = ErrorCode.CLEANUP_FAILED

    def __init__(self, failures: Sequence[Exception]) -> None:
        self.failures: tuple[Exception, ...] = tuple(failures)
        n = len(self.failures)
        super().__init__(f"{n} disposer{'s' if n != 1 else ''} failed during cleanup")


def walk_causes(exc: BaseException) -> Iterator[BaseException]:
    """Yield *exc* and its ``__cause__`` chain, with cycle protection."""
    seen: set[int] = set()
    cur: BaseException | None = exc
    while cur is not None and id(cur) not in seen:
        seen.add(id(cur))
        yield cur
        cur = cur.__cause__
