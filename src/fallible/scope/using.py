"""Scoped execution: run a body with a fresh Garbage, always clean up.

The body's own failure never reaches the caller. Only a failure raised while
cleaning up does.

Quick Start:
    >>> from fallible.scope import using
    >>>
    >>> def body(garbage, n):
    ...     garbage.add(5, print)
    ...     if n < 0.5:
    ...         raise OSError("too small")
    ...     garbage.add(6, print)
    >>>
    >>> using(body).with_(0.0)
    5
    >>> using(body).with_(0.9)
    5
    6

Context-manager form:
    >>> with scoped() as garbage:
    ...     garbage.add("tmp", print)
    ...     raise ValueError("ignored")
    tmp
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import TYPE_CHECKING, Generic, TypeVar

from fallible.foundation.config import ScopeSettings, get_settings
from fallible.foundation.errors import CleanupError, InvalidArgumentError, ScopeReusedError

from .garbage import Garbage

if TYPE_CHECKING:
    from types import TracebackType

    from fallible.foundation.types import GarbageConsumer

T = TypeVar("T")

logger = logging.getLogger("fallible.scope")


class ScopeState(StrEnum):
    """Lifecycle of a TryFinally."""
    BUILT = "built"
    RUNNING = "running"
    FINALIZED = "finalized"


def using(consumer: GarbageConsumer[T], *, settings: ScopeSettings | None = None) -> TryFinally[T]:
    """Capture *consumer* for a later with_() call.

    The consumer runs only inside with_(), receiving the scope's Garbage and
    the value passed to with_().

    Raises:
        InvalidArgumentError: If consumer is None or not callable
    """
    if consumer is None or not callable(consumer):
        raise InvalidArgumentError(
            f"using() requires a callable consumer, got {type(consumer).__name__}",
            hint="pass a function accepting (garbage, value)",
        )
    return TryFinally(consumer, settings or get_settings().scope)


class TryFinally(Generic[T]):
    """Runs a consumer against one input and cleans up its garbage.

    Built by using(). Single use by default: a second with_() raises
    ScopeReusedError. With ``single_use=False`` each call gets a fresh Garbage.
    """

    __slots__ = ("_consumer", "_settings", "_garbage", "_state")

    def __init__(self, consumer: GarbageConsumer[T], settings: ScopeSettings) -> None:
        """Private constructor. Use using() instead."""
        self._consumer = consumer
        self._settings = settings
        self._garbage = self._new_garbage()
        self._state = ScopeState.BUILT

    @property
    def state(self) -> ScopeState:
        return self._state

    def with_(self, value: T) -> None:
        """Invoke the consumer with *value*, discard its failure, then clean up.

        Raises:
            ScopeReusedError: If already finalized and single_use is set
            Exception: Whatever a disposer raised during cleanup
        """
        if self._state is not ScopeState.BUILT:
            if self._settings.single_use:
                raise ScopeReusedError(
                    f"scope already {self._state}",
                    hint="call using() again or pass ScopeSettings(single_use=False)",
                )
            self._garbage = self._new_garbage()

        garbage = self._garbage
        self._state = ScopeState.RUNNING
        try:
            self._consumer(garbage, value)
        except Exception as exc:
            logger.debug("scope body failed, discarding: %r", exc)
        finally:
            try:
                garbage.cleanup()
            finally:
                self._state = ScopeState.FINALIZED

    def _new_garbage(self) -> Garbage:
        return Garbage(disposer_errors=self._settings.disposer_errors)

    def __repr__(self) -> str:
        name = getattr(self._consumer, "__qualname__", repr(self._consumer))
        return f"TryFinally({name}, state={self._state.value})"


class scoped:
    """Context manager form of using(): yields a fresh Garbage.

    Exceptions raised in the block are suppressed; cleanup runs on exit and
    its failures propagate, detached from the suppressed exception.
    Single use like TryFinally: re-entering raises ScopeReusedError unless
    ``single_use=False``, in which case each entry gets a fresh Garbage.

    Example:
        >>> with scoped() as garbage:
        ...     handle = open_thing()
        ...     garbage.add(handle, close_thing)
    """

    __slots__ = ("_settings", "_garbage", "_entered")

    def __init__(self, settings: ScopeSettings | None = None) -> None:
        self._settings = settings or get_settings().scope
        self._garbage = Garbage(disposer_errors=self._settings.disposer_errors)
        self._entered = False

    def __enter__(self) -> Garbage:
        if self._entered:
            if self._settings.single_use:
                raise ScopeReusedError(
                    "scoped() block already entered",
                    hint="create a new scoped() or pass ScopeSettings(single_use=False)",
                )
            self._garbage = Garbage(disposer_errors=self._settings.disposer_errors)
        self._entered = True
        return self._garbage

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> bool:
        suppress = isinstance(exc_val, Exception)
        if suppress:
            logger.debug("scope body failed, discarding: %r", exc_val)
        try:
            self._garbage.cleanup()
        except Exception as err:
            if suppress:
                _detach(err, exc_val)
            raise
        return suppress


def _detach(err: BaseException, body: BaseException) -> None:
    """Drop implicit ``__context__`` links from *err*'s chain to *body*."""
    seen: set[int] = set()
    stack: list[BaseException] = [err]
    while stack:
        cur = stack.pop()
        if id(cur) in seen:
            continue
        seen.add(id(cur))
        if cur.__context__ is body:
            cur.__context__ = None
        stack.extend(e for e in (cur.__cause__, cur.__context__) if e is not None)
        if isinstance(cur, CleanupError):
            stack.extend(cur.failures)
