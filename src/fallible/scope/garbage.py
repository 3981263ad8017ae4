"""Ordered registry of deferred cleanup actions."""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Literal, TypeVar

from fallible.foundation.errors import CleanupError, InvalidArgumentError

if TYPE_CHECKING:
    from fallible.foundation.types import Disposer, Statement

T = TypeVar("T")

logger = logging.getLogger("fallible.scope")

_POLICIES = ("propagate", "isolate")


class Garbage:
    """Collects disposers and runs them during cleanup().

    Each add() pairs a resource with its disposer and stores the pair as a
    zero-argument action. Resources cannot be read back from the registry.

    Example:
        >>> garbage = Garbage()
        >>> garbage.add("conn", print)
        >>> garbage.cleanup()
        conn
    """

    __slots__ = ("_actions", "_disposer_errors")

    def __init__(self, *, disposer_errors: Literal["propagate", "isolate"] = "propagate") -> None:
        if disposer_errors not in _POLICIES:
            raise InvalidArgumentError(
                f"disposer_errors must be one of {_POLICIES}, got {disposer_errors!r}"
            )
        self._actions: deque[Statement] = deque()
        self._disposer_errors = disposer_errors

    def add(self, resource: T, disposer: Disposer[T]) -> None:
        """Register *disposer* to be called with *resource* at cleanup.

        Raises:
            InvalidArgumentError: If disposer is not callable
        """
        if not callable(disposer):
            raise InvalidArgumentError(f"disposer must be callable, got {type(disposer).__name__}")
        self._actions.append(lambda: disposer(resource))

    def cleanup(self) -> None:
        """Run every pending action in registration order, each at most once.

        With the "propagate" policy the first failing disposer stops cleanup
        and its exception is raised as is. With "isolate" every action runs
        and the failures are raised together as CleanupError.
        """
        if not self._actions:
            return
        logger.debug("cleanup starting with %d pending action(s)", len(self._actions))
        if self._disposer_errors == "isolate":
            self._drain_isolated()
        else:
            while self._actions:
                self._actions.popleft()()
        logger.debug("cleanup finished")

    def _drain_isolated(self) -> None:
        failures: list[Exception] = []
        while self._actions:
            action = self._actions.popleft()
            try:
                action()
            except Exception as exc:
                logger.debug("disposer failed, continuing cleanup: %r", exc)
                failures.append(exc)
        if failures:
            raise CleanupError(failures) from failures[0]

    def __len__(self) -> int:
        """Number of actions still pending."""
        return len(self._actions)

    def __repr__(self) -> str:
        return f"Garbage(pending={len(self._actions)}, disposer_errors={self._disposer_errors!r})"
