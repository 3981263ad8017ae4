"""Type-level names for fallible callables.

Python has no checked exceptions, so "may fail" is a naming convention here:
a Throwing* callable may raise any Exception, a Statement must not.
These are typing aids only and carry no runtime behavior.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, TypeAlias, TypeVar

if TYPE_CHECKING:
    from fallible.scope.garbage import Garbage

T = TypeVar("T")
R = TypeVar("R")
T_contra = TypeVar("T_contra", contravariant=True)

# (T) -> R, may raise
ThrowingFunction: TypeAlias = Callable[[T], R]

# (T) -> None, may raise
ThrowingConsumer: TypeAlias = Callable[[T], None]

# () -> None, may raise
ThrowingStatement: TypeAlias = Callable[[], None]

# () -> None, must not raise
Statement: TypeAlias = Callable[[], None]

# Cleanup procedure for a resource of type T
Disposer: TypeAlias = Callable[[T], None]


class GarbageConsumer(Protocol[T_contra]):
    """Body of a scoped execution: receives the registry and one input, may raise."""

    def __call__(self, garbage: Garbage, value: T_contra, /) -> None: ...
