"""Map a collection through a partial function, keeping only present results."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Set
from typing import Any, TypeVar, overload

T = TypeVar("T")
R = TypeVar("R")
C = TypeVar("C")


@overload
def safe_map(collection: Set[T], mapper: Callable[[T], R | None]) -> set[R]: ...
@overload
def safe_map(collection: Iterable[T], mapper: Callable[[T], R | None]) -> list[R]: ...
@overload
def safe_map(collection: Iterable[T], mapper: Callable[[T], R | None], collector: Callable[[Iterable[R]], C]) -> C: ...


def safe_map(
    collection: Iterable[T],
    mapper: Callable[[T], R | None],
    collector: Callable[[Iterable[R]], Any] | None = None,
) -> Any:
    """Apply *mapper* to every element and drop the None results.

    Sets map to sets, every other iterable maps to a list in input order.
    Pass *collector* to build any other container from the present results.

    Combine with to_optional for functions that may raise:

    Example:
        >>> safe_map(["1", "x", "3"], to_optional(int))
        [1, 3]
        >>> safe_map({1, 2, 3, 4}, lambda x: x if x % 2 == 0 else None)
        {2, 4}
        >>> safe_map([3, 1, 3], lambda x: x, tuple)
        (3, 1, 3)
    """
    if collector is None:
        collector = set if isinstance(collection, Set) else list
    return collector(safe_iter(collection, mapper))


def safe_iter(iterable: Iterable[T], mapper: Callable[[T], R | None]) -> Iterator[R]:
    """Lazy form of safe_map."""
    for item in iterable:
        mapped = mapper(item)
        if mapped is not None:
            yield mapped
