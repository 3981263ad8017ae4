"""Either container: exactly one of a left or a right value.

By convention left carries a failure or diagnostic, right carries success.
Implements the usual combinators on top of the required accessors:
- Functor: map (right), map_left
- Bifunctor: bimap
- Monad: flat_map
- Elimination: fold, get_or_else, to_optional
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar, cast

from fallible.foundation.errors import IllegalStateError, InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Iterator

L = TypeVar("L")  # Left type
R = TypeVar("R")  # Right type
U = TypeVar("U")  # Mapped type
M = TypeVar("M")  # Mapped left type


class Either(Generic[L, R]):
    """Tagged union holding a left or a right value, never both, never neither.

    Build instances with Either.left()/Either.right() (or the module-level
    left()/right()). Both reject None, so a present payload is guaranteed.

    Examples:
        >>> e: Either[str, int] = Either.right(42)
        >>> e.is_right(), e.get_right()
        (True, 42)
        >>> Either.left("boom").map(lambda x: x * 2)
        Left('boom')

    Notes:
        - Uses __slots__, no setters; every combinator returns a new Either
        - Structural equality and hashing
    """

    __slots__ = ("_value", "_is_left")
    __match_args__ = ("_value",)

    def __init__(self, value: L | R, is_left: bool) -> None:
        """Private constructor. Use Either.left() or Either.right() instead."""
        self._value: L | R = value
        self._is_left: bool = is_left

    # ─────────────────────────────────────────────────────────────────
    # Construction
    # ─────────────────────────────────────────────────────────────────

    @staticmethod
    def left(value: L) -> Either[L, R]:
        """Create an Either holding *value* on the left.

        Raises:
            InvalidArgumentError: If value is None
        """
        if value is None:
            raise InvalidArgumentError("Either.left() requires a value, got None")
        return Either(value, is_left=True)

    @staticmethod
    def right(value: R) -> Either[L, R]:
        """Create an Either holding *value* on the right.

        Raises:
            InvalidArgumentError: If value is None
        """
        if value is None:
            raise InvalidArgumentError("Either.right() requires a value, got None")
        return Either(value, is_left=False)

    # ─────────────────────────────────────────────────────────────────
    # Type Checking
    # ─────────────────────────────────────────────────────────────────

    def is_left(self) -> bool:
        return self._is_left

    def is_right(self) -> bool:
        return not self._is_left

    # ─────────────────────────────────────────────────────────────────
    # Value Extraction
    # ─────────────────────────────────────────────────────────────────

    def get_left(self) -> L:
        """Get the left value.

        Raises:
            IllegalStateError: If this Either is of type right
        """
        if self._is_left:
            return cast(L, self._value)
        raise IllegalStateError("Either is of type right.")

    def get_right(self) -> R:
        """Get the right value.

        Raises:
            IllegalStateError: If this Either is of type left
        """
        if not self._is_left:
            return cast(R, self._value)
        raise IllegalStateError("Either is of type left.")

    def get_or_else(self, default: R) -> R:
        """Right value, or *default* when left."""
        return default if self._is_left else cast(R, self._value)

    def to_optional(self) -> R | None:
        """Right value, or None when left."""
        return None if self._is_left else cast(R, self._value)

    # ─────────────────────────────────────────────────────────────────
    # Combinators
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[R], U]) -> Either[L, U]:
        """Apply f to the right value, leave a left untouched.

        Type signature: Either[L, R] -> (R -> U) -> Either[L, U]
        """
        if self._is_left:
            return cast(Either[L, U], self)
        return Either.right(f(cast(R, self._value)))

    def map_left(self, f: Callable[[L], M]) -> Either[M, R]:
        """Apply f to the left value, leave a right untouched."""
        if self._is_left:
            return Either.left(f(cast(L, self._value)))
        return cast(Either[M, R], self)

    def bimap(self, left_fn: Callable[[L], M], right_fn: Callable[[R], U]) -> Either[M, U]:
        """Map whichever side is present."""
        if self._is_left:
            return Either.left(left_fn(cast(L, self._value)))
        return Either.right(right_fn(cast(R, self._value)))

    def flat_map(self, f: Callable[[R], Either[L, U]]) -> Either[L, U]:
        """Chain a computation that itself returns an Either.

        Short-circuits on left.

        Example:
            >>> def half(n: int) -> Either[str, int]:
            ...     return Either.right(n // 2) if n % 2 == 0 else Either.left(f"odd: {n}")
            >>> Either.right(8).flat_map(half).flat_map(half)
            Right(2)
            >>> Either.right(6).flat_map(half).flat_map(half)
            Left('odd: 3')
        """
        if self._is_left:
            return cast(Either[L, U], self)
        return f(cast(R, self._value))

    def fold(self, *, left: Callable[[L], U], right: Callable[[R], U]) -> U:
        """Eliminate the Either by handling both cases."""
        if self._is_left:
            return left(cast(L, self._value))
        return right(cast(R, self._value))

    def swap(self) -> Either[R, L]:
        """Exchange the sides."""
        return Either(self._value, is_left=not self._is_left)

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __repr__(self) -> str:
        variant = "Left" if self._is_left else "Right"
        return f"{variant}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Either):
            return NotImplemented
        return self._is_left == other._is_left and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_left, self._value))

    def __iter__(self) -> Iterator[R]:
        """Yield the right value once, or nothing for a left."""
        if not self._is_left:
            yield cast(R, self._value)


def left(value: L) -> Either[L, R]:
    """Construct a left Either. Raises InvalidArgumentError on None."""
    return Either.left(value)


def right(value: R) -> Either[L, R]:
    """Construct a right Either. Raises InvalidArgumentError on None."""
    return Either.right(value)
