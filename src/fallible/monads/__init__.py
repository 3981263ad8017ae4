"""Either container for carrying a failure or a success as data.

Example:
    >>> from fallible.monads import Either, left, right
    >>>
    >>> def parse(s: str) -> Either[str, int]:
    ...     return right(int(s)) if s.isdigit() else left(f"not a number: {s}")
    >>>
    >>> parse("21").map(lambda n: n * 2).get_right()
    42
    >>> parse("x").is_left()
    True
"""

from .either import Either, left, right

__all__ = ["Either", "left", "right"]
