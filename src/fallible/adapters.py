"""Adapters that turn fallible callables into total ones.

- to_optional: failure becomes None
- to_either: failure becomes Either.left(exc), success Either.right(value)
- silence_exceptions / silence_procedure: failure is re-raised as UncheckedError
- to_throwing_function: procedure -> function returning None

Only Exception subclasses are treated as failures. KeyboardInterrupt,
SystemExit and other BaseException-only signals always propagate.
"""

from __future__ import annotations

import logging
from functools import wraps
from typing import TypeVar

from fallible.foundation.errors import UncheckedError
from fallible.foundation.types import ThrowingConsumer, ThrowingFunction
from fallible.monads.either import Either

T = TypeVar("T")
R = TypeVar("R")

logger = logging.getLogger("fallible.adapters")


def to_optional(fn: ThrowingFunction[T, R]) -> ThrowingFunction[T, R | None]:
    """Turn a partial function into a total one returning None on failure.

    The failure itself is discarded; use to_either to keep it.

    Example:
        >>> parse = to_optional(int)
        >>> parse("12"), parse("x")
        (12, None)
    """
    @wraps(fn)
    def wrapper(value: T) -> R | None:
        try:
            return fn(value)
        except Exception:
            return None

    return wrapper


def to_either(fn: ThrowingFunction[T, R]) -> ThrowingFunction[T, Either[Exception, R]]:
    """Turn a partial function into a total one returning an Either.

    Left holds the raised exception object itself. A function returning None
    yields Left(InvalidArgumentError) since Either cannot hold None.

    Example:
        >>> parse = to_either(int)
        >>> parse("12")
        Right(12)
        >>> parse("x").get_left()
        ValueError("invalid literal for int() with base 10: 'x'")
    """
    @wraps(fn)
    def wrapper(value: T) -> Either[Exception, R]:
        try:
            return Either.right(fn(value))
        except Exception as exc:
            return Either.left(exc)

    return wrapper


def silence_exceptions(fn: ThrowingFunction[T, R]) -> ThrowingFunction[T, R]:
    """Re-raise any failure of *fn* as an UncheckedError.

    Nothing is swallowed: the caller still sees a failure, with the original
    one attached as ``__cause__``.
    """
    @wraps(fn)
    def wrapper(value: T) -> R:
        try:
            return fn(value)
        except Exception as exc:
            logger.debug("reclassifying %s from %s as unchecked", type(exc).__name__, _name(fn))
            raise UncheckedError.wrap(exc) from exc

    return wrapper


def silence_procedure(consumer: ThrowingConsumer[T]) -> ThrowingConsumer[T]:
    """Procedure form of silence_exceptions."""
    return silence_exceptions(to_throwing_function(consumer))


def to_throwing_function(consumer: ThrowingConsumer[T]) -> ThrowingFunction[T, None]:
    """Wrap a procedure as a function that always returns None.

    Failures of *consumer* propagate unchanged.
    """
    @wraps(consumer)
    def wrapper(value: T) -> None:
        consumer(value)
        return None

    return wrapper


def _name(fn: object) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)
