"""Combinators for fallible functions and scoped resource cleanup.

Example:
    >>> from fallible import safe_map, to_optional, using
    >>>
    >>> safe_map(["1", "two", "3"], to_optional(int))
    [1, 3]
    >>>
    >>> closed = []
    >>> def body(garbage, name):
    ...     garbage.add(name, closed.append)
    ...     raise OSError("discarded")
    >>> using(body).with_("conn-1")
    >>> closed
    ['conn-1']
"""

from .adapters import silence_exceptions, silence_procedure, to_either, to_optional, to_throwing_function
from .foundation import (
    CleanupError,
    Disposer,
    ErrorCode,
    FallibleError,
    FallibleSettings,
    GarbageConsumer,
    IllegalStateError,
    InvalidArgumentError,
    ScopeReusedError,
    ScopeSettings,
    Statement,
    ThrowingConsumer,
    ThrowingFunction,
    ThrowingStatement,
    UncheckedError,
    clear_settings_cache,
    configure,
    get_settings,
    walk_causes,
)
from .mapping import safe_iter, safe_map
from .monads import Either, left, right
from .scope import Garbage, ScopeState, TryFinally, scoped, using

__version__ = "0.1.0"

__all__ = [
    # Either
    "Either", "left", "right",
    # Adapters
    "to_optional", "to_either", "silence_exceptions", "silence_procedure", "to_throwing_function",
    # Collections
    "safe_map", "safe_iter",
    # Scoped execution
    "Garbage", "TryFinally", "ScopeState", "using", "scoped",
    # Types
    "ThrowingFunction", "ThrowingConsumer", "ThrowingStatement", "Statement", "Disposer", "GarbageConsumer",
    # Errors
    "ErrorCode", "FallibleError", "InvalidArgumentError", "IllegalStateError", "ScopeReusedError",
    "UncheckedError", "CleanupError", "walk_causes",
    # Config
    "FallibleSettings", "ScopeSettings", "get_settings", "configure", "clear_settings_cache",
]
