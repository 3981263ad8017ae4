"""Foundation: errors, configuration and type aliases shared by all modules."""

from .config import FallibleSettings, ScopeSettings, clear_settings_cache, configure, get_settings
from .errors import (
    CleanupError,
    ErrorCode,
    FallibleError,
    IllegalStateError,
    InvalidArgumentError,
    ScopeReusedError,
    UncheckedError,
    walk_causes,
)
from .types import (
    Disposer,
    GarbageConsumer,
    Statement,
    ThrowingConsumer,
    ThrowingFunction,
    ThrowingStatement,
)

__all__ = [
    # Config
    "FallibleSettings", "ScopeSettings", "get_settings", "configure", "clear_settings_cache",
    # Errors
    "ErrorCode", "FallibleError", "InvalidArgumentError", "IllegalStateError",
    "ScopeReusedError", "UncheckedError", "CleanupError", "walk_causes",
    # Types
    "ThrowingFunction", "ThrowingConsumer", "ThrowingStatement", "Statement",
    "Disposer", "GarbageConsumer",
]
