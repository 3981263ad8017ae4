"""Error handling for fallible.

- ErrorCode: Codes attached to every toolkit exception
- FallibleError: Base of the hierarchy
- InvalidArgumentError / IllegalStateError: Contract violations
- UncheckedError: Reclassified failure raised by silence_exceptions
- CleanupError: Aggregated disposer failures (isolating cleanup policy)
"""

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

__all__ = [
    "ErrorCode", "FallibleError",
    "InvalidArgumentError", "IllegalStateError", "ScopeReusedError",
    "UncheckedError", "CleanupError",
    "walk_causes",
]
