"""Scoped execution with guaranteed cleanup of registered resources.

- Garbage: ordered registry of disposers, drained by cleanup()
- using/TryFinally: run a body with a fresh Garbage, discard its failure, clean up
- scoped: the same contract as a context manager
"""

from .garbage import Garbage
from .using import ScopeState, TryFinally, scoped, using

__all__ = ["Garbage", "ScopeState", "TryFinally", "scoped", "using"]
