"""Process-wide defaults for scoped execution, validated with pydantic.

Settings are configured in code only; nothing is read from the environment.

Example:
    >>> from fallible.foundation.config import configure, get_settings
    >>> get_settings().scope.disposer_errors
    'propagate'
    >>> configure(scope={"disposer_errors": "isolate"}).scope.disposer_errors
    'isolate'
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ScopeSettings(BaseModel):
    """Behavior of Garbage cleanup and the using() combinator."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    disposer_errors: Literal["propagate", "isolate"] = Field(
        default="propagate",
        description="'propagate': first disposer failure stops cleanup and is raised. "
        "'isolate': run every disposer, raise CleanupError afterwards.",
    )
    single_use: bool = Field(
        default=True,
        description="Reject a second with_() call on the same TryFinally",
    )


class FallibleSettings(BaseModel):
    """Root settings for fallible."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    scope: ScopeSettings = Field(default_factory=ScopeSettings)


_overrides: dict[str, object] = {}


@lru_cache(maxsize=1)
def get_settings() -> FallibleSettings:
    """Get the global settings instance (cached)."""
    return FallibleSettings.model_validate(_overrides)


def configure(**overrides: object) -> FallibleSettings:
    """Replace the global defaults. Raises pydantic.ValidationError on bad values.

    Example:
        >>> configure(scope={"single_use": False})
    """
    candidate = FallibleSettings.model_validate(overrides)
    _overrides.clear()
    _overrides.update(overrides)
    get_settings.cache_clear()
    return candidate


def clear_settings_cache() -> None:
    """Drop all overrides (useful for testing)."""
    _overrides.clear()
    get_settings.cache_clear()
