"""Configuration: pydantic-validated defaults for scoped execution."""

from .settings import (
    FallibleSettings,
    ScopeSettings,
    clear_settings_cache,
    configure,
    get_settings,
)

__all__ = [
    "FallibleSettings",
    "ScopeSettings",
    "get_settings",
    "configure",
    "clear_settings_cache",
]
