"""Tests for configuration and the error hierarchy."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fallible import (
    CleanupError,
    ErrorCode,
    FallibleError,
    FallibleSettings,
    IllegalStateError,
    InvalidArgumentError,
    ScopeReusedError,
    ScopeSettings,
    UncheckedError,
    clear_settings_cache,
    configure,
    get_settings,
    walk_causes,
)


# ═════════════════════════════════════════════════════════════════════════════
# Settings
# ═════════════════════════════════════════════════════════════════════════════


def test_defaults() -> None:
    s = get_settings()
    assert s.scope.disposer_errors == "propagate"
    assert s.scope.single_use is True


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_configure_and_clear() -> None:
    configured = configure(scope={"disposer_errors": "isolate"})

    assert configured.scope.disposer_errors == "isolate"
    assert get_settings().scope.disposer_errors == "isolate"

    clear_settings_cache()
    assert get_settings().scope.disposer_errors == "propagate"


def test_invalid_configuration_keeps_previous() -> None:
    configure(scope={"single_use": False})
    with pytest.raises(ValidationError):
        configure(scope={"disposer_errors": "ignore"})
    assert get_settings().scope.single_use is False


def test_unknown_keys_rejected() -> None:
    with pytest.raises(ValidationError):
        ScopeSettings(retries=3)  # type: ignore[call-arg]
    with pytest.raises(ValidationError):
        FallibleSettings.model_validate({"logging": {}})


def test_settings_are_frozen() -> None:
    with pytest.raises(ValidationError):
        get_settings().scope.single_use = False  # type: ignore[misc]


# ═════════════════════════════════════════════════════════════════════════════
# Errors
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize(
    ("exc", "code", "builtin"),
    [
        (InvalidArgumentError("x"), ErrorCode.INVALID_ARGUMENT, ValueError),
        (IllegalStateError("x"), ErrorCode.ILLEGAL_STATE, RuntimeError),
        (ScopeReusedError("x"), ErrorCode.SCOPE_REUSED, IllegalStateError),
        (UncheckedError("x"), ErrorCode.UNCHECKED, RuntimeError),
        (CleanupError([]), ErrorCode.CLEANUP_FAILED, FallibleError),
    ],
)
def test_error_codes_and_bases(exc: FallibleError, code: ErrorCode, builtin: type[Exception]) -> None:
    assert exc.code is code
    assert isinstance(exc, FallibleError)
    assert isinstance(exc, builtin)


def test_hint_in_message() -> None:
    assert str(InvalidArgumentError("bad", hint="pass a value")) == "bad (hint: pass a value)"
    assert str(InvalidArgumentError("bad")) == "bad"


def test_unchecked_wrap() -> None:
    original = KeyError("k")
    err = UncheckedError.wrap(original)
    assert err.cause is original
    assert "KeyError" in str(err)


def test_walk_causes_stops_on_cycle() -> None:
    a, b = ValueError("a"), ValueError("b")
    a.__cause__, b.__cause__ = b, a
    assert list(walk_causes(a)) == [a, b]
