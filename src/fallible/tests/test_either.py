"""Tests for the Either container.

Validates:
- Construction and None rejection
- Accessors and illegal-state failures
- Combinators and structural equality
"""

from __future__ import annotations

import pytest

from fallible import Either, IllegalStateError, InvalidArgumentError, left, right


# ═════════════════════════════════════════════════════════════════════════════
# Construction & Accessors
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("value", [0, "", "err", [], ValueError("x")])
def test_left_construction(value: object) -> None:
    """Falsy but present values are accepted on the left."""
    e: Either[object, int] = Either.left(value)

    assert e.is_left()
    assert not e.is_right()
    assert e.get_left() is value
    with pytest.raises(IllegalStateError, match="Either is of type left."):
        e.get_right()


@pytest.mark.parametrize("value", [0, False, "ok", {1: 2}])
def test_right_construction(value: object) -> None:
    e: Either[str, object] = Either.right(value)

    assert e.is_right()
    assert not e.is_left()
    assert e.get_right() is value
    with pytest.raises(IllegalStateError, match="Either is of type right."):
        e.get_left()


def test_none_is_rejected() -> None:
    """Both factories fail with an invalid-argument condition on None."""
    with pytest.raises(InvalidArgumentError):
        Either.left(None)
    with pytest.raises(InvalidArgumentError):
        Either.right(None)
    with pytest.raises(ValueError):
        left(None)
    with pytest.raises(ValueError):
        right(None)


def test_illegal_state_is_runtime_error() -> None:
    with pytest.raises(RuntimeError):
        right(1).get_left()


def test_module_factories_match_static() -> None:
    assert left("a") == Either.left("a")
    assert right(1) == Either.right(1)


# ═════════════════════════════════════════════════════════════════════════════
# Combinators
# ═════════════════════════════════════════════════════════════════════════════


def test_map_right_only() -> None:
    assert right(5).map(lambda x: x * 2) == right(10)
    assert left("fail").map(lambda x: x * 2) == left("fail")


def test_map_left_only() -> None:
    assert left("fail").map_left(str.upper) == left("FAIL")
    assert right(5).map_left(str.upper) == right(5)


def test_bimap() -> None:
    assert right(5).bimap(str.upper, lambda x: x + 1) == right(6)
    assert left("e").bimap(str.upper, lambda x: x + 1) == left("E")


def test_flat_map_short_circuits() -> None:
    calls: list[int] = []

    def step(x: int) -> Either[str, int]:
        calls.append(x)
        return right(x + 1) if x < 2 else left(f"too big: {x}")

    assert right(0).flat_map(step).flat_map(step) == right(2)
    assert right(2).flat_map(step).flat_map(step) == left("too big: 2")
    assert left("early").flat_map(step) == left("early")
    assert calls == [0, 1, 2]


def test_fold() -> None:
    assert right(42).fold(left=lambda e: f"failed: {e}", right=lambda v: f"ok: {v}") == "ok: 42"
    assert left("x").fold(left=lambda e: f"failed: {e}", right=lambda v: f"ok: {v}") == "failed: x"


def test_swap() -> None:
    assert right(1).swap() == left(1)
    assert left("e").swap() == right("e")


def test_get_or_else_and_to_optional() -> None:
    assert right(3).get_or_else(0) == 3
    assert left("e").get_or_else(0) == 0
    assert right(3).to_optional() == 3
    assert left("e").to_optional() is None


def test_iteration() -> None:
    assert list(right(7)) == [7]
    assert list(left("e")) == []


# ═════════════════════════════════════════════════════════════════════════════
# Equality & Representation
# ═════════════════════════════════════════════════════════════════════════════


def test_structural_equality_distinguishes_sides() -> None:
    assert right(1) == right(1)
    assert left(1) != right(1)
    assert right(1) != 1


def test_hashable() -> None:
    assert len({right(1), right(1), left(1)}) == 2


def test_repr() -> None:
    assert repr(right(42)) == "Right(42)"
    assert repr(left("boom")) == "Left('boom')"
