"""Unit tests for the built-in sequence kinds."""

from collections import deque

import pytest

from listkit.adapters.kinds import (
    BUILTIN_KINDS,
    BytesKind,
    DequeKind,
    ListKind,
    StrKind,
    TupleKind,
)
from listkit.errors import OutOfRangeError

# pylint: disable=magic-value-comparison


def test_builtin_kinds_cover_the_standard_containers():
    """Every standard sequence container has a kind."""
    assert set(BUILTIN_KINDS) == {list, tuple, str, bytes, deque}


@pytest.mark.parametrize(
    ("kind", "xs", "expected"),
    [
        (ListKind(), [1, 2, 3, 4], [2, 3]),
        (TupleKind(), (1, 2, 3, 4), (2, 3)),
        (StrKind(), "abcd", "bc"),
        (BytesKind(), b"abcd", b"bc"),
        (DequeKind(), deque([1, 2, 3, 4]), deque([2, 3])),
    ],
)
def test_slice(kind, xs, expected):
    """slice builds the half-open sub-range as the same type."""
    out = kind.slice(xs, 1, 3)
    assert out == expected
    assert type(out) is type(xs)


@pytest.mark.parametrize(("start", "stop"), [(-5, 2), (1, 99), (3, 1), (10, 20)])
def test_slice_clamps_bounds(start, stop):
    """Out-of-range and inverted bounds are clamped, never raised."""
    xs = [0, 1, 2, 3]
    lo = min(max(start, 0), len(xs))
    hi = min(max(stop, lo), len(xs))
    assert ListKind().slice(xs, start, stop) == xs[lo:hi]
    assert DequeKind().slice(deque(xs), start, stop) == deque(xs[lo:hi])


def test_slice_copies_mutable_input():
    """Slices of lists and deques do not alias the input."""
    xs = [1, 2, 3]
    out = ListKind().slice(xs, 0, 3)
    out.append(4)
    assert xs == [1, 2, 3]


def test_get_is_bounds_checked():
    """get rejects negative and too-large indices."""
    kind = StrKind()
    assert kind.get("abc", 0) == "a"
    with pytest.raises(OutOfRangeError) as excinfo:
        kind.get("abc", -1)
    assert excinfo.value.size == 3
    with pytest.raises(OutOfRangeError):
        kind.get("abc", 3)


def test_build_and_empty():
    """build and empty produce values of the kind's type."""
    assert StrKind().build(["a", "b"]) == "ab"
    assert BytesKind().build([97, 98]) == b"ab"
    assert TupleKind().empty() == ()
    assert DequeKind().empty() == deque()


def test_rebuild_falls_back_to_list_for_typed_containers():
    """str and bytes cannot hold arbitrary elements; others keep their type."""
    assert StrKind().rebuild([1, 2]) == [1, 2]
    assert BytesKind().rebuild(["x"]) == ["x"]
    assert TupleKind().rebuild([1, "a"]) == (1, "a")
    assert DequeKind().rebuild([None]) == deque([None])


def test_nest_outer_container():
    """Tuples nest in tuples; every other kind nests in a list."""
    assert TupleKind().nest([(1,), ()]) == ((1,), ())
    assert StrKind().nest(["a", "b"]) == ["a", "b"]
    assert DequeKind().nest([deque([1])]) == [deque([1])]


def test_repr_names_the_kind():
    """Kinds print their class and short name."""
    assert repr(ListKind()) == "<ListKind 'list'>"
