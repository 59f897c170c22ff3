"""Unit tests for listkit.maybe."""

import copy
import pickle

from listkit.maybe import (
    NOTHING,
    Some,
    cat_maybes,
    from_maybe,
    is_nothing,
    is_some,
    maybe,
)

# pylint: disable=magic-value-comparison


def test_nothing_is_falsy_and_named():
    """NOTHING is falsy and prints as Nothing."""
    assert not NOTHING
    assert repr(NOTHING) == "Nothing"


def test_nothing_survives_pickle_and_copy_as_singleton():
    """Round-tripping NOTHING yields the same object."""
    assert pickle.loads(pickle.dumps(NOTHING)) is NOTHING
    assert copy.deepcopy(NOTHING) is NOTHING


def test_some_is_truthy_even_for_falsy_values():
    """Some is truthy regardless of the wrapped value."""
    assert Some(0)
    assert Some(None)
    assert Some("")


def test_some_equality_and_repr():
    """Some compares and prints by its value."""
    assert Some(1) == Some(1)
    assert Some(1) != Some(2)
    assert Some(1) != NOTHING
    assert repr(Some("a")) == "Some('a')"


def test_is_some_and_is_nothing():
    """Predicates distinguish the two states."""
    assert is_some(Some(None))
    assert not is_some(NOTHING)
    assert is_nothing(NOTHING)
    assert not is_nothing(Some(0))


def test_from_maybe():
    """from_maybe unwraps Some and falls back for NOTHING."""
    assert from_maybe(0, Some(5)) == 5
    assert from_maybe(0, NOTHING) == 0


def test_maybe_applies_function_only_when_present():
    """maybe maps the value or returns the default untouched."""
    assert maybe("none", str, Some(3)) == "3"
    assert maybe("none", str, NOTHING) == "none"


def test_cat_maybes_keeps_present_values_in_order():
    """cat_maybes drops NOTHING and unwraps the rest."""
    assert cat_maybes([Some(1), NOTHING, Some(None), NOTHING, Some(3)]) == [1, None, 3]
    assert cat_maybes([]) == []
