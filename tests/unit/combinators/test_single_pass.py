"""Scanning combinators walk their input once instead of indexing into it.

A deque kind that counts `get` and `slice` calls stands in for any container
whose random access is slow.
"""

from collections import deque
from collections.abc import Iterator

import pytest

from listkit import group, is_infix_of, split_on, split_one_of, split_when
from listkit.adapters import registry
from listkit.adapters.kinds import DequeKind

# pylint: disable=redefined-outer-name,magic-value-comparison


class TracedDeque(deque):
    """A deque whose kind records positional access."""


class CountingDequeKind(DequeKind):
    """DequeKind that counts calls to its positional capabilities."""

    name = "traced-deque"

    def __init__(self) -> None:
        self.calls = 0

    def slice(self, xs, start, stop):
        self.calls += 1
        return super().slice(xs, start, stop)

    def _get_unchecked(self, xs, index):
        self.calls += 1
        return super()._get_unchecked(xs, index)


@pytest.fixture
def counting_kind(restore_registry) -> Iterator[CountingDequeKind]:
    """Register a counting kind for TracedDeque for one test."""
    kind = CountingDequeKind()
    registry.register_kind(TracedDeque, kind)
    yield kind


def test_group_walks_once(counting_kind):
    """group builds runs while iterating."""
    runs = group(TracedDeque("aabccc"))
    assert runs == [deque("aa"), deque("b"), deque("ccc")]
    assert counting_kind.calls == 0


def test_splitters_walk_once(counting_kind):
    """split_on, split_when and split_one_of never slice the haystack."""
    xs = TracedDeque("a,b,,c")
    expected = [deque("a"), deque("b"), deque(), deque("c")]
    assert split_on(",", xs) == expected
    assert split_when(lambda x: x == ",", xs) == expected
    assert split_one_of(",", xs) == expected
    assert counting_kind.calls == 0


def test_is_infix_of_walks_once(counting_kind):
    """is_infix_of compares against one copy of the haystack."""
    xs = TracedDeque("abcabd")
    assert is_infix_of("abd", xs)
    assert not is_infix_of("abe", xs)
    assert counting_kind.calls == 0
