"""Contract tests for positional combinators across every sequence kind."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from listkit import (
    NOTHING,
    OutOfRangeError,
    Some,
    at,
    break_when,
    drop,
    head,
    init,
    inits,
    last,
    span,
    split_at,
    tail,
    tails,
    take,
)

# pylint: disable=magic-value-comparison

Build = Callable[[str], Any]


def test_head_and_last(seq: Build, el: Build) -> None:
    """head/last return the end elements wrapped in Some."""
    assert head(seq("abc")) == Some(el("a"))
    assert last(seq("abc")) == Some(el("c"))


def test_head_and_last_of_empty_are_nothing(seq: Build) -> None:
    """head/last of an empty sequence are NOTHING, not an error."""
    assert head(seq("")) is NOTHING
    assert last(seq("")) is NOTHING


def test_tail_and_init(seq: Build) -> None:
    """tail/init drop one element from the front/back."""
    assert tail(seq("abc")) == seq("bc")
    assert init(seq("abc")) == seq("ab")
    assert tail(seq("a")) == seq("")


@pytest.mark.parametrize("operation", [tail, init])
def test_tail_and_init_of_empty_raise(seq: Build, operation) -> None:
    """Removing from an empty sequence is an OutOfRangeError."""
    with pytest.raises(OutOfRangeError):
        operation(seq(""))


def test_take_and_drop_clamp(seq: Build) -> None:
    """Counts larger than the size clamp instead of failing."""
    assert take(2, seq("abc")) == seq("ab")
    assert take(10, seq("abc")) == seq("abc")
    assert drop(2, seq("abc")) == seq("c")
    assert drop(10, seq("abc")) == seq("")
    assert take(0, seq("abc")) == seq("")


def test_split_at(seq: Build) -> None:
    """split_at returns (take, drop) as a pair."""
    assert split_at(1, seq("abc")) == (seq("a"), seq("bc"))
    assert split_at(5, seq("abc")) == (seq("abc"), seq(""))


def test_span_and_break_when(seq: Build, el: Build) -> None:
    """span/break_when cut at the first failing/matching element."""
    assert span(lambda x: x == el("a"), seq("aaba")) == (seq("aa"), seq("ba"))
    assert break_when(lambda x: x == el("b"), seq("aaba")) == (seq("aa"), seq("ba"))


def test_inits_and_tails(seq: Build, seqs: Callable[..., Any]) -> None:
    """inits/tails list every prefix/suffix including both endpoints."""
    assert inits(seq("ab")) == seqs("", "a", "ab")
    assert tails(seq("ab")) == seqs("ab", "b", "")


def test_inits_and_tails_of_empty(seq: Build, seqs: Callable[..., Any]) -> None:
    """The empty sequence has exactly one prefix and one suffix."""
    assert inits(seq("")) == seqs("")
    assert tails(seq("")) == seqs("")


def test_at_is_bounds_checked(seq: Build, el: Build) -> None:
    """at returns in-range elements and rejects anything else."""
    assert at(seq("abc"), 2) == el("c")
    with pytest.raises(OutOfRangeError):
        at(seq("abc"), 3)
    with pytest.raises(OutOfRangeError):
        at(seq("abc"), -1)
