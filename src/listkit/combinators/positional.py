"""Positional combinators: head/tail access, counting splits, prefixes and suffixes.

Counts are clamped: taking or dropping more elements than available yields
the whole or the empty sequence rather than failing. A negative count is a
precondition violation and raises `InvalidArgumentError`. Removing from an
empty sequence (``tail``/``init``) raises `OutOfRangeError`, while reading
from one (``head``/``last``) returns ``NOTHING``.
"""

import logging
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from listkit.adapters.registry import kind_of
from listkit.errors import OutOfRangeError
from listkit.maybe import NOTHING, Maybe, Some

from ._support import require_count, require_int, run_length

logger = logging.getLogger(__name__)

T = TypeVar("T")
S = TypeVar("S", bound=Sequence[Any])

# ============================================================================
#                              Element access
# ============================================================================


def head(xs: Sequence[T]) -> Maybe[T]:
    """Return the first element of ``xs``, or ``NOTHING`` when empty."""
    kind = kind_of(xs)
    if kind.size(xs) == 0:
        return NOTHING
    return Some(kind.get(xs, 0))


def last(xs: Sequence[T]) -> Maybe[T]:
    """Return the last element of ``xs``, or ``NOTHING`` when empty."""
    kind = kind_of(xs)
    size = kind.size(xs)
    if size == 0:
        return NOTHING
    return Some(kind.get(xs, size - 1))


def tail(xs: S) -> S:
    """Return ``xs`` without its first element.

    Raises:
        OutOfRangeError: If ``xs`` is empty.
    """
    kind = kind_of(xs)
    size = kind.size(xs)
    if size == 0:
        logger.debug("tail called on an empty %s", kind.name)
        raise OutOfRangeError("tail", None, 0)
    return kind.slice(xs, 1, size)


def init(xs: S) -> S:
    """Return ``xs`` without its last element.

    Raises:
        OutOfRangeError: If ``xs`` is empty.
    """
    kind = kind_of(xs)
    size = kind.size(xs)
    if size == 0:
        logger.debug("init called on an empty %s", kind.name)
        raise OutOfRangeError("init", None, 0)
    return kind.slice(xs, 0, size - 1)


def at(xs: Sequence[T], index: int) -> T:
    """Return the element of ``xs`` at ``index``.

    Negative indices are out of range; they do not count from the end.

    Raises:
        InvalidArgumentError: If ``index`` is not integer-like.
        OutOfRangeError: If ``index`` is outside ``[0, length(xs))``.
    """
    kind = kind_of(xs)
    index = require_int("at", index, "index")
    size = kind.size(xs)
    if not 0 <= index < size:
        logger.debug("at index %d outside %s of size %d", index, kind.name, size)
        raise OutOfRangeError("at", index, size)
    return kind.get(xs, index)


# ============================================================================
#                             Counting splits
# ============================================================================


def take(n: int, xs: S) -> S:
    """Return the first ``n`` elements of ``xs`` (all of them if fewer).

    Raises:
        InvalidArgumentError: If ``n`` is negative or not an ``int``.
    """
    n = require_count("take", n)
    return kind_of(xs).slice(xs, 0, n)


def drop(n: int, xs: S) -> S:
    """Return ``xs`` without its first ``n`` elements (empty if fewer).

    Raises:
        InvalidArgumentError: If ``n`` is negative or not an ``int``.
    """
    n = require_count("drop", n)
    kind = kind_of(xs)
    return kind.slice(xs, n, kind.size(xs))


def split_at(n: int, xs: S) -> tuple[S, S]:
    """Split ``xs`` into ``(take(n, xs), drop(n, xs))``.

    Concatenating the two parts always reproduces ``xs``.

    Raises:
        InvalidArgumentError: If ``n`` is negative or not an ``int``.
    """
    n = require_count("split_at", n)
    kind = kind_of(xs)
    return kind.slice(xs, 0, n), kind.slice(xs, n, kind.size(xs))


def span(predicate: Callable[[T], bool], xs: S) -> tuple[S, S]:
    """Split ``xs`` after its longest prefix satisfying ``predicate``.

    Example:
        ``span(lambda x: x < 3, [1, 2, 3, 1]) == ([1, 2], [3, 1])``
    """
    return split_at(run_length(predicate, xs), xs)


def break_when(predicate: Callable[[T], bool], xs: S) -> tuple[S, S]:
    """Split ``xs`` before the first element satisfying ``predicate``.

    Example:
        ``break_when(lambda x: x > 2, [1, 2, 3, 1]) == ([1, 2], [3, 1])``
    """
    return split_at(run_length(lambda x: not predicate(x), xs), xs)


# ============================================================================
#                           Prefixes & suffixes
# ============================================================================


def inits(xs: S) -> Sequence[S]:
    """Return every prefix of ``xs``, shortest first.

    The result has ``length(xs) + 1`` entries: the empty sequence first and
    ``xs`` itself (as a copy) last.
    """
    kind = kind_of(xs)
    size = kind.size(xs)
    return kind.nest(kind.slice(xs, 0, stop) for stop in range(size + 1))


def tails(xs: S) -> Sequence[S]:
    """Return every suffix of ``xs``, longest first.

    The result has ``length(xs) + 1`` entries: ``xs`` itself (as a copy)
    first and the empty sequence last.
    """
    kind = kind_of(xs)
    size = kind.size(xs)
    return kind.nest(kind.slice(xs, start, size) for start in range(size + 1))
