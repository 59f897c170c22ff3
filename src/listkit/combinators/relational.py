"""Relational combinators: membership, set-like operations and containment.

All comparisons use element equality (``==``) only, so elements do not need
to be hashable or ordered. The cost is quadratic in the worst case.
"""

import itertools
from collections.abc import Sequence
from typing import Any, TypeVar

from listkit.adapters.registry import kind_of

from ._support import same_elements
from .elementary import any_, filter_, length
from .positional import drop, take

T = TypeVar("T")
S = TypeVar("S", bound=Sequence[Any])


# ============================================================================
#                               Membership
# ============================================================================


def elem(x: T, xs: Sequence[T]) -> bool:
    """Return True if some element of ``xs`` equals ``x``."""
    return any_(lambda y: x == y, xs)


def not_elem(x: T, xs: Sequence[T]) -> bool:
    """Return True if no element of ``xs`` equals ``x``."""
    return not elem(x, xs)


# ============================================================================
#                             Set-like operations
# ============================================================================


def intersect(xs: S, ys: Sequence[Any]) -> S:
    """Keep the elements of ``xs`` that also occur in ``ys``.

    Order and multiplicity come from ``xs``: every duplicate in ``xs`` is
    tested on its own.

    Example:
        ``intersect([1, 1, 2, 3], [3, 1]) == [1, 1, 3]``
    """
    return filter_(lambda x: elem(x, ys), xs)


def union_of(xs: S, ys: Sequence[Any]) -> S:
    """Elements of ``xs`` not occurring in ``ys``, followed by all of ``ys``.

    Neither part is deduplicated internally.

    Example:
        ``union_of([1, 2, 2, 4], [2, 3, 3]) == [1, 4, 2, 3, 3]``
    """
    kept = (x for x in xs if not_elem(x, ys))
    return kind_of(xs).build(itertools.chain(kept, ys))


def nub(xs: S) -> S:
    """Remove duplicates from ``xs``, keeping each first occurrence in order."""
    out: list[Any] = []
    for x in xs:
        if not_elem(x, out):
            out.append(x)
    return kind_of(xs).build(out)


def delete(x: T, xs: S) -> S:
    """Remove the first element of ``xs`` equal to ``x``, if any."""
    kind = kind_of(xs)
    out = list(xs)
    for i, y in enumerate(out):
        if x == y:
            del out[i]
            break
    return kind.build(out)


def difference(xs: S, ys: Sequence[Any]) -> S:
    """Remove one occurrence from ``xs`` for every element of ``ys``.

    Example:
        ``difference([1, 2, 1, 3], [1, 3, 5]) == [2, 1]``
    """
    kind = kind_of(xs)
    out = list(xs)
    for y in ys:
        for i, x in enumerate(out):
            if x == y:
                del out[i]
                break
    return kind.build(out)


# ============================================================================
#                                Containment
# ============================================================================


def is_prefix_of(needle: Sequence[Any], haystack: Sequence[Any]) -> bool:
    """Return True if ``haystack`` starts with ``needle``.

    The empty sequence is a prefix of everything, including itself.
    """
    n = length(needle)
    return n <= length(haystack) and same_elements(needle, take(n, haystack))


def is_suffix_of(needle: Sequence[Any], haystack: Sequence[Any]) -> bool:
    """Return True if ``haystack`` ends with ``needle``.

    The empty sequence is a suffix of everything, including itself.
    """
    n = length(needle)
    size = length(haystack)
    return n <= size and same_elements(needle, drop(size - n, haystack))


def is_infix_of(needle: Sequence[Any], haystack: Sequence[Any]) -> bool:
    """Return True if ``needle`` occurs contiguously somewhere in ``haystack``.

    The empty sequence is an infix of everything, including itself.
    """
    n = length(needle)
    size = length(haystack)
    pattern = list(needle)
    items = list(haystack)
    return any(items[start : start + n] == pattern for start in range(size - n + 1))
