"""Elementary combinators: mapping, filtering, folding and scanning.

Every function here depends only on the core capabilities of a
`SequenceKind` and returns a newly built value. Folds run left to right
starting from the first element; each one states its result for an empty
input explicitly:

====================  ==============
fold                  empty result
====================  ==============
``sum_``              ``0``
``product``           ``1``
``conjunction``       ``True``
``disjunction``       ``False``
``maximum``           ``NOTHING``
``minimum``           ``NOTHING``
``foldl1``            ``NOTHING``
====================  ==============
"""

import itertools
import operator
from collections.abc import Callable, Sequence
from functools import reduce
from typing import Any, TypeVar

from listkit.adapters.registry import kind_of
from listkit.maybe import NOTHING, Maybe, Some

from ._support import run_length

T = TypeVar("T")
U = TypeVar("U")
S = TypeVar("S", bound=Sequence[Any])

# ============================================================================
#                           Mapping & filtering
# ============================================================================


def fmap(f: Callable[[T], U], xs: Sequence[T]) -> Sequence[U]:
    """Apply ``f`` to every element of ``xs``, preserving order and length.

    The element type may change, so ``str`` and ``bytes`` inputs yield a list.

    Example:
        ``fmap(str.upper, ["a", "b"]) == ["A", "B"]``
    """
    return kind_of(xs).rebuild(f(x) for x in xs)


def filter_(predicate: Callable[[T], bool], xs: S) -> S:
    """Keep the elements of ``xs`` satisfying ``predicate``, in order."""
    return kind_of(xs).build(x for x in xs if predicate(x))


def take_while(predicate: Callable[[T], bool], xs: S) -> S:
    """Return the longest prefix of ``xs`` whose elements all satisfy ``predicate``.

    Unlike `filter_`, scanning stops at the first failing element.
    """
    kind = kind_of(xs)
    return kind.slice(xs, 0, run_length(predicate, xs))


def drop_while(predicate: Callable[[T], bool], xs: S) -> S:
    """Return ``xs`` without its longest prefix satisfying ``predicate``."""
    kind = kind_of(xs)
    return kind.slice(xs, run_length(predicate, xs), kind.size(xs))


# ============================================================================
#                                 Folds
# ============================================================================


def sum_(xs: Sequence[T]) -> T | int:
    """Add the elements of ``xs`` left to right; ``0`` when empty.

    Any type supporting ``+`` works, e.g. ``sum_(["ab", "c"]) == "abc"``.
    """
    if kind_of(xs).size(xs) == 0:
        return 0
    return reduce(operator.add, xs)


def product(xs: Sequence[T]) -> T | int:
    """Multiply the elements of ``xs`` left to right; ``1`` when empty."""
    if kind_of(xs).size(xs) == 0:
        return 1
    return reduce(operator.mul, xs)


def conjunction(xs: Sequence[Any]) -> bool:
    """Return True if every element of ``xs`` is truthy; True when empty."""
    return all(bool(x) for x in xs)


def disjunction(xs: Sequence[Any]) -> bool:
    """Return True if some element of ``xs`` is truthy; False when empty."""
    return any(bool(x) for x in xs)


def maximum(xs: Sequence[T]) -> Maybe[T]:
    """Return the largest element of ``xs``, or ``NOTHING`` when empty.

    Ties keep the first occurrence.
    """
    if kind_of(xs).size(xs) == 0:
        return NOTHING
    it = iter(xs)
    out = next(it)
    for x in it:
        if x > out:  # type: ignore[operator]
            out = x
    return Some(out)


def minimum(xs: Sequence[T]) -> Maybe[T]:
    """Return the smallest element of ``xs``, or ``NOTHING`` when empty.

    Ties keep the first occurrence.
    """
    if kind_of(xs).size(xs) == 0:
        return NOTHING
    it = iter(xs)
    out = next(it)
    for x in it:
        if x < out:  # type: ignore[operator]
            out = x
    return Some(out)


def foldl(f: Callable[[U, T], U], z: U, xs: Sequence[T]) -> U:
    """Left fold: ``f(...f(f(z, x0), x1)..., xn)``."""
    return reduce(f, xs, z)


def foldl1(f: Callable[[T, T], T], xs: Sequence[T]) -> Maybe[T]:
    """Left fold seeded with the first element; ``NOTHING`` when empty."""
    if kind_of(xs).size(xs) == 0:
        return NOTHING
    return Some(reduce(f, xs))


def foldr(f: Callable[[T, U], U], z: U, xs: Sequence[T]) -> U:
    """Right fold: ``f(x0, f(x1, ...f(xn, z)...))``."""
    out = z
    for x in reversed(xs):
        out = f(x, out)
    return out


def scanl(f: Callable[[U, T], U], z: U, xs: Sequence[T]) -> Sequence[U]:
    """Return every intermediate result of `foldl`, starting with ``z``.

    The result has one more element than ``xs``.
    """
    return kind_of(xs).rebuild(itertools.accumulate(xs, f, initial=z))


def scanl1(f: Callable[[T, T], T], xs: Sequence[T]) -> Sequence[T]:
    """Like `scanl` seeded with the first element; same length as ``xs``."""
    return kind_of(xs).rebuild(itertools.accumulate(xs, f))


def scanr(f: Callable[[T, U], U], z: U, xs: Sequence[T]) -> Sequence[U]:
    """Return every intermediate result of `foldr`, ending with ``z``."""
    kind = kind_of(xs)
    acc = [z]
    for x in reversed(xs):
        acc.append(f(x, acc[-1]))
    acc.reverse()
    return kind.rebuild(acc)


# ============================================================================
#                               Quantifiers
# ============================================================================


def any_(predicate: Callable[[T], bool], xs: Sequence[T]) -> bool:
    """Return True if some element satisfies ``predicate`` (False when empty)."""
    return any(predicate(x) for x in xs)


def all_(predicate: Callable[[T], bool], xs: Sequence[T]) -> bool:
    """Return True if every element satisfies ``predicate`` (True when empty)."""
    return all(predicate(x) for x in xs)


# ============================================================================
#                         Whole-sequence reshaping
# ============================================================================


def concat(xxs: Sequence[S]) -> S:
    """Flatten one level of nesting, preserving inner and outer order.

    The result has the kind of the first inner sequence. An empty outer
    sequence yields an empty value of the outer kind.

    Example:
        ``concat([[1], [], [2, 3]]) == [1, 2, 3]`` and
        ``concat(["ab", "c"]) == "abc"``
    """
    outer = kind_of(xxs)
    if outer.size(xxs) == 0:
        return outer.empty()
    inner = kind_of(next(iter(xxs)))
    return inner.build(itertools.chain.from_iterable(xxs))


def reverse(xs: S) -> S:
    """Return the elements of ``xs`` in reverse order."""
    return kind_of(xs).build(reversed(xs))


def sort(xs: S, key: Callable[[Any], Any] | None = None) -> S:
    """Return the elements of ``xs`` in ascending order.

    The sort is stable, so equal elements keep their relative order and
    sorting an already sorted sequence returns an equal sequence.
    """
    return kind_of(xs).build(sorted(xs, key=key))


def null(xs: Sequence[Any]) -> bool:
    """Return True if ``xs`` has no elements."""
    return kind_of(xs).size(xs) == 0


def length(xs: Sequence[Any]) -> int:
    """Return the number of elements in ``xs``."""
    return kind_of(xs).size(xs)
