"""Combinatorial generators: subsets, permutations, transposition and zipping.

Despite the name these are eager: every function materializes its complete
result, which grows as 2^n (`subsets`) or n! (`permutations`).
"""

import itertools
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from listkit.adapters.registry import kind_of

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
S = TypeVar("S", bound=Sequence[Any])


def subsets(xs: S) -> Sequence[S]:
    """Return all 2^n subsets of ``xs``.

    The collection starts with the empty subset and doubles once per element:
    each accumulated subset is copied and extended by that element, keeping
    the element order of ``xs`` inside every subset.

    Example:
        ``subsets([1, 2]) == [[], [1], [2], [1, 2]]``
    """
    kind = kind_of(xs)
    out: list[S] = [kind.empty()]
    for x in xs:
        out.extend([kind.build(itertools.chain(s, (x,))) for s in out])
    return kind.nest(out)


def _next_permutation(positions: list[int]) -> bool:
    """Advance ``positions`` in place to its lexicographic successor.

    Returns False (leaving the list sorted ascending again) once the last
    arrangement has been passed.
    """
    i = len(positions) - 2
    while i >= 0 and positions[i] >= positions[i + 1]:
        i -= 1
    if i < 0:
        positions.reverse()
        return False
    j = len(positions) - 1
    while positions[j] <= positions[i]:
        j -= 1
    positions[i], positions[j] = positions[j], positions[i]
    positions[i + 1 :] = reversed(positions[i + 1 :])
    return True


def permutations(xs: S) -> Sequence[S]:
    """Return all n! orderings of ``xs`` in lexicographic order.

    Elements are stably sorted first, then their positions are advanced
    through every lexicographic arrangement. Positions are always distinct,
    so equal elements produce repeated permutations rather than being
    deduplicated: ``permutations([1, 1])`` has two entries. Elements must
    support ``<``.

    Example:
        ``permutations([2, 1]) == [[1, 2], [2, 1]]``
    """
    kind = kind_of(xs)
    ordered = sorted(xs)
    positions = list(range(len(ordered)))
    out: list[S] = []
    while True:
        out.append(kind.build(ordered[p] for p in positions))
        if not _next_permutation(positions):
            break
    return kind.nest(out)


def transpose(xxs: Sequence[S]) -> Sequence[S]:
    """Turn the rows of ``xxs`` into columns.

    Ragged input is allowed: a row that runs out simply stops contributing,
    so output row i has one element per input row longer than i.

    Example:
        ``transpose(["abc", "de", "f"]) == ["adf", "be", "c"]``
    """
    outer = kind_of(xxs)
    columns: list[list[Any]] = []
    for row in xxs:
        for j, x in enumerate(row):
            if j >= len(columns):
                columns.append([x])
            else:
                columns[j].append(x)
    if not columns:
        return outer.nest([])
    inner = kind_of(next(iter(xxs)))
    return outer.nest(inner.build(column) for column in columns)


def zip_(xs: Sequence[T], ys: Sequence[U]) -> Sequence[tuple[T, U]]:
    """Pair up the elements of ``xs`` and ``ys`` positionally.

    The result is as long as the shorter input; the excess of the longer one
    is dropped.
    """
    return kind_of(xs).nest(zip(xs, ys))


def zip_with(f: Callable[[T, U], V], xs: Sequence[T], ys: Sequence[U]) -> Sequence[V]:
    """Combine ``xs`` and ``ys`` positionally with ``f``.

    Example:
        ``zip_with(operator.add, [1, 2, 3], [10, 20]) == [11, 22]``
    """
    return kind_of(xs).rebuild(f(x, y) for x, y in zip(xs, ys))


def unzip(pairs: Sequence[tuple[T, U]]) -> tuple[Sequence[T], Sequence[U]]:
    """Split a sequence of pairs into ``(firsts, seconds)``."""
    kind = kind_of(pairs)
    return kind.rebuild(a for a, _ in pairs), kind.rebuild(b for _, b in pairs)
