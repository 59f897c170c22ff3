"""Grouping combinators: runs, partitions and interleaving."""

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from listkit.adapters.registry import kind_of

from .elementary import concat, null

T = TypeVar("T")
S = TypeVar("S", bound=Sequence[Any])


def group(xs: S) -> Sequence[S]:
    """Split ``xs`` into maximal runs of consecutive equal elements.

    Concatenating the runs reproduces ``xs``. An empty input has no runs.

    Example:
        ``group([1, 1, 2, 2, 2, 3]) == [[1, 1], [2, 2, 2], [3]]``
    """
    kind = kind_of(xs)
    runs: list[list[Any]] = []
    for x in xs:
        if runs and runs[-1][0] == x:
            runs[-1].append(x)
        else:
            runs.append([x])
    return kind.nest(kind.build(run) for run in runs)


def partition(predicate: Callable[[T], bool], xs: S) -> tuple[S, S]:
    """Split ``xs`` into ``(matches, non_matches)``, each in original order.

    Example:
        ``partition(even, [1, 2, 3, 4, 5]) == ([2, 4], [1, 3, 5])``
    """
    matches: list[T] = []
    rest: list[T] = []
    for x in xs:
        (matches if predicate(x) else rest).append(x)
    kind = kind_of(xs)
    return kind.build(matches), kind.build(rest)


def intersperse(y: T, xs: S) -> S:
    """Insert ``y`` between every pair of adjacent elements of ``xs``.

    A non-empty input of length n yields 2n - 1 elements; an empty input
    stays empty.
    """
    out: list[Any] = []
    for i, x in enumerate(xs):
        if i:
            out.append(y)
        out.append(x)
    return kind_of(xs).build(out)


def intercalate(sep: S, xxs: Sequence[S]) -> S:
    """Join the sequences in ``xxs`` with ``sep`` between each pair.

    Equivalent to ``concat(intersperse(sep, xxs))``, except that an empty
    ``xxs`` yields an empty sequence of the same kind as ``sep``.

    Example:
        ``intercalate(", ", ["a", "b"]) == "a, b"``
    """
    if null(xxs):
        return kind_of(sep).empty()
    return concat(intersperse(sep, xxs))
