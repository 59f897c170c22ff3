"""Splitting combinators: cut a sequence into fragments at separators.

Every splitter returns one more fragment than the number of separators it
found. Separators are not part of any fragment, and two adjacent separators
produce an empty fragment between them.

The input is walked once and fragments are built from plain lists, so the
cost does not depend on the container's indexing or slicing speed.
"""

import logging
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from listkit.adapters.registry import kind_of
from listkit.errors import InvalidArgumentError

from .elementary import length
from .relational import elem

logger = logging.getLogger(__name__)

T = TypeVar("T")
S = TypeVar("S", bound=Sequence[Any])


def split_on(needle: Sequence[Any], haystack: S) -> Sequence[S]:
    """Split ``haystack`` on every occurrence of the sub-sequence ``needle``.

    Occurrences are matched left to right and never overlap, so
    ``intercalate(needle, split_on(needle, haystack)) == haystack``.

    Example:
        ``split_on(",", "a,b,,c") == ["a", "b", "", "c"]``

    Raises:
        InvalidArgumentError: If ``needle`` is empty.
    """
    n = length(needle)
    if n == 0:
        logger.debug("split_on called with an empty needle")
        raise InvalidArgumentError("split_on", "needle", "must not be empty")

    kind = kind_of(haystack)
    pattern = list(needle)
    items = list(haystack)
    fragments: list[S] = []
    start = i = 0
    while i + n <= len(items):
        if items[i : i + n] == pattern:
            fragments.append(kind.build(items[start:i]))
            i += n
            start = i
        else:
            i += 1
    fragments.append(kind.build(items[start:]))
    return kind.nest(fragments)


def split_when(predicate: Callable[[T], bool], xs: S) -> Sequence[S]:
    """Split ``xs`` on every element satisfying ``predicate``.

    Example:
        ``split_when(lambda x: x < 0, [1, -1, 2, 3, -2]) == [[1], [2, 3], []]``
    """
    kind = kind_of(xs)
    fragments: list[S] = []
    current: list[Any] = []
    for x in xs:
        if predicate(x):
            fragments.append(kind.build(current))
            current = []
        else:
            current.append(x)
    fragments.append(kind.build(current))
    return kind.nest(fragments)


def split_one_of(needles: Sequence[Any], haystack: S) -> Sequence[S]:
    """Split ``haystack`` on every element equal to one of ``needles``.

    An empty ``needles`` never matches, giving a single fragment.

    Example:
        ``split_one_of(";,", "a;b,c") == ["a", "b", "c"]``
    """
    return split_when(lambda x: elem(x, needles), haystack)
