"""Argument checks and scanning helpers shared by the combinator modules."""

import logging
import operator
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from listkit.adapters.registry import kind_of
from listkit.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def require_int(operation: str, n: object, argument: str) -> int:
    """Return ``n`` as an ``int`` if it is integer-like.

    Anything implementing ``__index__`` is accepted (e.g. ``numpy.int64``);
    ``bool`` is rejected even though it subclasses ``int``.

    Raises:
        InvalidArgumentError: If ``n`` is not integer-like.
    """
    try:
        if isinstance(n, bool):
            raise TypeError("bool is not an integer argument")
        return operator.index(n)  # type: ignore[arg-type]
    except TypeError as e:
        logger.debug("%s rejected non-integer %s=%r", operation, argument, n)
        raise InvalidArgumentError(
            operation, argument, f"expected an int, got {type(n).__name__}"
        ) from e


def require_count(operation: str, n: object, argument: str = "n") -> int:
    """Return ``n`` as an ``int`` if it is a non-negative integer.

    Raises:
        InvalidArgumentError: If ``n`` is not a non-negative integer.
    """
    n = require_int(operation, n, argument)
    if n < 0:
        logger.debug("%s rejected negative %s=%d", operation, argument, n)
        raise InvalidArgumentError(operation, argument, f"must be non-negative, got {n}")
    return n


def run_length(predicate: Callable[[Any], bool], xs: Iterable[Any]) -> int:
    """Return the length of the maximal front run of ``xs`` satisfying ``predicate``."""
    count = 0
    for x in xs:
        if not predicate(x):
            break
        count += 1
    return count


def same_elements(xs: Sequence[Any], ys: Sequence[Any]) -> bool:
    """Return True if ``xs`` and ``ys`` hold equal elements in the same order.

    Compares element-wise so that e.g. a list needle matches a tuple haystack.
    """
    return kind_of(xs).size(xs) == kind_of(ys).size(ys) and all(
        x == y for x, y in zip(xs, ys)
    )
