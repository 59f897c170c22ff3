"""Function and scalar helpers that round out the combinator surface.

These carry no sequence semantics of their own but are the usual building
blocks for the predicates and functions passed to the combinators, e.g.
``partition(even, xs)`` or ``zip_with(flip(operator.sub), xs, ys)``.
"""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from listkit.errors import InvalidArgumentError

from ._support import require_count

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")


def identity(x: T) -> T:
    """Return ``x`` unchanged."""
    return x


def constant(x: T, _: Any = None) -> T:
    """Return ``x``, ignoring the second argument."""
    return x


def flip(f: Callable[[T, U], V]) -> Callable[[U, T], V]:
    """Return a function calling ``f`` with its two arguments swapped."""

    def flipped(y: U, x: T) -> V:
        return f(x, y)

    flipped.__name__ = f"flip({getattr(f, '__name__', repr(f))})"
    return flipped


def until(predicate: Callable[[T], bool], f: Callable[[T], T], x: T) -> T:
    """Apply ``f`` to ``x`` repeatedly until ``predicate`` holds.

    ``x`` itself is returned if it already satisfies ``predicate``. Does not
    terminate if ``predicate`` never becomes true.
    """
    while not predicate(x):
        x = f(x)
    return x


def even(n: int) -> bool:
    """Return True if ``n`` is divisible by two."""
    return n % 2 == 0


def odd(n: int) -> bool:
    """Return True if ``n`` is not divisible by two."""
    return not even(n)


def signum(x: Any) -> int:
    """Return -1, 0 or 1 according to the sign of ``x``."""
    if x < 0:
        return -1
    if x > 0:
        return 1
    return 0


def quot_rem(x: int, y: int) -> tuple[int, int]:
    """Return ``(quotient, remainder)`` with the quotient truncated toward zero.

    Unlike ``divmod`` the remainder takes the sign of ``x``:
    ``quot_rem(-7, 2) == (-3, -1)``. ``q * y + r == x`` always holds.

    Raises:
        InvalidArgumentError: If ``y`` is zero.
    """
    if y == 0:
        logger.debug("quot_rem rejected zero divisor for x=%r", x)
        raise InvalidArgumentError("quot_rem", "y", "division by zero")
    q = abs(x) // abs(y)
    if (x < 0) != (y < 0):
        q = -q
    return q, x - q * y


def replicate(n: int, x: T) -> list[T]:
    """Return a list of ``n`` copies of ``x``.

    Raises:
        InvalidArgumentError: If ``n`` is negative or not an ``int``.
    """
    return [x] * require_count("replicate", n)


def iterate(n: int, f: Callable[[T], T], x: T) -> list[T]:
    """Return the first ``n`` values of ``x, f(x), f(f(x)), ...``.

    Raises:
        InvalidArgumentError: If ``n`` is negative or not an ``int``.
    """
    n = require_count("iterate", n)
    out: list[T] = []
    for i in range(n):
        if i:
            x = f(x)
        out.append(x)
    return out
