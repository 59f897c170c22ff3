"""Explicit optional values for partial combinators.

This module defines the ``NOTHING`` singleton, the `Some` wrapper, the
`Maybe` type alias and a handful of helpers for consuming them.

A value of type ``Maybe[T]`` is in one of two states:

* ``Some(value)`` - a value is present. ``value`` may itself be ``None``.
* ``NOTHING`` - no value is present (e.g. ``head`` of an empty sequence).

Absence is never encoded as ``None`` or as an exception, so a sequence
holding ``None`` elements stays unambiguous: ``head([None]) == Some(None)``.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeGuard, TypeVar

T = TypeVar("T")
U = TypeVar("U")


def _get_nothing() -> "_NothingType":
    # Factory used by pickle to retrieve the one true instance.
    return NOTHING


@dataclass(frozen=True)
class _NothingType:
    """Marker for an absent value."""

    def __bool__(self) -> bool:  # falsy to simplify conditionals
        return False

    def __repr__(self) -> str:
        return "Nothing"

    def __reduce__(self):  # keep singleton on pickle
        return (_get_nothing, ())


# Singleton instance
NOTHING = _NothingType()


@dataclass(frozen=True, slots=True)
class Some(Generic[T]):
    """A present value.

    Always truthy, even when the wrapped value is falsy, so ``if result:``
    tests presence rather than the value itself.
    """

    value: T

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


type Maybe[T] = Some[T] | _NothingType


def is_some(m: Maybe[T]) -> TypeGuard[Some[T]]:
    """Return True if ``m`` holds a value."""
    return isinstance(m, Some)


def is_nothing(m: Maybe[T]) -> bool:
    """Return True if ``m`` is ``NOTHING``."""
    return not isinstance(m, Some)


def from_maybe(default: T, m: Maybe[T]) -> T:
    """Unwrap ``m``, falling back to ``default`` when it is ``NOTHING``."""
    if isinstance(m, Some):
        return m.value
    return default


def maybe(default: U, f: Callable[[T], U], m: Maybe[T]) -> U:
    """Apply ``f`` to the value in ``m``, or return ``default`` if absent.

    Args:
        default: Result when ``m`` is ``NOTHING``.
        f: Function applied to the wrapped value.
        m: The optional value.

    Returns:
        ``f(m.value)`` for ``Some``, otherwise ``default``.
    """
    if isinstance(m, Some):
        return f(m.value)
    return default


def cat_maybes(ms: Iterable[Maybe[T]]) -> list[T]:
    """Collect the values of every ``Some`` in ``ms``, in order."""
    return [m.value for m in ms if isinstance(m, Some)]
