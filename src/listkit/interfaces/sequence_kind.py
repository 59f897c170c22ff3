"""Interface for sequence kinds."""

import abc
from collections.abc import Iterable, Sequence
from typing import Any, Generic, TypeVar

from listkit.errors import OutOfRangeError

S = TypeVar("S")  # the concrete sequence type, e.g. list or str
T = TypeVar("T")  # its element type


class SequenceKind(abc.ABC, Generic[S, T]):
    """Capability set of one concrete sequence type.

    A kind does not wrap values: it is a stateless strategy object looked up
    from a value's type (see `listkit.adapters.registry`). Every combinator is
    written against these capabilities, which is what lets the same contract
    hold for lists, tuples, strings, bytes and any registered container.

    Implementations must always return newly built values so that outputs
    never alias caller-owned inputs.
    """

    #: Short identifier used in logs and test ids.
    name: str = "abstract"

    # --- Core capabilities ---

    @abc.abstractmethod
    def size(self, xs: S) -> int:
        """Return the number of elements in ``xs``."""

    @abc.abstractmethod
    def slice(self, xs: S, start: int, stop: int) -> S:
        """Build a new sequence from the sub-range ``[start, stop)`` of ``xs``.

        Bounds are clamped to ``[0, size(xs)]``; an empty or inverted range
        yields an empty sequence.

        Args:
            xs: The source sequence.
            start: First index to include.
            stop: First index to exclude.

        Returns:
            A new sequence of the same kind.
        """

    @abc.abstractmethod
    def build(self, items: Iterable[T]) -> S:
        """Build a new sequence of this kind from ``items``."""

    # --- Derived capabilities ---

    def get(self, xs: S, index: int) -> T:
        """Return the element at ``index``.

        Raises:
            OutOfRangeError: If ``index`` is outside ``[0, size(xs))``. Negative
                indices do not wrap around.
        """
        size = self.size(xs)
        if not 0 <= index < size:
            raise OutOfRangeError("get", index, size)
        return self._get_unchecked(xs, index)

    def _get_unchecked(self, xs: S, index: int) -> T:
        return xs[index]  # type: ignore[index]

    def empty(self) -> S:
        """Return a new empty sequence of this kind."""
        return self.build(())

    def rebuild(self, items: Iterable[Any]) -> Sequence[Any]:
        """Build a sequence from elements whose type may differ from ``T``.

        Containers holding arbitrary objects return the same kind; containers
        restricted to one element type (``str``, ``bytes``) override this.
        """
        return self.build(items)  # type: ignore[return-value]

    def nest(self, parts: Iterable[S]) -> Sequence[S]:
        """Build the outer container of a sequence-of-sequences result."""
        return list(parts)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
