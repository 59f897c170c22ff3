"""Built-in sequence kinds for listkit."""

import itertools
from collections import deque
from collections.abc import Iterable
from typing import Any

from listkit.interfaces.sequence_kind import SequenceKind

# pylint: disable=too-few-public-methods


def _clamp(xs_size: int, start: int, stop: int) -> tuple[int, int]:
    start = min(max(start, 0), xs_size)
    stop = min(max(stop, start), xs_size)
    return start, stop


class ListKind(SequenceKind[list, Any]):
    """Kind for ``list`` values. Holds elements of any type."""

    name = "list"

    def size(self, xs: list) -> int:
        return len(xs)

    def slice(self, xs: list, start: int, stop: int) -> list:
        start, stop = _clamp(len(xs), start, stop)
        return xs[start:stop]

    def build(self, items: Iterable[Any]) -> list:
        return list(items)


class TupleKind(SequenceKind[tuple, Any]):
    """Kind for ``tuple`` values.

    Sequence-of-sequence results are tuples of tuples, so a tuple input never
    produces a list anywhere in its output.
    """

    name = "tuple"

    def size(self, xs: tuple) -> int:
        return len(xs)

    def slice(self, xs: tuple, start: int, stop: int) -> tuple:
        start, stop = _clamp(len(xs), start, stop)
        return xs[start:stop]

    def build(self, items: Iterable[Any]) -> tuple:
        return tuple(items)

    def nest(self, parts: Iterable[tuple]) -> tuple:
        return tuple(parts)


class StrKind(SequenceKind[str, str]):
    """Kind for ``str`` values; elements are one-character strings.

    Strings can only hold characters, so combinators whose element type may
    change (``fmap``, ``zip_with``, scans) produce a ``list`` instead.
    """

    name = "str"

    def size(self, xs: str) -> int:
        return len(xs)

    def slice(self, xs: str, start: int, stop: int) -> str:
        start, stop = _clamp(len(xs), start, stop)
        return xs[start:stop]

    def build(self, items: Iterable[str]) -> str:
        return "".join(items)

    def rebuild(self, items: Iterable[Any]) -> list:
        return list(items)


class BytesKind(SequenceKind[bytes, int]):
    """Kind for ``bytes`` values; elements are ints in ``range(256)``."""

    name = "bytes"

    def size(self, xs: bytes) -> int:
        return len(xs)

    def slice(self, xs: bytes, start: int, stop: int) -> bytes:
        start, stop = _clamp(len(xs), start, stop)
        return xs[start:stop]

    def build(self, items: Iterable[int]) -> bytes:
        return bytes(items)

    def rebuild(self, items: Iterable[Any]) -> list:
        return list(items)


class DequeKind(SequenceKind[deque, Any]):
    """Kind for ``collections.deque`` values.

    Deques do not support slicing, so sub-ranges are built by iteration,
    and indexing away from the ends is linear. Combinators that scan a
    sequence repeatedly (``group``, the splitters, ``is_infix_of``) walk it
    once instead of calling `get` or `slice` per position. The ``maxlen`` of
    the source is not carried over to results.
    """

    name = "deque"

    def size(self, xs: deque) -> int:
        return len(xs)

    def slice(self, xs: deque, start: int, stop: int) -> deque:
        start, stop = _clamp(len(xs), start, stop)
        return deque(itertools.islice(xs, start, stop))

    def build(self, items: Iterable[Any]) -> deque:
        return deque(items)


BUILTIN_KINDS: dict[type, SequenceKind[Any, Any]] = {
    list: ListKind(),
    tuple: TupleKind(),
    str: StrKind(),
    bytes: BytesKind(),
    deque: DequeKind(),
}
