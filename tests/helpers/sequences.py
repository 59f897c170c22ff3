"""Helpers for building the same logical sequence in every built-in kind."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Sequence
from typing import Any

# Every built-in kind, by the name used in test ids.
KIND_NAMES = ["list", "tuple", "str", "bytes", "deque"]

_BUILDERS: dict[str, Callable[[str], Any]] = {
    "list": list,
    "tuple": tuple,
    "str": str,
    "bytes": lambda text: text.encode("ascii"),
    "deque": deque,
}


def make(kind_name: str, text: str) -> Any:
    """Build ``text`` as a sequence of the named kind.

    Elements are the characters of ``text`` (their code points for bytes), so
    one ASCII string describes the same sequence for every kind.
    """
    return _BUILDERS[kind_name](text)


def element(kind_name: str, ch: str) -> Any:
    """Return the single element ``ch`` as stored by the named kind."""
    return ord(ch) if kind_name == "bytes" else ch


def nested(kind_name: str, texts: Sequence[str]) -> Any:
    """Build the outer container a sequence-of-sequences result uses."""
    parts = [make(kind_name, t) for t in texts]
    return tuple(parts) if kind_name == "tuple" else parts


def unwrap(xs: Any) -> str:
    """Turn a sequence built by `make` back into its describing string."""
    if isinstance(xs, bytes):
        return xs.decode("ascii")
    return "".join(xs)
