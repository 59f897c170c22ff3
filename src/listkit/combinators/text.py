"""Text helpers: line/word splitting and joining, ASCII case conversion.

Thin specializations of the splitting and joining combinators for ``str``.
"""

from collections.abc import Sequence

from .elementary import filter_, fmap
from .grouping import intercalate
from .splitting import split_on

LINE_SEPARATOR = "\n"
WORD_SEPARATOR = " "

# ASCII letters are shifted by a fixed distance; nothing else is touched.
_CASE_SHIFT = ord("a") - ord("A")


def lines(text: str) -> list[str]:
    """Split ``text`` into lines on ``"\\n"``.

    A single trailing newline terminates the last line rather than starting
    an empty one, so ``lines("a\\nb\\n") == ["a", "b"]`` and
    ``lines("") == []``. Blank lines in the middle are kept.
    """
    if not text:
        return []
    fragments = list(split_on(LINE_SEPARATOR, text))
    if text.endswith(LINE_SEPARATOR):
        fragments.pop()
    return fragments


def unlines(ls: Sequence[str]) -> str:
    """Join ``ls`` terminating every line, the last included, with ``"\\n"``."""
    return "".join(line + LINE_SEPARATOR for line in ls)


def words(text: str) -> list[str]:
    """Split ``text`` on the space character, dropping empty words.

    Runs of spaces collapse: ``words("  a  b ") == ["a", "b"]``. Other
    whitespace (tabs, newlines) is part of a word.
    """
    return list(filter_(bool, split_on(WORD_SEPARATOR, text)))


def unwords(ws: Sequence[str]) -> str:
    """Join ``ws`` with single spaces, without a trailing space."""
    return intercalate(WORD_SEPARATOR, ws)


def _shift_upper(ch: str) -> str:
    if "a" <= ch <= "z":
        return chr(ord(ch) - _CASE_SHIFT)
    return ch


def _shift_lower(ch: str) -> str:
    if "A" <= ch <= "Z":
        return chr(ord(ch) + _CASE_SHIFT)
    return ch


def to_upper(text: str) -> str:
    """Convert the ASCII letters ``a-z`` in ``text`` to upper case.

    Every other character, separators and non-ASCII letters included, is
    returned unchanged.
    """
    return "".join(fmap(_shift_upper, text))


def to_lower(text: str) -> str:
    """Convert the ASCII letters ``A-Z`` in ``text`` to lower case."""
    return "".join(fmap(_shift_lower, text))
