"""Interfaces (capability contracts) for listkit.

Defines the minimal capability set a concrete sequence type must provide so
that every combinator can operate on it. Combinators depend on these
contracts only, never on a concrete container.

Dependency rule: this package imports nothing from ``listkit`` except
``listkit.errors``. It may be imported by ``listkit.adapters`` and
``listkit.combinators``.
"""

from .sequence_kind import SequenceKind

__all__ = ["SequenceKind"]
