"""Concrete sequence kinds and their registry."""

from .kinds import BytesKind, DequeKind, ListKind, StrKind, TupleKind
from .registry import kind_of, register_kind, registered_types, unregister_kind

__all__ = [
    "BytesKind",
    "DequeKind",
    "ListKind",
    "StrKind",
    "TupleKind",
    "kind_of",
    "register_kind",
    "registered_types",
    "unregister_kind",
]
