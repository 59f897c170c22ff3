"""Resolution of sequence values to their kinds."""

import logging
from typing import Any

from listkit.errors import InvalidArgumentError
from listkit.interfaces.sequence_kind import SequenceKind

from .kinds import BUILTIN_KINDS

logger = logging.getLogger(__name__)

_REGISTRY: dict[type, SequenceKind[Any, Any]] = dict(BUILTIN_KINDS)


def register_kind(tp: type, kind: SequenceKind[Any, Any]) -> None:
    """Plug a concrete sequence type into every combinator.

    Registering a type that already has a kind replaces the previous entry.

    Args:
        tp: The concrete container type, e.g. ``array.array``.
        kind: The kind implementing the capability set for ``tp``.

    Raises:
        InvalidArgumentError: If ``kind`` is not a `SequenceKind`.
    """
    if not isinstance(kind, SequenceKind):
        logger.debug("register_kind rejected %r for %s", kind, tp.__name__)
        raise InvalidArgumentError(
            "register_kind", "kind", f"expected a SequenceKind, got {type(kind).__name__}"
        )
    if tp in _REGISTRY:
        logger.debug("Replacing kind for %s: %r -> %r", tp.__name__, _REGISTRY[tp], kind)
    else:
        logger.debug("Registering kind %r for %s", kind, tp.__name__)
    _REGISTRY[tp] = kind


def unregister_kind(tp: type) -> None:
    """Remove the kind registered for exactly ``tp``, if any."""
    if _REGISTRY.pop(tp, None) is not None:
        logger.debug("Unregistered kind for %s", tp.__name__)


def kind_of(xs: Any) -> SequenceKind[Any, Any]:
    """Return the kind for the value ``xs``.

    The exact type is looked up first, then each base class in method
    resolution order, so subclasses of ``list`` or ``str`` resolve to the
    kind of their base. Results for subclasses are built as the base type.

    Raises:
        InvalidArgumentError: If no kind is registered for the value's type.
    """
    tp = type(xs)
    if kind := _REGISTRY.get(tp):
        return kind
    for base in tp.__mro__[1:]:
        if kind := _REGISTRY.get(base):
            logger.debug("Resolved %s to kind %r via base %s", tp.__name__, kind, base.__name__)
            return kind
    logger.debug("No kind registered for %s", tp.__name__)
    raise InvalidArgumentError(
        "kind_of", "xs", f"no sequence kind registered for type {tp.__name__}"
    )


def registered_types() -> tuple[type, ...]:
    """Return the currently registered container types."""
    return tuple(_REGISTRY)
