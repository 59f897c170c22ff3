"""Configuration utilities for listkit.

The combinators themselves take no configuration. This module only reads
the environment variables that drive `listkit.logging.configure_logging`:

- ``LISTKIT_LOG_LEVEL``: level of the ``listkit`` logger (default WARNING).
- ``LISTKIT_LOGGER_LEVELS``: per-logger overrides as ``NAME=LEVEL`` items
  separated by commas and/or whitespace, e.g.
  ``"listkit.adapters=DEBUG, listkit.combinators=INFO"``.
"""

import logging
import os
import re

LOG_LEVEL_ENV = "LISTKIT_LOG_LEVEL"  # pragma: no mutate
LOGGER_LEVELS_ENV = "LISTKIT_LOGGER_LEVELS"  # pragma: no mutate
DEFAULT_LOG_LEVEL = logging.WARNING


class InvalidLogLevelError(ValueError):
    """Raised when a configured log level or NAME=LEVEL item cannot be parsed."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"Invalid log level setting {value!r}: {reason}")
        self.value = value
        self.reason = reason


def parse_level(level_str: str) -> int:
    """Convert a textual level name (case-insensitive) into its numeric value.

    Raises:
        InvalidLogLevelError: If ``level_str`` is not a standard level name.
    """
    lvl = logging.getLevelNamesMapping().get(level_str.strip().upper())
    if lvl is None:
        raise InvalidLogLevelError(level_str, "unknown level name")
    return lvl


def get_log_level() -> int:
    """Get the ``listkit`` logger level from the environment.

    Returns:
        The numeric level named by ``LISTKIT_LOG_LEVEL``, or WARNING when the
        variable is unset or empty.

    Raises:
        InvalidLogLevelError: If the variable names an unknown level.
    """
    if not (value := os.environ.get(LOG_LEVEL_ENV, "").strip()):
        return DEFAULT_LOG_LEVEL
    return parse_level(value)


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Normalize an input value into a flat list of items.

    Splits the input on commas and whitespace and removes empty fragments.
    Accepts either a single string (which may contain multiple comma/space-
    separated items) or a sequence of such strings.
    """
    items: list[str] = []
    if isinstance(value, (tuple, list)):
        for v in value:
            items.extend([s for s in re.split(r"[,\s]+", v) if s])
    else:  # plain string
        items.extend([s for s in re.split(r"[,\s]+", value) if s])
    return items


def parse_logger_levels(
    value: str | list[str] | tuple[str, ...] | None = None,
) -> dict[str, int]:
    """Parse NAME=LEVEL pairs into a name->level dict.

    Later items win when the same logger name appears twice.

    Args:
        value: The raw item(s). When None, ``LISTKIT_LOGGER_LEVELS`` is read
            from the environment (unset means no overrides).

    Returns:
        Mapping of logger names to numeric logging levels.

    Raises:
        InvalidLogLevelError: If an item is malformed (not NAME=LEVEL) or
            LEVEL is unknown.
    """
    if value is None:
        value = os.environ.get(LOGGER_LEVELS_ENV, "")
    levels: dict[str, int] = {}
    for item in _normalize_items(value):
        try:
            name, level_str = item.split("=", 1)
        except ValueError as e:
            raise InvalidLogLevelError(item, "expected NAME=LEVEL") from e
        if not name.strip():
            raise InvalidLogLevelError(item, "logger name is empty")
        levels[name.strip()] = parse_level(level_str)
    return levels
