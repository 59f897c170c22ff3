"""Logging helpers for listkit.

The library only emits DEBUG records (kind registration and lookup, rejected
arguments) through module-level loggers under the ``listkit`` namespace and
never configures logging on import. Applications that want to see those
records can call `configure_logging`, which attaches a Rich console handler
to the ``listkit`` logger.
"""

from __future__ import annotations

import logging
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from listkit import config

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "listkit"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    For records whose logger name does not start with the project prefix,
    sets `record.prefix` to a short bracketed token like "[urllib3]". For
    project loggers the prefix is set to an empty string. The filter always
    returns True to allow the record to be processed.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """Attach a prefix to the record and allow it through."""
        if not record.name.startswith(PROJECT_PREFIX):
            # e.g. "urllib3.connectionpool" -> "[urllib3]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


class ListkitConsoleHandler(RichHandler):
    """RichHandler subclass marking handlers installed by `configure_logging`."""


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler for console output.

    The handler writes to stderr and supports optional color and a debug
    mode. In debug mode the handler is set to DEBUG and includes source
    file/line information; otherwise a short third-party prefix is applied.

    `configure_logging` attaches the handler to the ``listkit`` logger only,
    where every record is a project record. Applications that want
    third-party records on the same console attach it to the root logger
    instead (``logging.getLogger().addHandler(handler)``); those records are
    then prefixed with their top-level package, e.g. ``[urllib3]``.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, enable debug formatting (show_path, timestamps).
        color: Enable color output when True.

    Returns:
        RichHandler: Configured handler suitable to attach to a logger.
    """
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = ListkitConsoleHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    fmt = (
        "%(prefix)s %(message)s"
        if not debug_mode
        else "%(asctime)s %(name)s: %(message)s"
    )
    handler.setFormatter(logging.Formatter(fmt=fmt))

    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def configure_logging(
    level: int | None = None,
    *,
    debug_mode: bool = False,
    color: bool = True,
    logger_levels: dict[str, int] | None = None,
) -> RichHandler:
    """Attach a Rich console handler to the ``listkit`` logger.

    Calling this again replaces the handler installed by the previous call
    instead of stacking a second one.

    Args:
        level: Level of the ``listkit`` logger; read from
            ``LISTKIT_LOG_LEVEL`` when None.
        debug_mode: Passed to `config_console_handler`.
        color: Passed to `config_console_handler`.
        logger_levels: Per-logger overrides; read from
            ``LISTKIT_LOGGER_LEVELS`` when None.

    Returns:
        The installed handler.

    Raises:
        InvalidLogLevelError: If the environment holds an unparsable level.
    """
    if level is None:
        level = config.get_log_level()
    if logger_levels is None:
        logger_levels = config.parse_logger_levels()

    logger = logging.getLogger(PROJECT_PREFIX)
    for old in [h for h in logger.handlers if isinstance(h, ListkitConsoleHandler)]:
        logger.removeHandler(old)
        old.close()

    handler = config_console_handler(level=level, debug_mode=debug_mode, color=color)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug_mode else level)

    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    logger.debug(
        "Console logging configured: level=%s, overrides=%s",
        logging.getLevelName(level),
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
    )
    return handler
