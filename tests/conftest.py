"""Global pytest fixtures for listkit."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from listkit.adapters import registry


@pytest.fixture
def restore_registry() -> Iterator[None]:
    """Snapshot the kind registry and restore it after the test."""
    # pylint: disable=protected-access
    saved = dict(registry._REGISTRY)
    yield
    registry._REGISTRY.clear()
    registry._REGISTRY.update(saved)


@pytest.fixture
def restore_listkit_logger() -> Iterator[logging.Logger]:
    """Yield the ``listkit`` logger and undo handler/level changes afterwards."""
    logger = logging.getLogger("listkit")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)


TESTS_ROOT = Path(__file__).parent.resolve()
# Tests under tests/<folder>/ get the mark of the same name by default.
FOLDER_MARKERS = ("unit", "contract")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config,  # pylint: disable=unused-argument
    items: list[pytest.Item],
) -> None:
    """Add default folder marks to items in `tests/unit/` and `tests/contract/`."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        for name in FOLDER_MARKERS:
            if TESTS_ROOT / name in path.parents:
                if not any(marker.name == name for marker in item.iter_markers()):
                    item.add_marker(getattr(pytest.mark, name))
