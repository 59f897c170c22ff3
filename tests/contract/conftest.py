"""Fixtures for combinator contract tests.

Every test taking ``kind_name`` runs once per built-in sequence kind, so a
single assertion pins the same contract for lists, tuples, strings, bytes
and deques.
"""

from collections.abc import Callable
from typing import Any

import pytest

from tests.helpers.sequences import KIND_NAMES, element, make, nested


@pytest.fixture(params=KIND_NAMES)
def kind_name(request: pytest.FixtureRequest) -> str:
    """Name of the sequence kind under test.

    Extend by adding a builder to ``tests.helpers.sequences`` and its name to
    ``KIND_NAMES``.
    """
    return request.param


@pytest.fixture
def seq(kind_name: str) -> Callable[[str], Any]:  # pylint: disable=redefined-outer-name
    """Build a sequence of the kind under test from a describing string."""
    return lambda text: make(kind_name, text)


@pytest.fixture
def el(kind_name: str) -> Callable[[str], Any]:  # pylint: disable=redefined-outer-name
    """Build one element of the kind under test from a character."""
    return lambda ch: element(kind_name, ch)


@pytest.fixture
def seqs(kind_name: str) -> Callable[..., Any]:  # pylint: disable=redefined-outer-name
    """Build the expected outer container of a nested result."""
    return lambda *texts: nested(kind_name, texts)
