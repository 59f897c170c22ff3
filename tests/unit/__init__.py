"""Unit tests.

Purpose
- Verify one listkit module in isolation, using plain lists and strings
  unless the behavior under test is specific to another kind.

Guidelines
- Pin exact results for small inputs, including the empty input.
- Cover every documented error path and its attributes.
- Restore any global state (kind registry, logger handlers) via the
  fixtures in ``tests/conftest.py``.
"""
