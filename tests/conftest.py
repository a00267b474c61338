"""Pytest configuration for the apihelper test suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from packages.apihelper.envelope import current_config, set_config
from packages.apihelper.errors import get_default_options, set_default_options
from packages.apihelper.logging import clear_context


@pytest.fixture(autouse=True)
def _restore_process_defaults() -> Iterator[None]:
    """Restore process-wide defaults that tests are allowed to change."""
    options = get_default_options()
    config = current_config()
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    set_default_options(*options)
    set_config(config)
    root.handlers[:] = handlers
    root.setLevel(level)
    clear_context()
