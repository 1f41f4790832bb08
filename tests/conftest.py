"""
Shared pytest fixtures for spine-fp tests.

This module provides:
- ``src/`` on sys.path so tests run from a plain checkout
- A counting callback for asserting a callback ran (or did not)
- Settings cache isolation between tests
"""

import logging
import sys
from pathlib import Path
from typing import Any

import pytest
import structlog

# Ensure spinefp package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from spinefp.core.settings import clear_settings_cache


class CallCounter:
    """Callable that records every call and returns a fixed value."""

    def __init__(self, returns: Any = None):
        self.returns = returns
        self.calls: list[tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.returns

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def callback() -> CallCounter:
    """A call counter returning None."""
    return CallCounter()


@pytest.fixture
def callback_factory():
    """Build call counters with a chosen return value."""
    return CallCounter


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Start every test from default settings."""
    for name in ("SPINE_FP_LOG_LEVEL", "SPINE_FP_JSON_LOGS", "SPINE_FP_SERVICE_NAME"):
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo configure_logging() calls made by a test."""
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)
