"""
Shared pytest fixtures and configuration for docspine tests.

This module provides:
- Reset of process-wide docspine state (appender, live-object docs, settings) between tests
- structlog reset so CLI log configuration does not leak across tests
- Registry fixtures (in-memory and a throwaway module for live objects)

Usage:
    Fixtures are auto-discovered by pytest. Use them as function arguments:

    def test_something(memory_registry):
        ...
"""

import os
import sys
import types
from pathlib import Path
from typing import Generator

import pytest
import structlog

# Ensure docspine package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from docspine.core.appender import reset_default_appender
from docspine.core.cache import reset_object_cache
from docspine.core.enums import DocKind
from docspine.core.registry import InMemoryDocRegistry, reset_object_docs
from docspine.core.settings import clear_settings_cache


FIXTURE_MODULE = "docspine_fixture_mod"


# =============================================================================
# Test Markers Configuration
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Mark tests without an explicit marker as unit tests."""
    for item in items:
        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "integration"}):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_process_state(monkeypatch) -> Generator[None, None, None]:
    """
    Reset process-wide docspine state before and after each test.

    Clears the default appender, the live-object baselines and overlay
    (restoring any __doc__ docspine wrote), the settings cache, and
    structlog configuration, and drops DOCSPINE_* variables from the
    environment.
    """
    for key in list(os.environ):
        if key.startswith("DOCSPINE_"):
            monkeypatch.delenv(key)
    reset_default_appender()
    reset_object_cache()
    reset_object_docs()
    clear_settings_cache()
    yield
    reset_default_appender()
    reset_object_cache()
    reset_object_docs()
    clear_settings_cache()
    structlog.reset_defaults()


# =============================================================================
# Registry Fixtures
# =============================================================================


@pytest.fixture
def memory_registry() -> InMemoryDocRegistry:
    """Registry with "foo" documented as "A" and "bar" undocumented."""
    return InMemoryDocRegistry({("foo", DocKind.CALLABLE): "A"})


@pytest.fixture
def fixture_module(monkeypatch) -> types.ModuleType:
    """
    A throwaway module registered in sys.modules.

    Contents:
        documented()  -- function with docstring "Documented."
        bare()        -- function without a docstring
        Widget        -- class with docstring "A widget."
        LIMIT         -- module constant (42)
    """
    module = types.ModuleType(FIXTURE_MODULE)

    def documented():
        """Documented."""

    def bare():
        pass

    class Widget:
        """A widget."""

    module.documented = documented
    module.bare = bare
    module.Widget = Widget
    module.LIMIT = 42
    monkeypatch.setitem(sys.modules, FIXTURE_MODULE, module)
    return module
