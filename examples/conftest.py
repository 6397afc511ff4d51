"""Shared pytest configuration for routekit examples.

Provides the ``example_routes`` fixture that loads the ``routes.py`` file
in the same directory as the test.  Each call re-executes routes.py in an
isolated module namespace, so every test starts with a fresh registry.
"""

import importlib.util
from pathlib import Path
from types import ModuleType

import pytest


@pytest.fixture
def example_routes(request: pytest.FixtureRequest) -> ModuleType:
    """Load a fresh routes module from the sibling routes.py next to the test."""
    routes_path = Path(request.path).parent / "routes.py"
    module_name = f"example_{routes_path.parent.name}"
    spec = importlib.util.spec_from_file_location(module_name, routes_path)
    assert spec is not None
    assert spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module
