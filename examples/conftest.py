"""Shared pytest configuration for wayfinder examples.

``example_app`` executes the ``app.py`` next to the requesting test as a
fresh module, so every test gets a newly built router. The module is also
registered in ``sys.modules`` as ``example_<dir>`` for the duration of the
test, which lets CLI tests name it as a router target.
"""

import importlib.util
import sys
import types
from pathlib import Path

import pytest

from wayfinder.routing.router import Router


@pytest.fixture
def example_app(request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch) -> types.ModuleType:
    app_path = Path(request.path).parent / "app.py"
    module_name = f"example_{app_path.parent.name}"
    spec = importlib.util.spec_from_file_location(module_name, app_path)
    assert spec is not None and spec.loader is not None, f"cannot load {app_path}"

    module = importlib.util.module_from_spec(spec)
    monkeypatch.setitem(sys.modules, module_name, module)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def example_router(example_app: types.ModuleType) -> Router:
    """The ``router`` defined by the example's app.py."""
    router = example_app.router
    assert isinstance(router, Router), "app.py must define a module-level Router named 'router'"
    return router
