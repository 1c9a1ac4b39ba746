import importlib
from contextlib import contextmanager
from typing import Dict, Any


class MockNeedle:
    """
    A test utility to mock the global `needle` runtime.
    """

    def __init__(self, templates: Dict[str, str]):
        self._templates = templates

    def _mock_get(self, key: Any, **kwargs: Any) -> str:
        key_str = str(key)
        return self._templates.get(key_str, key_str)

    @contextmanager
    def patch(self, monkeypatch: Any):
        # `selvage.common.messaging` re-exports the bus instance under the
        # submodule's name, so reach the module itself to find its runtime.
        bus_module = importlib.import_module("selvage.common.messaging.bus")
        monkeypatch.setattr(bus_module.needle, "get", self._mock_get)
        yield
