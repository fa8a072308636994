from contextlib import contextmanager
from typing import Dict, Any


class MockNeedle:
    """
    Replaces the global `needle` lookup with a fixed template table.
    """

    def __init__(self, templates: Dict[str, str]):
        self._templates = templates

    def _mock_get(self, key: Any, **kwargs: Any) -> str:
        key_str = str(key)
        return self._templates.get(key_str, key_str)

    @contextmanager
    def patch(self, monkeypatch: Any):
        # MessageBus resolves templates through the module-level name.
        monkeypatch.setattr("ownerfile.common.messaging.bus.needle.get", self._mock_get)
        yield
