from contextlib import contextmanager
from typing import List, Dict, Any, Optional, Union

# Import the package, not the instance, so the singleton is patched in place.
import ownerfile.common
from ownerfile.common.messaging.protocols import Renderer
from ownerfile.needle import SemanticPointer


class SpyRenderer(Renderer):
    def __init__(self):
        self.messages: List[Dict[str, Any]] = []

    def render(self, message: str, level: str) -> None:
        pass

    def record(self, level: str, msg_id: SemanticPointer, params: Dict[str, Any]):
        self.messages.append({"level": level, "id": str(msg_id), "params": params})


class SpyBus:
    """
    Spies on the global ownerfile.common.bus singleton.

    Modules import the instance via 'from ownerfile.common import bus', so
    the instance is patched rather than replaced.
    """

    def __init__(self):
        self._spy_renderer = SpyRenderer()

    @contextmanager
    def patch(self, monkeypatch: Any):
        real_bus = ownerfile.common.bus

        def intercept_render(
            level: str, msg_id: Union[str, SemanticPointer], **kwargs: Any
        ) -> None:
            if isinstance(msg_id, SemanticPointer):
                self._spy_renderer.record(level, msg_id, kwargs)

        monkeypatch.setattr(real_bus, "_render", intercept_render)
        monkeypatch.setattr(real_bus, "_renderer", self._spy_renderer)

        yield self

    def get_messages(self) -> List[Dict[str, Any]]:
        return self._spy_renderer.messages

    def get_messages_by_id(self, msg_id: SemanticPointer) -> List[Dict[str, Any]]:
        key = str(msg_id)
        return [m for m in self.get_messages() if m["id"] == key]

    def assert_id_called(self, msg_id: SemanticPointer, level: Optional[str] = None):
        key = str(msg_id)
        captured = self.get_messages()

        for msg in captured:
            if msg["id"] == key and (level is None or msg["level"] == level):
                return

        ids_seen = [m["id"] for m in captured]
        raise AssertionError(
            f"Message with ID '{key}' was not sent.\nCaptured IDs: {ids_seen}"
        )

    def assert_id_not_called(self, msg_id: SemanticPointer):
        if self.get_messages_by_id(msg_id):
            raise AssertionError(f"Message with ID '{msg_id}' was sent unexpectedly.")
