from ownerfile.common import bus
from ownerfile.needle import L


class BusNotifier:
    """Surfaces merge warnings through the global message bus."""

    def warn(self, title: str, detail: str) -> None:
        bus.warning(L.append.notification, title=title, detail=detail)
