import pytest

import ownerfile.common
from ownerfile.common import MessageBus
from ownerfile.needle import L
from ownerfile.test_utils import SpyBus, MockNeedle


class ListRenderer:
    def __init__(self):
        self.rendered = []

    def render(self, message: str, level: str) -> None:
        self.rendered.append((level, message))


def test_bus_forwards_to_renderer_with_spy(monkeypatch):
    spy_bus = SpyBus()

    with spy_bus.patch(monkeypatch):
        ownerfile.common.bus.info(L.greeting, name="World")
        ownerfile.common.bus.success(L.greeting, name="Ownerfile")

    messages = spy_bus.get_messages()
    assert len(messages) == 2
    assert messages[0] == {
        "level": "info",
        "id": "greeting",
        "params": {"name": "World"},
    }
    assert messages[1] == {
        "level": "success",
        "id": "greeting",
        "params": {"name": "Ownerfile"},
    }


def test_bus_renders_templates_through_needle(monkeypatch):
    bus = MessageBus()
    renderer = ListRenderer()
    bus.set_renderer(renderer)

    with MockNeedle({"greeting": "Hello {name}"}).patch(monkeypatch):
        bus.warning(L.greeting, name="World")
        bus.error(L.missing.key)

    assert renderer.rendered == [
        ("warning", "Hello World"),
        ("error", "missing.key"),
    ]


def test_bus_reports_formatting_errors(monkeypatch):
    bus = MessageBus()
    renderer = ListRenderer()
    bus.set_renderer(renderer)

    with MockNeedle({"greeting": "Hello {name}"}).patch(monkeypatch):
        bus.info(L.greeting)

    assert renderer.rendered == [("info", "<formatting_error for 'greeting'>")]


def test_bus_uses_packaged_catalog():
    rendered = ownerfile.common.bus.render_to_string(
        L.append.entry_exists, entry="build/"
    )

    assert rendered == "Entry 'build/' already exists"


def test_bus_does_not_fail_without_renderer():
    bus = MessageBus()
    try:
        bus.info("some.id")
        bus.debug(L.some.id)
    except Exception as e:
        pytest.fail(f"MessageBus raised an exception: {e}")
