import pytest

from mindscape.core.events import DomainEvent, EventBus, event_bus, publish
from mindscape.domains.exercises.events import EVENT_CATALOG as EXERCISE_EVENTS
from mindscape.domains.journal.events import EVENT_CATALOG as JOURNAL_EVENTS
from mindscape.domains.moods.events import EVENT_CATALOG as MOOD_EVENTS
from mindscape.domains.resources.events import EVENT_CATALOG as RESOURCE_EVENTS

pytestmark = pytest.mark.unit


def test_subscribe_publish_unsubscribe():
    bus = EventBus()
    received = []
    bus.subscribe("custom.test", received.append)
    bus.publish(DomainEvent("custom.test", {"hello": "world"}))
    bus.publish(DomainEvent("other.test", {}))
    bus.unsubscribe("custom.test", received.append)
    bus.publish(DomainEvent("custom.test", {"again": True}))

    assert [e.payload for e in received] == [{"hello": "world"}]
    assert received[0].occurred_at.microsecond == 0


def test_module_publish_uses_global_bus():
    received = []
    event_bus.subscribe("custom.global", received.append)
    try:
        event = publish("custom.global", {"n": 1})
    finally:
        event_bus.unsubscribe("custom.global", received.append)
    assert received == [event]


def test_catalogs_are_namespaced_by_domain():
    for prefix, catalog in (
        ("moods.", MOOD_EVENTS),
        ("exercises.", EXERCISE_EVENTS),
        ("journal.", JOURNAL_EVENTS),
        ("resources.", RESOURCE_EVENTS),
    ):
        assert catalog
        for name, meta in catalog.items():
            assert name.startswith(prefix)
            assert meta["version"] == "v1"
            assert "payload" in meta
