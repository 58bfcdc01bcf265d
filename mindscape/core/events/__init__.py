from mindscape.core.events.event_bus import DomainEvent, EventBus, event_bus, publish

__all__ = ["DomainEvent", "EventBus", "event_bus", "publish"]
