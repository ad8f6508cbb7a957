"""Collects events from producers and dispatches them to handlers."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional, Protocol

from saffronkit.events import Event, EventType
from saffronkit.subscriber_list import HandlerID, new_handler_id

Handler = Callable[[Event], object]


class EventProducer(Protocol):
    def produce_events(self) -> Iterable[Event]: ...


class EventStore:
    """Dispatches produced events by type and by tag."""

    def __init__(self) -> None:
        self.producers: List[Optional[EventProducer]] = []
        self.handlers: Dict[EventType, Dict[HandlerID, Handler]] = {}
        self.tag_handlers: Dict[str, Dict[HandlerID, Handler]] = {}
        self.produced_events: List[Event] = []

    def register_producer(self, producer: Optional[EventProducer]) -> None:
        self.producers.append(producer)

    def register_handler(self, handler: Handler, *args: EventType) -> List[HandlerID]:
        """Register a handler for each given event type; return one id per type."""
        ids = []
        for event_type in args:
            handler_id = new_handler_id()
            self.handlers.setdefault(event_type, {})[handler_id] = handler
            ids.append(handler_id)
        return ids

    def register_handler_by_tags(self, handler: Handler, *args: str) -> List[HandlerID]:
        """Register a handler for each given tag; return one id per tag."""
        ids = []
        for tag in args:
            handler_id = new_handler_id()
            self.tag_handlers.setdefault(tag, {})[handler_id] = handler
            ids.append(handler_id)
        return ids

    def unregister(self, event_type: EventType, handler_id: HandlerID) -> None:
        """Remove a type handler; drop the type entirely once it has none."""
        handlers = self.handlers.get(event_type)
        if handlers is None:
            return
        handlers.pop(handler_id, None)
        if not handlers:
            del self.handlers[event_type]

    def process_events(self) -> None:
        """Poll every producer and deliver the collected events."""
        for producer in self.producers:
            if producer is not None:
                self.produced_events.extend(producer.produce_events() or ())

        events, self.produced_events = self.produced_events, []
        for event in events:
            for handler in list(self.handlers.get(event.type, {}).values()):
                handler(event)
            for tag in list(event.tags):
                for handler in list(self.tag_handlers.get(tag, {}).values()):
                    handler(event)