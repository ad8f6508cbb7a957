"""A set of callbacks that can be triggered with a single payload."""

from __future__ import annotations

import uuid
from typing import Callable, Dict, Generic, NewType, Optional, TypeVar

HandlerID = NewType("HandlerID", str)

Payload = TypeVar("Payload")


def new_handler_id() -> HandlerID:
    """Return a fresh, unique handler identifier."""
    return HandlerID(str(uuid.uuid4()))


class SubscriberList(Generic[Payload]):
    """Callbacks keyed by handler id, all called when the list is triggered."""

    def __init__(self) -> None:
        self._subscribers: Dict[HandlerID, Optional[Callable[[Payload], object]]] = {}

    def subscribe(self, fn: Optional[Callable[[Payload], object]]) -> HandlerID:
        """Add a callback and return the id that identifies it."""
        handler_id = new_handler_id()
        self._subscribers[handler_id] = fn
        return handler_id

    def unsubscribe(self, handler_id: HandlerID) -> None:
        """Remove a callback; unknown ids are ignored."""
        self._subscribers.pop(handler_id, None)

    def subscribers(self) -> Dict[HandlerID, Optional[Callable[[Payload], object]]]:
        """Return a snapshot of the registered callbacks."""
        return dict(self._subscribers)

    def clear(self) -> None:
        """Remove every callback."""
        self._subscribers.clear()

    def has(self, handler_id: HandlerID) -> bool:
        """Tell whether a callback with this id is registered."""
        return handler_id in self._subscribers

    def trigger(self, payload: Payload) -> None:
        """Call every registered callback with the payload."""
        for fn in list(self._subscribers.values()):
            if fn is not None:
                fn(payload)

    def __len__(self) -> int:
        return len(self._subscribers)