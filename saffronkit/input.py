"""Keyboard and mouse state built from input events."""

from __future__ import annotations

from typing import Dict, Optional

from saffronkit.event_store import EventStore
from saffronkit.events import (
    Event,
    EventType,
    Key,
    KeyEvent,
    MouseButton,
    MouseButtonEvent,
    MouseMoveEvent,
    MouseWheel,
    MouseWheelScrollEvent,
)
from saffronkit.geometry import Vector2

_HANDLED_TYPES = (
    EventType.KEY_PRESSED,
    EventType.KEY_RELEASED,
    EventType.MOUSE_BUTTON_PRESSED,
    EventType.MOUSE_BUTTON_RELEASED,
    EventType.MOUSE_MOVED,
    EventType.MOUSE_WHEEL_SCROLLED,
)


class InputStore:
    """Current and previous-frame state of keys, mouse buttons and the mouse."""

    def __init__(self, event_store: Optional[EventStore] = None) -> None:
        self._keys: Dict[Key, bool] = {}
        self._prev_keys: Dict[Key, bool] = {}
        self._buttons: Dict[MouseButton, bool] = {}
        self._prev_buttons: Dict[MouseButton, bool] = {}
        self._mouse_position = Vector2(0.0, 0.0)
        self._prev_mouse_position = Vector2(0.0, 0.0)
        self._vertical_scroll = 0.0
        self._horizontal_scroll = 0.0
        if event_store is not None:
            event_store.register_handler(self.handle_event, *_HANDLED_TYPES)

    def post_update(self) -> None:
        """End a frame: current state becomes previous, scroll deltas reset."""
        self._prev_keys.update(self._keys)
        self._prev_buttons.update(self._buttons)
        self._prev_mouse_position = Vector2(
            self._mouse_position.x, self._mouse_position.y
        )
        self._vertical_scroll = 0.0
        self._horizontal_scroll = 0.0

    def is_key_down(self, code: Key) -> bool:
        return self._keys.get(code, False)

    def is_key_pressed(self, code: Key) -> bool:
        return self._keys.get(code, False) and not self._prev_keys.get(code, False)

    def is_key_released(self, code: Key) -> bool:
        return not self._keys.get(code, False) and self._prev_keys.get(code, False)

    def is_mouse_button_down(self, button: MouseButton) -> bool:
        return self._buttons.get(button, False)

    def is_mouse_button_pressed(self, button: MouseButton) -> bool:
        return self._buttons.get(button, False) and not self._prev_buttons.get(
            button, False
        )

    def is_mouse_button_released(self, button: MouseButton) -> bool:
        return not self._buttons.get(button, False) and self._prev_buttons.get(
            button, False
        )

    def mouse_position(self) -> Vector2:
        return self._mouse_position

    def mouse_swipe(self) -> Vector2:
        """Mouse movement since the previous position."""
        return self._mouse_position - self._prev_mouse_position

    def vertical_scroll(self) -> float:
        return self._vertical_scroll

    def horizontal_scroll(self) -> float:
        return self._horizontal_scroll

    def handle_event(self, event: Event) -> None:
        """Update the state from one input event; other events are ignored."""
        if isinstance(event, KeyEvent) and event.type in (
            EventType.KEY_PRESSED,
            EventType.KEY_RELEASED,
        ):
            self._prev_keys[event.code] = self._keys.get(event.code, False)
            self._keys[event.code] = event.type is EventType.KEY_PRESSED
        elif isinstance(event, MouseButtonEvent) and event.type in (
            EventType.MOUSE_BUTTON_PRESSED,
            EventType.MOUSE_BUTTON_RELEASED,
        ):
            self._prev_buttons[event.button] = self._buttons.get(event.button, False)
            self._buttons[event.button] = (
                event.type is EventType.MOUSE_BUTTON_PRESSED
            )
        elif isinstance(event, MouseMoveEvent) and event.type is EventType.MOUSE_MOVED:
            self._prev_mouse_position = self._mouse_position
            self._mouse_position = Vector2(float(event.x), float(event.y))
        elif (
            isinstance(event, MouseWheelScrollEvent)
            and event.type is EventType.MOUSE_WHEEL_SCROLLED
        ):
            if event.wheel == MouseWheel.VERTICAL:
                self._vertical_scroll += event.delta
            elif event.wheel == MouseWheel.HORIZONTAL:
                self._horizontal_scroll += event.delta


Input: InputStore | None = None


def set_global_input(store: InputStore) -> None:
    """Install the input store used by the rest of the framework."""
    global Input
    Input = store