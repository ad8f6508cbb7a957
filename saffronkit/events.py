"""Event types and the event records passed through the event store."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Set


class EventType(str, Enum):
    """Kinds of window and input events."""

    CLOSED = "eventClosed"
    MAXIMIZED = "eventMaximized"
    MINIMIZED = "eventMinimized"
    RESIZED = "eventResized"
    MOVED = "eventMoved"
    GAINED_FOCUS = "eventGainFocus"
    LOST_FOCUS = "eventLostFocus"

    MOUSE_BUTTON_PRESSED = "eventMousePressed"
    MOUSE_BUTTON_RELEASED = "eventMouseReleased"
    MOUSE_MOVED = "eventMouseMoved"
    MOUSE_WHEEL_SCROLLED = "eventMouseWheelScrolled"
    KEY_PRESSED = "eventKeyPressed"
    KEY_RELEASED = "eventKeyReleased"
    TEXT_ENTERED = "eventTextEntered"


_KEY_NAMES = [
    *string.ascii_uppercase,
    *(f"NUM{i}" for i in range(10)),
    "ESCAPE", "LCONTROL", "LSHIFT", "LALT", "LSYSTEM",
    "RCONTROL", "RSHIFT", "RALT", "RSYSTEM", "MENU",
    "LBRACKET", "RBRACKET", "SEMICOLON", "COMMA", "PERIOD",
    "QUOTE", "SLASH", "BACKSLASH", "TILDE", "EQUAL",
    "HYPHEN", "SPACE", "ENTER", "BACKSPACE", "TAB",
    "PAGE_UP", "PAGE_DOWN", "END", "HOME", "INSERT", "DELETE",
    "ADD", "SUBTRACT", "MULTIPLY", "DIVIDE",
    "LEFT", "RIGHT", "UP", "DOWN",
    *(f"NUMPAD{i}" for i in range(10)),
    *(f"F{i}" for i in range(1, 16)),
    "PAUSE",
]

Key = IntEnum(
    "Key",
    {"UNKNOWN": -1, **{name: code for code, name in enumerate(_KEY_NAMES)}},
    module=__name__,
)
Key.__doc__ = "Keyboard key codes."


class MouseButton(IntEnum):
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2
    X_BUTTON1 = 3
    X_BUTTON2 = 4


class MouseWheel(IntEnum):
    VERTICAL = 0
    HORIZONTAL = 1


@dataclass(kw_only=True)
class Event:
    """Base of all events: a type, an optional native handle and tags."""

    type: EventType
    native_handle: Any = None
    tags: Set[str] = field(default_factory=set)


@dataclass(kw_only=True)
class KeyEvent(Event):
    code: Key
    scancode: int = 0
    alt: bool = False
    control: bool = False
    shift: bool = False
    system: bool = False


@dataclass(kw_only=True)
class MouseButtonEvent(Event):
    button: MouseButton
    x: int = 0
    y: int = 0


@dataclass(kw_only=True)
class MouseMoveEvent(Event):
    type: EventType = EventType.MOUSE_MOVED
    x: int = 0
    y: int = 0


@dataclass(kw_only=True)
class MouseWheelScrollEvent(Event):
    type: EventType = EventType.MOUSE_WHEEL_SCROLLED
    wheel: MouseWheel = MouseWheel.VERTICAL
    delta: float = 0.0
    x: int = 0
    y: int = 0


@dataclass(kw_only=True)
class SizeEvent(Event):
    type: EventType = EventType.RESIZED
    width: int = 0
    height: int = 0


@dataclass(kw_only=True)
class TextEvent(Event):
    type: EventType = EventType.TEXT_ENTERED
    unicode: int = 0


@dataclass(kw_only=True)
class ClosedEvent(Event):
    type: EventType = EventType.CLOSED


@dataclass(kw_only=True)
class LostFocusEvent(Event):
    type: EventType = EventType.LOST_FOCUS


@dataclass(kw_only=True)
class GainedFocusEvent(Event):
    type: EventType = EventType.GAINED_FOCUS


@dataclass(kw_only=True)
class MouseEnteredEvent(Event):
    pass


@dataclass(kw_only=True)
class MouseLeftEvent(Event):
    pass