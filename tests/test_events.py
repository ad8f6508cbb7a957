import pytest

from saffronkit.events import (
    ClosedEvent,
    EventType,
    GainedFocusEvent,
    Key,
    KeyEvent,
    LostFocusEvent,
    MouseButton,
    MouseButtonEvent,
    MouseEnteredEvent,
    MouseMoveEvent,
    MouseWheel,
    MouseWheelScrollEvent,
    SizeEvent,
    TextEvent,
)


def test_event_type_values_resolve_from_strings():
    assert EventType("eventMousePressed") is EventType.MOUSE_BUTTON_PRESSED
    assert EventType("eventGainFocus") is EventType.GAINED_FOCUS
    assert EventType.CLOSED == "eventClosed"


def test_unknown_event_type_string_raises():
    with pytest.raises(ValueError):
        EventType("eventNothing")


def test_key_event_carries_fields():
    event = KeyEvent(type=EventType.KEY_PRESSED, code=Key.Q, shift=True)
    assert event.type is EventType.KEY_PRESSED
    assert event.code is Key.Q
    assert event.shift is True
    assert event.alt is False


def test_number_key_codes_resolve_by_value():
    event = KeyEvent(type=EventType.KEY_RELEASED, code=Key(Key.NUM0 + 1))
    assert event.code is Key.NUM1
    assert Key(Key.NUM9.value) is Key.NUM9


def test_single_kind_events_have_default_types():
    assert MouseMoveEvent(x=1, y=2).type is EventType.MOUSE_MOVED
    assert MouseWheelScrollEvent().type is EventType.MOUSE_WHEEL_SCROLLED
    assert SizeEvent(width=3, height=4).type is EventType.RESIZED
    assert TextEvent(unicode=65).type is EventType.TEXT_ENTERED
    assert ClosedEvent().type is EventType.CLOSED
    assert LostFocusEvent().type is EventType.LOST_FOCUS
    assert GainedFocusEvent().type is EventType.GAINED_FOCUS


def test_events_require_keyword_arguments():
    with pytest.raises(TypeError):
        MouseButtonEvent(EventType.MOUSE_BUTTON_PRESSED, MouseButton.LEFT)


def test_type_is_required_where_ambiguous():
    with pytest.raises(TypeError):
        KeyEvent(code=Key.A)
    with pytest.raises(TypeError):
        MouseEnteredEvent()


def test_tags_are_independent_per_event():
    first = ClosedEvent()
    second = ClosedEvent()
    first.tags.add("window")
    assert first.tags == {"window"}
    assert second.tags == set()


def test_wheel_event_fields():
    event = MouseWheelScrollEvent(wheel=MouseWheel.HORIZONTAL, delta=1.5, x=3, y=4)
    assert event.wheel is MouseWheel.HORIZONTAL
    assert event.delta == 1.5
    assert (event.x, event.y) == (3, 4)


def test_events_compare_by_value():
    a = MouseButtonEvent(type=EventType.MOUSE_BUTTON_RELEASED, button=MouseButton.RIGHT, x=1)
    b = MouseButtonEvent(type=EventType.MOUSE_BUTTON_RELEASED, button=MouseButton.RIGHT, x=1)
    assert a == b