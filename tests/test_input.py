import pytest

from saffronkit.event_store import EventStore
from saffronkit.events import (
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
from saffronkit.input import InputStore


def press(code):
    return KeyEvent(type=EventType.KEY_PRESSED, code=code)


def release(code):
    return KeyEvent(type=EventType.KEY_RELEASED, code=code)


def test_key_press_is_down_and_pressed():
    store = InputStore()
    store.handle_event(press(Key.A))
    assert store.is_key_down(Key.A)
    assert store.is_key_pressed(Key.A)
    assert not store.is_key_released(Key.A)


def test_pressed_only_for_one_frame():
    store = InputStore()
    store.handle_event(press(Key.A))
    store.post_update()
    assert store.is_key_down(Key.A)
    assert not store.is_key_pressed(Key.A)


def test_key_release_after_frame():
    store = InputStore()
    store.handle_event(press(Key.Q))
    store.post_update()
    store.handle_event(release(Key.Q))
    assert not store.is_key_down(Key.Q)
    assert store.is_key_released(Key.Q)
    store.post_update()
    assert not store.is_key_released(Key.Q)


def test_unknown_key_is_up():
    store = InputStore()
    assert not store.is_key_down(Key.Z)
    assert not store.is_key_pressed(Key.Z)
    assert not store.is_key_released(Key.Z)


def test_mouse_buttons():
    store = InputStore()
    store.handle_event(
        MouseButtonEvent(type=EventType.MOUSE_BUTTON_PRESSED, button=MouseButton.LEFT)
    )
    assert store.is_mouse_button_down(MouseButton.LEFT)
    assert store.is_mouse_button_pressed(MouseButton.LEFT)
    assert not store.is_mouse_button_down(MouseButton.RIGHT)
    store.post_update()
    store.handle_event(
        MouseButtonEvent(type=EventType.MOUSE_BUTTON_RELEASED, button=MouseButton.LEFT)
    )
    assert store.is_mouse_button_released(MouseButton.LEFT)
    assert not store.is_mouse_button_pressed(MouseButton.LEFT)


def test_mouse_move_and_swipe():
    store = InputStore()
    store.handle_event(MouseMoveEvent(x=7, y=9))
    assert store.mouse_position() == Vector2(7, 9)
    assert store.mouse_swipe() == Vector2(7, 9)
    store.post_update()
    assert store.mouse_swipe() == Vector2()


def test_swipe_uses_previous_move():
    store = InputStore()
    store.handle_event(MouseMoveEvent(x=3, y=4))
    store.handle_event(MouseMoveEvent(x=10, y=20))
    assert store.mouse_swipe() == Vector2(10, 20) - Vector2(3, 4)


def test_scroll_accumulates_and_resets():
    store = InputStore()
    store.handle_event(MouseWheelScrollEvent(wheel=MouseWheel.VERTICAL, delta=1.5))
    store.handle_event(MouseWheelScrollEvent(wheel=MouseWheel.VERTICAL, delta=2.5))
    store.handle_event(MouseWheelScrollEvent(wheel=MouseWheel.HORIZONTAL, delta=-3.0))
    assert store.vertical_scroll() == pytest.approx(1.5 + 2.5)
    assert store.horizontal_scroll() == pytest.approx(-3.0)
    store.post_update()
    assert store.vertical_scroll() == 0
    assert store.horizontal_scroll() == 0


def test_registered_with_event_store():
    class Producer:
        def produce_events(self):
            return [press(Key.R), MouseMoveEvent(x=2, y=5)]

    events = EventStore()
    events.register_producer(Producer())
    store = InputStore(events)
    events.process_events()
    assert store.is_key_pressed(Key.R)
    assert store.mouse_position() == Vector2(2, 5)