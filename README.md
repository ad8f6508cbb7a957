# saffronkit

saffronkit is a small toolkit for 2D interactive applications. It covers the
parts of such an application that need no window and no GPU: event dispatch,
per-frame input state, frame timing, a 2D camera, scene submission with
camera transforms, and logging with a displayable history.

It has no dependencies outside the standard library.

## Installation

```
pip install saffronkit
```

To run the tests:

```
pip install "saffronkit[test]"
pytest
```

## Modules

### `saffronkit.subscriber_list`

`SubscriberList` holds callbacks keyed by handler id. `subscribe(fn)`
returns a new id, `unsubscribe(handler_id)` removes one (unknown ids are
ignored), `has(handler_id)` checks for one, `subscribers()` returns a copy of
the mapping, `clear()` removes them all, and `trigger(payload)` calls every
callback with the payload. `len()` gives the number of callbacks.

### `saffronkit.clock`

`Clock` measures frame time. `tick()` records a frame; `delta()` returns the
seconds between the last two ticks and `delta_duration()` the same as a
`timedelta`. `since_start()` and `since_start_duration()` give the time since
the clock was created. A custom time source can be passed to the
constructor. `set_global_clock(clock)` stores a clock in
`saffronkit.clock.GlobalClock`.

### `saffronkit.geometry`

- `Vector2`: an immutable vector with `+`, `-`, multiplication and division
  by a scalar, negation and `length_squared()`.
- `FloatRect`: a rectangle given by `left`, `top`, `width` and `height`.
- `Transform`: a 3x3 affine matrix. `Transform.identity()` and
  `Transform.from_matrix(...)` build one; `translate`, `scale`, `rotate`
  (degrees) and `combine` change it in place and return it, so calls chain.
  `inverse()` returns the inverse, or the identity for a singular matrix.
  `transform_point` maps a `Vector2`, and `transform_rect` returns the
  bounding box of a transformed `FloatRect`. `a @ b` returns the product as a
  new transform.

### `saffronkit.events`

`EventType` lists the event kinds (`KEY_PRESSED`, `MOUSE_MOVED`, `RESIZED`,
`CLOSED` and so on). `Key`, `MouseButton` and `MouseWheel` are integer
enums. Events are dataclasses deriving from `Event`, which carries `type`,
`native_handle` and a set of `tags`: `KeyEvent`, `MouseButtonEvent`,
`MouseMoveEvent`, `MouseWheelScrollEvent`, `SizeEvent`, `TextEvent`,
`ClosedEvent`, `LostFocusEvent`, `GainedFocusEvent`, `MouseEnteredEvent` and
`MouseLeftEvent`. Their fields are keyword-only.

### `saffronkit.event_store`

`EventStore` gathers events from producers, objects with a
`produce_events()` method, registered with `register_producer`.
`register_handler(handler, *event_types)` and
`register_handler_by_tags(handler, *tags)` return one handler id per type or
tag. `unregister(event_type, handler_id)` removes a type handler.
`process_events()` polls every producer and calls, for each event, the
handlers for its type and then the handlers for each of its tags.

### `saffronkit.input`

`InputStore` keeps keyboard, mouse button, mouse position and scroll state.
Pass an `EventStore` to the constructor to have it registered for input
events, or feed events to `handle_event(event)` yourself. Queries:
`is_key_down`, `is_key_pressed`, `is_key_released`, `is_mouse_button_down`,
`is_mouse_button_pressed`, `is_mouse_button_released`, `mouse_position()`,
`mouse_swipe()`, `vertical_scroll()` and `horizontal_scroll()`. Call
`post_update()` at the end of each frame: the current state becomes the
previous one and the scroll deltas go back to zero. `set_global_input(store)`
stores a store in `saffronkit.input.Input`.

### `saffronkit.camera`

`Camera` starts at the origin with a zoom of 1, no rotation and a 100 x 100
`viewport_size`. `update(input, dt)` applies one frame of control: holding
both left and right mouse buttons pans, the vertical scroll zooms, `Q` and
`E` rotate at `rotation_speed` turns per second, and `R` resets. It also
offers `apply_movement`, `apply_zoom`, `apply_rotation`, `set_center`,
`set_zoom` (a zoom of zero is ignored), `set_rotation`, `follow(target)`
with a `Vector2` or a callable returning one, `unfollow()`,
`screen_to_world_point`, `screen_to_world_rect`, `world_to_screen_point`,
`world_to_screen_rect`, `viewport()` (world corners of the viewport),
`offset()`, `update_transform()` and `reset_transformation()`, which also
triggers the `reset` subscriber list. `describe()` returns the camera state
as lines of text.

### `saffronkit.scene`

`ControllableRenderTexture(width, height, depth_buffer=False,
surface_factory=None)` wraps a drawing surface that can be switched off with
`enabled`; `clear`, `display` and `resize` act on it. Without a factory the
surface is an in-memory command buffer that records the clear colour, the
draw calls and how often it was displayed.

`Scene(target, reference)` submits drawables with `submit(drawable,
states)`. `generate_render_states(states)` combines the camera's transform
into the `RenderStates` unless the last pushed option has
`SCREEN_SPACE_RENDERING` set. Options are managed with `push_options` and
`pop_options`.

### `saffronkit.log`

`get_logger(name)` returns a named standard-library logger that writes
tab-separated lines (time, level, name for non-default loggers, message) to
standard output and then triggers `on_log` with a `LogEntry`.
`setup_logger()` installs the default logger. `log(level, *args)`, `debug`,
`info`, `warn`, `error` and `fatal` join their arguments with spaces. Logging
at `Level.PANIC` raises `PanicError` and at `Level.FATAL` raises
`SystemExit(1)`, both after the message is written.

### `saffronkit.log_view`

`LogView` keeps log messages as `LogLine`s. `add_entry(message, level)`
appends one line per line of the message, `clear()` empties it and `lines()`
returns them. Each line has a `label` such as `"[INFO]   "` and an RGBA
`color` for its level; `text` joins all lines.

### `saffronkit.menu_bar`

`MenuBar` holds `MenuBarMenu`s (a title and a callback) in the order added.
`add_menu(title, render_ui)` appends one and `remove_menu(title)` removes the
first with that title.

### `saffronkit.viewport_pane`

`ViewportPane(window_title, target)` tracks where a render target is shown.
`update_bounds(top_left, bottom_right, target_size=None)` records new bounds,
triggers `rendered`, and triggers `resized` with the new size when it no
longer matches the target's; it raises `RuntimeError` when the target is
disabled and no `fallback_texture` is set. `viewport_size()`,
`in_viewport(position)` and `mouse_position(input, normalized=False)` give
the size, containment and the mouse position relative to the pane (or in
[-1, 1] with y pointing up).

## Example

```python
from saffronkit.camera import Camera
from saffronkit.clock import Clock
from saffronkit.event_store import EventStore
from saffronkit.events import EventType, Key, KeyEvent
from saffronkit.geometry import Vector2
from saffronkit.input import InputStore

store = EventStore()
input_state = InputStore(store)
clock = Clock()
camera = Camera()


class Keyboard:
    def produce_events(self):
        return [KeyEvent(type=EventType.KEY_PRESSED, code=Key.R)]


store.register_producer(Keyboard())

clock.tick()
store.process_events()
camera.update(input_state, clock.delta())
input_state.post_update()

print(camera.world_to_screen_point(Vector2(10.0, 20.0)))
```

Screen-space drawing is selected in a scene by pushing an option:

```python
from saffronkit.scene import SCREEN_SPACE_RENDERING, ControllableRenderTexture, Scene

scene = Scene(ControllableRenderTexture(1600, 900), camera)
scene.push_options(SCREEN_SPACE_RENDERING)
states = scene.generate_render_states(None)
scene.pop_options()
```

## What it does not do

saffronkit opens no window, draws nothing on screen and has no GUI. There is
no main loop, no window event source, no font or theme handling and no
dock-space layout: you supply your own event producers and drawing surfaces.
`Camera.describe()`, `LogView`, `MenuBar` and `ViewportPane` hold the data a
user interface would show, but rendering it is left to the application.