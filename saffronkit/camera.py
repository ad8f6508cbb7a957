"""A 2D camera with pan, zoom, rotation and optional target following."""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Tuple, Union

from saffronkit.events import Key, MouseButton
from saffronkit.geometry import FloatRect, Transform, Vector2
from saffronkit.input import InputStore
from saffronkit.subscriber_list import SubscriberList

FollowTarget = Union[Vector2, Callable[[], Vector2]]


def _identity() -> Transform:
    return Transform.from_matrix(1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)


class Camera:
    """Maps world coordinates to screen coordinates of a viewport."""

    def __init__(self) -> None:
        self.reset: SubscriberList[Any] = SubscriberList()
        self.enabled = True

        self.transform = _identity()
        self.position_transform = _identity()
        self.rotation_transform = _identity()
        self.zoom_transform = _identity()

        self.position = Vector2(0.0, 0.0)
        self.rotation = 0.0
        self.rotation_speed = 0.2  # rotations per second
        self.zoom = Vector2(1.0, 1.0)
        self.viewport_size = Vector2(100.0, 100.0)

        self._follow: Optional[FollowTarget] = None

        self.update_transform()

    def _follow_point(self) -> Optional[Vector2]:
        if self._follow is None:
            return None
        return self._follow() if callable(self._follow) else self._follow

    def update(self, input: InputStore, dt: float) -> None:
        """Apply one frame of user control from the input state."""
        if not self.enabled:
            return

        target = self._follow_point()
        if target is not None:
            self.set_center(target)
        elif input.is_mouse_button_down(MouseButton.LEFT) and input.is_mouse_button_down(
            MouseButton.RIGHT
        ):
            delta = input.mouse_swipe()
            if delta.length_squared() > 0.0:
                delta = self.rotation_transform.inverse().transform_point(delta)
                delta = self.zoom_transform.inverse().transform_point(delta)
                self.apply_movement(delta * -1.0)

        self.apply_zoom(input.vertical_scroll() / 100.0 + 1.0)

        angle = 0.0
        if input.is_key_down(Key.Q):
            angle += self.rotation_speed * 360.0 * dt
        if input.is_key_down(Key.E):
            angle -= self.rotation_speed * 360.0 * dt
        self.apply_rotation(angle)

        if input.is_key_pressed(Key.R):
            self.reset_transformation()

    def describe(self) -> List[str]:
        """Lines describing the camera state, as shown in its panel."""
        lines = [
            f"Position: ({self.position.x:.2f}, {self.position.y:.2f})",
            f"Zoom: ({self.zoom.x:.2f}, {self.zoom.y:.2f})",
            f"Rotation: {self.rotation:.2f}",
            f"Rotation Speed: {self.rotation_speed:.2f}",
        ]
        target = self._follow_point()
        if target is not None:
            lines.append(f"Following: ({target.x:.2f}, {target.y:.2f})")
        else:
            lines.append("Not following any point")
        return lines

    def apply_movement(self, offset: Vector2) -> None:
        self.set_center(self.position + offset)

    def apply_zoom(self, factor: float) -> None:
        self.zoom = self.zoom * factor
        self.zoom_transform.scale(factor, factor)
        self.update_transform()

    def apply_rotation(self, angle: float) -> None:
        self.set_rotation(self.rotation + angle)

    def set_center(self, center: Vector2) -> None:
        self.position = center
        self.position_transform = _identity()
        self.position_transform.translate(center.x, center.y)
        self.update_transform()

    def set_zoom(self, zoom: float) -> None:
        """Set an absolute zoom; a zoom of zero is ignored."""
        if zoom != 0.0:
            self.zoom = Vector2(zoom, zoom)
            self.zoom_transform = _identity()
            self.zoom_transform.scale(zoom, zoom)
            self.update_transform()

    def set_rotation(self, angle: float) -> None:
        self.rotation = angle
        self.rotation_transform = Transform.from_matrix(
            1.0, 0.0, 0.0, 1.0, 0.0, 0.0, angle, 0.0, 1.0
        )
        self.update_transform()

    def follow(self, target: FollowTarget) -> None:
        """Keep the camera centred on a point, or on what a callable returns."""
        self._follow = target

    def unfollow(self) -> None:
        self._follow = None

    def screen_to_world_point(self, point: Vector2) -> Vector2:
        return self.transform.inverse().transform_point(point)

    def screen_to_world_rect(self, rect: FloatRect) -> FloatRect:
        return self.transform.inverse().transform_rect(rect)

    def world_to_screen_point(self, point: Vector2) -> Vector2:
        return self.transform.transform_point(point)

    def world_to_screen_rect(self, rect: FloatRect) -> FloatRect:
        return self.transform.transform_rect(rect)

    def viewport(self) -> Tuple[Vector2, Vector2]:
        """World positions of the viewport's top-left and bottom-right corners."""
        size = self.viewport_size
        inverse = self.transform.inverse()
        return (
            inverse.transform_point(Vector2(0.0, 0.0)),
            inverse.transform_point(Vector2(size.x, size.y)),
        )

    def offset(self) -> Vector2:
        """Screen position of the camera centre."""
        return self.viewport_size / 2.0

    def update_transform(self) -> None:
        offset = self.offset()
        transform = _identity()
        transform.translate(offset.x, offset.y)
        transform.scale(self.zoom.x, self.zoom.y)
        transform.rotate(self.rotation)
        transform.translate(-self.position.x, -self.position.y)
        self.transform = transform

    def reset_transformation(self) -> None:
        """Return to the origin with no rotation and unit zoom."""
        self.set_center(Vector2(0.0, 0.0))
        self.set_rotation(0.0)
        self.set_zoom(1.0)

        self.position_transform = _identity()
        self.rotation_transform = _identity()
        self.zoom_transform = _identity()

        self.reset.trigger(None)