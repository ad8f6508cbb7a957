"""A pane that shows a render target and reports its on-screen bounds."""

from __future__ import annotations

from typing import Any, Optional, Tuple

from saffronkit.geometry import Vector2
from saffronkit.input import InputStore
from saffronkit.scene import ControllableRenderTexture
from saffronkit.subscriber_list import SubscriberList


class ViewportPane:
    """Tracks where a render target is shown and when it needs resizing."""

    def __init__(self, window_title: str, target: ControllableRenderTexture) -> None:
        self.window_title = window_title
        self.target = target
        self.top_left = Vector2(0.0, 0.0)
        self.bottom_right = Vector2(100.0, 100.0)
        self.hovered = False
        self.focused = False
        self.fallback_texture: Any = None
        self.rendered: SubscriberList[Any] = SubscriberList()
        self.resized: SubscriberList[Vector2] = SubscriberList()
        self.dock_id = 0

    def update_bounds(
        self,
        top_left: Vector2,
        bottom_right: Vector2,
        target_size: Optional[Tuple[int, int]] = None,
    ) -> None:
        """Record the pane's new bounds for this frame.

        Notifies the rendered subscribers, then the resized subscribers with
        the new viewport size if it no longer matches the target's size.
        Raises RuntimeError when the target is disabled and no fallback
        texture is set.
        """
        self.top_left = top_left
        self.bottom_right = bottom_right

        if not self.target.enabled and self.fallback_texture is None:
            raise RuntimeError(
                "ViewportPane: fallback texture is not set, set one before rendering"
            )

        self.rendered.trigger(None)

        size = self.viewport_size()
        if target_size is None:
            target_size = tuple(self.target.render_texture.size)
        if (int(size.x), int(size.y)) != tuple(target_size):
            self.resized.trigger(self.viewport_size())

    def in_viewport(self, position: Vector2) -> bool:
        """Tell whether a position, taken relative to the top-left, is inside."""
        relative = position - self.top_left
        return relative.x < self.bottom_right.x and relative.y < self.bottom_right.y

    def mouse_position(self, input: InputStore, normalized: bool = False) -> Vector2:
        """Mouse position relative to the pane, or in [-1, 1] with y pointing up."""
        position = input.mouse_position() - self.top_left
        if normalized:
            width = self.bottom_right.x - self.top_left.x
            height = self.bottom_right.y - self.top_left.y
            return Vector2(
                position.x / width * 2.0 - 1.0,
                (position.y / height * 2.0 - 1.0) * -1.0,
            )
        return position

    def viewport_size(self) -> Vector2:
        return self.bottom_right - self.top_left