"""Render targets and a scene that submits drawables through a camera."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Tuple

from saffronkit.camera import Camera
from saffronkit.geometry import Transform

SCREEN_SPACE_RENDERING = 1 << 0


@dataclass
class RenderStates:
    """How a drawable is drawn: its transform plus optional blend, texture, shader."""

    transform: Transform = field(default_factory=Transform.identity)
    blend_mode: Any = None
    texture: Any = None
    shader: Any = None


class _CommandBuffer:
    """Default surface: remembers clears, draws and presentations."""

    def __init__(self, width: int, height: int, depth_buffer: bool) -> None:
        self.size: Tuple[int, int] = (width, height)
        self.depth_buffer = depth_buffer
        self.clear_color: Any = None
        self.commands: List[Tuple[Any, RenderStates]] = []
        self.display_count = 0

    def clear(self, color: Any) -> None:
        self.clear_color = color
        self.commands.clear()

    def display(self) -> None:
        self.display_count += 1

    def draw(self, drawable: Any, states: RenderStates) -> None:
        self.commands.append((drawable, states))


SurfaceFactory = Callable[[int, int, bool], Any]


class ControllableRenderTexture:
    """A render surface that can be switched off and recreated at a new size."""

    def __init__(
        self,
        width: int,
        height: int,
        depth_buffer: bool = False,
        surface_factory: Optional[SurfaceFactory] = None,
    ) -> None:
        self._factory: SurfaceFactory = surface_factory or _CommandBuffer
        self.render_texture = self._factory(width, height, depth_buffer)
        self.enabled = True

    def resize(self, width: int, height: int) -> None:
        """Replace the surface with a new one of the given size, without depth."""
        self.render_texture = self._factory(width, height, False)

    def display(self) -> None:
        if self.enabled:
            self.render_texture.display()

    def clear(self, color: Any) -> None:
        if self.enabled:
            self.render_texture.clear(color)


class Scene:
    """Submits drawables to a target, in world or screen space."""

    def __init__(
        self, target: ControllableRenderTexture, reference: Optional[Camera] = None
    ) -> None:
        self.target = target
        self.reference = reference
        self.options: List[int] = []

    def push_options(self, *args: int) -> None:
        self.options.extend(args)

    def pop_options(self) -> None:
        if self.options:
            self.options.pop()

    def submit(self, drawable: Any, states: Optional[RenderStates] = None) -> None:
        """Draw an object on the target if the target is enabled."""
        if self.target.enabled:
            self.target.render_texture.draw(
                drawable, self.generate_render_states(states)
            )

    def generate_render_states(
        self, states: Optional[RenderStates] = None
    ) -> RenderStates:
        """Combine the camera transform into the states unless in screen space."""
        if states is None:
            states = RenderStates()
        if self.reference is None:
            return states
        if not self.options or not self.options[-1] & SCREEN_SPACE_RENDERING:
            states.transform.combine(self.reference.transform)
        return states