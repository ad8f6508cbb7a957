import pytest

from saffronkit.camera import Camera
from saffronkit.geometry import Transform, Vector2
from saffronkit.scene import (
    SCREEN_SPACE_RENDERING,
    ControllableRenderTexture,
    RenderStates,
    Scene,
)


def make_scene(reference=True):
    target = ControllableRenderTexture(160, 90)
    camera = Camera() if reference else None
    if camera is not None:
        camera.set_center(Vector2(5, 6))
    return Scene(target, camera), target, camera


def test_world_space_uses_camera_transform():
    scene, target, camera = make_scene()
    scene.submit("sprite")
    drawable, states = target.render_texture.commands[0]
    assert drawable == "sprite"
    assert states.transform.matrix == pytest.approx(camera.transform.matrix)


def test_screen_space_keeps_identity():
    scene, target, _ = make_scene()
    scene.push_options(SCREEN_SPACE_RENDERING)
    scene.submit("hud")
    _, states = target.render_texture.commands[0]
    assert states.transform.matrix == Transform.identity().matrix


def test_pop_options_restores_world_space():
    scene, _, camera = make_scene()
    scene.push_options(SCREEN_SPACE_RENDERING)
    scene.pop_options()
    scene.pop_options()
    assert scene.options == []
    states = scene.generate_render_states(None)
    assert states.transform.matrix == pytest.approx(camera.transform.matrix)


def test_only_top_option_counts():
    scene, _, camera = make_scene()
    scene.push_options(SCREEN_SPACE_RENDERING, 0)
    states = scene.generate_render_states(None)
    assert states.transform.matrix == pytest.approx(camera.transform.matrix)


def test_given_states_are_combined_in_place():
    scene, _, camera = make_scene()
    given = RenderStates(transform=Transform.identity().translate(2, 3))
    expected = Transform.identity().translate(2, 3) @ camera.transform
    result = scene.generate_render_states(given)
    assert result is given
    assert result.transform.matrix == pytest.approx(expected.matrix)


def test_no_reference_leaves_states():
    scene, _, _ = make_scene(reference=False)
    states = scene.generate_render_states(None)
    assert states.transform.matrix == Transform.identity().matrix


def test_disabled_target_draws_nothing():
    scene, target, _ = make_scene()
    target.enabled = False
    scene.submit("sprite")
    target.clear((0, 0, 0, 255))
    target.display()
    assert target.render_texture.commands == []
    assert target.render_texture.clear_color is None
    assert target.render_texture.display_count == 0


def test_clear_and_display():
    target = ControllableRenderTexture(10, 20)
    target.render_texture.draw("x", RenderStates())
    target.clear((1, 2, 3, 255))
    target.display()
    assert target.render_texture.clear_color == (1, 2, 3, 255)
    assert target.render_texture.commands == []
    assert target.render_texture.display_count == 1


def test_resize_replaces_surface_without_depth():
    target = ControllableRenderTexture(10, 20, depth_buffer=True)
    assert target.render_texture.depth_buffer is True
    target.render_texture.draw("x", RenderStates())
    target.resize(30, 40)
    assert target.render_texture.size == (30, 40)
    assert target.render_texture.depth_buffer is False
    assert target.render_texture.commands == []


def test_custom_surface_factory():
    made = []
    surface = object()

    def factory(width, height, depth):
        made.append((width, height, depth))
        return surface

    target = ControllableRenderTexture(4, 8, True, surface_factory=factory)
    assert made == [(4, 8, True)]
    assert target.render_texture is surface