from dataclasses import fields

import pygame
import pytest

from flocksim.core.config import StepParameters
from flocksim.core.vector import Vector3
from flocksim.simulation.interactive import Camera, KEY_BINDINGS, adjust_parameter


def test_adjust_parameter_changes_one_field():
    params = StepParameters()
    adjusted = adjust_parameter(params, "separation", 2.0)
    assert adjusted.separation == params.separation + 2.0
    assert adjusted.alignment == params.alignment
    assert params.separation == StepParameters().separation


def test_adjust_parameter_allows_negative_values():
    adjusted = adjust_parameter(StepParameters(fear=0), "fear", -5.0)
    assert adjusted.fear == -5.0


def test_key_bindings_name_real_parameters():
    names = {f.name for f in fields(StepParameters)}
    for name, delta in KEY_BINDINGS.values():
        assert name in names
        assert delta != 0
    assert KEY_BINDINGS[pygame.K_1] == ("separation", -1.0)


def test_camera_projects_target_to_screen_center():
    camera = Camera((1000, 700, 800), (1200, 800))
    pos_2d, scale = camera.project(camera.target)
    assert abs(pos_2d[0] - 600) <= 1
    assert abs(pos_2d[1] - 400) <= 1
    assert scale > 0


def test_camera_behind_point_is_not_projected():
    camera = Camera((1000, 700, 800), (1200, 800))
    behind = camera.position.subtract(camera.forward.scale(100))
    assert camera.project(behind) == (None, 0)


def test_camera_move_and_rotate():
    camera = Camera((1000, 700, 800), (1200, 800))
    start = camera.position.copy()
    camera.move('forward')
    assert camera.position.distance(start) == pytest.approx(camera.move_speed)
    camera.rotate(0, 100)
    assert camera.pitch < 3.1416 / 2
    assert camera.forward.norm() == pytest.approx(1.0)


def test_camera_depth_orders_points():
    camera = Camera((1000, 700, 800), (1200, 800))
    near = camera.position.add(camera.forward.scale(10))
    far = camera.position.add(camera.forward.scale(1000))
    assert camera.depth_of(near) < camera.depth_of(far)


def test_camera_basis_is_vector3():
    camera = Camera((100, 100, 100), (400, 300))
    assert isinstance(camera.right, Vector3)
    assert isinstance(camera.up, Vector3)
