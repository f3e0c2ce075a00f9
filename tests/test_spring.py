import copy

import pygame
import pytest

from toybox.spring import CANVAS_SIZE, Spring, SpringSystem
from toybox.vector import Vector


def make_spring(origin=(100.0, 100.0), end=(300.0, 100.0), masses=(1.0, 1.0),
                k=0.1, rest=100.0):
    return Spring(Vector(*origin), masses[0], Vector(*end), masses[1], k, rest)


def test_current_length_is_measured_on_creation():
    spring = Spring(Vector(0.0, 0.0), 1.0, Vector(3.0, 4.0), 1.0, 1.0, 5.0)
    assert spring.current_length == pytest.approx(5.0)
    assert spring.origin_velocity == Vector(0.0, 0.0)
    assert spring.end_velocity == Vector(0.0, 0.0)


def test_spring_at_rest_feels_no_force():
    spring = make_spring(end=(200.0, 100.0))
    spring.apply_forces()
    assert spring.origin_velocity == Vector(0.0, 0.0)
    assert spring.end_velocity == Vector(0.0, 0.0)


def test_stretched_spring_pulls_masses_together():
    spring = make_spring()
    spring.apply_forces()
    assert spring.origin_velocity.x > 0.0
    assert spring.end_velocity.x < 0.0
    assert spring.origin_velocity.y == pytest.approx(0.0)


def test_compressed_spring_pushes_masses_apart():
    spring = make_spring(end=(150.0, 100.0))
    spring.apply_forces()
    assert spring.origin_velocity.x < 0.0
    assert spring.end_velocity.x > 0.0


def test_forces_conserve_momentum():
    spring = make_spring(origin=(100.0, 50.0), end=(400.0, 300.0), masses=(2.0, 1.0))
    spring.apply_forces()
    total = spring.origin_velocity * spring.origin_mass + spring.end_velocity * spring.end_mass
    assert total.x == pytest.approx(0.0, abs=1e-12)
    assert total.y == pytest.approx(0.0, abs=1e-12)


def test_check_bound_clamps_and_reflects():
    spring = make_spring(origin=(-5.0, 700.0))
    spring.origin_velocity = Vector(-1.0, 2.0)
    spring.check_bound()
    assert spring.origin == Vector(0.0, float(CANVAS_SIZE[1]))
    assert spring.origin_velocity == Vector(1.0, -2.0)


def test_check_bound_leaves_inside_points_alone():
    spring = make_spring()
    spring.end_velocity = Vector(3.0, -4.0)
    spring.check_bound()
    assert spring.end == Vector(300.0, 100.0)
    assert spring.end_velocity == Vector(3.0, -4.0)


def test_update_positions_moves_along_velocity_and_remeasures():
    spring = make_spring()
    spring.origin_velocity = Vector(10.0, 0.0)
    spring.update_positions()
    assert spring.origin.x > 100.0
    assert spring.end == Vector(300.0, 100.0)
    assert spring.current_length == pytest.approx((spring.end - spring.origin).magnitude())


def test_single_spring_system_matches_spring_step():
    spring = make_spring()
    expected = copy.deepcopy(spring)
    expected.apply_forces()
    expected.update_positions()

    system = SpringSystem()
    system.add_spring(spring)
    system.update()
    assert system.springs[0].origin == expected.origin
    assert system.springs[0].end == expected.end


def test_resting_chain_stays_put():
    system = SpringSystem()
    system.add_spring(make_spring(origin=(0.0, 100.0), end=(100.0, 100.0)))
    system.add_spring(make_spring(origin=(100.0, 100.0), end=(200.0, 100.0)))
    system.update()
    assert system.springs[0].origin == Vector(0.0, 100.0)
    assert system.springs[0].end == Vector(100.0, 100.0)
    assert system.springs[1].origin == system.springs[0].end
    assert system.springs[1].end == Vector(200.0, 100.0)


def test_draw_paints_masses():
    surface = pygame.Surface(CANVAS_SIZE)
    surface.fill((255, 255, 255))
    system = SpringSystem([make_spring()])
    system.draw(surface, (0, 0, 0))
    assert tuple(surface.get_at((100, 100)))[:3] == (0, 0, 0)
    assert tuple(surface.get_at((300, 100)))[:3] == (0, 0, 0)
    assert tuple(surface.get_at((100, 300)))[:3] == (255, 255, 255)