import math

import pytest

from toybox.one_pendulum import create_pendulum


def test_initial_state_matches_source():
    pendulum = create_pendulum()
    assert pendulum.origin.x == 400.0
    assert pendulum.origin.y == 0.0
    assert pendulum.theta == pytest.approx(math.pi / 4.0)
    assert pendulum.length == 300.0
    assert pendulum.ang_velocity == 0.0


def test_bob_hangs_at_rod_length():
    pendulum = create_pendulum()
    assert (pendulum.end - pendulum.origin).magnitude() == pytest.approx(pendulum.length)


def test_swing_starts_back_towards_vertical():
    pendulum = create_pendulum()
    start = pendulum.theta
    pendulum.apply_force()
    pendulum.update_position()
    assert pendulum.ang_velocity < 0.0
    assert pendulum.theta < start
    assert (pendulum.end - pendulum.origin).magnitude() == pytest.approx(pendulum.length)


def test_swing_stays_within_start_amplitude():
    pendulum = create_pendulum()
    limit = pendulum.theta
    for _ in range(500):
        pendulum.apply_force()
        assert abs(pendulum.theta) <= limit + 0.05