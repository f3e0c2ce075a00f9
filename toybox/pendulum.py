"""Simple and double pendulums integrated step by step."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from itertools import pairwise
from typing import ClassVar

import pygame

from toybox.vector import Vector

Color = tuple[int, int, int]

BOB_SIZE = 20.0
SMALL_BOB_SIZE = 10.0
TRAJECTORY_COLORS: tuple[Color, Color] = ((0, 0, 100), (0, 50, 255))


def _bob_rect(center: Vector, size: float) -> pygame.Rect:
    return pygame.Rect(
        int(center.x - size / 2.0), int(center.y - size / 2.0), int(size), int(size)
    )


def _point(v: Vector) -> tuple[int, int]:
    return int(v.x), int(v.y)


@dataclass
class Pendulum:
    """A single pendulum hanging from *origin* at angle *theta*."""

    G: ClassVar[float] = 1.0e-1

    origin: Vector
    theta: float
    ang_velocity: float
    length: float
    mass: float
    end: Vector = field(init=False)

    def __post_init__(self) -> None:
        self.end = Vector()
        self.update_position()

    def update_position(self) -> None:
        """Place the bob according to the current angle."""
        self.end.x = self.origin.x + self.length * math.sin(self.theta)
        self.end.y = self.origin.y + self.length * math.cos(self.theta)

    def apply_force(self) -> None:
        """Advance the angular velocity and angle by one step."""
        self.ang_velocity += -(self.G * math.sin(self.theta)) / self.length
        self.theta += self.ang_velocity

    def draw(self, surface: pygame.Surface, color: Color) -> None:
        pygame.draw.line(surface, color, _point(self.origin), _point(self.end))
        pygame.draw.rect(surface, color, _bob_rect(self.end, BOB_SIZE))


class DoublePendulum:
    """Two pendulums chained end to end, remembering where their bobs went."""

    G: ClassVar[float] = 1.0

    def __init__(
        self,
        origin: Vector,
        thetas: tuple[float, float],
        lengths: tuple[float, float],
        masses: tuple[float, float],
    ) -> None:
        first_end = Vector(
            origin.x + lengths[0] * math.sin(thetas[0]),
            origin.y + lengths[0] * math.cos(thetas[0]),
        )
        second_origin = Vector(first_end.x, first_end.y)
        second_end = Vector(
            second_origin.x + lengths[1] * math.sin(thetas[1]),
            second_origin.y + lengths[1] * math.cos(thetas[1]),
        )
        self.origins: tuple[Vector, Vector] = (origin, second_origin)
        self.ends: tuple[Vector, Vector] = (first_end, second_end)
        self.thetas = thetas
        self.ang_velocities: tuple[float, float] = (0.0, 0.0)
        self.lengths = lengths
        self.masses = masses
        self.trajectories: list[list[Vector]] = [[], []]

    def update_position(self) -> None:
        """Place both bobs and record their positions."""
        first_origin, second_origin = self.origins
        first_end, second_end = self.ends
        first_length, second_length = self.lengths
        first_theta, second_theta = self.thetas

        first_end.x = first_origin.x + first_length * math.sin(first_theta)
        first_end.y = first_origin.y + first_length * math.cos(first_theta)
        second_end.x = second_origin.x + second_length * math.sin(second_theta)
        second_end.y = second_origin.y + second_length * math.cos(second_theta)

        self.origins = (first_origin, Vector(first_end.x, first_end.y))
        self.trajectories[0].append(Vector(first_end.x, first_end.y))
        self.trajectories[1].append(Vector(second_end.x, second_end.y))

    def apply_force(self) -> None:
        """Advance velocities and angles by one step of the equations of motion."""
        m1, m2 = self.masses
        l1, l2 = self.lengths
        g = self.G
        theta1, theta2 = self.thetas
        omega1, omega2 = self.ang_velocities

        denom = 2.0 * m1 + m2 - m2 * math.cos(2.0 * (theta1 - theta2))
        if abs(denom) < 1e-10:
            return

        num1 = (
            -g * (2.0 * m1 + m2) * math.sin(theta1)
            - m2 * g * math.sin(theta1 - 2.0 * theta2)
            - 2.0
            * math.sin(theta1 - theta2)
            * m2
            * (omega2**2 * l2 + omega1**2 * l1 * math.cos(theta1 - theta2))
        )
        accel1 = num1 / (l1 * denom)

        num2 = (
            2.0
            * math.sin(theta1 - theta2)
            * (
                omega1**2 * l1 * (m1 + m2)
                + g * (m1 + m2) * math.cos(theta1)
                + omega2**2 * l2 * m2 * math.cos(theta1 - theta2)
            )
        )
        accel2 = num2 / (l2 * denom)

        dt = 1.0
        omega1 += accel1 * dt
        omega2 += accel2 * dt
        self.ang_velocities = (omega1, omega2)

        full_turn = 2.0 * math.pi
        self.thetas = (
            (theta1 + omega1 * dt) % full_turn,
            (theta2 + omega2 * dt) % full_turn,
        )

    def energy(self) -> float:
        """Kinetic plus potential energy of the two bobs."""
        m1, m2 = self.masses
        l1, l2 = self.lengths
        omega1, omega2 = self.ang_velocities
        kinetic = 0.5 * m1 * (omega1 * l1) ** 2 + 0.5 * m2 * (omega2 * l2) ** 2
        potential = m1 * self.G * self.ends[0].y + m2 * self.G * self.ends[1].y
        return kinetic + potential

    def draw_trajectory(self, surface: pygame.Surface) -> None:
        """Draw the recorded paths of both bobs."""
        if any(len(path) < 2 for path in self.trajectories):
            return
        for path, color in zip(self.trajectories, TRAJECTORY_COLORS):
            for start, end in pairwise(path):
                pygame.draw.line(surface, color, _point(start), _point(end))

    def draw(self, surface: pygame.Surface, color: Color) -> None:
        for origin, end in zip(self.origins, self.ends):
            pygame.draw.line(surface, color, _point(origin), _point(end))
        pygame.draw.rect(surface, color, _bob_rect(self.ends[0], BOB_SIZE))
        pygame.draw.rect(surface, color, _bob_rect(self.ends[1], SMALL_BOB_SIZE))