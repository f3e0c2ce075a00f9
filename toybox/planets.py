"""Planets pulled by gravity, leaving a trail behind them."""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass, field
from itertools import pairwise
from typing import ClassVar

import pygame

from toybox.vector import Vector

Color = tuple[int, int, int]

TRAJECTORY_COLOR: Color = (255, 255, 255)
_SEGMENTS = 360


def _point(v: Vector) -> tuple[int, int]:
    return int(v.x), int(v.y)


@dataclass
class Planet:
    """A body with position, velocity, size, mass and a recorded path."""

    G: ClassVar[float] = 100.0

    position: Vector
    velocity: Vector
    radius: float
    mass: float
    color: Color
    trajectory: list[Vector] = field(default_factory=list)

    def update_position(self) -> None:
        """Move by the current velocity and record the new position."""
        self.position = self.position + self.velocity
        self.trajectory.append(Vector(self.position.x, self.position.y))

    def orbit_velocity(self, other: Planet) -> None:
        """Set the velocity for a circular orbit around *other*."""
        distance = (self.position - other.position).magnitude()
        speed = math.sqrt(self.G * other.mass / distance)
        direction = self.position.direction(other.position)
        tangential = Vector(-direction.y, direction.x)
        self.velocity = tangential * speed

    def apply_force(self, other: Planet) -> None:
        """Accelerate towards *other* by Newtonian gravity."""
        distance = (other.position - self.position).magnitude()
        if distance == 0.0:
            return
        magnitude = self.G * self.mass * other.mass / distance**2
        force = self.position.direction(other.position) * magnitude
        self.velocity = self.velocity + force * (1.0 / self.mass)

    def draw_trajectory(self, surface: pygame.Surface) -> None:
        if len(self.trajectory) < 2:
            return
        for start, end in pairwise(self.trajectory):
            pygame.draw.line(surface, TRAJECTORY_COLOR, _point(start), _point(end))

    def draw(self, surface: pygame.Surface) -> None:
        """Draw a filled disc as spokes from the centre."""
        center = _point(self.position)
        step = 2.0 * math.pi / _SEGMENTS
        for i in range(_SEGMENTS):
            angle = step * i
            rim = (
                center[0] + int(self.radius * math.cos(angle)),
                center[1] + int(self.radius * math.sin(angle)),
            )
            pygame.draw.line(surface, self.color, center, rim)


@dataclass
class Planets:
    """A collection of planets moved together."""

    planets: list[Planet] = field(default_factory=list)

    def add_planet(self, planet: Planet) -> None:
        self.planets.append(planet)

    def draw(self, surface: pygame.Surface) -> None:
        for planet in self.planets:
            planet.draw(surface)

    def apply_force_sun(self, sun: Planet) -> None:
        for planet in self.planets:
            planet.apply_force(sun)

    def apply_force_others(self) -> None:
        """Pull every planet towards the others, as they stood before this step."""
        snapshot = copy.deepcopy(self.planets)
        for planet in self.planets:
            for other in snapshot:
                if planet != other:
                    planet.apply_force(other)

    def update_position(self) -> None:
        for planet in self.planets:
            planet.update_position()

    def draw_trajectory(self, surface: pygame.Surface) -> None:
        for planet in self.planets:
            planet.draw_trajectory(surface)