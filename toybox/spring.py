"""Springs joining two masses, and chains of springs."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import ClassVar

import pygame

from toybox.vector import Vector

Color = tuple[int, int, int]

CANVAS_SIZE = (800, 600)
MASS_SIZE = 10.0


def _bounce(point: Vector, velocity: Vector) -> None:
    """Keep *point* on the canvas, reversing *velocity* on each wall it crosses."""
    for axis, limit in (("x", CANVAS_SIZE[0]), ("y", CANVAS_SIZE[1])):
        value = getattr(point, axis)
        if value < 0.0 or value > limit:
            setattr(velocity, axis, -getattr(velocity, axis))
            setattr(point, axis, min(max(value, 0.0), float(limit)))


def _mass_rect(center: Vector) -> pygame.Rect:
    return pygame.Rect(
        int(center.x - MASS_SIZE / 2.0),
        int(center.y - MASS_SIZE / 2.0),
        int(MASS_SIZE),
        int(MASS_SIZE),
    )


@dataclass
class Spring:
    """A spring of stiffness *k* between two point masses."""

    DELTA_TIME: ClassVar[float] = 0.1

    origin: Vector
    origin_mass: float
    end: Vector
    end_mass: float
    k: float
    rest_length: float
    origin_velocity: Vector = field(default_factory=Vector)
    end_velocity: Vector = field(default_factory=Vector)
    current_length: float = field(init=False)

    def __post_init__(self) -> None:
        self.current_length = (self.origin - self.end).magnitude()

    def check_bound(self) -> None:
        """Bounce both masses off the canvas edges."""
        _bounce(self.origin, self.origin_velocity)
        _bounce(self.end, self.end_velocity)

    def update_positions(self) -> None:
        """Move both masses by one time step and remeasure the spring."""
        self.check_bound()
        self.origin = self.origin + self.origin_velocity * self.DELTA_TIME
        self.end = self.end + self.end_velocity * self.DELTA_TIME
        self.current_length = (self.end - self.origin).magnitude()

    def apply_forces(self) -> None:
        """Accelerate both masses by Hooke's law."""
        if self.current_length == self.rest_length:
            return
        offset = self.end - self.origin
        if offset.magnitude() == 0.0:
            # Coincident masses give no direction to push along.
            return

        direction = offset.normalize()
        stretch = self.current_length - self.rest_length
        elastic_force = (-self.k * stretch) * direction

        acceleration_origin = elastic_force.inverse() * (1.0 / self.origin_mass)
        acceleration_end = elastic_force * (1.0 / self.end_mass)

        self.origin_velocity = (
            self.origin_velocity + acceleration_origin * self.DELTA_TIME
        )
        self.end_velocity = self.end_velocity + acceleration_end * self.DELTA_TIME

    def draw(self, surface: pygame.Surface, color: Color) -> None:
        pygame.draw.line(
            surface,
            color,
            (int(self.origin.x), int(self.origin.y)),
            (int(self.end.x), int(self.end.y)),
        )
        pygame.draw.rect(surface, color, _mass_rect(self.origin))
        pygame.draw.rect(surface, color, _mass_rect(self.end))


@dataclass
class SpringSystem:
    """A chain of springs, each starting where the previous one ends."""

    springs: list[Spring] = field(default_factory=list)

    def add_spring(self, spring: Spring) -> None:
        self.springs.append(spring)

    def update(self) -> None:
        """Advance the whole chain by one time step."""
        if len(self.springs) > 1:
            second = copy.deepcopy(self.springs[1])
            second.apply_forces()
            second.update_positions()
            self.springs[0].end = copy.copy(second.origin)
            self.springs[0].end_velocity = copy.copy(second.origin_velocity)

        previous: Spring | None = None
        next_origin = next_velocity = None
        for spring in self.springs:
            if previous is not None:
                spring.origin = next_origin
                spring.origin_velocity = next_velocity
            spring.apply_forces()
            next_origin = copy.copy(spring.end)
            next_velocity = copy.copy(spring.end_velocity)
            previous = spring

        for spring in self.springs:
            spring.update_positions()

    def draw(self, surface: pygame.Surface, color: Color) -> None:
        for spring in self.springs:
            spring.draw(surface, color)


@dataclass
class SpringPendulum:
    """A mass hanging from a fixed point on a spring."""

    origin: Vector
    end: Vector
    velocity: Vector
    rest_length: float
    k: float
    mass: float