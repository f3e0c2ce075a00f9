"""Planets orbiting a sun, drawn with their trails."""

from __future__ import annotations

import argparse
import sys
import time

import pygame

from toybox.planets import Planet, Planets
from toybox.vector import Vector

CANVAS_SIZE = (800, 600)
CANVAS_COLOR = (0, 0, 0)
FRAME_DELAY = 1.0 / 60_000


def create_system() -> tuple[Planet, Planets]:
    """Build the sun and the planets set on circular orbits around it."""
    width, height = CANVAS_SIZE
    sun = Planet(
        Vector(width / 2.0, height / 2.0),
        Vector(0.0, 0.0),
        50.0,
        1.0,
        (255, 255, 0),
    )

    specs = [
        (Vector(300.0, height / 2.0 - 50.0), 10.0, 1.0e-5, (0, 255, 0)),
        (Vector(300.0, height / 2.0 - 80.0), 12.0, 1.5e-5, (255, 0, 0)),
        (Vector(100.0, height / 2.0 + 20.0), 30.0, 2.0e-4, (255, 255, 100)),
        (Vector(700.0, height / 2.0 - 10.0), 18.0, 3.0e-5, (255, 0, 0)),
    ]

    planets = Planets()
    for position, radius, mass, color in specs:
        planet = Planet(position, Vector(0.0, 0.0), radius, mass, color)
        planet.orbit_velocity(sun)
        planets.add_planet(planet)
    return sun, planets


def step(sun: Planet, planets: Planets) -> None:
    """Advance the whole system by one tick."""
    planets.apply_force_sun(sun)
    planets.apply_force_others()
    planets.update_position()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Orbit simulation.")
    parser.parse_args(argv)

    sun, planets = create_system()

    pygame.init()
    try:
        screen = pygame.display.set_mode(CANVAS_SIZE)
        pygame.display.set_caption("Orbit Simulation")
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

            step(sun, planets)

            screen.fill(CANVAS_COLOR)
            planets.draw_trajectory(screen)
            planets.draw(screen)
            sun.draw(screen)

            pygame.display.flip()
            time.sleep(FRAME_DELAY)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())