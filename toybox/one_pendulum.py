"""A single swinging pendulum."""

from __future__ import annotations

import argparse
import math
import sys

import pygame

from toybox.pendulum import Pendulum
from toybox.vector import Vector

CANVAS_SIZE = (800, 600)
CANVAS_COLOR = (255, 255, 255)
PENDULUM_COLOR = (0, 0, 0)


def create_pendulum() -> Pendulum:
    """The pendulum the simulation starts with."""
    return Pendulum(Vector(400.0, 0.0), math.pi / 4.0, 0.0, 300.0, 1.0)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Single pendulum simulation.")
    parser.parse_args(argv)

    pendulum = create_pendulum()

    pygame.init()
    try:
        screen = pygame.display.set_mode(CANVAS_SIZE)
        pygame.display.set_caption("Pendulum Simulation")
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

            screen.fill(CANVAS_COLOR)
            pendulum.apply_force()
            pendulum.update_position()
            pendulum.draw(screen, PENDULUM_COLOR)

            pygame.display.flip()
            pygame.time.wait(1)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())