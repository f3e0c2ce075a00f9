"""A chain of randomly placed springs bouncing around the window."""

from __future__ import annotations

import argparse
import copy
import random
import sys

import pygame

from toybox.spring import Spring, SpringSystem
from toybox.vector import Vector

CANVAS_SIZE = (800, 600)
CANVAS_COLOR = (255, 255, 255)
SPRING_COLOR = (0, 0, 0)
SPRING_COUNT = 10


def _random_point(rng: random.Random) -> Vector:
    return Vector(float(rng.randrange(CANVAS_SIZE[0])), float(rng.randrange(CANVAS_SIZE[1])))


def create_random_springs(
    num: int = SPRING_COUNT, rng: random.Random | None = None
) -> SpringSystem:
    """Build a chain of *num* springs between random points on the canvas."""
    rng = rng or random.Random()
    system = SpringSystem()
    previous_end: Vector | None = None
    for _ in range(num):
        origin = _random_point(rng) if previous_end is None else copy.copy(previous_end)
        end = _random_point(rng)
        previous_end = copy.copy(end)
        system.add_spring(Spring(origin, 10.0, end, 1.0, 0.1, 100.0))
    return system


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Spring chain simulation.")
    parser.add_argument("--springs", type=int, default=SPRING_COUNT)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    system = create_random_springs(args.springs, random.Random(args.seed))

    pygame.init()
    try:
        screen = pygame.display.set_mode(CANVAS_SIZE)
        pygame.display.set_caption("Spring Simulation")
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

            screen.fill(CANVAS_COLOR)
            system.update()
            system.draw(screen, SPRING_COLOR)

            pygame.display.flip()
            pygame.time.wait(1)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())