"""Breakout: bounce the ball off the paddle to break every brick."""

from __future__ import annotations

import argparse
import enum
import sys
import time

import pygame

from toybox.breakout.features import Ball, Bar
from toybox.vector import Vector

CANVAS_SIZE = (800, 400)
CANVAS_COLOR = (0, 0, 0)
BAR_COLOR = (255, 255, 255)
BAR_SIZE = (100, 20)
BAR_POSITION = (
    CANVAS_SIZE[0] // 2 - BAR_SIZE[0] // 2,
    CANVAS_SIZE[1] - 2 * BAR_SIZE[1],
)
BAR_SPEED = 3.0
BALL_COLOR = (255, 100, 50)
BALL_SIZE = 15
BALL_POSITION = (
    CANVAS_SIZE[0] // 2 - BALL_SIZE // 2,
    CANVAS_SIZE[1] // 2 - BALL_SIZE // 2,
)
BARS_NUMBER_X = CANVAS_SIZE[0] // BAR_SIZE[0]
BARS_NUMBER_Y = 5
BARS_NUMBER = BARS_NUMBER_X * BARS_NUMBER_Y
SERVE_VELOCITY = (-2.0, 2.0)
FRAME_DELAY = 0.001

# Colour and starting health of the bricks in each row, top row first.
_ROWS = {
    0: ((255, 0, 0), 3),
    1: ((0, 255, 0), 2),
    2: ((0, 255, 0), 2),
    3: ((0, 0, 255), 1),
    4: ((0, 0, 255), 1),
}


class GameStatus(enum.Enum):
    START = enum.auto()
    RUNNING = enum.auto()
    END = enum.auto()


def create_level() -> list[Bar]:
    """A full wall of bricks, row by row from the top."""
    bricks = []
    for row in range(BARS_NUMBER_Y):
        color, health = _ROWS[row]
        for column in range(BARS_NUMBER_X):
            position = Vector(float(BAR_SIZE[0] * column), float(BAR_SIZE[1] * row))
            bricks.append(Bar(position, color, BAR_SIZE, 0.0, True, health))
    return bricks


def _home(position: tuple[int, int]) -> Vector:
    return Vector(float(position[0]), float(position[1]))


class BreakoutGame:
    """The state of a breakout game and the rules that advance it."""

    def __init__(self, frame_delay: float = FRAME_DELAY) -> None:
        self.frame_delay = frame_delay
        self.status = GameStatus.START
        self.bricks = create_level()
        self.paddle = Bar(_home(BAR_POSITION), BAR_COLOR, BAR_SIZE, BAR_SPEED, False, 1)
        self.ball = Ball(_home(BALL_POSITION), BALL_COLOR, BALL_SIZE)

    def press_return(self) -> None:
        """Serve the ball if the game is waiting to start."""
        if self.status is not GameStatus.START:
            return
        self.status = GameStatus.RUNNING
        self.ball.start(Vector(*SERVE_VELOCITY))

    def remove_broken(self) -> None:
        """Drop every brick whose health has run out."""
        self.bricks = [brick for brick in self.bricks if brick.health > 0]

    def start_game(self) -> None:
        """Rebuild the wall if needed and put paddle and ball back in place."""
        if len(self.bricks) != BARS_NUMBER:
            self.bricks = create_level()

        self.paddle.velocity = Vector(0.0, 0.0)
        self.paddle.position = _home(BAR_POSITION)

        self.ball.lost = False
        self.ball.velocity = Vector(0.0, 0.0)
        self.ball.position = _home(BALL_POSITION)

    def run_game(self) -> None:
        """Advance one frame, ending the game when the ball is lost or the wall is gone."""
        if self.ball.lost or not self.bricks:
            self.status = GameStatus.END
            return

        for brick in self.bricks:
            self.ball.check_collision_bar(brick)
        self.ball.check_collision_bar(self.paddle)
        self.paddle.update_position()
        self.ball.update_position()
        if self.frame_delay:
            time.sleep(self.frame_delay)

    def end_game(self) -> None:
        self.status = GameStatus.START

    def tick(self) -> None:
        """Do whatever the current status calls for this frame."""
        if self.status is GameStatus.START:
            self.start_game()
        elif self.status is GameStatus.RUNNING:
            self.run_game()
        else:
            self.end_game()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Breakout game.")
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(CANVAS_SIZE)
        pygame.display.set_caption("Breakout game")
        game = BreakoutGame()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break
                if event.type == pygame.KEYDOWN and event.key == pygame.K_RETURN:
                    game.press_return()
                    continue
                game.paddle.move_by_keyboard(event)

            screen.fill(CANVAS_COLOR)
            game.remove_broken()
            for brick in game.bricks:
                brick.draw(screen)
            game.paddle.draw(screen)
            game.ball.draw(screen)
            game.tick()
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())