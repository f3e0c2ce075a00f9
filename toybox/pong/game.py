"""Pong: one paddle under the keyboard, the other driven by the computer."""

from __future__ import annotations

import argparse
import enum
import random
import sys
import time

import pygame

from toybox.pong.features import Ball, Bar, TextHandler, Who
from toybox.vector import Vector

CANVAS_SIZE = (800, 600)
CANVAS_COLOR = (0, 0, 0)
BALL_POSITION = (CANVAS_SIZE[0] // 2 * 1.0, CANVAS_SIZE[1] // 2 * 1.0)
BALL_COLOR = (255, 0, 0)
BAR_L_POSITION = (0.0, float(CANVAS_SIZE[1] // 2 - 40))
BAR_R_POSITION = (float(CANVAS_SIZE[0] - 20), float(CANVAS_SIZE[1] // 2 - 40))
BAR_COLOR = (0, 0, 255)
TEXT_COLOR = (0, 255, 0)
FONT_PATH = "../assets/ASMAN.TTF"
FONT_SIZE = 20
WINNING_SCORE = 2
BAR_SPEED = 5.0
RUN_DELAY = 1e-6


class GameStatus(enum.Enum):
    START = enum.auto()
    RUNNING = enum.auto()
    END = enum.auto()


class PongGame:
    """The state of a pong match and the rules that advance it."""

    def __init__(self, font_path: str | None = FONT_PATH) -> None:
        self.status = GameStatus.START
        self.left_bar = Bar(
            Vector(*BAR_L_POSITION),
            TextHandler(font_path, FONT_SIZE, Vector(10.0, 10.0), TEXT_COLOR),
        )
        self.right_bar = Bar(
            Vector(*BAR_R_POSITION),
            TextHandler(
                font_path, FONT_SIZE, Vector(CANVAS_SIZE[0] - 100.0, 10.0), TEXT_COLOR
            ),
        )
        self.ball = Ball(Vector(*BALL_POSITION), [self.left_bar, self.right_bar])

    @property
    def bars(self) -> list[Bar]:
        return [self.left_bar, self.right_bar]

    def press_return(self, rng: random.Random | None = None) -> None:
        """Serve the ball if the game is waiting to start."""
        if self.status is not GameStatus.START:
            return
        rng = rng or random.Random()
        self.ball.start(
            Vector(float(rng.randrange(1, 3)), float(rng.randrange(1, 3)))
        )
        self.left_bar.start(Vector(0.0, -BAR_SPEED))
        self.right_bar.start(Vector(0.0, BAR_SPEED))
        self.status = GameStatus.RUNNING

    def press_key(self, key: int) -> None:
        """W moves the player's paddle up, S moves it down."""
        if key == pygame.K_w:
            self.left_bar.velocity.y = -BAR_SPEED
        elif key == pygame.K_s:
            self.left_bar.velocity.y = BAR_SPEED

    def start_game(self) -> None:
        """Put ball and paddles back in place and clear the scores."""
        self.ball.velocity = Vector(0.0, 0.0)
        self.ball.position = Vector(*BALL_POSITION)
        for bar, position in zip(self.bars, (BAR_L_POSITION, BAR_R_POSITION)):
            bar.velocity = Vector(0.0, 0.0)
            bar.score = 0
            bar.position = Vector(*position)

    def run_game(self) -> None:
        """Advance one frame and end the match once someone wins."""
        self.ball.update_position(self.bars)
        self.left_bar.update_position(self.ball, Who.PLAYER)
        self.right_bar.update_position(self.ball, Who.AI)
        if any(bar.score == WINNING_SCORE for bar in self.bars):
            self.status = GameStatus.END
        time.sleep(RUN_DELAY)

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
    parser = argparse.ArgumentParser(description="Pong game.")
    parser.add_argument("--font", default=FONT_PATH, help="TrueType font file")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(CANVAS_SIZE)
        pygame.display.set_caption("Pong game")
        game = PongGame(args.font)
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_RETURN:
                        game.press_return()
                    else:
                        game.press_key(event.key)

            screen.fill(CANVAS_COLOR)
            game.ball.draw(screen, BALL_COLOR)
            game.left_bar.draw(screen, BAR_COLOR)
            game.right_bar.draw(screen, BAR_COLOR)
            game.tick()
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())