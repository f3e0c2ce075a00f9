"""Paddles, ball and score text for the pong game."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

import pygame

from toybox.vector import Vector

Color = tuple[int, int, int]

CANVAS_SIZE = (800, 600)
BAR_SIZE = (20, 100)
BALL_SIZE = 20


@dataclass(eq=False)
class TextHandler:
    """Renders text with one font, size and colour at a fixed position.

    A *font* of None uses pygame's default font.
    """

    font: str | None
    size: int
    position: Vector
    color: Color
    _loaded: pygame.font.Font | None = field(default=None, init=False, repr=False)

    def draw_text(self, text: str, surface: pygame.Surface) -> None:
        if self._loaded is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._loaded = pygame.font.Font(self.font, self.size)
        rendered = self._loaded.render(text, True, self.color)
        surface.blit(rendered, (int(self.position.x), int(self.position.y)))


class Who(enum.Enum):
    """Who controls a paddle."""

    PLAYER = enum.auto()
    AI = enum.auto()


@dataclass(eq=False)
class Bar:
    """A paddle that keeps its own score."""

    position: Vector
    text_handler: TextHandler
    velocity: Vector = field(default_factory=Vector)
    score: int = 0
    size: tuple[int, int] = BAR_SIZE

    def start(self, velocity: Vector) -> None:
        self.velocity = velocity

    def update_position(self, ball: Ball, who: Who) -> None:
        """Bounce off the canvas, follow the ball if computer driven, then move."""
        self._check_collision_canvas()
        if who is Who.AI:
            y_overlap = self.position.y - self.size[1]
            if y_overlap > 0.0:
                self.position.y = y_overlap
            else:
                self.position.y = ball.position.y
        self.position = self.position + self.velocity

    def _check_collision_canvas(self) -> None:
        height = float(self.size[1])
        if self.position.y <= 0.0:
            self.position.y = 0.0
            self.velocity.y = -self.velocity.y
        if self.position.y + height >= CANVAS_SIZE[1]:
            self.position.y = CANVAS_SIZE[1] - height
            self.velocity.y = -self.velocity.y

    def draw(self, surface: pygame.Surface, color: Color) -> None:
        rect = pygame.Rect(
            int(self.position.x), int(self.position.y), self.size[0], self.size[1]
        )
        pygame.draw.rect(surface, color, rect)
        self.text_handler.draw_text(f"SCORE: {self.score}", surface)


@dataclass(eq=False)
class Ball:
    """The ball; it credits a point to a paddle when it reaches a side wall."""

    position: Vector
    bars: list[Bar] = field(default_factory=list)
    velocity: Vector = field(default_factory=Vector)
    size: int = BALL_SIZE

    def start(self, velocity: Vector) -> None:
        self.velocity = velocity

    def update_position(self, bars: list[Bar]) -> None:
        """Bounce off the paddles and walls, then move."""
        for bar in bars:
            self._check_collision_bar(bar)
        self._check_collision_canvas()
        self.position = self.position + self.velocity

    def draw(self, surface: pygame.Surface, color: Color) -> None:
        rect = pygame.Rect(
            int(self.position.x), int(self.position.y), self.size, self.size
        )
        pygame.draw.rect(surface, color, rect)

    def _check_collision_bar(self, bar: Bar) -> None:
        extent = float(self.size)
        width, height = (float(v) for v in bar.size)
        bar_x, bar_y = bar.position.x, bar.position.y

        apart = (
            self.position.x >= bar_x + width
            or self.position.x + extent <= bar_x
            or self.position.y >= bar_y + height
            or self.position.y + extent <= bar_y
        )
        if apart:
            return
        self.velocity.x = -self.velocity.x
        if self.position.x - bar_x < 0.0:
            self.position.x = bar_x - width
        else:
            self.position.x = bar_x + width

    def _increment_score(self, index: int) -> None:
        if len(self.bars) != 2:
            return
        self.bars[index].score += 1

    def _check_collision_canvas(self) -> None:
        radius = self.size / 2.0
        width, height = CANVAS_SIZE

        if self.position.x - radius <= 0.0:
            self.position.x = radius
            self.velocity.x = -self.velocity.x
            self._increment_score(1)

        if self.position.x + radius >= width:
            self.position.x = width - radius
            self.velocity.x = -self.velocity.x
            self._increment_score(0)

        if self.position.y <= 0.0:
            self.position.y = 0.0
            self.velocity.y = -self.velocity.y

        if self.position.y + radius >= height:
            self.position.y = height - radius
            self.velocity.y = -self.velocity.y