"""Paddle, bricks and ball for the breakout game."""

from __future__ import annotations

from dataclasses import dataclass, field

import pygame

from toybox.vector import Vector

Color = tuple[int, int, int]

CANVAS_SIZE = (800, 400)
BORDER_COLOR: Color = (0, 0, 0)
DAMAGE_STEP = 50


def _clamp_to_canvas(position: Vector, size: tuple[float, float]) -> None:
    width, height = CANVAS_SIZE
    if position.x <= 0.0:
        position.x = 0.0
    if position.x >= width - size[0]:
        position.x = width - size[0]
    if position.y <= 0.0:
        position.y = 0.0
    if position.y >= height - size[1]:
        position.y = height - size[1]


@dataclass(eq=False)
class Bar:
    """A rectangle: the player's paddle, or a brick when *breakable*."""

    position: Vector
    color: Color
    size: tuple[int, int]
    speed: float
    breakable: bool
    health: int
    velocity: Vector = field(default_factory=Vector)

    def update_position(self) -> None:
        """Keep inside the canvas, then move."""
        _clamp_to_canvas(self.position, (float(self.size[0]), float(self.size[1])))
        self.position = self.position + self.velocity

    def move_by_keyboard(self, event: pygame.event.Event) -> None:
        """A moves left, D moves right."""
        if event.type != pygame.KEYDOWN:
            return
        key = getattr(event, "key", None)
        if key == pygame.K_a:
            self.velocity.x = -self.speed
        elif key == pygame.K_d:
            self.velocity.x = self.speed

    def _rect(self) -> pygame.Rect:
        return pygame.Rect(
            int(self.position.x), int(self.position.y), self.size[0], self.size[1]
        )

    def _damage(self) -> None:
        self.color = tuple(
            max(channel - DAMAGE_STEP, 0) if channel > 0 else channel
            for channel in self.color
        )

    def draw(self, surface: pygame.Surface) -> None:
        rect = self._rect()
        pygame.draw.rect(surface, self.color, rect)
        if self.breakable:
            pygame.draw.rect(surface, BORDER_COLOR, rect, 1)


@dataclass(eq=False)
class Ball:
    """The ball; *lost* is set once it touches the bottom edge."""

    position: Vector
    color: Color
    size: int
    velocity: Vector = field(default_factory=Vector)
    lost: bool = False

    def start(self, velocity: Vector) -> None:
        self.velocity = velocity

    def update_position(self) -> None:
        """Bounce off the walls, then move."""
        self._check_collision_bounds()
        self.position = self.position + self.velocity

    def _check_collision_bounds(self) -> None:
        x, y = self.position.x, self.position.y
        size = float(self.size)
        width, height = CANVAS_SIZE

        if x <= 0.0:
            self.position.x = 0.0
            self.velocity.x = -self.velocity.x
        if x >= width - size:
            self.position.x = width - size
            self.velocity.x = -self.velocity.x
        if y <= 0.0:
            self.position.y = 0.0
            self.velocity.y = -self.velocity.y
        if y >= height - size:
            self.position.y = height - size
            self.velocity.y = -self.velocity.y
            self.lost = True

    def _steer(self, bar_x: float, width: float) -> None:
        """Send the ball back towards the side of the paddle it struck."""
        if self.position.x <= bar_x + width / 2.0:
            if self.velocity.x > 0.0:
                self.velocity.x = -self.velocity.x
        elif self.velocity.x < 0.0:
            self.velocity.x = -self.velocity.x

    def check_collision_bar(self, bar: Bar) -> None:
        """Bounce off *bar*, wearing it down if it is a brick."""
        size = float(self.size)
        width, height = float(bar.size[0]), float(bar.size[1])
        bar_x, bar_y = bar.position.x, bar.position.y

        touching = (
            self.position.x + size >= bar_x
            and self.position.x <= bar_x + width
            and self.position.y + size >= bar_y
            and self.position.y <= bar_y + height
        )
        if not touching:
            return

        if bar.breakable:
            bar.health -= 1
            if bar.health > 0:
                bar._damage()

        delta_y = (self.position.y + size / 2.0) - (bar_y + height / 2.0)
        y_overlap = size / 2.0 + height / 2.0

        if self.velocity.y > 0.0 and delta_y < 0.0:
            if abs(delta_y) <= y_overlap:
                self.position.y = bar_y - height
                self.velocity.y = -self.velocity.y
                if not bar.breakable:
                    self._steer(bar_x, width)
        elif self.velocity.y < 0.0 and delta_y > 0.0:
            if abs(delta_y) <= y_overlap:
                self.position.y = bar_y + height
                self.velocity.y = -self.velocity.y
                if not bar.breakable:
                    self._steer(bar_x, width)

    def draw(self, surface: pygame.Surface) -> None:
        rect = pygame.Rect(
            int(self.position.x), int(self.position.y), self.size, self.size
        )
        pygame.draw.rect(surface, self.color, rect)