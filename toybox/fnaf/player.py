"""The buttons the night guard presses in the office."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

import pygame

from toybox.fnaf.map import Place
from toybox.vector import Vector

Color = tuple[int, int, int]

BUTTON_SIZE = 25
BORDER_COLOR: Color = (0, 0, 0)
LB_IDLE_COLOR: Color = (0, 255, 0)
LB_CLICKED_COLOR: Color = (0, 100, 0)
SB_IDLE_COLOR: Color = (255, 0, 0)
SB_CLICKED_COLOR: Color = (100, 0, 0)


@dataclass(eq=False)
class Button:
    """A square toggle button tied to a room."""

    kind: ClassVar[str]
    idle_color: ClassVar[Color]
    clicked_color: ClassVar[Color]

    position: Vector
    place: Place
    clicked: bool = False

    @property
    def color(self) -> Color:
        return self.clicked_color if self.clicked else self.idle_color

    def _rect(self) -> pygame.Rect:
        return pygame.Rect(
            int(self.position.x), int(self.position.y), BUTTON_SIZE, BUTTON_SIZE
        )

    def _hit(self, mouse_position: tuple[int, int]) -> bool:
        return bool(self._rect().collidepoint(mouse_position))

    def _toggle(self) -> None:
        self.clicked = not self.clicked

    def draw(self, surface: pygame.Surface) -> None:
        rect = self._rect()
        pygame.draw.rect(surface, self.color, rect)
        pygame.draw.rect(surface, BORDER_COLOR, rect, 1)

    def on_click(self, mouse_position: tuple[int, int]) -> None:
        """Toggle the button if the click landed on it."""
        if self._hit(mouse_position):
            self._toggle()


@dataclass(eq=False)
class LightButton(Button):
    """Switches the light of its room on and off."""

    kind: ClassVar[str] = "LB"
    idle_color: ClassVar[Color] = LB_IDLE_COLOR
    clicked_color: ClassVar[Color] = LB_CLICKED_COLOR

    def on_click(self, mouse_position: tuple[int, int]) -> None:
        """Toggle the room's light and the button itself if hit."""
        if self._hit(mouse_position):
            self.place.clicked = not self.place.clicked
            self._toggle()


@dataclass(eq=False)
class SoundButton(Button):
    """Plays a sound towards its room, leaving the light alone."""

    kind: ClassVar[str] = "SB"
    idle_color: ClassVar[Color] = SB_IDLE_COLOR
    clicked_color: ClassVar[Color] = SB_CLICKED_COLOR

    def on_click(self, mouse_position: tuple[int, int]) -> None:
        """Toggle only the button if hit."""
        if self._hit(mouse_position):
            self._toggle()


@dataclass
class Buttons:
    """Every button in the office."""

    buttons: list[Button] = field(default_factory=list)

    def add_button(self, button: Button) -> None:
        self.buttons.append(button)

    def draw(self, surface: pygame.Surface) -> None:
        for button in self.buttons:
            button.draw(surface)

    def on_click(self, mouse_position: tuple[int, int]) -> None:
        for button in self.buttons:
            button.on_click(mouse_position)