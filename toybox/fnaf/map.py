"""The rooms of the night guard's building."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

import pygame

from toybox.vector import Vector

Color = tuple[int, int, int]

BORDER_COLOR: Color = (0, 0, 100)
DARK_COLOR: Color = (0, 0, 0)


class Name(enum.Enum):
    OFFICE = enum.auto()
    LHC = enum.auto()
    RHC = enum.auto()
    RIGHT_HALL = enum.auto()
    LEFT_HALL = enum.auto()
    STAGE = enum.auto()
    CENTER = enum.auto()
    COVE = enum.auto()


@dataclass(eq=False)
class Place:
    """A room; *clicked* means its light is on."""

    position: Vector
    color: Color
    size: tuple[int, int]
    name: Name
    clicked: bool = False

    def draw(self, surface: pygame.Surface) -> None:
        """The office is always lit; other rooms are dark unless their light is on."""
        rect = pygame.Rect(
            int(self.position.x), int(self.position.y), self.size[0], self.size[1]
        )
        lit = self.name is Name.OFFICE or self.clicked
        pygame.draw.rect(surface, self.color if lit else DARK_COLOR, rect)
        pygame.draw.rect(surface, BORDER_COLOR, rect, 1)


@dataclass
class Map:
    """All the rooms, shared with the buttons and animatronics that refer to them."""

    places: list[Place] = field(default_factory=list)

    def add_place(self, place: Place) -> None:
        self.places.append(place)

    def draw(self, surface: pygame.Surface) -> None:
        for place in self.places:
            place.draw(surface)

    def get(self, name: Name) -> Place:
        """The first room called *name*; KeyError if there is none."""
        for place in self.places:
            if place.name is name:
                return place
        raise KeyError(name)