"""The animatronics that roam the building at night."""

from __future__ import annotations

import enum
import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

import pygame

from toybox.fnaf.map import Name, Place
from toybox.vector import Vector

Color = tuple[int, int, int]

ANIMATRONIC_SIZE = 35
NIGHTS = 5


class TypeAnimatronic(enum.Enum):
    BONNIE = enum.auto()
    CHICA = enum.auto()
    FOXY = enum.auto()
    FREDDY = enum.auto()


@dataclass(frozen=True)
class _Profile:
    color: Color
    ais: tuple[int, ...]
    interval: int
    time_to_kill: int


_PROFILES = {
    TypeAnimatronic.BONNIE: _Profile((0, 0, 255), (5, 7, 9, 12, 15), 5, 10),
    TypeAnimatronic.CHICA: _Profile((255, 255, 0), (3, 5, 11, 12, 13), 5, 10),
    TypeAnimatronic.FOXY: _Profile((100, 0, 0), (0, 5, 8, 11, 14), 5, 30),
    TypeAnimatronic.FREDDY: _Profile((88, 57, 39), (0, 0, 5, 8, 9), 3, 7),
}


class Animatronic:
    """One animatronic walking from the stage towards the office.

    *clock* returns the seconds elapsed since the night began; it is shared
    by every animatronic of the night.
    """

    def __init__(
        self,
        position: Vector,
        possible_places: Sequence[Place],
        actual_place: Place,
        night: int,
        kind: TypeAnimatronic,
        clock: Callable[[], float],
        rng: random.Random | None = None,
    ) -> None:
        if not 1 <= night <= NIGHTS:
            raise ValueError(f"night must be between 1 and {NIGHTS}, got {night}")
        profile = _PROFILES[kind]
        self.kind = kind
        self.position = Vector(position.x, position.y)
        self.init_pos = Vector(position.x, position.y)
        self.possible_places = list(possible_places)
        self.actual_place = actual_place
        self.moved = False
        self.ai = profile.ais[night - 1]
        self.night = night
        self.visible = False
        self.color = profile.color
        self.interval = profile.interval
        self.time_to_kill = profile.time_to_kill
        self.init_to_kill = 0
        self.clock = clock
        self.rng = rng or random.Random()

    def _seconds(self) -> int:
        return int(self.clock())

    def _place(self, name: Name) -> Place:
        for place in self.possible_places:
            if place.name is name:
                return place
        raise KeyError(name)

    def _go(self, place: Place, x: float, y: float) -> None:
        self.actual_place = place
        self.position = Vector(x, y)

    def _go_home(self, stage: Place) -> None:
        self.actual_place = stage
        self.position = Vector(self.init_pos.x, self.init_pos.y)

    def _start_kill_timer(self) -> None:
        if self.init_to_kill == 0:
            self.init_to_kill = self._seconds()

    def change_night(self, night: int) -> None:
        self.night = night

    def move(self) -> None:
        """Try to move once at the start of every interval, as the AI level allows."""
        seconds = self._seconds()
        if seconds <= 0 or seconds % self.interval != 0:
            self.moved = False
            return
        if self.moved:
            return
        self.moved = True
        roll = self.rng.randint(1, 20)
        print(f"{roll}, {self.ai}")
        if self.ai < roll:
            return
        if self.kind is TypeAnimatronic.FOXY:
            return
        if self.kind is TypeAnimatronic.FREDDY and seconds // 60 < 1:
            print("Freddy couldn't move: it's not 1 am yet or more")
            return
        self.change_place()

    def check_kill(self) -> bool:
        """Whether the animatronic has waited at the door long enough to attack."""
        if self.init_to_kill == 0:
            return False
        return self._seconds() - self.init_to_kill >= self.time_to_kill

    def move_to_init(self) -> None:
        """Send the animatronic back to the stage (Foxy stays where it is)."""
        stage = self._place(Name.STAGE)
        if self.kind is not TypeAnimatronic.FOXY:
            self._go_home(stage)

    def change_place(self) -> None:
        """Take one step along this animatronic's route."""
        if not self.possible_places:
            return
        steps = {
            TypeAnimatronic.BONNIE: self._bonnie_step,
            TypeAnimatronic.CHICA: self._chica_step,
            TypeAnimatronic.FREDDY: self._freddy_step,
        }
        step = steps.get(self.kind)
        if step is not None:
            step()

    def _bonnie_step(self) -> None:
        stage = self._place(Name.STAGE)
        center = self._place(Name.CENTER)
        hall = self._place(Name.LEFT_HALL)
        corner = self._place(Name.LHC)
        size = ANIMATRONIC_SIZE

        def to_center() -> None:
            self._go(
                center,
                center.position.x + center.size[0] / 2.0 - 2 * size,
                center.position.y + center.size[1] / 2.0,
            )

        roll = self.rng.randint(1, 10)
        name = self.actual_place.name
        if name is Name.STAGE:
            if roll <= 8:
                to_center()
        elif name is Name.CENTER:
            if roll <= 8:
                self._go(
                    hall,
                    hall.position.x + hall.size[0] / 2.0 - size / 2.0,
                    hall.position.y + hall.size[1] / 2.0,
                )
            else:
                self._go_home(stage)
        elif name is Name.LEFT_HALL:
            if roll <= 7:
                self._go(
                    corner,
                    corner.position.x + corner.size[0] / 2.0 + size,
                    corner.position.y + corner.size[1] / 2.0,
                )
                self._start_kill_timer()
            else:
                to_center()
        elif name is Name.LHC:
            self.check_kill()
        print(f"Bonnie changed to {self.actual_place.name.name}")

    def _chica_step(self) -> None:
        stage = self._place(Name.STAGE)
        center = self._place(Name.CENTER)
        hall = self._place(Name.RIGHT_HALL)
        corner = self._place(Name.RHC)
        size = ANIMATRONIC_SIZE

        def to_center() -> None:
            self._go(
                center,
                center.position.x + center.size[0] - 3 * size,
                center.position.y + center.size[1] / 2.0,
            )

        roll = self.rng.randint(1, 10)
        name = self.actual_place.name
        if name is Name.STAGE:
            if roll <= 8:
                to_center()
        elif name is Name.CENTER:
            if roll <= 7:
                self._go(
                    hall,
                    hall.position.x + hall.size[0] / 2.0 - size / 2.0,
                    hall.position.y + hall.size[1] / 2.0,
                )
            else:
                self._go_home(stage)
        elif name is Name.RIGHT_HALL:
            if roll <= 7:
                self._go(
                    corner,
                    corner.position.x + size,
                    corner.position.y + corner.size[1] / 2.0,
                )
                self._start_kill_timer()
            else:
                to_center()
        elif name is Name.RHC:
            self.check_kill()
        print(f"Chica changed to {self.actual_place.name.name}")

    def _freddy_step(self) -> None:
        if self.actual_place.clicked:
            print("Freddy couldn't move: player was lightning it")
            return

        self._place(Name.STAGE)
        center = self._place(Name.CENTER)
        hall = self._place(Name.RIGHT_HALL)
        corner = self._place(Name.RHC)
        size = ANIMATRONIC_SIZE

        name = self.actual_place.name
        if name is Name.STAGE:
            self._go(center, self.init_pos.x, center.position.y + center.size[1] / 2.0)
        elif name is Name.CENTER:
            self._go(
                hall,
                hall.position.x + hall.size[0] / 2.0 - size / 2.0,
                hall.position.y + hall.size[1] / 4.0,
            )
        elif name is Name.RIGHT_HALL:
            self._go(
                corner,
                corner.position.x + size * 2.0,
                corner.position.y + corner.size[1] / 2.0,
            )
            self._start_kill_timer()
        elif name is Name.RHC:
            self.check_kill()
        print(f"Freddy changed to {self.actual_place.name.name}")

    def change_visible(self) -> None:
        """Visible exactly when the light of its room is on."""
        self.visible = self.actual_place.clicked

    def draw(self, surface: pygame.Surface) -> None:
        if not self.visible:
            return
        rect = pygame.Rect(
            int(self.position.x), int(self.position.y), ANIMATRONIC_SIZE, ANIMATRONIC_SIZE
        )
        pygame.draw.rect(surface, self.color, rect)


@dataclass
class Animatronics:
    """Every animatronic active this night."""

    animatronics: list[Animatronic] = field(default_factory=list)

    def add_animatronic(self, animatronic: Animatronic) -> None:
        self.animatronics.append(animatronic)

    def draw(self, surface: pygame.Surface) -> None:
        for animatronic in self.animatronics:
            animatronic.draw(surface)

    def move(self) -> None:
        for animatronic in self.animatronics:
            animatronic.move()

    def change_visible(self) -> None:
        for animatronic in self.animatronics:
            animatronic.change_visible()

    def check_kill(self) -> bool:
        """Whether any animatronic is ready to attack."""
        return any(animatronic.check_kill() for animatronic in self.animatronics)