"""A night at the pizzeria: watch the rooms and keep the animatronics away."""

from __future__ import annotations

import argparse
import enum
import random
import sys
import time
from collections.abc import Callable

import pygame

from toybox.fnaf.animatronics import ANIMATRONIC_SIZE, Animatronic, Animatronics, TypeAnimatronic
from toybox.fnaf.map import Map, Name, Place
from toybox.fnaf.player import Buttons, LightButton, SoundButton
from toybox.vector import Vector

CANVAS_SIZE = (800, 600)
CANVAS_COLOR = (0, 0, 0)
OFFICE_COLOR = (100, 100, 100)
OFFICE_SIZE = (300, 150)
OFFICE_POSITION = (
    CANVAS_SIZE[0] / 2.0 - OFFICE_SIZE[0] / 2.0,
    CANVAS_SIZE[1] / 2.0 - OFFICE_SIZE[1] / 2.0 + 150.0,
)
PLAYER_COLOR = (255, 0, 0)
PLAYER_SIZE = (50, 50)
TEXT_COLOR = (255, 255, 255)
FONT_PATH = "assets/font.TTF"
FONT_SIZE = 16
DEFAULT_NIGHT = 3
LAST_HOUR = 6
FRAME_DELAY = 0.016

__all__ = ["GameStatus", "TextHandler", "Manager", "main"]


class GameStatus(enum.Enum):
    START = enum.auto()
    RUNNING = enum.auto()
    END = enum.auto()


class TextHandler:
    """Draws text in one font, size and colour at a fixed position.

    A *font* of None uses pygame's default font.
    """

    def __init__(
        self,
        font: str | None,
        size: int,
        position: Vector,
        color: tuple[int, int, int],
    ) -> None:
        self.font = font
        self.size = size
        self.position = position
        self.color = color
        self._loaded: pygame.font.Font | None = None

    def _load(self) -> pygame.font.Font:
        if self._loaded is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._loaded = pygame.font.Font(self.font, self.size)
        return self._loaded

    def draw_text(self, text: str, surface: pygame.Surface) -> None:
        rendered = self._load().render(text, True, self.color)
        surface.blit(rendered, (int(self.position.x), int(self.position.y)))


class Manager:
    """Builds a night, advances it frame by frame and draws it on *surface*.

    *now* returns a monotonic time in seconds; the night's clock starts
    from it whenever the timer is reset.
    """

    def __init__(
        self,
        surface: pygame.Surface,
        font_path: str | None = FONT_PATH,
        night: int = DEFAULT_NIGHT,
        now: Callable[[], float] = time.monotonic,
        rng: random.Random | None = None,
        frame_delay: float = FRAME_DELAY,
    ) -> None:
        self.surface = surface
        self.night = night
        self.frame_delay = frame_delay
        self.rng = rng or random.Random()
        self._now = now
        self._start = now()
        self.animatronics: Animatronics | None = None
        self.map: Map | None = None
        self.buttons: Buttons | None = None
        self.night_handler = TextHandler(
            font_path, FONT_SIZE, Vector(CANVAS_SIZE[0] - 70.0, 10.0), TEXT_COLOR
        )
        self.hour_handler = TextHandler(
            font_path, FONT_SIZE, Vector(CANVAS_SIZE[0] - 70.0, 40.0), TEXT_COLOR
        )

    def _elapsed(self) -> float:
        return self._now() - self._start

    def draw_canvas(self) -> None:
        self.surface.fill(CANVAS_COLOR)

    def present_canvas(self) -> None:
        """Show the frame if the surface belongs to an open window."""
        if pygame.display.get_surface() is not None:
            pygame.display.flip()

    def create_map(self) -> None:
        """Lay out the office, the corners, the halls, the dining area, stage and cove."""
        self.map = Map()

        office = Place(Vector(*OFFICE_POSITION), OFFICE_COLOR, OFFICE_SIZE, Name.OFFICE)
        corner_size = (office.size[0] // 2, 100)
        left_corner = Place(
            Vector(office.position.x - office.size[0] / 2.0, office.position.y),
            OFFICE_COLOR,
            corner_size,
            Name.LHC,
        )
        right_corner = Place(
            Vector(office.position.x + office.size[0], office.position.y),
            OFFICE_COLOR,
            corner_size,
            Name.RHC,
        )

        hall_size = (left_corner.size[0] - 50, 300)
        left_hall = Place(
            Vector(left_corner.position.x, left_corner.position.y - hall_size[1]),
            OFFICE_COLOR,
            hall_size,
            Name.LEFT_HALL,
        )
        right_hall = Place(
            Vector(right_corner.position.x + 50.0, right_corner.position.y - hall_size[1]),
            OFFICE_COLOR,
            hall_size,
            Name.RIGHT_HALL,
        )

        center_size = (office.size[0], hall_size[1] - 50)
        center = Place(
            Vector(office.position.x, office.position.y - hall_size[1]),
            OFFICE_COLOR,
            center_size,
            Name.CENTER,
        )

        cove_size = (center_size[0] // 4, center_size[1] // 3)
        cove = Place(
            Vector(center.position.x, center.position.y + (center_size[1] - cove_size[1])),
            OFFICE_COLOR,
            cove_size,
            Name.COVE,
        )

        stage_size = (center_size[0] // 2, center_size[1] // 3)
        stage = Place(
            Vector(center.position.x + stage_size[0] / 2.0, center.position.y + 25.0),
            OFFICE_COLOR,
            stage_size,
            Name.STAGE,
        )

        for place in (office, center, left_corner, right_corner, right_hall, left_hall, stage, cove):
            self.map.add_place(place)

    def create_buttons(self) -> None:
        """Put a light button for each watched room and two door sound buttons in the office."""
        if self.map is None:
            return

        self.buttons = Buttons()
        interval = float(OFFICE_SIZE[0] // 7)
        get = self.map.get

        lhc_button = LightButton(
            Vector(OFFICE_POSITION[0] + interval / 3.5, OFFICE_POSITION[1]), get(Name.LHC)
        )
        base_x, base_y = lhc_button.position.x, lhc_button.position.y

        def light(steps: int, name: Name) -> LightButton:
            return LightButton(Vector(base_x + steps * interval, base_y), get(name))

        center_button = light(2, Name.CENTER)
        rhc_button = LightButton(
            Vector(base_x + 6.0 * interval, OFFICE_POSITION[1]), get(Name.RHC)
        )
        lh_button = light(1, Name.LEFT_HALL)
        rh_button = light(5, Name.RIGHT_HALL)
        stage_button = light(4, Name.STAGE)
        cove_button = light(3, Name.COVE)

        left_sound = SoundButton(Vector(base_x, base_y + 80.0), get(Name.LHC))
        right_sound = SoundButton(
            Vector(rhc_button.position.x, rhc_button.position.y + 80.0), get(Name.RHC)
        )

        for button in (
            center_button,
            rhc_button,
            lh_button,
            lhc_button,
            rh_button,
            stage_button,
            cove_button,
            left_sound,
            right_sound,
        ):
            self.buttons.add_button(button)

    def create_animatronics(self) -> None:
        """Place Bonnie, Chica and Freddy on the stage, sharing the night's clock."""
        if self.map is None:
            raise RuntimeError("the map must be created before the animatronics")

        get = self.map.get
        stage = get(Name.STAGE)
        center = get(Name.CENTER)
        left_hall = get(Name.LEFT_HALL)
        left_corner = get(Name.LHC)
        right_corner = get(Name.RHC)
        right_hall = get(Name.RIGHT_HALL)

        start = self._start
        now = self._now

        def clock() -> float:
            return now() - start

        def make(position: Vector, places: list[Place], kind: TypeAnimatronic) -> Animatronic:
            return Animatronic(position, places, stage, self.night, kind, clock, self.rng)

        bonnie = make(
            Vector(stage.position.x + 10.0, stage.position.y + 10.0),
            [stage, center, left_hall, left_corner],
            TypeAnimatronic.BONNIE,
        )
        chica = make(
            Vector(
                bonnie.position.x + stage.size[0] - ANIMATRONIC_SIZE - 20.0,
                bonnie.position.y,
            ),
            [stage, center, right_hall, right_corner],
            TypeAnimatronic.CHICA,
        )
        freddy = make(
            Vector(
                stage.position.x + stage.size[0] / 2.0 - ANIMATRONIC_SIZE / 2.0,
                bonnie.position.y,
            ),
            [stage, center, right_hall, right_corner],
            TypeAnimatronic.FREDDY,
        )

        self.animatronics = Animatronics()
        for animatronic in (bonnie, chica, freddy):
            self.animatronics.add_animatronic(animatronic)

    def check_animatronics(self) -> None:
        """Scare every animatronic waiting at a door back to the stage."""
        if self.animatronics is None:
            return
        for animatronic in self.animatronics.animatronics:
            if animatronic.actual_place.name in (Name.LHC, Name.RHC):
                animatronic.init_to_kill = 0
                animatronic.move_to_init()

    def buttons_on_click(self, position: tuple[int, int]) -> None:
        """Pass a click to the buttons; a pressed sound button drives the door visitors off."""
        if self.buttons is None:
            return
        self.buttons.on_click(position)
        for button in self.buttons.buttons:
            if button.kind == "SB" and button.clicked:
                self.check_animatronics()

    def create_game(self) -> None:
        self.init_timer()
        self.create_map()
        self.create_buttons()
        self.create_animatronics()

    def start_game(self) -> None:
        """Nothing happens while waiting for the player to begin the night."""

    def hour(self) -> int:
        """The in-game hour: one per real minute, starting at 12."""
        minutes = int(self._elapsed()) // 60
        return 12 if minutes == 0 else minutes

    def run_game(self) -> GameStatus:
        """Advance and draw one frame; END once someone is caught or the night is over."""
        if self.animatronics is None or self.map is None or self.buttons is None:
            raise RuntimeError("the game has not been created")

        if self.animatronics.check_kill():
            return GameStatus.END
        if self.hour() == LAST_HOUR:
            return GameStatus.END

        self.animatronics.move()
        self.animatronics.change_visible()
        self.map.draw(self.surface)
        self.animatronics.draw(self.surface)
        self.buttons.draw(self.surface)

        self.night_handler.draw_text(f"Night {self.night}", self.surface)
        self.hour_handler.draw_text(f"{self.hour()} AM", self.surface)

        if self.frame_delay:
            time.sleep(self.frame_delay)
        return GameStatus.RUNNING

    def end_game(self) -> GameStatus:
        """Tear the night down and wait for a new one."""
        self.animatronics = None
        self.buttons = None
        self.map = None
        return GameStatus.START

    def init_timer(self) -> None:
        self._start = self._now()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Survive the night.")
    parser.add_argument("--font", default=FONT_PATH, help="TrueType font file")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(CANVAS_SIZE)
        pygame.display.set_caption("2d fnaf")
        manager = Manager(screen, args.font)
        status = GameStatus.START
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break
                if event.type == pygame.KEYDOWN and event.key == pygame.K_RETURN:
                    if status is not GameStatus.START:
                        continue
                    status = GameStatus.RUNNING
                    manager.create_game()
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    manager.buttons_on_click(event.pos)

            manager.draw_canvas()
            if status is GameStatus.START:
                manager.start_game()
            elif status is GameStatus.RUNNING:
                status = manager.run_game()
            else:
                status = manager.end_game()
            manager.present_canvas()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())