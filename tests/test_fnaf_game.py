import random

import pygame
import pytest

from toybox.fnaf.animatronics import TypeAnimatronic
from toybox.fnaf.game import OFFICE_COLOR, GameStatus, Manager
from toybox.fnaf.map import Name


class FakeClock:
    def __init__(self) -> None:
        self.t = 1000.0

    def __call__(self) -> float:
        return self.t


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def manager(clock):
    surface = pygame.Surface((800, 600))
    return Manager(surface, font_path=None, now=clock, rng=random.Random(0), frame_delay=0)


def _center(button):
    return (int(button.position.x) + 5, int(button.position.y) + 5)


def test_map_has_every_room_once(manager):
    manager.create_map()
    names = [place.name for place in manager.map.places]
    assert sorted(n.value for n in names) == sorted(n.value for n in Name)


def test_map_rooms_fit_together(manager):
    manager.create_map()
    office = manager.map.get(Name.OFFICE)
    lhc = manager.map.get(Name.LHC)
    rhc = manager.map.get(Name.RHC)
    center = manager.map.get(Name.CENTER)
    assert lhc.position.x + lhc.size[0] == office.position.x
    assert rhc.position.x == office.position.x + office.size[0]
    assert center.position.x == office.position.x
    assert center.size[0] == office.size[0]


def test_buttons_need_a_map(manager):
    manager.create_buttons()
    assert manager.buttons is None


def test_buttons_layout(manager):
    manager.create_map()
    manager.create_buttons()
    kinds = [button.kind for button in manager.buttons.buttons]
    assert kinds.count("LB") == 7
    assert kinds.count("SB") == 2
    light_places = {id(b.place) for b in manager.buttons.buttons if b.kind == "LB"}
    assert len(light_places) == 7
    sound_names = [b.place.name for b in manager.buttons.buttons if b.kind == "SB"]
    assert sound_names == [Name.LHC, Name.RHC]


def test_animatronics_start_on_stage(manager):
    manager.create_game()
    stage = manager.map.get(Name.STAGE)
    kinds = [a.kind for a in manager.animatronics.animatronics]
    assert kinds == [TypeAnimatronic.BONNIE, TypeAnimatronic.CHICA, TypeAnimatronic.FREDDY]
    assert all(a.actual_place is stage for a in manager.animatronics.animatronics)
    assert manager.animatronics.animatronics[0].ai == 9


def test_animatronics_need_a_map(manager):
    with pytest.raises(RuntimeError):
        manager.create_animatronics()


def test_hour_starts_at_twelve(manager, clock):
    manager.create_game()
    assert manager.hour() == 12
    clock.t += 125
    assert manager.hour() == 2


def test_run_game_keeps_running_and_draws(manager, clock):
    manager.create_game()
    clock.t += 1
    assert manager.run_game() is GameStatus.RUNNING
    office = manager.map.get(Name.OFFICE)
    x = int(office.position.x) + office.size[0] - 5
    y = int(office.position.y) + office.size[1] - 5
    assert tuple(manager.surface.get_at((x, y)))[:3] == OFFICE_COLOR


def test_run_game_ends_at_six(manager, clock):
    manager.create_game()
    clock.t += 6 * 60
    assert manager.run_game() is GameStatus.END


def test_run_game_ends_on_kill(manager, clock):
    manager.create_game()
    bonnie = manager.animatronics.animatronics[0]
    bonnie.init_to_kill = 1
    clock.t += 1 + bonnie.time_to_kill
    assert manager.run_game() is GameStatus.END


def test_run_game_before_create_raises(manager):
    with pytest.raises(RuntimeError):
        manager.run_game()


def test_light_button_click_lights_room(manager):
    manager.create_game()
    button = next(b for b in manager.buttons.buttons if b.kind == "LB")
    assert button.place.clicked is False
    manager.buttons_on_click(_center(button))
    assert button.place.clicked is True
    assert button.clicked is True


def test_sound_button_sends_door_visitor_home(manager):
    manager.create_game()
    bonnie = manager.animatronics.animatronics[0]
    bonnie.actual_place = manager.map.get(Name.LHC)
    bonnie.init_to_kill = 5
    sound = next(b for b in manager.buttons.buttons if b.kind == "SB")
    manager.buttons_on_click(_center(sound))
    assert bonnie.actual_place is manager.map.get(Name.STAGE)
    assert bonnie.init_to_kill == 0
    assert bonnie.position == bonnie.init_pos


def test_end_game_clears_everything(manager):
    manager.create_game()
    assert manager.end_game() is GameStatus.START
    assert manager.map is None
    assert manager.buttons is None
    assert manager.animatronics is None


def test_draw_canvas_clears_to_black(manager):
    manager.surface.fill((10, 20, 30))
    manager.draw_canvas()
    assert tuple(manager.surface.get_at((0, 0)))[:3] == (0, 0, 0)