import pygame
import pytest

from toybox.fnaf.map import Name, Place
from toybox.fnaf.player import (
    BUTTON_SIZE,
    LB_CLICKED_COLOR,
    LB_IDLE_COLOR,
    SB_CLICKED_COLOR,
    SB_IDLE_COLOR,
    Buttons,
    LightButton,
    SoundButton,
)
from toybox.vector import Vector


@pytest.fixture
def room():
    return Place(Vector(0.0, 0.0), (100, 100, 100), (100, 100), Name.LHC)


def test_light_button_toggles_room_and_itself(room):
    button = LightButton(Vector(10.0, 10.0), room)
    assert button.color == LB_IDLE_COLOR
    button.on_click((15, 15))
    assert button.clicked is True
    assert room.clicked is True
    assert button.color == LB_CLICKED_COLOR
    button.on_click((15, 15))
    assert button.clicked is False
    assert room.clicked is False
    assert button.color == LB_IDLE_COLOR


def test_click_outside_does_nothing(room):
    button = LightButton(Vector(10.0, 10.0), room)
    button.on_click((10 + BUTTON_SIZE, 15))
    button.on_click((5, 5))
    assert button.clicked is False
    assert room.clicked is False


def test_click_on_top_left_corner_hits(room):
    button = LightButton(Vector(10.0, 10.0), room)
    button.on_click((10, 10))
    assert button.clicked is True


def test_sound_button_leaves_room_alone(room):
    button = SoundButton(Vector(10.0, 10.0), room)
    assert button.color == SB_IDLE_COLOR
    button.on_click((20, 20))
    assert button.clicked is True
    assert button.color == SB_CLICKED_COLOR
    assert room.clicked is False


def test_kinds_match_source_tags(room):
    assert LightButton(Vector(), room).kind == "LB"
    assert SoundButton(Vector(), room).kind == "SB"


def test_buttons_on_click_reaches_every_button(room):
    light = LightButton(Vector(0.0, 0.0), room)
    sound = SoundButton(Vector(0.0, 0.0), room)
    far = SoundButton(Vector(200.0, 200.0), room)
    panel = Buttons()
    for button in (light, sound, far):
        panel.add_button(button)
    panel.on_click((5, 5))
    assert light.clicked is True
    assert sound.clicked is True
    assert far.clicked is False


def test_draw_paints_button_color(room):
    surface = pygame.Surface((60, 60))
    surface.fill((255, 255, 255))
    button = SoundButton(Vector(10.0, 10.0), room)
    Buttons([button]).draw(surface)
    assert tuple(surface.get_at((20, 20)))[:3] == SB_IDLE_COLOR
    assert tuple(surface.get_at((10, 10)))[:3] == (0, 0, 0)