import pygame
import pytest

from toybox.fnaf.map import Map, Name, Place
from toybox.vector import Vector

GREY = (100, 100, 100)


def _pixel(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


def _place(name, x=10.0, y=10.0):
    return Place(Vector(x, y), GREY, (50, 40), name)


def test_place_starts_dark():
    assert _place(Name.STAGE).clicked is False


def test_map_get_returns_shared_place():
    world = Map()
    stage = _place(Name.STAGE)
    cove = _place(Name.COVE)
    world.add_place(stage)
    world.add_place(cove)
    assert world.get(Name.COVE) is cove
    world.get(Name.STAGE).clicked = True
    assert stage.clicked is True


def test_map_get_missing_raises():
    world = Map()
    world.add_place(_place(Name.OFFICE))
    with pytest.raises(KeyError):
        world.get(Name.CENTER)


def test_office_always_lit():
    surface = pygame.Surface((100, 100))
    surface.fill((255, 255, 255))
    _place(Name.OFFICE).draw(surface)
    assert _pixel(surface, 30, 30) == GREY
    assert _pixel(surface, 10, 10) == (0, 0, 100)


def test_room_dark_until_clicked():
    surface = pygame.Surface((100, 100))
    surface.fill((255, 255, 255))
    room = _place(Name.LHC)
    room.draw(surface)
    assert _pixel(surface, 30, 30) == (0, 0, 0)
    room.clicked = True
    room.draw(surface)
    assert _pixel(surface, 30, 30) == GREY
    assert _pixel(surface, 10, 10) == (0, 0, 100)


def test_map_draw_draws_every_place():
    surface = pygame.Surface((200, 100))
    surface.fill((255, 255, 255))
    world = Map()
    world.add_place(_place(Name.OFFICE, 0.0, 0.0))
    lit = _place(Name.CENTER, 100.0, 0.0)
    lit.clicked = True
    world.add_place(lit)
    world.draw(surface)
    assert _pixel(surface, 20, 20) == GREY
    assert _pixel(surface, 120, 20) == GREY