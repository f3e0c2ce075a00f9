import random

import pygame

from toybox.pong.game import (
    BALL_POSITION,
    BAR_L_POSITION,
    BAR_R_POSITION,
    GameStatus,
    PongGame,
)
from toybox.vector import Vector


def test_new_game_waits_to_start():
    game = PongGame(None)
    assert game.status is GameStatus.START
    assert game.ball.bars == [game.left_bar, game.right_bar]


def test_press_return_serves():
    game = PongGame(None)
    game.press_return(random.Random(7))
    assert game.status is GameStatus.RUNNING
    assert game.ball.velocity.x in (1.0, 2.0)
    assert game.ball.velocity.y in (1.0, 2.0)
    assert game.left_bar.velocity == Vector(0.0, -5.0)
    assert game.right_bar.velocity == Vector(0.0, 5.0)


def test_press_return_while_running_is_ignored():
    game = PongGame(None)
    game.press_return(random.Random(1))
    before = Vector(game.ball.velocity.x, game.ball.velocity.y)
    game.press_return(random.Random(2))
    assert game.status is GameStatus.RUNNING
    assert game.ball.velocity == before


def test_press_key_moves_player_paddle():
    game = PongGame(None)
    game.press_key(pygame.K_w)
    assert game.left_bar.velocity.y == -5.0
    game.press_key(pygame.K_s)
    assert game.left_bar.velocity.y == 5.0
    game.press_key(pygame.K_x)
    assert game.left_bar.velocity.y == 5.0


def test_start_game_resets_everything():
    game = PongGame(None)
    game.left_bar.score = 1
    game.right_bar.score = 1
    game.ball.position = Vector(10.0, 10.0)
    game.ball.velocity = Vector(3.0, 3.0)
    game.left_bar.position = Vector(0.0, 0.0)
    game.start_game()
    assert game.left_bar.score == 0
    assert game.right_bar.score == 0
    assert game.ball.position == Vector(*BALL_POSITION)
    assert game.ball.velocity == Vector(0.0, 0.0)
    assert game.left_bar.position == Vector(*BAR_L_POSITION)
    assert game.right_bar.position == Vector(*BAR_R_POSITION)


def test_run_game_ends_on_winning_score():
    game = PongGame(None)
    game.status = GameStatus.RUNNING
    game.left_bar.score = 1
    game.ball.position = Vector(795.0, 50.0)
    game.ball.velocity = Vector(3.0, 0.0)
    game.run_game()
    assert game.left_bar.score == 2
    assert game.status is GameStatus.END


def test_run_game_keeps_running_without_winner():
    game = PongGame(None)
    game.press_return(random.Random(3))
    game.run_game()
    assert game.status is GameStatus.RUNNING
    assert game.ball.position != Vector(*BALL_POSITION)


def test_tick_cycles_end_back_to_start():
    game = PongGame(None)
    game.status = GameStatus.END
    game.tick()
    assert game.status is GameStatus.START


def test_tick_in_start_resets_ball():
    game = PongGame(None)
    game.ball.position = Vector(1.0, 1.0)
    game.tick()
    assert game.ball.position == Vector(*BALL_POSITION)