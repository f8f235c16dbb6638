"""
Unit tests for the arcade driver.

Note: These tests exercise input and update handling without opening a window.
"""

import os

os.environ["SDL_VIDEODRIVER"] = "dummy"
os.environ["SDL_AUDIODRIVER"] = "dummy"

import pygame

from game.config import GameConfig
from game.direction import Direction
from visualization.arcade import Arcade


def make_arcade(**kwargs):
    kwargs.setdefault("seed", 42)
    kwargs.setdefault("progressive", False)
    kwargs.setdefault("base_ticks_per_second", 10)
    return Arcade(GameConfig(**kwargs))


class TestArcadeInput:
    def test_escape_quits(self):
        assert make_arcade().handle_key(pygame.K_ESCAPE) is False

    def test_arrow_keys_enqueue(self):
        arcade = make_arcade()
        assert arcade.handle_key(pygame.K_UP)
        assert list(arcade.game.inputs) == [Direction.UP]

    def test_wasd_keys_enqueue(self):
        arcade = make_arcade()
        arcade.handle_key(pygame.K_s)
        assert list(arcade.game.inputs) == [Direction.DOWN]

    def test_reversal_key_ignored(self):
        arcade = make_arcade()
        arcade.handle_key(pygame.K_LEFT)
        assert len(arcade.game.inputs) == 0

    def test_unknown_key_ignored(self):
        arcade = make_arcade()
        assert arcade.handle_key(pygame.K_q)
        assert len(arcade.game.inputs) == 0

    def test_pause_toggles(self):
        arcade = make_arcade()
        arcade.handle_key(pygame.K_SPACE)
        assert arcade.paused
        arcade.handle_key(pygame.K_SPACE)
        assert not arcade.paused

    def test_p_toggles_progressive(self):
        arcade = make_arcade()
        assert not arcade.game.progressive
        arcade.handle_key(pygame.K_p)
        assert arcade.game.progressive

    def test_r_starts_new_game(self):
        arcade = make_arcade()
        old = arcade.game
        arcade.handle_key(pygame.K_r)
        assert arcade.game is not old
        assert arcade.game.score == 0


class TestArcadeUpdate:
    def test_update_moves_snake(self):
        arcade = make_arcade()
        assert arcade.update(0.1)
        assert arcade.game.body[0] == (6, 3)

    def test_paused_does_not_move(self):
        arcade = make_arcade()
        arcade.handle_key(pygame.K_SPACE)
        assert not arcade.update(1.0)
        assert arcade.game.body[0] == (5, 3)

    def test_game_over_updates_stats(self):
        arcade = make_arcade(width=8, height=8)
        for _ in range(10):
            arcade.update(0.1)
        assert arcade.game.game_over
        assert arcade.games_played == 1

        # further updates do not count the same game twice
        arcade.update(0.1)
        assert arcade.games_played == 1
