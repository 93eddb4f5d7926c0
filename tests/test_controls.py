from __future__ import annotations

import math

import pytest

from asteroids.controls import QUIT, EventKind, InputEvent, Key, handle_input, key_down
from asteroids.entities import EntityKind
from asteroids.state import GameOverError, GameState


def projectiles(game: GameState) -> int:
    return sum(1 for e in game.entities if e.kind is EntityKind.PROJECTILE)


def test_space_press_fires_one_projectile(game: GameState) -> None:
    assert handle_input(game, [key_down(Key.SPACE)], frozenset()) is True
    assert len(game.entities) == 2
    proj = game.entities[1]
    assert proj.kind is EntityKind.PROJECTILE
    assert math.hypot(proj.x - game.player.x, proj.y - game.player.y) > game.player.radius + proj.radius


def test_repeated_space_is_ignored(game: GameState) -> None:
    handle_input(game, [key_down(Key.SPACE, repeat=True), key_down(Key.SPACE, repeat=True)], frozenset())
    assert projectiles(game) == 0


def test_holding_space_does_not_fire(game: GameState) -> None:
    handle_input(game, [], {Key.SPACE})
    assert projectiles(game) == 0


def test_each_press_fires(game: GameState) -> None:
    events = [key_down(Key.SPACE), InputEvent(EventKind.KEY_UP, Key.SPACE), key_down(Key.SPACE)]
    handle_input(game, events, frozenset())
    assert projectiles(game) == 2


def test_quit_stops_processing(game: GameState) -> None:
    assert handle_input(game, [QUIT, key_down(Key.SPACE)], {Key.UP}) is False
    assert projectiles(game) == 0
    assert game.player.vy == 0.0


def test_thrust_scales_with_frame_time(game: GameState) -> None:
    game.frame_time = 0.5
    handle_input(game, [], {Key.UP})
    # heading 0 is up, 150 * 0.5
    assert (game.player.vx, game.player.vy) == pytest.approx((0.0, -75.0))


def test_turning_scales_with_frame_time(game: GameState) -> None:
    game.frame_time = 0.2
    handle_input(game, [], {Key.RIGHT})
    assert game.player.rot == pytest.approx(0.7)
    handle_input(game, [], {Key.LEFT, Key.RIGHT})
    assert game.player.rot == pytest.approx(0.7)
    handle_input(game, [], {Key.LEFT})
    assert game.player.rot == pytest.approx(0.0)


def test_game_over_ignores_input(game: GameState) -> None:
    game.entities = []
    game.lives = 0
    game.end_game()

    assert handle_input(game, [key_down(Key.SPACE)], {Key.UP, Key.LEFT}) is True
    assert game.entities == []
    with pytest.raises(GameOverError):
        game.player
