"""
Per-frame simulation sequence and round progression
"""

from __future__ import annotations

import logging
from typing import AbstractSet, Iterable

from .configs.game_config import GAME_CONFIG
from .controls import InputEvent, Key, handle_input
from .deaths import entity_deaths
from .physics import entity_collisions, entity_movement
from .spawning import spawn_round_asteroids
from .state import GameState

logger = logging.getLogger(__name__)


def count_asteroids(game: GameState) -> int:
    return sum(1 for e in game.entities if e.is_asteroid)


def round_asteroid_count(round_number: int) -> int:
    """2, 4, 8, 16 asteroids in rounds 1-4, capped afterwards"""
    return min(GAME_CONFIG["max_asteroids_per_round"], 2 ** round_number)


def start_round_if_cleared(game: GameState, rng=None) -> bool:
    """Begin the next round when no asteroid is left"""
    # Recounted every frame
    if count_asteroids(game) > 0:
        return False
    game.round += 1
    count = round_asteroid_count(game.round)
    spawn_round_asteroids(count, game.entities, game.width, game.height, rng)
    logger.info("Round %d: %d asteroids", game.round, count)
    return True


def step_frame(
    game: GameState,
    frame_time: float,
    events: Iterable[InputEvent] = (),
    held_keys: AbstractSet[Key] = frozenset(),
    rng=None,
) -> bool:
    """
    Advance the simulation by one frame.

    Returns False when input asked to quit; the rest of the frame is skipped.
    """
    game.frame_time = frame_time

    start_round_if_cleared(game, rng)
    entity_movement(game.entities, frame_time, game.width, game.height)

    if not handle_input(game, events, held_keys):
        return False

    entity_collisions(game.entities)
    entity_deaths(game, rng)

    if game.lives == 0 and game.playing:
        game.end_game()
        logger.info("Game over in round %d", game.round)

    return True
