"""Asteroids module - checkpoint arcade game and its simulation core"""

from .entities import Entity, EntityKind, KIND_INFO
from .state import GameState, GameOverError, Phase
from .game_loop import step_frame

__all__ = [
    'Entity',
    'EntityKind',
    'KIND_INFO',
    'GameState',
    'GameOverError',
    'Phase',
    'step_frame',
]
