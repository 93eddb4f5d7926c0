"""
Game state: the single context object every frame step works on
"""

from __future__ import annotations

from enum import Enum
from typing import List

from .configs.game_config import GAME_CONFIG
from .entities import Entity
from .spawning import create_player


class Phase(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


class GameOverError(RuntimeError):
    """The player ship was requested after the game ended"""


class GameState:
    """Entities, lives, round counter and phase of one game"""

    def __init__(
        self,
        width: int = GAME_CONFIG["width"],
        height: int = GAME_CONFIG["height"],
        lives: int = GAME_CONFIG["start_lives"],
    ):
        self.width = width
        self.height = height
        self.phase = Phase.PLAYING
        self.lives = lives
        self.round = 0
        self.frame_time = 0.0

        # Player is kept at index 0 while playing
        self.entities: List[Entity] = [create_player(width, height)]
        self._player_index = 0

    @property
    def playing(self) -> bool:
        return self.phase is Phase.PLAYING

    @property
    def player(self) -> Entity:
        if self.phase is not Phase.PLAYING:
            raise GameOverError("Can't access the player ship; game is over")
        return self.entities[self._player_index]

    def end_game(self):
        """One-way switch to GAME_OVER"""
        self.phase = Phase.GAME_OVER
