"""
Keyboard input translated into player actions
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import AbstractSet, Iterable, Optional

from .spawning import create_projectile
from .state import GameState
from .utils import direction_vector


class Key(Enum):
    UP = "up"
    LEFT = "left"
    RIGHT = "right"
    SPACE = "space"


class EventKind(Enum):
    QUIT = "quit"
    KEY_DOWN = "key_down"
    KEY_UP = "key_up"


@dataclass(frozen=True)
class InputEvent:
    """Discrete event polled from the window"""
    kind: EventKind
    key: Optional[Key] = None
    repeat: bool = False  # auto-repeat while the key is held


QUIT = InputEvent(EventKind.QUIT)


def key_down(key: Key, repeat: bool = False) -> InputEvent:
    return InputEvent(EventKind.KEY_DOWN, key, repeat)


def handle_input(game: GameState, events: Iterable[InputEvent],
                 held_keys: AbstractSet[Key]) -> bool:
    """
    Apply one frame of input to the game.

    Returns False when a quit event was received.
    """
    for event in events:
        if event.kind is EventKind.QUIT:
            return False

        # Fire on the key-down edge only
        if event.kind is EventKind.KEY_DOWN and not event.repeat:
            if event.key is Key.SPACE and game.playing:
                game.entities.append(create_projectile(game.player))

    if not game.playing:
        return True

    player = game.player
    dt = game.frame_time
    if Key.UP in held_keys:
        dx, dy = direction_vector(player.rot)
        player.vx += dt * player.acceleration * dx
        player.vy += dt * player.acceleration * dy
    if Key.LEFT in held_keys:
        player.rot -= dt * player.turn_speed
    if Key.RIGHT in held_keys:
        player.rot += dt * player.turn_speed

    return True
