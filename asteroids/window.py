"""
Arcade window: wireframe rendering, HUD and the interactive main loop

The simulation uses screen coordinates (y grows downward); arcade's y axis
points up, so every draw call flips y against the window height.
"""

from __future__ import annotations

import logging
import math
import time
from contextlib import contextmanager
from typing import Iterator, List, Sequence, Set

import arcade

from .configs.game_config import GAME_CONFIG, RENDER_CONFIG
from .controls import QUIT, EventKind, InputEvent, Key
from .entities import Entity
from .game_loop import step_frame
from .state import GameState

logger = logging.getLogger(__name__)

ARCADE_KEYS = {
    arcade.key.UP: Key.UP,
    arcade.key.LEFT: Key.LEFT,
    arcade.key.RIGHT: Key.RIGHT,
    arcade.key.SPACE: Key.SPACE,
}

# Unit square outline as (start, end) pairs
_SQUARE = [
    ((-1.0, -1.0), (1.0, -1.0)),
    ((1.0, -1.0), (1.0, 1.0)),
    ((1.0, 1.0), (-1.0, 1.0)),
    ((-1.0, 1.0), (-1.0, -1.0)),
]


def render_object(x: float, y: float, rot: float, radius: float,
                  screen_height: float, color=RENDER_CONFIG["foreground"]):
    """Draw a square of half-size `radius`, rotated by `rot`, centred on (x, y)"""
    c, s = math.cos(rot), math.sin(rot)
    for (x0, y0), (x1, y1) in _SQUARE:
        # scale, rotate, translate
        sx = x + radius * (c * x0 - s * y0)
        sy = y + radius * (s * x0 + c * y0)
        ex = x + radius * (c * x1 - s * y1)
        ey = y + radius * (s * x1 + c * y1)
        arcade.draw_line(int(sx), screen_height - int(sy),
                         int(ex), screen_height - int(ey), color)


def entity_rendering(entities: Sequence[Entity], screen_height: float):
    for e in entities:
        render_object(e.x, e.y, e.rot, e.radius, screen_height)


def hud_text(game: GameState) -> str:
    return f"Round {game.round}" if game.playing else "Game Over"


class AsteroidsWindow(arcade.Window):
    """Arcade window that buffers input for the simulation and draws the game"""

    def __init__(self, width: int = GAME_CONFIG["width"],
                 height: int = GAME_CONFIG["height"],
                 title: str = RENDER_CONFIG["title"]):
        super().__init__(width, height, title)
        self.background_color = RENDER_CONFIG["background"]
        self.set_mouse_visible(False)

        self.events: List[InputEvent] = []
        self.held_keys: Set[Key] = set()
        self._text = arcade.Text(
            "", width / 2, height - RENDER_CONFIG["text_top"],
            RENDER_CONFIG["foreground"], RENDER_CONFIG["font_size"],
            anchor_x="center", anchor_y="top",
        )

    def poll_events(self) -> List[InputEvent]:
        """Dispatch pending window events and return what they produced"""
        self.dispatch_events()
        events, self.events = self.events, []
        return events

    def on_key_press(self, symbol: int, modifiers: int):
        key = ARCADE_KEYS.get(symbol)
        if key is None:
            return
        # pyglet only reports the initial press, held repeats arrive as text
        self.held_keys.add(key)
        self.events.append(InputEvent(EventKind.KEY_DOWN, key))

    def on_key_release(self, symbol: int, modifiers: int):
        key = ARCADE_KEYS.get(symbol)
        if key is None:
            return
        self.held_keys.discard(key)
        self.events.append(InputEvent(EventKind.KEY_UP, key))

    def on_close(self):
        # Closing is left to open_platform
        self.events.append(QUIT)

    def draw_game(self, game: GameState):
        self.clear()
        entity_rendering(game.entities, self.height)

        for life in range(game.lives):
            render_object((1 + life) * RENDER_CONFIG["life_icon_spacing"],
                          RENDER_CONFIG["life_icon_y"], 0.0,
                          RENDER_CONFIG["life_icon_radius"], self.height)

        self._text.text = hud_text(game)
        self._text.draw()


@contextmanager
def open_platform(width: int = GAME_CONFIG["width"],
                  height: int = GAME_CONFIG["height"]) -> Iterator[AsteroidsWindow]:
    """Open the game window and close it on every exit path"""
    window = AsteroidsWindow(width, height)
    logger.info("Window opened (%dx%d)", width, height)
    try:
        yield window
    finally:
        window.close()
        logger.info("Window closed")


def run_game(rng=None) -> GameState:
    """Play until the window is closed; returns the final state"""
    game = GameState()
    with open_platform(game.width, game.height) as window:
        prev_fps_time = prev_time = time.perf_counter()
        frames = 0

        while True:
            curr_time = time.perf_counter()
            frames += 1
            frame_time = curr_time - prev_time
            prev_time = curr_time

            since_fps = curr_time - prev_fps_time
            if since_fps > RENDER_CONFIG["fps_refresh"]:
                window.set_caption(f"{RENDER_CONFIG['title']}: {frames / since_fps:.2f} FPS")
                frames = 0
                prev_fps_time = curr_time

            events = window.poll_events()
            if not step_frame(game, frame_time, events, window.held_keys, rng):
                break

            window.draw_game(game)
            window.flip()

    return game
