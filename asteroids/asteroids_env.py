"""
AsteroidsEnv - the asteroids game as a Gymnasium environment
------------------------------------------------------------
- Same frame step as the interactive game, with a fixed dt
- MultiDiscrete action space: [thrust(2), turn(3), fire(2)]
- Vector observation: player state + top-K nearest asteroids
- Arcade window only when render_mode="human"

Quick test:
    python -m asteroids.asteroids_env
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Optional, Set

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .configs.game_config import ENV_CONFIG, GAME_CONFIG, REWARD_CONFIG
from .controls import InputEvent, Key, key_down
from .entities import Entity, EntityKind
from .game_loop import start_round_if_cleared, step_frame
from .state import GameState

ASTEROID_REWARDS = {
    EntityKind.ASTEROID_BIG: REWARD_CONFIG["R_ASTEROID_BIG"],
    EntityKind.ASTEROID_MEDIUM: REWARD_CONFIG["R_ASTEROID_MEDIUM"],
    EntityKind.ASTEROID_SMALL: REWARD_CONFIG["R_ASTEROID_SMALL"],
}


def _clip(x: float) -> float:
    return float(np.clip(x, -1.0, 1.0))


class AsteroidsEnv(gym.Env):
    """Headless asteroids game with a gym API"""

    metadata = {"render_modes": ["human"], "render_fps": 30}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        width: int = GAME_CONFIG["width"],
        height: int = GAME_CONFIG["height"],
        dt: float = ENV_CONFIG["dt"],
        max_steps: int = ENV_CONFIG["max_steps"],
        k_asteroids: int = ENV_CONFIG["k_asteroids"],
        max_speed: float = 400.0,  # velocity normalisation
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode

        self.width = width
        self.height = height
        self.dt = dt
        self.max_steps = max_steps
        self.k_asteroids = k_asteroids
        self.max_speed = max_speed

        # thrust: 0/1, turn: 0 none, 1 left, 2 right, fire: 0/1
        self.action_space = spaces.MultiDiscrete([2, 3, 2])

        # Player: pos(2) vel(2) heading sin/cos(2) lives(1)
        # Each asteroid: rel pos(2) rel vel(2)
        obs_dim = 2 + 2 + 2 + 1 + self.k_asteroids * 4
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self.game: GameState = None  # type: ignore
        self._start_lives = GAME_CONFIG["start_lives"]
        self._step_count = 0
        self._window = None
        # Last player seen, kept for observations after game over
        self._last_player: Optional[Entity] = None

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        self.game = GameState(self.width, self.height, self._start_lives)
        self._step_count = 0
        self._last_player = self.game.player

        # Spawn the first round right away so the first observation sees it
        start_round_if_cleared(self.game, self._rng())

        return self._get_obs(), self._get_info()

    def step(self, action):
        thrust, turn, fire = int(action[0]), int(action[1]), int(action[2])

        held: Set[Key] = set()
        events: List[InputEvent] = []
        if thrust:
            held.add(Key.UP)
        if turn == 1:
            held.add(Key.LEFT)
        elif turn == 2:
            held.add(Key.RIGHT)
        if fire:
            events.append(key_down(Key.SPACE))

        lives_before = self.game.lives
        before = self._asteroid_census()

        step_frame(self.game, self.dt, events, held, rng=self._rng())

        reward = self._compute_reward(before, lives_before)
        if self.game.playing:
            self._last_player = self.game.player

        terminated = not self.game.playing
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def _rng(self) -> "_UniformAdapter":
        return _UniformAdapter(self.np_random)

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _asteroid_census(self) -> Dict[EntityKind, int]:
        census = {kind: 0 for kind in ASTEROID_REWARDS}
        for e in self.game.entities:
            if e.is_asteroid:
                census[e.kind] += 1
        return census

    def _compute_reward(self, before: Dict[EntityKind, int], lives_before: int) -> float:
        after = self._asteroid_census()
        reward = 0.0

        # A destroyed big asteroid shows up as -1 big, +2 medium
        big_lost = max(0, before[EntityKind.ASTEROID_BIG] - after[EntityKind.ASTEROID_BIG])
        medium_lost = max(0, before[EntityKind.ASTEROID_MEDIUM] + 2 * big_lost
                          - after[EntityKind.ASTEROID_MEDIUM])
        small_lost = max(0, before[EntityKind.ASTEROID_SMALL] + 2 * medium_lost
                         - after[EntityKind.ASTEROID_SMALL])
        reward += ASTEROID_REWARDS[EntityKind.ASTEROID_BIG] * big_lost
        reward += ASTEROID_REWARDS[EntityKind.ASTEROID_MEDIUM] * medium_lost
        reward += ASTEROID_REWARDS[EntityKind.ASTEROID_SMALL] * small_lost

        reward -= REWARD_CONFIG["R_LIFE_LOST"] * (lives_before - self.game.lives)
        reward -= REWARD_CONFIG["R_TIME"]
        return float(reward)

    def _get_obs(self) -> np.ndarray:
        p = self._last_player
        obs_parts = [
            (p.x / self.width) * 2 - 1,
            (p.y / self.height) * 2 - 1,
            _clip(p.vx / self.max_speed),
            _clip(p.vy / self.max_speed),
            math.sin(p.rot),
            math.cos(p.rot),
            (self.game.lives / self._start_lives) * 2 - 1,
        ]

        asteroids = sorted(
            (e for e in self.game.entities if e.is_asteroid),
            key=lambda e: (e.x - p.x) ** 2 + (e.y - p.y) ** 2,
        )
        for i in range(self.k_asteroids):
            if i < len(asteroids):
                a = asteroids[i]
                obs_parts += [
                    _clip((a.x - p.x) / self.width),
                    _clip((a.y - p.y) / self.height),
                    _clip((a.vx - p.vx) / self.max_speed),
                    _clip((a.vy - p.vy) / self.max_speed),
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "lives": self.game.lives,
            "round": self.game.round,
            "phase": self.game.phase.value,
            "num_entities": len(self.game.entities),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            # Imported here so headless use never needs a display
            from .window import AsteroidsWindow
            self._window = AsteroidsWindow(self.width, self.height)

        self._window.poll_events()
        self._window.draw_game(self.game)
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


class _UniformAdapter:
    """Exposes uniform(a, b) on top of a numpy Generator"""

    def __init__(self, generator: np.random.Generator):
        self._generator = generator

    def uniform(self, a: float, b: float) -> float:
        return float(self._generator.uniform(a, b))


def run_random_episode(render: bool = True, seed: Optional[int] = 42) -> float:
    """Run a random episode for testing"""
    env = AsteroidsEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0
    try:
        while not (terminated or truncated):
            action = env.action_space.sample()
            obs, reward, terminated, truncated, info = env.step(action)
            total += reward
    finally:
        env.close()

    print(f"Random episode return: {total:.2f} (round {info['round']}, lives {info['lives']})")
    return total


if __name__ == "__main__":
    run_random_episode(render=True)
