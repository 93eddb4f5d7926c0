"""
Entity factories

Asteroids and debris are placed by rejection sampling: a bounded number of
random candidates is tried until one does not overlap any existing entity.
When every attempt overlaps, the last candidate is kept anyway.
"""

from __future__ import annotations

import logging
import math
import random
from typing import List, Optional, Sequence

from .configs.game_config import (
    ASTEROID_CONFIG,
    GAME_CONFIG,
    PLAYER_CONFIG,
    PROJECTILE_CONFIG,
)
from .entities import Entity, EntityKind, KIND_INFO
from .utils import direction_vector

logger = logging.getLogger(__name__)


def _overlaps_any(candidate: Entity, existing: Sequence[Entity]) -> bool:
    for o in existing:
        if math.hypot(candidate.x - o.x, candidate.y - o.y) < candidate.radius + o.radius:
            return True
    return False


def create_player(
    width: float = GAME_CONFIG["width"],
    height: float = GAME_CONFIG["height"],
) -> Entity:
    """Player ship at the centre of the arena, at rest"""
    return Entity(
        kind=EntityKind.PLAYER,
        x=width * 0.5,
        y=height * 0.5,
        acceleration=PLAYER_CONFIG["acceleration"],
        turn_speed=PLAYER_CONFIG["turn_speed"],
    )


def create_asteroid(
    existing: Sequence[Entity],
    width: float = GAME_CONFIG["width"],
    height: float = GAME_CONFIG["height"],
    rng=None,
) -> Entity:
    """
    Big asteroid drifting along a random heading.

    Samples, in order: heading, speed, then an (x, y) pair per placement attempt.
    """
    rng = rng or random
    result = Entity(kind=EntityKind.ASTEROID_BIG)
    result.rot = rng.uniform(0.0, 2 * math.pi)
    dx, dy = direction_vector(result.rot)
    speed = rng.uniform(*ASTEROID_CONFIG["speed_range"])
    result.vx, result.vy = dx * speed, dy * speed

    for _ in range(GAME_CONFIG["spawn_attempts"]):
        result.x = rng.uniform(0.0, 1.0) * width
        result.y = rng.uniform(0.0, 1.0) * height
        if not _overlaps_any(result, existing):
            break
    else:
        logger.debug("No free spot for asteroid, placing at (%.1f, %.1f)", result.x, result.y)
    return result


def create_debris(parent: Entity, existing: Sequence[Entity], rng=None) -> Entity:
    """
    Piece of a destroyed asteroid, thrown away from the parent.

    Samples, in order, per placement attempt: heading, impulse speed.
    """
    rng = rng or random
    kind: Optional[EntityKind] = parent.debris_kind
    if kind is None:
        raise ValueError(f"{parent.kind} does not break into debris")

    result = Entity(kind=kind)
    offset = (parent.radius + result.radius) * ASTEROID_CONFIG["debris_offset"]
    for _ in range(GAME_CONFIG["spawn_attempts"]):
        result.rot = rng.uniform(0.0, 2 * math.pi)
        dx, dy = direction_vector(result.rot)
        result.x = parent.x + dx * offset
        result.y = parent.y + dy * offset
        speed = rng.uniform(*ASTEROID_CONFIG["speed_range"])
        result.vx = parent.vx + dx * speed
        result.vy = parent.vy + dy * speed
        if not _overlaps_any(result, existing):
            break
    else:
        logger.debug("No free spot for %s debris, placing at (%.1f, %.1f)",
                     kind.value, result.x, result.y)
    return result


def create_projectile(shooter: Entity) -> Entity:
    """Projectile fired along the shooter's heading, spawned outside its radius"""
    dx, dy = direction_vector(shooter.rot)
    radius = KIND_INFO[EntityKind.PROJECTILE].radius
    offset = (shooter.radius + radius) * PROJECTILE_CONFIG["spawn_offset"]
    speed = PROJECTILE_CONFIG["speed"]
    return Entity(
        kind=EntityKind.PROJECTILE,
        x=shooter.x + dx * offset,
        y=shooter.y + dy * offset,
        vx=shooter.vx + dx * speed,
        vy=shooter.vy + dy * speed,
        rot=shooter.rot,
    )


def spawn_round_asteroids(count: int, existing: List[Entity], width: float,
                          height: float, rng=None) -> List[Entity]:
    """Append `count` big asteroids, each avoiding the ones placed before it"""
    for _ in range(count):
        existing.append(create_asteroid(existing, width, height, rng))
    return existing
