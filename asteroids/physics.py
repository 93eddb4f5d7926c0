"""
Movement integration and collision detection
"""

from __future__ import annotations

from typing import Sequence

from .entities import Entity
from .utils import circle_collide, floored_mod


def entity_movement(entities: Sequence[Entity], frame_time: float,
                    width: float, height: float):
    """Advance every entity by its velocity and wrap it around the arena edges"""
    for e in entities:
        e.x = floored_mod(e.x + e.vx * frame_time, width)
        e.y = floored_mod(e.y + e.vy * frame_time, height)


def entity_collisions(entities: Sequence[Entity]):
    """Flag both entities of every overlapping pair as dead"""
    # Every unordered pair, O(n^2)
    n = len(entities)
    for i in range(n):
        a = entities[i]
        for j in range(i + 1, n):
            b = entities[j]
            if circle_collide(a.x, a.y, a.radius, b.x, b.y, b.radius):
                a.dead = True
                b.dead = True
