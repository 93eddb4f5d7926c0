"""
Utility functions for game mechanics
"""

from __future__ import annotations
import math
from typing import Tuple


def floored_mod(a: float, b: float) -> float:
    """Modulo that is never negative for positive b (unlike math.fmod)"""
    r = math.fmod(a, b)
    if r < 0:
        r += b
    # -tiny + b rounds up to b in floating point
    if r >= b:
        r = 0.0
    return r


def direction_vector(radians: float) -> Tuple[float, float]:
    """Unit vector for a heading; 0 rad points up on screen (y grows down)"""
    return math.sin(radians), -math.cos(radians)


def dist_sq(x1: float, y1: float, x2: float, y2: float) -> float:
    """Squared distance between two points"""
    dx = x1 - x2
    dy = y1 - y2
    return dx * dx + dy * dy


def circle_collide(x1, y1, r1, x2, y2, r2) -> bool:
    """Check if two circles overlap (touching does not count)"""
    rr = r1 + r2
    return dist_sq(x1, y1, x2, y2) < rr * rr
