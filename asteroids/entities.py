"""
Game entity dataclasses
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EntityKind(Enum):
    """Kinds of simulated objects"""
    PLAYER = "player"
    PROJECTILE = "projectile"
    ASTEROID_BIG = "asteroid_big"
    ASTEROID_MEDIUM = "asteroid_medium"
    ASTEROID_SMALL = "asteroid_small"


@dataclass(frozen=True)
class KindInfo:
    """Constant attributes shared by every entity of a kind"""
    radius: float
    debris_kind: Optional[EntityKind] = None
    debris_count: int = 0


KIND_INFO = {
    EntityKind.PLAYER: KindInfo(radius=10.0),
    EntityKind.PROJECTILE: KindInfo(radius=3.0),
    EntityKind.ASTEROID_BIG: KindInfo(20.0, EntityKind.ASTEROID_MEDIUM, 2),
    EntityKind.ASTEROID_MEDIUM: KindInfo(13.0, EntityKind.ASTEROID_SMALL, 2),
    EntityKind.ASTEROID_SMALL: KindInfo(radius=8.0),
}

ASTEROID_KINDS = (
    EntityKind.ASTEROID_BIG,
    EntityKind.ASTEROID_MEDIUM,
    EntityKind.ASTEROID_SMALL,
)


@dataclass
class Entity:
    """One simulated object: ship, projectile or asteroid"""
    kind: EntityKind
    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    rot: float = 0.0  # radians, 0 points up
    acceleration: float = 0.0  # px/s^2, player only
    turn_speed: float = 0.0  # rad/s, player only
    dead: bool = False

    @property
    def radius(self) -> float:
        return KIND_INFO[self.kind].radius

    @property
    def debris_kind(self) -> Optional[EntityKind]:
        return KIND_INFO[self.kind].debris_kind

    @property
    def debris_count(self) -> int:
        return KIND_INFO[self.kind].debris_count

    @property
    def is_asteroid(self) -> bool:
        return self.kind in ASTEROID_KINDS
