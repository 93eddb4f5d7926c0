from __future__ import annotations

import pytest

from asteroids.entities import Entity, EntityKind
from asteroids.physics import entity_collisions, entity_movement
from asteroids.utils import floored_mod

from .conftest import make


@pytest.mark.parametrize(
    ("value", "bound", "expected"),
    [(5.0, 800.0, 5.0), (805.0, 800.0, 5.0), (-5.0, 800.0, 795.0), (-805.0, 800.0, 795.0), (0.0, 600.0, 0.0)],
)
def test_floored_mod(value: float, bound: float, expected: float) -> None:
    assert floored_mod(value, bound) == pytest.approx(expected)


@pytest.mark.parametrize("value", [-1e-17, -1e-9, -0.0, 799.9999999, 1e6, -1e6, 1234.5])
def test_floored_mod_stays_in_range(value: float) -> None:
    r = floored_mod(value, 800.0)
    assert 0.0 <= r < 800.0


def test_movement_integrates_velocity_by_frame_time() -> None:
    e = make(EntityKind.ASTEROID_BIG, 100.0, 100.0, vx=50.0, vy=-20.0)
    entity_movement([e], 0.5, 800, 600)
    assert (e.x, e.y) == pytest.approx((125.0, 90.0))


def test_movement_wraps_both_axes() -> None:
    left = make(EntityKind.PROJECTILE, 2.0, 598.0, vx=-400.0, vy=400.0)
    entity_movement([left], 0.1, 800, 600)
    assert left.x == pytest.approx(762.0)
    assert left.y == pytest.approx(38.0)


def test_zero_frame_time_does_not_move() -> None:
    e = make(EntityKind.ASTEROID_SMALL, 10.0, 20.0, vx=90.0, vy=90.0)
    entity_movement([e], 0.0, 800, 600)
    assert (e.x, e.y) == (10.0, 20.0)


def test_overlapping_pair_is_flagged_dead() -> None:
    # radii 20 + 13 = 33
    a = make(EntityKind.ASTEROID_BIG, 100.0, 100.0)
    b = make(EntityKind.ASTEROID_MEDIUM, 132.0, 100.0)
    entity_collisions([a, b])
    assert a.dead and b.dead


def test_touching_pair_is_not_a_collision() -> None:
    a = make(EntityKind.ASTEROID_BIG, 100.0, 100.0)
    b = make(EntityKind.ASTEROID_MEDIUM, 133.0, 100.0)
    entity_collisions([a, b])
    assert not a.dead and not b.dead


def test_collision_is_symmetric() -> None:
    def flags(order: list[Entity]) -> dict[EntityKind, bool]:
        entity_collisions(order)
        return {e.kind: e.dead for e in order}

    pair = lambda: (make(EntityKind.PLAYER, 0.0, 0.0), make(EntityKind.PROJECTILE, 6.0, 8.0))  # noqa: E731
    p1, q1 = pair()
    p2, q2 = pair()
    assert flags([p1, q1]) == flags([q2, p2]) == {EntityKind.PLAYER: True, EntityKind.PROJECTILE: True}


def test_single_entity_never_collides_with_itself() -> None:
    e = make(EntityKind.ASTEROID_BIG, 50.0, 50.0)
    entity_collisions([e])
    assert not e.dead


def test_collision_flags_all_overlapping_entities_once_dead() -> None:
    a = make(EntityKind.ASTEROID_SMALL, 10.0, 10.0)
    b = make(EntityKind.ASTEROID_SMALL, 20.0, 10.0)
    c = make(EntityKind.ASTEROID_SMALL, 300.0, 300.0, dead=True)
    far = make(EntityKind.ASTEROID_SMALL, 500.0, 500.0)
    entity_collisions([a, b, c, far])
    assert [a.dead, b.dead, c.dead, far.dead] == [True, True, True, False]
