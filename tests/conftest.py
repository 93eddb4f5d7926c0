from __future__ import annotations

import random
from collections.abc import Iterable

import pytest

from asteroids.entities import Entity, EntityKind
from asteroids.state import GameState


class ScriptedRandom:
    """Random source replaying fixed fractions of each requested range.

    uniform(a, b) returns a + f * (b - a) for the next scripted f.
    """

    def __init__(self, fractions: Iterable[float]) -> None:
        self._fractions = list(fractions)
        self.calls = 0

    @property
    def remaining(self) -> int:
        return len(self._fractions) - self.calls

    def uniform(self, a: float, b: float) -> float:
        f = self._fractions[self.calls]
        self.calls += 1
        return a + f * (b - a)


@pytest.fixture()
def scripted():
    return ScriptedRandom


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture()
def game() -> GameState:
    return GameState()


def make(kind: EntityKind, x: float, y: float, **kwargs) -> Entity:
    return Entity(kind=kind, x=x, y=y, **kwargs)
