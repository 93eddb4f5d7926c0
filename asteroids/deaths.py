"""
Death resolution: respawns, life loss and debris
"""

from __future__ import annotations

import logging

from .entities import EntityKind
from .spawning import create_debris, create_player
from .state import GameState

logger = logging.getLogger(__name__)


def entity_deaths(game: GameState, rng=None):
    """
    Turn dead entities into their consequences and drop them.

    A dead player costs a life and respawns in place while lives remain; the
    last life leaves it dead so it is removed. Dead asteroids append their
    debris to the entity list, each piece avoiding everything already in it.
    """
    entities = game.entities
    # Debris appended during the pass is never dead, only scan the original slots
    for i in range(len(entities)):
        obj = entities[i]
        if not obj.dead:
            continue

        if obj.kind is EntityKind.PLAYER:
            game.lives -= 1
            if game.lives > 0:
                logger.info("Ship destroyed, %d lives left", game.lives)
                entities[i] = create_player(game.width, game.height)
            else:
                logger.info("Last ship destroyed")
            continue

        for _ in range(obj.debris_count):
            entities.append(create_debris(obj, entities, rng))

    game.entities = [e for e in entities if not e.dead]
