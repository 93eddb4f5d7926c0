"""
Play the game:
    python -m asteroids
"""

import logging

from .configs.game_config import LOG_CONFIG

logger = logging.getLogger("asteroids")


def main():
    logging.basicConfig(
        filename=LOG_CONFIG["filename"],
        level=LOG_CONFIG["level"],
        format=LOG_CONFIG["format"],
    )

    # Window creation can fail without a display; there is no fallback
    try:
        from .window import run_game
        game = run_game()
    except Exception:
        logger.exception("Game aborted")
        raise

    logger.info("Exited in round %d with %d lives", game.round, game.lives)


if __name__ == "__main__":
    main()
