"""
Game configuration for the asteroids checkpoint game
Constants shared by the simulation, the window and the gym environment
"""

# Arena and round rules
GAME_CONFIG = {
    "width": 800,
    "height": 600,
    "start_lives": 3,
    "max_asteroids_per_round": 16,  # 2, 4, 8, 16, 16, ...
    "spawn_attempts": 10,           # rejection sampling budget
}

PLAYER_CONFIG = {
    "acceleration": 150.0,  # px/s^2
    "turn_speed": 3.5,      # rad/s
}

PROJECTILE_CONFIG = {
    "speed": 400.0,          # added to the shooter's velocity
    "spawn_offset": 1.5,     # times (shooter radius + projectile radius)
}

ASTEROID_CONFIG = {
    "speed_range": (30.0, 90.0),  # px/s, also the debris impulse
    "debris_offset": 1.5,         # times (parent radius + debris radius)
}

# ==============================================================================
# RENDERING
# ==============================================================================

RENDER_CONFIG = {
    "title": "Asteroids",
    "background": (0, 0, 0),
    "foreground": (255, 255, 255),
    "font_size": 20,
    "text_top": 16,            # px from the top edge
    "life_icon_spacing": 12.0,
    "life_icon_y": 20.0,
    "life_icon_radius": 6.0,
    "fps_refresh": 0.1,        # seconds between title updates
}

LOG_CONFIG = {
    "filename": "asteroids-log.txt",
    "level": "INFO",
    "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
}

# ==============================================================================
# GYM ENVIRONMENT
# ==============================================================================

ENV_CONFIG = {
    "dt": 1 / 30,
    "max_steps": 1800,  # 60 seconds at 30 FPS
    "k_asteroids": 5,
}

REWARD_CONFIG = {
    "R_ASTEROID_BIG": 0.25,
    "R_ASTEROID_MEDIUM": 0.5,
    "R_ASTEROID_SMALL": 1.0,
    "R_LIFE_LOST": 5.0,
    "R_TIME": 0.001,
}
