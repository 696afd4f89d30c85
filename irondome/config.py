"""Game-wide constants and small unit helpers."""

# Grid
GRID_ROWS = 40
GRID_COLUMNS = 120

# Physics, in pixels per second squared
GRAVITY = -10

# Game loop
GAME_RUN_TIME_SEC = 60
RENDER_INTERVAL_MS = 100
GAME_TICK_MS = 10

# Cannon / rocket
CANNON_X = 5
CANNON_Y = 0
CANNON_WIDTH = 3
CANNON_HEIGHT = 2
ROCKET_SPEED = 100.0
ROCKET_MAX_LIFETIME = 10.0
ROCKET_DEFAULT_ANGLE = 60  # degrees, used when no target is visible

# Pitcher / plate
PITCHER_X_OFFSET = 7  # columns from the right edge
PITCHER_WIDTH = 6
PITCHER_HEIGHT = 5

PLATE_LAUNCH_ANGLE = 120  # degrees
PLATE_MIN_FIRE_POWER = 30
PLATE_FIRE_POWER_RANGE = 15
PLATE_SPAWN_INTERVAL_SEC = 2
PLATE_SPAWN_X_OFFSET = 10  # columns from the right edge
PLATE_SPAWN_Y = 5
PLATE_WIDTH = 3
PLATE_HEIGHT = 3

# Scoring
SCORE_BASE = 100
SCORE_MAX_SPEED = 50.0

_DEG_TO_RAD_FACTOR = 0.0174533


def deg_to_rad(degrees: float) -> float:
    """Convert degrees to radians using the game's fixed factor."""
    return degrees * _DEG_TO_RAD_FACTOR