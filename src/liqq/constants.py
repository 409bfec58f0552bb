"""
constants.py: Default tuning values for the game world and simulation.
"""

# -------- World Config --------
GAME_WIDTH = 360
GAME_HEIGHT = 640
GROUND_LEVEL = 0.85             # Fraction of GAME_HEIGHT
CEILING_LEVEL = 0.05            # Fraction of GAME_HEIGHT
PLAYER_X_FRACTION = 0.3         # Fixed body X as a fraction of GAME_WIDTH

# -------- Physics Config (Pixels / Second) --------
GRAVITY = 900.0                 # Vertical acceleration (pixels/s^2)
FLY_FORCE = -350.0              # Velocity set on thrust (pixels/s, negative is up)
MAX_FALL_SPEED = 400.0          # Clamping for stability (pixels/s)
MOVE_SPEED = 200.0              # Horizontal obstacle speed (pixels/s)
BLOCK_SIZE = 50.0               # Body edge length, collision radius is half

# -------- Obstacle Config --------
OBSTACLE_WIDTH = 50.0
MIN_GAP_SIZE = 180.0
SPAWN_INTERVAL_MS = 3000        # Accumulated tick time between spawns

# -------- Clock Config (milliseconds) --------
MIN_DT_MS = 8.0
MAX_DT_MS = 100.0

# -------- Idle Animation --------
HOVER_SPEED = 2.0               # Radians per second
HOVER_AMPLITUDE = 20.0          # Pixels
HOVER_BASE_OFFSET = 200.0       # Rest height above the ground line

# -------- Rules --------
BOUNDARY_IS_FATAL = False       # Ceiling/ground contact only clamps by default
