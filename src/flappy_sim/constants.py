"""
constants.py: Centralized default configuration for the game world.
"""

# -------- Timing Config --------
FPS = 60                        # Simulation ticks per second
FRAME_TIME_MS = 1000 / FPS      # Fixed time step (milliseconds)
PIPE_SPAWN_INTERVAL_MS = 1500   # Wall-clock time between pipe spawns
MAX_STEPS_PER_FRAME = 5         # Catch-up cap for the fixed-step driver

# -------- Game World Config --------
SCREEN_WIDTH = 400
SCREEN_HEIGHT = 600

# -------- Bird Config --------
BIRD_X = 50                     # Fixed bird X position
BIRD_WIDTH = 34
BIRD_HEIGHT = 24

# -------- Pipe Config --------
PIPE_WIDTH = 80
PIPE_GAP = 150
PIPE_SPEED = 3                  # Horizontal speed (pixels/tick)
PIPE_TOP_MARGIN = 50            # Smallest allowed gap top
PIPE_MARGIN_TOTAL = 100         # Margin reserved at top + bottom combined

# -------- Physics Config (Pixels / Tick / Tick) --------
GRAVITY = 0.5                   # Vertical acceleration (pixels/tick^2)
JUMP_STRENGTH = -10             # Velocity after a jump (pixels/tick)

# -------- Presentation --------
TILT_PER_VELOCITY = 3           # Degrees of tilt per pixel/tick of velocity
TILT_MIN_DEG = -25
TILT_MAX_DEG = 90

SKY_BLUE = (135, 206, 235)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GREEN = (0, 200, 0)
RED = (255, 0, 0)
