"""
physics_core.py: Per-tick kinematics, pipe spawning and the screen-boundary check.
"""

import random
from typing import Optional

from .data_models import GameConfig, Bird, Pipe


class PhysicsCore:
    """
    Per-tick physics used by the simulation.
    All values are in pixels and ticks; nothing here reads the clock.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

    def new_bird(self) -> Bird:
        cfg = self.config
        return Bird(
            x=cfg.bird_x,
            y=cfg.screen_height / 2,
            velocity=0.0,
            width=cfg.bird_width,
            height=cfg.bird_height,
        )

    def spawn_pipe(self, rng: random.Random) -> Pipe:
        """Generates a new pipe at the right edge of the screen."""
        cfg = self.config
        gap_top = rng.uniform(*cfg.gap_top_range())
        return Pipe(
            x=float(cfg.screen_width),
            gap_top=gap_top,
            width=cfg.pipe_width,
            gap_size=cfg.pipe_gap,
        )

    def step_bird(self, bird: Bird):
        bird.apply_gravity(self.config.gravity)

    def flap(self, bird: Bird):
        bird.jump(self.config.jump_strength)

    def advance_pipe(self, pipe: Pipe):
        pipe.advance(self.config.pipe_speed)

    def hits_boundary(self, bird: Bird) -> bool:
        """Checks for leaving the screen through the ceiling or the floor."""
        return bird.y < 0 or bird.y + bird.height > self.config.screen_height
