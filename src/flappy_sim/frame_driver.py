"""
frame_driver.py: Fixed-timestep driver that decouples simulation ticks from the render rate.
"""

import logging
from typing import Callable, Optional

from .constants import FRAME_TIME_MS, MAX_STEPS_PER_FRAME

logger = logging.getLogger(__name__)


class FixedStepDriver:
    """
    Runs simulation.step() once per elapsed quantum and calls render once per frame.

    The simulation only needs step() and snapshot(); render receives the snapshot.
    """

    def __init__(self, simulation, step_ms: float = FRAME_TIME_MS,
                 render: Optional[Callable] = None,
                 max_steps_per_frame: int = MAX_STEPS_PER_FRAME):
        if step_ms <= 0:
            raise ValueError(f"step_ms must be positive, got {step_ms!r}")
        if max_steps_per_frame < 1:
            raise ValueError(f"max_steps_per_frame must be at least 1, got {max_steps_per_frame!r}")
        self.simulation = simulation
        self.step_ms = step_ms
        self.render = render
        self.max_steps_per_frame = max_steps_per_frame

        self.last_time: Optional[float] = None
        self.accumulator = 0.0

    def reset_timing(self):
        self.last_time = None
        self.accumulator = 0.0

    def frame(self, now_ms: float) -> int:
        """Handles one host callback. Returns the number of ticks executed."""
        if self.last_time is None:
            self.last_time = now_ms
        self.accumulator += max(0.0, now_ms - self.last_time)
        self.last_time = now_ms

        steps = 0
        while self.accumulator >= self.step_ms:
            if steps >= self.max_steps_per_frame:
                dropped = int(self.accumulator // self.step_ms)
                logger.warning("Frame driver fell behind; dropping %d ticks", dropped)
                self.accumulator %= self.step_ms
                break
            self.accumulator -= self.step_ms
            self.simulation.step()
            steps += 1

        if self.render is not None:
            self.render(self.simulation.snapshot())
        return steps
