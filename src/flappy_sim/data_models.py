"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass
from typing import Tuple

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, BIRD_X, BIRD_WIDTH, BIRD_HEIGHT,
    PIPE_WIDTH, PIPE_GAP, PIPE_SPEED, PIPE_TOP_MARGIN, PIPE_MARGIN_TOTAL,
    GRAVITY, JUMP_STRENGTH, PIPE_SPAWN_INTERVAL_MS, FRAME_TIME_MS,
    TILT_PER_VELOCITY, TILT_MIN_DEG, TILT_MAX_DEG
)


@dataclass(frozen=True)
class GameConfig:
    """Physics and geometry settings. Defaults come from constants.py."""
    screen_width: float = SCREEN_WIDTH
    screen_height: float = SCREEN_HEIGHT
    bird_x: float = BIRD_X
    bird_width: float = BIRD_WIDTH
    bird_height: float = BIRD_HEIGHT
    gravity: float = GRAVITY
    jump_strength: float = JUMP_STRENGTH
    pipe_width: float = PIPE_WIDTH
    pipe_gap: float = PIPE_GAP
    pipe_speed: float = PIPE_SPEED
    pipe_top_margin: float = PIPE_TOP_MARGIN
    pipe_margin_total: float = PIPE_MARGIN_TOTAL
    spawn_interval_ms: float = PIPE_SPAWN_INTERVAL_MS
    frame_time_ms: float = FRAME_TIME_MS

    def __post_init__(self):
        for name in ("screen_width", "screen_height", "bird_width", "bird_height",
                     "pipe_width", "pipe_gap", "pipe_speed", "spawn_interval_ms",
                     "frame_time_ms"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)!r}")
        if self.pipe_top_margin < 0:
            raise ValueError(f"pipe_top_margin must not be negative, got {self.pipe_top_margin!r}")
        if self.pipe_margin_total < self.pipe_top_margin:
            raise ValueError(
                f"pipe_margin_total {self.pipe_margin_total} is smaller than "
                f"pipe_top_margin {self.pipe_top_margin}")
        if self.bird_height >= self.pipe_gap:
            raise ValueError(
                f"bird_height {self.bird_height} does not fit through pipe_gap {self.pipe_gap}")
        if self.screen_height - self.pipe_gap - self.pipe_margin_total < 0:
            raise ValueError(
                f"pipe_gap {self.pipe_gap} plus margins {self.pipe_margin_total} "
                f"does not fit in screen_height {self.screen_height}")

    def gap_top_range(self) -> Tuple[float, float]:
        """Inclusive range a new pipe's gap top is drawn from."""
        low = self.pipe_top_margin
        return low, low + self.screen_height - self.pipe_gap - self.pipe_margin_total


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned bounding box in screen coordinates (y grows downward)."""
    left: float
    top: float
    right: float
    bottom: float


@dataclass
class Bird:
    """The falling actor. Only y and velocity change during play."""
    x: float = BIRD_X
    y: float = SCREEN_HEIGHT / 2
    velocity: float = 0.0
    width: float = BIRD_WIDTH
    height: float = BIRD_HEIGHT

    def apply_gravity(self, gravity: float):
        self.velocity += gravity
        self.y += self.velocity

    def jump(self, strength: float):
        self.velocity = strength

    def bounds(self) -> Bounds:
        return Bounds(self.x, self.y, self.x + self.width, self.y + self.height)

    def tilt(self) -> float:
        """Cosmetic rotation hint in degrees, derived from velocity."""
        return max(TILT_MIN_DEG, min(self.velocity * TILT_PER_VELOCITY, TILT_MAX_DEG))


@dataclass
class Pipe:
    """A pipe pair scrolling leftward with a fixed-size gap."""
    x: float
    gap_top: float
    width: float = PIPE_WIDTH
    gap_size: float = PIPE_GAP
    passed: bool = False

    @property
    def gap_bottom(self) -> float:
        return self.gap_top + self.gap_size

    def advance(self, speed: float):
        self.x -= speed

    def has_cleared(self, entity_x: float) -> bool:
        """True once the trailing edge is left of entity_x."""
        return self.x + self.width < entity_x

    def collides_with(self, bounds: Bounds) -> bool:
        """
        Checks the bounds against the solid top and bottom sections.
        A hit requires horizontal overlap and a vertical span that leaves the gap.
        """
        if not (bounds.right > self.x and bounds.left < self.x + self.width):
            return False
        return bounds.top < self.gap_top or bounds.bottom > self.gap_bottom

    def is_offscreen(self) -> bool:
        return self.x + self.width < 0


@dataclass(frozen=True)
class BirdView:
    x: float
    y: float
    width: float
    height: float
    tilt: float


@dataclass(frozen=True)
class PipeView:
    x: float
    width: float
    gap_top: float
    gap_bottom: float


@dataclass(frozen=True)
class FrameSnapshot:
    """Read-only view of the simulation handed to the renderer."""
    bird: BirdView
    pipes: Tuple[PipeView, ...]
    score: int
    game_over: bool
