"""
simulation.py: The authoritative game simulation and its playing/game-over state machine.
"""

import logging
import random
from enum import Enum, auto
from typing import Callable, List, Optional

from .data_models import GameConfig, Bird, Pipe, BirdView, PipeView, FrameSnapshot
from .clock import monotonic_ms
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


class GameState(Enum):
    PLAYING = auto()
    GAME_OVER = auto()


class Action(Enum):
    """Discrete input actions understood by the simulation."""
    FLAP = auto()       # Jump while playing
    ACTIVATE = auto()   # Jump while playing, reset after game over
    RESET = auto()      # Reset after game over


class Simulation:
    """
    Owns the bird, the live pipes, the score and the game state.
    One call to step() advances the world by one fixed tick.
    """

    def __init__(self, config: Optional[GameConfig] = None,
                 clock: Optional[Callable[[], float]] = None,
                 rng: Optional[random.Random] = None):
        self.core = PhysicsCore(config)
        self.clock = clock or monotonic_ms
        self.rng = rng or random.Random()

        self.bird: Bird = self.core.new_bird()
        self.pipes: List[Pipe] = []
        self.score = 0
        self.state = GameState.PLAYING
        self.last_spawn_time: Optional[float] = None

    @property
    def config(self) -> GameConfig:
        return self.core.config

    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    def reset(self):
        """Returns to a fresh PLAYING state. Allowed from any state."""
        self.bird = self.core.new_bird()
        self.pipes = []
        self.score = 0
        self.last_spawn_time = None
        self.state = GameState.PLAYING
        logger.info("Game reset.")

    def jump(self):
        if self.game_over:
            return
        self.core.flap(self.bird)

    def handle_action(self, action):
        """Applies one input action. Unknown actions are ignored."""
        if action is Action.FLAP:
            self.jump()
        elif action is Action.ACTIVATE:
            if self.game_over:
                self.reset()
            else:
                self.jump()
        elif action is Action.RESET:
            if self.game_over:
                self.reset()
        else:
            logger.debug("Ignoring unrecognized action %r", action)

    def _spawn_due(self, now: float) -> bool:
        if self.last_spawn_time is None:
            return True
        return now - self.last_spawn_time >= self.config.spawn_interval_ms

    def _end_game(self, reason: str):
        if not self.game_over:
            logger.info("Game over (%s). Final score: %d", reason, self.score)
        self.state = GameState.GAME_OVER

    def step(self):
        """
        The main simulation step. Does nothing once the game is over.
        Mutates the bird and pipe states.
        """
        if self.game_over:
            return

        # 1. Bird physics
        self.core.step_bird(self.bird)

        # 2. Spawn on a wall-clock interval
        now = self.clock()
        if self._spawn_due(now):
            pipe = self.core.spawn_pipe(self.rng)
            self.pipes.append(pipe)
            self.last_spawn_time = now
            logger.debug("Spawned pipe with gap at %.1f", pipe.gap_top)

        # 3. Move pipes, score passes, check collisions (every pipe is processed)
        bounds = self.bird.bounds()
        for pipe in self.pipes:
            self.core.advance_pipe(pipe)

            if not pipe.passed and pipe.has_cleared(self.bird.x):
                pipe.passed = True
                self.score += 1

            if pipe.collides_with(bounds):
                self._end_game("pipe collision")

        # 4. Drop pipes that left the screen
        self.pipes = [p for p in self.pipes if not p.is_offscreen()]

        # 5. Ceiling / floor
        if self.core.hits_boundary(self.bird):
            self._end_game("out of bounds")

    def snapshot(self) -> FrameSnapshot:
        """Prepares an immutable view of the current state for rendering."""
        bird = self.bird
        return FrameSnapshot(
            bird=BirdView(bird.x, bird.y, bird.width, bird.height, bird.tilt()),
            pipes=tuple(
                PipeView(p.x, p.width, p.gap_top, p.gap_bottom) for p in self.pipes
            ),
            score=self.score,
            game_over=self.game_over,
        )
