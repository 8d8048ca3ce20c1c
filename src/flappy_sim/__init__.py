"""
flappy_sim: a single-screen flappy bird game with a fixed-timestep simulation core.
"""

from .data_models import GameConfig, Bird, Pipe, Bounds, FrameSnapshot
from .clock import monotonic_ms
from .frame_driver import FixedStepDriver
from .physics_core import PhysicsCore
from .simulation import Action, GameState, Simulation

__all__ = [
    "Action", "Bird", "Bounds", "FixedStepDriver", "FrameSnapshot", "GameConfig",
    "GameState", "PhysicsCore", "Pipe", "Simulation", "monotonic_ms",
]
