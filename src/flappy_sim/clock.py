"""
clock.py: Default wall-clock source shared by the simulation and the frame driver.
"""

import time


def monotonic_ms() -> float:
    """Monotonic wall-clock time in milliseconds."""
    return time.monotonic() * 1000.0
