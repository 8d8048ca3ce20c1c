import pytest


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


class FixedRng:
    """Always places the gap top at the same height."""

    def __init__(self, gap_top):
        self.gap_top = gap_top

    def uniform(self, low, high):
        return self.gap_top


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fixed_rng():
    # Default bird (y=300..324) sits comfortably inside a 200..350 gap
    return FixedRng(200)
