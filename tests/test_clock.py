from flappy_sim import clock
from flappy_sim.clock import monotonic_ms
from flappy_sim.simulation import Simulation


def test_monotonic_ms_does_not_go_backwards():
    first = monotonic_ms()
    assert monotonic_ms() >= first


def test_simulation_defaults_to_monotonic_clock():
    assert Simulation().clock is monotonic_ms


def test_simulation_takes_its_clock_from_the_clock_module():
    from flappy_sim import simulation

    assert simulation.monotonic_ms is clock.monotonic_ms
    assert not hasattr(simulation, "FixedStepDriver")
