import pytest

from cfs_sim.cfs import CFSScheduler
from cfs_sim.clock import SimulatedClock, WallClock, make_clock
from cfs_sim.models import Process


def test_simulated_clock_advances_in_units():
    clock = SimulatedClock(start=5, unit_ns=100)
    clock.advance(3)
    assert clock.now() == 305
    clock.advance(0)
    assert clock.now() == 305


def test_make_clock():
    assert isinstance(make_clock("simulated"), SimulatedClock)
    assert isinstance(make_clock("WALL"), WallClock)
    with pytest.raises(ValueError, match="Unknown clock"):
        make_clock("sundial")


def test_wall_clock_stamps_are_ordered():
    scheduler = CFSScheduler(clock=WallClock(unit_ns=1_000), io_wait=1)
    logs = scheduler.schedule([Process("A", remaining_work=3)])
    assert len(logs) == 3
    for prev, nxt in zip(logs, logs[1:]):
        assert prev.end_time >= prev.start_time
        assert nxt.start_time >= prev.end_time
