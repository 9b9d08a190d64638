import pytest

from scrabblebot.dictionary import Dictionary
from scrabblebot.timing import Deadline, calibrate, multiplier_for


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


def test_deadline_tracks_budget():
    clock = FakeClock()
    deadline = Deadline(100, clock)
    assert not deadline.expired()
    clock.now = 0.05
    assert deadline.elapsed_ms() == pytest.approx(50)
    assert deadline.remaining_ms() == pytest.approx(50)
    clock.now = 0.1
    assert deadline.expired()
    assert deadline.remaining_ms() == 0


def test_deadline_stays_expired():
    clock = FakeClock()
    deadline = Deadline(10, clock)
    clock.now = 1.0
    assert deadline.expired()
    clock.now = 0.0
    assert deadline.expired()


@pytest.mark.parametrize("score, multiplier", [
    (0.1, 3.0),
    (0.3, 2.0),
    (0.6, 1.5),
    (0.9, 1.2),
    (1.0, 1.0),
    (4.0, 1.0),
])
def test_multiplier_steps(score, multiplier):
    assert multiplier_for(score) == multiplier


def test_calibrate_with_slow_clock():
    ticks = iter([0.0, 0.15])
    profile = calibrate(Dictionary(["THE", "AND"]), iterations=10, clock=lambda: next(ticks))
    assert profile.elapsed_ms == pytest.approx(150)
    assert profile.performance_score == pytest.approx(1 / 3)
    assert profile.time_multiplier == 2.0
    assert profile.tier == "slow"


def test_calibrate_on_this_machine():
    profile = calibrate(Dictionary(["THE", "AND"]), iterations=50)
    assert profile.time_multiplier in (1.0, 1.2, 1.5, 2.0, 3.0)
