"""Search deadlines and host performance calibration."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable

from scrabblebot.dictionary import Dictionary
from scrabblebot.rack import Rack

log = logging.getLogger("scrabblebot.timing")

Clock = Callable[[], float]


class Deadline:
    """Cooperative wall-clock budget. Once expired it stays expired."""

    __slots__ = ("budget_ms", "_clock", "_start", "_expired")

    def __init__(self, budget_ms: float, clock: Clock | None = None):
        self.budget_ms = max(0.0, float(budget_ms))
        self._clock = clock or time.monotonic
        self._start = self._clock()
        self._expired = False

    def elapsed_ms(self) -> float:
        return (self._clock() - self._start) * 1000.0

    def remaining_ms(self) -> float:
        return max(0.0, self.budget_ms - self.elapsed_ms())

    def expired(self) -> bool:
        if not self._expired and self.elapsed_ms() >= self.budget_ms:
            self._expired = True
        return self._expired


# ── Calibration ──────────────────────────────────────────────────────────
#
# A fixed mix of dictionary lookups and rack manipulation, timed against a
# baseline measured on a reasonable machine. Slow hosts get longer budgets.

CALIBRATION_ITERATIONS = 5000
CALIBRATION_BASELINE_MS = 50.0

_CALIBRATION_RACKS = ("SCRABLE", "TESTING", "WORDSAE", "QUIZXJK")
_CALIBRATION_WORDS = (
    "THE", "AND", "SCRABBLE", "TESTING", "WORD", "QUIZ",
    "ABLE", "BEST", "CARE", "DONE", "EACH", "FAST",
)

# (performance score upper bound, time multiplier), checked in order
_MULTIPLIER_STEPS: tuple[tuple[float, float], ...] = (
    (0.25, 3.0),
    (0.5, 2.0),
    (0.75, 1.5),
    (1.0, 1.2),
)


@dataclass(frozen=True)
class PerformanceProfile:
    elapsed_ms: float
    performance_score: float  # baseline / elapsed; 1.0 = baseline, <1 = slower
    time_multiplier: float

    @property
    def tier(self) -> str:
        s = self.performance_score
        if s >= 1.0:
            return "fast"
        if s >= 0.75:
            return "good"
        if s >= 0.5:
            return "average"
        if s >= 0.25:
            return "slow"
        return "very slow"


def multiplier_for(performance_score: float) -> float:
    for bound, multiplier in _MULTIPLIER_STEPS:
        if performance_score < bound:
            return multiplier
    return 1.0


def calibrate(
    dictionary: Dictionary,
    iterations: int = CALIBRATION_ITERATIONS,
    baseline_ms: float = CALIBRATION_BASELINE_MS,
    clock: Clock | None = None,
) -> PerformanceProfile:
    """Benchmark the host and derive a time multiplier for search budgets."""
    clock = clock or time.perf_counter
    racks = [Rack.from_string(r) for r in _CALIBRATION_RACKS]

    start = clock()
    for i in range(iterations):
        rack = racks[i % len(racks)]
        word = _CALIBRATION_WORDS[i % len(_CALIBRATION_WORDS)]
        dictionary.is_valid(word)
        dictionary.is_valid(word.lower())
        rack.can_form(word)
        "".join(sorted(rack.tiles))
    elapsed = (clock() - start) * 1000.0

    # Guard against a clock too coarse to register the loop
    score = baseline_ms / elapsed if elapsed > 0 else float("inf")
    profile = PerformanceProfile(elapsed, score, multiplier_for(score))
    log.info(
        "Calibration: %.1f ms for %d iterations, score %.2f (%s), time multiplier %.1fx",
        elapsed, iterations, score, profile.tier, profile.time_multiplier,
    )
    return profile
