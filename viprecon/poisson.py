"""Synthetic event times of a Poisson process for two detector chips."""

from __future__ import annotations

import math
import random
from typing import Iterator

CHIP_A = "CHIP_A_0001"
CHIP_B = "CHIP_B_0001"
ENERGY_MEV = 0.511
POSITION = (60.0, 60.0, 0.0)
SKIP_NS = 10_000_000_000
"""Gap added to both chips' clocks after each block of events."""

Event = tuple[int, str, int]


def next_time(rate: float, rng: random.Random | None = None) -> float:
    """Waiting time until the next event of a Poisson process with ``rate``."""
    if rate <= 0:
        raise ValueError(f"rate must be positive: {rate}")
    rng = rng or random.Random()
    return -math.log(1.0 - rng.random()) / rate


def generate_events(
    rate: float, ntrials: int = 100_000, rng: random.Random | None = None
) -> Iterator[Event]:
    """Yield ``(trial, chip, timestamp)`` records for two interleaved chips.

    Each block holds ``ntrials // 100`` events per chip. Clocks are whole
    numbers that advance by the truncated waiting time; the yielded
    timestamp is the clock value times 1000. Chip B advances the trial
    counter with each of its events, and after every block both clocks jump
    by :data:`SKIP_NS`.
    """
    if rate <= 0:
        raise ValueError(f"rate must be positive: {rate}")
    if ntrials < 0:
        raise ValueError(f"number of trials must not be negative: {ntrials}")
    rng = rng or random.Random()
    return _events(rate, ntrials, rng)


def _events(rate: float, ntrials: int, rng: random.Random) -> Iterator[Event]:
    per_chip = ntrials // 100
    clock_a = 0
    clock_b = 0
    trial = 0
    while trial < ntrials:
        for _ in range(per_chip):
            clock_a = int(clock_a + next_time(rate, rng))
            yield trial, CHIP_A, clock_a * 1000
        for _ in range(per_chip):
            clock_b = int(clock_b + next_time(rate, rng))
            yield trial, CHIP_B, clock_b * 1000
            trial += 1
        clock_a += SKIP_NS
        clock_b += SKIP_NS
        trial += 1