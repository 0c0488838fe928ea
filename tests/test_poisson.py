import random

import pytest

from viprecon.poisson import CHIP_A, CHIP_B, SKIP_NS, generate_events, next_time


class _FixedRandom:
    def __init__(self, values):
        self._values = iter(values)

    def random(self):
        return next(self._values)


def test_next_time_zero_draw_gives_zero_wait():
    assert next_time(5.0, _FixedRandom([0.0])) == 0.0


def test_next_time_grows_with_draw():
    times = [next_time(2.0, _FixedRandom([u])) for u in (0.1, 0.5, 0.9)]
    assert times == sorted(times)
    assert all(t > 0 for t in times)


def test_next_time_scales_inversely_with_rate():
    slow = next_time(1.0, _FixedRandom([0.5]))
    fast = next_time(4.0, _FixedRandom([0.5]))
    assert fast == pytest.approx(slow / 4.0)


@pytest.mark.parametrize("rate", [0.0, -1.0])
def test_next_time_rejects_non_positive_rate(rate):
    with pytest.raises(ValueError):
        next_time(rate, random.Random(1))


def test_next_time_mean_matches_rate():
    rng = random.Random(42)
    rate = 0.25
    samples = [next_time(rate, rng) for _ in range(20000)]
    assert sum(samples) / len(samples) == pytest.approx(1.0 / rate, rel=0.05)


def test_generate_events_rejects_bad_rate():
    with pytest.raises(ValueError):
        generate_events(0.0, 200, random.Random(1))


def test_generate_events_few_trials_yields_nothing():
    assert list(generate_events(1.0, 50, random.Random(3))) == []


def test_generate_events_chips_balanced_and_ordered():
    events = list(generate_events(0.01, 200, random.Random(7)))
    chip_a = [stamp for _, chip, stamp in events if chip == CHIP_A]
    chip_b = [stamp for _, chip, stamp in events if chip == CHIP_B]
    assert len(chip_a) == len(chip_b) > 0
    assert chip_a == sorted(chip_a)
    assert chip_b == sorted(chip_b)
    assert events[0][0] == 0
    assert all(trial < 200 for trial, _, _ in events)


def test_generate_events_block_gap_and_units():
    events = list(generate_events(0.01, 200, random.Random(11)))
    chip_a = [stamp for _, chip, stamp in events if chip == CHIP_A]
    assert all(stamp % 1000 == 0 for stamp in chip_a)
    # two events per chip per block: the third lies past the block gap
    assert chip_a[2] >= SKIP_NS * 1000


def test_generate_events_chip_b_advances_trials():
    events = list(generate_events(0.01, 200, random.Random(5)))
    first_block_b = [trial for trial, chip, _ in events[:4] if chip == CHIP_B]
    assert first_block_b == [0, 1]