import math
import random

import pytest

from astrosubs.periodogram import famp, fasper, fasper_fixed

F0 = 0.1
AMPLITUDE = 2.0


def _samples(n=200, seed=1):
    rng = random.Random(seed)
    x = sorted(rng.uniform(0.0, 100.0) for _ in range(n))
    y = [AMPLITUDE * math.sin(2.0 * math.pi * F0 * xi) for xi in x]
    e = [1.0] * n
    return x, y, e


def _peak(freq, values):
    best = max(range(len(values)), key=lambda i: values[i])
    return freq[best], values[best]


def test_fasper_finds_signal_frequency():
    x, y, e = _samples()
    freq, pgram = fasper(x, y, e, 4.0, 1.0)
    fpeak, _ = _peak(freq, pgram)
    assert fpeak == pytest.approx(F0, abs=0.005)


def test_fasper_frequency_grid_is_regular():
    x, y, e = _samples()
    freq, pgram = fasper(x, y, e, 4.0, 1.0)
    assert len(freq) == len(pgram)
    step = freq[0]
    for i, f in enumerate(freq):
        assert f == pytest.approx(step * (i + 1))


def test_fasper_fixed_grid_ends_at_fmax():
    x, y, e = _samples()
    freq, pgram = fasper_fixed(x, y, e, 0.5, 500)
    assert len(freq) == 500
    assert len(pgram) == 500
    assert freq[-1] == pytest.approx(0.5)


def test_fasper_fixed_finds_signal_frequency():
    x, y, e = _samples()
    freq, pgram = fasper_fixed(x, y, e, 0.5, 500)
    fpeak, _ = _peak(freq, pgram)
    assert fpeak == pytest.approx(F0, abs=0.002)


def test_fasper_fixed_ignores_points_without_uncertainty():
    x, y, e = _samples()
    base = fasper_fixed(x, y, e, 0.5, 500)
    with_bad = fasper_fixed(x + [50.0], y + [1000.0], e + [0.0], 0.5, 500)
    assert with_bad == base


def test_famp_recovers_amplitude():
    x, y, e = _samples()
    freq, amps = famp(x, y, e, 0.5, 500)
    fpeak, apeak = _peak(freq, amps)
    assert fpeak == pytest.approx(F0, abs=0.002)
    assert apeak == pytest.approx(AMPLITUDE, rel=0.1)


def test_fasper_fixed_rejects_undersampling():
    x, y, e = _samples()
    with pytest.raises(ValueError):
        fasper_fixed(x, y, e, 1.0, 10)


def test_famp_rejects_undersampling():
    x, y, e = _samples()
    with pytest.raises(ValueError):
        famp(x, y, e, 1.0, 10)


def test_mismatched_lengths_rejected():
    x, y, e = _samples()
    with pytest.raises(ValueError):
        fasper(x, y[:-1], e, 4.0, 1.0)


def test_no_valid_points_rejected():
    x, y, _ = _samples()
    with pytest.raises(ValueError):
        fasper_fixed(x, y, [0.0] * len(x), 0.5, 500)