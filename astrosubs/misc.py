"""Small numerical and string helpers: smoothing, extinction, ln(n!), file names."""

from __future__ import annotations

import math
from collections.abc import Sequence
from functools import lru_cache


def boxcar(data: Sequence[float], width: int) -> list[float]:
    """Smooth data with a running mean over pixels j-width to j+width.

    A width of 1 returns the data unchanged. Near the ends the mean is taken
    over the pixels available.
    """
    values = [float(v) for v in data]
    if width == 1:
        return values
    npix = len(values)
    result = []
    for j in range(npix):
        window = values[max(j - width, 0):min(j + width + 1, npix)]
        result.append(math.fsum(window) / len(window))
    return result


def extinct(wavelength: float, ratio: float) -> float:
    """Extinction at wavelength (microns) relative to that at V.

    Follows the Cardelli, Clayton & Mathis (1989) mean law, valid over
    0.1 to 3.5 microns and clamped to the nearest limit outside it. ratio
    is A(V)/E(B-V), typically 3.1.
    """
    x = 1.0 / wavelength
    a = b = 0.0

    if x <= 1.1:
        xc = max(x, 0.3)
        a = 0.574 * xc ** 1.61
        b = -0.527 * xc ** 1.61
    elif x <= 3.3:
        y = x - 1.82
        a = 1 + y * (0.17699 + y * (-0.50447 + y * (-0.02427 + y * (0.72085 + y * (
            0.01979 + y * (-0.77530 + y * 0.32999))))))
        b = y * (1.41338 + y * (2.28305 + y * (1.07233 + y * (-5.38434 + y * (
            -0.62251 + y * (5.30260 - y * 2.09002))))))
    elif x <= 8:
        a = 1.752 - 0.316 * x - 0.104 / ((x - 4.67) ** 2 + 0.341)
        b = -3.090 + 1.825 * x + 1.206 / ((x - 4.62) ** 2 + 0.263)
        if x > 5.9:
            a += -0.04473 * (x - 5.9) ** 2 - 0.009779 * (x - 5.9) ** 3
            b += 0.2130 * (x - 5.9) ** 2 + 0.1207 * (x - 5.9) ** 3
    else:
        y = min(x - 8.0, 2.0)
        a = -1.073 + y * (-0.628 + y * (0.137 - 0.070 * y))
        b = 13.670 + y * (4.257 + y * (-0.420 + 0.374 * y))

    return a + b / ratio


@lru_cache(maxsize=101)
def _small_factln(n: int) -> float:
    return math.lgamma(n + 1.0)


def factln(n: int) -> float:
    """Natural logarithm of n factorial."""
    if n < 0:
        raise ValueError(f"factln: n = {n} is out of range")
    if n <= 1:
        return 0.0
    if n <= 100:
        return _small_factln(n)
    return math.lgamma(n + 1.0)


def filnam(name: str, extension: str) -> str:
    """Return name with trailing blanks removed and extension appended if absent."""
    stripped = name.rstrip(" \t")
    if stripped:
        name = stripped
    return name if name.endswith(extension) else name + extension