"""Radix-2 fast Fourier transforms of complex and real data.

Complex data are held as flat lists of alternating real and imaginary parts.
The forward transform (flag = 1) uses the kernel exp(+2 pi i j k / N) and
neither direction is normalised.
"""

from __future__ import annotations

import cmath
import math
from collections.abc import Sequence


def _is_power_of_two(n: int) -> bool:
    return n & (n - 1) == 0


def _check_flag(flag: int) -> None:
    if flag not in (1, -1):
        raise ValueError("fft: input flag must be +/-1")


def _transform(values: list[complex], sign: int) -> list[complex]:
    """In-order iterative radix-2 transform of a power-of-two list."""
    a = list(values)
    n = len(a)

    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j ^= bit
        if i < j:
            a[i], a[j] = a[j], a[i]

    length = 2
    while length <= n:
        half = length // 2
        twiddles = [cmath.exp(sign * 2j * math.pi * k / length) for k in range(half)]
        for start in range(0, n, length):
            for k, w in enumerate(twiddles):
                u = a[start + k]
                v = a[start + k + half] * w
                a[start + k] = u + v
                a[start + k + half] = u - v
        length <<= 1
    return a


def fft(data: Sequence[float], flag: int) -> list[float]:
    """Transform interleaved complex data (re, im, re, im, ...).

    The length of data must be a power of 2. flag = 1 gives the forward
    transform, flag = -1 the inverse one (without the 1/N factor).
    """
    _check_flag(flag)
    values = [float(v) for v in data]
    n = len(values)
    if not _is_power_of_two(n):
        raise ValueError(f"fft: {n} is not an integer power of 2")
    if n < 2:
        return values

    points = [complex(re, im) for re, im in zip(values[0::2], values[1::2])]
    result: list[float] = []
    for z in _transform(points, flag):
        result.extend((z.real, z.imag))
    return result


def fftr(data: Sequence[float], flag: int) -> list[float]:
    """Transform real data whose length is a power of 2 (at least 2).

    With flag = 1 the result is packed as re, im pairs, except that the
    second element holds the real value at the Nyquist frequency. Any other
    flag inverts such a packed array; multiply by 2/N to recover the data.
    """
    d = [float(v) for v in data]
    n = len(d)
    if n < 2 or not _is_power_of_two(n):
        raise ValueError(f"fftr: {n} is not an integer power of 2 of at least 2")

    c1 = 0.5
    theta = math.pi / (n >> 1)
    if flag == 1:
        c2 = -0.5
        d = fft(d, 1)
    else:
        c2 = 0.5
        theta = -theta

    wtemp = math.sin(0.5 * theta)
    wpr = -2.0 * wtemp * wtemp
    wpi = math.sin(theta)
    wr = 1.0 + wpr
    wi = wpi

    for i in range(1, n >> 2):
        i1 = 2 * i
        i2 = i1 + 1
        i3 = n - i1
        i4 = i3 + 1
        h1r = c1 * (d[i1] + d[i3])
        h1i = c1 * (d[i2] - d[i4])
        h2r = -c2 * (d[i2] + d[i4])
        h2i = c2 * (d[i1] - d[i3])
        d[i1] = h1r + wr * h2r - wi * h2i
        d[i2] = h1i + wr * h2i + wi * h2r
        d[i3] = h1r - wr * h2r + wi * h2i
        d[i4] = -h1i + wr * h2i + wi * h2r
        wtemp = wr
        wr = wtemp * wpr - wi * wpi + wr
        wi = wi * wpr + wtemp * wpi + wi

    h1r = d[0]
    if flag == 1:
        d[0] = h1r + d[1]
        d[1] = h1r - d[1]
    else:
        d[0] = c1 * (h1r + d[1])
        d[1] = c1 * (h1r - d[1])
        d = fft(d, -1)
    return d


def twofft(data1: Sequence[float], data2: Sequence[float]) -> tuple[list[float], list[float]]:
    """Forward transforms of two real arrays of equal power-of-2 length n.

    Both are done with one complex transform. Returns two interleaved
    complex arrays of length 2n.
    """
    n = len(data1)
    if len(data2) != n:
        raise ValueError("twofft: the two arrays differ in length")
    if n < 1 or not _is_power_of_two(n):
        raise ValueError(f"twofft: {n} is not an integer power of 2")

    packed: list[float] = []
    for a, b in zip(data1, data2):
        packed.extend((float(a), float(b)))
    fft1 = fft(packed, 1)
    fft2 = [0.0] * (2 * n)

    fft2[0] = fft1[1]
    fft1[1] = fft2[1] = 0.0

    nn2 = n + n
    nn3 = 1 + nn2
    for j in range(2, n + 1, 2):
        rep = 0.5 * (fft1[j] + fft1[nn2 - j])
        rem = 0.5 * (fft1[j] - fft1[nn2 - j])
        aip = 0.5 * (fft1[j + 1] + fft1[nn3 - j])
        aim = 0.5 * (fft1[j + 1] - fft1[nn3 - j])

        fft1[j] = rep
        fft1[j + 1] = aim
        fft1[nn2 - j] = rep
        fft1[nn3 - j] = -aim

        fft2[j] = aip
        fft2[j + 1] = -rem
        fft2[nn2 - j] = aip
        fft2[nn3 - j] = rem

    return fft1, fft2