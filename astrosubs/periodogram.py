"""Fast Lomb-Scargle periodograms and sinusoid amplitude spectra.

Points whose uncertainty is not positive are ignored throughout.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from astrosubs.fft import fftr

_MACC = 4
_NFAC = (1, 1, 2, 6, 24, 120, 720, 5040, 40320, 362880)


def _sign(a: float, b: float) -> float:
    return abs(a) if b >= 0.0 else -abs(a)


def _dmod(a: float, b: float) -> float:
    while a >= b:
        a -= b
    return a


def _spread(y: float, yy: list[float], x: float, m: int) -> None:
    """Extirpolate value y into yy around the fractional index x over m points."""
    if m >= 9:
        raise ValueError("spread: factorial table too small")
    n = len(yy)
    ix = int(x)
    if x == float(ix):
        yy[ix] += y
        return
    ilo = min(max(int(x - 0.5 * m), 0), n - m)
    ihi = ilo + m - 1
    nden = _NFAC[m - 1]
    fac = x - ilo
    for j in range(ilo + 1, ihi + 1):
        fac *= x - j
    yy[ihi] += y * fac / (nden * (x - ihi))
    for j in range(ihi - 1, ilo - 1, -1):
        nden = (nden // (j + 1 - ilo)) * (j - ihi)
        yy[j] += y * fac / (nden * (x - j))


def _check_lengths(x: Sequence[float], y: Sequence[float], e: Sequence[float]) -> None:
    if not len(x) == len(y) == len(e):
        raise ValueError("x, y and e must have the same length")


def _x_range(x: Sequence[float], e: Sequence[float]) -> tuple[float, float]:
    valid = [xi for xi, ei in zip(x, e) if ei > 0.0]
    if not valid:
        raise ValueError("no points with positive uncertainty")
    xmin, xmax = min(valid), max(valid)
    if xmax <= xmin:
        raise ValueError("need at least two distinct x values with positive uncertainty")
    return xmin, xmax - xmin


def _grid_size(nfreqt: int) -> int:
    nf = 64
    while nf < nfreqt:
        nf <<= 1
    return nf << 1


def _extirpolate(
    x: Sequence[float],
    y: Sequence[float],
    e: Sequence[float],
    xmin: float,
    fac: float,
    ndim: int,
) -> tuple[list[float], list[float], float]:
    """Spread weighted data onto a regular grid and transform it."""
    wk1 = [0.0] * ndim
    wk2 = [0.0] * ndim
    wsum = 0.0
    dndim = float(ndim)
    for xi, yi, ei in zip(x, y, e):
        if ei > 0.0:
            w = 1.0 / (ei * ei)
            wsum += w
            ck = _dmod((xi - xmin) * fac, dndim)
            ckk = _dmod(2.0 * ck, dndim)
            _spread(w * yi, wk1, ck, _MACC)
            _spread(w, wk2, ckk, _MACC)
    return fftr(wk1, 1), fftr(wk2, 1), wsum


def _half_angles(c: float, s: float) -> tuple[float, float]:
    hypo = math.sqrt(c * c + s * s)
    if hypo == 0.0:
        return math.nan, math.nan
    return 0.5 * c / hypo, 0.5 * s / hypo


def _lomb(
    wk1: list[float], wk2: list[float], wsum: float, nfreq: int, df: float
) -> tuple[list[float], list[float]]:
    freq: list[float] = []
    pgram: list[float] = []
    for i in range(nfreq):
        k = 2 + 2 * i
        hc2wt, hs2wt = _half_angles(wk2[k], wk2[k + 1])
        cwt = math.sqrt(max(0.5 + hc2wt, 0.0)) if not math.isnan(hc2wt) else math.nan
        swt = (
            _sign(math.sqrt(max(0.5 - hc2wt, 0.0)), hs2wt)
            if not math.isnan(hc2wt)
            else math.nan
        )
        den = 0.5 * wsum + hc2wt * wk2[k] + hs2wt * wk2[k + 1]
        cterm = (cwt * wk1[k] + swt * wk1[k + 1]) ** 2 / den
        sterm = (cwt * wk1[k + 1] - swt * wk1[k]) ** 2 / (wsum - den)
        freq.append(df * (i + 1))
        pgram.append((cterm + sterm) / 2.0)
    return freq, pgram


def fasper(
    x: Sequence[float],
    y: Sequence[float],
    e: Sequence[float],
    ofac: float,
    hifac: float,
) -> tuple[list[float], list[float]]:
    """Weighted Lomb-Scargle periodogram by the Press & Rybicki method.

    ofac is the oversampling factor (typically 4), hifac the highest
    frequency as a multiple of the average Nyquist frequency. Returns
    (frequencies, powers).
    """
    _check_lengths(x, y, e)
    n = len(x)
    nfreq = int(0.5 * ofac * hifac * n)
    ndim = _grid_size(int(ofac * hifac * n * _MACC))
    xmin, xdif = _x_range(x, e)
    fac = ndim / (xdif * ofac)
    wk1, wk2, wsum = _extirpolate(x, y, e, xmin, fac, ndim)
    return _lomb(wk1, wk2, wsum, nfreq, 1.0 / (xdif * ofac))


def _fixed_oversampling(xdif: float, fmax: float, nfreq: int, name: str) -> float:
    ofac = nfreq / (xdif * fmax)
    if ofac < 1.0:
        raise ValueError(
            f"{name}: oversampling factor = {ofac} and is < 1. Need more "
            "frequencies or a smaller maximum frequency."
        )
    return ofac


def fasper_fixed(
    x: Sequence[float],
    y: Sequence[float],
    e: Sequence[float],
    fmax: float,
    nfreq: int,
) -> tuple[list[float], list[float]]:
    """Weighted Lomb-Scargle periodogram on nfreq frequencies up to fmax.

    Raises ValueError if this undersamples the frequency resolution of the data.
    """
    _check_lengths(x, y, e)
    xmin, xdif = _x_range(x, e)
    _fixed_oversampling(xdif, fmax, nfreq, "fasper")
    ndim = _grid_size(2 * _MACC * nfreq)
    fac = ndim * (fmax / nfreq)
    wk1, wk2, wsum = _extirpolate(x, y, e, xmin, fac, ndim)
    return _lomb(wk1, wk2, wsum, nfreq, fmax / nfreq)


def famp(
    x: Sequence[float],
    y: Sequence[float],
    e: Sequence[float],
    fmax: float,
    nfreq: int,
) -> tuple[list[float], list[float]]:
    """Amplitudes of least-squares sinusoid fits on nfreq frequencies up to fmax.

    Returns (frequencies, amplitudes). Raises ValueError if the frequency
    grid undersamples the data.
    """
    _check_lengths(x, y, e)
    xmin, xdif = _x_range(x, e)
    ofac = _fixed_oversampling(xdif, fmax, nfreq, "famp")
    ndim = _grid_size(2 * _MACC * nfreq)
    fac = ndim / (xdif * ofac)
    wk1, wk2, wsum = _extirpolate(x, y, e, xmin, fac, ndim)

    df = 1.0 / (xdif * ofac)
    freq: list[float] = []
    amps: list[float] = []
    for i in range(nfreq):
        k = 2 + 2 * i
        hc2wt, hs2wt = _half_angles(wk2[k], wk2[k + 1])
        ac = (0.5 * wsum - hc2wt) * wk1[k] - hs2wt * wk1[k + 1]
        as_ = -hs2wt * wk1[k] + (0.5 * wsum + hc2wt) * wk1[k + 1]
        freq.append(df * (i + 1))
        amps.append(
            math.sqrt(ac * ac + as_ * as_)
            / ((0.5 * wsum) ** 2 - hc2wt ** 2 - hs2wt ** 2)
        )
    return freq, amps