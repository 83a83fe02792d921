"""Function minimisation: downhill simplex and Brent's one-dimensional methods."""

from __future__ import annotations

import math
import warnings
from collections.abc import Callable, Sequence

Vertex = list[float]


def _sign(a: float, b: float) -> float:
    """Return |a| carrying the sign of b."""
    return abs(a) if b >= 0.0 else -abs(a)


def _column_sums(points: list[Vertex]) -> list[float]:
    return [math.fsum(column) for column in zip(*points)]


def _amoeba_try(
    points: list[Vertex],
    values: list[float],
    psum: list[float],
    func: Callable[[list[float]], float],
    ihi: int,
    fac: float,
) -> float:
    """Extrapolate through the face opposite the worst vertex by factor fac."""
    ndim = len(psum)
    fac1 = (1.0 - fac) / ndim
    fac2 = fac1 - fac
    ptry = [s * fac1 - p * fac2 for s, p in zip(psum, points[ihi])]
    ytry = func(list(ptry))
    if ytry < values[ihi]:
        values[ihi] = ytry
        for j, (new, old) in enumerate(zip(ptry, points[ihi])):
            psum[j] += new - old
        points[ihi] = ptry
    return ytry


def amoeba(
    params: Sequence[tuple[Sequence[float], float]],
    ftol: float,
    nmax: int,
    func: Callable[[list[float]], float],
) -> tuple[list[tuple[Vertex, float]], int]:
    """Minimise func with the downhill simplex method.

    params holds n+1 pairs of (vertex, function value at that vertex), each
    vertex having n coordinates. Returns the final simplex as a list of
    (vertex, value) pairs, with the best vertex first when converged, and the
    number of function calls made. Stops, with a RuntimeWarning, once more
    than nmax calls have been made.
    """
    tiny = 1.0e-10

    points = [[float(c) for c in vertex] for vertex, _ in params]
    values = [float(value) for _, value in params]
    npts = len(points)
    if any(len(p) + 1 != npts for p in points):
        raise ValueError(
            "amoeba: number of parameters is not one less than the number "
            "of parameter vectors on input"
        )
    if npts < 2:
        raise ValueError("amoeba: at least one parameter is needed")

    ndim = npts - 1
    nfunc = 0
    psum = _column_sums(points)

    while True:
        ilo = 0
        ihi, inhi = (0, 1) if values[0] > values[1] else (1, 0)
        for i, value in enumerate(values):
            if value <= values[ilo]:
                ilo = i
            if value > values[ihi]:
                inhi = ihi
                ihi = i
            elif value > values[inhi] and i != ihi:
                inhi = i

        rtol = (
            2.0 * abs(values[ihi] - values[ilo])
            / (abs(values[ihi]) + abs(values[ilo]) + tiny)
        )
        if rtol < ftol:
            values[0], values[ilo] = values[ilo], values[0]
            points[0], points[ilo] = points[ilo], points[0]
            break

        if nfunc >= nmax:
            warnings.warn(f"amoeba: nmax = {nmax} exceeded.", RuntimeWarning, stacklevel=2)
            break

        nfunc += 2
        ytry = _amoeba_try(points, values, psum, func, ihi, -1.0)
        if ytry <= values[ilo]:
            _amoeba_try(points, values, psum, func, ihi, 2.0)
        elif ytry >= values[inhi]:
            ysave = values[ihi]
            ytry = _amoeba_try(points, values, psum, func, ihi, 0.5)
            if ytry >= ysave:
                best = points[ilo]
                for i, point in enumerate(points):
                    if i != ilo:
                        shrunk = [0.5 * (a + b) for a, b in zip(point, best)]
                        points[i] = shrunk
                        values[i] = func(list(shrunk))
                nfunc += ndim
                psum = _column_sums(points)
        else:
            nfunc -= 1

    return list(zip(points, values)), nfunc


def brent(
    xstart: float,
    x1: float,
    x2: float,
    func: Callable[[float], float],
    tol: float,
) -> tuple[float, float]:
    """Locate a minimum of func bracketed by x1 and x2, starting from xstart.

    Returns (xmin, fmin). Gives a RuntimeWarning and the best point so far
    if the iteration limit is reached.
    """
    itmax = 100
    cgold = 0.3819660

    a = min(x1, x2)
    b = max(x1, x2)
    x = w = v = xstart
    fx = fw = fv = func(x)
    d = 0.0
    e = 0.0
    tol2 = 2.0 * tol

    for _ in range(itmax):
        xm = 0.5 * (a + b)
        if abs(x - xm) < (tol2 - 0.5 * (b - a)):
            return x, fx
        if abs(e) > tol:
            r = (x - w) * (fx - fv)
            q = (x - v) * (fx - fw)
            p = (x - v) * q - (x - w) * r
            q = 2.0 * (q - r)
            if q > 0.0:
                p = -p
            q = abs(q)
            etemp = e
            e = d
            if abs(p) >= abs(0.5 * q * etemp) or p <= q * (a - x) or p >= q * (b - x):
                e = a - x if x >= xm else b - x
                d = cgold * e
            else:
                d = p / q
                u = x + d
                if u - a < tol2 or b - u < tol2:
                    d = _sign(tol, xm - x)
        else:
            e = a - x if x >= xm else b - x
            d = cgold * e

        u = x + d if abs(d) >= tol else x + _sign(tol, d)
        fu = func(u)

        if fu <= fx:
            if u >= x:
                a = x
            else:
                b = x
            v, w, x = w, x, u
            fv, fw, fx = fw, fx, fu
        else:
            if u < x:
                a = u
            else:
                b = u
            if fu <= fw or w == x:
                v, w = w, u
                fv, fw = fw, fu
            elif fu <= fv or v == x or v == w:
                v = u
                fv = fu

    warnings.warn("Too many iterations in brent", RuntimeWarning, stacklevel=2)
    return x, fx


def dbrent(
    ax: float,
    bx: float,
    cx: float,
    func: Callable[[float], float],
    dfunc: Callable[[float], float],
    acc: float,
    stopfast: bool,
    fref: float,
) -> tuple[float, float]:
    """Refine a minimum bracketed by ax and cx using derivatives.

    bx is a point between the two. If stopfast is true, returns as soon as a
    function value below fref is found. Returns (xmin, fmin); raises
    RuntimeError after too many iterations.
    """
    a = min(ax, cx)
    b = max(ax, cx)
    x = w = v = bx
    fx = fw = fv = func(x)
    if stopfast and fx < fref:
        return x, fx

    dx = dw = dv = dfunc(x)
    itmax = 100
    e = 0.0
    d = 0.0

    for _ in range(itmax):
        xm = 0.5 * (a + b)
        tol1 = acc
        tol2 = 2.0 * tol1
        if abs(x - xm) <= (tol2 - 0.5 * (b - a)):
            return x, fx

        if abs(e) > tol1:
            d1 = d2 = 2.0 * (b - a)
            if dw != dx:
                d1 = (w - x) * dx / (dx - dw)
            if dv != dx:
                d2 = (v - x) * dx / (dx - dv)
            u1 = x + d1
            u2 = x + d2
            ok1 = (a - u1) * (u1 - b) > 0.0 and dx * d1 <= 0.0
            ok2 = (a - u2) * (u2 - b) > 0.0 and dx * d2 <= 0.0
            olde = e
            e = d
            if ok1 or ok2:
                if ok1 and ok2:
                    d = d1 if abs(d1) < abs(d2) else d2
                elif ok1:
                    d = d1
                else:
                    d = d2
                if abs(d) <= abs(0.5 * olde):
                    u = x + d
                    if u - a < tol2 or b - u < tol2:
                        d = _sign(tol1, xm - x)
                else:
                    e = a - x if dx >= 0.0 else b - x
                    d = 0.5 * e
            else:
                e = a - x if dx >= 0.0 else b - x
                d = 0.5 * e
        else:
            e = a - x if dx >= 0.0 else b - x
            d = 0.5 * e

        if abs(d) >= tol1:
            u = x + d
            fu = func(u)
            if stopfast and fu < fref:
                return u, fu
        else:
            u = x + _sign(tol1, d)
            fu = func(u)
            if stopfast and fu < fref:
                return u, fu
            if fu > fx:
                return x, fx

        du = dfunc(u)
        if fu <= fx:
            if u >= x:
                a = x
            else:
                b = x
            v, fv, dv = w, fw, dw
            w, fw, dw = x, fx, dx
            x, fx, dx = u, fu, du
        else:
            if u < x:
                a = u
            else:
                b = u
            if fu <= fw or w == x:
                v, fv, dv = w, fw, dw
                w, fw, dw = u, fu, du
            elif fu < fv or v == x or v == w:
                v, fv, dv = u, fu, du

    raise RuntimeError("dbrent: too many iterations")