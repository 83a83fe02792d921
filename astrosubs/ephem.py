"""Linear and quadratic ephemerides of periodic events."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class TimeScale(Enum):
    """Timescale of an ephemeris."""

    HJD = "HJD"
    HMJD = "HMJD"
    BJD = "BJD"
    BMJD = "BMJD"


class EphemType(Enum):
    """Form of an ephemeris."""

    LINEAR = "linear"
    QUADRATIC = "quadratic"


class EphemError(ValueError):
    """Raised when an ephemeris cannot be read."""


@dataclass
class Ephem:
    """An ephemeris T = T0 + P E (+ Q E^2) with uncertainties."""

    tzero: float = 0.0
    period: float = 1.0
    quad: float = 0.0
    tzerr: float = 0.0
    perr: float = 0.0
    qerr: float = 0.0
    tscale: TimeScale = TimeScale.HJD
    etype: EphemType = EphemType.LINEAR

    def phase(self, t: float) -> float:
        """Phase (cycle number) at time t."""
        ph = (t - self.tzero) / self.period
        if self.etype is EphemType.QUADRATIC:
            pold = ph + 1.0
            while abs(ph - pold) > 1.0e-6:
                pold = ph
                ph = (t - self.tzero - self.quad * ph * ph) / self.period
        return ph

    def pherr(self, t: float) -> float:
        """Uncertainty in the phase at time t."""
        ph = self.phase(t)
        terr = self.tzerr ** 2 + (self.perr * ph) ** 2
        if self.etype is EphemType.QUADRATIC:
            terr += (self.qerr * ph * ph) ** 2
        return math.sqrt(terr) / self.period

    def time(self, p: float) -> float:
        """Time at phase p."""
        if self.etype is EphemType.QUADRATIC:
            return self.tzero + p * (self.period + self.quad * p)
        return self.tzero + p * self.period

    def timerr(self, p: float) -> float:
        """Uncertainty in the time at phase p."""
        terr = self.tzerr ** 2 + (p * self.perr) ** 2
        if self.etype is EphemType.QUADRATIC:
            terr += (self.qerr * p * p) ** 2
        return math.sqrt(terr)

    def set_linear(self, t0: float, period: float, tscale: TimeScale) -> None:
        """Make this a linear ephemeris; uncertainties are kept."""
        self.etype = EphemType.LINEAR
        self.tzero = t0
        self.period = period
        self.tscale = tscale

    def set_quadratic(self, t0: float, period: float, pdot: float, tscale: TimeScale) -> None:
        """Make this a quadratic ephemeris; uncertainties are kept."""
        self.etype = EphemType.QUADRATIC
        self.tzero = t0
        self.period = period
        self.quad = pdot
        self.tscale = tscale

    @classmethod
    def parse(cls, text: str) -> Ephem:
        """Read an ephemeris in the form written by str()."""
        tokens = text.split()
        if len(tokens) < 2:
            raise EphemError(f"incomplete ephemeris: {text!r}")
        try:
            tscale = TimeScale[tokens[0].upper()]
        except KeyError:
            raise EphemError(f"unrecognised timescale = {tokens[0]}") from None
        etype = EphemType.LINEAR if tokens[1].upper() == "LINEAR" else EphemType.QUADRATIC
        nnum = 6 if etype is EphemType.QUADRATIC else 4
        numbers = tokens[2:2 + nnum]
        if len(numbers) < nnum:
            raise EphemError(f"incomplete ephemeris: {text!r}")
        try:
            values = [float(v) for v in numbers]
        except ValueError as err:
            raise EphemError(f"invalid number in ephemeris: {text!r}") from err
        ephem = cls(
            tzero=values[0], tzerr=values[1], period=values[2], perr=values[3],
            tscale=tscale, etype=etype,
        )
        if etype is EphemType.QUADRATIC:
            ephem.quad, ephem.qerr = values[4], values[5]
        return ephem

    def __str__(self) -> str:
        text = (
            f"{self.tscale.value} {self.etype.value} {self.tzero:.15g} {self.tzerr:.15g} "
            f"{self.period:.15g} {self.perr:.15g}"
        )
        if self.etype is EphemType.QUADRATIC:
            text += f" {self.quad:.15g} {self.qerr:.15g}"
        return text