"""Calendar dates held as integer modified Julian day numbers."""

from __future__ import annotations

import re
import struct
from enum import IntEnum
from functools import total_ordering
from typing import BinaryIO

from astrosubs.byteswap import byte_swap

_INT4 = "=i"
_INT4_SIZE = struct.calcsize(_INT4)
_DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


class Month(IntEnum):
    """Months of the year."""

    JAN = 1
    FEB = 2
    MAR = 3
    APR = 4
    MAY = 5
    JUN = 6
    JUL = 7
    AUG = 8
    SEP = 9
    OCT = 10
    NOV = 11
    DEC = 12

    def __str__(self) -> str:
        return self.name.capitalize()


class DateError(ValueError):
    """Raised for invalid dates or failed date input and output."""


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating towards zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _cmod(a: int, b: int) -> int:
    """Remainder with the sign of the dividend."""
    return a - b * _cdiv(a, b)


def _cal2mjd(year: int, month: int, day: int) -> int:
    """MJD of the start of a Gregorian calendar date."""
    my = _cdiv(month - 14, 12)
    iypmy = year + my
    return (
        _cdiv(1461 * (iypmy + 4800), 4)
        + _cdiv(367 * (month - 2 - 12 * my), 12)
        - _cdiv(3 * _cdiv(iypmy + 4900, 100), 4)
        + day
        - 2432076
    )


def _mjd2cal(mjd: int) -> tuple[int, int, int]:
    """Gregorian (day, month, year) of an integer MJD."""
    jd = mjd + 2400001
    l = jd + 68569
    n = _cdiv(4 * l, 146097)
    l -= _cdiv(146097 * n + 3, 4)
    i = _cdiv(4000 * (l + 1), 1461001)
    l -= _cdiv(1461 * i, 4) - 31
    k = _cdiv(80 * l, 2447)
    day = l - _cdiv(2447 * k, 80)
    l = _cdiv(k, 11)
    month = k + 2 - 12 * l
    year = 100 * (n - 49) + i + l
    return day, month, year


@total_ordering
class Date:
    """A calendar date.

    Dates print as "17 Nov 1961", or as "17/11/1961" when the class
    attribute print_method is 2.
    """

    print_method = 1

    def __init__(self, day: int, month: int | Month, year: int) -> None:
        month = int(month)
        self.valid_date(day, month, year)
        self._mjd = _cal2mjd(year, month, day)

    @classmethod
    def from_string(cls, text: str) -> Date:
        """Parse a date such as "1 Jan 2002", "17 Nov 1961" or "17/11/1961"."""
        head = re.match(r"\s*([+-]?\d+)(.)", text, re.S)
        if head is None:
            raise DateError(f"failed to read date = {text}")
        day = int(head.group(1))
        rest = text[head.end():]
        if head.group(2) == "/":
            tail = re.match(r"\s*([+-]?\d+).\s*([+-]?\d+)", rest, re.S)
            if tail is None:
                raise DateError(f"failed to read date = {text}")
            month = int(tail.group(1))
            year = int(tail.group(2))
        else:
            tail = re.match(r"\s*(\S+)\s+([+-]?\d+)", rest)
            if tail is None:
                raise DateError(f"failed to read date = {text}")
            mname = tail.group(1).upper()
            try:
                month = Month[mname]
            except KeyError:
                raise DateError(f"unrecognised month = {mname}") from None
            year = int(tail.group(2))
        return cls(day, month, year)

    @classmethod
    def from_mjd(cls, mjd: int) -> Date:
        """Date whose start has the given MJD (JD - 2400000.5)."""
        date = cls.__new__(cls)
        date._mjd = int(mjd)
        return date

    def add_day(self, nday: int) -> None:
        """Move the date forward by nday days (backwards if negative)."""
        self._mjd += int(nday)

    def day(self) -> int:
        """Day of the month."""
        return _mjd2cal(self._mjd)[0]

    def month(self) -> int:
        """Month of the year, 1 to 12."""
        return _mjd2cal(self._mjd)[1]

    def year(self) -> int:
        """The year."""
        return _mjd2cal(self._mjd)[2]

    def date(self) -> tuple[int, int, int]:
        """The (day, month, year) of the date."""
        return _mjd2cal(self._mjd)

    def mjd(self) -> float:
        """Modified Julian day at the start of the day."""
        return float(self._mjd)

    def str(self) -> str:
        """The date formatted according to print_method."""
        day, month, year = self.date()
        if self.print_method == 2:
            middle = f"/{month:02d}/"
        else:
            try:
                middle = f" {Month(month)} "
            except ValueError:
                raise DateError("unrecognised month") from None
        return f"{day:02d}{middle}{year:04d}"

    def __str__(self) -> str:
        return self.str()

    def __repr__(self) -> str:
        day, month, year = self.date()
        return f"Date({day}, {month}, {year})"

    def day_of_week(self) -> str:
        """Name of the day of the week, e.g. "Monday"."""
        index = _cmod(int(self.mjd() + 0.1) + 2, 7)
        return _DAY_NAMES[index] if 0 <= index < 7 else "day"

    def int_day_of_week(self) -> int:
        """Day of the week as a number from 0 (Sunday) to 6."""
        return _cmod(int(self.mjd() + 0.1) + 3, 7)

    @classmethod
    def read(cls, stream: BinaryIO, swap_bytes: bool = False) -> Date:
        """Read a date stored as a 4-byte MJD from a binary stream."""
        raw = stream.read(_INT4_SIZE)
        if len(raw) != _INT4_SIZE:
            raise DateError("error reading date")
        (mjd,) = struct.unpack(_INT4, raw)
        if swap_bytes:
            mjd = byte_swap(mjd, "i")
        if mjd < 0 or mjd > 1000000:
            raise DateError("error date out of range")
        return cls.from_mjd(mjd)

    def write(self, stream: BinaryIO) -> None:
        """Write the date as a 4-byte MJD to a binary stream."""
        try:
            stream.write(struct.pack(_INT4, self._mjd))
        except (OSError, struct.error) as err:
            raise DateError(f"error writing date: {err}") from err

    @staticmethod
    def skip(stream: BinaryIO) -> None:
        """Skip over a date in a binary stream."""
        if len(stream.read(_INT4_SIZE)) != _INT4_SIZE:
            raise DateError("error skipping date")

    @staticmethod
    def leapyear(year: int) -> int:
        """1 if year is a leap year, else 0."""
        if year % 400 == 0:
            return 1
        if year % 100 == 0:
            return 0
        if year % 4 == 0:
            return 1
        return 0

    @staticmethod
    def valid_date(day: int, month: int, year: int) -> None:
        """Raise DateError unless day, month and year form a valid date."""
        if year < -4699:
            raise DateError(f"invalid date. Year = {year} is less than -4699")
        if month < 1 or month > 12:
            raise DateError(f"invalid date. Month = {month} is out of range 1 to 12")
        if month == Month.FEB:
            mx = 28 + Date.leapyear(year)
        elif month in (Month.SEP, Month.APR, Month.JUN, Month.NOV):
            mx = 30
        else:
            mx = 31
        if day < 1 or day > mx:
            raise DateError(f"invalid date. Day = {day} is out of range 1 to {mx}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._mjd == other._mjd

    def __lt__(self, other: Date) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._mjd < other._mjd

    def __sub__(self, other: Date) -> int:
        if not isinstance(other, Date):
            return NotImplemented
        return self._mjd - other._mjd

    __hash__ = None  # type: ignore[assignment]