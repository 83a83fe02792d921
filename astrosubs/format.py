"""Fixed output formatting of numbers and strings, independent of any global state."""

from __future__ import annotations

from enum import Enum


class _FloatField(Enum):
    GENERAL = "g"
    FIXED = "f"
    SCIENTIFIC = "e"


class _Adjust(Enum):
    LEFT = "left"
    RIGHT = "right"
    INTERNAL = "internal"


class Format:
    """Holds a number format and applies it when called.

    >>> form = Format(8)
    >>> form.scientific()
    >>> text = form(1.23456789)
    """

    def __init__(self, precision: int = 8) -> None:
        self._precision = precision
        self._width = 0
        self._field = _FloatField.GENERAL
        self._upper = False
        self._showpoint = False
        self._fill = " "
        self._adjust = _Adjust.LEFT

    def precision(self, p: int) -> None:
        """Set the number of digits (significant in general format, decimals otherwise)."""
        self._precision = p

    def scientific(self) -> None:
        """Use exponential notation."""
        self._field = _FloatField.SCIENTIFIC

    def fixed(self) -> None:
        """Use fixed-point notation."""
        self._field = _FloatField.FIXED

    def general(self) -> None:
        """Choose fixed or exponential notation according to the value."""
        self._field = _FloatField.GENERAL

    def width(self, w: int) -> None:
        """Set the minimum field width."""
        self._width = w

    def showpoint(self) -> None:
        """Always show the decimal point and trailing zeros."""
        self._showpoint = True

    def noshowpoint(self) -> None:
        """Show the decimal point only when needed."""
        self._showpoint = False

    def uppercase(self) -> None:
        """Use upper-case letters in numbers."""
        self._upper = True

    def lowercase(self) -> None:
        """Use lower-case letters in numbers."""
        self._upper = False

    def fill(self, c: str) -> None:
        """Set the padding character."""
        if len(c) != 1:
            raise ValueError("fill character must be a single character")
        self._fill = c

    def left(self) -> None:
        """Pad after the value."""
        self._adjust = _Adjust.LEFT

    def right(self) -> None:
        """Pad before the value."""
        self._adjust = _Adjust.RIGHT

    def internal(self) -> None:
        """Pad between a number's sign and its digits."""
        self._adjust = _Adjust.INTERNAL

    def _number(self, value: float) -> str:
        precision = self._precision if self._precision >= 0 else 6
        conv = self._field.value.upper() if self._upper else self._field.value
        flags = "#" if self._showpoint else ""
        return f"%{flags}.{precision}{conv}" % float(value)

    def _pad(self, text: str, numeric: bool) -> str:
        npad = self._width - len(text)
        if npad <= 0:
            return text
        padding = self._fill * npad
        if self._adjust is _Adjust.LEFT:
            return text + padding
        if self._adjust is _Adjust.INTERNAL and numeric and text[:1] in "+-" and text:
            return text[0] + padding + text[1:]
        return padding + text

    def __call__(self, value: float | str, width: int | None = None) -> str:
        """Format value; a given width is stored as the new field width."""
        if width is not None:
            self.width(width)
        if isinstance(value, str):
            return self._pad(value, numeric=False)
        return self._pad(self._number(value), numeric=True)