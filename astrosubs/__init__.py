"""Numerical and astronomical utility routines: minimisation, FFTs, periodograms,
dates, ephemerides, output formatting and formula handling."""

__version__ = "0.1.0"