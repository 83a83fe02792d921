[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "astrosubs"
version = "0.1.0"
description = "Numerical and astronomical utility routines: minimisation, FFTs, periodograms, dates, ephemerides and formula handling"
requires-python = ">=3.10"
dependencies = []
keywords = ["astronomy", "numerical", "fft", "periodogram", "ephemeris", "minimisation", "formula"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Astronomy",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["astrosubs"]

[tool.pytest.ini_options]
addopts = "-ra"
