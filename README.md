# astrosubs

Numerical and astronomical utility routines in pure Python, with no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Contents

- `astrosubs.minimise`
  - `amoeba(params, ftol, nmax, func)`: downhill simplex minimisation. `params`
    holds n+1 `(vertex, value)` pairs; returns `(simplex, nfunc)`, the final
    simplex with the best vertex first when converged, and the number of
    function calls. Gives a `RuntimeWarning` if `nmax` calls are exceeded.
  - `brent(xstart, x1, x2, func, tol)`: one-dimensional minimisation within a
    bracket; returns `(xmin, fmin)`.
  - `dbrent(ax, bx, cx, func, dfunc, acc, stopfast, fref)`: the same using
    derivatives, optionally stopping as soon as a value below `fref` is found;
    returns `(xmin, fmin)` and raises `RuntimeError` after too many iterations.
- `astrosubs.byteswap`: `reverse_bytes` (2, 4 or 8 bytes), `byte_swap(value, fmt)`
  for a `struct` format character such as `"i"`, `"f"` or `"d"`,
  `is_little_endian`, `is_big_endian`.
- `astrosubs.misc`: `boxcar` running-mean smoothing, `extinct` (interstellar
  extinction relative to that at V, Cardelli, Clayton & Mathis 1989),
  `factln` (ln n!), `filnam` (append a file extension if absent).
- `astrosubs.card`: playing cards (`Card`, `Number`, `Suit`); `str(card)` gives
  e.g. `"Ace of Spades"`.
- `astrosubs.fft`: radix-2 transforms of interleaved complex data (`fft`) and
  of real data (`fftr`), and `twofft` for two real series at once. Transforms
  are unnormalised.
- `astrosubs.periodogram`: fast Lomb-Scargle periodograms weighted by
  uncertainties (`fasper` with an oversampling factor, `fasper_fixed` on a
  given number of frequencies up to a maximum) and amplitude spectra of
  least-squares sinusoid fits (`famp`). Points whose uncertainty is not
  positive are ignored. Each returns `(frequencies, values)`.
- `astrosubs.date`: calendar dates held as whole modified Julian days (`Date`,
  `Month`, `DateError`), with parsing of `"17 Nov 1961"` and `"17/11/1961"`,
  day of the week, comparison, subtraction and 4-byte binary `read`/`write`.
  Set `Date.print_method = 2` to print as `dd/mm/yyyy`.
- `astrosubs.ephem`: linear and quadratic ephemerides with uncertainties
  (`Ephem`, `TimeScale`, `EphemType`, `EphemError`); `Ephem.parse` reads the
  form that `str()` writes.
- `astrosubs.format`: `Format`, a reusable number and string format
  (precision, fixed/scientific/general, width, fill, alignment, upper case,
  show point); calling it returns the formatted string.
- `astrosubs.formula_parser`: `parse` an expression into a tree of `Node`s,
  `evaluate` it, `strip_brackets`; errors raise `FormulaError`.
- `astrosubs.formula_simplify`: `prune` and `simplify` expression trees.
- `astrosubs.formula`: `Formula`, which parses and simplifies an expression
  such as `a*(b+c/d)/(e+f)` and offers `value`, `subst`, `check`, `deriv` and
  `list`; `derivative` builds the derivative tree of a `Node`.

Formulae understand `+ - * /`, unary signs, `sqrt`, `sqr`, `cos`, `sin`,
`exp`, `pow`, `ln`, numbers, variables and the constants `ZERO`, `UNIT`,
`MUNIT`, `PI`, `TWOPI`, `VLIGHT` (km/s) and `DAY` (seconds).

## Examples

Minimise a function of one variable:

```python
from astrosubs.minimise import brent

xmin, fmin = brent(0.5, 0.0, 3.0, lambda x: (x - 2.0) ** 2, 1e-8)
```

Work with an ephemeris:

```python
from astrosubs.ephem import Ephem

eph = Ephem.parse("HJD linear 2450000.0 0.0001 0.25 1e-8")
print(eph.phase(2450001.0))
```

Handle a formula and its derivative:

```python
from astrosubs.formula import Formula

f = Formula("sqr(x) + 2*x*y")
print(f.value({"x": 1.0, "y": 3.0}))
print(f.deriv("x"))
```

Dates:

```python
from astrosubs.date import Date

d = Date.from_string("17 Nov 1961")
print(d.day_of_week(), d.str())
```

## What it does not do

This is a library only: there is no command-line program and no plotting.
Dates are whole days; there are no time-of-day, sky-position, star or
telescope types, and ephemerides are not tied to any named object.