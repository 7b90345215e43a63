# tsfilters

Building blocks for processing measured time series:

- **Units of measure** (`tsfilters.units`) with dimensional analysis over
  mass, length, time, current, temperature, amount and luminous intensity,
  conversion factors and offsets, so that values can be converted between
  compatible units.
- **Where clauses** (`tsfilters.where`) that accept or reject values by
  comparison with reference bounds.
- **LOWESS smoothing** (`tsfilters.lowess`): locally weighted scatterplot
  smoothing with robustness iterations.
- **Errors** (`tsfilters.errors`): the exception classes of the package.

The package has no runtime dependencies.

## Installation

```
pip install tsfilters
```

## Units

```python
from tsfilters.units import unit_of_type, convert_value

gpm = unit_of_type("gpm")
mgd = unit_of_type("mgd")

convert_value(1000.0, gpm, mgd)          # gallons per minute -> million gallons per day
convert_value(100.0, unit_of_type("celsius"), unit_of_type("farenheit"))

velocity = unit_of_type("ft") / unit_of_type("s")
velocity.is_same_dimension_as(unit_of_type("m/s"))   # True
velocity.to_string()                                 # "fps"
```

`Units` is an immutable dataclass with the fields `conversion` (factor to
SI), `kilogram`, `meter`, `second`, `ampere`, `kelvin`, `mole`, `candela`
(exponents) and `offset`. Units combine with `*` and `/`, may be scaled by a
number with `*`, and are raised to a power with `**`. Other methods:
`is_invalid()`, `is_dimensionless()`, `is_same_dimension_as(other)`,
`to_string()` and `raw_unit_string(ignore_zero_dimensions=True)`.
`str(units)` gives `"dimensionless"`, `"no_units"` or the raw form.

The module also defines named constants such as `FOOT`, `PSI`,
`GALLON_PER_MINUTE`, `DEGREE_CELSIUS` and `NO_UNITS`, and `UNIT_STRINGS`, a
read-only mapping from each recognised name to its units.

`unit_of_type` recognises those names (`"psi"`, `"m³"`, `"gpd"`, `"mg/L"`,
`"kW"` and more). It also accepts ASCII spellings such as `"m3"` or
`"ug/L"`, names in any case, and the raw form produced by
`Units.raw_unit_string()`, such as `"0.3048*[m^1]"`. An empty string gives
`NO_UNITS`; a string that cannot be read logs a warning and also gives
`NO_UNITS`.

`convert_value` raises `tsfilters.errors.DimensionMismatchError` when the
two units are not of the same dimension.

## Where clauses

```python
from tsfilters.where import Comparison, WhereClause

clause = WhereClause({Comparison.GTE: 0.0, Comparison.LTE: 1500.0})
clause.filter(12.5)     # True
clause.filter(-1.0)     # False
```

`Comparison` has the members `GT`, `GTE`, `LT` and `LTE`;
`Comparison.admits(value, reference)` tests a single comparison. A clause
with no comparisons accepts every value.

## LOWESS

```python
from tsfilters.lowess import lowess

x = [0.0, 1.0, 2.0, 3.0, 4.0, 5.0]
y = [1.0, 2.1, 2.9, 4.2, 5.0, 5.8]
result = lowess(x, y, frac=0.5, nsteps=2, delta=0.0)
result.fitted               # smoothed y values
result.residuals            # y - fitted
result.robustness_weights   # weights from the last robustness iteration
```

`x` must be sorted in ascending order. `frac` is the share of points used for
each local regression (at least two points are used), `nsteps` the number of
robustness iterations (default 2), and `delta` the distance within which fits
are interpolated rather than computed (default 0.0). `lowess` raises
`ValueError` when `x` and `y` differ in length, when they are empty, or when
`nsteps` is negative.

## Errors

`tsfilters.errors` defines `TsfError` and its subclasses `TsfIoError`,
`MethodNotValidError`, `IncompatibleComponentError` and
`DimensionMismatchError`. Within the package, `convert_value` raises
`DimensionMismatchError`, and `unit_of_type` raises `TsfError` for a raw
unit string whose offset is not a number.

## What this package does not do

It holds no time series, stores no points, reads from no database, and has
no chain of filters or resampling clocks; it offers the units, value
predicates and smoothing that such a system would be built on. It has no
command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```