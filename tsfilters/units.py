"""Units of measure as conversion factors over the seven SI base dimensions."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from types import MappingProxyType

from .errors import DimensionMismatchError, TsfError

__all__ = [
    "Units",
    "UNIT_STRINGS",
    "convert_value",
    "unit_of_type",
]

_log = logging.getLogger(__name__)


def _c_round(x: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


@dataclass(frozen=True)
class Units:
    """A unit: a factor to SI plus exponents of mass, length, time, current,
    temperature, amount and luminous intensity, and an additive offset."""

    conversion: float = 1.0
    kilogram: int = 0
    meter: int = 0
    second: int = 0
    ampere: int = 0
    kelvin: int = 0
    mole: int = 0
    candela: int = 0
    offset: float = 0.0

    @property
    def _dims(self) -> tuple[int, ...]:
        return (
            self.kilogram,
            self.meter,
            self.second,
            self.ampere,
            self.kelvin,
            self.mole,
            self.candela,
        )

    def __mul__(self, other):
        if isinstance(other, Units):
            if self.is_invalid() or other.is_invalid():
                return NO_UNITS
            dims = (a + b for a, b in zip(self._dims, other._dims))
            return Units(self.conversion * other.conversion, *dims)
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return Units(self.conversion * other, *self._dims, self.offset)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return self.__mul__(other)
        return NotImplemented

    def __truediv__(self, other):
        if not isinstance(other, Units):
            return NotImplemented
        if self.is_invalid() or other.is_invalid():
            return NO_UNITS
        dims = (a - b for a, b in zip(self._dims, other._dims))
        return Units(self.conversion / other.conversion, *dims)

    def __pow__(self, power):
        dims = (_c_round(d * power) for d in self._dims)
        return Units(math.pow(self.conversion, power), *dims)

    def __str__(self):
        if self.is_dimensionless() and self.conversion == 1:
            return "dimensionless"
        if self.is_dimensionless() and self.conversion == 0:
            return "no_units"
        return self.raw_unit_string(True)

    def is_invalid(self) -> bool:
        return self.is_dimensionless() and self.conversion == 0

    def is_same_dimension_as(self, other: Units) -> bool:
        if self.conversion == 0 or other.conversion == 0:
            return False
        return self._dims == other._dims

    def is_dimensionless(self) -> bool:
        return not any(self._dims)

    def to_string(self) -> str:
        """The registered name of these units (or near-identical ones), else the raw form."""
        for name, known in UNIT_STRINGS.items():
            if known == self:
                return name
            if (
                known.is_same_dimension_as(self)
                and abs(known.conversion - self.conversion) / self.conversion < 0.00005
                and self.offset == known.offset
            ):
                return name
        return self.raw_unit_string(True)

    def raw_unit_string(self, ignore_zero_dimensions: bool = True) -> str:
        parts = [format(self.conversion, ".17g")]
        labels = ("kg", "m", "s", "A", "K", "mol", "cd")
        for label, power in zip(labels, self._dims):
            if power != 0 or not ignore_zero_dimensions:
                parts.append(f"*[{label}^{power}]")
        if self.offset != 0 or not ignore_zero_dimensions:
            parts.append(f"+[offset={format(self.offset, 'g')}]")
        return "".join(parts)


NO_UNITS = Units(0)
DIMENSIONLESS = Units(1)
HERTZ = Units(1, 0, 0, -1)
RPM = Units(0.016666666666667, 0, 0, -1)
PERCENT = Units(0.01)
# pressure
PSI = Units(6894.75728, 1, -1, -2)
PASCAL = Units(1, 1, -1, -2)
KILOPASCAL = Units(1000, 1, -1, -2)
BAR = Units(100000, 1, -1, -2)
# distance
FOOT = Units(0.3048, 0, 1, 0)
INCH = Units(0.0254, 0, 1, 0)
METER = Units(1, 0, 1, 0)
CENTIMETER = Units(0.01, 0, 1, 0)
# volume
CUBIC_METER = Units(1, 0, 3, 0)
GALLON = Units(0.00378541, 0, 3, 0)
MILLION_GALLON = Units(3785.41178, 0, 3, 0)
LITER = Units(0.001, 0, 3, 0)
CUBIC_FOOT = Units(0.0283168466, 0, 3, 0)
# flow
CUBIC_METER_PER_SECOND = Units(1, 0, 3, -1)
THOUSAND_CUBIC_METER_PER_DAY = Units(0.0115740741, 0, 3, -1)
CUBIC_FOOT_PER_SECOND = Units(0.0283168466, 0, 3, -1)
GALLON_PER_SECOND = Units(0.00378541178, 0, 3, -1)
GALLON_PER_MINUTE = Units(0.00006309020, 0, 3, -1)
GALLON_PER_DAY = Units(43.812638888e-9, 0, 3, -1)
MILLION_GALLON_PER_DAY = Units(0.0438126364, 0, 3, -1)
LITER_PER_SECOND = Units(0.001, 0, 3, -1)
LITER_PER_MINUTE = Units(0.00001666667, 0, 3, -1)
MILLION_LITER_PER_DAY = Units(0.0115740741, 0, 3, -1)
CUBIC_METER_PER_HOUR = Units(0.000277777778, 0, 3, -1)
CUBIC_METER_PER_DAY = Units(0.000011574074, 0, 3, -1)
ACRE_FOOT_PER_DAY = Units(0.0142764102, 0, 3, -1)
IMPERIAL_MILLION_GALLON_PER_DAY = Units(0.0526168042, 0, 3, -1)
# time
SECOND = Units(1, 0, 0, 1)
MINUTE = Units(60, 0, 0, 1)
HOUR = Units(3600, 0, 0, 1)
DAY = Units(86400, 0, 0, 1)
# mass
MICROGRAM = Units(0.000000001, 1, 0, 0)
MILLIGRAM = Units(0.000001, 1, 0, 0)
GRAM = Units(0.001, 1, 0, 0)
KILOGRAM = Units(1, 1, 0, 0)
# concentration
MICROGRAMS_PER_LITER = Units(0.000001, 1, -3, 0)
MILLIGRAMS_PER_LITER = Units(0.001, 1, -3, 0)
# conductance
MICROSIEMENS_PER_CM = Units(0.0001, -1, -3, 3, 2)
# velocity
METER_PER_SECOND = Units(1, 0, 1, -1)
FOOT_PER_SECOND = Units(0.3048, 0, 1, -1)
FOOT_PER_HOUR = Units(84.6666667e-6, 0, 1, -1)
# acceleration
METER_PER_SECOND_SECOND = Units(1, 0, 1, -2)
FOOT_PER_SECOND_SECOND = Units(0.3048, 0, 1, -2)
FOOT_PER_HOUR_HOUR = Units(25.5185185e-9, 0, 1, -2)
# temperature
DEGREE_KELVIN = Units(1, 0, 0, 0, 0, 1, 0, 0)
DEGREE_RANKINE = Units(5.0 / 9.0, 0, 0, 0, 0, 1, 0, 0)
DEGREE_CELSIUS = Units(1, 0, 0, 0, 0, 1, 0, 0, 273.15)
DEGREE_FARENHEIT = Units(5.0 / 9.0, 0, 0, 0, 0, 1, 0, 0, 459.67)
# power and energy
KILOWATT_HOUR = Units(3600000, 1, 2, -2)
JOULE = Units(1, 1, 2, -2)
MEGAJOULE = Units(1000000, 1, 2, -2)
WATT = Units(1, 1, 2, -3)
KILOWATT = Units(1000, 1, 2, -3)
VOLT = Units(1, 1, 2, -3, -1)
AMP = Units(1, 0, 0, 0, 1)
# energy density
ENERGY_DENSITY = Units(3600000, 1, -1, -2)
ENERGY_DENSITY_MG = Units(951.01983668876, 1, -1, -2)
# area
SQ_FOOT = Units(0.092903, 0, 2)
SQ_METER = Units(1, 0, 2)
SQ_INCH = Units(0.00064516, 0, 2)
SQ_CENTIMETER = Units(0.0001, 0, 2)

_TABLE = {
    "dimensionless": DIMENSIONLESS,
    "Hz": HERTZ,
    "rpm": RPM,
    "psi": PSI,
    "pa": PASCAL,
    "kpa": KILOPASCAL,
    "bar": BAR,
    "ft": FOOT,
    "in": INCH,
    "m": METER,
    "cm": CENTIMETER,
    "m³": CUBIC_METER,
    "gal": GALLON,
    "mgal": MILLION_GALLON,
    "liter": LITER,
    "ft³": CUBIC_FOOT,
    "cms": CUBIC_METER_PER_SECOND,
    "kcmd": THOUSAND_CUBIC_METER_PER_DAY,
    "cfs": CUBIC_FOOT_PER_SECOND,
    "gps": GALLON_PER_SECOND,
    "gpm": GALLON_PER_MINUTE,
    "gpd": GALLON_PER_DAY,
    "mgd": MILLION_GALLON_PER_DAY,
    "lps": LITER_PER_SECOND,
    "lpm": LITER_PER_MINUTE,
    "mld": MILLION_LITER_PER_DAY,
    "m³/hr": CUBIC_METER_PER_HOUR,
    "m³/d": CUBIC_METER_PER_DAY,
    "acre-ft/d": ACRE_FOOT_PER_DAY,
    "imgd": IMPERIAL_MILLION_GALLON_PER_DAY,
    "s": SECOND,
    "min": MINUTE,
    "hr": HOUR,
    "d": DAY,
    "μg": MICROGRAM,
    "mg": MILLIGRAM,
    "g": GRAM,
    "kg": KILOGRAM,
    "mg/L": MILLIGRAMS_PER_LITER,
    "μg/L": MICROGRAMS_PER_LITER,
    "us/cm": MICROSIEMENS_PER_CM,
    "m/s": METER_PER_SECOND,
    "fps": FOOT_PER_SECOND,
    "ft/hr": FOOT_PER_HOUR,
    "m/s²": METER_PER_SECOND_SECOND,
    "ft/s²": FOOT_PER_SECOND_SECOND,
    "ft/hr²": FOOT_PER_HOUR_HOUR,
    "kelvin": DEGREE_KELVIN,
    "rankine": DEGREE_RANKINE,
    "celsius": DEGREE_CELSIUS,
    "farenheit": DEGREE_FARENHEIT,
    "kwh": KILOWATT_HOUR,
    "mj": MEGAJOULE,
    "j": JOULE,
    "kW-H/m³": ENERGY_DENSITY,
    "kW-H/MG": ENERGY_DENSITY_MG,
    "xx-no-units": NO_UNITS,
    "%": PERCENT,
    "ft-per-psi": FOOT * 2.30665873688 / PSI,
    "psi-per-ft": PSI / (FOOT * 2.30665873688),
    "W": WATT,
    "kW": KILOWATT,
    "V": VOLT,
    "A": AMP,
    "ft²": SQ_FOOT,
    "m²": SQ_METER,
    "cm²": SQ_CENTIMETER,
    "in²": SQ_INCH,
}

# Names in code-point order, which is the order lookups by name walk them.
UNIT_STRINGS = MappingProxyType(dict(sorted(_TABLE.items())))

_INT_RE = re.compile(r"[+-]?\d+")

# (long name matched case-insensitively, short symbol matched exactly, field)
_DIMENSION_NAMES = (
    ("kilograms", "kg", "kilogram"),
    ("meters", "m", "meter"),
    ("seconds", "s", "second"),
    ("ampere", "A", "ampere"),
    ("kelvin", "K", "kelvin"),
    ("mole", "mol", "mole"),
    ("candela", "cd", "candela"),
)


def convert_value(value: float, from_units: Units, to_units: Units) -> float:
    """Convert a value between two units of the same dimension."""
    if not from_units.is_same_dimension_as(to_units):
        raise DimensionMismatchError()
    return (
        (value + from_units.offset) * from_units.conversion / to_units.conversion
    ) - to_units.offset


def _parse_number(text: str) -> float | None:
    if not text or any(ch.isspace() or ch == "_" for ch in text):
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _parse_raw(unit_string: str) -> Units:
    components = re.split(r"[*\[\]]+", unit_string)
    conversion = _parse_number(components[0])
    if conversion is None:
        _log.warning("Units not recognized: %s - defaulting to NO UNITS.", unit_string)
        return NO_UNITS

    fields = {}
    offset = 0.0
    for part in components[1:]:
        pieces = re.split(r"[\^=]", part)
        if len(pieces) != 2:
            continue
        dim, value_text = pieces
        if dim.lower() == "offset":
            parsed = _parse_number(value_text)
            if parsed is None:
                raise TsfError(f"Invalid offset in units string: {unit_string}")
            offset = parsed
            continue
        if not _INT_RE.fullmatch(value_text):
            continue
        power = int(value_text)
        for long_name, symbol, field_name in _DIMENSION_NAMES:
            if dim.lower() == long_name or dim == symbol:
                fields[field_name] = power
                break
    return Units(conversion, offset=offset, **fields)


def unit_of_type(unit_string: str) -> Units:
    """Units for a name such as "ft" or "gpm", or for a raw string like "0.3048*[m^1]"."""
    if unit_string == "":
        return NO_UNITS
    found = UNIT_STRINGS.get(unit_string)
    if found is not None:
        return found

    candidate = unit_string.replace("ug", "μg", 1)
    candidate = candidate.replace("3", "³", 1).replace("2", "²", 1)
    found = UNIT_STRINGS.get(candidate)
    if found is not None:
        return found

    lowered = unit_string.lower()
    for name, units in UNIT_STRINGS.items():
        if name.lower() == lowered:
            return units

    return _parse_raw(unit_string)