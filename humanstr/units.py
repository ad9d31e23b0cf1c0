#
# Humanstr Units of Measurement
#

# Standard library -----------------------------------------------------------------------------------------------------
import warnings
from collections.abc import Iterable
from dataclasses import dataclass

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import fmt_type


# @formatter:off

class UnitsConf:
    THRESHOLD = 1000
    BASE_PRECISION = 0
    SCALED_PRECISION = 2


# @formatter:on

# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class Unit:
    """
    A scale factor and the label rendered after a value in that scale.

    The factor is applied multiplicatively to a raw value to obtain its
    representation in this unit, e.g. 1e-3 for " thousand" renders 1500 as 1.50.
    The name is appended verbatim, including any leading space.
    """

    factor: float
    name: str = ""

    def __post_init__(self):
        if isinstance(self.factor, bool) or not isinstance(self.factor, (int, float)):
            raise TypeError(f"Unit factor must be int | float, got {fmt_type(self.factor)}")
        if not isinstance(self.name, str):
            raise TypeError(f"Unit name must be str, got {fmt_type(self.name)}")
        object.__setattr__(self, 'factor', float(self.factor))

    @property
    def is_base(self) -> bool:
        """True for the base unit, factor of exactly 1."""
        return self.factor == 1

    @property
    def precision(self) -> int:
        """Decimal digits used to render a value in this unit."""
        return UnitsConf.BASE_PRECISION if self.is_base else UnitsConf.SCALED_PRECISION


# Unit tables are ordered by ascending scale, most granular unit first.

# @formatter:off
CARDINAL_UNITS = (
    Unit(1, ""), Unit(1e-3, " thousand"), Unit(1e-6, " million"),
    Unit(1e-9, " billion"), Unit(1e-12, " trillion"),
)

SIZE_UNITS = (
    Unit(1, " byte"), Unit(1e-3, " kilobyte"), Unit(1e-6, " megabyte"),
    Unit(1e-9, " gigabyte"), Unit(1e-12, " terabyte"),
)

RATE_UNITS = (
    Unit(1, " byte/s"), Unit(1e-3, " kilobyte/s"), Unit(1e-6, " megabyte/s"),
    Unit(1e-9, " gigabyte/s"), Unit(1e-12, " terabyte/s"),
)

PERCENT_UNITS = (
    Unit(100, "%"),
)
# @formatter:on


# Methods --------------------------------------------------------------------------------------------------------------

def as_units(units: Iterable[Unit | tuple[float, str]]) -> tuple[Unit, ...]:
    """
    Normalize a unit table given as Unit items or (factor, name) pairs.

    A table whose scale does not grow strictly from first to last unit is
    still returned, but a RuntimeWarning is issued since unit selection
    relies on that order.

    Raises:
        TypeError: If an item is neither a Unit nor a (factor, name) pair.
        ValueError: If the table is empty.

    Examples:
        >>> as_units([(1, " op/s"), (1e-3, " kop/s")])
        (Unit(factor=1.0, name=' op/s'), Unit(factor=0.001, name=' kop/s'))
    """
    table = []
    for item in units:
        if isinstance(item, Unit):
            table.append(item)
        elif isinstance(item, tuple) and len(item) == 2:
            table.append(Unit(*item))
        else:
            raise TypeError(f"Unit or (factor, name) pair required, got {fmt_type(item)}")

    if not table:
        raise ValueError("unit table must not be empty")

    if not is_ascending(table):
        warnings.warn(
            f"Unit table is not ordered by ascending scale: {[u.factor for u in table]}",
            RuntimeWarning,
            stacklevel=3
        )
    return tuple(table)


def is_ascending(units: tuple[Unit, ...] | list[Unit]) -> bool:
    """True if every unit has a smaller factor (larger scale) than the one before it."""
    return all(a.factor > b.factor for a, b in zip(units, units[1:]))


def select_unit(value: float, units: tuple[Unit, ...]) -> Unit:
    """
    Return the first unit in which value scales below the threshold, or the last unit.

    Negative values always select the first unit, since factor * value is then
    below the threshold for every positive factor. NaN and +inf never
    satisfy the threshold and select the last unit.
    """
    for unit in units:
        if unit.factor * value < UnitsConf.THRESHOLD:
            return unit
    return units[-1]


# Module Sanity Checks -------------------------------------------------------------------------------------------------

for _table in (CARDINAL_UNITS, SIZE_UNITS, RATE_UNITS, PERCENT_UNITS):
    if not is_ascending(_table) or (len(_table) > 1 and not _table[0].is_base):
        raise AssertionError(
            "Configuration Error: unit tables must start at the base unit and grow in scale."
        )
del _table
