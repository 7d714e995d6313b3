"""Distance units and their kilometer conversion factors."""

from enum import Enum

from .errors import UnknownUnitError


class DistanceUnit(Enum):
    """Linear units a ruler can measure in.

    Each value is the number of units in one kilometer.
    """

    KILOMETERS = 1.0
    MILES = 1000.0 / 1609.344
    NAUTICAL_MILES = 1000.0 / 1852.0
    METERS = 1000.0
    YARDS = 1000.0 / 0.9144
    FEET = 1000.0 / 0.3048
    INCHES = 1000.0 / 0.0254

    @property
    def conversion_factor(self) -> float:
        return self.value


# Short names accepted alongside the member names.
ALIASES: dict[str, DistanceUnit] = {
    "km":            DistanceUnit.KILOMETERS,
    "kilometer":     DistanceUnit.KILOMETERS,
    "mi":            DistanceUnit.MILES,
    "mile":          DistanceUnit.MILES,
    "nmi":           DistanceUnit.NAUTICAL_MILES,
    "nautical_mile": DistanceUnit.NAUTICAL_MILES,
    "m":             DistanceUnit.METERS,
    "meter":         DistanceUnit.METERS,
    "yd":            DistanceUnit.YARDS,
    "yard":          DistanceUnit.YARDS,
    "ft":            DistanceUnit.FEET,
    "foot":          DistanceUnit.FEET,
    "in":            DistanceUnit.INCHES,
    "inch":          DistanceUnit.INCHES,
}


def get_unit(unit: DistanceUnit | str) -> DistanceUnit:
    """Resolve a DistanceUnit from a member or a case-insensitive name."""
    if isinstance(unit, DistanceUnit):
        return unit
    if not isinstance(unit, str):
        raise UnknownUnitError(unit)

    key = unit.strip().lower().replace(" ", "_").replace("-", "_")
    try:
        return DistanceUnit[key.upper()]
    except KeyError:
        pass
    if key in ALIASES:
        return ALIASES[key]
    raise UnknownUnitError(unit)
