# stationrules/rules/units.py
from __future__ import annotations

from enum import Enum


class UnitMatch(Enum):
    EXACT = "exact"
    CASE_INSENSITIVE = "case-insensitive"
    UNKNOWN = "unknown"


# Recognized unit names, spelled as in the StationXML unit dictionary.
UNIT_NAMES: frozenset[str] = frozenset({
    # dimensionless / digitizer
    "count", "counts", "1", "%", "percent", "unitless", "dB",
    # displacement, velocity, acceleration
    "m", "cm", "mm", "um", "nm", "km",
    "m/s", "cm/s", "mm/s", "um/s", "nm/s",
    "m/s**2", "cm/s**2", "mm/s**2", "nm/s**2", "g",
    "m/m", "m**3/m**3", "m/s/s",
    # rotation and tilt
    "rad", "mrad", "urad", "nrad", "rad/s", "mrad/s", "urad/s", "nrad/s", "rad/s**2",
    "deg", "degree", "degrees",
    # electrical
    "V", "mV", "uV", "A", "mA", "uA", "W", "mW", "ohm", "S/m", "V/m", "C",
    # magnetic
    "T", "nT", "uT",
    # pressure
    "Pa", "hPa", "kPa", "MPa", "mbar", "bar",
    # temperature
    "K", "degC", "degF",
    # time and frequency
    "s", "ms", "us", "Hz", "1/s",
    # environmental
    "m**3/s", "mm/hour", "W/m**2", "kg/m**3", "g/kg",
})

_FOLDED: dict[str, str] = {name.casefold(): name for name in UNIT_NAMES}


def match_unit(name: str | None) -> UnitMatch:
    """Classify `name` against the unit dictionary."""
    if not name:
        return UnitMatch.UNKNOWN
    if name in UNIT_NAMES:
        return UnitMatch.EXACT
    if name.casefold() in _FOLDED:
        return UnitMatch.CASE_INSENSITIVE
    return UnitMatch.UNKNOWN


def canonical_unit(name: str) -> str | None:
    """Dictionary spelling of `name`, ignoring case; None if unknown."""
    return _FOLDED.get(name.casefold())
