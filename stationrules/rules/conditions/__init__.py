# stationrules/rules/conditions/__init__.py
from .base import Condition, RELATIVE_TOLERANCE, ABSOLUTE_TOLERANCE, approx_equal
from .code import CodeCondition, LocationCodeCondition
from .channel import SensorCondition, CalibrationUnitCondition, SampleRateCondition
from .epoch import StartTimeCondition, EpochOverlapCondition, EpochRangeCondition
from .geometry import DistanceCondition, StationElevationCondition, haversine_km
from .orientation import (
    OrientationCondition,
    NorthOrientationCondition,
    EastOrientationCondition,
    VerticalOrientationCondition,
    normalize_azimuth,
)
from .stages import (
    ResponseCondition,
    StageSequenceCondition,
    UnitCondition,
    StageUnitCondition,
    DigitalFilterCondition,
    ResponseListCondition,
)
from .sensitivity import (
    EmptySensitivityCondition,
    FrequencyCondition,
    StageGainProductCondition,
    StageGainNonZeroCondition,
    PolesZerosCondition,
    PolynomialCondition,
)
from .decimation import (
    MissingDecimationCondition,
    DecimationSampleRateCondition,
    DecimationCondition,
)


__all__ = [
    # framework
    "Condition",
    "ResponseCondition",
    "RELATIVE_TOLERANCE",
    "ABSOLUTE_TOLERANCE",
    "approx_equal",

    # codes and scalars
    "CodeCondition",
    "LocationCodeCondition",
    "SensorCondition",
    "CalibrationUnitCondition",
    "SampleRateCondition",

    # epochs
    "StartTimeCondition",
    "EpochOverlapCondition",
    "EpochRangeCondition",

    # geometry
    "DistanceCondition",
    "StationElevationCondition",
    "haversine_km",
    "OrientationCondition",
    "NorthOrientationCondition",
    "EastOrientationCondition",
    "VerticalOrientationCondition",
    "normalize_azimuth",

    # response stage chain
    "StageSequenceCondition",
    "UnitCondition",
    "StageUnitCondition",
    "DigitalFilterCondition",
    "ResponseListCondition",
    "EmptySensitivityCondition",
    "FrequencyCondition",
    "StageGainProductCondition",
    "StageGainNonZeroCondition",
    "PolesZerosCondition",
    "PolynomialCondition",
    "MissingDecimationCondition",
    "DecimationSampleRateCondition",
    "DecimationCondition",
]
