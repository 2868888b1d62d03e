# stationrules/rules/catalog.py
"""
The default rule catalog.

Ids are a single flat namespace grouped by level:
100s network, 200s station, 300s channel, 400s response.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from .conditions import (
    CalibrationUnitCondition,
    CodeCondition,
    Condition,
    DecimationCondition,
    DecimationSampleRateCondition,
    DigitalFilterCondition,
    DistanceCondition,
    EastOrientationCondition,
    EmptySensitivityCondition,
    EpochOverlapCondition,
    EpochRangeCondition,
    FrequencyCondition,
    LocationCodeCondition,
    MissingDecimationCondition,
    NorthOrientationCondition,
    PolesZerosCondition,
    PolynomialCondition,
    ResponseListCondition,
    SampleRateCondition,
    SensorCondition,
    StageGainNonZeroCondition,
    StageGainProductCondition,
    StageSequenceCondition,
    StageUnitCondition,
    StartTimeCondition,
    StationElevationCondition,
    UnitCondition,
    VerticalOrientationCondition,
)
from .restrictions import (
    CHANNEL_RESTRICTIONS,
    RESPONSE_RESTRICTIONS,
    OrientationRestriction,
)
from .rule import Level


NETWORK_CODE = r"[A-Z0-9_\*\?]{1,2}"
STATION_CODE = r"[A-Z0-9_\*\?]{1,5}"
CHANNEL_CODE = r"[A-Z0-9_\*\?]{3}"
LOCATION_CODE = r"([A-Z0-9\*\ ]{0,2})?"


@dataclass(frozen=True, slots=True)
class RuleSpec:
    id: int
    level: Level
    condition: Condition


def _network_rules() -> list[RuleSpec]:
    return [
        RuleSpec(101, Level.NETWORK, CodeCondition(
            pattern=NETWORK_CODE,
            description="Network:Code must be assigned a string consisting of 1-2 uppercase A-Z and numeric 0-9 characters.",
        )),
        RuleSpec(110, Level.NETWORK, StartTimeCondition(
            required=False,
            description="If Network:startDate is included then it must occur before Network:endDate if included.",
        )),
        RuleSpec(111, Level.NETWORK, EpochOverlapCondition(
            description="Station:Epoch cannot be partly concurrent with any other Station:Epoch encompassed in parent Network:Epoch.",
        )),
        RuleSpec(112, Level.NETWORK, EpochRangeCondition(
            description="Network:Epoch must encompass all subordinate Station:Epoch",
        )),
    ]


def _station_rules() -> list[RuleSpec]:
    return [
        RuleSpec(201, Level.STATION, CodeCondition(
            pattern=STATION_CODE,
            description="Station:Code must be assigned a string consisting of 1-5 uppercase A-Z and numeric 0-9 characters.",
        )),
        RuleSpec(210, Level.STATION, StartTimeCondition(
            description="Station:startDate must be included and must occur before Station:endDate if included.",
        )),
        RuleSpec(211, Level.STATION, EpochOverlapCondition(
            description="Channel:Epoch cannot be partly concurrent with any other Channel:Epoch encompassed in parent Station:Epoch.",
        )),
        RuleSpec(212, Level.STATION, EpochRangeCondition(
            description="Station:Epoch must encompass all subordinate Channel:Epoch",
        )),
        RuleSpec(222, Level.STATION, DistanceCondition(
            max_km=1.0,
            description="Station:Position must be within 1 km of all subordinate Channel:Position.",
        )),
        RuleSpec(223, Level.STATION, StationElevationCondition(
            max_m=1000.0,
            description="Station:Elevation must be within 1 km of all subordinate Channel:Elevation.",
        )),
    ]


def _channel_rules() -> list[RuleSpec]:
    return [
        RuleSpec(301, Level.CHANNEL, CodeCondition(
            pattern=CHANNEL_CODE,
            description="Channel:Code must be assigned a string consisting of 3 uppercase A-Z and numeric 0-9 characters.",
        )),
        RuleSpec(302, Level.CHANNEL, LocationCodeCondition(
            pattern=LOCATION_CODE,
            description="Channel:locationCode must be assigned a string consisting of 0-2 uppercase A-Z and numeric 0-9 characters OR 2 whitespace characters OR --.",
        )),
        RuleSpec(303, Level.CHANNEL, CalibrationUnitCondition(
            strict=False,
            description="If CalibrationUnits are included then CalibrationUnits:Name must be assigned a value from the IRIS StationXML Unit dictionary, case inconsistencies trigger warnings.",
        )),
        RuleSpec(304, Level.CHANNEL, SensorCondition(
            description="Channel:Sensor:Description must be included and assigned a string consisting of 1 <= case insensitive A-Z and numeric 0-9 characters.",
        )),
        RuleSpec(305, Level.CHANNEL, SampleRateCondition(
            strict=False,
            restrictions=CHANNEL_RESTRICTIONS,
            description="If Channel:SampleRate equals 0 or is not included then Response must not be included.",
        )),
        RuleSpec(310, Level.CHANNEL, StartTimeCondition(
            description="Channel:startDate must be included and must occur before Channel:endDate if included.",
        )),
        RuleSpec(332, Level.CHANNEL, NorthOrientationCondition(
            restrictions=(OrientationRestriction("N"),) + CHANNEL_RESTRICTIONS,
            description="If Channel:Code[LAST]==N then Channel:Azimuth must be assigned (>=355.0 or <=5.0) or (>=175.0 and <=185.0) and Channel:Dip must be assigned (>=-5 AND <=5.0).",
        )),
        RuleSpec(333, Level.CHANNEL, EastOrientationCondition(
            restrictions=(OrientationRestriction("E"),) + CHANNEL_RESTRICTIONS,
            description="If Channel:Code[LAST]==E then Channel:Azimuth must be assigned (>=85.0 and <=95.0) or (>=265.0 and <=275.0) and Channel:Dip must be assigned (>=-5 and <=5.0).",
        )),
        RuleSpec(334, Level.CHANNEL, VerticalOrientationCondition(
            restrictions=(OrientationRestriction("Z"),) + CHANNEL_RESTRICTIONS,
            description="If Channel:Code[LAST]==Z then Channel:Azimuth must be assigned (>=355.0 or <=5.0) and Channel:Dip must be assigned (>=-90.0 and <=-85.0) or (>=85.0 and <=90.0).",
        )),
    ]


def _response_rules() -> list[RuleSpec]:
    return [
        RuleSpec(401, Level.RESPONSE, StageSequenceCondition(
            restrictions=CHANNEL_RESTRICTIONS,
            description="Stage:number must start at 1 and be sequential.",
        )),
        RuleSpec(402, Level.RESPONSE, UnitCondition(
            restrictions=CHANNEL_RESTRICTIONS,
            description="Stage[N]:InputUnits:Name and Stage[N]:OutputUnits:Name must be assigned a value from the IRIS StationXML Unit dictionary, case inconsistencies trigger warnings.",
        )),
        RuleSpec(403, Level.RESPONSE, StageUnitCondition(
            restrictions=CHANNEL_RESTRICTIONS,
            description="If length(Stage) > 1 then Stage[N]:InputUnits:Name must equal the previously assigned Stage[M]:OutputUnits:Name.",
        )),
        RuleSpec(404, Level.RESPONSE, DigitalFilterCondition(
            restrictions=CHANNEL_RESTRICTIONS,
            description="If Stage[N]:PolesZeros:PzTransferFunctionType:Digital or Stage[N]:FIR or Stage[N]:Coefficients:CfTransferFunctionType:DIGITAL are included then Stage[N] must include Stage[N]:Decimation and Stage[N]:StageGain elements.",
        )),
        RuleSpec(405, Level.RESPONSE, ResponseListCondition(
            restrictions=CHANNEL_RESTRICTIONS,
            description="Stage:ResponseList cannot be the only stage included in a response.",
        )),
        RuleSpec(410, Level.RESPONSE, EmptySensitivityCondition(
            restrictions=RESPONSE_RESTRICTIONS,
            description="If InstrumentSensitivity is included then InstrumentSensitivity:Value must be assigned a double > 0.0 ",
        )),
        RuleSpec(411, Level.RESPONSE, FrequencyCondition(
            restrictions=RESPONSE_RESTRICTIONS,
            description="If InstrumentSensitivity is included then InstrumentSensitivity:Frequency must be less than Channel:SampleRate/2 [Nyquist Frequency]. ",
        )),
        RuleSpec(412, Level.RESPONSE, StageGainProductCondition(
            restrictions=RESPONSE_RESTRICTIONS,
            description="InstrumentSensitivity:Value must equal the product of all StageGain:Value if all StageGain:Frequency are equal to InstrumentSensitivity:Frequency [Normalization Frequency].",
        )),
        RuleSpec(413, Level.RESPONSE, StageGainNonZeroCondition(
            restrictions=RESPONSE_RESTRICTIONS,
            description="Stage[1:N]:StageGain must be included and Stage[1:N]:StageGain:Value must be assigned a double > 0.0 and Stage[1:N]:StageGain:Frequency must be assigned a double.",
        )),
        RuleSpec(414, Level.RESPONSE, PolesZerosCondition(
            strict=False,
            restrictions=RESPONSE_RESTRICTIONS,
            description="If Stage[N]:PolesZeros contains Zero:Real==0 and Zero:Imaginary==0 then InstrumentSensitivity:Frequency cannot equal 0 and Stage[N]:StageGain:Frequency cannot equal 0.",
        )),
        RuleSpec(415, Level.RESPONSE, PolynomialCondition(
            strict=False,
            restrictions=CHANNEL_RESTRICTIONS,
            description="Response must be of type Response:InstrumentPolynomial if a Polynomial stage exist.",
        )),
        RuleSpec(420, Level.RESPONSE, MissingDecimationCondition(
            restrictions=RESPONSE_RESTRICTIONS,
            description="A Response must contain at least one instance of Response:Stage:Decimation.",
        )),
        RuleSpec(421, Level.RESPONSE, DecimationSampleRateCondition(
            restrictions=RESPONSE_RESTRICTIONS,
            description="Stage[LAST]:Decimation:InputSampleRate divided by Stage[LAST]:Decimation:Factor must equal Channel:SampleRate.",
        )),
        RuleSpec(422, Level.RESPONSE, DecimationCondition(
            restrictions=RESPONSE_RESTRICTIONS,
            description="Stage[N]:Decimation:InputSampleRate must equal the previously assigned Stage[M]:Decimation:InputSampleRate divided by Stage[M]:Decimation:Factor.",
        )),
    ]


def default_catalog() -> dict[int, RuleSpec]:
    """Fresh mapping of every default rule id to its spec, in level order."""
    specs = _network_rules() + _station_rules() + _channel_rules() + _response_rules()
    return {spec.id: spec for spec in specs}


def filter_catalog(catalog: Mapping[int, RuleSpec], ignore: Iterable[int] = ()) -> dict[int, RuleSpec]:
    """Drop the suppressed ids; order of the remaining specs is preserved."""
    suppressed = set(ignore)
    return {rule_id: spec for rule_id, spec in catalog.items() if rule_id not in suppressed}
