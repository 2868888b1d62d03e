# stationrules/rules/conditions/channel.py
from __future__ import annotations

import re
from dataclasses import dataclass

from stationrules.core import Channel

from ..messages import Message
from ..units import UnitMatch, canonical_unit, match_unit
from .base import Condition


_ALNUM = re.compile(r"[A-Za-z0-9]")


@dataclass(frozen=True, slots=True, kw_only=True)
class SensorCondition(Condition):
    """Sensor description must be present and contain a letter or digit."""

    def _check(self, target: Channel) -> list[Message]:
        description = target.sensor_description
        if description is None:
            return [self.violation(f"{target.channel_id}: sensor description is missing")]
        if _ALNUM.search(description) is None:
            return [self.violation(f"{target.channel_id}: sensor description '{description}' is empty")]
        return []


@dataclass(frozen=True, slots=True, kw_only=True)
class CalibrationUnitCondition(Condition):
    """Calibration units, when given, must come from the unit dictionary."""

    def _check(self, target: Channel) -> list[Message]:
        units = target.calibration_units
        if units is None:
            return []
        match = match_unit(units)
        if match is UnitMatch.EXACT:
            return []
        if match is UnitMatch.CASE_INSENSITIVE:
            return [
                self.warning(
                    f"{target.channel_id}: calibration units '{units}' should be written '{canonical_unit(units)}'"
                )
            ]
        return [self.violation(f"{target.channel_id}: calibration units '{units}' are not recognized")]


@dataclass(frozen=True, slots=True, kw_only=True)
class SampleRateCondition(Condition):
    """A channel without a usable sample rate must not carry a response."""

    def _check(self, target: Channel) -> list[Message]:
        if target.sample_rate:
            return []
        if target.response is None:
            return []
        rate = "missing" if target.sample_rate is None else "0"
        return [self.violation(f"{target.channel_id}: sample rate is {rate} but a response is included")]
