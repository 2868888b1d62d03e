# stationrules/rules/conditions/stages.py
"""
Response-level conditions over the ordered stage chain.

Response conditions receive the owning Channel (they need its code and
sample rate) and read ``channel.response``; a channel without a response
yields no message.
"""
from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass

from stationrules.core import Channel, FilterKind, Response

from ..messages import Message
from ..units import UnitMatch, canonical_unit, match_unit
from .base import Condition


@dataclass(frozen=True, slots=True, kw_only=True)
class ResponseCondition(Condition):

    def evaluate(self, target: object) -> list[Message]:
        if not isinstance(target, Channel) or target.response is None:
            return []
        return Condition.evaluate(self, target)

    def _check(self, target: Channel) -> list[Message]:
        return self._check_response(target, target.response)

    @abstractmethod
    def _check_response(self, channel: Channel, response: Response) -> list[Message]:
        ...


@dataclass(frozen=True, slots=True, kw_only=True)
class StageSequenceCondition(ResponseCondition):
    """Stage numbers, in list order, must read 1, 2, ..., N."""

    def _check_response(self, channel: Channel, response: Response) -> list[Message]:
        for expected, stage in enumerate(response.stages, start=1):
            if stage.number != expected:
                return [
                    self.violation(
                        f"{channel.channel_id}: expected stage {expected} but found {stage.number}"
                    )
                ]
        return []


@dataclass(frozen=True, slots=True, kw_only=True)
class UnitCondition(ResponseCondition):
    """Stage input/output units must come from the unit dictionary."""

    def _check_response(self, channel: Channel, response: Response) -> list[Message]:
        findings: list[Message] = []
        for stage in response.stages:
            for side, units in (("input", stage.input_units), ("output", stage.output_units)):
                where = f"{channel.channel_id} stage {stage.number} {side} units"
                match = match_unit(units)
                if match is UnitMatch.EXACT:
                    continue
                if match is UnitMatch.CASE_INSENSITIVE:
                    findings.append(self.warning(f"{where} '{units}' should be written '{canonical_unit(units)}'"))
                elif units is None:
                    findings.append(self.violation(f"{where} are missing"))
                else:
                    findings.append(self.violation(f"{where} '{units}' are not recognized"))
        return findings


@dataclass(frozen=True, slots=True, kw_only=True)
class StageUnitCondition(ResponseCondition):
    """Each stage's input units must equal the previous stage's output units."""

    def _check_response(self, channel: Channel, response: Response) -> list[Message]:
        findings: list[Message] = []
        stages = response.stages
        for prev, stage in zip(stages, stages[1:]):
            expected, found = prev.output_units, stage.input_units
            if expected == found and found is not None:
                continue
            where = f"{channel.channel_id} stage {stage.number}"
            if expected is not None and found is not None and expected.casefold() == found.casefold():
                findings.append(
                    self.warning(f"{where} input units '{found}' differ in case from stage {prev.number} output units '{expected}'")
                )
            else:
                findings.append(
                    self.violation(f"{where} input units '{found}' do not match stage {prev.number} output units '{expected}'")
                )
        return findings


@dataclass(frozen=True, slots=True, kw_only=True)
class DigitalFilterCondition(ResponseCondition):
    """Digital stages must carry both a decimation and a stage gain."""

    def _check_response(self, channel: Channel, response: Response) -> list[Message]:
        findings: list[Message] = []
        for stage in response.stages:
            if not stage.is_digital:
                continue
            missing = [
                name
                for name, part in (("decimation", stage.decimation), ("stage gain", stage.stage_gain))
                if part is None
            ]
            if missing:
                findings.append(
                    self.violation(
                        f"{channel.channel_id} stage {stage.number} is digital but has no {' or '.join(missing)}"
                    )
                )
        return findings


@dataclass(frozen=True, slots=True, kw_only=True)
class ResponseListCondition(ResponseCondition):
    """A response cannot consist of ResponseList stages only."""

    def _check_response(self, channel: Channel, response: Response) -> list[Message]:
        if response.stages and all(st.filter_kind is FilterKind.RESPONSE_LIST for st in response.stages):
            return [self.violation(f"{channel.channel_id}: response only contains ResponseList stages")]
        return []
