# stationrules/rules/conditions/decimation.py
from __future__ import annotations

from dataclasses import dataclass

from stationrules.core import Channel, Response

from ..messages import Message
from .base import approx_equal
from .stages import ResponseCondition


@dataclass(frozen=True, slots=True, kw_only=True)
class MissingDecimationCondition(ResponseCondition):
    """A response must contain at least one decimation."""

    def _check_response(self, channel: Channel, response: Response) -> list[Message]:
        if response.decimating_stages():
            return []
        return [self.violation(f"{channel.channel_id}: no stage carries a decimation")]


@dataclass(frozen=True, slots=True, kw_only=True)
class DecimationSampleRateCondition(ResponseCondition):
    """Last stage: input sample rate / factor must equal the channel sample rate."""

    def _check_response(self, channel: Channel, response: Response) -> list[Message]:
        cid = channel.channel_id
        last = response.last_stage
        if last is None:
            return [self.violation(f"{cid}: response has no stages")]
        decimation = last.decimation
        if decimation is None:
            return [self.violation(f"{cid}: last stage {last.number} has no decimation")]
        output_rate = decimation.output_sample_rate
        if output_rate is None:
            return [self.violation(f"{cid}: last stage {last.number} decimation factor {decimation.factor} is not > 0")]
        if channel.sample_rate is None:
            return [self.violation(f"{cid}: channel sample rate is missing")]
        if not approx_equal(output_rate, channel.sample_rate):
            return [
                self.violation(
                    f"{cid}: last stage {last.number} decimates {decimation.input_sample_rate:g}/{decimation.factor} "
                    f"= {output_rate:g} sps, channel sample rate is {channel.sample_rate:g} sps"
                )
            ]
        return []


@dataclass(frozen=True, slots=True, kw_only=True)
class DecimationCondition(ResponseCondition):
    """
    Each decimating stage N must take as input the output rate of the
    previous decimating stage M (M.input_sample_rate / M.factor).
    """

    def _check_response(self, channel: Channel, response: Response) -> list[Message]:
        findings: list[Message] = []
        previous = None
        for stage in response.decimating_stages():
            if previous is not None:
                expected = previous.decimation.output_sample_rate
                found = stage.decimation.input_sample_rate
                if expected is None or not approx_equal(found, expected):
                    shown = "undefined" if expected is None else f"{expected:g}"
                    findings.append(
                        self.violation(
                            f"{channel.channel_id} stage {stage.number} input sample rate {found:g} "
                            f"!= stage {previous.number} output rate {shown}"
                        )
                    )
            previous = stage
        return findings
