# stationrules/rules/conditions/sensitivity.py
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from stationrules.core import Channel, FilterKind, Response

from ..messages import Message
from .base import approx_equal
from .stages import ResponseCondition


@dataclass(frozen=True, slots=True, kw_only=True)
class EmptySensitivityCondition(ResponseCondition):
    """If present, the instrument sensitivity value must be > 0."""

    def _check_response(self, channel: Channel, response: Response) -> list[Message]:
        sensitivity = response.instrument_sensitivity
        if sensitivity is None:
            return []
        if sensitivity.value is None:
            return [self.violation(f"{channel.channel_id}: sensitivity value is missing")]
        if sensitivity.value <= 0.0:
            return [self.violation(f"{channel.channel_id}: sensitivity value {sensitivity.value:g} is not > 0")]
        return []


@dataclass(frozen=True, slots=True, kw_only=True)
class FrequencyCondition(ResponseCondition):
    """If present, the sensitivity frequency must be below Nyquist (sample rate / 2)."""

    def _check_response(self, channel: Channel, response: Response) -> list[Message]:
        sensitivity = response.instrument_sensitivity
        if sensitivity is None:
            return []
        cid = channel.channel_id
        if sensitivity.frequency is None:
            return [self.violation(f"{cid}: sensitivity frequency is missing")]
        if not channel.sample_rate:
            return [self.violation(f"{cid}: Nyquist frequency is undefined without a sample rate")]
        nyquist = channel.sample_rate / 2.0
        if sensitivity.frequency >= nyquist:
            return [
                self.violation(
                    f"{cid}: sensitivity frequency {sensitivity.frequency:g} Hz is not below Nyquist {nyquist:g} Hz"
                )
            ]
        return []


@dataclass(frozen=True, slots=True, kw_only=True)
class StageGainProductCondition(ResponseCondition):
    """
    Sensitivity value must equal the product of all stage gains when every
    stage gain is stated at the sensitivity (normalization) frequency.

    The check only applies when every stage carries a gain with a frequency;
    otherwise there is no product to compare and the response passes.
    """

    def _check_response(self, channel: Channel, response: Response) -> list[Message]:
        sensitivity = response.instrument_sensitivity
        if sensitivity is None or sensitivity.value is None or sensitivity.frequency is None:
            return []
        gains = [st.stage_gain for st in response.stages]
        if not gains or any(g is None or g.value is None or g.frequency is None for g in gains):
            return []
        if not all(approx_equal(g.frequency, sensitivity.frequency) for g in gains):
            return []

        product = float(np.prod([g.value for g in gains]))
        if not approx_equal(product, sensitivity.value):
            return [
                self.violation(
                    f"{channel.channel_id}: sensitivity {sensitivity.value:g} != product of stage gains {product:g}"
                )
            ]
        return []


@dataclass(frozen=True, slots=True, kw_only=True)
class StageGainNonZeroCondition(ResponseCondition):
    """Every stage needs a gain with a value > 0 and a frequency."""

    def _check_response(self, channel: Channel, response: Response) -> list[Message]:
        findings: list[Message] = []
        for stage in response.stages:
            where = f"{channel.channel_id} stage {stage.number}"
            gain = stage.stage_gain
            if gain is None:
                findings.append(self.violation(f"{where} has no stage gain"))
                continue
            if gain.value is None or gain.value <= 0.0:
                value = "missing" if gain.value is None else f"{gain.value:g}"
                findings.append(self.violation(f"{where} gain value {value} is not > 0"))
            if gain.frequency is None:
                findings.append(self.violation(f"{where} gain frequency is missing"))
        return findings


@dataclass(frozen=True, slots=True, kw_only=True)
class PolesZerosCondition(ResponseCondition):
    """
    With a zero at the origin, neither the sensitivity frequency nor that
    stage's gain frequency may be 0.
    """

    def _check_response(self, channel: Channel, response: Response) -> list[Message]:
        findings: list[Message] = []
        sensitivity = response.instrument_sensitivity
        for stage in response.stages:
            pz = stage.poles_zeros
            if stage.filter_kind is not FilterKind.POLES_ZEROS or pz is None or not pz.has_zero_at_origin:
                continue
            where = f"{channel.channel_id} stage {stage.number}"
            if sensitivity is not None and sensitivity.frequency == 0.0:
                findings.append(self.violation(f"{where} has a zero at the origin but sensitivity frequency is 0"))
            if stage.stage_gain is not None and stage.stage_gain.frequency == 0.0:
                findings.append(self.violation(f"{where} has a zero at the origin but its gain frequency is 0"))
        return findings


@dataclass(frozen=True, slots=True, kw_only=True)
class PolynomialCondition(ResponseCondition):
    """A response with a Polynomial stage must be declared InstrumentPolynomial."""

    def _check_response(self, channel: Channel, response: Response) -> list[Message]:
        if response.has_polynomial_stage and not response.is_polynomial:
            return [
                self.violation(f"{channel.channel_id}: polynomial stage in a response not declared InstrumentPolynomial")
            ]
        return []
