# stationrules/core/response.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Sequence

from .exceptions import InvalidResponse, InvalidStage


class FilterKind(Enum):
    """Transfer-function element carried by a response stage."""
    POLES_ZEROS = "PolesZeros"
    FIR = "FIR"
    COEFFICIENTS = "Coefficients"
    POLYNOMIAL = "Polynomial"
    RESPONSE_LIST = "ResponseList"
    NONE = "None"


def _optional_float(value: object, what: str, error: type[Exception]) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise error(f"{what} must be a number or None.")
    return float(value)


@dataclass(frozen=True, slots=True)
class Gain:
    """StageGain: gain value at a stated frequency."""
    value: float | None = None
    frequency: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _optional_float(self.value, "Gain.value", InvalidStage))
        object.__setattr__(
            self, "frequency", _optional_float(self.frequency, "Gain.frequency", InvalidStage)
        )


@dataclass(frozen=True, slots=True)
class Sensitivity:
    """InstrumentSensitivity: overall gain at the normalization frequency."""
    value: float | None = None
    frequency: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "value", _optional_float(self.value, "Sensitivity.value", InvalidResponse)
        )
        object.__setattr__(
            self,
            "frequency",
            _optional_float(self.frequency, "Sensitivity.frequency", InvalidResponse),
        )


@dataclass(frozen=True, slots=True)
class Decimation:
    input_sample_rate: float
    factor: int

    def __post_init__(self) -> None:
        rate = _optional_float(self.input_sample_rate, "Decimation.input_sample_rate", InvalidStage)
        if rate is None:
            raise InvalidStage("Decimation.input_sample_rate is required.")
        if isinstance(self.factor, bool) or not isinstance(self.factor, int):
            raise InvalidStage("Decimation.factor must be an int.")
        object.__setattr__(self, "input_sample_rate", rate)

    @property
    def output_sample_rate(self) -> float | None:
        """Rate after decimation; None when the factor cannot divide (<= 0)."""
        if self.factor <= 0:
            return None
        return self.input_sample_rate / self.factor


@dataclass(frozen=True, slots=True)
class PolesZeros:
    zeros: tuple[complex, ...] = ()
    poles: tuple[complex, ...] = ()

    def __post_init__(self) -> None:
        for name in ("zeros", "poles"):
            raw = getattr(self, name)
            if raw is None:
                raw = ()
            if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence):
                raise InvalidStage(f"PolesZeros.{name} must be a sequence of complex numbers.")
            values = []
            for v in raw:
                if isinstance(v, bool) or not isinstance(v, (int, float, complex)):
                    raise InvalidStage(f"PolesZeros.{name} must contain numbers.")
                values.append(complex(v))
            object.__setattr__(self, name, tuple(values))

    @property
    def has_zero_at_origin(self) -> bool:
        return any(z == 0j for z in self.zeros)


@dataclass(frozen=True, slots=True)
class Stage:
    """
    One sequential element of an instrument response.

    `number` is taken as declared by the source; the stage-sequence rule
    checks that numbers run 1..N in list order.
    """
    number: int
    input_units: str | None = None
    output_units: str | None = None
    stage_gain: Gain | None = None
    decimation: Decimation | None = None
    filter_kind: FilterKind = FilterKind.NONE
    poles_zeros: PolesZeros | None = field(default=None, repr=False)
    digital: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.number, bool) or not isinstance(self.number, int):
            raise InvalidStage("Stage.number must be an int.")
        for name in ("input_units", "output_units"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise InvalidStage(f"Stage.{name} must be a string or None.")
        if self.stage_gain is not None and not isinstance(self.stage_gain, Gain):
            raise InvalidStage("Stage.stage_gain must be a Gain instance.")
        if self.decimation is not None and not isinstance(self.decimation, Decimation):
            raise InvalidStage("Stage.decimation must be a Decimation instance.")
        if not isinstance(self.filter_kind, FilterKind):
            raise InvalidStage("Stage.filter_kind must be a FilterKind.")
        if self.poles_zeros is not None and not isinstance(self.poles_zeros, PolesZeros):
            raise InvalidStage("Stage.poles_zeros must be a PolesZeros instance.")

    @property
    def is_digital(self) -> bool:
        """FIR stages always; PolesZeros/Coefficients when their transfer function is digital."""
        if self.filter_kind is FilterKind.FIR:
            return True
        if self.filter_kind in (FilterKind.POLES_ZEROS, FilterKind.COEFFICIENTS):
            return self.digital
        return False


@dataclass(frozen=True, slots=True)
class Response:
    """
    Instrument response: optional overall sensitivity plus ordered stages.

    is_polynomial: the response is declared as InstrumentPolynomial.
    """
    instrument_sensitivity: Sensitivity | None = None
    stages: tuple[Stage, ...] = ()
    is_polynomial: bool = False

    def __post_init__(self) -> None:
        if self.instrument_sensitivity is not None and not isinstance(
            self.instrument_sensitivity, Sensitivity
        ):
            raise InvalidResponse("Response.instrument_sensitivity must be a Sensitivity instance.")
        stages = () if self.stages is None else self.stages
        if not isinstance(stages, Sequence):
            raise InvalidResponse("Response.stages must be a sequence of Stage instances.")
        for st in stages:
            if not isinstance(st, Stage):
                raise InvalidResponse("Response.stages values must be Stage instances.")
        object.__setattr__(self, "stages", tuple(stages))

    def __len__(self) -> int:
        return len(self.stages)

    def __iter__(self) -> Iterator[Stage]:
        return iter(self.stages)

    @property
    def last_stage(self) -> Stage | None:
        return self.stages[-1] if self.stages else None

    @property
    def has_polynomial_stage(self) -> bool:
        return any(st.filter_kind is FilterKind.POLYNOMIAL for st in self.stages)

    def decimating_stages(self) -> list[Stage]:
        return [st for st in self.stages if st.decimation is not None]
