# stationrules/core/channel.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .epoch import Epoch
from .exceptions import InvalidChannel
from .response import Response


def _coerce_float(value: object, what: str, *, optional: bool) -> float | None:
    if value is None:
        if optional:
            return None
        raise InvalidChannel(f"{what} is required.")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidChannel(f"{what} must be a number.")
    return float(value)


@dataclass(frozen=True, slots=True)
class Channel:
    """
    One epoch of a recording channel.

    Orientation (azimuth/dip) and sample rate are optional: their absence is
    a validation finding, not a construction error.
    """
    code: str
    location_code: str = ""
    epoch: Epoch = field(default_factory=Epoch)
    latitude: float = 0.0
    longitude: float = 0.0
    elevation: float = 0.0
    azimuth: float | None = None
    dip: float | None = None
    sample_rate: float | None = None
    sensor_description: str | None = None
    calibration_units: str | None = None
    types: tuple[str, ...] = ()
    response: Response | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.code, str):
            raise InvalidChannel("Channel.code must be a string.")
        if self.location_code is None:
            object.__setattr__(self, "location_code", "")
        elif not isinstance(self.location_code, str):
            raise InvalidChannel("Channel.location_code must be a string.")

        if not isinstance(self.epoch, Epoch):
            raise InvalidChannel("Channel.epoch must be an Epoch instance.")

        for name in ("latitude", "longitude", "elevation"):
            object.__setattr__(self, name, _coerce_float(getattr(self, name), f"Channel.{name}", optional=False))
        for name in ("azimuth", "dip", "sample_rate"):
            object.__setattr__(self, name, _coerce_float(getattr(self, name), f"Channel.{name}", optional=True))

        for name in ("sensor_description", "calibration_units"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise InvalidChannel(f"Channel.{name} must be a string or None.")

        types = () if self.types is None else self.types
        if isinstance(types, str) or not isinstance(types, Sequence):
            raise InvalidChannel("Channel.types must be a sequence of strings.")
        if not all(isinstance(t, str) for t in types):
            raise InvalidChannel("Channel.types must be a sequence of strings.")
        object.__setattr__(self, "types", tuple(types))

        if self.response is not None and not isinstance(self.response, Response):
            raise InvalidChannel("Channel.response must be a Response instance.")

    # Convenience accessors
    @property
    def channel_id(self) -> str:
        """``LOC.CODE`` identity shared by all epochs of the same channel."""
        return f"{self.location_code}.{self.code}"

    @property
    def instrument_code(self) -> str | None:
        return self.code[1] if len(self.code) >= 2 else None

    @property
    def orientation_code(self) -> str | None:
        return self.code[-1] if self.code else None
