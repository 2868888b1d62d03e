# stationrules/core/station.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence

from .channel import Channel
from .epoch import Epoch
from .exceptions import ChannelNotFound, InvalidStation


@dataclass(frozen=True, slots=True)
class Station:
    """
    A Station holds the ordered epochs of all its Channels.

    Design goals:
    - sequence access: station[0], len(station), iteration in source order
    - safe: validate coordinates and channel container
    - predictable: immutable; records are never modified by validation
    """
    code: str
    epoch: Epoch = field(default_factory=Epoch)
    latitude: float = 0.0
    longitude: float = 0.0
    elevation: float = 0.0
    channels: tuple[Channel, ...] = field(default=(), repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.code, str):
            raise InvalidStation("Station.code must be a string.")
        if not isinstance(self.epoch, Epoch):
            raise InvalidStation("Station.epoch must be an Epoch instance.")

        for name in ("latitude", "longitude", "elevation"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidStation(f"Station.{name} must be a number.")
            object.__setattr__(self, name, float(value))

        channels = () if self.channels is None else self.channels
        if not isinstance(channels, Sequence):
            raise InvalidStation("Station.channels must be a sequence (e.g., list).")
        for ch in channels:
            if not isinstance(ch, Channel):
                raise InvalidStation("Station.channels values must be Channel instances.")

        # Freeze channels to a tuple (source order preserved)
        object.__setattr__(self, "channels", tuple(channels))

    # ---- sequence API ----
    def __len__(self) -> int:
        return len(self.channels)

    def __iter__(self) -> Iterator[Channel]:
        return iter(self.channels)

    def __getitem__(self, index: int) -> Channel:
        return self.channels[index]

    def find(self, code: str, location_code: str | None = None) -> tuple[Channel, ...]:
        """
        All epochs of channel `code`, in source order.

        location_code:
          - None: any location
          - str : only that location ("" for the empty location)

        Raises ChannelNotFound if nothing matches.
        """
        found = tuple(
            ch
            for ch in self.channels
            if ch.code == code and (location_code is None or ch.location_code == location_code)
        )
        if not found:
            raise ChannelNotFound(code if location_code is None else f"{location_code}.{code}")
        return found
