# stationrules/core/network.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence

from .epoch import Epoch
from .exceptions import InvalidNetwork, StationNotFound
from .station import Station


@dataclass(frozen=True, slots=True)
class Network:
    """
    Network = ordered collection of Station epochs.

    A station code may appear several times (one entry per station epoch).
    """
    code: str
    epoch: Epoch = field(default_factory=Epoch)
    stations: tuple[Station, ...] = field(default=(), repr=False)
    description: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.code, str):
            raise InvalidNetwork("Network.code must be a string.")
        if not isinstance(self.epoch, Epoch):
            raise InvalidNetwork("Network.epoch must be an Epoch instance.")
        if self.description is not None and not isinstance(self.description, str):
            raise InvalidNetwork("Network.description must be a string or None.")

        stations = () if self.stations is None else self.stations
        if not isinstance(stations, Sequence):
            raise InvalidNetwork("Network.stations must be a sequence (e.g., list).")
        for sta in stations:
            if not isinstance(sta, Station):
                raise InvalidNetwork("Network.stations values must be Station instances.")

        object.__setattr__(self, "stations", tuple(stations))

    # ---- sequence API ----
    def __len__(self) -> int:
        return len(self.stations)

    def __iter__(self) -> Iterator[Station]:
        return iter(self.stations)

    def __getitem__(self, index: int) -> Station:
        return self.stations[index]

    def find(self, code: str) -> tuple[Station, ...]:
        """
        All epochs of station `code`, in source order.

        Raises StationNotFound if the code is not present at all.
        """
        found = tuple(sta for sta in self.stations if sta.code == code)
        if not found:
            raise StationNotFound(code)
        return found
