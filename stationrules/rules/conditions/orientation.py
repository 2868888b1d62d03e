# stationrules/rules/conditions/orientation.py
from __future__ import annotations

from dataclasses import dataclass

from stationrules.core import Channel

from ..messages import Message
from .base import Condition


Window = tuple[float, float]


def normalize_azimuth(azimuth: float) -> float:
    """Map any signed azimuth onto [0, 360)."""
    return azimuth % 360.0


def _within(value: float, windows: tuple[Window, ...]) -> bool:
    return any(lo <= value <= hi for lo, hi in windows)


def _describe(windows: tuple[Window, ...]) -> str:
    return " or ".join(f"[{lo:g}, {hi:g}]" for lo, hi in windows)


@dataclass(frozen=True, slots=True, kw_only=True)
class OrientationCondition(Condition):
    """
    Azimuth and dip must fall inside the allowed windows.

    Azimuth is compared modulo 360 (0 and 360 are the same direction);
    dip is compared as given. Missing values are violations.
    """
    azimuth_windows: tuple[Window, ...] = ()
    dip_windows: tuple[Window, ...] = ()

    def _check(self, target: Channel) -> list[Message]:
        findings: list[Message] = []
        cid = target.channel_id

        if target.azimuth is None:
            findings.append(self.violation(f"{cid}: azimuth is missing"))
        elif not _within(normalize_azimuth(target.azimuth), self.azimuth_windows):
            findings.append(
                self.violation(
                    f"{cid}: azimuth {target.azimuth:g} outside {_describe(self.azimuth_windows)}"
                )
            )

        if target.dip is None:
            findings.append(self.violation(f"{cid}: dip is missing"))
        elif not _within(target.dip, self.dip_windows):
            findings.append(
                self.violation(f"{cid}: dip {target.dip:g} outside {_describe(self.dip_windows)}")
            )
        return findings


NORTH: tuple[Window, ...] = ((355.0, 360.0), (0.0, 5.0))
HORIZONTAL_DIP: tuple[Window, ...] = ((-5.0, 5.0),)


@dataclass(frozen=True, slots=True, kw_only=True)
class NorthOrientationCondition(OrientationCondition):
    # north, or south for reversed polarity
    azimuth_windows: tuple[Window, ...] = NORTH + ((175.0, 185.0),)
    dip_windows: tuple[Window, ...] = HORIZONTAL_DIP


@dataclass(frozen=True, slots=True, kw_only=True)
class EastOrientationCondition(OrientationCondition):
    azimuth_windows: tuple[Window, ...] = ((85.0, 95.0), (265.0, 275.0))
    dip_windows: tuple[Window, ...] = HORIZONTAL_DIP


@dataclass(frozen=True, slots=True, kw_only=True)
class VerticalOrientationCondition(OrientationCondition):
    azimuth_windows: tuple[Window, ...] = NORTH
    dip_windows: tuple[Window, ...] = ((-90.0, -85.0), (85.0, 90.0))
