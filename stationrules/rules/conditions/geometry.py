# stationrules/rules/conditions/geometry.py
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from stationrules.core import Station

from ..messages import Message
from .base import Condition


EARTH_RADIUS_KM = 6371.0088


def haversine_km(
    lat1: float | np.ndarray,
    lon1: float | np.ndarray,
    lat2: float | np.ndarray,
    lon2: float | np.ndarray,
) -> np.ndarray:
    """Great-circle distance on a spherical earth (degrees in, km out)."""
    phi1, lam1, phi2, lam2 = (np.radians(np.asarray(x, dtype=float)) for x in (lat1, lon1, lat2, lon2))
    a = np.sin((phi2 - phi1) / 2.0) ** 2 + np.cos(phi1) * np.cos(phi2) * np.sin((lam2 - lam1) / 2.0) ** 2
    return 2.0 * EARTH_RADIUS_KM * np.arcsin(np.sqrt(np.clip(a, 0.0, 1.0)))


@dataclass(frozen=True, slots=True, kw_only=True)
class DistanceCondition(Condition):
    """Every channel must sit within `max_km` of its station."""
    max_km: float = 1.0

    def _check(self, target: Station) -> list[Message]:
        if len(target) == 0:
            return []
        lat = np.array([ch.latitude for ch in target.channels])
        lon = np.array([ch.longitude for ch in target.channels])
        dist = haversine_km(target.latitude, target.longitude, lat, lon)

        findings: list[Message] = []
        for ch, d in zip(target.channels, dist):
            if d > self.max_km:
                findings.append(
                    self.violation(f"{target.code} {ch.channel_id}: channel is {d:.3f} km from station")
                )
        return findings


@dataclass(frozen=True, slots=True, kw_only=True)
class StationElevationCondition(Condition):
    """Channel elevations must be within `max_m` of the station elevation."""
    max_m: float = 1000.0

    def _check(self, target: Station) -> list[Message]:
        findings: list[Message] = []
        for ch in target.channels:
            delta = abs(target.elevation - ch.elevation)
            if delta > self.max_m:
                findings.append(
                    self.violation(
                        f"{target.code} {ch.channel_id}: elevation differs by {delta:.1f} m from station"
                    )
                )
        return findings
