# stationrules/rules/restrictions.py
"""
Applicability predicates composed onto conditions.

A restriction returning False means the condition does not apply to that
entity at all: no message is produced, not even a Success.

Channel and Response level conditions both receive a Channel, so every
restriction here is keyed to the channel.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from stationrules.core import Channel


@runtime_checkable
class Restriction(Protocol):
    def applies(self, target: object) -> bool: ...


# Instrument letters of state-of-health and auxiliary channels
# (calibration input, test point, temperature, mass position, derived,
# non-specific, humidity, wind).
EXCLUDED_INSTRUMENT_CODES = frozenset("CEKMXYIW")

EXCLUDED_CHANNEL_TYPES = frozenset({"HEALTH", "FLAG", "MAINTENANCE"})


@dataclass(frozen=True, slots=True)
class ChannelCodeRestriction:
    """Excludes channels whose instrument code marks them as auxiliary."""
    excluded: frozenset[str] = EXCLUDED_INSTRUMENT_CODES

    def applies(self, target: object) -> bool:
        if not isinstance(target, Channel):
            return True
        code = target.code.upper()
        if len(code) < 3:
            return False
        return code[1] not in self.excluded


@dataclass(frozen=True, slots=True)
class ChannelTypeRestriction:
    """Excludes channels tagged with a health/flag/maintenance type."""
    excluded: frozenset[str] = EXCLUDED_CHANNEL_TYPES

    def applies(self, target: object) -> bool:
        if not isinstance(target, Channel):
            return True
        return not any(t.strip().upper() in self.excluded for t in target.types)


@dataclass(frozen=True, slots=True)
class ResponsePolynomialRestriction:
    """Excludes polynomial responses, which have no linear sensitivity."""

    def applies(self, target: object) -> bool:
        if not isinstance(target, Channel) or target.response is None:
            return True
        response = target.response
        return not (response.is_polynomial or response.has_polynomial_stage)


@dataclass(frozen=True, slots=True)
class OrientationRestriction:
    """Applies only to channels whose code ends with `letter`."""
    letter: str

    def applies(self, target: object) -> bool:
        if not isinstance(target, Channel):
            return False
        return target.orientation_code == self.letter


# Shared gate for channel/response checks that skip auxiliary channels.
CHANNEL_RESTRICTIONS: tuple[Restriction, ...] = (
    ChannelCodeRestriction(),
    ChannelTypeRestriction(),
)

RESPONSE_RESTRICTIONS: tuple[Restriction, ...] = CHANNEL_RESTRICTIONS + (
    ResponsePolynomialRestriction(),
)
