# stationrules/core/exceptions.py
from __future__ import annotations


class CoreError(Exception):
    """Base error for all stationrules exceptions."""


# ---- Construction errors (malformed records) ----
class InvalidEpoch(CoreError):
    """Raised when an Epoch is constructed with invalid inputs."""


class InvalidNetwork(CoreError):
    """Raised when a Network is constructed with invalid inputs."""


class InvalidStation(CoreError):
    """Raised when a Station is constructed with invalid inputs."""


class InvalidChannel(CoreError):
    """Raised when a Channel is constructed with invalid inputs."""


class InvalidResponse(CoreError):
    """Raised when a Response is constructed with invalid inputs."""


class InvalidStage(CoreError):
    """Raised when a Stage or one of its parts is constructed with invalid inputs."""


# ---- Registry misuse ----
class RuleError(CoreError):
    """Base error for rule registry failures."""


class InvalidRule(RuleError, ValueError):
    """Raised when a rule, condition or level passed to the registry is invalid."""


# ---- Lookup errors (also behave like KeyError for dict-like APIs) ----
class StationNotFound(CoreError, KeyError):
    """Raised when a requested station code is not present."""


class ChannelNotFound(CoreError, KeyError):
    """Raised when a requested channel code is not present."""


class RuleNotFound(RuleError, KeyError):
    """Raised when a requested rule id is not registered."""
