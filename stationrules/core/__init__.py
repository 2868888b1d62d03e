# stationrules/core/__init__.py
"""
Core record model for stationrules.

This module defines the read-only metadata hierarchy handed to the rules:
- Network: ordered station epochs
- Station: coordinates + ordered channel epochs
- Channel: orientation, sample rate, sensor + optional Response
- Response: instrument sensitivity + ordered Stages

Building these records (e.g. from StationXML) happens outside the core layer.
"""

from .epoch import Epoch
from .response import (
    FilterKind,
    Gain,
    Sensitivity,
    Decimation,
    PolesZeros,
    Stage,
    Response,
)
from .channel import Channel
from .station import Station
from .network import Network
from .exceptions import (
    CoreError,
    InvalidEpoch,
    InvalidNetwork,
    InvalidStation,
    InvalidChannel,
    InvalidResponse,
    InvalidStage,
    RuleError,
    InvalidRule,
    StationNotFound,
    ChannelNotFound,
    RuleNotFound,
)


__all__ = [
    # time
    "Epoch",

    # records
    "Network",
    "Station",
    "Channel",
    "Response",
    "Stage",

    # stage parts
    "FilterKind",
    "Gain",
    "Sensitivity",
    "Decimation",
    "PolesZeros",

    # exceptions
    "CoreError",
    "InvalidEpoch",
    "InvalidNetwork",
    "InvalidStation",
    "InvalidChannel",
    "InvalidResponse",
    "InvalidStage",
    "RuleError",
    "InvalidRule",
    "StationNotFound",
    "ChannelNotFound",
    "RuleNotFound",
]
