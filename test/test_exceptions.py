import pytest

from stationrules.core import (
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


def test_exception_inheritance_validation():
    for exc in (InvalidEpoch, InvalidNetwork, InvalidStation, InvalidChannel, InvalidResponse, InvalidStage):
        assert issubclass(exc, CoreError)


def test_registry_errors():
    assert issubclass(RuleError, CoreError)
    assert issubclass(InvalidRule, RuleError)
    assert issubclass(InvalidRule, ValueError)


def test_exception_inheritance_lookup_keyerror():
    assert issubclass(StationNotFound, KeyError)
    assert issubclass(StationNotFound, CoreError)
    assert issubclass(ChannelNotFound, KeyError)
    assert issubclass(ChannelNotFound, CoreError)
    assert issubclass(RuleNotFound, KeyError)
    assert issubclass(RuleNotFound, RuleError)


def test_lookup_errors_can_be_raised_and_caught_as_keyerror():
    with pytest.raises(KeyError):
        raise StationNotFound("ANMO")

    with pytest.raises(KeyError):
        raise RuleNotFound(999)
