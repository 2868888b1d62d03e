from datetime import datetime

import pytest

from stationrules.core import Channel, Epoch, Network, Response, Station
from stationrules.rules.catalog import CHANNEL_CODE, LOCATION_CODE, NETWORK_CODE, STATION_CODE
from stationrules.rules.conditions import (
    CalibrationUnitCondition,
    CodeCondition,
    LocationCodeCondition,
    SampleRateCondition,
    SensorCondition,
    StartTimeCondition,
)


def _only(messages):
    assert len(messages) == 1
    return messages[0]


class TestCodeCondition:
    @pytest.mark.parametrize("code", ["IU", "X", "2_", "*"])
    def test_network_codes_pass(self, code):
        cond = CodeCondition(pattern=NETWORK_CODE, description="net")
        assert _only(cond.evaluate(Network(code=code))).is_success

    @pytest.mark.parametrize("code", ["iu", "IUX", ""])
    def test_network_codes_fail(self, code):
        cond = CodeCondition(pattern=NETWORK_CODE, description="net")
        msg = _only(cond.evaluate(Network(code=code)))
        assert msg.is_error
        assert msg.description == "net"
        assert f"'{code}'" in msg.detail

    def test_station_and_channel_lengths(self):
        assert _only(CodeCondition(pattern=STATION_CODE).evaluate(Station(code="ANMO1"))).is_success
        assert _only(CodeCondition(pattern=STATION_CODE).evaluate(Station(code="ANMO12"))).is_error
        assert _only(CodeCondition(pattern=CHANNEL_CODE).evaluate(Channel(code="BHZ"))).is_success
        assert _only(CodeCondition(pattern=CHANNEL_CODE).evaluate(Channel(code="BH"))).is_error

    def test_non_strict_gives_warning(self):
        cond = CodeCondition(pattern=CHANNEL_CODE, strict=False)
        assert _only(cond.evaluate(Channel(code="bhz"))).is_warning


@pytest.mark.parametrize("location", ["", "00", "10", "  ", "--", "A1"])
def test_location_code_pass(location):
    cond = LocationCodeCondition(pattern=LOCATION_CODE)
    assert _only(cond.evaluate(Channel(code="BHZ", location_code=location))).is_success


@pytest.mark.parametrize("location", ["000", "a0", "-"])
def test_location_code_fail(location):
    cond = LocationCodeCondition(pattern=LOCATION_CODE)
    assert _only(cond.evaluate(Channel(code="BHZ", location_code=location))).is_error


def test_sensor_description():
    cond = SensorCondition(description="sensor")
    assert _only(cond.evaluate(Channel(code="BHZ", sensor_description="STS-2"))).is_success
    assert _only(cond.evaluate(Channel(code="BHZ"))).is_error
    assert _only(cond.evaluate(Channel(code="BHZ", sensor_description=" - "))).is_error


def test_calibration_units():
    cond = CalibrationUnitCondition(strict=False)
    assert _only(cond.evaluate(Channel(code="BHZ"))).is_success
    assert _only(cond.evaluate(Channel(code="BHZ", calibration_units="V"))).is_success

    case_only = _only(cond.evaluate(Channel(code="BHZ", calibration_units="v")))
    assert case_only.is_warning
    assert "'V'" in case_only.detail

    assert _only(cond.evaluate(Channel(code="BHZ", calibration_units="volts"))).is_warning


def test_calibration_units_case_mismatch_is_warning_even_when_strict():
    cond = CalibrationUnitCondition(strict=True)
    assert _only(cond.evaluate(Channel(code="BHZ", calibration_units="M/S"))).is_warning
    assert _only(cond.evaluate(Channel(code="BHZ", calibration_units="furlongs"))).is_error


def test_sample_rate_condition():
    cond = SampleRateCondition(strict=False)
    assert _only(cond.evaluate(Channel(code="BHZ", sample_rate=40.0, response=Response()))).is_success
    assert _only(cond.evaluate(Channel(code="BHZ", sample_rate=0.0))).is_success
    assert _only(cond.evaluate(Channel(code="BHZ", sample_rate=0.0, response=Response()))).is_warning
    missing = _only(cond.evaluate(Channel(code="BHZ", response=Response())))
    assert missing.is_warning
    assert "missing" in missing.detail


class TestStartTimeCondition:
    def test_required_start(self):
        cond = StartTimeCondition(required=True)
        assert _only(cond.evaluate(Station(code="ANMO", epoch=Epoch()))).is_error
        assert _only(cond.evaluate(Station(code="ANMO", epoch=Epoch(datetime(2000, 1, 1))))).is_success

    def test_optional_start(self):
        cond = StartTimeCondition(required=False)
        assert _only(cond.evaluate(Network(code="IU"))).is_success

    def test_start_must_precede_end(self):
        cond = StartTimeCondition()
        bad = Channel(code="BHZ", epoch=Epoch(datetime(2010, 1, 1), datetime(2000, 1, 1)))
        same = Channel(code="BHZ", epoch=Epoch(datetime(2010, 1, 1), datetime(2010, 1, 1)))
        good = Channel(code="BHZ", epoch=Epoch(datetime(2000, 1, 1), datetime(2010, 1, 1)))
        assert _only(cond.evaluate(bad)).is_error
        assert _only(cond.evaluate(same)).is_error
        assert _only(cond.evaluate(good)).is_success
