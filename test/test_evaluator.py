import logging
from datetime import datetime, timezone

from stationrules import Evaluator, Level, MessageKind, RuleRegistry, validate
from stationrules.core import (
    Channel,
    Decimation,
    Epoch,
    FilterKind,
    Gain,
    Network,
    Response,
    Sensitivity,
    Stage,
    Station,
)


def _response() -> Response:
    return Response(
        instrument_sensitivity=Sensitivity(800.0, 1.0),
        stages=[
            Stage(number=1, input_units="m/s", output_units="V", stage_gain=Gain(20.0, 1.0),
                  filter_kind=FilterKind.POLES_ZEROS),
            Stage(number=2, input_units="V", output_units="count", stage_gain=Gain(40.0, 1.0),
                  decimation=Decimation(100.0, 1), filter_kind=FilterKind.COEFFICIENTS, digital=True),
        ],
    )


def _channel(code: str, azimuth: float, dip: float, **kw) -> Channel:
    params = dict(
        code=code,
        location_code="00",
        epoch=Epoch(datetime(2001, 1, 1), datetime(2009, 1, 1)),
        latitude=34.9459,
        longitude=-106.4572,
        elevation=1850.0,
        azimuth=azimuth,
        dip=dip,
        sample_rate=100.0,
        sensor_description="Streckeisen STS-2",
        response=_response(),
    )
    params.update(kw)
    return Channel(**params)


def _network(*channels: Channel) -> Network:
    station = Station(
        code="ANMO",
        epoch=Epoch(datetime(2000, 1, 1), datetime(2010, 1, 1)),
        latitude=34.9459,
        longitude=-106.4572,
        elevation=1850.0,
        channels=channels,
    )
    return Network(code="IU", epoch=Epoch(datetime(1990, 1, 1)), stations=[station])


def _clean_network() -> Network:
    return _network(
        _channel("BHZ", 0.0, -90.0),
        _channel("BHN", 0.0, 0.0),
        _channel("BHE", 90.0, 0.0),
    )


def test_clean_network_is_valid():
    report = validate(_clean_network())
    assert report.is_valid
    assert report.errors == []
    assert report.warnings == []
    # orientation rules only apply to the matching component
    assert len(report.for_rule(334)) == 1
    assert report.for_rule(334)[0].target == "IU.ANMO.00.BHZ"


def test_every_level_is_evaluated():
    report = Evaluator().evaluate(_clean_network())
    levels = {f.level for f in report.findings}
    assert levels == set(Level)
    # 4 network + 6 station + per channel (6 + 1 orientation) + 14 response
    assert len(report) == 4 + 6 + 3 * (6 + 1 + 14)


def test_findings_do_not_stop_evaluation():
    bad = _channel("BHZ", 10.0, -90.0, sensor_description=None)
    report = validate(_network(bad, _channel("BHN", 0.0, 0.0)))
    assert not report.is_valid
    assert {f.rule_id for f in report.errors} == {304, 334}
    # the second channel was still evaluated
    assert any(f.target.endswith("BHN") for f in report.successes)


def test_suppressed_rules_produce_no_findings():
    bad = _channel("BHZ", 10.0, -90.0)
    report = validate(_network(bad), ignore={334})
    assert report.for_rule(334) == []
    assert report.is_valid


def test_channel_without_response_skips_response_rules():
    ch = _channel("BHZ", 0.0, -90.0, response=None)
    report = validate(_network(ch))
    assert not [f for f in report.findings if f.level is Level.RESPONSE]


def test_custom_registry_and_multiple_networks():
    reg = RuleRegistry(ignore=range(100, 500))
    reg.add(101, RuleRegistry().get_rule(101).condition, Network)
    report = Evaluator(reg).evaluate([_clean_network(), Network(code="iu")])
    assert [f.message.kind for f in report.findings] == [MessageKind.SUCCESS, MessageKind.ERROR]
    assert str(report.errors[0]).startswith("[101] iu: ERROR")


def test_run_summary_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger="stationrules.engine.evaluator"):
        validate(_clean_network())
    assert "Validation finished" in caplog.text


def test_naive_and_aware_epochs_are_validated_together():
    utc = Network(
        code="IU",
        epoch=Epoch(datetime(2000, 1, 1, tzinfo=timezone.utc)),
        stations=[Station(code="ANMO", epoch=Epoch(datetime(2001, 1, 1)))],
    )
    report = validate(utc)
    assert [f.message.kind for f in report.for_rule(112)] == [MessageKind.SUCCESS]

    late = Network(
        code="IU",
        epoch=Epoch(datetime(2002, 1, 1, tzinfo=timezone.utc)),
        stations=[Station(code="ANMO", epoch=Epoch(datetime(2001, 1, 1)))],
    )
    assert [f.rule_id for f in validate(late).errors] == [112]
