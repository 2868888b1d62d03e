import pytest

from stationrules.core import Channel, FilterKind, InvalidRule, Response, Stage, Station
from stationrules.rules import (
    ChannelCodeRestriction,
    ChannelTypeRestriction,
    Message,
    MessageKind,
    OrientationRestriction,
    ResponsePolynomialRestriction,
)
from stationrules.rules.conditions import SampleRateCondition


def test_message_constructors_and_predicates():
    ok = Message.success("rule text")
    warn = Message.warning("rule text", "detail")
    err = Message.error("rule text", "detail")

    assert ok.kind is MessageKind.SUCCESS and ok.is_success
    assert warn.is_warning and not warn.is_error
    assert err.is_error
    assert str(err) == "ERROR: rule text (detail)"
    assert str(ok) == "SUCCESS: rule text"


def test_channel_code_restriction_excludes_auxiliary_instruments():
    r = ChannelCodeRestriction()
    assert r.applies(Channel(code="BHZ"))
    assert r.applies(Channel(code="HNE"))
    assert not r.applies(Channel(code="LCE"))  # calibration input
    assert not r.applies(Channel(code="VMZ"))  # mass position
    assert not r.applies(Channel(code="LKO"))  # temperature
    assert not r.applies(Channel(code="BH"))
    # non-channel targets are never restricted
    assert r.applies(Station(code="ANMO"))


def test_channel_type_restriction():
    r = ChannelTypeRestriction()
    assert r.applies(Channel(code="BHZ", types=("CONTINUOUS", "GEOPHYSICAL")))
    assert not r.applies(Channel(code="BHZ", types=("CONTINUOUS", "HEALTH")))
    assert not r.applies(Channel(code="BHZ", types=("flag",)))


def test_response_polynomial_restriction():
    r = ResponsePolynomialRestriction()
    assert r.applies(Channel(code="BHZ"))
    assert r.applies(Channel(code="BHZ", response=Response(stages=[Stage(number=1)])))
    assert not r.applies(Channel(code="BHZ", response=Response(is_polynomial=True)))
    poly_stage = Stage(number=1, filter_kind=FilterKind.POLYNOMIAL)
    assert not r.applies(Channel(code="BHZ", response=Response(stages=[poly_stage])))


def test_orientation_restriction_matches_last_letter():
    r = OrientationRestriction("N")
    assert r.applies(Channel(code="BHN"))
    assert not r.applies(Channel(code="BHE"))
    assert not r.applies(Channel(code=""))


def test_restricted_condition_emits_no_message():
    cond = SampleRateCondition(
        strict=False,
        description="rate",
        restrictions=(ChannelCodeRestriction(), ChannelTypeRestriction()),
    )
    health = Channel(code="BHZ", types=("HEALTH",), response=Response())
    assert cond.evaluate(health) == []

    # same record without the excluding type is evaluated (and fails as a warning)
    plain = Channel(code="BHZ", response=Response())
    (msg,) = cond.evaluate(plain)
    assert msg.is_warning


def test_condition_rejects_non_restriction_gates():
    with pytest.raises(InvalidRule):
        SampleRateCondition(restrictions=("BHZ",))  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        SampleRateCondition(restrictions=(ChannelCodeRestriction(), None))  # type: ignore[arg-type]
