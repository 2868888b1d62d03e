import pytest

from stationrules.core import Channel, InvalidRule, Network, Response, RuleNotFound, Station
from stationrules.rules import Level, Rule, RuleRegistry, default_catalog, filter_catalog
from stationrules.rules.conditions import CodeCondition, SensorCondition

NETWORK_IDS = {101, 110, 111, 112}
STATION_IDS = {201, 210, 211, 212, 222, 223}
CHANNEL_IDS = {301, 302, 303, 304, 305, 310, 332, 333, 334}
RESPONSE_IDS = {401, 402, 403, 404, 405, 410, 411, 412, 413, 414, 415, 420, 421, 422}
ALL_IDS = NETWORK_IDS | STATION_IDS | CHANNEL_IDS | RESPONSE_IDS


class TestCatalog:
    def test_default_catalog_ids_and_levels(self):
        catalog = default_catalog()
        assert set(catalog) == ALL_IDS
        for rule_id, spec in catalog.items():
            assert spec.id == rule_id
            assert spec.level is Level(rule_id // 100)
            assert spec.condition.description

    def test_catalog_is_fresh_each_call(self):
        a = default_catalog()
        a.pop(101)
        assert 101 in default_catalog()

    def test_filter_catalog(self):
        filtered = filter_catalog(default_catalog(), {101, 422, 999})
        assert set(filtered) == ALL_IDS - {101, 422}

    def test_non_strict_rules(self):
        lenient = {rule_id for rule_id, spec in default_catalog().items() if not spec.condition.strict}
        assert lenient == {303, 305, 414, 415}


class TestConstruction:
    def test_default_registry_has_every_rule_once(self):
        reg = RuleRegistry()
        ids = [r.id for r in reg.get_rules()]
        assert len(ids) == len(set(ids)) == len(ALL_IDS)
        assert set(ids) == ALL_IDS
        assert len(reg) == len(ALL_IDS)

    @pytest.mark.parametrize(
        "ignore",
        [set(), {101}, {212, 223}, {301, 332, 333, 334}, RESPONSE_IDS, ALL_IDS, {12345}],
    )
    def test_suppressed_ids_never_registered(self, ignore):
        reg = RuleRegistry(ignore=ignore)
        ids = [r.id for r in reg.get_rules()]
        assert not set(ids) & ignore
        assert sorted(ids) == sorted(ALL_IDS - ignore)

    def test_listing_is_in_level_order(self):
        reg = RuleRegistry()
        levels = [reg.level_of(r.id) for r in reg.get_rules()]
        assert levels == sorted(levels, key=lambda lv: lv.value)

    def test_per_level_accessors(self):
        reg = RuleRegistry()
        assert {r.id for r in reg.network_rules()} == NETWORK_IDS
        assert {r.id for r in reg.station_rules()} == STATION_IDS
        assert {r.id for r in reg.channel_rules()} == CHANNEL_IDS
        assert {r.id for r in reg.response_rules()} == RESPONSE_IDS
        assert {r.id for r in reg.rules_for("channel")} == CHANNEL_IDS
        assert {r.id for r in reg.rules_for(Response)} == RESPONSE_IDS


class TestMutation:
    def test_add_by_class_level_and_name(self):
        reg = RuleRegistry(ignore=ALL_IDS)
        cond = SensorCondition(description="sensor")
        reg.add(390, cond, Channel)
        reg.add(190, CodeCondition(pattern="[A-Z]{2}"), Level.NETWORK)
        reg.add(290, CodeCondition(pattern="[A-Z]{4}"), "station")

        assert reg.level_of(390) is Level.CHANNEL
        assert reg.level_of(190) is Level.NETWORK
        assert reg.level_of(290) is Level.STATION
        assert reg.get_rule(390).condition is cond

    def test_add_overwrites(self):
        reg = RuleRegistry()
        replacement = CodeCondition(pattern="[A-Z]{1,8}", description="lenient")
        reg.add(201, replacement, Station)
        assert reg[201].description == "lenient"
        assert len(reg) == len(ALL_IDS)

    @pytest.mark.parametrize("level", [None, str, object(), "array"])
    def test_add_rejects_bad_level(self, level):
        with pytest.raises(InvalidRule):
            RuleRegistry().add(999, SensorCondition(), level)

    def test_add_rejects_missing_condition(self):
        with pytest.raises(InvalidRule):
            RuleRegistry().add(999, None, Channel)
        with pytest.raises(InvalidRule):
            RuleRegistry().add(999, "not a condition", Channel)  # type: ignore[arg-type]
        with pytest.raises(InvalidRule):
            RuleRegistry().add_rule(None, Channel)

    def test_invalid_add_is_a_value_error(self):
        with pytest.raises(ValueError):
            RuleRegistry().add(999, SensorCondition(), Network.__name__ + "s")

    def test_unregister(self):
        reg = RuleRegistry()
        rule = reg.unregister(334)
        assert rule is not None and rule.id == 334
        assert 334 not in reg
        assert reg.unregister(334) is None

    def test_get_rule_is_read_only(self):
        reg = RuleRegistry()
        assert reg.get_rule(412) is reg.get_rule(412)
        assert 412 in reg
        assert reg.get_rule(999) is None
        with pytest.raises(RuleNotFound):
            _ = reg[999]

    @pytest.mark.parametrize("key", [[], "412", 412.0, None, True])
    def test_membership_of_non_int_keys_is_false(self, key):
        assert key not in RuleRegistry()


def test_readding_a_suppressed_rule_restores_behaviour():
    channel = Channel(code="BHZ", location_code="00", sensor_description="")
    catalog = default_catalog()

    full = RuleRegistry()
    reduced = RuleRegistry(ignore={304})
    assert reduced.get_rule(304) is None

    spec = catalog[304]
    reduced.add_rule(Rule(304, spec.condition), spec.level)

    assert reduced.level_of(304) is full.level_of(304)
    assert reduced[304].evaluate(channel) == full[304].evaluate(channel)
    assert [r.id for r in reduced.channel_rules()].count(304) == 1
