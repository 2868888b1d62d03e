# stationrules/rules/registry.py
from __future__ import annotations

import logging
from typing import Iterable

from stationrules.core import InvalidRule, RuleNotFound

from .catalog import default_catalog, filter_catalog
from .conditions import Condition
from .rule import Level, Rule

logger = logging.getLogger(__name__)


class RuleRegistry:
    """
    Four independent id -> Rule maps, one per hierarchy level.

    Built from the default catalog minus the `ignore` ids. Rule ids form a
    single namespace across levels (100s network ... 400s response); lookups
    search the levels in order and return the first match.

    Mutation (add/unregister) is not thread-safe: do it before sharing the
    registry between threads.
    """

    def __init__(self, ignore: Iterable[int] = ()) -> None:
        self._rules: dict[Level, dict[int, Rule]] = {level: {} for level in Level}

        suppressed = set(ignore or ())
        catalog = default_catalog()
        for spec in filter_catalog(catalog, suppressed).values():
            self._rules[spec.level][spec.id] = Rule(spec.id, spec.condition)

        skipped = sorted(suppressed & catalog.keys())
        if skipped:
            logger.debug("Suppressed default rules: %s", skipped)

    # ---- mutation ----
    def add(self, rule_id: int, condition: Condition | None, level: object) -> Rule:
        """
        Insert or overwrite rule `rule_id` at `level`.

        level: a Level, its name, or the record class (Network, Station,
        Channel, Response). Raises InvalidRule on a missing condition or an
        unsupported level.
        """
        if condition is None or level is None:
            raise InvalidRule("Null condition|level is not permitted.")
        rule = Rule(rule_id, condition)
        return self.add_rule(rule, level)

    def add_rule(self, rule: Rule | None, level: object) -> Rule:
        if rule is None or level is None:
            raise InvalidRule("Null rule|level is not permitted.")
        if not isinstance(rule, Rule):
            raise InvalidRule("add_rule() expects a Rule instance.")
        resolved = Level.of(level)
        if rule.id in self._rules[resolved]:
            logger.debug("Overwriting rule %d at %s level", rule.id, resolved.name)
        self._rules[resolved][rule.id] = rule
        return rule

    def unregister(self, rule_id: int) -> Rule | None:
        """Remove and return the first rule with `rule_id`, or None."""
        for level in Level:
            rule = self._rules[level].pop(rule_id, None)
            if rule is not None:
                logger.debug("Unregistered rule %d from %s level", rule_id, level.name)
                return rule
        return None

    # ---- lookup (read-only) ----
    def get_rule(self, rule_id: int) -> Rule | None:
        for level in Level:
            rule = self._rules[level].get(rule_id)
            if rule is not None:
                return rule
        return None

    def level_of(self, rule_id: int) -> Level | None:
        for level in Level:
            if rule_id in self._rules[level]:
                return level
        return None

    def __getitem__(self, rule_id: int) -> Rule:
        rule = self.get_rule(rule_id)
        if rule is None:
            raise RuleNotFound(rule_id)
        return rule

    def __contains__(self, rule_id: object) -> bool:
        if isinstance(rule_id, bool) or not isinstance(rule_id, int):
            return False
        return any(rule_id in rules for rules in self._rules.values())

    def __len__(self) -> int:
        return sum(len(rules) for rules in self._rules.values())

    # ---- listings ----
    def get_rules(self) -> list[Rule]:
        """All rules, network first and response last."""
        out: list[Rule] = []
        for level in Level:
            out.extend(self._rules[level].values())
        return out

    def rules_for(self, level: object) -> list[Rule]:
        return list(self._rules[Level.of(level)].values())

    def network_rules(self) -> list[Rule]:
        return self.rules_for(Level.NETWORK)

    def station_rules(self) -> list[Rule]:
        return self.rules_for(Level.STATION)

    def channel_rules(self) -> list[Rule]:
        return self.rules_for(Level.CHANNEL)

    def response_rules(self) -> list[Rule]:
        return self.rules_for(Level.RESPONSE)
