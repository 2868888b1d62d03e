# stationrules/engine/evaluator.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from stationrules.core import Channel, Network, Station
from stationrules.rules import Level, Message, MessageKind, RuleRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Finding:
    """One message produced by one rule on one entity."""
    rule_id: int
    level: Level
    target: str  # dotted NET.STA.LOC.CHA label
    message: Message

    @property
    def kind(self) -> MessageKind:
        return self.message.kind

    def __str__(self) -> str:
        return f"[{self.rule_id}] {self.target}: {self.message}"


@dataclass(slots=True)
class Report:
    """All findings of one validation run, in evaluation order."""
    findings: list[Finding] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.findings)

    def _of_kind(self, kind: MessageKind) -> list[Finding]:
        return [f for f in self.findings if f.kind is kind]

    @property
    def errors(self) -> list[Finding]:
        return self._of_kind(MessageKind.ERROR)

    @property
    def warnings(self) -> list[Finding]:
        return self._of_kind(MessageKind.WARNING)

    @property
    def successes(self) -> list[Finding]:
        return self._of_kind(MessageKind.SUCCESS)

    @property
    def is_valid(self) -> bool:
        return not any(f.message.is_error for f in self.findings)

    def for_rule(self, rule_id: int) -> list[Finding]:
        return [f for f in self.findings if f.rule_id == rule_id]


class Evaluator:
    """
    Walks network -> station -> channel -> response and applies every
    registered rule of the matching level.

    Evaluation is total: findings never stop later rules or entities.
    Response rules run against the owning channel, and only when the
    channel has a response.
    """

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry if registry is not None else RuleRegistry()

    def evaluate(self, networks: Network | Iterable[Network]) -> Report:
        if isinstance(networks, Network):
            networks = [networks]

        report = Report()
        for network in networks:
            self._evaluate_network(network, report)

        logger.info(
            "Validation finished: %d findings (%d errors, %d warnings)",
            len(report),
            len(report.errors),
            len(report.warnings),
        )
        return report

    def _apply(self, level: Level, target: object, label: str, report: Report) -> None:
        for rule in self.registry.rules_for(level):
            for message in rule.evaluate(target):
                report.findings.append(Finding(rule.id, level, label, message))

    def _evaluate_network(self, network: Network, report: Report) -> None:
        logger.debug("Evaluating network %s (%d stations)", network.code, len(network))
        self._apply(Level.NETWORK, network, network.code, report)
        for station in network:
            self._evaluate_station(network, station, report)

    def _evaluate_station(self, network: Network, station: Station, report: Report) -> None:
        label = f"{network.code}.{station.code}"
        logger.debug("Evaluating station %s (%d channels)", label, len(station))
        self._apply(Level.STATION, station, label, report)
        for channel in station:
            self._evaluate_channel(label, channel, report)

    def _evaluate_channel(self, station_label: str, channel: Channel, report: Report) -> None:
        label = f"{station_label}.{channel.channel_id}"
        self._apply(Level.CHANNEL, channel, label, report)
        if channel.response is not None:
            self._apply(Level.RESPONSE, channel, label, report)


def validate(networks: Network | Iterable[Network], ignore: Iterable[int] = ()) -> Report:
    """Validate `networks` against the default catalog minus `ignore`."""
    return Evaluator(RuleRegistry(ignore=ignore)).evaluate(networks)
