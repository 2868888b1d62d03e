# stationrules/rules/conditions/epoch.py
from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from itertools import combinations
from typing import Sequence

from stationrules.core import Channel, Epoch, Network, Station

from ..messages import Message
from .base import Condition


def _children(parent: object) -> Sequence[Station] | Sequence[Channel]:
    if isinstance(parent, Network):
        return parent.stations
    if isinstance(parent, Station):
        return parent.channels
    return ()


def _identity(child: Station | Channel) -> str:
    if isinstance(child, Channel):
        return child.channel_id
    return child.code


@dataclass(frozen=True, slots=True, kw_only=True)
class StartTimeCondition(Condition):
    """
    Start date present (when `required`) and strictly before the end date.
    """
    required: bool = True

    def _check(self, target: object) -> list[Message]:
        epoch: Epoch = getattr(target, "epoch")
        code = getattr(target, "code", "?")
        if epoch.start is None:
            if self.required:
                return [self.violation(f"{code}: start date is missing")]
            return []
        if not epoch.is_ordered:
            return [self.violation(f"{code}: start {epoch.start.isoformat()} is not before end {epoch.end.isoformat()}")]
        return []


@dataclass(frozen=True, slots=True, kw_only=True)
class EpochOverlapCondition(Condition):
    """
    Epochs of the same station (in a network) or the same LOC.CODE channel
    (in a station) must not be partly concurrent.

    Identical epochs and epochs enclosing one another are not reported here;
    one message is produced per partially overlapping pair.
    """

    def _check(self, target: object) -> list[Message]:
        groups: dict[str, list[Station | Channel]] = defaultdict(list)
        for child in _children(target):
            groups[_identity(child)].append(child)

        findings: list[Message] = []
        for identity, members in groups.items():
            for a, b in combinations(members, 2):
                if a.epoch.partially_overlaps(b.epoch):
                    findings.append(
                        self.violation(f"{identity}: epoch {a.epoch} overlaps epoch {b.epoch}")
                    )
        return findings


@dataclass(frozen=True, slots=True, kw_only=True)
class EpochRangeCondition(Condition):
    """The parent epoch must enclose every child epoch."""

    def _check(self, target: object) -> list[Message]:
        parent: Epoch = getattr(target, "epoch")
        findings: list[Message] = []
        for child in _children(target):
            if not parent.encloses(child.epoch):
                findings.append(
                    self.violation(
                        f"{getattr(target, 'code', '?')} {parent} does not enclose "
                        f"{_identity(child)} {child.epoch}"
                    )
                )
        return findings
