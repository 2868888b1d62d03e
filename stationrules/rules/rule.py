# stationrules/rules/rule.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from stationrules.core import Channel, InvalidRule, Network, Response, Station

from .conditions import Condition
from .messages import Message


class Level(Enum):
    """Hierarchy level a rule is evaluated at, in evaluation order."""
    NETWORK = 1
    STATION = 2
    CHANNEL = 3
    RESPONSE = 4

    @classmethod
    def of(cls, kind: object) -> "Level":
        """
        Resolve `kind` to a Level.

        Accepts a Level, its name ("station", case-insensitive) or one of the
        record classes Network/Station/Channel/Response.
        """
        if isinstance(kind, Level):
            return kind
        if isinstance(kind, str):
            try:
                return cls[kind.strip().upper()]
            except KeyError as e:
                raise InvalidRule(f"Unsupported level '{kind}'.") from e
        try:
            return _LEVEL_BY_CLASS[kind]  # type: ignore[index]
        except (KeyError, TypeError) as e:
            name = getattr(kind, "__name__", repr(kind))
            raise InvalidRule(f"Unsupported class definition {name}.") from e


_LEVEL_BY_CLASS: dict[type, Level] = {
    Network: Level.NETWORK,
    Station: Level.STATION,
    Channel: Level.CHANNEL,
    Response: Level.RESPONSE,
}


@dataclass(frozen=True, slots=True)
class Rule:
    """A stable catalog id bound to one Condition."""
    id: int
    condition: Condition

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise InvalidRule("Rule.id must be an int.")
        if not isinstance(self.condition, Condition):
            raise InvalidRule("Rule.condition must be a Condition instance.")

    @property
    def description(self) -> str:
        return self.condition.description

    @property
    def strict(self) -> bool:
        return self.condition.strict

    def evaluate(self, target: object) -> list[Message]:
        return self.condition.evaluate(target)
