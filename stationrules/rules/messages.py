# stationrules/rules/messages.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MessageKind(Enum):
    """Outcome of evaluating one condition against one entity."""
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class Message:
    """
    Uniform evaluation result.

    - description: the rule's fixed catalog text
    - detail: entity-specific explanation (which code/value violated it)
    """
    kind: MessageKind
    description: str
    detail: str = ""

    @classmethod
    def success(cls, description: str, detail: str = "") -> "Message":
        return cls(MessageKind.SUCCESS, description, detail)

    @classmethod
    def warning(cls, description: str, detail: str = "") -> "Message":
        return cls(MessageKind.WARNING, description, detail)

    @classmethod
    def error(cls, description: str, detail: str = "") -> "Message":
        return cls(MessageKind.ERROR, description, detail)

    @property
    def is_success(self) -> bool:
        return self.kind is MessageKind.SUCCESS

    @property
    def is_warning(self) -> bool:
        return self.kind is MessageKind.WARNING

    @property
    def is_error(self) -> bool:
        return self.kind is MessageKind.ERROR

    def __str__(self) -> str:
        text = f"{self.kind.value.upper()}: {self.description}"
        return f"{text} ({self.detail})" if self.detail else text
