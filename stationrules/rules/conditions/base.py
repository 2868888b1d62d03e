# stationrules/rules/conditions/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from stationrules.core import InvalidRule

from ..messages import Message
from ..restrictions import Restriction


# Uniform tolerance for sample-rate ratios, gain products and frequency equality.
RELATIVE_TOLERANCE = 1e-3
ABSOLUTE_TOLERANCE = 1e-9


def approx_equal(actual: float, expected: float) -> bool:
    return bool(np.isclose(actual, expected, rtol=RELATIVE_TOLERANCE, atol=ABSOLUTE_TOLERANCE))


@dataclass(frozen=True, slots=True, kw_only=True)
class Condition(ABC):
    """
    One evaluation unit of the rule catalog.

    - strict: violations are Errors when True, Warnings otherwise
    - description: fixed catalog text copied into every message
    - restrictions: applicability gate, checked in order before the body

    ``evaluate`` returns an empty list when a restriction rules the target
    out, a single Success when the target passes, and one message per
    violation otherwise.
    """
    strict: bool = True
    description: str = ""
    restrictions: tuple[Restriction, ...] = ()

    def __post_init__(self) -> None:
        restrictions = () if self.restrictions is None else tuple(self.restrictions)
        for r in restrictions:
            if not isinstance(r, Restriction):
                raise InvalidRule(f"{type(self).__name__}.restrictions must hold Restriction objects.")
        object.__setattr__(self, "restrictions", restrictions)

    def applies(self, target: object) -> bool:
        return all(r.applies(target) for r in self.restrictions)

    def evaluate(self, target: object) -> list[Message]:
        if not self.applies(target):
            return []
        findings = self._check(target)
        if not findings:
            return [self.success()]
        return list(findings)

    @abstractmethod
    def _check(self, target: object) -> Sequence[Message]:
        """Return the violations found on `target` (empty when it passes)."""

    # ---- message helpers ----
    def success(self, detail: str = "") -> Message:
        return Message.success(self.description, detail)

    def violation(self, detail: str) -> Message:
        if self.strict:
            return Message.error(self.description, detail)
        return Message.warning(self.description, detail)

    def warning(self, detail: str) -> Message:
        return Message.warning(self.description, detail)
