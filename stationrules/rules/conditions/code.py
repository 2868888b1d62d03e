# stationrules/rules/conditions/code.py
from __future__ import annotations

import re
from dataclasses import dataclass

from ..messages import Message
from .base import Condition


@dataclass(frozen=True, slots=True, kw_only=True)
class CodeCondition(Condition):
    """`code` must fully match `pattern`."""
    pattern: str

    def _check(self, target: object) -> list[Message]:
        code = getattr(target, "code", None)
        if code is None:
            return [self.violation("code is missing")]
        if re.fullmatch(self.pattern, code) is None:
            return [self.violation(f"invalid code '{code}'")]
        return []


@dataclass(frozen=True, slots=True, kw_only=True)
class LocationCodeCondition(Condition):
    """`location_code` must fully match `pattern`; ``--`` stands for the empty code."""
    pattern: str

    def _check(self, target: object) -> list[Message]:
        location = getattr(target, "location_code", None) or ""
        if location == "--" or re.fullmatch(self.pattern, location) is not None:
            return []
        return [self.violation(f"invalid location code '{location}'")]
