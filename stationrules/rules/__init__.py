# stationrules/rules/__init__.py
"""
Rule framework: messages, restrictions, conditions, the default catalog and
the registry that holds the active rules per hierarchy level.
"""

from .messages import Message, MessageKind
from .restrictions import (
    Restriction,
    ChannelCodeRestriction,
    ChannelTypeRestriction,
    ResponsePolynomialRestriction,
    OrientationRestriction,
)
from .conditions import Condition, RELATIVE_TOLERANCE, ABSOLUTE_TOLERANCE
from .rule import Level, Rule
from .catalog import RuleSpec, default_catalog, filter_catalog
from .registry import RuleRegistry


__all__ = [
    "Message",
    "MessageKind",
    "Restriction",
    "ChannelCodeRestriction",
    "ChannelTypeRestriction",
    "ResponsePolynomialRestriction",
    "OrientationRestriction",
    "Condition",
    "RELATIVE_TOLERANCE",
    "ABSOLUTE_TOLERANCE",
    "Level",
    "Rule",
    "RuleSpec",
    "default_catalog",
    "filter_catalog",
    "RuleRegistry",
]
