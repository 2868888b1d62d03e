# stationrules/__init__.py
"""
stationrules: rule-based validation of seismic station metadata.

Layers:
- core:   read-only Network/Station/Channel/Response records
- rules:  conditions, restrictions, the default catalog and RuleRegistry
- engine: Evaluator walking the hierarchy and collecting findings
"""

from .core import Network, Station, Channel, Response, Stage, Epoch
from .rules import Message, MessageKind, Level, Rule, RuleRegistry
from .engine import Evaluator, Finding, Report, validate

__all__ = [
    "Network",
    "Station",
    "Channel",
    "Response",
    "Stage",
    "Epoch",
    "Message",
    "MessageKind",
    "Level",
    "Rule",
    "RuleRegistry",
    "Evaluator",
    "Finding",
    "Report",
    "validate",
]
