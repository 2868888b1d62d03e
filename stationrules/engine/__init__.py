# stationrules/engine/__init__.py
from .evaluator import Evaluator, Finding, Report, validate

__all__ = ["Evaluator", "Finding", "Report", "validate"]
