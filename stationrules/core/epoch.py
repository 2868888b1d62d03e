# stationrules/core/epoch.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from .exceptions import InvalidEpoch


def _as_utc(value: datetime | None) -> datetime | None:
    # Naive bounds are read as UTC so every pair of bounds is comparable.
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


def _starts_before_end(start: datetime | None, end: datetime | None) -> bool:
    # A missing start is -inf, a missing end is +inf.
    if start is None or end is None:
        return True
    return start < end


@dataclass(frozen=True, slots=True)
class Epoch:
    """
    Half-open activity interval ``[start, end)``.

    - start: None only where the record allows it (networks); compares as -inf
    - end:   None means the configuration is still active; compares as +inf

    Naive datetimes are taken as UTC; aware ones keep their offset.

    Ordering (``start < end``) is not checked here; StartTimeCondition
    reports it.
    """
    start: datetime | None = None
    end: datetime | None = None

    def __post_init__(self) -> None:
        if self.start is not None and not isinstance(self.start, datetime):
            raise InvalidEpoch("Epoch.start must be a datetime or None.")
        if self.end is not None and not isinstance(self.end, datetime):
            raise InvalidEpoch("Epoch.end must be a datetime or None.")

        object.__setattr__(self, "start", _as_utc(self.start))
        object.__setattr__(self, "end", _as_utc(self.end))

    @property
    def is_open(self) -> bool:
        return self.end is None

    @property
    def is_ordered(self) -> bool:
        """True unless both bounds are present and ``start >= end``."""
        if self.start is None or self.end is None:
            return True
        return self.start < self.end

    def overlaps(self, other: "Epoch") -> bool:
        """Intervals share at least one instant; touching bounds do not count."""
        return _starts_before_end(self.start, other.end) and _starts_before_end(
            other.start, self.end
        )

    def encloses(self, other: "Epoch") -> bool:
        """True if ``other`` lies entirely within this epoch (identical epochs included)."""
        if self.start is not None:
            if other.start is None or other.start < self.start:
                return False
        if self.end is None:
            return True
        return other.end is not None and other.end <= self.end

    def partially_overlaps(self, other: "Epoch") -> bool:
        """Overlapping while neither epoch encloses the other."""
        if not self.overlaps(other):
            return False
        return not (self.encloses(other) or other.encloses(self))

    def __str__(self) -> str:
        start = self.start.isoformat() if self.start is not None else "-"
        end = self.end.isoformat() if self.end is not None else "open"
        return f"[{start}, {end})"
