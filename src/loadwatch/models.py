"""Engine data types: sessions, daily wellness and the per-athlete record."""

import math
from dataclasses import dataclass, field, asdict
from datetime import date
from typing import Any, Dict, List, Optional, Union

NumberLike = Union[float, int, str, None]


def coerce_number(value: Any, default: float = 0.0) -> float:
    """Turn a loosely typed input into a finite float.

    Subjective daily input is expected to be incomplete or malformed, so this
    never raises.

    Args:
        value: Raw value (number, numeric string, bool, None, anything else)
        default: Value used when the input is absent (None or empty string)

    Returns:
        The numeric value, ``default`` when absent, or 0.0 when the input is
        present but not a finite number.
    """
    if value is None:
        return float(default)
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return float(default)
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


@dataclass(frozen=True)
class Session:
    """One training unit for one day."""
    duration: NumberLike = 0.0  # minutes
    intensity: NumberLike = 0.0  # perceived effort, nominally 0-10

    @property
    def load(self) -> float:
        """Duration x intensity; 0.0 when the product overflows."""
        product = coerce_number(self.duration) * coerce_number(self.intensity)
        return product if math.isfinite(product) else 0.0

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class DailyWellness:
    """Self-reported state for one date. Every field is optional."""
    sleep_quality: NumberLike = None  # 1-7, 7 = best
    energy: NumberLike = None  # 1-7, 7 = best
    pain: NumberLike = None  # 1-7, 7 = worst
    stress: NumberLike = None  # 1-7, 7 = worst
    mood: NumberLike = None  # 1-7, 7 = best
    sleep_duration: NumberLike = None  # hours
    illness: NumberLike = None  # 0/1

    def to_dict(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass(frozen=True)
class ResolvedWellness:
    """DailyWellness with defaults substituted; every field is numeric."""
    sleep_quality: float = 4.0
    energy: float = 4.0
    pain: float = 4.0
    stress: float = 4.0
    mood: float = 4.0
    sleep_duration: float = 0.0
    illness: float = 0.0


@dataclass
class AthleteRecord:
    """Per-athlete store keyed by calendar date.

    Sessions and wellness are keyed independently: a date may have sessions
    without wellness input or the other way round.
    """
    sessions: Dict[date, List[Session]] = field(default_factory=dict)
    wellness: Dict[date, DailyWellness] = field(default_factory=dict)

    def sessions_on(self, day: date) -> List[Session]:
        return self.sessions.get(day, [])

    def wellness_on(self, day: date) -> Optional[DailyWellness]:
        return self.wellness.get(day)

    @property
    def dates(self) -> List[date]:
        """All dates with any data, in ascending order."""
        return sorted(set(self.sessions) | set(self.wellness))

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dictionary with ISO date keys."""
        return {
            "sessions": {
                d.isoformat(): [s.to_dict() for s in items]
                for d, items in sorted(self.sessions.items())
            },
            "wellness": {
                d.isoformat(): w.to_dict()
                for d, w in sorted(self.wellness.items())
            },
        }
