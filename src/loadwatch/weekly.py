"""
Weekly training metrics: load, monotony, strain and wellness summaries.

Monotony (Foster, 1998) is the mean daily load divided by its standard
deviation over the window. Strain is total weekly load x monotony. A week
with identical non-zero loads every day has no dispersion at all and is
read as maximally monotonous (7); a fully empty week reads as 0.
"""

import math
import statistics
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Iterable, List

from .load import daily_load
from .models import AthleteRecord
from .weeks import DateLike, to_date
from .wellness import (
    raw_sleep_duration,
    raw_sleep_quality,
    round_half_up,
    symptom_burden,
    wellness_score,
)

DEGENERATE_MONOTONY = 7.0


@dataclass
class WeeklyMetrics:
    """Aggregates for one window of days (normally a Monday-Sunday week)."""

    dates: List[date] = field(default_factory=list)
    total_load: float = 0.0
    monotony: float = 0.0
    strain: float = 0.0
    mean_health: int = 0

    # Per-day series, aligned with ``dates``
    daily_loads: List[float] = field(default_factory=list)
    daily_health: List[int] = field(default_factory=list)
    daily_sleep_quality: List[float] = field(default_factory=list)
    daily_symptom_burden: List[float] = field(default_factory=list)
    daily_sleep_duration: List[float] = field(default_factory=list)

    sleep_quality_mean: float = 0.0
    symptom_burden_mean: float = 0.0
    sleep_duration_mean: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "dates": [d.isoformat() for d in self.dates],
            "total_load": round(self.total_load, 1),
            "monotony": round(self.monotony, 2),
            "strain": round(self.strain, 1),
            "mean_health": self.mean_health,
            "daily_loads": self.daily_loads,
            "daily_health": self.daily_health,
            "daily_sleep_quality": self.daily_sleep_quality,
            "daily_symptom_burden": self.daily_symptom_burden,
            "daily_sleep_duration": self.daily_sleep_duration,
            "sleep_quality_mean": round(self.sleep_quality_mean, 2),
            "symptom_burden_mean": round(self.symptom_burden_mean, 2),
            "sleep_duration_mean": round(self.sleep_duration_mean, 2),
        }


def mean(values: List[float]) -> float:
    """Arithmetic mean, 0.0 for an empty list; overflow gives +/-inf."""
    if not values:
        return 0.0
    return sum(values) / len(values)


def population_std(values: List[float]) -> float:
    """Population standard deviation (ddof=0), 0.0 for fewer than 2 values."""
    if len(values) < 2:
        return 0.0
    try:
        return statistics.pstdev(values)
    except OverflowError:
        return math.inf


def calculate_monotony(loads: List[float]) -> float:
    """
    Training monotony: mean daily load / standard deviation.

    Zero dispersion is closed by a sentinel: 7 when the window carries load,
    0 when it is empty.
    A ratio that overflows a float reads as 0.
    """
    avg = mean(loads)
    sd = population_std(loads)
    if sd == 0:
        return DEGENERATE_MONOTONY if avg > 0 else 0.0
    monotony = avg / sd
    return monotony if math.isfinite(monotony) else 0.0


def weekly_metrics(dates: Iterable[DateLike], record: AthleteRecord) -> WeeklyMetrics:
    """
    Aggregate an athlete's record over a window of dates.

    Args:
        dates: Ordered dates of the window (normally the 7 days of a week)
        record: The athlete's sessions and wellness entries

    Returns:
        WeeklyMetrics; an empty window yields all-zero metrics
    """
    days = [to_date(d) for d in dates]

    loads: List[float] = []
    health: List[int] = []
    sleep_quality: List[float] = []
    symptoms: List[float] = []
    sleep_hours: List[float] = []

    for day in days:
        loads.append(daily_load(record.sessions_on(day)))

        wellness = record.wellness_on(day)
        health.append(wellness_score(wellness))
        sleep_quality.append(raw_sleep_quality(wellness))
        symptoms.append(symptom_burden(wellness))
        sleep_hours.append(raw_sleep_duration(wellness))

    total_load = float(sum(loads))
    monotony = calculate_monotony(loads)

    return WeeklyMetrics(
        dates=days,
        total_load=total_load,
        monotony=monotony,
        strain=total_load * monotony if monotony else 0.0,
        mean_health=round_half_up(mean(health)),
        daily_loads=loads,
        daily_health=health,
        daily_sleep_quality=sleep_quality,
        daily_symptom_burden=symptoms,
        daily_sleep_duration=sleep_hours,
        sleep_quality_mean=mean(sleep_quality),
        symptom_burden_mean=mean(symptoms),
        sleep_duration_mean=mean(sleep_hours),
    )
