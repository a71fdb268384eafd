"""Alert evaluation: strain zones and wellness deviations from baseline.

The strain zone uses fixed cut-points. The three wellness flags compare the
current values against the athlete's own baseline with configurable
percentage thresholds. Flags are independent of each other and of the zone.
A dimension without a baseline never raises a flag: missing history is
absence of data, not absence of a problem.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List, Optional

from .baselines import Baseline
from .config import DEFAULT_THRESHOLDS, Thresholds
from .weekly import WeeklyMetrics
from .wellness import (
    WellnessLike,
    raw_sleep_duration,
    raw_sleep_quality,
    symptom_burden,
)

# Zone cut-points are fixed; Thresholds.strain_max does not move them
STRAIN_GREEN_BELOW = 6000.0
STRAIN_AMBER_MAX = 8000.0


class StrainZone(str, Enum):
    GREEN = "green"
    AMBER = "amber"
    RED = "red"


class AlertFlag(str, Enum):
    SLEEP_QUALITY_DOWN = "sleep_quality_down"
    SYMPTOMS_UP = "symptoms_up"
    SLEEP_HOURS_DOWN = "sleep_hours_down"

    @property
    def label(self) -> str:
        return _FLAG_LABELS[self]


_FLAG_LABELS = {
    AlertFlag.SLEEP_QUALITY_DOWN: "Sleep quality ↓",
    AlertFlag.SYMPTOMS_UP: "Symptoms ↑",
    AlertFlag.SLEEP_HOURS_DOWN: "Sleep hours ↓",
}

# Display order
FLAG_ORDER = (
    AlertFlag.SLEEP_QUALITY_DOWN,
    AlertFlag.SYMPTOMS_UP,
    AlertFlag.SLEEP_HOURS_DOWN,
)


@dataclass(frozen=True)
class AlertReport:
    """Strain zone plus the set of raised wellness flags."""
    zone: StrainZone
    flags: FrozenSet[AlertFlag] = field(default_factory=frozenset)

    @property
    def ordered_flags(self) -> List[AlertFlag]:
        return [f for f in FLAG_ORDER if f in self.flags]

    @property
    def has_flags(self) -> bool:
        return bool(self.flags)

    def to_dict(self) -> dict:
        return {
            "zone": self.zone.value,
            "flags": [f.value for f in self.ordered_flags],
        }


def strain_zone(strain: float) -> StrainZone:
    """
    Classify weekly strain.

    - < 6000: green
    - 6000 - 8000 (inclusive): amber
    - > 8000: red
    """
    if strain < STRAIN_GREEN_BELOW:
        return StrainZone.GREEN
    elif strain <= STRAIN_AMBER_MAX:
        return StrainZone.AMBER
    else:
        return StrainZone.RED


def drop_pct(baseline: float, current: float) -> float:
    """Percentage drop of ``current`` below ``baseline`` (baseline must be non-zero)."""
    return (baseline - current) / baseline * 100


def increase_pct(baseline: float, current: float) -> float:
    """Percentage rise of ``current`` above ``baseline`` (baseline must be non-zero)."""
    return (current - baseline) / baseline * 100


def _deviation_flags(
    sleep_quality: float,
    symptoms: float,
    sleep_hours: float,
    baseline: Baseline,
    thresholds: Thresholds,
) -> FrozenSet[AlertFlag]:
    flags = set()

    if baseline.sleep_base and drop_pct(baseline.sleep_base, sleep_quality) > thresholds.sleep_drop_pct:
        flags.add(AlertFlag.SLEEP_QUALITY_DOWN)

    if (
        baseline.symptom_base is not None
        and baseline.symptom_base > 0
        and increase_pct(baseline.symptom_base, symptoms) > thresholds.symptoms_increase_pct
    ):
        flags.add(AlertFlag.SYMPTOMS_UP)

    if (
        baseline.sleep_hours_base is not None
        and baseline.sleep_hours_base > 0
        and drop_pct(baseline.sleep_hours_base, sleep_hours) > thresholds.sleep_hours_drop_pct
    ):
        flags.add(AlertFlag.SLEEP_HOURS_DOWN)

    return frozenset(flags)


def evaluate_alerts(
    metrics: WeeklyMetrics,
    baseline: Baseline,
    thresholds: Optional[Thresholds] = None,
) -> AlertReport:
    """
    Compare a week's aggregates against the athlete's baseline.

    Args:
        metrics: Current week's metrics
        baseline: Baseline from the trailing weeks
        thresholds: Shared thresholds (defaults when None)

    Returns:
        AlertReport with the strain zone and the raised flags
    """
    thresholds = thresholds or DEFAULT_THRESHOLDS
    flags = _deviation_flags(
        metrics.sleep_quality_mean,
        metrics.symptom_burden_mean,
        metrics.sleep_duration_mean,
        baseline,
        thresholds,
    )
    return AlertReport(zone=strain_zone(metrics.strain), flags=flags)


def evaluate_day_alerts(
    wellness: WellnessLike,
    baseline: Baseline,
    thresholds: Optional[Thresholds] = None,
) -> FrozenSet[AlertFlag]:
    """Apply the baseline comparisons to a single day's raw wellness values."""
    thresholds = thresholds or DEFAULT_THRESHOLDS
    return _deviation_flags(
        raw_sleep_quality(wellness),
        symptom_burden(wellness),
        raw_sleep_duration(wellness),
        baseline,
        thresholds,
    )
