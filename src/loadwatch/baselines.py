"""Personal baselines from the weeks preceding the current one.

Wellness is compared against the athlete's *own* recent history rather than
a population norm: "your sleep vs your last 4 weeks".

Key concepts:
- Each trailing week is aggregated from scratch with weekly_metrics
- Weeks without data produce 0 means and are left out of the average
- A dimension with no usable week has no baseline (None), which callers
  must read as "suppress the comparison", never as "healthy"
"""

import logging
from dataclasses import dataclass, asdict
from typing import List, Optional

from .config import MAX_BASELINE_WEEKS
from .models import AthleteRecord, coerce_number
from .weekly import mean, weekly_metrics
from .weeks import DateLike, previous_week_starts, week_dates

logger = logging.getLogger(__name__)

DEFAULT_BASELINE_WEEKS = 4


@dataclass(frozen=True)
class Baseline:
    """Trailing reference values for the three tracked wellness dimensions."""
    sleep_base: Optional[float] = None  # sleep quality, 1-7
    symptom_base: Optional[float] = None  # symptom burden
    sleep_hours_base: Optional[float] = None  # hours

    @property
    def is_empty(self) -> bool:
        return (
            self.sleep_base is None
            and self.symptom_base is None
            and self.sleep_hours_base is None
        )

    def to_dict(self) -> dict:
        return asdict(self)


def positive_average(values: List[float]) -> Optional[float]:
    """Average of the strictly positive values, or None if there are none.

    Args:
        values: Weekly means, where 0 stands for "no data that week"

    Returns:
        Mean of the positive values or None
    """
    valid_values = [v for v in values if v > 0]
    if not valid_values:
        return None
    return mean(valid_values)


def calculate_baselines(
    record: AthleteRecord,
    week_start: DateLike,
    weeks: int = DEFAULT_BASELINE_WEEKS,
) -> Baseline:
    """Calculate baselines over the N weeks strictly before ``week_start``.

    The current week never contributes. Each historical week is recomputed
    on every call.

    Args:
        record: The athlete's record
        week_start: Any date in the reference week (rounded down to Monday)
        weeks: Number of trailing weeks (non-positive means none, capped at
            MAX_BASELINE_WEEKS)

    Returns:
        Baseline with None for every dimension lacking positive history
    """
    sleep_means: List[float] = []
    symptom_means: List[float] = []
    sleep_hour_means: List[float] = []

    count = min(max(0, int(coerce_number(weeks))), MAX_BASELINE_WEEKS)
    for start in previous_week_starts(week_start, count):
        metrics = weekly_metrics(week_dates(start), record)
        sleep_means.append(metrics.sleep_quality_mean)
        symptom_means.append(metrics.symptom_burden_mean)
        sleep_hour_means.append(metrics.sleep_duration_mean)

    baseline = Baseline(
        sleep_base=positive_average(sleep_means),
        symptom_base=positive_average(symptom_means),
        sleep_hours_base=positive_average(sleep_hour_means),
    )
    logger.debug("Baseline for week of %s over %d weeks: %s", week_start, count, baseline)
    return baseline
