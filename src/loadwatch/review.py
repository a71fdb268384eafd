"""
Week review for one athlete and the team alert overview.

Both glue the engine components together for a given week: weekly metrics,
the trailing baseline (using ``Thresholds.baseline_weeks``) and the alert
report. The athlete review also carries per-day flags, so a single bad
night shows up on its own date.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, FrozenSet, List, Mapping, Optional

from .alerts import AlertFlag, AlertReport, evaluate_alerts, evaluate_day_alerts
from .baselines import Baseline, calculate_baselines
from .config import DEFAULT_THRESHOLDS, Thresholds
from .models import AthleteRecord
from .weekly import WeeklyMetrics, weekly_metrics
from .weeks import DateLike, week_dates, week_start

logger = logging.getLogger(__name__)


@dataclass
class WeekReview:
    """Everything the athlete week view shows."""
    week_start: date
    metrics: WeeklyMetrics
    baseline: Baseline
    report: AlertReport
    day_flags: Dict[date, FrozenSet[AlertFlag]] = field(default_factory=dict)

    @property
    def flagged_days(self) -> List[date]:
        return [d for d, flags in self.day_flags.items() if flags]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "week_start": self.week_start.isoformat(),
            "metrics": self.metrics.to_dict(),
            "baseline": self.baseline.to_dict(),
            "alerts": self.report.to_dict(),
            "day_flags": {
                d.isoformat(): sorted(f.value for f in flags)
                for d, flags in self.day_flags.items()
            },
        }


@dataclass
class TeamRow:
    """One athlete's line in the team alert table."""
    athlete_id: str
    name: str
    metrics: WeeklyMetrics
    baseline: Baseline
    report: AlertReport

    def to_dict(self) -> Dict[str, Any]:
        return {
            "athlete_id": self.athlete_id,
            "name": self.name,
            "total_load": round(self.metrics.total_load),
            "monotony": round(self.metrics.monotony, 2),
            "strain": round(self.metrics.strain),
            "zone": self.report.zone.value,
            "mean_health": self.metrics.mean_health,
            "flags": [f.value for f in self.report.ordered_flags],
        }


def review_athlete_week(
    record: AthleteRecord,
    anchor: DateLike,
    thresholds: Optional[Thresholds] = None,
) -> WeekReview:
    """
    Build the week review for the week containing ``anchor``.

    Args:
        record: The athlete's record
        anchor: Any date of the week to review
        thresholds: Shared thresholds (defaults when None)

    Returns:
        WeekReview with metrics, baseline, alerts and per-day flags
    """
    thresholds = thresholds or DEFAULT_THRESHOLDS
    start = week_start(anchor)
    days = week_dates(start)

    metrics = weekly_metrics(days, record)
    baseline = calculate_baselines(record, start, thresholds.baseline_weeks)
    report = evaluate_alerts(metrics, baseline, thresholds)

    day_flags = {
        day: evaluate_day_alerts(record.wellness_on(day), baseline, thresholds)
        for day in days
    }

    return WeekReview(
        week_start=start,
        metrics=metrics,
        baseline=baseline,
        report=report,
        day_flags=day_flags,
    )


def review_team(
    records: Mapping[str, AthleteRecord],
    anchor: DateLike,
    thresholds: Optional[Thresholds] = None,
    names: Optional[Mapping[str, str]] = None,
) -> List[TeamRow]:
    """
    Build one alert row per athlete for the week containing ``anchor``.

    Rows keep the order of ``records``. Athletes are independent, so a
    missing record for one never affects another.
    """
    thresholds = thresholds or DEFAULT_THRESHOLDS
    names = names or {}
    days = week_dates(week_start(anchor))

    rows: List[TeamRow] = []
    for athlete_id, record in records.items():
        metrics = weekly_metrics(days, record)
        baseline = calculate_baselines(record, days[0], thresholds.baseline_weeks)
        rows.append(
            TeamRow(
                athlete_id=athlete_id,
                name=names.get(athlete_id) or athlete_id,
                metrics=metrics,
                baseline=baseline,
                report=evaluate_alerts(metrics, baseline, thresholds),
            )
        )

    flagged = sum(1 for row in rows if row.report.has_flags)
    logger.debug("Team review for week of %s: %d athletes, %d flagged", days[0], len(rows), flagged)
    return rows
