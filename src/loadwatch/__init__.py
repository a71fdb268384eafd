"""Training load and wellness analytics with baseline-driven alerts."""

from loadwatch.models import (
    Session,
    DailyWellness,
    ResolvedWellness,
    AthleteRecord,
    coerce_number,
)
from loadwatch.weeks import (
    week_start,
    week_dates,
    previous_week_starts,
    to_date,
)
from loadwatch.load import daily_load
from loadwatch.wellness import (
    resolve_wellness,
    wellness_score,
    symptom_burden,
)
from loadwatch.weekly import (
    WeeklyMetrics,
    weekly_metrics,
    calculate_monotony,
)
from loadwatch.baselines import (
    Baseline,
    calculate_baselines,
)
from loadwatch.alerts import (
    AlertFlag,
    AlertReport,
    StrainZone,
    strain_zone,
    evaluate_alerts,
    evaluate_day_alerts,
)
from loadwatch.config import (
    Thresholds,
    DEFAULT_THRESHOLDS,
    Settings,
    get_settings,
)
from loadwatch.schemas import (
    Snapshot,
    parse_record,
    parse_snapshot,
    load_snapshot,
)
from loadwatch.review import (
    WeekReview,
    TeamRow,
    review_athlete_week,
    review_team,
)
from loadwatch.exceptions import (
    LoadwatchError,
    RecordValidationError,
    SnapshotError,
)

__version__ = "0.1.0"

__all__ = [
    "Session",
    "DailyWellness",
    "ResolvedWellness",
    "AthleteRecord",
    "coerce_number",
    "week_start",
    "week_dates",
    "previous_week_starts",
    "to_date",
    # Engine
    "daily_load",
    "resolve_wellness",
    "wellness_score",
    "symptom_burden",
    "WeeklyMetrics",
    "weekly_metrics",
    "calculate_monotony",
    "Baseline",
    "calculate_baselines",
    "AlertFlag",
    "AlertReport",
    "StrainZone",
    "strain_zone",
    "evaluate_alerts",
    "evaluate_day_alerts",
    # Configuration
    "Thresholds",
    "DEFAULT_THRESHOLDS",
    "Settings",
    "get_settings",
    # Boundary and review
    "Snapshot",
    "parse_record",
    "parse_snapshot",
    "load_snapshot",
    "WeekReview",
    "TeamRow",
    "review_athlete_week",
    "review_team",
    "LoadwatchError",
    "RecordValidationError",
    "SnapshotError",
]
