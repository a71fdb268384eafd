"""Demo athletes used when no snapshot is available."""

from datetime import date
from typing import Dict, Optional

from .config import Thresholds
from .models import AthleteRecord, DailyWellness, Session
from .schemas import Snapshot
from .weeks import add_days, week_dates, week_start
from .wellness import clamp

DEMO_ATHLETES = {
    # athlete_id: (name, session volume multiplier, wellness base)
    "a1": ("Alice", 1.0, 5),
    "a2": ("Bob", 1.4, 4),
    "a3": ("Chloé", 1.1, 5),
}


def _demo_week(start: date, multiplier: float, base: int, record: AthleteRecord) -> None:
    for idx, day in enumerate(week_dates(start)):
        if idx == 3:
            session = Session(duration=90 * multiplier, intensity=8)
        elif idx % 2 == 0:
            session = Session(duration=60 * multiplier, intensity=6)
        else:
            session = Session(duration=45 * multiplier, intensity=5)
        record.sessions[day] = [session]

        record.wellness[day] = DailyWellness(
            sleep_quality=clamp(base + (-1 if idx % 3 == 0 else 0), 1, 7),
            energy=clamp(base + (-1 if idx % 4 == 0 else 0), 1, 7),
            pain=clamp(3 + (1 if idx % 5 == 0 else 0), 1, 7),
            stress=clamp(3 + (1 if idx % 6 == 0 else 0), 1, 7),
            mood=clamp(5 - (1 if idx % 4 == 0 else 0), 1, 7),
            sleep_duration=7 - (1.5 if idx % 3 == 0 else 0),
            illness=0,
        )


def create_demo_records(
    today: Optional[date] = None,
    history_weeks: int = 0,
) -> Dict[str, AthleteRecord]:
    """
    Build demo records for the week containing ``today``.

    Args:
        today: Anchor date (defaults to the current date)
        history_weeks: Extra weeks of identical data before the current one,
            so baselines are available

    Returns:
        Mapping of athlete id to AthleteRecord
    """
    start = week_start(today or date.today())
    records: Dict[str, AthleteRecord] = {}

    for athlete_id, (_, multiplier, base) in DEMO_ATHLETES.items():
        record = AthleteRecord()
        for k in range(history_weeks, -1, -1):
            _demo_week(add_days(start, -7 * k), multiplier, base, record)
        records[athlete_id] = record

    return records


def create_demo_snapshot(
    today: Optional[date] = None,
    history_weeks: int = 0,
) -> Snapshot:
    return Snapshot(
        records=create_demo_records(today, history_weeks),
        names={athlete_id: info[0] for athlete_id, info in DEMO_ATHLETES.items()},
        thresholds=Thresholds(),
    )
