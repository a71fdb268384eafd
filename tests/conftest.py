"""Shared fixtures for loadwatch tests."""

from datetime import date, timedelta

import pytest

from loadwatch.config import get_settings
from loadwatch.models import AthleteRecord, DailyWellness, Session
from loadwatch.weeks import week_dates

# A Monday
WEEK = date(2024, 1, 15)


def fill_week(record, start, session=None, wellness=None):
    """Put the same session and wellness entry on every day of a week."""
    for day in week_dates(start):
        if session is not None:
            record.sessions[day] = [session]
        if wellness is not None:
            record.wellness[day] = wellness
    return record


@pytest.fixture
def monday():
    return WEEK


@pytest.fixture
def steady_record():
    """One week of 60 min at intensity 5 with neutral wellness every day."""
    return fill_week(
        AthleteRecord(),
        WEEK,
        session=Session(duration=60, intensity=5),
        wellness=DailyWellness(sleep_quality=4, energy=4, pain=4, stress=4, mood=4),
    )


@pytest.fixture
def history_record():
    """Four weeks of good sleep (quality 6, 8 hours) before WEEK, low symptoms."""
    record = AthleteRecord()
    good = DailyWellness(sleep_quality=6, energy=6, pain=2, stress=2, mood=6, sleep_duration=8)
    for k in range(1, 5):
        fill_week(record, WEEK - timedelta(days=7 * k), wellness=good)
    return record


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
