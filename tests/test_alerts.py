"""Tests for strain zones and baseline alerts."""

from datetime import timedelta

import pytest

from conftest import WEEK, fill_week
from loadwatch.alerts import (
    AlertFlag,
    AlertReport,
    StrainZone,
    evaluate_alerts,
    evaluate_day_alerts,
    strain_zone,
)
from loadwatch.baselines import Baseline, calculate_baselines
from loadwatch.config import Thresholds
from loadwatch.models import DailyWellness
from loadwatch.weekly import WeeklyMetrics, weekly_metrics
from loadwatch.weeks import week_dates


def make_metrics(strain=0.0, sleep=0.0, symptoms=0.0, hours=0.0):
    return WeeklyMetrics(
        strain=strain,
        sleep_quality_mean=sleep,
        symptom_burden_mean=symptoms,
        sleep_duration_mean=hours,
    )


FULL_BASELINE = Baseline(sleep_base=8.0, symptom_base=8.0, sleep_hours_base=8.0)


class TestStrainZone:
    """Tests for the fixed strain cut-points."""

    @pytest.mark.parametrize(
        "strain,expected",
        [
            (0, StrainZone.GREEN),
            (5999.9, StrainZone.GREEN),
            (6000, StrainZone.AMBER),
            (7000, StrainZone.AMBER),
            (8000, StrainZone.AMBER),
            (8000.1, StrainZone.RED),
            (14700, StrainZone.RED),
        ],
    )
    def test_boundaries(self, strain, expected):
        assert strain_zone(strain) == expected

    def test_strain_threshold_does_not_move_zones(self):
        """Configuring strain_max leaves zone classification unchanged."""
        thresholds = Thresholds(strain_max=3000)
        report = evaluate_alerts(make_metrics(strain=5000), Baseline(), thresholds)
        assert report.zone == StrainZone.GREEN


class TestEvaluateAlerts:
    """Tests for evaluate_alerts."""

    def test_no_baseline_never_flags(self):
        """Missing baselines suppress every comparison."""
        report = evaluate_alerts(make_metrics(sleep=0, symptoms=100, hours=0), Baseline())
        assert report.flags == frozenset()

    def test_no_sleep_baseline_never_flags_sleep(self):
        """sleep_base None means no sleep quality flag whatever the current value."""
        baseline = Baseline(sleep_base=None, symptom_base=8.0, sleep_hours_base=8.0)
        for sleep in (0.0, 1.0, 7.0):
            report = evaluate_alerts(make_metrics(sleep=sleep, symptoms=8, hours=8), baseline)
            assert AlertFlag.SLEEP_QUALITY_DOWN not in report.flags

    def test_stable_week(self):
        """Values at baseline raise nothing."""
        report = evaluate_alerts(make_metrics(sleep=8, symptoms=8, hours=8), FULL_BASELINE)
        assert not report.has_flags

    def test_sleep_quality_drop(self):
        """A 25% drop is above the default 20%."""
        report = evaluate_alerts(make_metrics(sleep=6, symptoms=8, hours=8), FULL_BASELINE)
        assert report.flags == frozenset({AlertFlag.SLEEP_QUALITY_DOWN})

    def test_symptoms_increase(self):
        """A 31.25% rise is above the default 25%."""
        report = evaluate_alerts(make_metrics(sleep=8, symptoms=10.5, hours=8), FULL_BASELINE)
        assert report.flags == frozenset({AlertFlag.SYMPTOMS_UP})

    def test_symptoms_increase_is_strict(self):
        """Exactly 25% is not above 25%."""
        report = evaluate_alerts(make_metrics(sleep=8, symptoms=10, hours=8), FULL_BASELINE)
        assert AlertFlag.SYMPTOMS_UP not in report.flags

    def test_sleep_hours_drop(self):
        """Losing 2 of 8 hours is a 25% drop."""
        report = evaluate_alerts(make_metrics(sleep=8, symptoms=8, hours=6), FULL_BASELINE)
        assert report.flags == frozenset({AlertFlag.SLEEP_HOURS_DOWN})

    def test_comparisons_are_strict(self):
        """A drop equal to the threshold does not flag."""
        thresholds = Thresholds(sleep_drop_pct=25, sleep_hours_drop_pct=25)
        report = evaluate_alerts(make_metrics(sleep=6, symptoms=8, hours=6), FULL_BASELINE, thresholds)
        assert not report.has_flags

    def test_improvements_never_flag(self):
        """Better sleep and fewer symptoms raise nothing."""
        report = evaluate_alerts(make_metrics(sleep=10, symptoms=2, hours=10), FULL_BASELINE)
        assert not report.has_flags

    def test_flags_are_independent(self):
        """All three flags can be raised together, zone unaffected."""
        report = evaluate_alerts(
            make_metrics(strain=1000, sleep=4, symptoms=14, hours=4), FULL_BASELINE
        )
        assert report.zone == StrainZone.GREEN
        assert report.flags == frozenset(AlertFlag)
        assert report.ordered_flags == [
            AlertFlag.SLEEP_QUALITY_DOWN,
            AlertFlag.SYMPTOMS_UP,
            AlertFlag.SLEEP_HOURS_DOWN,
        ]

    def test_custom_thresholds(self):
        """A looser threshold silences a 25% drop."""
        thresholds = Thresholds(sleep_drop_pct=30)
        report = evaluate_alerts(make_metrics(sleep=6, symptoms=8, hours=8), FULL_BASELINE, thresholds)
        assert not report.has_flags

    def test_to_dict(self):
        report = AlertReport(zone=StrainZone.RED, flags=frozenset({AlertFlag.SYMPTOMS_UP}))
        assert report.to_dict() == {"zone": "red", "flags": ["symptoms_up"]}

    def test_flag_labels(self):
        assert AlertFlag.SLEEP_HOURS_DOWN.label == "Sleep hours ↓"


class TestEvaluateDayAlerts:
    """Tests for single-day comparisons."""

    def test_bad_night(self):
        """A poor night against a good baseline flags sleep quality and hours."""
        day = DailyWellness(sleep_quality=3, sleep_duration=5, energy=7, pain=3, stress=3, mood=7)
        flags = evaluate_day_alerts(day, FULL_BASELINE)
        assert flags == frozenset({AlertFlag.SLEEP_QUALITY_DOWN, AlertFlag.SLEEP_HOURS_DOWN})

    def test_no_baseline(self):
        assert evaluate_day_alerts(DailyWellness(sleep_quality=1), Baseline()) == frozenset()


class TestEndToEnd:
    """Full pipeline from records to alerts."""

    def test_steady_week_is_red(self, steady_record):
        """Seven equal 60 min / intensity 5 days land in the red zone."""
        metrics = weekly_metrics(week_dates(WEEK), steady_record)
        baseline = calculate_baselines(steady_record, WEEK)
        report = evaluate_alerts(metrics, baseline, Thresholds())

        assert metrics.total_load == 2100
        assert metrics.monotony == 7
        assert metrics.strain == 14700
        assert metrics.mean_health == 56
        assert report.zone == StrainZone.RED
        assert report.flags == frozenset()

    def test_decline_against_history(self, history_record):
        """Poor sleep after four good weeks raises the sleep flags."""
        poor = DailyWellness(sleep_quality=3, energy=3, pain=5, stress=5, mood=3, sleep_duration=5)
        fill_week(history_record, WEEK, wellness=poor)

        metrics = weekly_metrics(week_dates(WEEK), history_record)
        baseline = calculate_baselines(history_record, WEEK)
        report = evaluate_alerts(metrics, baseline)

        assert report.flags == frozenset(AlertFlag)
