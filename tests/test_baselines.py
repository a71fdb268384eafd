"""Tests for trailing baselines."""

from datetime import date, timedelta

import pytest

from conftest import WEEK, fill_week
from loadwatch.baselines import Baseline, calculate_baselines, positive_average
from loadwatch.models import AthleteRecord, DailyWellness


class TestPositiveAverage:
    """Tests for positive_average."""

    def test_ignores_non_positive(self):
        assert positive_average([0.0, 4.0, 0.0, 6.0]) == 5.0

    def test_none_when_nothing_positive(self):
        assert positive_average([0.0, 0.0]) is None
        assert positive_average([]) is None


class TestCalculateBaselines:
    """Tests for calculate_baselines."""

    def test_no_history(self):
        """No historical data gives no baseline at all."""
        baseline = calculate_baselines(AthleteRecord(), WEEK)
        assert baseline == Baseline(sleep_base=None, symptom_base=None, sleep_hours_base=None)
        assert baseline.is_empty

    def test_current_week_excluded(self, steady_record):
        """Data in the reference week never feeds its own baseline."""
        assert calculate_baselines(steady_record, WEEK).is_empty

    def test_full_history(self, history_record):
        """Four identical weeks give that week's means."""
        baseline = calculate_baselines(history_record, WEEK)

        assert baseline.sleep_base == pytest.approx(6.0)
        assert baseline.sleep_hours_base == pytest.approx(8.0)
        # fatigue 2 + pain 2 + stress 2 + low mood 2
        assert baseline.symptom_base == pytest.approx(8.0)

    def test_empty_weeks_do_not_dilute(self):
        """Only weeks with data are averaged."""
        record = fill_week(
            AthleteRecord(), WEEK - timedelta(days=7), wellness=DailyWellness(sleep_quality=6)
        )
        baseline = calculate_baselines(record, WEEK, weeks=4)

        assert baseline.sleep_base == pytest.approx(6.0)
        assert baseline.symptom_base is None
        assert baseline.sleep_hours_base is None

    def test_averages_weekly_means(self):
        """Baseline is the mean of the weekly means."""
        record = AthleteRecord()
        fill_week(record, WEEK - timedelta(days=7), wellness=DailyWellness(sleep_quality=6))
        fill_week(record, WEEK - timedelta(days=14), wellness=DailyWellness(sleep_quality=4))

        assert calculate_baselines(record, WEEK).sleep_base == pytest.approx(5.0)

    def test_partial_week(self):
        """A week with one reported night averages over all seven days."""
        record = AthleteRecord(wellness={
            WEEK - timedelta(days=3): DailyWellness(sleep_quality=7),
        })
        assert calculate_baselines(record, WEEK).sleep_base == pytest.approx(1.0)

    def test_window_length(self):
        """Weeks older than the window are ignored."""
        record = fill_week(
            AthleteRecord(), WEEK - timedelta(days=35), wellness=DailyWellness(sleep_quality=6)
        )
        assert calculate_baselines(record, WEEK, weeks=4).sleep_base is None
        assert calculate_baselines(record, WEEK, weeks=5).sleep_base == pytest.approx(6.0)

    def test_zero_weeks(self, history_record):
        """No trailing weeks means no baseline."""
        assert calculate_baselines(history_record, WEEK, weeks=0).is_empty

    def test_mid_week_anchor(self, history_record):
        """Any date in the reference week gives the same baseline."""
        wednesday = WEEK + timedelta(days=2)
        assert calculate_baselines(history_record, wednesday) == calculate_baselines(
            history_record, WEEK
        )

    def test_to_dict(self):
        assert Baseline(sleep_base=5.0).to_dict() == {
            "sleep_base": 5.0,
            "symptom_base": None,
            "sleep_hours_base": None,
        }

    def test_window_reaching_past_first_calendar_week(self):
        """Only weeks that exist on the calendar are used."""
        assert calculate_baselines(AthleteRecord(), date(1, 1, 17), weeks=10).is_empty

    def test_oversized_window_is_capped(self, history_record):
        """A huge week count neither raises nor changes the result."""
        baseline = calculate_baselines(history_record, WEEK, weeks=200000)
        assert baseline == calculate_baselines(history_record, WEEK, weeks=4)
