"""Tests for StudyStreakCalculator domain service."""

from datetime import UTC, date, datetime, timedelta, timezone

from lang_portal.domain.study.services import StudyStreakCalculator


class TestStudyStreakCalculator:
    def test_no_dates(self) -> None:
        assert StudyStreakCalculator.calculate([]) == 0

    def test_single_day(self) -> None:
        assert StudyStreakCalculator.calculate([date(2024, 3, 10)]) == 1

    def test_consecutive_days(self) -> None:
        dates = [date(2024, 3, 10), date(2024, 3, 9), date(2024, 3, 8)]
        assert StudyStreakCalculator.calculate(dates) == 3

    def test_stops_at_first_gap(self) -> None:
        dates = [date(2024, 3, 10), date(2024, 3, 9), date(2024, 3, 7), date(2024, 3, 6)]
        assert StudyStreakCalculator.calculate(dates) == 2

    def test_duplicates_and_order_do_not_matter(self) -> None:
        dates = [date(2024, 3, 8), date(2024, 3, 10), date(2024, 3, 9), date(2024, 3, 10)]
        assert StudyStreakCalculator.calculate(dates) == 3

    def test_gap_right_after_latest_day(self) -> None:
        dates = [date(2024, 3, 10), date(2024, 3, 1), date(2024, 2, 29)]
        assert StudyStreakCalculator.calculate(dates) == 1

    def test_from_timestamps_uses_utc_days(self) -> None:
        plus_two = timezone(timedelta(hours=2))
        timestamps = [
            datetime(2024, 3, 10, 23, 30, tzinfo=UTC),
            # 2024-03-10 00:30 at UTC+2 is still 2024-03-09 in UTC
            datetime(2024, 3, 10, 0, 30, tzinfo=plus_two),
            datetime(2024, 3, 8, 12, 0, tzinfo=UTC),
        ]
        assert StudyStreakCalculator.from_timestamps(timestamps) == 3

    def test_naive_timestamps_are_treated_as_utc(self) -> None:
        timestamps = [datetime(2024, 3, 10, 1, 0), datetime(2024, 3, 9, 23, 0)]
        assert StudyStreakCalculator.from_timestamps(timestamps) == 2
