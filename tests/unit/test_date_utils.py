"""Unit tests for calendar helpers"""

import pytest
from datetime import date
from paycheck_planner.domain.exceptions import InvalidDayOfMonthError
from paycheck_planner.utils.date_utils import add_months, days_between, monthly_occurrences, next_occurrence


def test_next_occurrence_same_day_counts():
    assert next_occurrence(15, date(2025, 1, 15)) == date(2025, 1, 15)


def test_next_occurrence_rolls_to_next_month_when_passed():
    assert next_occurrence(10, date(2025, 1, 15)) == date(2025, 2, 10)


def test_next_occurrence_rolls_over_year_end():
    assert next_occurrence(5, date(2025, 12, 20)) == date(2026, 1, 5)


def test_next_occurrence_clamps_to_short_month():
    """Day 31 in a 30-day month falls on the 30th"""
    assert next_occurrence(31, date(2025, 4, 10)) == date(2025, 4, 30)


def test_next_occurrence_leap_year_february():
    assert next_occurrence(31, date(2024, 2, 1)) == date(2024, 2, 29)
    assert next_occurrence(30, date(2025, 2, 1)) == date(2025, 2, 28)


def test_next_occurrence_clamped_day_into_next_month():
    """Day 30 from Feb 28 2025 is Feb 28 itself (clamped, not passed)"""
    assert next_occurrence(30, date(2025, 2, 28)) == date(2025, 2, 28)


@pytest.mark.parametrize("day", [0, 32, -1])
def test_next_occurrence_rejects_invalid_day(day):
    with pytest.raises(InvalidDayOfMonthError):
        next_occurrence(day, date(2025, 1, 1))


def test_monthly_occurrences_keep_requested_day_after_short_month():
    """Feb clamps to the 28th, March returns to the 31st"""
    occurrences = list(monthly_occurrences(31, date(2025, 1, 10), date(2025, 4, 10)))
    assert occurrences == [date(2025, 1, 31), date(2025, 2, 28), date(2025, 3, 31)]


def test_monthly_occurrences_until_is_inclusive():
    occurrences = list(monthly_occurrences(10, date(2025, 1, 10), date(2025, 3, 10)))
    assert occurrences == [date(2025, 1, 10), date(2025, 2, 10), date(2025, 3, 10)]


def test_add_months_clamps():
    assert add_months(date(2025, 3, 31), -1) == date(2025, 2, 28)
    assert add_months(date(2024, 3, 31), -1) == date(2024, 2, 29)
    assert add_months(date(2025, 1, 10), 3) == date(2025, 4, 10)


def test_days_between_sign():
    assert days_between(date(2025, 1, 15), date(2025, 1, 10)) == 5
    assert days_between(date(2025, 1, 10), date(2025, 1, 15)) == -5
