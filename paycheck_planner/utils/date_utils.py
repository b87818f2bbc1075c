"""Date manipulation utilities"""

import calendar
from datetime import date
from typing import Iterator

from dateutil.relativedelta import relativedelta

from paycheck_planner.domain.exceptions import InvalidDayOfMonthError


def add_months(from_date: date, months: int) -> date:
    """Shift by calendar months, clamping the day to the target month length"""
    return from_date + relativedelta(months=months)


def days_between(later: date, earlier: date) -> int:
    """Whole days from earlier to later (negative when later is before earlier)"""
    return (later - earlier).days


def _day_in_month(year: int, month: int, day_of_month: int) -> date:
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day_of_month, last_day))


def next_occurrence(day_of_month: int, from_date: date) -> date:
    """
    Next date on or after from_date that falls on day_of_month.

    Months shorter than day_of_month clamp to their last day, so day 31
    resolves to Apr 30 or Feb 28/29.

    Raises:
        InvalidDayOfMonthError: day_of_month outside 1..31
    """
    if not 1 <= day_of_month <= 31:
        raise InvalidDayOfMonthError(f"Day of month must be 1-31, got {day_of_month}")

    candidate = _day_in_month(from_date.year, from_date.month, day_of_month)
    if candidate < from_date:
        following = add_months(from_date.replace(day=1), 1)
        candidate = _day_in_month(following.year, following.month, day_of_month)
    return candidate


def monthly_occurrences(day_of_month: int, from_date: date, until: date) -> Iterator[date]:
    """
    Yield monthly occurrences of day_of_month from from_date through until (inclusive).

    Every occurrence is anchored on the requested day rather than on the
    previous (possibly clamped) occurrence: day 31 gives Jan 31, Feb 28, Mar 31.
    """
    first = next_occurrence(day_of_month, from_date)
    month_start = first.replace(day=1)
    offset = 0
    current = first
    while current <= until:
        yield current
        offset += 1
        shifted = add_months(month_start, offset)
        current = _day_in_month(shifted.year, shifted.month, day_of_month)
