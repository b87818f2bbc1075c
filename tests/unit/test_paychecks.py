"""Unit tests for paycheck calendar generation"""

import pytest
from datetime import date, timedelta
from paycheck_planner.domain.exceptions import InvalidPaycheckFrequencyError
from paycheck_planner.domain.models import PaycheckSettings
from paycheck_planner.domain.paychecks import (
    build_paychecks,
    build_periods,
    generate_paycheck_dates,
    step_paycheck_date,
)


def _settings(frequency: str, anchor: date, **overrides) -> PaycheckSettings:
    fields = dict(
        id="job",
        name="Day Job",
        net_pay_amount=2000.0,
        frequency=frequency,
        next_paycheck_date=anchor,
    )
    fields.update(overrides)
    return PaycheckSettings(**fields)


def test_biweekly_dates_cover_lookback_and_horizon(as_of):
    paychecks = generate_paycheck_dates(_settings("biweekly", date(2025, 1, 17)), as_of)
    dates = [p.date for p in paychecks]

    # Lookback starts 2024-07-10; the horizon ends 2025-04-10
    assert dates[0] == date(2024, 7, 19)
    assert dates[-1] == date(2025, 3, 28)
    assert date(2025, 1, 17) in dates
    assert all(later - earlier == timedelta(days=14) for earlier, later in zip(dates, dates[1:]))
    assert all(p.amount == 2000.0 and p.id == "job" for p in paychecks)


def test_monthly_dates_step_by_calendar_month(as_of):
    paychecks = generate_paycheck_dates(_settings("monthly", date(2025, 1, 31)), as_of, lookback_months=0)

    # Each step clamps from the previous date, so the 31st drifts after February
    assert [p.date for p in paychecks] == [date(2025, 1, 31), date(2025, 2, 28), date(2025, 3, 28)]


@pytest.mark.parametrize(
    "frequency, expected",
    [
        ("weekly", date(2025, 1, 17)),
        ("biweekly", date(2025, 1, 24)),
        ("semimonthly", date(2025, 1, 25)),
        ("monthly", date(2025, 2, 10)),
    ],
)
def test_step_paycheck_date(frequency, expected):
    assert step_paycheck_date(date(2025, 1, 10), frequency) == expected


def test_unknown_frequency_raises():
    with pytest.raises(InvalidPaycheckFrequencyError):
        step_paycheck_date(date(2025, 1, 10), "daily")


def test_inactive_paycheck_generates_nothing(as_of):
    assert generate_paycheck_dates(_settings("weekly", date(2025, 1, 17), is_active=False), as_of) == []


def test_build_paychecks_merges_sources_by_date(as_of):
    paychecks = build_paychecks(
        [
            _settings("monthly", date(2025, 1, 31), id="salary"),
            _settings("monthly", date(2025, 1, 15), id="side", net_pay_amount=300.0),
        ],
        as_of,
        lookback_months=0,
    )

    assert [(p.id, p.date) for p in paychecks] == [
        ("side", date(2025, 1, 15)),
        ("salary", date(2025, 1, 31)),
        ("side", date(2025, 2, 15)),
        ("salary", date(2025, 2, 28)),
        ("side", date(2025, 3, 15)),
        ("salary", date(2025, 3, 28)),
    ]

    periods = build_periods(paychecks)
    assert periods[0].total_income == 300.0
    assert periods[0].remaining == 300.0
    assert periods[0].payments == ()
