"""Paycheck calendar - expands recurring paycheck settings into dated paychecks"""

from datetime import date, timedelta
from typing import List, Sequence

from paycheck_planner.domain.exceptions import InvalidPaycheckFrequencyError
from paycheck_planner.domain.models import Paycheck, PaycheckPeriod, PaycheckSettings
from paycheck_planner.utils.date_utils import add_months

FREQUENCIES = ("weekly", "biweekly", "semimonthly", "monthly")


def step_paycheck_date(current: date, frequency: str, steps: int = 1) -> date:
    """
    Move a pay date forward (or backward for negative steps) by its frequency.

    Semimonthly is approximated as 15 days.
    """
    if frequency == "weekly":
        return current + timedelta(weeks=steps)
    elif frequency == "biweekly":
        return current + timedelta(weeks=2 * steps)
    elif frequency == "semimonthly":
        return current + timedelta(days=15 * steps)
    elif frequency == "monthly":
        return add_months(current, steps)
    raise InvalidPaycheckFrequencyError(f"Unknown paycheck frequency: {frequency!r}")


def generate_paycheck_dates(
    paycheck: PaycheckSettings,
    as_of: date,
    lookback_months: int = 6,
    horizon_months: int = 3,
) -> List[Paycheck]:
    """
    Dated paychecks from as_of - lookback_months through as_of + horizon_months.

    The anchor (next_paycheck_date) is walked backwards for past paychecks
    and forwards for upcoming ones.
    """
    if not paycheck.is_active:
        return []

    window_start = add_months(as_of, -lookback_months)
    window_end = add_months(as_of, horizon_months)
    anchor = paycheck.next_paycheck_date

    past: List[date] = []
    cursor = anchor
    while True:
        previous = step_paycheck_date(cursor, paycheck.frequency, -1)
        if previous < window_start:
            break
        past.insert(0, previous)
        cursor = previous

    upcoming: List[date] = []
    cursor = anchor
    while cursor <= window_end:
        upcoming.append(cursor)
        cursor = step_paycheck_date(cursor, paycheck.frequency)

    return [
        Paycheck(date=pay_date, name=paycheck.name, id=paycheck.id, amount=paycheck.net_pay_amount)
        for pay_date in past + upcoming
    ]


def build_paychecks(
    paychecks: Sequence[PaycheckSettings],
    as_of: date,
    lookback_months: int = 6,
    horizon_months: int = 3,
) -> List[Paycheck]:
    """All paychecks from every active setting, ordered by date"""
    dated: List[Paycheck] = []
    for settings in paychecks:
        dated.extend(generate_paycheck_dates(settings, as_of, lookback_months, horizon_months))
    return sorted(dated, key=lambda p: p.date)


def build_periods(paychecks: Sequence[Paycheck]) -> List[PaycheckPeriod]:
    """Fresh full-capacity periods for the given paychecks"""
    return [PaycheckPeriod.from_paycheck(p) for p in paychecks]
