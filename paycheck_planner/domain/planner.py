"""Paycheck planner - main entry point composing calendar, locking, scheduling and reconciliation"""

from datetime import date
from typing import Collection, Sequence

from paycheck_planner.domain.locking import collect_new_payments, partition_periods
from paycheck_planner.domain.models import (
    Bill,
    BudgetCategory,
    Debt,
    PaycheckSettings,
    PlanResult,
    StoredScheduledPayment,
    Transaction,
)
from paycheck_planner.domain.paychecks import build_paychecks
from paycheck_planner.domain.reconciliation import mark_paid, separate_dismissed, split_active_history
from paycheck_planner.domain.scheduler import schedule


def build_plan(
    paychecks: Sequence[PaycheckSettings],
    bills: Sequence[Bill],
    debts: Sequence[Debt],
    budget_categories: Sequence[BudgetCategory],
    debt_strategy: str,
    household_extra_payment: float,
    as_of: date,
    stored_payments: Sequence[StoredScheduledPayment] = (),
    transactions: Sequence[Transaction] = (),
    dismissed_keys: Collection[str] = (),
    lookback_months: int = 6,
    horizon_months: int = 3,
    lock_threshold_days: int = 7,
    early_threshold_days: int = 5,
    match_window_days: int = 7,
    match_horizon_days: int = 60,
) -> PlanResult:
    """
    Produce the household payment plan as of a given day.

    Flow:
    1. Expand paycheck settings into dated paychecks (lookback to horizon)
    2. Lock past/imminent paychecks to their stored payments
    3. Schedule obligations into the unlocked paychecks, skipping
       occurrences already funded by a locked paycheck
    4. Mark payments paid from transactions
    5. Split periods into active and history, unassigned into kept and dismissed
    """
    dated = build_paychecks(paychecks, as_of, lookback_months, horizon_months)
    partitioned = partition_periods(dated, stored_payments, as_of, lock_threshold_days)

    result = schedule(
        partitioned.unlocked,
        bills,
        debts,
        budget_categories,
        debt_strategy,
        household_extra_payment,
        as_of,
        horizon_months=horizon_months,
        early_threshold_days=early_threshold_days,
        exclude_keys=partitioned.locked_keys,
    )
    new_payments = collect_new_payments(result.schedule, stored_payments)

    periods = mark_paid(
        partitioned.locked + result.schedule,
        transactions,
        as_of,
        match_window_days=match_window_days,
        match_horizon_days=match_horizon_days,
    )
    active, history = split_active_history(periods, as_of)
    unassigned, dismissed = separate_dismissed(result.unassigned, dismissed_keys)

    return PlanResult(
        active=active,
        history=history,
        unassigned=unassigned,
        dismissed=dismissed,
        new_scheduled_payments=new_payments,
        extra_shortfall=result.extra_shortfall,
    )
