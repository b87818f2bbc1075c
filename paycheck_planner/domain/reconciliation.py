"""Reconciliation of a schedule against recorded transactions"""

from dataclasses import replace
from datetime import date, timedelta
from typing import Collection, List, Sequence, Tuple

from paycheck_planner.domain.models import (
    PaycheckPeriod,
    PaymentScheduleItem,
    PaymentType,
    Transaction,
    UnassignedPayment,
)


def _matches(payment: PaymentScheduleItem, transaction: Transaction) -> bool:
    if payment.type in (PaymentType.DEBT, PaymentType.EXTRA_DEBT):
        return transaction.debt_id == payment.id
    if payment.type is PaymentType.BILL:
        return transaction.bill_id == payment.id
    return False


def is_payment_paid(
    payment: PaymentScheduleItem,
    transactions: Sequence[Transaction],
    match_window_days: int = 7,
) -> bool:
    """True when the transaction closest to the due date lies within match_window_days"""
    relevant = [t for t in transactions if _matches(payment, t)]
    if not relevant:
        return False

    closest = min(relevant, key=lambda t: abs((t.date - payment.due_date).days))
    return abs((closest.date - payment.due_date).days) <= match_window_days


def mark_paid(
    periods: Sequence[PaycheckPeriod],
    transactions: Sequence[Transaction],
    as_of: date,
    match_window_days: int = 7,
    match_horizon_days: int = 60,
) -> List[PaycheckPeriod]:
    """
    Flag payments covered by a matching transaction.

    Payments already marked paid are kept as they are; payments due more
    than match_horizon_days after as_of are not checked.
    """
    horizon = as_of + timedelta(days=match_horizon_days)
    reconciled = []
    for period in periods:
        payments = tuple(
            replace(payment, is_paid=True)
            if not payment.is_paid
            and payment.due_date <= horizon
            and is_payment_paid(payment, transactions, match_window_days)
            else payment
            for payment in period.payments
        )
        reconciled.append(replace(period, payments=payments))
    return reconciled


def split_active_history(
    periods: Sequence[PaycheckPeriod], as_of: date
) -> Tuple[List[PaycheckPeriod], List[PaycheckPeriod]]:
    """
    Separate periods still needing attention from completed ones.

    A past period is history once it has no payments or all of them are
    paid. History is returned most recent first.
    """
    active: List[PaycheckPeriod] = []
    history: List[PaycheckPeriod] = []
    for period in periods:
        settled = all(p.is_paid for p in period.payments)
        if period.paycheck_date < as_of and settled:
            history.append(period)
        else:
            active.append(period)

    history.sort(key=lambda p: p.paycheck_date, reverse=True)
    return active, history


def separate_dismissed(
    unassigned: Sequence[UnassignedPayment], dismissed_keys: Collection[str]
) -> Tuple[List[UnassignedPayment], List[UnassignedPayment]]:
    """Return (still_unassigned, dismissed)"""
    kept = [u for u in unassigned if u.key not in dismissed_keys]
    dismissed = [u for u in unassigned if u.key in dismissed_keys]
    return kept, dismissed
