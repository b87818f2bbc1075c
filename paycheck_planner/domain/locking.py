"""Schedule locking - freezes payments for paychecks that are past or imminent"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Sequence, Set, Tuple

from paycheck_planner.domain.models import (
    Paycheck,
    PaycheckPeriod,
    PaymentScheduleItem,
    PaymentStatus,
    StoredScheduledPayment,
)


@dataclass
class LockedSchedule:
    """Periods split by whether their payments may still be rescheduled"""

    locked: List[PaycheckPeriod]
    unlocked: List[PaycheckPeriod]
    locked_keys: Set[str]


def _stored_item(stored: StoredScheduledPayment) -> PaymentScheduleItem:
    return PaymentScheduleItem(
        id=stored.payment_id,
        name=stored.payment_name,
        amount=stored.amount,
        due_date=stored.due_date,
        type=stored.payment_type,
        status=PaymentStatus.ON_TIME,
        is_split=stored.is_split,
        split_part=stored.split_part,
        is_paid=stored.is_paid,
    )


def _stored_by_paycheck(
    stored_payments: Sequence[StoredScheduledPayment],
) -> dict[Tuple[str, date], List[StoredScheduledPayment]]:
    grouped: dict[Tuple[str, date], List[StoredScheduledPayment]] = {}
    for stored in stored_payments:
        grouped.setdefault((stored.paycheck_id, stored.paycheck_date), []).append(stored)
    return grouped


def partition_periods(
    paychecks: Sequence[Paycheck],
    stored_payments: Sequence[StoredScheduledPayment],
    as_of: date,
    lock_threshold_days: int = 7,
) -> LockedSchedule:
    """
    Split paychecks into locked and unlocked periods.

    Paychecks dated before as_of + lock_threshold_days are locked and rebuilt
    from stored payments. Later paychecks start empty so they can be scheduled
    again.
    """
    lock_threshold = as_of + timedelta(days=lock_threshold_days)
    grouped = _stored_by_paycheck(stored_payments)

    locked: List[PaycheckPeriod] = []
    unlocked: List[PaycheckPeriod] = []
    locked_keys: Set[str] = set()

    for paycheck in paychecks:
        if paycheck.date >= lock_threshold:
            unlocked.append(PaycheckPeriod.from_paycheck(paycheck))
            continue

        payments = tuple(_stored_item(s) for s in grouped.get((paycheck.id, paycheck.date), []))
        total_payments = sum(p.amount for p in payments)
        locked.append(
            PaycheckPeriod(
                paycheck_date=paycheck.date,
                paycheck_name=paycheck.name,
                paycheck_id=paycheck.id,
                total_income=paycheck.amount,
                total_payments=total_payments,
                payments=payments,
            )
        )
        # A locked split part marks its whole occurrence as funded; unstored parts are not rescheduled
        locked_keys.update(p.key for p in payments)

    return LockedSchedule(locked=locked, unlocked=unlocked, locked_keys=locked_keys)


def collect_new_payments(
    periods: Sequence[PaycheckPeriod],
    stored_payments: Sequence[StoredScheduledPayment],
) -> List[StoredScheduledPayment]:
    """
    Records to store for periods that have no stored payments yet.

    A paycheck that already has stored payments keeps them; only paychecks
    scheduled for the first time produce new records.
    """
    already_stored = {(s.paycheck_id, s.paycheck_date) for s in stored_payments}
    new_payments: List[StoredScheduledPayment] = []
    for period in periods:
        if (period.paycheck_id, period.paycheck_date) in already_stored:
            continue
        for payment in period.payments:
            new_payments.append(
                StoredScheduledPayment(
                    paycheck_id=period.paycheck_id,
                    paycheck_date=period.paycheck_date,
                    payment_type=payment.type,
                    payment_id=payment.id,
                    payment_name=payment.name,
                    amount=payment.amount,
                    due_date=payment.due_date,
                    is_paid=payment.is_paid,
                    is_split=payment.is_split,
                    split_part=payment.split_part,
                )
            )
    return new_payments
