"""Paycheck allocation engine - core logic for funding obligations from upcoming paychecks"""

import logging
from dataclasses import replace
from datetime import date
from typing import Collection, List, Optional, Sequence, Tuple

from paycheck_planner.domain.models import (
    Bill,
    BudgetCategory,
    Debt,
    PaycheckPeriod,
    PaymentScheduleItem,
    PaymentStatus,
    PaymentType,
    PendingPayment,
    ScheduleResult,
    UnassignedPayment,
    payment_key,
)
from paycheck_planner.domain.strategy import select_focus_debt
from paycheck_planner.utils.date_utils import add_months, days_between, monthly_occurrences

logger = logging.getLogger(__name__)

# Remainders at or below one cent count as fully funded
EPSILON = 0.01


def apply_payment(period: PaycheckPeriod, item: PaymentScheduleItem) -> PaycheckPeriod:
    """Return the period state after funding item from it"""
    return replace(
        period,
        total_payments=period.total_payments + item.amount,
        payments=period.payments + (item,),
    )


def classify_status(due_date: date, paycheck_date: date, early_threshold_days: int = 5) -> PaymentStatus:
    """
    Timing of a paycheck relative to the due date it funds.

    - late: paycheck arrives after the due date
    - early: paycheck arrives more than early_threshold_days before it
    - on-time: otherwise
    """
    days_diff = days_between(due_date, paycheck_date)
    if days_diff < 0:
        return PaymentStatus.LATE
    elif days_diff > early_threshold_days:
        return PaymentStatus.EARLY
    return PaymentStatus.ON_TIME


def _occurrences(
    obligation_id: str,
    name: str,
    amount: float,
    day_of_month: int,
    payment_type: PaymentType,
    as_of: date,
    horizon_end: date,
    interest_rate: Optional[float] = None,
) -> List[PendingPayment]:
    pending = []
    for due_date in monthly_occurrences(day_of_month, as_of, horizon_end):
        pending.append(
            PendingPayment(
                id=obligation_id,
                name=name,
                amount=amount,
                original_amount=amount,
                due_date=due_date,
                # Fixed one-month window, never clamped to as_of
                billing_cycle_start=add_months(due_date, -1),
                type=payment_type,
                is_debt=payment_type is PaymentType.DEBT,
                interest_rate=interest_rate,
            )
        )
    return pending


def expand_obligations(
    bills: Sequence[Bill],
    debts: Sequence[Debt],
    budget_categories: Sequence[BudgetCategory],
    as_of: date,
    horizon_end: date,
    exclude_keys: Collection[str] = (),
) -> List[PendingPayment]:
    """
    Expand recurring obligations into one pending payment per monthly
    occurrence between as_of and horizon_end, in funding order.

    Funding order: fixed obligations (bills, debts) before discretionary
    budget categories, then by due date.
    """
    pending: List[PendingPayment] = []

    for bill in bills:
        pending.extend(
            _occurrences(bill.id, bill.company, bill.amount, bill.due_date, PaymentType.BILL, as_of, horizon_end)
        )
    for debt in debts:
        pending.extend(
            _occurrences(
                debt.id,
                debt.name,
                debt.minimum_payment,
                debt.payment_day,
                PaymentType.DEBT,
                as_of,
                horizon_end,
                interest_rate=debt.interest_rate,
            )
        )
    for category in budget_categories:
        pending.extend(
            _occurrences(
                category.id,
                category.name,
                category.monthly_amount,
                category.due_date,
                PaymentType.BUDGET,
                as_of,
                horizon_end,
            )
        )

    if exclude_keys:
        pending = [p for p in pending if p.key not in exclude_keys]

    return sorted(pending, key=lambda p: (p.priority, p.due_date))


def _eligible(periods: Sequence[PaycheckPeriod], cycle_start: date, due_date: date) -> List[int]:
    """Indices of periods paid inside [cycle_start, due_date]"""
    return [i for i, period in enumerate(periods) if cycle_start <= period.paycheck_date <= due_date]


def _split_portions(
    periods: Sequence[PaycheckPeriod],
    candidates: Sequence[int],
    amount: float,
) -> Tuple[List[Tuple[int, float]], float]:
    """Greedily draw amount from candidates in order; return (portions, still_needed)"""
    still_needed = amount
    portions = []
    for idx in candidates:
        if still_needed <= EPSILON:
            break
        portion = min(still_needed, periods[idx].remaining)
        if portion <= 0:
            continue
        portions.append((idx, portion))
        still_needed -= portion
    return portions, still_needed


class _Allocation:
    """Working state of one scheduling run"""

    def __init__(self, periods: Sequence[PaycheckPeriod], early_threshold_days: int):
        self.periods: List[PaycheckPeriod] = list(periods)
        self.unassigned: List[UnassignedPayment] = []
        self.early_threshold_days = early_threshold_days

    def place(
        self,
        idx: int,
        obligation_id: str,
        name: str,
        amount: float,
        due_date: date,
        payment_type: PaymentType,
        is_split: bool = False,
        split_part: Optional[str] = None,
        is_focus_debt: bool = False,
    ) -> None:
        period = self.periods[idx]
        item = PaymentScheduleItem(
            id=obligation_id,
            name=name,
            amount=amount,
            due_date=due_date,
            type=payment_type,
            status=classify_status(due_date, period.paycheck_date, self.early_threshold_days),
            is_split=is_split,
            split_part=split_part,
            is_focus_debt=is_focus_debt,
        )
        self.periods[idx] = apply_payment(period, item)

    def place_portions(
        self,
        portions: List[Tuple[int, float]],
        obligation_id: str,
        name: str,
        due_date: date,
        payment_type: PaymentType,
        is_focus_debt: bool = False,
    ) -> None:
        total_parts = len(portions)
        for part, (idx, portion) in enumerate(portions, start=1):
            self.place(
                idx,
                obligation_id,
                name,
                portion,
                due_date,
                payment_type,
                is_split=True,
                split_part=f"{part}/{total_parts}",
                is_focus_debt=is_focus_debt,
            )

    def leave_unassigned(self, payment: PendingPayment, amount: float) -> None:
        logger.debug(
            "Payment left unassigned",
            extra={"payment_key": payment.key, "amount": round(amount, 2)},
        )
        self.unassigned.append(
            UnassignedPayment(
                id=payment.id,
                name=payment.name,
                amount=amount,
                due_date=payment.due_date,
                type=payment.type,
            )
        )

    def by_remaining(self, indices: List[int]) -> List[int]:
        return sorted(indices, key=lambda i: -self.periods[i].remaining)

    def assign(self, payment: PendingPayment) -> None:
        eligible = _eligible(self.periods, payment.billing_cycle_start, payment.due_date)
        if not eligible:
            self.leave_unassigned(payment, payment.amount)
            return

        max_single_paycheck = max(self.periods[i].total_income for i in eligible)
        is_budget_item = payment.type is PaymentType.BUDGET

        # Budget items may always split (across at most 2 paychecks);
        # bills/debts split only when no single paycheck could ever cover them
        if is_budget_item or payment.amount > max_single_paycheck:
            candidates = [i for i in self.by_remaining(eligible) if self.periods[i].remaining > 0]
            if is_budget_item:
                candidates = candidates[:2]

            portions, still_needed = _split_portions(self.periods, candidates, payment.amount)
            self.place_portions(portions, payment.id, payment.name, payment.due_date, payment.type)
            if still_needed > EPSILON:
                self.leave_unassigned(payment, still_needed)
            return

        ordered = sorted(
            eligible,
            key=lambda i: (self.periods[i].remaining < payment.amount, -self.periods[i].remaining),
        )
        for idx in ordered:
            if self.periods[idx].remaining >= payment.amount:
                self.place(idx, payment.id, payment.name, payment.amount, payment.due_date, payment.type)
                return

        self.leave_unassigned(payment, payment.amount)

    def assign_extra(self, focus_debt: Debt, extra_amount: float, due_date: date) -> float:
        """Place the extra payment for one cycle; return the amount that did not fit"""
        eligible = _eligible(self.periods, add_months(due_date, -1), due_date)
        if not eligible:
            return 0.0

        ordered = self.by_remaining(eligible)
        for idx in ordered:
            if self.periods[idx].remaining >= extra_amount:
                self.place(
                    idx,
                    focus_debt.id,
                    focus_debt.name,
                    extra_amount,
                    due_date,
                    PaymentType.EXTRA_DEBT,
                    is_focus_debt=True,
                )
                return 0.0

        candidates = [i for i in ordered if self.periods[i].remaining > 0]
        portions, still_needed = _split_portions(self.periods, candidates, extra_amount)
        self.place_portions(
            portions,
            focus_debt.id,
            focus_debt.name,
            due_date,
            PaymentType.EXTRA_DEBT,
            is_focus_debt=True,
        )
        return still_needed if still_needed > EPSILON else 0.0


def schedule(
    periods: Sequence[PaycheckPeriod],
    bills: Sequence[Bill],
    debts: Sequence[Debt],
    budget_categories: Sequence[BudgetCategory],
    debt_strategy: str,
    household_extra_payment: float,
    as_of: date,
    horizon_months: int = 3,
    early_threshold_days: int = 5,
    exclude_keys: Collection[str] = (),
) -> ScheduleResult:
    """
    Assign bills, debt minimums and budget categories to paycheck periods.

    Each monthly occurrence may only be funded by a paycheck dated inside its
    billing cycle (one month before the due date through the due date).
    Fixed obligations are funded first, then discretionary budget items; a
    focus-debt extra payment is layered on afterwards from whatever capacity
    is left.

    Input periods are never modified; the returned schedule holds new period
    states in the same order.

    Args:
        periods: Paycheck periods with their starting capacity
        bills, debts, budget_categories: Recurring obligations
        debt_strategy: "avalanche" or "snowball" enables the extra-payment overlay
        household_extra_payment: Extra amount sent to the focus debt each cycle
        as_of: Reference "today"
        horizon_months: How far ahead occurrences are generated
        early_threshold_days: Days before due date after which a paycheck counts as early
        exclude_keys: Occurrence keys already funded elsewhere (locked periods)

    Returns:
        ScheduleResult with updated periods, unassigned obligations and the
        part of the extra payment that did not fit
    """
    if not periods:
        return ScheduleResult(schedule=[], unassigned=[])

    horizon_end = add_months(as_of, horizon_months)
    allocation = _Allocation(periods, early_threshold_days)

    for payment in expand_obligations(bills, debts, budget_categories, as_of, horizon_end, exclude_keys):
        allocation.assign(payment)

    extra_shortfall = 0.0
    focus_debt = select_focus_debt(debts, debt_strategy)
    if focus_debt and household_extra_payment > 0:
        for due_date in monthly_occurrences(focus_debt.payment_day, as_of, horizon_end):
            if payment_key(PaymentType.EXTRA_DEBT, focus_debt.id, due_date) in exclude_keys:
                continue
            extra_shortfall += allocation.assign_extra(focus_debt, household_extra_payment, due_date)

    if extra_shortfall > 0:
        # Kept out of unassigned
        logger.info(
            "Extra debt payment not fully placed",
            extra={"debt_id": focus_debt.id, "shortfall": round(extra_shortfall, 2)},
        )

    final_periods = [
        replace(period, payments=tuple(sorted(period.payments, key=lambda p: p.due_date)))
        for period in allocation.periods
    ]
    unassigned = [u for u in allocation.unassigned if u.due_date >= as_of]

    logger.info(
        "Schedule generated",
        extra={
            "period_count": len(final_periods),
            "placed_count": sum(len(p.payments) for p in final_periods),
            "unassigned_count": len(unassigned),
        },
    )

    return ScheduleResult(schedule=final_periods, unassigned=unassigned, extra_shortfall=extra_shortfall)
