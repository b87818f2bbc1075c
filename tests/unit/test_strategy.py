"""Unit tests for focus debt selection"""

from paycheck_planner.domain.models import Debt
from paycheck_planner.domain.strategy import select_focus_debt


def _debt(debt_id: str, rate: float, balance: float) -> Debt:
    return Debt(
        id=debt_id,
        name=debt_id,
        minimum_payment=25.0,
        payment_day=1,
        current_balance=balance,
        interest_rate=rate,
    )


def test_both_strategies_agree():
    debts = [_debt("A", 5.0, 1000.0), _debt("B", 9.0, 500.0)]

    assert select_focus_debt(debts, "avalanche").id == "B"  # highest rate
    assert select_focus_debt(debts, "snowball").id == "B"  # lowest balance


def test_strategies_disagree():
    debts = [_debt("A", 5.0, 200.0), _debt("B", 9.0, 1000.0)]

    assert select_focus_debt(debts, "avalanche").id == "B"
    assert select_focus_debt(debts, "snowball").id == "A"


def test_paid_off_debts_are_ignored():
    debts = [_debt("A", 30.0, 0.0), _debt("B", 9.0, 1000.0)]

    assert select_focus_debt(debts, "avalanche").id == "B"


def test_no_focus_debt_for_unknown_strategy_or_no_balance():
    assert select_focus_debt([_debt("A", 5.0, 200.0)], "custom") is None
    assert select_focus_debt([_debt("A", 5.0, 0.0)], "avalanche") is None
    assert select_focus_debt([], "snowball") is None


def test_ties_go_to_first_listed():
    debts = [_debt("A", 9.0, 500.0), _debt("B", 9.0, 500.0)]

    assert select_focus_debt(debts, "avalanche").id == "A"
    assert select_focus_debt(debts, "snowball").id == "A"
