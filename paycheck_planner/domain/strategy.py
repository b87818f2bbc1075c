"""Debt payoff strategy - selects the debt that receives the household extra payment"""

from typing import Optional, Sequence
from paycheck_planner.domain.models import Debt

AVALANCHE = "avalanche"
SNOWBALL = "snowball"


def select_focus_debt(debts: Sequence[Debt], strategy: str) -> Optional[Debt]:
    """
    Pick the focus debt among debts that still carry a balance.

    - avalanche: highest interest rate
    - snowball: lowest current balance
    - anything else: no focus debt

    Ties go to the debt listed first.
    """
    active_debts = [d for d in debts if d.current_balance > 0]
    if not active_debts:
        return None

    if strategy == AVALANCHE:
        return max(active_debts, key=lambda d: d.interest_rate)
    elif strategy == SNOWBALL:
        return min(active_debts, key=lambda d: d.current_balance)

    return None
