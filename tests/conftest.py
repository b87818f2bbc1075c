"""Pytest fixtures for testing"""

import pytest
from datetime import date
from fastapi.testclient import TestClient
from paycheck_planner.api.main import create_app
from paycheck_planner.api.dependencies import get_today
from paycheck_planner.domain.models import Bill, BudgetCategory, Debt, PaycheckPeriod


# Fixed reference day so schedules do not depend on the wall clock
AS_OF = date(2025, 1, 10)


@pytest.fixture
def as_of() -> date:
    return AS_OF


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client pinned to AS_OF"""
    app = create_app()
    app.dependency_overrides[get_today] = lambda: AS_OF
    return TestClient(app)


@pytest.fixture
def make_period():
    """Factory for fresh full-capacity paycheck periods"""

    def _make(paycheck_date: date, amount: float, paycheck_id: str = "job") -> PaycheckPeriod:
        return PaycheckPeriod(
            paycheck_date=paycheck_date,
            paycheck_name="Paycheck",
            paycheck_id=paycheck_id,
            total_income=amount,
        )

    return _make


@pytest.fixture
def household_obligations() -> tuple[list[Bill], list[Debt], list[BudgetCategory]]:
    """A typical household: rent, utilities, two debts and groceries"""
    bills = [
        Bill(id="rent", company="Landlord", amount=1400.0, due_date=1),
        Bill(id="power", company="Power Co", amount=120.0, due_date=18),
    ]
    debts = [
        Debt(
            id="visa",
            name="Visa",
            minimum_payment=75.0,
            payment_day=22,
            current_balance=2400.0,
            interest_rate=24.0,
        ),
        Debt(
            id="car",
            name="Car Loan",
            minimum_payment=310.0,
            payment_day=5,
            current_balance=9000.0,
            interest_rate=6.5,
        ),
    ]
    budget_categories = [
        BudgetCategory(id="groceries", name="Groceries", monthly_amount=600.0, due_date=28),
    ]
    return bills, debts, budget_categories
