"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field
from datetime import date
from typing import List, Literal, Optional

from paycheck_planner.domain.models import (
    Bill,
    BudgetCategory,
    Debt,
    PaycheckPeriod,
    PaycheckSettings,
    PaymentStatus,
    PaymentType,
    StoredScheduledPayment,
    Transaction,
)


class BillSchema(BaseModel):
    """Recurring monthly bill"""

    id: str = Field(..., min_length=1)
    company: str
    amount: float = Field(..., ge=0)
    due_date: int = Field(..., ge=1, le=31, description="Day of month the bill is due")

    def to_domain(self) -> Bill:
        return Bill(**self.model_dump())


class DebtSchema(BaseModel):
    """Debt with its monthly minimum"""

    id: str = Field(..., min_length=1)
    name: str
    minimum_payment: float = Field(..., ge=0)
    payment_day: int = Field(..., ge=1, le=31)
    current_balance: float
    interest_rate: float = Field(..., ge=0, description="APR in percent")
    extra_payment: float = Field(0.0, ge=0)

    def to_domain(self) -> Debt:
        return Debt(**self.model_dump())


class BudgetCategorySchema(BaseModel):
    """Discretionary monthly budget category"""

    id: str = Field(..., min_length=1)
    name: str
    monthly_amount: float = Field(..., ge=0)
    due_date: int = Field(..., ge=1, le=31)

    def to_domain(self) -> BudgetCategory:
        return BudgetCategory(**self.model_dump())


class PaycheckPeriodInput(BaseModel):
    """Paycheck to schedule into, starting at full capacity"""

    paycheck_date: date
    paycheck_name: str
    paycheck_id: str
    total_income: float = Field(..., ge=0)

    def to_domain(self) -> PaycheckPeriod:
        return PaycheckPeriod(**self.model_dump())


class PaycheckSettingsSchema(BaseModel):
    """Recurring paycheck definition"""

    id: str = Field(..., min_length=1)
    name: str
    net_pay_amount: float = Field(..., ge=0)
    frequency: Literal["weekly", "biweekly", "semimonthly", "monthly"]
    next_paycheck_date: date
    is_active: bool = True

    def to_domain(self) -> PaycheckSettings:
        return PaycheckSettings(**self.model_dump())


class StoredScheduledPaymentSchema(BaseModel):
    """Payment stored from a previous plan"""

    model_config = ConfigDict(from_attributes=True)

    paycheck_id: str
    paycheck_date: date
    payment_type: PaymentType
    payment_id: str
    payment_name: str
    amount: float
    due_date: date
    is_paid: bool = False
    is_split: bool = False
    split_part: Optional[str] = None

    def to_domain(self) -> StoredScheduledPayment:
        return StoredScheduledPayment(**self.model_dump())


class TransactionSchema(BaseModel):
    """Transaction used to detect paid obligations"""

    id: str
    date: date
    amount: float
    debt_id: Optional[str] = None
    bill_id: Optional[str] = None

    def to_domain(self) -> Transaction:
        return Transaction(**self.model_dump())


class ObligationsRequest(BaseModel):
    bills: List[BillSchema] = Field(default_factory=list)
    debts: List[DebtSchema] = Field(default_factory=list)
    budget_categories: List[BudgetCategorySchema] = Field(default_factory=list)
    debt_strategy: str = Field("", description="avalanche | snowball; anything else disables extra payments")
    household_extra_payment: float = Field(0.0, ge=0)
    as_of: Optional[date] = Field(None, description="Reference day, defaults to today")


class ScheduleRequest(ObligationsRequest):
    """Request body for POST /v1/schedule"""

    periods: List[PaycheckPeriodInput]


class PlanRequest(ObligationsRequest):
    """Request body for POST /v1/plan"""

    paychecks: List[PaycheckSettingsSchema]
    stored_payments: List[StoredScheduledPaymentSchema] = Field(default_factory=list)
    transactions: List[TransactionSchema] = Field(default_factory=list)
    dismissed_keys: List[str] = Field(default_factory=list)


class PaymentScheduleItemSchema(BaseModel):
    """Payment placed into a paycheck"""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    amount: float
    due_date: date
    type: PaymentType
    status: PaymentStatus
    is_split: bool = False
    split_part: Optional[str] = None
    is_focus_debt: bool = False
    is_paid: bool = False


class PaycheckPeriodSchema(BaseModel):
    """Paycheck with its scheduled payments"""

    model_config = ConfigDict(from_attributes=True)

    paycheck_date: date
    paycheck_name: str
    paycheck_id: str
    total_income: float
    total_payments: float
    remaining: float
    payments: List[PaymentScheduleItemSchema]


class UnassignedPaymentSchema(BaseModel):
    """Obligation no paycheck could cover"""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    amount: float
    due_date: date
    type: PaymentType
    key: str


class ScheduleResponse(BaseModel):
    """Response for POST /v1/schedule"""

    model_config = ConfigDict(from_attributes=True)

    schedule: List[PaycheckPeriodSchema]
    unassigned: List[UnassignedPaymentSchema]
    extra_shortfall: float


class PlanResponse(BaseModel):
    """Response for POST /v1/plan"""

    model_config = ConfigDict(from_attributes=True)

    active: List[PaycheckPeriodSchema]
    history: List[PaycheckPeriodSchema]
    unassigned: List[UnassignedPaymentSchema]
    dismissed: List[UnassignedPaymentSchema]
    new_scheduled_payments: List[StoredScheduledPaymentSchema]
    extra_shortfall: float
