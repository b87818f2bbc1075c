"""Domain models - pure Python dataclasses representing household obligations and paychecks"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum, IntEnum
from typing import List, Optional, Tuple


class PaymentType(str, Enum):
    BILL = "bill"
    DEBT = "debt"
    EXTRA_DEBT = "extra-debt"
    BUDGET = "budget"


class PaymentStatus(str, Enum):
    ON_TIME = "on-time"
    LATE = "late"
    EARLY = "early"


class Priority(IntEnum):
    """Funding order: fixed obligations claim paycheck capacity before discretionary ones"""

    FIXED = 1
    DISCRETIONARY = 2

    @classmethod
    def for_type(cls, payment_type: PaymentType) -> "Priority":
        if payment_type is PaymentType.BUDGET:
            return cls.DISCRETIONARY
        return cls.FIXED


def payment_key(payment_type: PaymentType, obligation_id: str, due_date: date) -> str:
    """Identity of one monthly occurrence of an obligation, e.g. bill-42-2026-11-15"""
    return f"{payment_type.value}-{obligation_id}-{due_date.isoformat()}"


@dataclass(frozen=True)
class Bill:
    """Recurring monthly bill"""

    id: str
    company: str
    amount: float
    due_date: int  # day of month


@dataclass(frozen=True)
class Debt:
    """Debt account with a monthly minimum payment"""

    id: str
    name: str
    minimum_payment: float
    payment_day: int  # day of month
    current_balance: float
    interest_rate: float
    extra_payment: float = 0.0


@dataclass(frozen=True)
class BudgetCategory:
    """Discretionary monthly spending envelope"""

    id: str
    name: str
    monthly_amount: float
    due_date: int  # day of month


@dataclass(frozen=True)
class Paycheck:
    """Single dated paycheck"""

    date: date
    name: str
    id: str
    amount: float


@dataclass(frozen=True)
class PaymentScheduleItem:
    """One (possibly partial) payment placed into a paycheck period"""

    id: str
    name: str
    amount: float
    due_date: date
    type: PaymentType
    status: PaymentStatus
    is_split: bool = False
    split_part: Optional[str] = None  # "k/N"
    is_focus_debt: bool = False
    is_paid: bool = False

    @property
    def key(self) -> str:
        return payment_key(self.type, self.id, self.due_date)


@dataclass(frozen=True)
class PaycheckPeriod:
    """
    Funding capacity of one paycheck and the payments placed into it.

    Immutable: use apply_payment() to obtain the next state.
    """

    paycheck_date: date
    paycheck_name: str
    paycheck_id: str
    total_income: float
    total_payments: float = 0.0
    payments: Tuple[PaymentScheduleItem, ...] = ()
    # Derived: total_income - total_payments
    remaining: float = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "remaining", self.total_income - self.total_payments)

    @classmethod
    def from_paycheck(cls, paycheck: Paycheck) -> "PaycheckPeriod":
        """Fresh period with full capacity"""
        return cls(
            paycheck_date=paycheck.date,
            paycheck_name=paycheck.name,
            paycheck_id=paycheck.id,
            total_income=paycheck.amount,
        )


@dataclass(frozen=True)
class PendingPayment:
    """One monthly occurrence of an obligation awaiting assignment"""

    id: str
    name: str
    amount: float
    original_amount: float
    due_date: date
    billing_cycle_start: date
    type: PaymentType
    is_debt: bool
    interest_rate: Optional[float] = None

    @property
    def key(self) -> str:
        return payment_key(self.type, self.id, self.due_date)

    @property
    def priority(self) -> Priority:
        return Priority.for_type(self.type)


@dataclass(frozen=True)
class UnassignedPayment:
    """Obligation (or remainder of one) that no paycheck could cover"""

    id: str
    name: str
    amount: float
    due_date: date
    type: PaymentType

    @property
    def key(self) -> str:
        return payment_key(self.type, self.id, self.due_date)


@dataclass
class ScheduleResult:
    """Output of a scheduling run"""

    schedule: List[PaycheckPeriod]
    unassigned: List[UnassignedPayment]
    extra_shortfall: float = 0.0


@dataclass(frozen=True)
class PaycheckSettings:
    """Recurring paycheck definition anchored on its next pay date"""

    id: str
    name: str
    net_pay_amount: float
    frequency: str  # weekly | biweekly | semimonthly | monthly
    next_paycheck_date: date
    is_active: bool = True


@dataclass(frozen=True)
class StoredScheduledPayment:
    """Payment persisted by the caller from an earlier run"""

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


@dataclass(frozen=True)
class Transaction:
    """Bank or manual transaction used to detect paid obligations"""

    id: str
    date: date
    amount: float
    debt_id: Optional[str] = None
    bill_id: Optional[str] = None


@dataclass
class PlanResult:
    """Output of a full planning run"""

    active: List[PaycheckPeriod]
    history: List[PaycheckPeriod]
    unassigned: List[UnassignedPayment]
    dismissed: List[UnassignedPayment]
    new_scheduled_payments: List[StoredScheduledPayment] = field(default_factory=list)
    extra_shortfall: float = 0.0
