"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import List, Optional


class PaymentMode(str, Enum):
    """How a collection was paid"""

    CASH = "cash"
    CARD = "card"
    MOBILE_WALLET = "mobile-wallet"
    BANK_TRANSFER = "bank-transfer"


class SchemeFrequency(str, Enum):
    """Contribution cadence of a scheme"""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    LUMPSUM = "lumpsum"


class SchemeStatus(str, Enum):
    """Lifecycle of a customer's enrollment"""

    ACTIVE = "active"
    COMPLETED = "completed"
    PAUSED = "paused"


@dataclass
class Scheme:
    """Payment plan template offered to customers"""

    id: str
    name: str
    interest_rate: float  # percent per year
    min_amount: float
    max_amount: float
    duration: int  # days
    frequency: SchemeFrequency
    description: str = ""


@dataclass
class UserScheme:
    """A customer's enrollment in a scheme"""

    id: str
    user_id: str
    scheme_type: str  # human-readable scheme name
    start_date: date
    duration: int  # days
    total_amount: float
    interest_rate: float
    current_balance: float = 0.0
    status: SchemeStatus = SchemeStatus.ACTIVE
    daily_amount: Optional[float] = None


@dataclass
class Transaction:
    """Single payment recorded against a user scheme"""

    id: str
    user_id: str
    scheme_id: str
    amount: float
    date: datetime
    payment_mode: PaymentMode
    interest: float = 0.0
    remarks: Optional[str] = None
    receipt_number: Optional[str] = None


@dataclass
class User:
    """Customer record"""

    id: str
    name: str
    created_at: datetime
    mobile_number: str = ""
    employee_id: str = ""
    status: str = "active"


@dataclass
class BonusPayment:
    """Payment with its weekly bonus applied (derived, never persisted here)"""

    user_id: str
    scheme_id: str
    date: datetime
    amount: float
    bonus: float
    total_amount: float
    week: int
    year: int


@dataclass(frozen=True)
class WeekNumber:
    """ISO-style week of the year"""

    year: int
    week: int


@dataclass
class BonusStatus:
    """Where a customer stands in the weekly payment cycle"""

    next_payment_due: Optional[datetime]
    is_payment_due: bool
    is_eligible_for_bonus: bool


@dataclass
class SchemeProgress:
    """How far a user scheme is towards its target"""

    total_paid: float
    remaining_amount: float
    completion_percentage: float
    days_remaining: int


@dataclass
class SeriesPoint:
    """One labelled point of a chart series"""

    label: str
    value: float


@dataclass
class Distribution:
    """Parallel labels/values for pie and bar charts"""

    labels: List[str] = field(default_factory=list)
    values: List[float] = field(default_factory=list)


@dataclass
class ReportFilter:
    """Optional drill-down filters applied to a report"""

    amount_min: Optional[float] = None
    amount_max: Optional[float] = None
    payment_mode: Optional[PaymentMode] = None
    user_id: Optional[str] = None
    scheme_type: Optional[str] = None
    month: Optional[str] = None  # short month label, e.g. "Mar"


@dataclass
class ReportStats:
    """Headline figures for a set of transactions"""

    total_transactions: int
    total_amount: float
    avg_transaction_amount: float
    unique_customers: int
    total_interest: float
    cash_payments: int
    online_payments: int


@dataclass
class DashboardStats:
    """Figures shown on the landing dashboard"""

    total_customers: int
    active_schemes: int
    completed_cycles: int
    total_investment: float
    today_collection: float
    pending_dues: float
    monthly_growth: float
