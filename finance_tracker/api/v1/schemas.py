"""Pydantic schemas for API request/response validation"""

from dataclasses import asdict
from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from finance_tracker.domain.models import (
    PaymentMode,
    ReportFilter,
    SchemeStatus,
    Transaction,
    User,
    UserScheme,
)


class UserSchemeSchema(BaseModel):
    """A customer's enrollment in a scheme"""

    id: str = Field(..., min_length=1)
    user_id: str
    scheme_type: str = Field(..., description="Human-readable scheme name")
    start_date: date
    duration: int = Field(..., ge=0, description="Duration in days")
    total_amount: float = Field(..., ge=0)
    interest_rate: float = Field(..., ge=0, le=100, description="Percent per year")
    current_balance: float = Field(0.0, ge=0)
    status: SchemeStatus = SchemeStatus.ACTIVE
    daily_amount: Optional[float] = Field(None, ge=0)

    def to_domain(self) -> UserScheme:
        return UserScheme(**self.model_dump())


class TransactionSchema(BaseModel):
    """Payment recorded against a user scheme"""

    id: str = Field(..., min_length=1)
    user_id: str
    scheme_id: str
    amount: float = Field(..., ge=0)
    date: datetime
    payment_mode: PaymentMode
    interest: float = 0.0
    remarks: Optional[str] = None
    receipt_number: Optional[str] = None

    def to_domain(self) -> Transaction:
        return Transaction(**self.model_dump())


class UserSchema(BaseModel):
    """Customer record"""

    id: str = Field(..., min_length=1)
    name: str
    created_at: datetime
    mobile_number: str = ""
    employee_id: str = ""
    status: str = "active"

    def to_domain(self) -> User:
        return User(**self.model_dump())


class InterestRequest(BaseModel):
    """Request body for POST /v1/interest"""

    principal: float = Field(..., ge=0)
    rate: float = Field(..., ge=0, le=100, description="Annual rate in percent")
    days: float = Field(..., ge=0)


class InterestResponse(BaseModel):
    """Response for POST /v1/interest"""

    interest: float
    maturity_amount: float
    entry_interest: float


class SchemeProgressRequest(BaseModel):
    """Request body for POST /v1/schemes/progress"""

    schemes: List[UserSchemeSchema]
    transactions: List[TransactionSchema] = []
    as_of: Optional[datetime] = None


class SchemeProgressItem(BaseModel):
    """Progress of a single user scheme"""

    scheme_id: str
    total_paid: float
    remaining_amount: float
    completion_percentage: float
    days_remaining: int
    accrued_interest: float


class SchemeProgressResponse(BaseModel):
    """Response for POST /v1/schemes/progress"""

    schemes: List[SchemeProgressItem]


class BonusRequest(BaseModel):
    """Request body for POST /v1/bonus"""

    payment_date: datetime
    scheme_start_date: Optional[date] = None
    amount: float = Field(0.0, ge=0)
    user_id: str = ""
    scheme_id: str = ""


class BonusResponse(BaseModel):
    """Response for POST /v1/bonus"""

    year: int
    week: int
    eligible: bool
    bonus: float
    total_amount: float
    next_payment_date: datetime


class ReportFilterSchema(BaseModel):
    """Optional drill-down filters"""

    amount_min: Optional[float] = None
    amount_max: Optional[float] = None
    payment_mode: Optional[PaymentMode] = None
    user_id: Optional[str] = None
    scheme_type: Optional[str] = None
    month: Optional[str] = Field(None, description="Short month label, e.g. Mar")

    def to_domain(self) -> ReportFilter:
        return ReportFilter(**self.model_dump())


class ReportSummaryRequest(BaseModel):
    """Request body for POST /v1/reports/summary"""

    users: List[UserSchema] = []
    user_schemes: List[UserSchemeSchema] = []
    transactions: List[TransactionSchema] = []
    period: Optional[str] = Field(None, description="weekly, monthly or yearly")
    filters: Optional[ReportFilterSchema] = None
    year: Optional[int] = None
    days: Optional[int] = Field(None, ge=0)
    window: Optional[int] = Field(None, ge=1)
    as_of: Optional[datetime] = None


class SeriesPointSchema(BaseModel):
    label: str
    value: float


class DistributionSchema(BaseModel):
    labels: List[str]
    values: List[float]


class ReportStatsSchema(BaseModel):
    total_transactions: int
    total_amount: float
    avg_transaction_amount: float
    unique_customers: int
    total_interest: float
    cash_payments: int
    online_payments: int


class DashboardStatsSchema(BaseModel):
    total_customers: int
    active_schemes: int
    completed_cycles: int
    total_investment: float
    today_collection: float
    pending_dues: float
    monthly_growth: float


class ReportSummaryResponse(BaseModel):
    """Response for POST /v1/reports/summary"""

    daily: List[SeriesPointSchema]
    daily_moving_average: List[float]
    monthly: List[SeriesPointSchema]
    user_growth: List[SeriesPointSchema]
    payment_modes: DistributionSchema
    scheme_amounts: DistributionSchema
    stats: ReportStatsSchema
    dashboard: DashboardStatsSchema


def series_schema(points) -> List[SeriesPointSchema]:
    """Convert domain series points for a response"""
    return [SeriesPointSchema(**asdict(p)) for p in points]
