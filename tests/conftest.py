"""Pytest fixtures for testing"""

import pytest
from datetime import date, datetime
from fastapi.testclient import TestClient
from finance_tracker.api.main import create_app
from finance_tracker.domain.models import (
    PaymentMode,
    Scheme,
    SchemeFrequency,
    SchemeStatus,
    Transaction,
    User,
    UserScheme,
)


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def daily_savings() -> Scheme:
    """Daily contribution scheme template"""
    return Scheme(
        id="1",
        name="Daily Savings",
        interest_rate=8.5,
        min_amount=50,
        max_amount=1000,
        duration=365,
        frequency=SchemeFrequency.DAILY,
        description="Save a small amount daily",
    )


@pytest.fixture
def gold_scheme() -> UserScheme:
    """Active enrollment: 1000 target over 100 days from 2024-01-01"""
    return UserScheme(
        id="us_gold",
        user_id="u1",
        scheme_type="Gold Saver",
        start_date=date(2024, 1, 1),
        duration=100,
        total_amount=1000,
        interest_rate=10,
        current_balance=3650,
    )


@pytest.fixture
def user_schemes(gold_scheme: UserScheme) -> list[UserScheme]:
    """Two enrollments: one active, one completed"""
    return [
        gold_scheme,
        UserScheme(
            id="us_furniture",
            user_id="u2",
            scheme_type="Furniture Plan",
            start_date=date(2023, 6, 1),
            duration=180,
            total_amount=500,
            interest_rate=9,
            current_balance=500,
            status=SchemeStatus.COMPLETED,
        ),
    ]


@pytest.fixture
def sample_transactions() -> list[Transaction]:
    """Payments spread over February and March 2024"""
    return [
        Transaction("t1", "u1", "us_gold", 150, datetime(2024, 3, 5, 9, 30), PaymentMode.CASH, interest=0.04),
        Transaction("t2", "u1", "us_gold", 250, datetime(2024, 3, 5, 17, 0), PaymentMode.CARD, interest=0.07),
        Transaction("t3", "u2", "us_furniture", 100, datetime(2024, 2, 20, 11, 0), PaymentMode.MOBILE_WALLET),
        Transaction("t4", "u2", "us_missing", 40, datetime(2024, 3, 10, 18, 30), PaymentMode.CASH),
    ]


@pytest.fixture
def sample_users() -> list[User]:
    """Customers joining across 2023 and 2024"""
    return [
        User("u1", "Rajesh Kumar", datetime(2024, 1, 15, 10, 0)),
        User("u2", "Priya Sharma", datetime(2024, 1, 28, 16, 0)),
        User("u3", "Amit Patel", datetime(2024, 3, 2, 9, 0), status="inactive"),
        User("u4", "Old Customer", datetime(2023, 11, 5, 9, 0)),
    ]
