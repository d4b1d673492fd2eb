"""Pytest configuration and shared fixtures for debtpath tests.

Provides an isolated SQLite database, a debt factory and float helpers for
exercising the engine without touching any real application database.
"""

from __future__ import annotations

import tempfile
from datetime import date
from pathlib import Path
from typing import Optional

import pytest
from sqlmodel import Session, SQLModel, create_engine

from debtpath.models import Debt

START = date(2025, 1, 1)


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database for each test.

    Yields:
        Engine: SQLModel engine connected to test database
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def db_session(db_engine):
    """Create a database session for a single test."""
    session = Session(db_engine, expire_on_commit=False)
    try:
        yield session
        session.commit()
    finally:
        session.close()


# =============================================================================
# Test Data Factories
# =============================================================================


def make_debt(
    debt_id: str,
    *,
    balance: float = 1000.00,
    rate: float = 12.0,
    minimum_payment: float = 50.00,
    monthly_payment: Optional[float] = None,
    repayment_type: Optional[str] = None,
    end_date: Optional[date] = None,
    is_active: bool = True,
    original_amount: Optional[float] = None,
    name: Optional[str] = None,
) -> Debt:
    """Build an unsaved Debt with sensible defaults.

    ``monthly_payment`` defaults to the minimum payment, the way a debt is
    entered when the user pays exactly what is required.
    """
    return Debt(
        id=debt_id,
        name=name or f"Debt {debt_id}",
        original_amount=balance if original_amount is None else original_amount,
        current_balance=balance,
        interest_rate=rate,
        minimum_payment=minimum_payment,
        monthly_payment=minimum_payment if monthly_payment is None else monthly_payment,
        repayment_type=repayment_type,
        end_date=end_date,
        is_active=is_active,
    )


@pytest.fixture
def debt_factory(db_session):
    """Factory for creating persisted test debts.

    Returns:
        Callable: Function that creates and persists Debt instances
    """

    def _create_debt(debt_id: str, **kwargs) -> Debt:
        debt = make_debt(debt_id, **kwargs)
        db_session.add(debt)
        db_session.commit()
        db_session.refresh(debt)
        return debt

    return _create_debt


@pytest.fixture
def sample_portfolio() -> list[Debt]:
    """Mortgage, personal loan and student loan as seeded for new users."""
    return [
        make_debt(
            "mortgage",
            name="Hypotheek",
            balance=248000.00,
            original_amount=285000.00,
            rate=3.8,
            minimum_payment=1150.00,
            repayment_type="annuity",
        ),
        make_debt(
            "personal",
            name="Persoonlijke lening",
            balance=2800.00,
            original_amount=5000.00,
            rate=6.9,
            minimum_payment=60.00,
        ),
        make_debt(
            "student",
            name="Studielening DUO",
            balance=14200.00,
            original_amount=18500.00,
            rate=0.46,
            minimum_payment=85.00,
        ),
    ]


# =============================================================================
# Assertion Helpers
# =============================================================================


def assert_float_equal(actual: float, expected: float, tolerance: float = 0.01):
    """Assert that two floats are equal within a tolerance.

    Args:
        actual: Actual value
        expected: Expected value
        tolerance: Maximum allowed difference (default 0.01 = 1 cent)

    Raises:
        AssertionError: If values differ by more than tolerance
    """
    diff = abs(actual - expected)
    assert diff <= tolerance, (
        f"Expected {expected}, got {actual} (difference: {diff}, tolerance: {tolerance})"
    )
