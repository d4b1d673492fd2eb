"""Debt entities and repayment enums."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import ClassVar, Optional
from uuid import uuid4

from sqlmodel import Field, SQLModel

from ..constants.debts import (
    DEBT_TYPE_LABELS,
    PAYOFF_STRATEGY_LABELS,
    REPAYMENT_TYPE_ALIASES,
    REPAYMENT_TYPE_LABELS,
)


class RepaymentType(str, Enum):
    """Repayment mechanic that decides which amortization model applies."""

    ANNUITY = "annuity"
    LINEAR = "linear"
    INTEREST_ONLY = "interest_only"

    @classmethod
    def parse(cls, value: "str | RepaymentType | None") -> "RepaymentType":
        """Map a stored repayment type (or alias) to an enum member.

        Empty values mean annuity. Unknown values raise ``ValueError``.
        """

        if isinstance(value, cls):
            return value
        if value is None or not str(value).strip():
            return cls.ANNUITY
        key = str(value).strip().lower().replace("-", "_")
        canonical = REPAYMENT_TYPE_ALIASES.get(key)
        if canonical is None:
            raise ValueError(f"Unknown repayment type: {value!r}")
        return cls(canonical)

    @property
    def label(self) -> str:
        return REPAYMENT_TYPE_LABELS[self.value]


class PayoffStrategy(str, Enum):
    """How surplus budget is directed across a debt portfolio."""

    SNOWBALL = "snowball"
    AVALANCHE = "avalanche"
    CURRENT = "current"

    @property
    def label(self) -> str:
        return PAYOFF_STRATEGY_LABELS[self.value]


class Debt(SQLModel, table=True):
    """Interest-bearing obligation as stored by the calling application."""

    __tablename__: ClassVar[str] = "debt"

    id: str = Field(default_factory=lambda: uuid4().hex, primary_key=True, max_length=64)
    name: str = Field(default="", max_length=80, index=True)
    debt_type: str = Field(default="other", max_length=32)
    original_amount: float = Field(default=0.0, nullable=False)
    current_balance: float = Field(default=0.0, nullable=False)
    interest_rate: float = Field(default=0.0, nullable=False)  # annual %
    minimum_payment: float = Field(default=0.0, nullable=False)
    monthly_payment: float = Field(default=0.0, nullable=False)
    repayment_type: Optional[str] = Field(default=None, max_length=32)
    start_date: Optional[date] = Field(default=None)
    end_date: Optional[date] = Field(default=None)
    creditor: Optional[str] = Field(default=None, max_length=80)
    notes: Optional[str] = Field(default=None, max_length=255)
    is_active: bool = Field(default=True, nullable=False)
    sort_order: int = Field(default=0, nullable=False)

    @property
    def repayment(self) -> RepaymentType:
        """Parsed repayment type."""
        return RepaymentType.parse(self.repayment_type)

    @property
    def type_label(self) -> str:
        """Display label for ``debt_type``; unknown types fall back to "other"."""
        return DEBT_TYPE_LABELS.get(self.debt_type, DEBT_TYPE_LABELS["other"])

    @property
    def monthly_rate(self) -> float:
        return float(self.interest_rate or 0.0) / 100.0 / 12.0
