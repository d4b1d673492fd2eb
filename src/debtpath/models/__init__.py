"""SQLModel table exports."""

from .debt import Debt, PayoffStrategy, RepaymentType

__all__ = [
    "Debt",
    "PayoffStrategy",
    "RepaymentType",
]
