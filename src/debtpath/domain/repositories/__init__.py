"""Repository protocol definitions for domain layer."""

from .debt import DebtRepository

__all__ = [
    "DebtRepository",
]
