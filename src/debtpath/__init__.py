"""debtpath: debt amortization and multi-debt payoff simulation."""

from __future__ import annotations

from .config import BaseConfig, DevConfig
from .models import Debt, PayoffStrategy, RepaymentType

__all__ = ["BaseConfig", "DevConfig", "Debt", "PayoffStrategy", "RepaymentType"]
