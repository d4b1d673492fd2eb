"""Engine constants and display labels."""

from .debts import (
    AVERAGE_DAYS_PER_MONTH,
    BALANCE_EPSILON,
    DEBT_TYPE_LABELS,
    DEFAULT_INTEREST_ONLY_MONTHS,
    MAX_SCHEDULE_MONTHS,
    MAX_SIMULATION_MONTHS,
    PAYOFF_STRATEGY_LABELS,
    REPAYMENT_TYPE_ALIASES,
    REPAYMENT_TYPE_LABELS,
)

__all__ = [
    "AVERAGE_DAYS_PER_MONTH",
    "BALANCE_EPSILON",
    "DEBT_TYPE_LABELS",
    "DEFAULT_INTEREST_ONLY_MONTHS",
    "MAX_SCHEDULE_MONTHS",
    "MAX_SIMULATION_MONTHS",
    "PAYOFF_STRATEGY_LABELS",
    "REPAYMENT_TYPE_ALIASES",
    "REPAYMENT_TYPE_LABELS",
]
