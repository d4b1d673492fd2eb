"""Service module exports."""

from . import amortization, money, overview, projection, simulation, summary, validation
from .amortization import AmortizationRow, amortization_schedule, interest_only_schedule, linear_amortization
from .overview import DebtOverview, PayoffPlan, debt_overview, load_payoff_plan
from .projection import DebtProjection, PayableProjection, UnpayableProjection, project_debt, project_debts
from .simulation import DebtMonth, PayoffSimulation, StrategyMonth, simulate_payoff
from .summary import PayoffSummary, StrategyComparison, compare_strategies, compare_summaries, payoff_summary
from .validation import InvalidDebtError, validate_debt

__all__ = [
    "amortization",
    "money",
    "overview",
    "projection",
    "simulation",
    "summary",
    "validation",
    "AmortizationRow",
    "DebtMonth",
    "DebtOverview",
    "DebtProjection",
    "InvalidDebtError",
    "PayableProjection",
    "PayoffPlan",
    "PayoffSimulation",
    "PayoffSummary",
    "StrategyComparison",
    "StrategyMonth",
    "UnpayableProjection",
    "amortization_schedule",
    "compare_strategies",
    "compare_summaries",
    "debt_overview",
    "interest_only_schedule",
    "linear_amortization",
    "load_payoff_plan",
    "payoff_summary",
    "project_debt",
    "project_debts",
    "simulate_payoff",
    "validate_debt",
]
