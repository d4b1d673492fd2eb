"""Portfolio totals and the combined payoff plan shown on the debts dashboard."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from ..domain.repositories.debt import DebtRepository
from ..logging_config import get_logger
from ..models.debt import Debt, PayoffStrategy
from .money import round_cents
from .simulation import PayoffSimulation, simulate_payoff
from .summary import PayoffSummary, StrategyComparison, compare_summaries, payoff_summary
from .validation import parse_strategy

logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class DebtOverview:
    active_count: int
    total_balance: float
    total_original: float
    total_monthly_payments: float
    paid_off: float
    progress_pct: float


@dataclass(slots=True, frozen=True)
class PayoffPlan:
    overview: DebtOverview
    simulation: PayoffSimulation
    summary: PayoffSummary
    comparison: StrategyComparison


def debt_overview(debts: Iterable[Debt]) -> DebtOverview:
    """Totals over active debts with a positive balance."""

    active = [d for d in debts if d.is_active and float(d.current_balance or 0.0) > 0]
    total_balance = sum(float(d.current_balance) for d in active)
    total_original = sum(float(d.original_amount or 0.0) for d in active)
    total_monthly = sum(float(d.monthly_payment or 0.0) for d in active)
    progress = (total_original - total_balance) / total_original * 100 if total_original > 0 else 0.0
    return DebtOverview(
        active_count=len(active),
        total_balance=round_cents(total_balance),
        total_original=round_cents(total_original),
        total_monthly_payments=round_cents(total_monthly),
        paid_off=round_cents(total_original - total_balance),
        progress_pct=round(progress, 1),
    )


def load_payoff_plan(
    repository: DebtRepository,
    strategy: "str | PayoffStrategy" = PayoffStrategy.AVALANCHE,
    extra_monthly: float = 0.0,
    *,
    start_date: date | None = None,
) -> PayoffPlan:
    """Load active debts and build overview, simulation and savings versus today."""

    strategy = parse_strategy(strategy)
    debts = repository.list_active()
    start = start_date or date.today()

    simulation = simulate_payoff(debts, strategy, extra_monthly, start_date=start)
    summary = payoff_summary(simulation)
    baseline = payoff_summary(simulate_payoff(debts, PayoffStrategy.CURRENT, 0.0, start_date=start))

    logger.info(
        "Built payoff plan",
        extra={
            "strategy": strategy.value,
            "strategy_label": strategy.label,
            "debts": len(debts),
            "months": summary.total_months,
            "truncated": summary.truncated,
        },
    )
    return PayoffPlan(
        overview=debt_overview(debts),
        simulation=simulation,
        summary=summary,
        comparison=compare_summaries(baseline, summary),
    )
