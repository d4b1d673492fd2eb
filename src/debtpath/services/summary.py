"""Payoff summaries and strategy comparisons."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Sequence

from ..models.debt import Debt, PayoffStrategy
from .money import round_cents
from .simulation import PayoffSimulation, StrategyMonth, simulate_payoff


@dataclass(slots=True, frozen=True)
class PayoffSummary:
    """Aggregate totals for one simulation run."""

    total_months: int
    total_interest: float
    total_paid: float
    payoff_date: date | None
    truncated: bool = False

    def to_dict(self) -> dict:
        return {
            "totalMonths": self.total_months,
            "totalInterest": self.total_interest,
            "totalPaid": self.total_paid,
            "payoffDate": self.payoff_date.isoformat() if self.payoff_date else "",
        }


@dataclass(slots=True, frozen=True)
class StrategyComparison:
    """Savings of ``candidate`` relative to ``baseline``."""

    baseline: PayoffSummary
    candidate: PayoffSummary

    @property
    def interest_saved(self) -> float:
        return round_cents(self.baseline.total_interest - self.candidate.total_interest)

    @property
    def months_saved(self) -> int:
        return self.baseline.total_months - self.candidate.total_months


def payoff_summary(months: "PayoffSimulation | Sequence[StrategyMonth]") -> PayoffSummary:
    """Reduce a simulation to months, interest, amount paid and payoff date.

    An empty run is the debt-free state and yields zeros with no date.
    """

    truncated = months.truncated if isinstance(months, PayoffSimulation) else False
    rows = list(months)
    if not rows:
        return PayoffSummary(total_months=0, total_interest=0.0, total_paid=0.0, payoff_date=None)

    total_interest = sum(entry.interest for row in rows for entry in row.debts)
    total_paid = sum(row.total_payment for row in rows)
    return PayoffSummary(
        total_months=len(rows),
        total_interest=round_cents(total_interest),
        total_paid=round_cents(total_paid),
        payoff_date=rows[-1].date,
        truncated=truncated,
    )


def compare_summaries(baseline: PayoffSummary, candidate: PayoffSummary) -> StrategyComparison:
    return StrategyComparison(baseline=baseline, candidate=candidate)


def compare_strategies(
    debts: Iterable[Debt],
    extra_monthly: float = 0.0,
    *,
    start_date: date | None = None,
) -> dict[PayoffStrategy, StrategyComparison]:
    """Compare every strategy (with the extra payment) against paying as today.

    The baseline is the ``current`` strategy without any extra payment, which
    is what the dashboard's "interest saved" and "months saved" cards diff
    against.
    """

    debts = list(debts)
    start = start_date or date.today()
    baseline = payoff_summary(simulate_payoff(debts, PayoffStrategy.CURRENT, 0.0, start_date=start))
    return {
        strategy: compare_summaries(
            baseline,
            payoff_summary(simulate_payoff(debts, strategy, extra_monthly, start_date=start)),
        )
        for strategy in PayoffStrategy
    }
