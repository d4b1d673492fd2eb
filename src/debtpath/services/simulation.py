"""Multi-debt payoff simulation (snowball, avalanche, current)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Iterator

from ..constants.debts import BALANCE_EPSILON, MAX_SIMULATION_MONTHS
from ..logging_config import get_logger
from ..models.debt import Debt, PayoffStrategy, RepaymentType
from .money import add_months, round_cents
from .validation import parse_strategy, validate_debts, validate_extra_payment

logger = get_logger(__name__)


@dataclass(slots=True)
class _WorkingDebt:
    """Mutable per-run snapshot of a debt; the input record is never touched."""

    id: str
    name: str
    balance: float
    monthly_rate: float
    min_payment: float
    monthly_payment: float
    is_interest_only: bool


@dataclass(slots=True)
class DebtMonth:
    """One debt's activity within a simulated month."""

    id: str
    name: str
    payment: float = 0.0
    interest: float = 0.0
    principal: float = 0.0
    balance: float = 0.0

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "payment": self.payment,
            "interest": self.interest,
            "principal": self.principal,
            "balance": self.balance,
        }


@dataclass(slots=True, frozen=True)
class StrategyMonth:
    """Portfolio-wide snapshot for one simulated month."""

    month: int
    date: date
    debts: tuple[DebtMonth, ...]
    total_payment: float
    total_balance: float

    def entry(self, debt_id: str) -> DebtMonth:
        for item in self.debts:
            if item.id == debt_id:
                return item
        raise KeyError(debt_id)

    def to_dict(self) -> dict:
        return {
            "month": self.month,
            "date": self.date.isoformat(),
            "debts": [item.to_dict() for item in self.debts],
            "totalPayment": self.total_payment,
            "totalBalance": self.total_balance,
        }


@dataclass(slots=True, frozen=True)
class PayoffSimulation:
    """Result of ``simulate_payoff``; iterates like its month list."""

    strategy: PayoffStrategy
    extra_monthly: float
    months: tuple[StrategyMonth, ...] = field(default_factory=tuple)
    truncated: bool = False

    def __iter__(self) -> Iterator[StrategyMonth]:
        return iter(self.months)

    def __len__(self) -> int:
        return len(self.months)

    def __getitem__(self, index: int) -> StrategyMonth:
        return self.months[index]

    @property
    def is_debt_free(self) -> bool:
        """True when the run retires every balance within the horizon."""
        return not self.truncated

    def payoff_month(self, debt_id: str) -> int | None:
        """First month in which ``debt_id`` reaches a zero balance."""

        for month in self.months:
            if month.entry(debt_id).balance <= BALANCE_EPSILON:
                return month.month
        return None


def _snapshot(debts: Iterable[Debt]) -> list[_WorkingDebt]:
    active: list[_WorkingDebt] = []
    for debt in debts:
        balance = float(debt.current_balance or 0.0)
        if not debt.is_active or balance <= 0:
            continue
        active.append(
            _WorkingDebt(
                id=debt.id,
                name=debt.name or "",
                balance=balance,
                monthly_rate=float(debt.interest_rate or 0.0) / 100.0 / 12.0,
                min_payment=float(debt.minimum_payment or 0.0),
                monthly_payment=float(debt.monthly_payment or 0.0),
                is_interest_only=debt.repayment is RepaymentType.INTEREST_ONLY,
            )
        )
    return active


def _monthly_budget(active: list[_WorkingDebt], strategy: PayoffStrategy, extra: float) -> float:
    if strategy is PayoffStrategy.CURRENT:
        return sum(d.monthly_payment for d in active) + extra
    if strategy in (PayoffStrategy.SNOWBALL, PayoffStrategy.AVALANCHE):
        return sum(d.min_payment for d in active) + extra
    raise AssertionError(f"Unhandled payoff strategy: {strategy}")


def _targets(active: list[_WorkingDebt], strategy: PayoffStrategy) -> list[_WorkingDebt]:
    """Order debts that may receive surplus budget; interest-only debts never do."""

    candidates = [d for d in active if d.balance > BALANCE_EPSILON and not d.is_interest_only]
    if strategy is PayoffStrategy.SNOWBALL:
        return sorted(candidates, key=lambda d: d.balance)
    if strategy is PayoffStrategy.AVALANCHE:
        return sorted(candidates, key=lambda d: d.monthly_rate, reverse=True)
    if strategy is PayoffStrategy.CURRENT:
        return []
    raise AssertionError(f"Unhandled payoff strategy: {strategy}")


def simulate_payoff(
    debts: Iterable[Debt],
    strategy: "str | PayoffStrategy",
    extra_monthly: float = 0.0,
    *,
    start_date: date | None = None,
) -> PayoffSimulation:
    """Simulate paying down every active debt together, month by month.

    The monthly budget is the sum of each debt's own payment (``current``) or
    minimum payment (``snowball``/``avalanche``) plus ``extra_monthly``. After
    every debt receives its baseline payment, snowball and avalanche pour the
    remaining budget into their target order. The run ends when every balance
    is within a cent of zero or after ``MAX_SIMULATION_MONTHS`` months; in the
    latter case the result is marked ``truncated``.
    """

    strategy = parse_strategy(strategy)
    extra = validate_extra_payment(extra_monthly)
    active = _snapshot(validate_debts(debts))
    if not active:
        return PayoffSimulation(strategy=strategy, extra_monthly=extra)

    start = start_date or date.today()
    total_budget = _monthly_budget(active, strategy, extra)
    accelerate = strategy is not PayoffStrategy.CURRENT
    months: list[StrategyMonth] = []
    month = 0

    logger.debug(
        "Starting payoff simulation",
        extra={"strategy": strategy.value, "debts": len(active), "budget": total_budget},
    )

    while any(d.balance > BALANCE_EPSILON for d in active) and month < MAX_SIMULATION_MONTHS:
        month += 1
        targets = _targets(active, strategy)
        budget_left = total_budget
        entries: dict[str, DebtMonth] = {}

        for debt in active:
            entry = DebtMonth(id=debt.id, name=debt.name)
            entries[debt.id] = entry
            if debt.balance <= BALANCE_EPSILON:
                continue

            interest = debt.balance * debt.monthly_rate
            if debt.is_interest_only:
                payment = interest
            else:
                baseline = debt.monthly_payment if strategy is PayoffStrategy.CURRENT else debt.min_payment
                payment = min(baseline, debt.balance + interest)

            entry.payment = payment
            entry.interest = interest
            entry.principal = payment - interest
            entry.balance = debt.balance - entry.principal
            budget_left -= payment

        if accelerate and budget_left > 0:
            for target in targets:
                entry = entries[target.id]
                if entry.balance <= BALANCE_EPSILON:
                    continue
                extra_pay = min(budget_left, entry.balance)
                entry.payment += extra_pay
                entry.principal += extra_pay
                entry.balance -= extra_pay
                budget_left -= extra_pay
                if budget_left <= BALANCE_EPSILON:
                    break

        for debt in active:
            debt.balance = max(0.0, entries[debt.id].balance)
            entries[debt.id].balance = debt.balance

        rounded = tuple(
            DebtMonth(
                id=item.id,
                name=item.name,
                payment=round_cents(item.payment),
                interest=round_cents(item.interest),
                principal=round_cents(item.principal),
                balance=round_cents(item.balance),
            )
            for item in entries.values()
        )
        months.append(
            StrategyMonth(
                month=month,
                date=add_months(start, month),
                debts=rounded,
                total_payment=round_cents(sum(item.payment for item in entries.values())),
                total_balance=round_cents(sum(item.balance for item in entries.values())),
            )
        )

    truncated = any(d.balance > BALANCE_EPSILON for d in active)
    if truncated:
        logger.warning(
            "Payoff simulation reached the horizon with balance remaining",
            extra={
                "strategy": strategy.value,
                "months": month,
                "remaining_balance": round_cents(sum(d.balance for d in active)),
            },
        )
    else:
        logger.debug(
            "Payoff simulation finished", extra={"strategy": strategy.value, "months": month}
        )

    return PayoffSimulation(
        strategy=strategy,
        extra_monthly=extra,
        months=tuple(months),
        truncated=truncated,
    )
