"""Single-debt payoff projections.

Picks the amortization model matching a debt's repayment type and reduces the
schedule to months-to-payoff, remaining interest and payoff date. Debts whose
payment cannot outpace interest are reported as unpayable analytically,
before any schedule is built.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Union

from ..constants.debts import (
    AVERAGE_DAYS_PER_MONTH,
    BALANCE_EPSILON,
    DEFAULT_INTEREST_ONLY_MONTHS,
    MAX_SCHEDULE_MONTHS,
)
from ..logging_config import get_logger
from ..models.debt import Debt, RepaymentType
from .amortization import (
    AmortizationRow,
    amortization_schedule,
    interest_only_schedule,
    linear_amortization,
)
from .money import round_cents, round_half_up
from .validation import validate_debt

logger = get_logger(__name__)

PAYMENT_BELOW_INTEREST = "payment_below_interest"


@dataclass(slots=True, frozen=True)
class PayableProjection:
    """Debt that is serviced by its current payment."""

    months_to_payoff: int
    total_interest: float
    payoff_date: date | None
    capped: bool = False  # schedule hit MAX_SCHEDULE_MONTHS with balance left

    @property
    def is_payable(self) -> bool:
        return True

    def to_dict(self) -> dict:
        return {
            "monthsToPayoff": self.months_to_payoff,
            "totalInterest": self.total_interest,
            "payoffDate": self.payoff_date.isoformat() if self.payoff_date else "",
            "isPayable": True,
        }


@dataclass(slots=True, frozen=True)
class UnpayableProjection:
    """Debt whose payment never reduces the balance."""

    reason: str = PAYMENT_BELOW_INTEREST

    @property
    def is_payable(self) -> bool:
        return False

    def to_dict(self) -> dict:
        # Dashboard payload keeps the infinity sentinels for "not payable".
        return {
            "monthsToPayoff": math.inf,
            "totalInterest": math.inf,
            "payoffDate": "",
            "isPayable": False,
        }


DebtProjection = Union[PayableProjection, UnpayableProjection]


def _from_schedule(rows: list[AmortizationRow], *, capped: bool = False) -> PayableProjection:
    return PayableProjection(
        months_to_payoff=len(rows),
        total_interest=round_cents(sum(row.interest for row in rows)),
        payoff_date=rows[-1].date if rows else None,
        capped=capped,
    )


def interest_only_term(end_date: date | None, *, today: date) -> int:
    """Months between ``today`` and ``end_date`` using 30.44-day months."""

    if end_date is None:
        return DEFAULT_INTEREST_ONLY_MONTHS
    months = round_half_up((end_date - today).days / AVERAGE_DAYS_PER_MONTH)
    return max(months, 0)


def linear_term(balance: float, monthly_rate: float, monthly_payment: float) -> int | None:
    """Approximate a linear term from the payment and average interest.

    Average interest over a linear schedule is roughly half the first month's
    interest. Returns ``None`` when the payment leaves no principal.
    """

    approx_principal = monthly_payment - balance * monthly_rate / 2
    if approx_principal <= 0:
        return None
    return math.ceil(balance / approx_principal)


def project_debt(debt: Debt, *, today: date | None = None) -> DebtProjection:
    """Project payoff for a single debt under its own repayment type."""

    repayment = validate_debt(debt)
    today = today or date.today()
    balance = float(debt.current_balance or 0.0)
    rate = float(debt.interest_rate or 0.0)
    payment = float(debt.monthly_payment or 0.0)
    monthly_rate = rate / 100.0 / 12.0

    if balance <= 0:
        return PayableProjection(months_to_payoff=0, total_interest=0.0, payoff_date=None)

    if repayment is RepaymentType.INTEREST_ONLY:
        months = interest_only_term(debt.end_date, today=today)
        capped = months > MAX_SCHEDULE_MONTHS
        if capped:
            logger.warning(
                "Interest-only term exceeds projection horizon",
                extra={"debt_id": debt.id, "months": months},
            )
        return _from_schedule(interest_only_schedule(balance, rate, months, today), capped=capped)

    if repayment is RepaymentType.LINEAR:
        term = linear_term(balance, monthly_rate, payment)
        if term is None:
            logger.warning(
                "Linear debt payment leaves no principal",
                extra={"debt_id": debt.id, "balance": balance, "monthly_payment": payment},
            )
            return UnpayableProjection()
        rows = linear_amortization(balance, rate, term, today)
        capped = bool(rows) and rows[-1].balance > BALANCE_EPSILON
        if capped:
            logger.warning(
                "Linear schedule exceeds projection horizon",
                extra={"debt_id": debt.id, "months": term, "balance": rows[-1].balance},
            )
        return _from_schedule(rows, capped=capped)

    if repayment is RepaymentType.ANNUITY:
        if payment <= balance * monthly_rate:
            logger.warning(
                "Annuity payment does not cover monthly interest",
                extra={"debt_id": debt.id, "balance": balance, "monthly_payment": payment},
            )
            return UnpayableProjection()
        rows = amortization_schedule(balance, rate, payment, today)
        capped = len(rows) >= MAX_SCHEDULE_MONTHS and rows[-1].balance > BALANCE_EPSILON
        if capped:
            logger.warning(
                "Annuity schedule exceeds projection horizon",
                extra={"debt_id": debt.id, "months": len(rows), "balance": rows[-1].balance},
            )
        return _from_schedule(rows, capped=capped)

    raise AssertionError(f"Unhandled repayment type: {repayment}")


def project_debts(debts: Iterable[Debt], *, today: date | None = None) -> dict[str, DebtProjection]:
    """Return projections keyed by debt id."""

    today = today or date.today()
    return {debt.id: project_debt(debt, today=today) for debt in debts}
