"""Single-debt amortization schedules: annuity, linear and interest-only."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..constants.debts import BALANCE_EPSILON, MAX_SCHEDULE_MONTHS
from .money import add_months, ceil_cents, round_cents


@dataclass(slots=True, frozen=True)
class AmortizationRow:
    """One simulated month for one debt."""

    month: int
    date: date
    payment: float
    principal: float
    interest: float
    balance: float

    def to_dict(self) -> dict:
        return {
            "month": self.month,
            "date": self.date.isoformat(),
            "payment": self.payment,
            "principal": self.principal,
            "interest": self.interest,
            "balance": self.balance,
        }


def _monthly_rate(annual_rate_percent: float) -> float:
    return max(float(annual_rate_percent or 0.0), 0.0) / 100.0 / 12.0


def amortization_schedule(
    balance: float,
    annual_rate_percent: float,
    monthly_payment: float,
    start_date: date | None = None,
) -> list[AmortizationRow]:
    """Generate an annuity schedule with a fixed monthly payment.

    Each month accrues interest on the outstanding balance; the final payment
    is capped at balance plus interest so the balance never goes negative.
    The schedule ends once the balance is within a cent of zero or after
    ``MAX_SCHEDULE_MONTHS`` rows. A payment that does not exceed the first
    month's interest never converges and simply runs into that cap, so
    callers must screen for it first (see ``projection.project_debt``).
    """

    remaining = round_cents(balance)
    payment_amount = round_cents(monthly_payment)
    if remaining <= 0 or payment_amount <= 0:
        return []

    start = start_date or date.today()
    monthly_rate = _monthly_rate(annual_rate_percent)
    rows: list[AmortizationRow] = []
    month = 0

    while remaining > BALANCE_EPSILON and month < MAX_SCHEDULE_MONTHS:
        month += 1
        interest = round_cents(remaining * monthly_rate)
        payment = round_cents(min(payment_amount, remaining + interest))
        principal = round_cents(payment - interest)
        remaining = max(round_cents(remaining - principal), 0.0)

        rows.append(
            AmortizationRow(
                month=month,
                date=add_months(start, month),
                payment=payment,
                principal=principal,
                interest=interest,
                balance=remaining,
            )
        )

    return rows


def linear_amortization(
    balance: float,
    annual_rate_percent: float,
    term_months: int,
    start_date: date | None = None,
) -> list[AmortizationRow]:
    """Generate a linear schedule: fixed principal, interest on the declining balance.

    Total payment therefore falls every month. The principal is rounded up to
    the cent so the last row of the term settles a residue no larger than the
    others. At most ``MAX_SCHEDULE_MONTHS`` rows are produced; a longer term
    stops there with balance outstanding.
    """

    remaining = round_cents(balance)
    if remaining <= 0 or term_months <= 0:
        return []

    start = start_date or date.today()
    monthly_rate = _monthly_rate(annual_rate_percent)
    fixed_principal = ceil_cents(remaining / term_months)
    rows: list[AmortizationRow] = []

    for month in range(1, min(term_months, MAX_SCHEDULE_MONTHS) + 1):
        if remaining <= BALANCE_EPSILON:
            break
        interest = round_cents(remaining * monthly_rate)
        if month == term_months:
            principal = remaining
        else:
            principal = min(fixed_principal, remaining)
        payment = round_cents(principal + interest)
        remaining = max(round_cents(remaining - principal), 0.0)

        rows.append(
            AmortizationRow(
                month=month,
                date=add_months(start, month),
                payment=payment,
                principal=principal,
                interest=interest,
                balance=remaining,
            )
        )

    return rows


def interest_only_schedule(
    balance: float,
    annual_rate_percent: float,
    months: int,
    start_date: date | None = None,
) -> list[AmortizationRow]:
    """Generate an interest-only (aflossingsvrij) schedule; the balance never moves.

    Capped at ``MAX_SCHEDULE_MONTHS`` rows.
    """

    principal_balance = round_cents(balance)
    if principal_balance <= 0 or months <= 0:
        return []

    start = start_date or date.today()
    interest = round_cents(principal_balance * _monthly_rate(annual_rate_percent))
    return [
        AmortizationRow(
            month=month,
            date=add_months(start, month),
            payment=interest,
            principal=0.0,
            interest=interest,
            balance=principal_balance,
        )
        for month in range(1, min(months, MAX_SCHEDULE_MONTHS) + 1)
    ]
