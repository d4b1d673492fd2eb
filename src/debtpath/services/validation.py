"""Boundary checks for debt records entering the engine."""

from __future__ import annotations

from typing import Iterable

from ..logging_config import get_logger
from ..models.debt import Debt, PayoffStrategy, RepaymentType

logger = get_logger(__name__)

_NON_NEGATIVE_FIELDS = ("current_balance", "interest_rate", "minimum_payment", "monthly_payment")


class InvalidDebtError(ValueError):
    """Raised when a debt record cannot be projected meaningfully."""

    def __init__(self, message: str, *, debt_id: str | None = None, field: str | None = None):
        super().__init__(message)
        self.debt_id = debt_id
        self.field = field


def validate_debt(debt: Debt) -> RepaymentType:
    """Reject negative amounts and unknown repayment types.

    Returns the parsed repayment type so callers dispatch on the enum.
    """

    for field in _NON_NEGATIVE_FIELDS:
        value = getattr(debt, field)
        if value is None:
            continue
        if float(value) < 0:
            logger.warning(
                "Rejected debt with negative %s", field, extra={"debt_id": debt.id, "value": value}
            )
            raise InvalidDebtError(
                f"Debt {debt.id}: {field} must not be negative (got {value})",
                debt_id=debt.id,
                field=field,
            )

    try:
        return RepaymentType.parse(debt.repayment_type)
    except ValueError as exc:
        logger.warning(
            "Rejected debt with unknown repayment type",
            extra={"debt_id": debt.id, "repayment_type": debt.repayment_type},
        )
        raise InvalidDebtError(str(exc), debt_id=debt.id, field="repayment_type") from exc


def validate_debts(debts: Iterable[Debt]) -> list[Debt]:
    """Validate every record and return them as a list, rejecting duplicate ids."""

    checked: list[Debt] = []
    seen: set[str] = set()
    for debt in debts:
        validate_debt(debt)
        if debt.id in seen:
            raise InvalidDebtError(f"Duplicate debt id: {debt.id}", debt_id=debt.id, field="id")
        seen.add(debt.id)
        checked.append(debt)
    return checked


def validate_extra_payment(extra_monthly: float) -> float:
    """Extra monthly budget must be a non-negative amount."""

    extra = float(extra_monthly or 0.0)
    if extra < 0:
        raise InvalidDebtError(f"Extra monthly payment must not be negative (got {extra_monthly})")
    return extra


def parse_strategy(strategy: "str | PayoffStrategy") -> PayoffStrategy:
    """Map a strategy tag to the enum, raising on unknown values."""

    if isinstance(strategy, PayoffStrategy):
        return strategy
    try:
        return PayoffStrategy(str(strategy).strip().lower())
    except ValueError as exc:
        raise ValueError(f"Invalid debt payoff strategy: {strategy!r}") from exc
