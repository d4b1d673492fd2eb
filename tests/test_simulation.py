"""Tests for the multi-debt payoff simulator.

Verifies:
- Budget allocation for snowball (smallest balance first) and avalanche
  (highest rate first), and that ``current`` never accelerates
- Interest-only debts pay interest only and never receive surplus
- Paid-off debts keep reporting zero entries
- Termination, the 600-month cap and the ``truncated`` flag
- Determinism and input immutability
"""

from __future__ import annotations

from datetime import date

import pytest

from debtpath.constants import MAX_SIMULATION_MONTHS
from debtpath.models import PayoffStrategy
from debtpath.services.simulation import simulate_payoff
from debtpath.services.summary import payoff_summary
from debtpath.services.validation import InvalidDebtError
from tests.conftest import START, assert_float_equal, make_debt


def _two_debts():
    return [
        make_debt("A", balance=1000.0, rate=20.0, minimum_payment=50.0),
        make_debt("B", balance=5000.0, rate=5.0, minimum_payment=100.0),
    ]


class TestSetup:
    """Filtering and argument handling."""

    def test_empty_portfolio_returns_empty_result(self):
        result = simulate_payoff([], "avalanche", 100.0, start_date=START)

        assert len(result) == 0
        assert result.truncated is False
        assert result.is_debt_free

    def test_inactive_and_paid_debts_are_excluded(self):
        debts = [
            make_debt("live", balance=500.0, minimum_payment=100.0),
            make_debt("closed", balance=800.0, is_active=False),
            make_debt("paid", balance=0.0),
        ]

        result = simulate_payoff(debts, PayoffStrategy.SNOWBALL, start_date=START)

        assert [entry.id for entry in result[0].debts] == ["live"]

    def test_strategy_accepts_string_tags(self):
        result = simulate_payoff(_two_debts(), "avalanche", 0.0, start_date=START)
        assert result.strategy is PayoffStrategy.AVALANCHE

    def test_invalid_strategy_raises(self):
        with pytest.raises(ValueError, match="Invalid debt payoff strategy"):
            simulate_payoff(_two_debts(), "fastest", start_date=START)

    def test_negative_extra_payment_raises(self):
        with pytest.raises(InvalidDebtError):
            simulate_payoff(_two_debts(), "snowball", -25.0, start_date=START)

    def test_duplicate_ids_raise(self):
        debts = [make_debt("A"), make_debt("A", balance=200.0)]
        with pytest.raises(InvalidDebtError, match="Duplicate debt id"):
            simulate_payoff(debts, "snowball", start_date=START)

    def test_months_are_dated_from_start(self):
        result = simulate_payoff(_two_debts(), "snowball", 200.0, start_date=START)

        assert result[0].month == 1
        assert result[0].date == date(2025, 2, 1)
        assert result[0].to_dict()["date"] == "2025-02-01"


class TestSnowball:
    """Surplus goes to the smallest balance first."""

    def test_first_month_allocation(self):
        result = simulate_payoff(_two_debts(), "snowball", 200.0, start_date=START)

        first = result[0]
        assert_float_equal(first.entry("A").payment, 250.00)
        assert_float_equal(first.entry("B").payment, 100.00)
        assert_float_equal(first.total_payment, 350.00)
        assert_float_equal(first.entry("A").interest, 16.67)
        assert_float_equal(first.entry("A").balance, 766.67)

    def test_smaller_debt_is_retired_first(self):
        result = simulate_payoff(_two_debts(), "snowball", 200.0, start_date=START)

        a_month = result.payoff_month("A")
        b_month = result.payoff_month("B")
        assert a_month == 5
        assert b_month is not None
        assert a_month < b_month
        assert result.is_debt_free

    def test_larger_debt_follows_minimum_trajectory_until_first_payoff(self):
        """Before A is gone, B receives exactly its minimum payment."""
        result = simulate_payoff(_two_debts(), "snowball", 200.0, start_date=START)
        b_alone = simulate_payoff(
            [make_debt("B", balance=5000.0, rate=5.0, minimum_payment=100.0)],
            "current",
            start_date=START,
        )

        a_month = result.payoff_month("A")
        for index in range(a_month - 1):
            assert result[index].entry("B").balance == b_alone[index].entry("B").balance
            assert result[index].entry("B").payment == 100.00

        # Budget freed by A's final payment spills into B in the same month.
        assert result[a_month - 1].entry("B").payment > 100.00

    def test_paid_off_debt_reports_zeros(self):
        result = simulate_payoff(_two_debts(), "snowball", 200.0, start_date=START)

        after = result[result.payoff_month("A")]
        entry = after.entry("A")
        assert (entry.payment, entry.interest, entry.principal, entry.balance) == (0.0, 0.0, 0.0, 0.0)
        assert len(after.debts) == 2

    def test_freed_minimum_rolls_into_next_target(self):
        result = simulate_payoff(_two_debts(), "snowball", 200.0, start_date=START)

        after = result[result.payoff_month("A")]
        assert_float_equal(after.entry("B").payment, 350.00)


class TestAvalanche:
    """Surplus goes to the highest interest rate first."""

    @staticmethod
    def _debts():
        return [
            make_debt("small_low", balance=500.0, rate=10.0, minimum_payment=25.0),
            make_debt("large_high", balance=5000.0, rate=20.0, minimum_payment=100.0),
        ]

    def test_first_month_targets_highest_rate(self):
        result = simulate_payoff(self._debts(), "avalanche", 200.0, start_date=START)

        first = result[0]
        assert_float_equal(first.entry("large_high").payment, 300.00)
        assert_float_equal(first.entry("small_low").payment, 25.00)

    def test_snowball_targets_smallest_balance_instead(self):
        result = simulate_payoff(self._debts(), "snowball", 200.0, start_date=START)

        first = result[0]
        assert_float_equal(first.entry("small_low").payment, 225.00)
        assert_float_equal(first.entry("large_high").payment, 100.00)

    def test_avalanche_pays_less_interest_than_snowball(self):
        avalanche = payoff_summary(simulate_payoff(self._debts(), "avalanche", 200.0, start_date=START))
        snowball = payoff_summary(simulate_payoff(self._debts(), "snowball", 200.0, start_date=START))

        assert avalanche.total_interest < snowball.total_interest

    def test_avalanche_never_pays_more_than_current(self):
        """Same budget: minimums unchanged, freed payments go to principal."""
        debts = [
            make_debt("card", balance=3000.0, rate=19.0, minimum_payment=90.0),
            make_debt("car", balance=8000.0, rate=6.5, minimum_payment=180.0),
            make_debt("study", balance=1500.0, rate=2.0, minimum_payment=45.0),
        ]

        avalanche = payoff_summary(simulate_payoff(debts, "avalanche", 0.0, start_date=START))
        current = payoff_summary(simulate_payoff(debts, "current", 0.0, start_date=START))

        assert avalanche.total_interest <= current.total_interest
        assert avalanche.total_months <= current.total_months


class TestCurrent:
    """Each debt pays its own monthly payment."""

    def test_uses_monthly_payment_not_minimum(self):
        debts = [make_debt("loan", balance=1200.0, rate=12.0, minimum_payment=50.0, monthly_payment=103.0)]

        result = simulate_payoff(debts, "current", start_date=START)

        assert_float_equal(result[0].entry("loan").payment, 103.00)
        assert len(result) == 13

    def test_extra_payment_is_not_allocated(self):
        with_extra = simulate_payoff(_two_debts(), "current", 150.0, start_date=START)
        without = simulate_payoff(_two_debts(), "current", 0.0, start_date=START)

        assert with_extra.months == without.months


class TestInterestOnly:
    """Interest-only debts are serviced but never accelerated."""

    @staticmethod
    def _debts():
        return [
            make_debt("io", balance=500.0, rate=12.0, minimum_payment=5.0, repayment_type="aflossingsvrij"),
            make_debt("loan", balance=1000.0, rate=12.0, minimum_payment=50.0),
        ]

    def test_interest_only_debt_keeps_its_balance(self):
        result = simulate_payoff(self._debts(), "snowball", 100.0, start_date=START)

        for month in result:
            entry = month.entry("io")
            assert entry.principal == 0
            assert entry.balance == 500.00
            assert_float_equal(entry.payment, 5.00)

    def test_surplus_skips_interest_only_debt(self):
        """Smallest balance is the interest-only debt, yet the loan gets the surplus."""
        result = simulate_payoff(self._debts(), "snowball", 100.0, start_date=START)

        assert_float_equal(result[0].entry("loan").payment, 150.00)

    def test_remaining_interest_only_balance_runs_to_horizon(self):
        result = simulate_payoff(self._debts(), "snowball", 100.0, start_date=START)

        loan_paid = result.payoff_month("loan")
        assert loan_paid is not None
        assert len(result) == MAX_SIMULATION_MONTHS
        assert result.truncated is True
        for month in result.months[loan_paid:]:
            assert month.total_balance == 500.00


class TestTermination:
    """Loop bounds and balance invariants."""

    def test_unpayable_portfolio_is_truncated(self):
        debts = [make_debt("card", balance=10000.0, rate=12.0, minimum_payment=50.0)]

        result = simulate_payoff(debts, "snowball", start_date=START)

        assert len(result) == MAX_SIMULATION_MONTHS
        assert result.truncated is True
        assert result[-1].total_balance > 0
        assert payoff_summary(result).truncated is True

    def test_balances_never_negative_and_total_decreases(self):
        result = simulate_payoff(_two_debts(), "avalanche", 200.0, start_date=START)

        previous = 6000.0
        for month in result:
            assert all(entry.balance >= 0 for entry in month.debts)
            assert month.total_balance < previous
            previous = month.total_balance
        assert result[-1].total_balance == 0.0

    def test_simulation_is_deterministic(self):
        first = simulate_payoff(_two_debts(), "snowball", 200.0, start_date=START)
        second = simulate_payoff(_two_debts(), "snowball", 200.0, start_date=START)

        assert first == second

    def test_input_records_are_not_mutated(self):
        debts = _two_debts()

        simulate_payoff(debts, "avalanche", 200.0, start_date=START)

        assert debts[0].current_balance == 1000.0
        assert debts[1].current_balance == 5000.0
