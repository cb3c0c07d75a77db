"""Tests for the aggregation engine (summary totals and budget utilization)."""
import random
from decimal import Decimal

import pytest

from app.services.aggregation import (
    AggregateSummary,
    BudgetTier,
    classify_utilization,
    compute_budget_statuses,
    compute_summary,
)
from app.services.catalog import UnknownCategory

from factories import make_budget, make_transaction


class TestComputeSummary:

    def test_empty_input_is_all_zero(self):
        assert compute_summary([]) == AggregateSummary(Decimal(0), Decimal(0), Decimal(0))

    def test_income_and_expenses(self):
        transactions = [
            make_transaction(5000, "income", category_id=1),
            make_transaction(2000, "expense", category_id=5),
            make_transaction(1000, "expense", category_id=4),
        ]
        summary = compute_summary(transactions)
        assert summary.total_income == Decimal(5000)
        assert summary.total_expense == Decimal(3000)
        assert summary.balance == Decimal(2000)

    def test_balance_can_be_negative(self):
        summary = compute_summary([
            make_transaction(100, "income", category_id=1),
            make_transaction(250.5, "expense"),
        ])
        assert summary.balance == Decimal("-150.5")

    def test_order_does_not_matter(self):
        transactions = [make_transaction(i * 1.25, "income" if i % 3 else "expense") for i in range(1, 30)]
        shuffled = transactions[:]
        random.Random(7).shuffle(shuffled)

        summary = compute_summary(transactions)
        assert compute_summary(shuffled) == summary
        assert summary.balance == summary.total_income - summary.total_expense

    def test_float_amounts_are_summed_exactly(self):
        summary = compute_summary([make_transaction(0.1, "income", 1), make_transaction(0.2, "income", 1)])
        assert summary.total_income == Decimal("0.3")


class TestClassifyUtilization:

    @pytest.mark.parametrize("percent, tier", [
        ("0", BudgetTier.ok),
        ("70", BudgetTier.ok),
        ("70.0001", BudgetTier.warning),
        ("90", BudgetTier.warning),
        ("90.0001", BudgetTier.critical),
        ("100", BudgetTier.critical),
    ])
    def test_thresholds(self, percent, tier):
        assert classify_utilization(Decimal(percent)) == tier


class TestComputeBudgetStatuses:

    def test_warning_at_ninety_percent(self):
        budget = make_budget(category_id=4, limit=500)
        transactions = [make_transaction(200, category_id=4), make_transaction(250, category_id=4)]

        [status] = compute_budget_statuses([budget], transactions)

        assert status.spent == Decimal(450)
        assert status.limit == Decimal(500)
        assert status.utilization_percent == Decimal("90.0")
        assert status.tier == BudgetTier.warning
        assert status.category.name == "Groceries"

    def test_overspending_is_capped_at_hundred(self):
        budget = make_budget(category_id=5, limit=100)
        [status] = compute_budget_statuses([budget], [make_transaction(150, category_id=5)])

        assert status.spent == Decimal(150)
        assert status.utilization_percent == Decimal(100)
        assert status.tier == BudgetTier.critical

    def test_only_matching_category_counts(self):
        budget = make_budget(category_id=7, limit=1000)
        transactions = [
            make_transaction(100, category_id=7),
            make_transaction(900, category_id=4),
            make_transaction(5000, "income", category_id=1),
        ]
        [status] = compute_budget_statuses([budget], transactions)

        assert status.spent == Decimal(100)
        assert status.utilization_percent == Decimal(10)
        assert status.tier == BudgetTier.ok

    def test_no_transactions_means_zero_utilization(self):
        [status] = compute_budget_statuses([make_budget(6, 300)], [])
        assert status.spent == Decimal(0)
        assert status.utilization_percent == Decimal(0)
        assert status.tier == BudgetTier.ok

    def test_budget_order_is_preserved(self):
        budgets = [make_budget(9, 10), make_budget(4, 10), make_budget(6, 10)]
        statuses = compute_budget_statuses(budgets, [])
        assert [s.category.id for s in statuses] == [9, 4, 6]

    def test_utilization_always_between_zero_and_hundred(self):
        rng = random.Random(11)
        for _ in range(50):
            budget = make_budget(4, rng.randint(1, 1000))
            transactions = [make_transaction(rng.randint(0, 500), category_id=4) for _ in range(rng.randint(0, 6))]
            [status] = compute_budget_statuses([budget], transactions)
            assert Decimal(0) <= status.utilization_percent <= Decimal(100)

    def test_unknown_category_gets_marker_instead_of_error(self):
        [status] = compute_budget_statuses([make_budget(42, 100)], [make_transaction(10, category_id=42)])
        assert isinstance(status.category, UnknownCategory)
        assert status.category.is_known is False
        assert status.spent == Decimal(10)
