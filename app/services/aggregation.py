# app/services/aggregation.py
"""
Aggregation engine for the dashboard.

Pure functions over already-fetched transactions and budgets: no session,
no I/O. Any object exposing the attributes below works as input (ORM rows,
Pydantic schemas, dataclasses):

    transaction: .type, .amount, .category_id
    budget:      .category_id, .limit_amount
"""
import enum
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Iterable, List, Sequence

from app.db.models.transaction import TransactionType
from app.services.catalog import CategoryLookupResult, lookup_category

HUNDRED = Decimal(100)
WARNING_THRESHOLD = Decimal(70)
CRITICAL_THRESHOLD = Decimal(90)


class BudgetTier(str, enum.Enum):
    ok = "ok"
    warning = "warning"
    critical = "critical"


@dataclass(frozen=True)
class AggregateSummary:
    total_income: Decimal
    total_expense: Decimal
    balance: Decimal


@dataclass(frozen=True)
class BudgetStatus:
    category: CategoryLookupResult
    spent: Decimal
    limit: Decimal
    utilization_percent: Decimal # capped at 100
    tier: BudgetTier


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() first so floats like 0.1 don't bring their binary noise along
    return Decimal(str(value))


def compute_summary(transactions: Iterable[Any]) -> AggregateSummary:
    total_income = Decimal(0)
    total_expense = Decimal(0)

    for t in transactions:
        if t.type == TransactionType.income:
            total_income += _to_decimal(t.amount)
        elif t.type == TransactionType.expense:
            total_expense += _to_decimal(t.amount)

    return AggregateSummary(
        total_income=total_income,
        total_expense=total_expense,
        balance=total_income - total_expense,
    )


def classify_utilization(utilization_percent: Decimal) -> BudgetTier:
    """Boundaries belong to the lower tier: 70 is ok, 90 is warning."""
    if utilization_percent > CRITICAL_THRESHOLD:
        return BudgetTier.critical
    if utilization_percent > WARNING_THRESHOLD:
        return BudgetTier.warning
    return BudgetTier.ok


def utilization_percent(spent: Decimal, limit: Decimal) -> Decimal:
    # limit > 0 is guaranteed by budget validation
    return min(HUNDRED, spent / limit * HUNDRED)


def compute_budget_statuses(
    budgets: Sequence[Any],
    transactions: Sequence[Any],
    lookup: Callable[[int], CategoryLookupResult] = lookup_category,
) -> List[BudgetStatus]:
    """
    Spending against every budget, in the order the budgets were given.

    Spent is the all-time sum of the category's transactions; there is no
    period filter.
    """
    spent_by_category: dict = {}
    for t in transactions:
        spent_by_category[t.category_id] = spent_by_category.get(t.category_id, Decimal(0)) + _to_decimal(t.amount)

    statuses: List[BudgetStatus] = []
    for b in budgets:
        spent = spent_by_category.get(b.category_id, Decimal(0))
        limit = _to_decimal(b.limit_amount)
        percent = utilization_percent(spent, limit)
        statuses.append(
            BudgetStatus(
                category=lookup(b.category_id),
                spent=spent,
                limit=limit,
                utilization_percent=percent,
                tier=classify_utilization(percent),
            )
        )
    return statuses
