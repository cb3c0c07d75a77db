# app/services/dashboard.py
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

from app.services.aggregation import AggregateSummary, compute_budget_statuses, compute_summary
from app.services.presentation import (
    DEFAULT_CURRENCY_SYMBOL,
    DisplayRecord,
    format_budget_status,
    format_currency,
    recent_transactions,
)


@dataclass(frozen=True)
class Dashboard:
    summary: AggregateSummary
    summary_display: Dict[str, str]
    recent_transactions: List[Any]
    budgets: List[DisplayRecord]


def build_dashboard(
    transactions: Sequence[Any],
    budgets: Sequence[Any],
    *,
    recent_limit: int,
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
) -> Dashboard:
    """Everything the dashboard page shows, from one newest-first transaction list and the user's budgets."""
    summary = compute_summary(transactions)
    statuses = compute_budget_statuses(budgets, transactions)

    return Dashboard(
        summary=summary,
        summary_display={
            "total_income": format_currency(summary.total_income, currency_symbol),
            "total_expense": format_currency(summary.total_expense, currency_symbol),
            "balance": format_currency(summary.balance, currency_symbol),
        },
        recent_transactions=recent_transactions(transactions, recent_limit),
        budgets=[format_budget_status(s, currency_symbol) for s in statuses],
    )
