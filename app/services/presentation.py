# app/services/presentation.py
from dataclasses import dataclass
from decimal import Decimal
from itertools import islice
from typing import Any, Dict, List, Sequence

from app.services.aggregation import HUNDRED, BudgetStatus, BudgetTier

DEFAULT_CURRENCY_SYMBOL = "₹"
CENT = Decimal("0.01")

TIER_COLORS: Dict[BudgetTier, str] = {
    BudgetTier.ok: "green",
    BudgetTier.warning: "yellow",
    BudgetTier.critical: "red",
}

# Progress bar colours used by the web client
TIER_COLORS_HEX: Dict[BudgetTier, str] = {
    BudgetTier.ok: "#34d399",
    BudgetTier.warning: "#fbbf24",
    BudgetTier.critical: "#f87171",
}


@dataclass(frozen=True)
class DisplayRecord:
    category_id: int
    category_name: str
    icon: str
    spent: Decimal
    limit: Decimal
    spent_display: str
    limit_display: str
    utilization_percent: Decimal
    remaining_percent: Decimal
    tier: BudgetTier
    color: str
    color_hex: str


def format_currency(amount: Decimal, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """format_currency(Decimal("-12.5")) -> "-₹12.50" """
    amount = Decimal(amount).quantize(CENT)
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):.2f}"


def format_budget_status(status: BudgetStatus, currency_symbol: str = DEFAULT_CURRENCY_SYMBOL) -> DisplayRecord:
    return DisplayRecord(
        category_id=status.category.id,
        category_name=status.category.name,
        icon=status.category.icon,
        spent=status.spent,
        limit=status.limit,
        spent_display=format_currency(status.spent, currency_symbol),
        limit_display=format_currency(status.limit, currency_symbol),
        utilization_percent=status.utilization_percent,
        remaining_percent=HUNDRED - status.utilization_percent,
        tier=status.tier,
        color=TIER_COLORS[status.tier],
        color_hex=TIER_COLORS_HEX[status.tier],
    )


def recent_transactions(transactions: Sequence[Any], n: int) -> List[Any]:
    """
    First n transactions of a sequence the store already sorted newest-first.
    Nothing is re-sorted here.
    """
    return list(islice(transactions, max(n, 0)))
