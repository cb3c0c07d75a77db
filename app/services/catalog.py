# app/services/catalog.py
from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from app.db.models.transaction import TransactionType


@dataclass(frozen=True)
class Category:
    id: int
    name: str
    type: TransactionType
    icon: str # Font Awesome class used by the frontend

    is_known = True


@dataclass(frozen=True)
class UnknownCategory:
    """Returned by lookup_category for ids missing from the catalog."""
    id: int
    name: str = "Unknown"
    icon: str = "fa-question"
    type: Optional[TransactionType] = None

    is_known = False


CategoryLookupResult = Union[Category, UnknownCategory]


CATEGORIES: tuple = (
    Category(1, "Salary", TransactionType.income, "fa-money-bill-wave"),
    Category(2, "Freelance", TransactionType.income, "fa-laptop"),
    Category(3, "Investment", TransactionType.income, "fa-chart-line"),
    Category(4, "Groceries", TransactionType.expense, "fa-shopping-basket"),
    Category(5, "Rent", TransactionType.expense, "fa-home"),
    Category(6, "Utilities", TransactionType.expense, "fa-bolt"),
    Category(7, "Entertainment", TransactionType.expense, "fa-film"),
    Category(8, "Transportation", TransactionType.expense, "fa-bus"),
    Category(9, "Health", TransactionType.expense, "fa-heartbeat"),
)

_CATEGORIES_BY_ID: Dict[int, Category] = {c.id: c for c in CATEGORIES}


def get_known_category(category_id: int) -> Optional[Category]:
    return _CATEGORIES_BY_ID.get(category_id)


def lookup_category(category_id: int) -> CategoryLookupResult:
    """
    Look up a category by id. Never raises: ids that are not in the catalog
    produce an UnknownCategory, and the caller decides what to do with it
    (check `result.is_known`).
    """
    category = _CATEGORIES_BY_ID.get(category_id)
    if category is None:
        return UnknownCategory(id=category_id)
    return category


def list_categories(type: Optional[TransactionType] = None) -> List[Category]:
    if type is None:
        return list(CATEGORIES)
    return [c for c in CATEGORIES if c.type == type]
