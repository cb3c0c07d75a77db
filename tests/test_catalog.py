"""Tests for the static category catalog."""
from app.db.models.transaction import TransactionType
from app.services.catalog import (
    Category,
    UnknownCategory,
    get_known_category,
    list_categories,
    lookup_category,
)


class TestLookupCategory:

    def test_known_category(self):
        category = lookup_category(4)
        assert isinstance(category, Category)
        assert category.is_known
        assert category.name == "Groceries"
        assert category.type == TransactionType.expense
        assert category.icon == "fa-shopping-basket"

    def test_unknown_category_returns_marker(self):
        category = lookup_category(999)
        assert isinstance(category, UnknownCategory)
        assert not category.is_known
        assert category.id == 999
        assert category.name == "Unknown"
        assert category.icon == "fa-question"

    def test_get_known_category_returns_none_for_unknown(self):
        assert get_known_category(999) is None
        assert get_known_category(1).name == "Salary"


class TestListCategories:

    def test_full_catalog(self):
        categories = list_categories()
        assert [c.id for c in categories] == list(range(1, 10))

    def test_filter_by_type(self):
        income = list_categories(TransactionType.income)
        expense = list_categories(TransactionType.expense)
        assert [c.name for c in income] == ["Salary", "Freelance", "Investment"]
        assert len(expense) == 6
        assert all(c.type == TransactionType.expense for c in expense)
