# app/schemas/__init__.py
from .user import User, UserCreate, UserLogin, UserUpdate
from .category import Category
from .transaction import Transaction, TransactionCreate
from .budget import Budget, BudgetSet
from .dashboard import Summary, BudgetDisplay, Dashboard
