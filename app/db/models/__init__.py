# app/db/models/__init__.py
from .user import User
from .transaction import Transaction, TransactionType
from .budget import Budget
