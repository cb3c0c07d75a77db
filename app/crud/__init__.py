# app/crud/__init__.py
from . import crud_user
from . import crud_budget
from . import crud_transaction
