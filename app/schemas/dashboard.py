# app/schemas/dashboard.py
from pydantic import BaseModel, ConfigDict
from typing import Dict, List
from app.services.aggregation import BudgetTier
from app.schemas.transaction import Transaction

class Summary(BaseModel):
    total_income: float
    total_expense: float
    balance: float # May be negative

    model_config = ConfigDict(from_attributes=True)

class BudgetDisplay(BaseModel):
    category_id: int
    category_name: str
    icon: str
    spent: float
    limit: float
    spent_display: str # e.g. "₹450.00"
    limit_display: str
    utilization_percent: float
    remaining_percent: float
    tier: BudgetTier
    color: str
    color_hex: str

    model_config = ConfigDict(from_attributes=True)

class Dashboard(BaseModel):
    summary: Summary
    summary_display: Dict[str, str]
    recent_transactions: List[Transaction]
    budgets: List[BudgetDisplay]

    model_config = ConfigDict(from_attributes=True)
