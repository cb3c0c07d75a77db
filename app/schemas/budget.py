# app/schemas/budget.py
from pydantic import BaseModel, ConfigDict, Field
from decimal import Decimal

class BudgetSet(BaseModel):
    category_id: int
    limit: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)

class Budget(BaseModel):
    id: int
    user_id: int
    category_id: int
    limit: float = Field(..., validation_alias="limit_amount") # Column is limit_amount, API field is limit

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
