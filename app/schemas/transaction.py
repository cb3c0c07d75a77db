# app/schemas/transaction.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import date as date_type
from decimal import Decimal
from app.db.models.transaction import TransactionType

class TransactionBase(BaseModel):
    type: TransactionType
    amount: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    category_id: int
    date: date_type = Field(default_factory=date_type.today)
    description: Optional[str] = Field(None, max_length=255)

class TransactionCreate(TransactionBase):
    pass

class Transaction(TransactionBase):
    id: int
    user_id: int
    amount: float # Plain JSON number in responses
    category_name: Optional[str] = None # Filled from the catalog by the endpoint

    model_config = ConfigDict(from_attributes=True)
