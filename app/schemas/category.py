# app/schemas/category.py
from pydantic import BaseModel, ConfigDict
from app.db.models.transaction import TransactionType

class Category(BaseModel):
    id: int
    name: str
    type: TransactionType
    icon: str

    model_config = ConfigDict(from_attributes=True) # Built straight from the catalog dataclasses
