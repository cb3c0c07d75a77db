# app/api/v1/endpoints/categories.py
from fastapi import APIRouter, HTTPException, status, Query
from typing import List, Optional

from app import schemas
from app.db.models.transaction import TransactionType
from app.services import catalog

router = APIRouter()

@router.get("/", response_model=List[schemas.Category])
async def read_categories(
    type: Optional[TransactionType] = Query(None, description="Only income or only expense categories")
):
    """The static category catalog. Shared by all users, no auth needed."""
    return catalog.list_categories(type=type)


@router.get("/{category_id}", response_model=schemas.Category)
async def read_category(category_id: int):
    category = catalog.get_known_category(category_id)
    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return category
