# app/crud/crud_budget.py
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from typing import Optional, List

from app.db.models.budget import Budget as BudgetModel
from app.db.models.transaction import TransactionType
from app.schemas.budget import BudgetSet
from app.services.catalog import get_known_category

# --- Read Operations ---

async def get_budget(db: AsyncSession, *, budget_id: int, user_id: int) -> Optional[BudgetModel]:
    result = await db.execute(
        select(BudgetModel).filter(BudgetModel.id == budget_id, BudgetModel.user_id == user_id)
    )
    return result.scalar_one_or_none()

async def get_budget_by_category(db: AsyncSession, *, user_id: int, category_id: int) -> Optional[BudgetModel]:
    result = await db.execute(
        select(BudgetModel).filter(BudgetModel.user_id == user_id, BudgetModel.category_id == category_id)
    )
    return result.scalar_one_or_none()

async def get_budgets_by_user(db: AsyncSession, *, user_id: int) -> List[BudgetModel]:
    """Budgets of a user in creation order."""
    result = await db.execute(
        select(BudgetModel).filter(BudgetModel.user_id == user_id).order_by(BudgetModel.id)
    )
    return list(result.scalars().all())

# --- Create / Update Operation ---

async def set_budget(db: AsyncSession, *, obj_in: BudgetSet, user_id: int) -> BudgetModel:
    """
    Upsert: create the budget for (user, category) or change its limit.
    Only expense categories from the catalog can have a budget; anything
    else raises ValueError.
    """
    category = get_known_category(obj_in.category_id)
    if category is None:
        raise ValueError(f"Unknown category: {obj_in.category_id}")
    if category.type != TransactionType.expense:
        raise ValueError(f"Budgets can only be set for expense categories, '{category.name}' is {category.type.value}")

    db_obj = await get_budget_by_category(db, user_id=user_id, category_id=obj_in.category_id)
    if db_obj:
        db_obj.limit_amount = obj_in.limit
    else:
        db_obj = BudgetModel(user_id=user_id, category_id=obj_in.category_id, limit_amount=obj_in.limit)
    db.add(db_obj)

    await db.flush()
    await db.refresh(db_obj)
    return db_obj

# --- Delete Operation ---

async def remove_budget(db: AsyncSession, *, budget_id: int, user_id: int) -> Optional[BudgetModel]:
    db_obj = await get_budget(db, budget_id=budget_id, user_id=user_id)
    if db_obj:
        await db.delete(db_obj)
        await db.flush()
        return db_obj
    return None
