# app/crud/crud_transaction.py
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy import desc, and_
from typing import Optional, List, Dict, Any

from app.db.models.transaction import Transaction as TransactionModel, TransactionType
from app.schemas.transaction import TransactionCreate
from app.services.catalog import get_known_category

# --- Read Operations ---

async def get_transaction(db: AsyncSession, *, transaction_id: int, user_id: int) -> Optional[TransactionModel]:
    """A transaction by id, only if it belongs to the user."""
    result = await db.execute(
        select(TransactionModel).filter(
            TransactionModel.id == transaction_id,
            TransactionModel.user_id == user_id,
        )
    )
    return result.scalar_one_or_none()

async def get_transactions_by_user(
    db: AsyncSession,
    *,
    user_id: int,
    filters: Optional[Dict[str, Any]] = None,
    skip: int = 0,
    limit: Optional[int] = None
) -> List[TransactionModel]:
    """
    Transactions of a user, newest first (by date, then by id for the same day).
    The dashboard relies on this order for the "recent transactions" block.

    Supported filters: type, category_id, start_date, end_date (inclusive).
    """
    filters = filters or {}
    query = select(TransactionModel).filter(TransactionModel.user_id == user_id)

    conditions = []
    if filters.get("type"):
        conditions.append(TransactionModel.type == TransactionType(filters["type"]))
    if filters.get("category_id") is not None:
        conditions.append(TransactionModel.category_id == filters["category_id"])
    if filters.get("start_date"):
        conditions.append(TransactionModel.date >= filters["start_date"])
    if filters.get("end_date"):
        conditions.append(TransactionModel.date <= filters["end_date"])

    if conditions:
        query = query.filter(and_(*conditions))

    query = query.order_by(desc(TransactionModel.date), desc(TransactionModel.id)).offset(skip)
    if limit is not None:
        query = query.limit(limit)

    result = await db.execute(query)
    return list(result.scalars().all())

# --- Create Operation ---

async def create_transaction(db: AsyncSession, *, obj_in: TransactionCreate, user_id: int) -> TransactionModel:
    """
    Record a transaction for the user.
    Raises ValueError if the category is not in the catalog or its type
    does not match the transaction type.
    """
    category = get_known_category(obj_in.category_id)
    if category is None:
        raise ValueError(f"Unknown category: {obj_in.category_id}")
    if category.type != obj_in.type:
        raise ValueError(f"Category '{category.name}' only accepts {category.type.value} transactions")

    db_obj = TransactionModel(
        user_id=user_id,
        category_id=obj_in.category_id,
        amount=obj_in.amount,
        type=obj_in.type,
        date=obj_in.date,
        description=obj_in.description,
    )
    db.add(db_obj)
    await db.flush()
    await db.refresh(db_obj)
    return db_obj

# --- Delete Operation ---

async def remove_transaction(db: AsyncSession, *, transaction_id: int, user_id: int) -> Optional[TransactionModel]:
    """Delete a user's transaction. Returns None if there was nothing to delete."""
    db_obj = await get_transaction(db, transaction_id=transaction_id, user_id=user_id)
    if db_obj:
        await db.delete(db_obj)
        await db.flush()
        return db_obj
    return None
