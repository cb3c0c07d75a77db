# app/api/v1/endpoints/transactions.py
from fastapi import APIRouter, Depends, HTTPException, status, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional, Sequence
from datetime import date

import structlog

from app import schemas
from app import crud
from app.api.v1 import deps
from app.db.models.transaction import Transaction as TransactionModel, TransactionType
from app.services.catalog import lookup_category

router = APIRouter()
logger = structlog.get_logger(__name__)


def attach_category_names(transactions: Sequence[TransactionModel]) -> Sequence[TransactionModel]:
    """Set category_name on ORM rows for the response schema (the catalog is not a table to join)."""
    for t in transactions:
        t.category_name = lookup_category(t.category_id).name
    return transactions


@router.get("/", response_model=List[schemas.Transaction])
async def read_transactions(
    *,
    db: AsyncSession = Depends(deps.get_async_db),
    auth_context: deps.AuthContext = Depends(deps.get_auth_context),
    skip: int = Query(0, ge=0, description="Offset for pagination"),
    limit: Optional[int] = Query(None, gt=0, le=1000, description="Page size; all transactions when omitted"),
    type: Optional[TransactionType] = Query(None, description="income or expense"),
    category_id: Optional[int] = Query(None),
    start_date: Optional[date] = Query(None, description="Inclusive, YYYY-MM-DD"),
    end_date: Optional[date] = Query(None, description="Inclusive, YYYY-MM-DD"),
):
    """
    Transactions of the current user, newest first.
    """
    filters = {
        "type": type.value if type else None,
        "category_id": category_id,
        "start_date": start_date,
        "end_date": end_date,
    }
    active_filters = {k: v for k, v in filters.items() if v is not None}

    try:
        transactions = await crud.crud_transaction.get_transactions_by_user(
            db=db,
            user_id=auth_context.user_id,
            filters=active_filters,
            skip=skip,
            limit=limit
        )
    except Exception:
        logger.exception("read_transactions_failed", user_id=auth_context.user_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Could not retrieve transactions")

    return attach_category_names(transactions)


@router.post(
    "/",
    response_model=schemas.Transaction,
    status_code=status.HTTP_201_CREATED
)
async def create_transaction(
    *,
    db: AsyncSession = Depends(deps.get_async_db),
    transaction_in: schemas.TransactionCreate,
    auth_context: deps.AuthContext = Depends(deps.get_auth_context)
):
    """
    Record an income or expense.
    The category must exist in the catalog and have the same type as the transaction.
    """
    try:
        transaction = await crud.crud_transaction.create_transaction(
            db=db,
            obj_in=transaction_in,
            user_id=auth_context.user_id
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception:
        logger.exception("create_transaction_failed", user_id=auth_context.user_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Could not create transaction")

    logger.info("transaction_created", user_id=auth_context.user_id, transaction_id=transaction.id)
    attach_category_names([transaction])
    return transaction


@router.delete(
    "/{transaction_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response
)
async def delete_transaction(
    *,
    db: AsyncSession = Depends(deps.get_async_db),
    transaction_id: int,
    auth_context: deps.AuthContext = Depends(deps.get_auth_context)
):
    """
    Delete one of the current user's transactions.
    Someone else's transaction looks exactly like a missing one (404).
    """
    try:
        deleted = await crud.crud_transaction.remove_transaction(
            db=db,
            transaction_id=transaction_id,
            user_id=auth_context.user_id
        )
    except Exception:
        logger.exception("delete_transaction_failed", user_id=auth_context.user_id, transaction_id=transaction_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Could not delete transaction")

    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Transaction not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
