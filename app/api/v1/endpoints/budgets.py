# app/api/v1/endpoints/budgets.py
from fastapi import APIRouter, Depends, HTTPException, status, Response
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

import structlog

from app import schemas
from app import crud
from app.api.v1 import deps
from app.core.config import settings
from app.services.aggregation import compute_budget_statuses
from app.services.presentation import format_budget_status

router = APIRouter()
logger = structlog.get_logger(__name__)


@router.get("/", response_model=List[schemas.Budget])
async def read_budgets(
    db: AsyncSession = Depends(deps.get_async_db),
    auth_context: deps.AuthContext = Depends(deps.get_auth_context)
):
    """Budgets of the current user."""
    try:
        return await crud.crud_budget.get_budgets_by_user(db=db, user_id=auth_context.user_id)
    except Exception:
        logger.exception("read_budgets_failed", user_id=auth_context.user_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Could not retrieve budgets")


@router.post("/", response_model=schemas.Budget)
async def set_budget(
    *,
    db: AsyncSession = Depends(deps.get_async_db),
    budget_in: schemas.BudgetSet,
    auth_context: deps.AuthContext = Depends(deps.get_auth_context)
):
    """
    Set the spending limit for an expense category.
    Creates the budget on first use, afterwards only the limit changes.
    """
    try:
        budget = await crud.crud_budget.set_budget(db=db, obj_in=budget_in, user_id=auth_context.user_id)
    except ValueError as e: # Unknown or income category
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception:
        logger.exception("set_budget_failed", user_id=auth_context.user_id, category_id=budget_in.category_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Could not set budget")

    logger.info("budget_set", user_id=auth_context.user_id, category_id=budget.category_id, limit=str(budget.limit_amount))
    return budget


@router.get("/status", response_model=List[schemas.BudgetDisplay])
async def read_budget_statuses(
    db: AsyncSession = Depends(deps.get_async_db),
    auth_context: deps.AuthContext = Depends(deps.get_auth_context)
):
    """
    Spent vs limit for every budget, with tier and colour for the progress bars.
    Recomputed on every request from the full transaction history.
    """
    try:
        budgets = await crud.crud_budget.get_budgets_by_user(db=db, user_id=auth_context.user_id)
        transactions = await crud.crud_transaction.get_transactions_by_user(db=db, user_id=auth_context.user_id)
    except Exception:
        logger.exception("read_budget_statuses_failed", user_id=auth_context.user_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Could not retrieve budgets")

    statuses = compute_budget_statuses(budgets, transactions)
    return [
        schemas.BudgetDisplay.model_validate(format_budget_status(s, settings.CURRENCY_SYMBOL))
        for s in statuses
    ]


@router.delete(
    "/{budget_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response
)
async def delete_budget(
    *,
    db: AsyncSession = Depends(deps.get_async_db),
    budget_id: int,
    auth_context: deps.AuthContext = Depends(deps.get_auth_context)
):
    try:
        deleted = await crud.crud_budget.remove_budget(db=db, budget_id=budget_id, user_id=auth_context.user_id)
    except Exception:
        logger.exception("delete_budget_failed", user_id=auth_context.user_id, budget_id=budget_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Could not delete budget")

    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Budget not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
