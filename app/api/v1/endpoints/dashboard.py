# app/api/v1/endpoints/dashboard.py
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

import structlog

from app import schemas
from app import crud
from app.api.v1 import deps
from app.api.v1.endpoints.transactions import attach_category_names
from app.core.config import settings
from app.services.dashboard import build_dashboard

router = APIRouter()
logger = structlog.get_logger(__name__)


@router.get("/", response_model=schemas.Dashboard)
async def read_dashboard(
    *,
    db: AsyncSession = Depends(deps.get_async_db),
    auth_context: deps.AuthContext = Depends(deps.get_auth_context),
    recent_limit: Optional[int] = Query(None, ge=0, le=100, description="How many recent transactions to include"),
):
    """
    Totals (income, expense, balance), the latest transactions and the state of every budget.
    """
    try:
        transactions = await crud.crud_transaction.get_transactions_by_user(db=db, user_id=auth_context.user_id)
        budgets = await crud.crud_budget.get_budgets_by_user(db=db, user_id=auth_context.user_id)
    except Exception:
        logger.exception("read_dashboard_failed", user_id=auth_context.user_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Could not build dashboard")

    dashboard = build_dashboard(
        transactions,
        budgets,
        recent_limit=settings.RECENT_TRANSACTIONS_LIMIT if recent_limit is None else recent_limit,
        currency_symbol=settings.CURRENCY_SYMBOL,
    )
    attach_category_names(dashboard.recent_transactions)
    return schemas.Dashboard.model_validate(dashboard)
