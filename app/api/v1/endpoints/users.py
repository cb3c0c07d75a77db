# app/api/v1/endpoints/users.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

import structlog

from app import schemas
from app import crud
from app.api.v1 import deps

router = APIRouter()
logger = structlog.get_logger(__name__)

@router.get("/me", response_model=schemas.User)
async def read_current_user(auth_context: deps.AuthContext = Depends(deps.get_auth_context)):
    return auth_context.user


@router.put("/profile", response_model=schemas.User)
async def update_profile(
    *,
    db: AsyncSession = Depends(deps.get_async_db),
    user_in: schemas.UserUpdate,
    auth_context: deps.AuthContext = Depends(deps.get_auth_context)
):
    """
    Change username and email of the current user, and the password if one is given.
    """
    try:
        user = await crud.crud_user.update_user(db=db, db_obj=auth_context.user, obj_in=user_in)
    except ValueError as e: # Email belongs to another account
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception:
        logger.exception("profile_update_failed", user_id=auth_context.user_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server Error")
    return user
