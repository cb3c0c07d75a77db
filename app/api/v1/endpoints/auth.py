# app/api/v1/endpoints/auth.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

import structlog

from app import schemas
from app import crud
from app.api.v1 import deps

router = APIRouter()
logger = structlog.get_logger(__name__)

@router.post(
    "/register",
    response_model=schemas.User,
    status_code=status.HTTP_201_CREATED
)
async def register(
    *,
    db: AsyncSession = Depends(deps.get_async_db),
    user_in: schemas.UserCreate
):
    """
    Register a new account.
    The email must not be registered yet.
    """
    try:
        user = await crud.crud_user.create_user(db=db, user_in=user_in)
    except ValueError as e: # Email already registered
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception:
        logger.exception("register_failed", email=user_in.email)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server Error")

    logger.info("user_registered", user_id=user.id)
    return user


@router.post(
    "/login",
    response_model=schemas.User
)
async def login(
    *,
    db: AsyncSession = Depends(deps.get_async_db),
    credentials: schemas.UserLogin
):
    """
    Check email and password.
    The returned id is what the client sends back in the User-Id header.
    """
    try:
        user = await crud.crud_user.authenticate(db=db, email=credentials.email, password=credentials.password)
    except Exception:
        logger.exception("login_failed", email=credentials.email)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server Error")

    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return user
