# app/api/v1/deps.py
from fastapi import Depends, HTTPException, status, Header
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

import structlog

from app.db.database import get_async_db # Re-exported: endpoints use deps.get_async_db
from app.db.models.user import User as UserModel
from app import crud

logger = structlog.get_logger(__name__)

# Per-request session context. Nothing about the current user is kept at module level:
# every endpoint receives this object and passes user_id on explicitly.
class AuthContext:
    def __init__(self, user: UserModel):
        self.user = user

    @property
    def user_id(self) -> int:
        return self.user.id


async def get_auth_context(
    user_id_header: Optional[str] = Header(None, alias="User-Id"),
    db: AsyncSession = Depends(get_async_db)
) -> AuthContext:
    """
    FastAPI dependency resolving the signed-in user from the User-Id header
    the client sends after login.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
    )

    if user_id_header is None:
        logger.info("auth_failed", reason="missing User-Id header")
        raise credentials_exception

    try:
        user_id = int(user_id_header)
    except ValueError:
        logger.info("auth_failed", reason="malformed User-Id header", value=user_id_header)
        raise credentials_exception

    current_user = await crud.crud_user.get_user(db, user_id=user_id)
    if not current_user:
        logger.info("auth_failed", reason="unknown user", user_id=user_id)
        raise credentials_exception

    return AuthContext(user=current_user)
