# app/crud/crud_user.py
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from typing import Optional

from app.core.security import hash_password, verify_password
from app.db.models.user import User as UserModel
from app.schemas.user import UserCreate, UserUpdate

# --- Read Operations ---

async def get_user(db: AsyncSession, user_id: int) -> Optional[UserModel]:
    result = await db.execute(select(UserModel).filter(UserModel.id == user_id))
    return result.scalar_one_or_none()

async def get_user_by_email(db: AsyncSession, email: str) -> Optional[UserModel]:
    result = await db.execute(select(UserModel).filter(UserModel.email == email))
    return result.scalar_one_or_none()

async def is_email_taken(db: AsyncSession, email: str, *, exclude_user_id: Optional[int] = None) -> bool:
    """
    True if another account already uses this email.
    exclude_user_id lets a user keep their own email when editing the profile.
    """
    stmt = select(UserModel.id).filter(UserModel.email == email)
    if exclude_user_id is not None:
        stmt = stmt.filter(UserModel.id != exclude_user_id)
    result = await db.execute(stmt.limit(1))
    return result.scalar_one_or_none() is not None

# --- Create Operation ---

async def create_user(db: AsyncSession, *, user_in: UserCreate) -> UserModel:
    """
    Register a new user.
    Raises ValueError if the email is already registered.
    """
    if await is_email_taken(db, user_in.email):
        raise ValueError("Email already exists")

    db_user = UserModel(
        username=user_in.username,
        email=user_in.email,
        password_hash=hash_password(user_in.password),
    )
    db.add(db_user)
    await db.flush() # Get the generated id; commit happens in get_async_db
    await db.refresh(db_user)
    return db_user

# --- Update Operation ---

async def update_user(db: AsyncSession, *, db_obj: UserModel, obj_in: UserUpdate) -> UserModel:
    """
    Update the profile of an existing user.
    The password is only replaced when a non-empty one is supplied.
    Raises ValueError if the new email belongs to someone else.
    """
    if await is_email_taken(db, obj_in.email, exclude_user_id=db_obj.id):
        raise ValueError("Email already in use")

    db_obj.username = obj_in.username
    db_obj.email = obj_in.email
    if obj_in.password:
        db_obj.password_hash = hash_password(obj_in.password)

    db.add(db_obj)
    await db.flush()
    await db.refresh(db_obj)
    return db_obj

# --- Authentication ---

async def authenticate(db: AsyncSession, *, email: str, password: str) -> Optional[UserModel]:
    """Return the user if email and password match, otherwise None."""
    user = await get_user_by_email(db, email=email)
    if not user or not verify_password(password, user.password_hash):
        return None
    return user
