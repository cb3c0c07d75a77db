# app/schemas/user.py
from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Optional

class UserBase(BaseModel):
    username: str = Field(..., min_length=1, max_length=100)
    email: EmailStr

class UserCreate(UserBase):
    password: str = Field(..., min_length=1, max_length=128)

class UserLogin(BaseModel):
    email: EmailStr
    password: str

class UserUpdate(UserBase): # Profile form: username and email required, password only when changing it
    password: Optional[str] = Field(None, max_length=128)

class User(UserBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
