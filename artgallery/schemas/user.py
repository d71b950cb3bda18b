from pydantic import BaseModel, EmailStr
from typing import Optional


class Principal(BaseModel):
    """Identity injected by the bearer guard."""

    id: str
    nickname: str


class UserBase(BaseModel):
    nickname: str
    email: EmailStr
    contact: Optional[str] = None

    model_config = {"from_attributes": True}


class UserCreate(UserBase):
    password: str


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class UserOut(UserBase):
    id: int
