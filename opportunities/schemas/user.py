
from typing import Optional
from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from opportunities.schemas.common import CamelModel


# Shared properties
class UserBase(CamelModel):
    email: EmailStr
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    nickname: Optional[str] = None


# Properties to receive via API on creation (POST /auth/register)
class UserCreate(UserBase):
    password: str = Field(min_length=6)


# Properties to receive via API on admin creation (POST /auth/admin/register)
class AdminCreate(UserCreate):
    admin_secret: str


# Properties to receive via API on update (PATCH /auth/user)
class ProfileUpdate(CamelModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    nickname: Optional[str] = None
    profile_image_url: Optional[str] = None
    location: Optional[str] = None
    phone: Optional[str] = None
    school_name: Optional[str] = None
    grade: Optional[str] = None
    address: Optional[str] = None


# Properties returned via API
class User(CamelModel):
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    nickname: Optional[str] = None
    profile_image_url: Optional[str] = None
    location: Optional[str] = None
    phone: Optional[str] = None
    school_name: Optional[str] = None
    grade: Optional[str] = None
    address: Optional[str] = None
    role: str
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Token(BaseModel):
    access_token: str
    token_type: str
    user: User
