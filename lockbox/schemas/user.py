from pydantic import BaseModel, EmailStr
from typing import Optional
from uuid import UUID
from datetime import datetime

class UserCreate(BaseModel):
    # Optional so that missing fields produce the registration error message
    # instead of a generic schema error.
    email: Optional[EmailStr] = None
    password: Optional[str] = None

class UserLogin(BaseModel):
    # Plain str: a malformed email must fail exactly like a wrong password.
    email: Optional[str] = None
    password: Optional[str] = None

class UserSummary(BaseModel):
    id: UUID
    email: str

    class Config:
        from_attributes = True

class UserOut(UserSummary):
    created_at: datetime
    updated_at: datetime

class LoginResponse(BaseModel):
    token: str
    user: UserSummary
