from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import BaseModel

class VaultCreate(BaseModel):
    name: Optional[str] = None

class VaultOut(BaseModel):
    id: UUID
    user_id: UUID
    name: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class VaultCreated(BaseModel):
    id: UUID
    name: str
