from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import BaseModel

class FolderCreate(BaseModel):
    name: Optional[str] = None

class FolderOut(BaseModel):
    id: UUID
    user_id: UUID
    name: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class FolderCreated(BaseModel):
    id: UUID
    name: str
