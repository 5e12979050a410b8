from datetime import datetime
from typing import Any, Optional
from uuid import UUID
from pydantic import BaseModel


class ItemCreate(BaseModel):
    type: Optional[str] = None
    name: Optional[str] = None
    data: Any = None
    favorite: bool = False


class ItemUpdate(BaseModel):
    """Partial update of an item.

    Only keys present in the request body are considered. ``type`` and
    ``name`` are applied when non-empty; ``data`` is applied when present and
    not null, so ``{}`` and ``[]`` replace the payload; ``favorite`` is
    applied whenever it is present, so ``{"favorite": false}`` clears the flag.
    """

    type: Optional[str] = None
    name: Optional[str] = None
    data: Any = None
    favorite: Optional[bool] = None


class ItemOut(BaseModel):
    id: UUID
    vault_id: UUID
    user_id: UUID
    type: str
    name: str
    favorite: bool
    data: Any
    created_at: datetime
    updated_at: datetime
