from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from lockbox.database import get_db
from lockbox.models.user import User
from lockbox.schemas.item import ItemOut
from lockbox.services.items import search_items, serialize_item
from lockbox.utils.auth import get_current_user

router = APIRouter(prefix="/api", tags=["Search"])


@router.get("/search", response_model=list[ItemOut])
async def search(
    q: str = "",
    type: Optional[str] = None,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    items = await search_items(db, current_user, q, type)
    return [serialize_item(item) for item in items]
