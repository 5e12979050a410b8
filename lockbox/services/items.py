import json
import logging
from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from lockbox.core.errors import NotFound, ValidationError
from lockbox.database import commit_or_fail
from lockbox.models.folder import ItemFolder
from lockbox.models.item import Item
from lockbox.models.user import User
from lockbox.schemas.item import ItemCreate, ItemOut, ItemUpdate
from lockbox.services.vaults import get_owned_vault

logger = logging.getLogger(__name__)


def encode_data(data: Any) -> str:
    if not isinstance(data, (dict, list)):
        raise ValidationError("Item data must be a JSON object or array")
    return json.dumps(data)


def decode_data(raw: str) -> Any:
    return json.loads(raw)


def serialize_item(item: Item, data: Any = None) -> ItemOut:
    """Build the response for *item*, decoding the stored payload.

    Pass *data* to echo a payload the caller just submitted instead of
    decoding the stored copy.
    """
    return ItemOut(
        id=item.id,
        vault_id=item.vault_id,
        user_id=item.user_id,
        type=item.type,
        name=item.name,
        favorite=item.favorite,
        data=decode_data(item.data) if data is None else data,
        created_at=item.created_at,
        updated_at=item.updated_at,
    )


async def get_owned_item(db: AsyncSession, user: User, item_id: UUID) -> Item:
    result = await db.execute(
        select(Item).where(
            Item.id == item_id,
            Item.user_id == user.id,
        )
    )
    item = result.scalar_one_or_none()
    if item is None:
        raise NotFound("Item not found")
    return item


async def list_vault_items(db: AsyncSession, user: User, vault_id: UUID) -> list[Item]:
    vault = await get_owned_vault(db, user, vault_id)
    result = await db.execute(
        select(Item)
        .where(Item.vault_id == vault.id, Item.user_id == user.id)
        .order_by(Item.created_at, Item.id)
    )
    return list(result.scalars().all())


async def create_item(db: AsyncSession, user: User, vault_id: UUID, payload: ItemCreate) -> Item:
    if not payload.type or not payload.name or payload.data is None:
        raise ValidationError("Type, name and data are required")
    encoded = encode_data(payload.data)

    vault = await get_owned_vault(db, user, vault_id)
    item = Item(
        vault_id=vault.id,
        user_id=user.id,
        type=payload.type,
        name=payload.name,
        favorite=payload.favorite,
        data=encoded,
    )
    db.add(item)
    await commit_or_fail(db, "create item")
    await db.refresh(item)
    return item


async def update_item(db: AsyncSession, user: User, item_id: UUID, payload: ItemUpdate) -> Item:
    item = await get_owned_item(db, user, item_id)

    if payload.type:
        item.type = payload.type
    if payload.name:
        item.name = payload.name
    if "data" in payload.model_fields_set and payload.data is not None:
        item.data = encode_data(payload.data)
    # presence, not truthiness: {"favorite": false} must clear the flag
    if "favorite" in payload.model_fields_set:
        item.favorite = bool(payload.favorite)
    item.updated_at = datetime.utcnow()

    await commit_or_fail(db, "update item")
    await db.refresh(item)
    return item


async def delete_item(db: AsyncSession, user: User, item_id: UUID) -> None:
    item = await get_owned_item(db, user, item_id)

    await db.execute(delete(ItemFolder).where(ItemFolder.item_id == item.id))
    await db.delete(item)
    await commit_or_fail(db, "delete item")
    logger.info(f"Deleted item {item.id} for user {user.id}")


async def search_items(db: AsyncSession, user: User, query: str = "", item_type: str | None = None) -> list[Item]:
    """Return the user's items whose name contains *query*, ignoring case.

    An empty query matches every item. *item_type*, when given, must match
    exactly.
    """
    stmt = select(Item).where(
        Item.user_id == user.id,
        Item.name.icontains(query or "", autoescape=True),
    )
    if item_type:
        stmt = stmt.where(Item.type == item_type)
    result = await db.execute(stmt.order_by(Item.created_at, Item.id))
    return list(result.scalars().all())
