from uuid import UUID

from sqlalchemy import delete
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from lockbox.core.errors import NotFound, ValidationError
from lockbox.database import commit_or_fail
from lockbox.models.folder import Folder, ItemFolder
from lockbox.models.item import Item
from lockbox.models.user import User
from lockbox.services.items import get_owned_item

# Dialects whose INSERT supports ON CONFLICT DO NOTHING
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


async def list_folders(db: AsyncSession, user: User) -> list[Folder]:
    result = await db.execute(
        select(Folder)
        .where(Folder.user_id == user.id)
        .order_by(Folder.created_at, Folder.id)
    )
    return list(result.scalars().all())


async def create_folder(db: AsyncSession, user: User, name: str | None) -> Folder:
    if not name:
        raise ValidationError("Folder name is required")

    folder = Folder(user_id=user.id, name=name)
    db.add(folder)
    await commit_or_fail(db, "create folder")
    await db.refresh(folder)
    return folder


async def get_owned_folder(db: AsyncSession, user: User, folder_id: UUID) -> Folder:
    result = await db.execute(
        select(Folder).where(
            Folder.id == folder_id,
            Folder.user_id == user.id,
        )
    )
    folder = result.scalar_one_or_none()
    if folder is None:
        raise NotFound("Folder not found")
    return folder


async def _insert_link(db: AsyncSession, item_id: UUID, folder_id: UUID) -> bool:
    dialect = db.get_bind().dialect.name
    insert = _UPSERT_INSERTS.get(dialect)
    if insert is None:
        if await db.get(ItemFolder, (item_id, folder_id)) is not None:
            return False
        db.add(ItemFolder(item_id=item_id, folder_id=folder_id))
        return True

    stmt = (
        insert(ItemFolder)
        .values(item_id=item_id, folder_id=folder_id)
        .on_conflict_do_nothing(index_elements=["item_id", "folder_id"])
    )
    result = await db.execute(stmt)
    return result.rowcount == 1


async def add_item_to_folder(db: AsyncSession, user: User, item_id: UUID, folder_id: UUID) -> bool:
    """Link an item to a folder, both owned by *user*.

    Returns True when a new link was stored and False when it already
    existed. The item is checked before the folder.
    """
    item = await get_owned_item(db, user, item_id)
    folder = await get_owned_folder(db, user, folder_id)

    created = await _insert_link(db, item.id, folder.id)
    await commit_or_fail(db, "add item to folder")
    return created


async def remove_item_from_folder(db: AsyncSession, user: User, item_id: UUID, folder_id: UUID) -> None:
    item = await get_owned_item(db, user, item_id)
    folder = await get_owned_folder(db, user, folder_id)

    await db.execute(
        delete(ItemFolder).where(
            ItemFolder.item_id == item.id,
            ItemFolder.folder_id == folder.id,
        )
    )
    await commit_or_fail(db, "remove item from folder")


async def list_folder_items(db: AsyncSession, user: User, folder_id: UUID) -> list[Item]:
    folder = await get_owned_folder(db, user, folder_id)
    result = await db.execute(
        select(Item)
        .join(ItemFolder, ItemFolder.item_id == Item.id)
        .where(ItemFolder.folder_id == folder.id, Item.user_id == user.id)
        .order_by(Item.created_at, Item.id)
    )
    return list(result.scalars().all())
