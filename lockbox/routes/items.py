from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from lockbox.database import get_db
from lockbox.models.user import User
from lockbox.schemas.common import Message
from lockbox.schemas.item import ItemOut, ItemUpdate
from lockbox.services import folders as folder_service
from lockbox.services import items as item_service
from lockbox.utils.auth import get_current_user
from lockbox.utils.identifiers import parse_id

router = APIRouter(prefix="/api/items", tags=["Items"])


@router.get("/{item_id}", response_model=ItemOut)
async def get_item(
    item_id: str,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    item = await item_service.get_owned_item(db, current_user, parse_id(item_id, "Item not found"))
    return item_service.serialize_item(item)


@router.put("/{item_id}", response_model=ItemOut)
async def update_item(
    item_id: str,
    payload: ItemUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    item = await item_service.update_item(db, current_user, parse_id(item_id, "Item not found"), payload)
    return item_service.serialize_item(item)


@router.delete("/{item_id}", response_model=Message)
async def delete_item(
    item_id: str,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    await item_service.delete_item(db, current_user, parse_id(item_id, "Item not found"))
    return Message(message="Item deleted successfully")


@router.post("/{item_id}/folders/{folder_id}", response_model=Message, status_code=status.HTTP_201_CREATED)
async def add_item_to_folder(
    item_id: str,
    folder_id: str,
    response: Response,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    created = await folder_service.add_item_to_folder(
        db,
        current_user,
        parse_id(item_id, "Item not found"),
        parse_id(folder_id, "Folder not found"),
    )
    if not created:
        response.status_code = status.HTTP_200_OK
        return Message(message="Item already in folder")
    return Message(message="Item added to folder successfully")


@router.delete("/{item_id}/folders/{folder_id}", response_model=Message)
async def remove_item_from_folder(
    item_id: str,
    folder_id: str,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    await folder_service.remove_item_from_folder(
        db,
        current_user,
        parse_id(item_id, "Item not found"),
        parse_id(folder_id, "Folder not found"),
    )
    return Message(message="Item removed from folder successfully")
