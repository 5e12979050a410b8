from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from lockbox.database import get_db
from lockbox.models.user import User
from lockbox.schemas.folder import FolderCreate, FolderCreated, FolderOut
from lockbox.schemas.item import ItemOut
from lockbox.services import folders as folder_service
from lockbox.services.items import serialize_item
from lockbox.utils.auth import get_current_user
from lockbox.utils.identifiers import parse_id

router = APIRouter(prefix="/api/folders", tags=["Folders"])


@router.get("", response_model=list[FolderOut])
async def list_folders(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await folder_service.list_folders(db, current_user)


@router.post("", response_model=FolderCreated, status_code=status.HTTP_201_CREATED)
async def create_folder(
    payload: FolderCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    folder = await folder_service.create_folder(db, current_user, payload.name)
    return FolderCreated(id=folder.id, name=folder.name)


@router.get("/{folder_id}/items", response_model=list[ItemOut])
async def list_folder_items(
    folder_id: str,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    items = await folder_service.list_folder_items(db, current_user, parse_id(folder_id, "Folder not found"))
    return [serialize_item(item) for item in items]
