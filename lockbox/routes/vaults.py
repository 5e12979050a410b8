from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from lockbox.database import get_db
from lockbox.models.user import User
from lockbox.schemas.item import ItemCreate, ItemOut
from lockbox.schemas.vault import VaultCreate, VaultCreated, VaultOut
from lockbox.services import items as item_service
from lockbox.services import vaults as vault_service
from lockbox.utils.auth import get_current_user
from lockbox.utils.identifiers import parse_id

router = APIRouter(prefix="/api/vaults", tags=["Vaults"])


@router.get("", response_model=list[VaultOut])
async def list_vaults(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await vault_service.list_vaults(db, current_user)


@router.post("", response_model=VaultCreated, status_code=status.HTTP_201_CREATED)
async def create_vault(
    payload: VaultCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    vault = await vault_service.create_vault(db, current_user, payload.name)
    return VaultCreated(id=vault.id, name=vault.name)


@router.get("/{vault_id}/items", response_model=list[ItemOut])
async def list_vault_items(
    vault_id: str,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    items = await item_service.list_vault_items(db, current_user, parse_id(vault_id, "Vault not found"))
    return [item_service.serialize_item(item) for item in items]


@router.post("/{vault_id}/items", response_model=ItemOut, status_code=status.HTTP_201_CREATED)
async def create_vault_item(
    vault_id: str,
    payload: ItemCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Store a new item in one of the caller's vaults.

    The response carries ``data`` exactly as submitted rather than a
    decoded copy of what was stored.
    """
    item = await item_service.create_item(db, current_user, parse_id(vault_id, "Vault not found"), payload)
    return item_service.serialize_item(item, data=payload.data)
