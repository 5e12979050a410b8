from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from lockbox.core.errors import NotFound, ValidationError
from lockbox.database import commit_or_fail
from lockbox.models.user import User
from lockbox.models.vault import Vault


async def list_vaults(db: AsyncSession, user: User) -> list[Vault]:
    result = await db.execute(
        select(Vault)
        .where(Vault.user_id == user.id)
        .order_by(Vault.created_at, Vault.id)
    )
    return list(result.scalars().all())


async def create_vault(db: AsyncSession, user: User, name: str | None) -> Vault:
    if not name:
        raise ValidationError("Vault name is required")

    vault = Vault(user_id=user.id, name=name)
    db.add(vault)
    await commit_or_fail(db, "create vault")
    await db.refresh(vault)
    return vault


async def get_owned_vault(db: AsyncSession, user: User, vault_id: UUID) -> Vault:
    """Return the vault if it exists and belongs to *user*, else ``NotFound``."""
    result = await db.execute(
        select(Vault).where(
            Vault.id == vault_id,
            Vault.user_id == user.id,
        )
    )
    vault = result.scalar_one_or_none()
    if vault is None:
        raise NotFound("Vault not found")
    return vault
