import logging
import uuid

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from lockbox.config import settings
from lockbox.database import commit_or_fail
from lockbox.core.errors import ConflictError, InternalError, InvalidCredentials, ValidationError
from lockbox.models.user import User
from lockbox.models.vault import Vault
from lockbox.utils.security import burn_password_check, hash_password, verify_password

logger = logging.getLogger(__name__)


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    result = await db.execute(select(User).where(User.email == email.lower()))
    return result.scalar_one_or_none()


async def register_user(db: AsyncSession, email: str | None, password: str | None) -> User:
    """Create a user together with its default vault.

    Both rows are written in one transaction: if either insert fails the
    session is rolled back and neither becomes visible.
    """
    if not email or not password:
        raise ValidationError("Email and password are required")

    email = email.lower()
    if await get_user_by_email(db, email) is not None:
        raise ConflictError("User already exists")

    user = User(id=uuid.uuid4(), email=email, password_hash=hash_password(password))
    try:
        db.add(user)
        # users row must exist before the vault's foreign key points at it
        await db.flush()
    except IntegrityError as e:
        await db.rollback()
        # fallback in case of a concurrent registration with the same email
        logger.warning(f"Integrity error during registration: {e}")
        raise ConflictError("User already exists")
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Unexpected error during registration: {e}")
        raise InternalError(str(e))

    db.add(Vault(user_id=user.id, name=settings.DEFAULT_VAULT_NAME))
    # a failure here rolls back the flushed user row as well
    await commit_or_fail(db, "create default vault")

    logger.info(f"Registered user {user.id}")
    return user


async def authenticate_user(db: AsyncSession, email: str | None, password: str | None) -> User:
    if not email or not password:
        raise ValidationError("Email and password are required")

    user = await get_user_by_email(db, email)
    if user is None:
        burn_password_check(password)
        logger.warning("Login attempt for unknown email")
        raise InvalidCredentials()
    if not verify_password(password, user.password_hash):
        logger.warning(f"Failed login for user {user.id}")
        raise InvalidCredentials()
    return user
