import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from lockbox.config import settings
from lockbox.core.errors import InternalError

logger = logging.getLogger(__name__)

DATABASE_URL = settings.DATABASE_URL

# Async engine, one pool shared by every request
engine = create_async_engine(DATABASE_URL, echo=settings.DB_ECHO)

# Async session factory
AsyncSessionLocal = sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False
)

# Base for all models
Base = declarative_base()

# Per-request DB session
async def get_db():
    db = AsyncSessionLocal()
    try:
        yield db
    finally:
        await db.close()


async def commit_or_fail(db: AsyncSession, action: str) -> None:
    """Commit the session, turning store failures into ``InternalError``."""
    try:
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Database error while trying to {action}: {e}")
        raise InternalError(str(e))
