import logging
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from lockbox.core.errors import Unauthorized
from lockbox.database import get_db
from lockbox.models.user import User
from lockbox.utils.security import decode_access_token

logger = logging.getLogger(__name__)

# auto_error=False so a missing header reaches get_current_user and fails
# with the same Unauthorized as any other credential problem.
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Resolve the bearer token of the request to its user.

    Fails closed: a missing header, a bad or expired token, an unknown user
    and a failing store lookup all end in ``Unauthorized`` without detail.
    """
    if credentials is None or not credentials.credentials:
        raise Unauthorized()

    try:
        payload = decode_access_token(credentials.credentials)
        user_id = UUID(str(payload["sub"]))
        user = await db.get(User, user_id)
    except Exception as e:
        logger.warning(f"Rejected credential: {type(e).__name__}")
        raise Unauthorized()

    if user is None:
        raise Unauthorized()
    return user
