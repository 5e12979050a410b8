"""Password hashing and access token helpers."""

from datetime import datetime, timedelta
from functools import lru_cache
from typing import Any, Dict, Optional

from jose import jwt
from passlib.context import CryptContext

from lockbox.config import settings

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

ACCESS_TOKEN_TYPE = "access"


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash in constant time."""
    return pwd_context.verify(plain_password, hashed_password)


@lru_cache
def _dummy_hash() -> str:
    return pwd_context.hash("lockbox-dummy-password")


def burn_password_check(plain_password: str) -> None:
    """Spend the same work as ``verify_password`` for an unknown account.

    Keeps the response time of a login with an unknown email in line with a
    login that fails on the password.
    """
    pwd_context.verify(plain_password, _dummy_hash())


def create_access_token(subject: str, expires_delta: Optional[timedelta] = None) -> str:
    now = datetime.utcnow()
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode = {
        "sub": subject,
        "type": ACCESS_TOKEN_TYPE,
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Dict[str, Any]:
    """Return the claims of a valid access token.

    Raises ``jose.JWTError`` for a bad signature or an expired token and
    ``ValueError`` for a token that is not an access token.
    """
    payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    if payload.get("type") != ACCESS_TOKEN_TYPE:
        raise ValueError("Invalid token type")
    return payload
