from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from lockbox.database import get_db
from lockbox.schemas.user import UserCreate, UserLogin, UserSummary, LoginResponse
from lockbox.services.users import authenticate_user, register_user
from lockbox.utils.security import create_access_token

router = APIRouter(prefix="/api", tags=["Auth"])


@router.post("/register", response_model=UserSummary, status_code=status.HTTP_201_CREATED)
async def register(user: UserCreate, db: AsyncSession = Depends(get_db)):
    return await register_user(db, user.email, user.password)


@router.post("/login", response_model=LoginResponse)
async def login(credentials: UserLogin, db: AsyncSession = Depends(get_db)):
    user = await authenticate_user(db, credentials.email, credentials.password)
    return LoginResponse(
        token=create_access_token(str(user.id)),
        user=UserSummary(id=user.id, email=user.email),
    )
