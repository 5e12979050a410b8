from fastapi import APIRouter, Depends
from lockbox.schemas.user import UserOut
from lockbox.models.user import User
from lockbox.utils.auth import get_current_user

router = APIRouter(
    prefix="/api/users",
    tags=["Users"]
)

@router.get("/me", response_model=UserOut)
async def get_me(current_user: User = Depends(get_current_user)):
    return current_user
