# app/api/v1/routes/auth.py
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_async_session
from app.crud.user import authenticate_user, register_user
from app.schemas.user import Message, Token, UserLogin, UserRegister

router = APIRouter(prefix="/auth", tags=["Authentication"])

@router.post("/register", response_model=Message)
async def register(
    user_in: UserRegister,
    db: AsyncSession = Depends(get_async_session),
):
    """
    Create an account.

    - **name**, **email**, **password**: all required
    """
    await register_user(user_in, db)
    return {"message": "User registered"}

@router.post("/login", response_model=Token)
async def login(
    credentials: UserLogin,
    db: AsyncSession = Depends(get_async_session),
):
    """Exchange email/password for a bearer token valid for 12 hours."""
    token = await authenticate_user(credentials, db)
    return {"token": token}
