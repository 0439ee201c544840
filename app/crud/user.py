# app/crud/user.py
import logging
from typing import Optional

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.core.errors import AuthError, ConflictError
from app.core.security import create_access_token, dummy_verify, get_password_hash, verify_password
from app.models.user import User
from app.schemas.user import UserLogin, UserRegister

logger = logging.getLogger(__name__)

async def get_user_by_email(email: str, db: AsyncSession) -> Optional[User]:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()

async def register_user(user_in: UserRegister, db: AsyncSession) -> User:
    """
    Store a new user with a bcrypt verifier.

    The unique index on email is the source of truth for duplicates, so two
    concurrent registrations cannot both succeed.
    """
    hashed = await run_in_threadpool(get_password_hash, user_in.password)
    user = User(name=user_in.name, email=user_in.email, hashed_password=hashed)
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        logger.info(f"Registration rejected, email already in use: {user_in.email}")
        raise ConflictError("Email already registered")
    await db.refresh(user)
    logger.info(f"Registered user {user.id}")
    return user

async def authenticate_user(credentials: UserLogin, db: AsyncSession) -> str:
    """Check email/password and return a fresh access token."""
    user = await get_user_by_email(credentials.email, db)
    if user is None:
        await run_in_threadpool(dummy_verify)
        logger.info("Login failed: unknown email")
        raise AuthError("Invalid credentials")

    valid = await run_in_threadpool(verify_password, credentials.password, user.hashed_password)
    if not valid:
        logger.info(f"Login failed: bad password for user {user.id}")
        raise AuthError("Invalid credentials")

    return create_access_token(str(user.id))
