# app/api/v1/routes/deposits.py
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from app.schemas.deposit import DepositCreate, DepositRead
from app.crud.deposit import get_deposits_for_goal, record_deposit
from app.core.database import get_async_session
from app.api.deps import get_current_user_id

router = APIRouter(prefix="/goals/{goal_id}/deposits", tags=["Deposits"])

@router.post("", response_model=DepositRead)
async def create_deposit(
    goal_id: int,
    dep_in: DepositCreate,
    db: AsyncSession = Depends(get_async_session),
    user_id: int = Depends(get_current_user_id),
):
    """
    Record a deposit against one of the caller's goals.

    - **amount**: positive, at most two decimal places
    - **date**: ISO 8601 date
    """
    return await record_deposit(goal_id, user_id, dep_in, db)

@router.get("", response_model=List[DepositRead])
async def read_deposits(
    goal_id: int,
    db: AsyncSession = Depends(get_async_session),
    user_id: int = Depends(get_current_user_id),
):
    return await get_deposits_for_goal(goal_id, user_id, db)
