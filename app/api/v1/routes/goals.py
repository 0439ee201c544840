# app/api/v1/routes/goals.py
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from app.schemas.goal import GoalCreate, GoalRead, GoalUpdate
from app.schemas.user import Message
from app.crud.goal import (
    create_goal_for_user,
    delete_goal_for_user,
    get_goals_for_user,
    get_owned_goal_or_404,
    update_goal_for_user,
)
from app.core.database import get_async_session
from app.api.deps import get_current_user_id

router = APIRouter(prefix="/goals", tags=["Goals"])

@router.get("", response_model=List[GoalRead])
async def read_goals(
    db: AsyncSession = Depends(get_async_session),
    user_id: int = Depends(get_current_user_id),
):
    """All of the caller's goals, most recent start date first."""
    return await get_goals_for_user(user_id, db)

@router.post("", response_model=GoalRead)
async def create_goal(
    goal_in: GoalCreate,
    db: AsyncSession = Depends(get_async_session),
    user_id: int = Depends(get_current_user_id),
):
    return await create_goal_for_user(user_id, goal_in, db)

@router.get("/{goal_id}", response_model=GoalRead)
async def read_goal(
    goal_id: int,
    db: AsyncSession = Depends(get_async_session),
    user_id: int = Depends(get_current_user_id),
):
    return await get_owned_goal_or_404(goal_id, user_id, db)

@router.put("/{goal_id}", response_model=GoalRead)
async def update_goal(
    goal_id: int,
    goal_in: GoalUpdate,
    db: AsyncSession = Depends(get_async_session),
    user_id: int = Depends(get_current_user_id),
):
    """
    Replace title, target amount and dates.

    A goal owned by someone else answers 404, exactly like a missing one.
    """
    return await update_goal_for_user(goal_id, user_id, goal_in, db)

@router.delete("/{goal_id}", response_model=Message)
async def delete_goal(
    goal_id: int,
    db: AsyncSession = Depends(get_async_session),
    user_id: int = Depends(get_current_user_id),
):
    # Idempotent: deleting a missing goal still succeeds
    await delete_goal_for_user(goal_id, user_id, db)
    return {"message": "Goal deleted"}
