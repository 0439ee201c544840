# app/crud/goal.py
import logging
from typing import List, Optional

from sqlalchemy import delete, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.core.errors import NotFoundError
from app.models.deposit import Deposit
from app.models.goal import Goal
from app.schemas.goal import GoalCreate, GoalUpdate

logger = logging.getLogger(__name__)

async def get_goals_for_user(user_id: int, db: AsyncSession) -> List[Goal]:
    """Newest start date first; goals without one go last, ties keep insertion order."""
    result = await db.execute(
        select(Goal)
        .where(Goal.user_id == user_id)
        .order_by(Goal.start_date.desc().nulls_last(), Goal.id.asc())
    )
    return result.scalars().all()

async def get_goal_by_id(goal_id: int, user_id: int, db: AsyncSession) -> Optional[Goal]:
    result = await db.execute(
        select(Goal).where(Goal.id == goal_id, Goal.user_id == user_id)
    )
    return result.scalar_one_or_none()

async def get_owned_goal_or_404(goal_id: int, user_id: int, db: AsyncSession) -> Goal:
    goal = await get_goal_by_id(goal_id, user_id, db)
    if goal is None:
        raise NotFoundError("Goal not found")
    return goal

async def create_goal_for_user(user_id: int, goal_in: GoalCreate, db: AsyncSession) -> Goal:
    new_goal = Goal(**goal_in.model_dump(), user_id=user_id)
    db.add(new_goal)
    await db.commit()
    await db.refresh(new_goal)
    logger.info(f"Created goal {new_goal.id} for user {user_id}")
    return new_goal

async def update_goal_for_user(goal_id: int, user_id: int, goal_in: GoalUpdate, db: AsyncSession) -> Goal:
    # Ownership is part of the WHERE clause so check and write are one statement
    result = await db.execute(
        update(Goal)
        .where(Goal.id == goal_id, Goal.user_id == user_id)
        .values(**goal_in.model_dump())
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        await db.rollback()
        logger.info(f"Update of goal {goal_id} by user {user_id}: not found")
        raise NotFoundError("Goal not found")
    await db.commit()
    return await get_owned_goal_or_404(goal_id, user_id, db)

async def delete_goal_for_user(goal_id: int, user_id: int, db: AsyncSession) -> None:
    """Remove an owned goal and its deposits; a missing or foreign goal is a no-op."""
    owned = select(Goal.id).where(Goal.id == goal_id, Goal.user_id == user_id)
    await db.execute(
        delete(Deposit)
        .where(Deposit.goal_id.in_(owned))
        .execution_options(synchronize_session=False)
    )
    result = await db.execute(
        delete(Goal)
        .where(Goal.id == goal_id, Goal.user_id == user_id)
        .execution_options(synchronize_session=False)
    )
    await db.commit()
    if result.rowcount:
        logger.info(f"Deleted goal {goal_id} for user {user_id}")
