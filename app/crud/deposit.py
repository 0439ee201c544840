# app/crud/deposit.py
import logging
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.core.errors import InternalError, NotFoundError
from app.crud.goal import get_owned_goal_or_404
from app.models.deposit import Deposit
from app.models.goal import Goal
from app.schemas.deposit import DepositCreate

logger = logging.getLogger(__name__)

async def record_deposit(goal_id: int, user_id: int, dep_in: DepositCreate, db: AsyncSession) -> Deposit:
    """
    Append a deposit to an owned goal.

    The ownership lookup and the insert share one transaction. The goal row is
    locked FOR UPDATE so it cannot be deleted between the check and the insert.
    Any storage failure rolls the whole thing back and surfaces as InternalError;
    nothing is retried.
    """
    # The deposit must own its transaction; close the one a prior read autobegan
    if db.in_transaction():
        await db.commit()

    try:
        async with db.begin():
            result = await db.execute(
                select(Goal.id)
                .where(Goal.id == goal_id, Goal.user_id == user_id)
                .with_for_update()
            )
            if result.scalar_one_or_none() is None:
                raise NotFoundError("Goal not found")

            deposit = Deposit(goal_id=goal_id, amount=dep_in.amount, date=dep_in.date)
            db.add(deposit)
            await db.flush()
    except NotFoundError:
        logger.info(f"Deposit rejected, goal {goal_id} not owned by user {user_id}")
        raise
    except Exception as exc:
        logger.exception(f"Deposit on goal {goal_id} rolled back")
        raise InternalError("Failed to record deposit") from exc

    logger.info(f"Recorded deposit {deposit.id} of {deposit.amount} on goal {goal_id}")
    return deposit

async def get_deposits_for_goal(goal_id: int, user_id: int, db: AsyncSession) -> List[Deposit]:
    """Most recent date first, ties keep insertion order. Foreign goals are 404."""
    await get_owned_goal_or_404(goal_id, user_id, db)
    result = await db.execute(
        select(Deposit)
        .where(Deposit.goal_id == goal_id)
        .order_by(Deposit.date.desc(), Deposit.id.asc())
    )
    return result.scalars().all()
