# app/utils/summary.py
from decimal import Decimal
from typing import Any, Dict

from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.goal import get_goals_for_user


async def summarize_savings(user_id: int, db: AsyncSession) -> Dict[str, Any]:
    """
    Total saved across every goal the user owns.

    Each goal's saved amount is the live sum of its deposits (see
    Goal.current_amount), so the total can never drift from the ledger.
    A missing saved amount counts as zero.
    """
    goals = await get_goals_for_user(user_id, db)
    total_saved = sum(
        (Decimal(str(goal.current_amount or 0)) for goal in goals),
        Decimal("0"),
    )
    return {
        "total_saved": total_saved,
        "goals": goals,
    }
