# app/api/v1/routes/summary.py
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.schemas.summary import SummaryRead
from app.utils.summary import summarize_savings
from app.core.database import get_async_session
from app.api.deps import get_current_user_id

router = APIRouter(prefix="/summary", tags=["Summary"])

@router.get("", response_model=SummaryRead)
async def read_summary(
    db: AsyncSession = Depends(get_async_session),
    user_id: int = Depends(get_current_user_id),
):
    """
    Returns:
    - **totalSaved**: sum of every goal's saved amount
    - **goals**: id, title, target and saved amount per goal
    """
    return await summarize_savings(user_id, db)
