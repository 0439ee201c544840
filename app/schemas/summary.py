# app/schemas/summary.py
from typing import List
from pydantic import BaseModel, Field, field_validator

class GoalSummary(BaseModel):
    id: int
    title: str
    target_amount: float
    current_amount: float

    class Config:
        from_attributes = True

    # A goal with no deposits counts as zero saved
    @field_validator("current_amount", mode="before")
    @classmethod
    def missing_saved_is_zero(cls, value):
        return 0 if value is None else value

class SummaryRead(BaseModel):
    total_saved: float = Field(..., alias="totalSaved")
    goals: List[GoalSummary]

    class Config:
        populate_by_name = True
