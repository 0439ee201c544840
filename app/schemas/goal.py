# app/schemas/goal.py
from typing import Optional
from datetime import date
from decimal import Decimal
from pydantic import BaseModel, Field, field_validator, model_validator

class GoalBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255, description="E.g. Trip to Lisbon")
    target_amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    class Config:
        str_strip_whitespace = True

    @model_validator(mode="after")
    def check_date_range(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self

class GoalCreate(GoalBase):
    pass

class GoalUpdate(GoalBase):
    """PUT replaces every editable field."""
    pass

class GoalRead(BaseModel):
    id: int
    user_id: int
    title: str
    target_amount: float
    current_amount: float = 0.0
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    class Config:
        from_attributes = True

    @field_validator("current_amount", mode="before")
    @classmethod
    def missing_saved_is_zero(cls, value):
        return 0 if value is None else value
