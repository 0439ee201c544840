# app/schemas/deposit.py
from datetime import date as date_type
from decimal import Decimal
from pydantic import BaseModel, Field

class DepositCreate(BaseModel):
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    date: date_type = Field(..., description="ISO 8601 date of the deposit")

class DepositRead(BaseModel):
    id: int
    goal_id: int
    amount: float
    date: date_type

    class Config:
        from_attributes = True
