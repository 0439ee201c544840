# app/models/deposit.py
from sqlalchemy import Column, Integer, Numeric, Date, ForeignKey, CheckConstraint, select, func
from sqlalchemy.orm import column_property
from app.core.database import Base
from app.models.goal import Goal

class Deposit(Base):
    __tablename__ = "deposits"
    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_deposits_amount_positive"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    goal_id = Column(Integer, ForeignKey("goals.id", ondelete="CASCADE"), nullable=False, index=True)
    amount = Column(Numeric(precision=12, scale=2), nullable=False)
    date = Column(Date, nullable=False)

    def __repr__(self):
        return f"<Deposit amount={self.amount} date={self.date} goal_id={self.goal_id}>"


# Saved amount is read from the ledger every time a goal is loaded, never stored
Goal.current_amount = column_property(
    select(func.coalesce(func.sum(Deposit.amount), 0))
    .where(Deposit.goal_id == Goal.id)
    .correlate_except(Deposit)
    .scalar_subquery()
)
