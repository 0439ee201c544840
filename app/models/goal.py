# app/models/goal.py
from sqlalchemy import Column, Integer, String, Numeric, Date, ForeignKey
from app.core.database import Base

class Goal(Base):
    __tablename__ = "goals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(length=255), nullable=False)
    target_amount = Column(Numeric(precision=12, scale=2), nullable=False)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)

    # current_amount is attached in app/models/deposit.py as a live sum of deposits

    def __repr__(self):
        return f"<Goal title={self.title} target={self.target_amount} user_id={self.user_id}>"
