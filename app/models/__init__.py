from app.models.user import User
from app.models.goal import Goal
from app.models.deposit import Deposit

__all__ = ["User", "Goal", "Deposit"]
