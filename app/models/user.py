# app/models/user.py
from sqlalchemy import Column, Integer, String
from app.core.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(length=150), nullable=False)
    email = Column(String(length=255), unique=True, index=True, nullable=False)
    # bcrypt verifier, never the plaintext
    hashed_password = Column("password", String, nullable=False)

    def __repr__(self):
        return f"<User id={self.id} email={self.email}>"
