# app/schemas/user.py
from pydantic import BaseModel, EmailStr, Field, field_validator

def normalize_email(value: str) -> str:
    """Emails are stored and looked up in one canonical, lowercase form."""
    return value.strip().lower()

class UserRegister(BaseModel):
    # Must contain a non-blank character; passwords are never stripped
    name: str = Field(..., min_length=1, max_length=150, pattern=r"\S")
    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def canonical_email(cls, value: str) -> str:
        return normalize_email(value)

class UserLogin(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def canonical_email(cls, value: str) -> str:
        return normalize_email(value)

class Message(BaseModel):
    message: str

class Token(BaseModel):
    token: str
