# app/schemas/user.py
from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field


class UserCreate(SQLModel):
    """
    Payload for creating an admin account.

    Validation rules:
      - username cannot be empty or whitespace
    """

    model_config = ConfigDict(extra="forbid")

    username: str = Field(max_length=50)
    password: str

    @field_validator("username")
    @classmethod
    def normalize_username(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("username cannot be empty")
        return v
