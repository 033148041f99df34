# app/models/user.py
from sqlmodel import SQLModel, Field


class User(SQLModel, table=True):
    """
    Account row for the admin area.

    Not used by any route yet: the admin screen checks its password
    client-side. The table exists so the store can back a real login.
    """

    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)

    username: str = Field(
        unique=True,
        index=True,
    )

    password: str
