# app/models/blog.py
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class Blog(SQLModel, table=True):
    """
    Blog post / industry insight article.
    """

    __tablename__ = "blogs"

    id: int | None = Field(default=None, primary_key=True)

    title: str
    content: str
    image_url: str
    author: str

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC), set server-side",
    )
