# app/schemas/blog.py
from datetime import datetime, timezone

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel

from app.models.blog import Blog


def format_display_date(value: datetime | None) -> str:
    """
    Format a timestamp the way the site shows dates: M/D/YYYY,
    without zero padding, in server-local time. Naive values are
    stored UTC. Missing timestamps show today's date.
    """
    if value is None:
        value = datetime.now()
    else:
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        value = value.astimezone()
    return f"{value.month}/{value.day}/{value.year}"


class BlogInsert(SQLModel):
    """Storage-shaped payload for inserting a blog post."""

    model_config = ConfigDict(extra="forbid")

    title: str
    content: str
    image_url: str
    author: str


class BlogCreate(SQLModel):
    """
    Wire payload for creating a blog post.

    - `image` maps to the stored `image_url`.
    - `author` is optional; the router fills in the site default.
    """

    model_config = ConfigDict(extra="ignore")

    title: str
    content: str
    image: str
    author: str | None = None

    @field_validator("title", "content", "image")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v

    @field_validator("author")
    @classmethod
    def normalize_author(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None


class BlogRead(SQLModel):
    id: int
    title: str
    content: str
    image: str
    author: str
    date: str

    @classmethod
    def from_row(cls, blog: Blog) -> "BlogRead":
        return cls(
            id=blog.id,
            title=blog.title,
            content=blog.content,
            image=blog.image_url,
            author=blog.author,
            date=format_display_date(blog.created_at),
        )
