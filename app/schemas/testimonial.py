# app/schemas/testimonial.py
from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel

from app.models.testimonial import Testimonial
from app.schemas.blog import format_display_date


class TestimonialInsert(SQLModel):
    """Storage-shaped payload for inserting a testimonial."""

    model_config = ConfigDict(extra="forbid")

    name: str
    role: str
    content: str
    image_url: str


class TestimonialCreate(SQLModel):
    """Wire payload for creating a testimonial (`image` -> `image_url`)."""

    model_config = ConfigDict(extra="ignore")

    name: str
    role: str
    content: str
    image: str

    @field_validator("name", "role", "content", "image")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v


class TestimonialRead(SQLModel):
    id: int
    name: str
    role: str
    content: str
    image: str
    date: str

    @classmethod
    def from_row(cls, testimonial: Testimonial) -> "TestimonialRead":
        return cls(
            id=testimonial.id,
            name=testimonial.name,
            role=testimonial.role,
            content=testimonial.content,
            image=testimonial.image_url,
            date=format_display_date(testimonial.created_at),
        )
