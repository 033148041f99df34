# app/models/testimonial.py
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class Testimonial(SQLModel, table=True):
    """
    Customer quote shown on the home page.
    """

    __tablename__ = "testimonials"

    id: int | None = Field(default=None, primary_key=True)

    name: str
    role: str = Field(description="Job title and company of the customer")
    content: str
    image_url: str

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC), set server-side",
    )
