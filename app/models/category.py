# app/models/category.py
from sqlmodel import SQLModel, Field


class Category(SQLModel, table=True):
    """
    Named grouping applied to products ("Regular" / "Seasonal").

    Names are unique so that lookup-or-create never produces
    two rows for the same category.
    """

    __tablename__ = "categories"

    id: int | None = Field(default=None, primary_key=True)

    name: str = Field(
        unique=True,
        index=True,
        description="Display name of the category",
    )
