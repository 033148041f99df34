# app/models/product.py
from sqlmodel import SQLModel, Field


class Product(SQLModel, table=True):
    """
    Catalog entry for an exported product.

    Columns:
      - id, name, description, price, image_url, category_id
    """

    __tablename__ = "products"

    id: int | None = Field(default=None, primary_key=True)

    name: str = Field(description="Display name of the product")

    description: str = Field(description="Long description shown on the catalog")

    price: int | None = Field(
        default=None,
        description="Optional price; most export items are quote-only",
    )

    image_url: str = Field(description="Public URL or site path of the image")

    category_id: int = Field(
        foreign_key="categories.id",
        index=True,
        description="FK to categories.id",
    )
