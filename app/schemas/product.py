# app/schemas/product.py
from typing import Any

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel

from app.models.product import Product


def _not_blank(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("field cannot be empty")
    return v


class ProductInsert(SQLModel):
    """
    Storage-shaped payload for inserting a product.

    The category has already been resolved to its id.
    """

    model_config = ConfigDict(extra="forbid")

    name: str
    description: str
    price: int | None = None
    image_url: str
    category_id: int


class ProductCreate(SQLModel):
    """
    Wire payload for creating a product.

    - `category` is a name; missing/blank means the default category.
    - `image` maps to the stored `image_url`.
    - `price` is optional; empty / zero values are stored as null and
      numeric strings are truncated to an integer.
    """

    model_config = ConfigDict(extra="ignore")

    name: str
    description: str
    category: str | None = None
    image: str
    price: int | None = None

    @field_validator("name", "description", "image")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return _not_blank(v)

    @field_validator("category")
    @classmethod
    def normalize_category(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None

    @field_validator("price", mode="before")
    @classmethod
    def coerce_price(cls, v: Any) -> Any:
        if v is None or v == "" or v == 0:
            return None
        if isinstance(v, str):
            try:
                return int(float(v.strip()))
            except (ValueError, OverflowError):
                raise ValueError("price must be a number")
        if isinstance(v, float):
            try:
                return int(v)
            except (ValueError, OverflowError):
                raise ValueError("price must be a number")
        return v


class ProductRead(SQLModel):
    """
    Product representation for clients.
    """

    id: int
    name: str
    description: str
    price: int | None = None
    image: str
    category: str

    @classmethod
    def from_row(cls, product: Product, category_name: str) -> "ProductRead":
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            image=product.image_url,
            category=category_name,
        )
