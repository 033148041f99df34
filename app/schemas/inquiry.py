# app/schemas/inquiry.py
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class _InquiryBase(BaseModel):
    """
    Form submissions arrive with every field optional so that
    the router can report *all* missing fields at once instead of
    failing on the first one.
    """

    model_config = ConfigDict(
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    REQUIRED_FIELDS: ClassVar[tuple[str, ...]] = ()

    @field_validator("*", mode="before")
    @classmethod
    def stringify(cls, v):
        if v is None:
            return None
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    def missing_fields(self) -> list[str]:
        """Wire names of required fields that are absent or blank."""
        missing: list[str] = []
        for name in self.REQUIRED_FIELDS:
            value = getattr(self, name)
            if value is None or not str(value).strip():
                missing.append(to_camel(name))
        return missing


class ContactRequest(_InquiryBase):
    REQUIRED_FIELDS: ClassVar[tuple[str, ...]] = ("name", "email", "message")

    name: str | None = None
    email: str | None = None
    message: str | None = None


class QuoteRequest(_InquiryBase):
    REQUIRED_FIELDS: ClassVar[tuple[str, ...]] = (
        "company_name",
        "contact_person",
        "email",
        "phone",
        "country",
        "product_interest",
        "estimated_quantity",
        "frequency",
    )

    company_name: str | None = None
    contact_person: str | None = None
    email: str | None = None
    phone: str | None = None
    country: str | None = None
    product_interest: str | None = None
    estimated_quantity: str | None = None
    frequency: str | None = None
    additional_requirements: str | None = None


class MessageResponse(BaseModel):
    message: str
