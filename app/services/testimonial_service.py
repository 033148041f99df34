# app/services/testimonial_service.py
from app.repositories.storage import Storage
from app.schemas.testimonial import TestimonialCreate, TestimonialInsert, TestimonialRead


class TestimonialService:
    def __init__(self, storage: Storage):
        self.storage = storage

    def list_testimonials(self) -> list[TestimonialRead]:
        return [TestimonialRead.from_row(t) for t in self.storage.list_testimonials()]

    def create_testimonial(self, payload: TestimonialCreate) -> TestimonialRead:
        testimonial = self.storage.create_testimonial(
            TestimonialInsert(
                name=payload.name,
                role=payload.role,
                content=payload.content,
                image_url=payload.image,
            )
        )
        return TestimonialRead.from_row(testimonial)

    def delete_testimonial(self, testimonial_id: int) -> None:
        self.storage.delete_testimonial(testimonial_id)
