# app/routers/testimonials.py
from fastapi import APIRouter, Depends, Response, status

from app.core.deps import get_testimonial_service
from app.schemas.testimonial import TestimonialCreate, TestimonialRead
from app.services.testimonial_service import TestimonialService

router = APIRouter(prefix="/testimonials", tags=["Testimonials"])


@router.get("", response_model=list[TestimonialRead])
def list_testimonials(service: TestimonialService = Depends(get_testimonial_service)):
    return service.list_testimonials()


@router.post("", response_model=TestimonialRead)
def create_testimonial(
    payload: TestimonialCreate,
    service: TestimonialService = Depends(get_testimonial_service),
):
    return service.create_testimonial(payload)


@router.delete("/{testimonial_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_testimonial(
    testimonial_id: int,
    service: TestimonialService = Depends(get_testimonial_service),
):
    service.delete_testimonial(testimonial_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
