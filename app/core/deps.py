# app/core/deps.py
from fastapi import Depends, Request

from app.core.config import Settings
from app.repositories.storage import Storage
from app.services.blog_service import BlogService
from app.services.notification_service import NotificationService
from app.services.product_service import ProductService
from app.services.testimonial_service import TestimonialService


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with (see create_app)."""
    return request.app.state.settings


def get_storage(request: Request) -> Storage:
    """
    FastAPI dependency returning the store created in the lifespan.

    Raises:
        RuntimeError: if the app was not started through its lifespan.
    """
    storage = getattr(request.app.state, "storage", None)
    if storage is None:
        raise RuntimeError("Storage is not initialized; start the app with its lifespan.")
    return storage


def get_product_service(
    storage: Storage = Depends(get_storage),
    settings: Settings = Depends(get_app_settings),
) -> ProductService:
    return ProductService(storage, settings)


def get_blog_service(
    storage: Storage = Depends(get_storage),
    settings: Settings = Depends(get_app_settings),
) -> BlogService:
    return BlogService(storage, settings)


def get_testimonial_service(storage: Storage = Depends(get_storage)) -> TestimonialService:
    return TestimonialService(storage)


def get_notification_service(request: Request) -> NotificationService:
    return request.app.state.notifications
