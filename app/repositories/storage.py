# app/repositories/storage.py
from abc import ABC, abstractmethod

from app.core.config import Settings
from app.models.blog import Blog
from app.models.category import Category
from app.models.product import Product
from app.models.testimonial import Testimonial
from app.models.user import User
from app.schemas.blog import BlogInsert
from app.schemas.product import ProductInsert
from app.schemas.testimonial import TestimonialInsert
from app.schemas.user import UserCreate


class Storage(ABC):
    """
    Data access contract shared by the in-memory and database stores.

    - Pure persistence operations (get / list / create / delete).
    - No FastAPI, no wire-format mapping.
    - Deletes are idempotent: removing a missing id is not an error.
    - Every list is ordered by id.
    """

    def init(self) -> None:
        """Prepare the backend before first use (tables, connections)."""

    def close(self) -> None:
        """Release backend resources on shutdown."""

    # ----- Users -----

    @abstractmethod
    def get_user(self, user_id: int) -> User | None: ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> User | None: ...

    @abstractmethod
    def create_user(self, data: UserCreate) -> User:
        """Insert a user; raises UsernameTakenError on duplicates."""

    # ----- Categories -----

    @abstractmethod
    def list_categories(self) -> list[Category]: ...

    @abstractmethod
    def get_category(self, category_id: int) -> Category | None: ...

    @abstractmethod
    def get_category_by_name(self, name: str) -> Category | None: ...

    @abstractmethod
    def create_category(self, name: str) -> Category:
        """
        Lookup-or-create: return the category called `name`,
        inserting it first if it does not exist yet.
        """

    # ----- Products -----

    @abstractmethod
    def list_products(self) -> list[Product]: ...

    @abstractmethod
    def get_product(self, product_id: int) -> Product | None: ...

    @abstractmethod
    def create_product(self, data: ProductInsert) -> Product: ...

    @abstractmethod
    def delete_product(self, product_id: int) -> None: ...

    # ----- Blogs -----

    @abstractmethod
    def list_blogs(self) -> list[Blog]: ...

    @abstractmethod
    def get_blog(self, blog_id: int) -> Blog | None: ...

    @abstractmethod
    def create_blog(self, data: BlogInsert) -> Blog: ...

    @abstractmethod
    def delete_blog(self, blog_id: int) -> None: ...

    # ----- Testimonials -----

    @abstractmethod
    def list_testimonials(self) -> list[Testimonial]: ...

    @abstractmethod
    def get_testimonial(self, testimonial_id: int) -> Testimonial | None: ...

    @abstractmethod
    def create_testimonial(self, data: TestimonialInsert) -> Testimonial: ...

    @abstractmethod
    def delete_testimonial(self, testimonial_id: int) -> None: ...


def build_storage(settings: Settings) -> Storage:
    """
    Pick the storage backend for this process.

    DATABASE_URL set   -> DatabaseStorage (rows survive restarts)
    DATABASE_URL unset -> MemStorage (process lifetime only)
    """
    if settings.DATABASE_URL:
        from app.database import build_engine
        from app.repositories.db_storage import DatabaseStorage

        return DatabaseStorage(build_engine(settings.DATABASE_URL))

    from app.repositories.mem_storage import MemStorage

    return MemStorage()
