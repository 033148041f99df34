# app/repositories/mem_storage.py
import threading
from typing import TypeVar

from sqlmodel import SQLModel

from app.core.errors import UsernameTakenError
from app.models.blog import Blog
from app.models.category import Category
from app.models.product import Product
from app.models.testimonial import Testimonial
from app.models.user import User
from app.repositories.storage import Storage
from app.schemas.blog import BlogInsert
from app.schemas.product import ProductInsert
from app.schemas.testimonial import TestimonialInsert
from app.schemas.user import UserCreate

RowT = TypeVar("RowT", bound=SQLModel)


class _Table:
    """One id -> row map with its own id counter (ids start at 1)."""

    def __init__(self) -> None:
        self.rows: dict[int, SQLModel] = {}
        self.next_id = 1

    def insert(self, row: RowT) -> RowT:
        row.id = self.next_id
        self.next_id += 1
        self.rows[row.id] = row
        return row

    def values(self) -> list:
        return [self.rows[k] for k in sorted(self.rows)]


class MemStorage(Storage):
    """
    Process-lifetime store backed by plain dicts.

    Used when no DATABASE_URL is configured. Everything is lost on
    restart. Sync endpoints run in FastAPI's thread pool, so every
    operation holds a single lock.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._users = _Table()
        self._categories = _Table()
        self._products = _Table()
        self._blogs = _Table()
        self._testimonials = _Table()

    # ----- Users -----

    def get_user(self, user_id: int) -> User | None:
        with self._lock:
            return self._users.rows.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        with self._lock:
            return self._find_user(username)

    def _find_user(self, username: str) -> User | None:
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    def create_user(self, data: UserCreate) -> User:
        with self._lock:
            if self._find_user(data.username) is not None:
                raise UsernameTakenError(data.username)
            return self._users.insert(User(**data.model_dump()))

    # ----- Categories -----

    def list_categories(self) -> list[Category]:
        with self._lock:
            return self._categories.values()

    def get_category(self, category_id: int) -> Category | None:
        with self._lock:
            return self._categories.rows.get(category_id)

    def get_category_by_name(self, name: str) -> Category | None:
        with self._lock:
            return self._find_category(name)

    def _find_category(self, name: str) -> Category | None:
        for category in self._categories.values():
            if category.name == name:
                return category
        return None

    def create_category(self, name: str) -> Category:
        with self._lock:
            existing = self._find_category(name)
            if existing is not None:
                return existing
            return self._categories.insert(Category(name=name))

    # ----- Products -----

    def list_products(self) -> list[Product]:
        with self._lock:
            return self._products.values()

    def get_product(self, product_id: int) -> Product | None:
        with self._lock:
            return self._products.rows.get(product_id)

    def create_product(self, data: ProductInsert) -> Product:
        with self._lock:
            return self._products.insert(Product(**data.model_dump()))

    def delete_product(self, product_id: int) -> None:
        with self._lock:
            self._products.rows.pop(product_id, None)

    # ----- Blogs -----

    def list_blogs(self) -> list[Blog]:
        with self._lock:
            return self._blogs.values()

    def get_blog(self, blog_id: int) -> Blog | None:
        with self._lock:
            return self._blogs.rows.get(blog_id)

    def create_blog(self, data: BlogInsert) -> Blog:
        with self._lock:
            return self._blogs.insert(Blog(**data.model_dump()))

    def delete_blog(self, blog_id: int) -> None:
        with self._lock:
            self._blogs.rows.pop(blog_id, None)

    # ----- Testimonials -----

    def list_testimonials(self) -> list[Testimonial]:
        with self._lock:
            return self._testimonials.values()

    def get_testimonial(self, testimonial_id: int) -> Testimonial | None:
        with self._lock:
            return self._testimonials.rows.get(testimonial_id)

    def create_testimonial(self, data: TestimonialInsert) -> Testimonial:
        with self._lock:
            return self._testimonials.insert(Testimonial(**data.model_dump()))

    def delete_testimonial(self, testimonial_id: int) -> None:
        with self._lock:
            self._testimonials.rows.pop(testimonial_id, None)
