# app/repositories/db_storage.py
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TypeVar

from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, SQLModel, select

from app.core.errors import StorageNotInitializedError, UsernameTakenError
from app.database import create_db_and_tables
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


class DatabaseStorage(Storage):
    """
    Relational store on top of a shared SQLModel engine.

    - One short-lived Session per operation; returned rows are
      detached but fully loaded.
    - Without an engine every operation raises
      StorageNotInitializedError instead of silently doing nothing.
    """

    def __init__(self, engine: Engine | None):
        self.engine = engine

    @contextmanager
    def _session(self) -> Iterator[Session]:
        if self.engine is None:
            raise StorageNotInitializedError()
        with Session(self.engine, expire_on_commit=False) as session:
            yield session

    def init(self) -> None:
        if self.engine is None:
            raise StorageNotInitializedError()
        create_db_and_tables(self.engine)

    def close(self) -> None:
        if self.engine is not None:
            self.engine.dispose()

    # ----- Generic helpers -----

    def _list(self, model: type[RowT]) -> list[RowT]:
        with self._session() as session:
            return list(session.exec(select(model).order_by(model.id)).all())

    def _get(self, model: type[RowT], row_id: int) -> RowT | None:
        with self._session() as session:
            return session.get(model, row_id)

    def _insert(self, row: RowT) -> RowT:
        with self._session() as session:
            session.add(row)
            session.commit()
            session.refresh(row)
            return row

    def _delete(self, model: type[RowT], row_id: int) -> None:
        with self._session() as session:
            row = session.get(model, row_id)
            if row is None:
                return
            session.delete(row)
            session.commit()

    # ----- Users -----

    def get_user(self, user_id: int) -> User | None:
        return self._get(User, user_id)

    def get_user_by_username(self, username: str) -> User | None:
        with self._session() as session:
            stmt = select(User).where(User.username == username)
            return session.exec(stmt).first()

    def create_user(self, data: UserCreate) -> User:
        try:
            return self._insert(User(**data.model_dump()))
        except IntegrityError:
            raise UsernameTakenError(data.username)

    # ----- Categories -----

    def list_categories(self) -> list[Category]:
        return self._list(Category)

    def get_category(self, category_id: int) -> Category | None:
        return self._get(Category, category_id)

    def get_category_by_name(self, name: str) -> Category | None:
        with self._session() as session:
            stmt = select(Category).where(Category.name == name)
            return session.exec(stmt).first()

    def create_category(self, name: str) -> Category:
        existing = self.get_category_by_name(name)
        if existing is not None:
            return existing
        try:
            return self._insert(Category(name=name))
        except IntegrityError:
            # Another request inserted the same name first.
            category = self.get_category_by_name(name)
            if category is None:
                raise
            return category

    # ----- Products -----

    def list_products(self) -> list[Product]:
        return self._list(Product)

    def get_product(self, product_id: int) -> Product | None:
        return self._get(Product, product_id)

    def create_product(self, data: ProductInsert) -> Product:
        return self._insert(Product(**data.model_dump()))

    def delete_product(self, product_id: int) -> None:
        self._delete(Product, product_id)

    # ----- Blogs -----

    def list_blogs(self) -> list[Blog]:
        return self._list(Blog)

    def get_blog(self, blog_id: int) -> Blog | None:
        return self._get(Blog, blog_id)

    def create_blog(self, data: BlogInsert) -> Blog:
        return self._insert(Blog(**data.model_dump()))

    def delete_blog(self, blog_id: int) -> None:
        self._delete(Blog, blog_id)

    # ----- Testimonials -----

    def list_testimonials(self) -> list[Testimonial]:
        return self._list(Testimonial)

    def get_testimonial(self, testimonial_id: int) -> Testimonial | None:
        return self._get(Testimonial, testimonial_id)

    def create_testimonial(self, data: TestimonialInsert) -> Testimonial:
        return self._insert(Testimonial(**data.model_dump()))

    def delete_testimonial(self, testimonial_id: int) -> None:
        self._delete(Testimonial, testimonial_id)
