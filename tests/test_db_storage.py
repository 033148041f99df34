# tests/test_db_storage.py
import pytest

from app.core.config import Settings
from app.core.errors import StorageNotInitializedError, UsernameTakenError
from app.database import _normalize_url, build_engine
from app.repositories.db_storage import DatabaseStorage
from app.repositories.mem_storage import MemStorage
from app.repositories.storage import build_storage
from app.schemas.blog import BlogInsert
from app.schemas.product import ProductInsert
from app.schemas.user import UserCreate


@pytest.fixture
def db_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'catalog.db'}"


@pytest.fixture
def db_storage(db_url):
    store = DatabaseStorage(build_engine(db_url))
    store.init()
    yield store
    store.close()


def test_rows_survive_a_restart(db_url):
    first = DatabaseStorage(build_engine(db_url))
    first.init()
    category = first.create_category("Regular")
    first.create_product(
        ProductInsert(
            name="Royal Basmati Rice",
            description="Aged basmati",
            image_url="/images/rice.png",
            category_id=category.id,
        )
    )
    first.close()

    second = DatabaseStorage(build_engine(db_url))
    second.init()
    products = second.list_products()
    second.close()

    assert [p.name for p in products] == ["Royal Basmati Rice"]
    assert products[0].category_id == category.id
    assert products[0].price is None


def test_create_category_is_lookup_or_create(db_storage):
    a = db_storage.create_category("Seasonal")
    b = db_storage.create_category("Seasonal")

    assert a.id == b.id
    assert [c.name for c in db_storage.list_categories()] == ["Seasonal"]


def test_delete_is_idempotent(db_storage):
    blog = db_storage.create_blog(
        BlogInsert(title="Grain trends", content="...", image_url="/g.png", author="Analyst")
    )

    db_storage.delete_blog(blog.id)
    db_storage.delete_blog(blog.id)

    assert db_storage.get_blog(blog.id) is None
    assert db_storage.list_blogs() == []


def test_blog_created_at_is_set(db_storage):
    blog = db_storage.create_blog(
        BlogInsert(title="Saffron", content="...", image_url="/s.png", author="Team")
    )
    assert blog.id is not None
    assert blog.created_at is not None


def test_usernames_are_unique(db_storage):
    db_storage.create_user(UserCreate(username="admin", password="pw"))

    with pytest.raises(UsernameTakenError):
        db_storage.create_user(UserCreate(username="admin", password="pw2"))
    assert db_storage.get_user_by_username("admin") is not None


def test_missing_engine_fails_loudly():
    store = DatabaseStorage(None)

    with pytest.raises(StorageNotInitializedError, match="Database not initialized"):
        store.list_products()
    with pytest.raises(StorageNotInitializedError):
        store.init()


def test_build_storage_follows_database_url(db_url):
    mem = build_storage(Settings(_env_file=None, DATABASE_URL=None))
    db = build_storage(Settings(_env_file=None, DATABASE_URL=db_url))

    assert isinstance(mem, MemStorage)
    assert isinstance(db, DatabaseStorage)
    db.close()


def test_postgres_urls_require_ssl():
    assert _normalize_url("postgresql://u:p@h/db") == "postgresql://u:p@h/db?sslmode=require"
    assert _normalize_url("postgresql://h/db?x=1") == "postgresql://h/db?x=1&sslmode=require"
    assert _normalize_url("postgresql://h/db?sslmode=disable") == "postgresql://h/db?sslmode=disable"
    assert _normalize_url("sqlite:///x.db") == "sqlite:///x.db"
