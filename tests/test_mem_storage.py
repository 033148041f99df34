# tests/test_mem_storage.py
import pytest

from app.core.errors import UsernameTakenError
from app.repositories.mem_storage import MemStorage
from app.schemas.blog import BlogInsert
from app.schemas.product import ProductInsert
from app.schemas.user import UserCreate


def _product(category_id: int, name: str = "Black Pepper") -> ProductInsert:
    return ProductInsert(
        name=name,
        description="Malabar black pepper",
        image_url="/images/pepper.png",
        category_id=category_id,
    )


def test_ids_start_at_one_per_table():
    store = MemStorage()
    category = store.create_category("Regular")
    first = store.create_product(_product(category.id))
    second = store.create_product(_product(category.id, "Turmeric"))

    assert category.id == 1
    assert (first.id, second.id) == (1, 2)
    assert [p.name for p in store.list_products()] == ["Black Pepper", "Turmeric"]


def test_create_category_is_lookup_or_create():
    store = MemStorage()
    a = store.create_category("Seasonal")
    b = store.create_category("Seasonal")

    assert a.id == b.id
    assert len(store.list_categories()) == 1
    assert store.get_category_by_name("Seasonal").id == a.id
    assert store.get_category_by_name("Organic") is None


def test_delete_is_idempotent():
    store = MemStorage()
    category = store.create_category("Regular")
    product = store.create_product(_product(category.id))

    store.delete_product(product.id)
    store.delete_product(product.id)
    store.delete_blog(42)
    store.delete_testimonial(42)

    assert store.get_product(product.id) is None
    assert store.list_products() == []


def test_blog_gets_server_side_timestamp():
    store = MemStorage()
    blog = store.create_blog(
        BlogInsert(title="Harvest", content="Notes", image_url="/i.png", author="Team")
    )

    assert blog.created_at is not None
    assert store.get_blog(blog.id).title == "Harvest"


def test_usernames_are_unique():
    store = MemStorage()
    user = store.create_user(UserCreate(username="admin", password="pw"))

    assert store.get_user(user.id).username == "admin"
    assert store.get_user_by_username("admin").id == user.id
    with pytest.raises(UsernameTakenError):
        store.create_user(UserCreate(username="admin", password="other"))


def test_new_instance_starts_empty():
    store = MemStorage()
    store.create_category("Regular")

    restarted = MemStorage()

    assert restarted.list_categories() == []
    assert restarted.list_products() == []
