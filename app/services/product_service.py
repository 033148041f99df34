# app/services/product_service.py
from app.core.config import Settings
from app.repositories.storage import Storage
from app.schemas.product import ProductCreate, ProductInsert, ProductRead

UNCATEGORIZED = "Uncategorized"


class ProductService:
    """
    Business logic for the product catalog.

    Responsibilities:
      - map storage rows to the wire shape (image, category name)
      - resolve category names to ids, creating missing categories
    """

    def __init__(self, storage: Storage, settings: Settings):
        self.storage = storage
        self.settings = settings

    def list_products(self) -> list[ProductRead]:
        names = {c.id: c.name for c in self.storage.list_categories()}
        return [
            ProductRead.from_row(p, names.get(p.category_id, UNCATEGORIZED))
            for p in self.storage.list_products()
        ]

    def create_product(self, payload: ProductCreate) -> ProductRead:
        """
        Create a product under the named category.

        - Missing category -> the default category ("Regular").
        - Unknown category -> created on the fly (lookup-or-create).
        """
        category_name = payload.category or self.settings.DEFAULT_PRODUCT_CATEGORY
        category = self.storage.create_category(category_name)

        product = self.storage.create_product(
            ProductInsert(
                name=payload.name,
                description=payload.description,
                price=payload.price,
                image_url=payload.image,
                category_id=category.id,
            )
        )
        return ProductRead.from_row(product, category.name)

    def delete_product(self, product_id: int) -> None:
        self.storage.delete_product(product_id)
