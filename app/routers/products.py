# app/routers/products.py
from fastapi import APIRouter, Depends, Response, status

from app.core.deps import get_product_service
from app.schemas.product import ProductCreate, ProductRead
from app.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=list[ProductRead])
def list_products(service: ProductService = Depends(get_product_service)):
    """
    List all products with their category name and image.
    """
    return service.list_products()


@router.post("", response_model=ProductRead)
def create_product(
    payload: ProductCreate,
    service: ProductService = Depends(get_product_service),
):
    """
    Create a product.

    - `category` defaults to "Regular" and is created if unknown.
    """
    return service.create_product(payload)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
):
    """
    Delete a product. Missing ids are not an error.
    """
    service.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
