"""
Product endpoints:
  GET    /products                          – Paginated product list (204 when empty)
  GET    /products/by-category/{uid}        – Products of a category (204 when empty)
  GET    /products/{uid}                    – Get a specific product
  POST   /products                          – Create a product (Admin)
  PUT    /products/{uid}                    – Replace a product (Admin)
  DELETE /products/{uid}                    – Delete a product (Admin)
"""
from uuid import UUID
import logging

from fastapi import APIRouter, Depends, Query, Response, status

from storefront.core.config import settings
from storefront.core.dependencies import get_product_service, require_admin
from storefront.models.user import User
from storefront.schemas.product import (
    PaginatedProductResponse,
    ProductRequest,
    ProductResponse,
)
from storefront.services.product_service import ProductService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["Products"])


@router.get(
    "",
    response_model=PaginatedProductResponse,
    responses={204: {"description": "No products on the requested page"}},
    summary="List products page by page",
)
def get_products(
    page: int = Query(0, ge=0, description="Zero-based page index"),
    size: int = Query(
        settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Page size"
    ),
    service: ProductService = Depends(get_product_service),
):
    """
    Return one page of products together with `totalPages`.
    A page past the end, or an empty catalogue, answers **204 No Content**.
    """
    logger.info("Listing products page=%s size=%s", page, size)
    result = service.get_products(page, size)
    if not result.products:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return result


@router.get(
    "/by-category/{category_uid}",
    response_model=list[ProductResponse],
    responses={204: {"description": "The category has no products"}},
    summary="List the products of a category",
)
def get_products_by_category(
    category_uid: UUID,
    service: ProductService = Depends(get_product_service),
):
    """404 when the category itself does not exist, 204 when it has no products."""
    logger.info("Listing products of category uid=%s", category_uid)
    products = service.get_products_by_category_uuid(category_uid)
    if not products:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return products


@router.get(
    "/{product_uid}",
    response_model=ProductResponse,
    summary="Get a specific product",
)
def get_product(
    product_uid: UUID,
    service: ProductService = Depends(get_product_service),
):
    logger.info("Fetching product uid=%s", product_uid)
    return service.get_product_by_uuid(product_uid)


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product (Admin)",
)
def add_product(
    data: ProductRequest,
    service: ProductService = Depends(get_product_service),
    _: User = Depends(require_admin),
):
    """
    Create a product. Only `name` is required; every `categoryUids` entry must
    reference an existing category.
    """
    logger.info("Creating product %s", data.name)
    return service.add_product(data)


@router.put(
    "/{product_uid}",
    response_model=ProductResponse,
    summary="Replace a product (Admin)",
)
def update_product(
    product_uid: UUID,
    data: ProductRequest,
    service: ProductService = Depends(get_product_service),
    _: User = Depends(require_admin),
):
    """Replace every field of the product. Omitted fields are cleared."""
    logger.info("Updating product uid=%s", product_uid)
    return service.update_product_by_uuid(product_uid, data)


@router.delete(
    "/{product_uid}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a product (Admin)",
)
def delete_product(
    product_uid: UUID,
    service: ProductService = Depends(get_product_service),
    _: User = Depends(require_admin),
):
    logger.info("Deleting product uid=%s", product_uid)
    service.delete_product_by_uuid(product_uid)
