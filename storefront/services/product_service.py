"""
Product catalogue service: paginated listing, lookups by UUID, and
create/replace/delete operations.

Every lookup miss is converted here, and only here, into a typed failure.
"""
import math
from typing import Iterable
from uuid import UUID
import logging

from storefront.core.exceptions import (
    CategoryNotFoundError,
    ProductNotFoundError,
    ValidationFailureError,
)
from storefront.mappers.product_mapper import ProductMapper
from storefront.models.category import Category
from storefront.models.product import Product
from storefront.repositories.category_repository import CategoryRepository
from storefront.repositories.product_repository import ProductRepository
from storefront.schemas.product import (
    PaginatedProductResponse,
    ProductRequest,
    ProductResponse,
)

logger = logging.getLogger(__name__)


class ProductService:
    """Business logic for product operations."""

    def __init__(
        self,
        product_repository: ProductRepository,
        category_repository: CategoryRepository,
        product_mapper: ProductMapper,
    ) -> None:
        logger.trace("Initializing ProductService")
        self._repo = product_repository
        self._category_repo = category_repository
        self._mapper = product_mapper

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_products(self, page: int, size: int) -> PaginatedProductResponse:
        """
        Return the zero-based *page* of *size* products plus the page count.
        A page past the end yields an empty list, not an error.
        """
        if page < 0:
            raise ValidationFailureError(
                "Page index must not be negative",
                errors=[{"field": "page", "message": "must be >= 0"}],
            )
        if size < 1:
            raise ValidationFailureError(
                "Page size must be at least 1",
                errors=[{"field": "size", "message": "must be >= 1"}],
            )
        logger.info("Listing products page=%s size=%s", page, size)
        total = self._repo.count()
        offset = page * size
        # Past the last row: answer empty without handing an oversized offset to SQLite.
        products = self._repo.list_page(offset=offset, limit=size) if offset < total else []
        return PaginatedProductResponse(
            products=[self._mapper.map_product_to_product_response(p) for p in products],
            total_pages=math.ceil(total / size),
        )

    def get_product_by_uuid(self, product_uid: UUID) -> ProductResponse:
        logger.info("Fetching product uid=%s", product_uid)
        return self._mapper.map_product_to_product_response(self._get_product(product_uid))

    def get_products_by_category_uuid(self, category_uid: UUID) -> list[ProductResponse]:
        """List a category's products; an unknown category is a failure, an empty one is not."""
        logger.info("Listing products for category uid=%s", category_uid)
        category = self._category_repo.get_by_uid(category_uid)
        if category is None:
            logger.warning("Category uid=%s not found", category_uid)
            raise CategoryNotFoundError.for_uid(category_uid)
        return [
            self._mapper.map_product_to_product_response(p)
            for p in self._repo.list_by_category_id(category.id)
        ]

    # ------------------------------------------------------------------
    # Create / replace
    # ------------------------------------------------------------------

    def add_product(self, request: ProductRequest) -> ProductResponse:
        logger.info("Creating product %s", request.name)
        product = self._mapper.map_product_request_to_product(request)
        product.categories = self._resolve_categories(request.category_uids)
        created = self._repo.create(product)
        logger.info("Product created uid=%s", created.uid)
        return self._mapper.map_product_to_product_response(created)

    def update_product_by_uuid(
        self, product_uid: UUID, request: ProductRequest
    ) -> ProductResponse:
        """Replace every writable field of the product; its UUID is kept."""
        logger.info("Updating product uid=%s", product_uid)
        existing = self._get_product(product_uid)
        replacement = self._mapper.map_product_request_to_product(request)
        replacement.id = existing.id
        replacement.uid = existing.uid
        replacement.categories = self._resolve_categories(request.category_uids)
        updated = self._repo.replace(replacement)
        logger.info("Product updated uid=%s", product_uid)
        return self._mapper.map_product_to_product_response(updated)

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    def delete_product_by_uuid(self, product_uid: UUID) -> None:
        logger.info("Deleting product uid=%s", product_uid)
        product = self._get_product(product_uid)
        if not self._repo.delete(product.id):
            raise ProductNotFoundError.for_uid(product_uid)
        logger.info("Product deleted uid=%s", product_uid)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_product(self, product_uid: UUID) -> Product:
        product = self._repo.get_by_uid(product_uid)
        if product is None:
            logger.warning("Product uid=%s not found", product_uid)
            raise ProductNotFoundError.for_uid(product_uid)
        return product

    def _resolve_categories(self, category_uids: Iterable[UUID]) -> list[Category]:
        requested = list(dict.fromkeys(category_uids))
        categories = self._category_repo.get_by_uids(requested)
        found = {category.uid for category in categories}
        for uid in requested:
            if uid not in found:
                logger.warning("Category uid=%s not found for product", uid)
                raise CategoryNotFoundError.for_uid(uid)
        return categories
