"""
Translation between Product entities and their transfer objects.
"""
from typing import Optional
import uuid

from storefront.models.product import Product
from storefront.schemas.product import (
    ProductCategoryResponse,
    ProductRequest,
    ProductResponse,
)


class ProductMapper:
    """Stateless Product <-> DTO mapper."""

    def map_product_to_product_response(
        self, product: Optional[Product]
    ) -> Optional[ProductResponse]:
        if product is None:
            return None
        return ProductResponse(
            uid=product.uid,
            name=product.name,
            sku=product.sku,
            regular_price=product.regular_price,
            discount_price=product.discount_price,
            discount_price_end_date=product.discount_price_end_date,
            lowest_price=product.lowest_price,
            description=product.description,
            short_description=product.short_description,
            note=product.note,
            published=product.published,
            quantity=product.quantity,
            categories=[
                ProductCategoryResponse(uid=category.uid, name=category.name)
                for category in product.categories
            ],
        )

    def map_product_request_to_product(
        self, request: Optional[ProductRequest]
    ) -> Optional[Product]:
        """
        Build a new, unsaved Product with a fresh UUID.
        Categories are left empty; the service resolves ``category_uids``.
        """
        if request is None:
            return None
        return Product(
            uid=uuid.uuid4(),
            name=request.name,
            sku=request.sku,
            regular_price=request.regular_price,
            discount_price=request.discount_price,
            discount_price_end_date=request.discount_price_end_date,
            lowest_price=request.lowest_price,
            description=request.description,
            short_description=request.short_description,
            note=request.note,
            published=request.published,
            quantity=request.quantity,
        )
