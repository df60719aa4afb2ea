"""
Translation between Category entities and their transfer objects.
"""
from typing import Optional
import uuid

from storefront.models.category import Category
from storefront.schemas.category import CategoryRequest, CategoryResponse


class CategoryMapper:
    """Stateless Category <-> DTO mapper."""

    def map_category_to_category_response(
        self, category: Optional[Category]
    ) -> Optional[CategoryResponse]:
        if category is None:
            return None
        return CategoryResponse(
            uid=category.uid,
            parent_category_uid=category.parent_uid,
            name=category.name,
            description=category.description,
            icon=category.icon,
            image_path=category.image_path,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )

    def map_category_request_to_category(
        self, request: Optional[CategoryRequest]
    ) -> Optional[Category]:
        """
        Build a new, unsaved Category with a fresh UUID.
        The parent is only carried as a UUID here; resolving it to a row id is
        the service's job.
        """
        if request is None:
            return None
        return Category(
            uid=uuid.uuid4(),
            parent_uid=request.parent_category_uid,
            name=request.name,
            description=request.description,
            icon=request.icon,
            image_path=request.image_path,
        )
