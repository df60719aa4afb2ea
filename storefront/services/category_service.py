"""
Category tree service.

Categories form a tree through an optional parent reference. A referenced
parent must exist, and a category may never become its own ancestor.
"""
from typing import Optional
from uuid import UUID
import logging

from storefront.core.exceptions import (
    CategoryNotFoundError,
    ParentCategoryNotFoundError,
    ValidationFailureError,
)
from storefront.mappers.category_mapper import CategoryMapper
from storefront.models.category import Category
from storefront.repositories.category_repository import CategoryRepository
from storefront.schemas.category import CategoryRequest, CategoryResponse

logger = logging.getLogger(__name__)


class CategoryService:
    def __init__(
        self,
        category_repository: CategoryRepository,
        category_mapper: CategoryMapper,
    ) -> None:
        logger.trace("Initializing CategoryService")
        self._repo = category_repository
        self._mapper = category_mapper

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_categories(self) -> list[CategoryResponse]:
        logger.info("Listing categories")
        return [
            self._mapper.map_category_to_category_response(c)
            for c in self._repo.list_all()
        ]

    def get_category_by_uuid(self, category_uid: UUID) -> CategoryResponse:
        logger.info("Fetching category uid=%s", category_uid)
        return self._mapper.map_category_to_category_response(
            self._get_category(category_uid)
        )

    def get_subcategories(self, category_uid: UUID) -> list[CategoryResponse]:
        logger.info("Listing subcategories of uid=%s", category_uid)
        category = self._get_category(category_uid)
        return [
            self._mapper.map_category_to_category_response(c)
            for c in self._repo.list_children(category.id)
        ]

    # ------------------------------------------------------------------
    # Create / replace
    # ------------------------------------------------------------------

    def add_category(self, request: CategoryRequest) -> CategoryResponse:
        logger.info("Creating category %s", request.name)
        category = self._mapper.map_category_request_to_category(request)
        category.parent_id = self._resolve_parent_id(request.parent_category_uid)
        created = self._repo.create(category)
        logger.info("Category created uid=%s", created.uid)
        return self._mapper.map_category_to_category_response(created)

    def update_category_by_uuid(
        self, category_uid: UUID, request: CategoryRequest
    ) -> CategoryResponse:
        logger.info("Updating category uid=%s", category_uid)
        existing = self._get_category(category_uid)
        replacement = self._mapper.map_category_request_to_category(request)
        replacement.id = existing.id
        replacement.uid = existing.uid
        replacement.parent_id = self._resolve_parent_id(
            request.parent_category_uid, child=existing
        )
        updated = self._repo.replace(replacement)
        logger.info("Category updated uid=%s", category_uid)
        return self._mapper.map_category_to_category_response(updated)

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    def delete_category_by_uuid(self, category_uid: UUID) -> None:
        logger.info("Deleting category uid=%s", category_uid)
        category = self._get_category(category_uid)
        if not self._repo.delete(category.id):
            raise CategoryNotFoundError.for_uid(category_uid)
        logger.info("Category deleted uid=%s", category_uid)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_category(self, category_uid: UUID) -> Category:
        category = self._repo.get_by_uid(category_uid)
        if category is None:
            logger.warning("Category uid=%s not found", category_uid)
            raise CategoryNotFoundError.for_uid(category_uid)
        return category

    def _resolve_parent_id(
        self, parent_uid: Optional[UUID], child: Optional[Category] = None
    ) -> Optional[int]:
        """
        Resolve *parent_uid* to a row id.

        When *child* is given (an update), walk up from the new parent and
        reject the change if the walk reaches the child itself.
        """
        if parent_uid is None:
            return None
        parent = self._repo.get_by_uid(parent_uid)
        if parent is None:
            logger.warning("Parent category uid=%s not found", parent_uid)
            raise ParentCategoryNotFoundError.for_uid(parent_uid)

        if child is not None:
            ancestor: Optional[Category] = parent
            while ancestor is not None:
                if ancestor.id == child.id:
                    logger.warning(
                        "Rejected cyclic parent uid=%s for category uid=%s",
                        parent_uid,
                        child.uid,
                    )
                    raise ValidationFailureError(
                        "A category cannot be its own ancestor",
                        errors=[{
                            "field": "parentCategoryUid",
                            "message": f"{parent_uid} is {child.uid} or one of its descendants",
                        }],
                    )
                ancestor = (
                    self._repo.get_by_id(ancestor.parent_id)
                    if ancestor.parent_id is not None
                    else None
                )
        return parent.id
