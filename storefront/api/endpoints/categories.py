"""
Category endpoints:
  GET    /categories                        – List all categories (204 when empty)
  GET    /categories/{uid}                  – Get a specific category
  GET    /categories/{uid}/subcategories    – Direct children of a category
  POST   /categories                        – Create a category (Admin)
  PUT    /categories/{uid}                  – Replace a category (Admin)
  DELETE /categories/{uid}                  – Delete a category (Admin)
"""
from uuid import UUID
import logging

from fastapi import APIRouter, Depends, Response, status

from storefront.core.dependencies import get_category_service, require_admin
from storefront.models.user import User
from storefront.schemas.category import CategoryRequest, CategoryResponse
from storefront.services.category_service import CategoryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get(
    "",
    response_model=list[CategoryResponse],
    responses={204: {"description": "No categories defined"}},
    summary="List all categories",
)
def get_categories(service: CategoryService = Depends(get_category_service)):
    logger.info("Listing categories")
    categories = service.get_categories()
    if not categories:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return categories


@router.get(
    "/{category_uid}",
    response_model=CategoryResponse,
    summary="Get a specific category",
)
def get_category(
    category_uid: UUID,
    service: CategoryService = Depends(get_category_service),
):
    logger.info("Fetching category uid=%s", category_uid)
    return service.get_category_by_uuid(category_uid)


@router.get(
    "/{category_uid}/subcategories",
    response_model=list[CategoryResponse],
    responses={204: {"description": "The category has no children"}},
    summary="List the direct children of a category",
)
def get_subcategories(
    category_uid: UUID,
    service: CategoryService = Depends(get_category_service),
):
    logger.info("Listing subcategories of uid=%s", category_uid)
    children = service.get_subcategories(category_uid)
    if not children:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return children


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new category (Admin)",
)
def add_category(
    data: CategoryRequest,
    service: CategoryService = Depends(get_category_service),
    _: User = Depends(require_admin),
):
    """
    Create a category. When `parentCategoryUid` is given it must reference an
    existing category, otherwise the request fails with 404.
    """
    logger.info("Creating category %s", data.name)
    return service.add_category(data)


@router.put(
    "/{category_uid}",
    response_model=CategoryResponse,
    summary="Replace a category (Admin)",
)
def update_category(
    category_uid: UUID,
    data: CategoryRequest,
    service: CategoryService = Depends(get_category_service),
    _: User = Depends(require_admin),
):
    """Replace every field of the category. Re-parenting under a descendant is rejected."""
    logger.info("Updating category uid=%s", category_uid)
    return service.update_category_by_uuid(category_uid, data)


@router.delete(
    "/{category_uid}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a category (Admin)",
)
def delete_category(
    category_uid: UUID,
    service: CategoryService = Depends(get_category_service),
    _: User = Depends(require_admin),
):
    """Delete a category. Its product links are removed and its children become roots."""
    logger.info("Deleting category uid=%s", category_uid)
    service.delete_category_by_uuid(category_uid)
