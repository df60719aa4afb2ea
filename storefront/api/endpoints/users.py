"""
User management endpoints:
  GET    /users          – List all users (Admin only)
  GET    /users/{uid}    – Get a specific user (Admin or self)
  DELETE /users/{uid}    – Delete a user (Admin only)
"""
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from storefront.core.dependencies import (
    get_current_active_user,
    get_user_service,
    require_admin,
)
from storefront.models.user import Role, User
from storefront.schemas.user import UserResponse
from storefront.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.get(
    "",
    response_model=list[UserResponse],
    summary="List all users (Admin only)",
)
def get_users(
    service: UserService = Depends(get_user_service),
    _: User = Depends(require_admin),
):
    return service.get_users()


@router.get(
    "/{user_uid}",
    response_model=UserResponse,
    summary="Get a specific user (Admin or self)",
)
def get_user(
    user_uid: UUID,
    service: UserService = Depends(get_user_service),
    current_user: User = Depends(get_current_active_user),
):
    """Admins can fetch any user; everyone else only their own profile."""
    if current_user.role != Role.ROLE_ADMIN and current_user.uid != user_uid:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You do not have permission to view this profile",
        )
    return service.get_user_by_uuid(user_uid)


@router.delete(
    "/{user_uid}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user (Admin only)",
)
def delete_user(
    user_uid: UUID,
    service: UserService = Depends(get_user_service),
    _: User = Depends(require_admin),
):
    service.delete_user_by_uuid(user_uid)
