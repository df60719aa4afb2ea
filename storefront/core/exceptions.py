"""
Typed failures raised by the service layer.

Every failure is bound to exactly one ErrorKind, and every kind resolves to
one HTTP status through STATUS_BY_KIND. The boundary layer never inspects the
concrete class, only the kind.
"""
from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND"
    CATEGORY_NOT_FOUND = "CATEGORY_NOT_FOUND"
    PARENT_CATEGORY_NOT_FOUND = "PARENT_CATEGORY_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    ORDER_NOT_FOUND = "ORDER_NOT_FOUND"
    VALIDATION_FAILURE = "VALIDATION_FAILURE"
    DUPLICATE_RESOURCE = "DUPLICATE_RESOURCE"


STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.PRODUCT_NOT_FOUND: 404,
    ErrorKind.CATEGORY_NOT_FOUND: 404,
    ErrorKind.PARENT_CATEGORY_NOT_FOUND: 404,
    ErrorKind.USER_NOT_FOUND: 404,
    ErrorKind.ORDER_NOT_FOUND: 404,
    ErrorKind.VALIDATION_FAILURE: 400,
    ErrorKind.DUPLICATE_RESOURCE: 409,
}


class StorefrontError(Exception):
    """Base class for all domain failures translated at the API boundary."""

    kind: ErrorKind

    def __init__(self, message: str, errors: Optional[list[dict[str, Any]]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.errors = errors or []

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]


# ---------------------------------------------------------------------------
# Not found
# ---------------------------------------------------------------------------

class ProductNotFoundError(StorefrontError):
    kind = ErrorKind.PRODUCT_NOT_FOUND

    @classmethod
    def for_uid(cls, uid) -> "ProductNotFoundError":
        return cls(f"Product with UUID {uid} not found.")


class CategoryNotFoundError(StorefrontError):
    kind = ErrorKind.CATEGORY_NOT_FOUND

    @classmethod
    def for_uid(cls, uid) -> "CategoryNotFoundError":
        return cls(f"Category with UUID {uid} not found.")


class ParentCategoryNotFoundError(StorefrontError):
    kind = ErrorKind.PARENT_CATEGORY_NOT_FOUND

    @classmethod
    def for_uid(cls, uid) -> "ParentCategoryNotFoundError":
        return cls(f"Parent category with UUID {uid} not found.")


class UserNotFoundError(StorefrontError):
    kind = ErrorKind.USER_NOT_FOUND

    @classmethod
    def for_uid(cls, uid) -> "UserNotFoundError":
        return cls(f"User with UUID {uid} not found.")


class OrderNotFoundError(StorefrontError):
    kind = ErrorKind.ORDER_NOT_FOUND

    @classmethod
    def for_uid(cls, uid) -> "OrderNotFoundError":
        return cls(f"Order with UUID {uid} not found.")


# ---------------------------------------------------------------------------
# Validation / conflicts
# ---------------------------------------------------------------------------

class ValidationFailureError(StorefrontError):
    kind = ErrorKind.VALIDATION_FAILURE


class UsernameTakenError(StorefrontError):
    kind = ErrorKind.DUPLICATE_RESOURCE

    @classmethod
    def for_username(cls, username: str) -> "UsernameTakenError":
        return cls(f"Username {username} is already taken.")


class UserUuidTakenError(StorefrontError):
    kind = ErrorKind.DUPLICATE_RESOURCE

    @classmethod
    def for_uid(cls, uid) -> "UserUuidTakenError":
        return cls(f"User with UUID {uid} already exists.")
