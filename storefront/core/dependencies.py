"""
FastAPI dependency helpers.

Services are assembled here, per request, from explicit repository, mapper
and encoder instances; nothing else constructs them.
"""
from typing import Generator
from uuid import UUID
import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError

from storefront.core.security import PasswordEncoder, decode_token, password_encoder
from storefront.db.database import get_db
from storefront.mappers.category_mapper import CategoryMapper
from storefront.mappers.order_mapper import OrderMapper
from storefront.mappers.product_mapper import ProductMapper
from storefront.mappers.user_mapper import UserMapper
from storefront.models.user import Role, User
from storefront.repositories.category_repository import CategoryRepository
from storefront.repositories.order_repository import OrderRepository
from storefront.repositories.product_repository import ProductRepository
from storefront.repositories.user_repository import UserRepository
from storefront.services.auth_service import AuthService
from storefront.services.category_service import CategoryService
from storefront.services.order_service import OrderService
from storefront.services.product_service import ProductService
from storefront.services.user_service import UserService

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login")


# ---------------------------------------------------------------------------
# DB / infrastructure
# ---------------------------------------------------------------------------

def db_dependency() -> Generator:
    """Yield a database connection; one transaction per request."""
    logger.trace("Creating database dependency connection")
    with get_db() as conn:
        yield conn


def get_password_encoder() -> PasswordEncoder:
    return password_encoder


# ---------------------------------------------------------------------------
# Services
# ---------------------------------------------------------------------------

def get_product_service(conn=Depends(db_dependency)) -> ProductService:
    return ProductService(
        ProductRepository(conn), CategoryRepository(conn), ProductMapper()
    )


def get_category_service(conn=Depends(db_dependency)) -> CategoryService:
    return CategoryService(CategoryRepository(conn), CategoryMapper())


def get_user_service(
    conn=Depends(db_dependency),
    encoder: PasswordEncoder = Depends(get_password_encoder),
) -> UserService:
    return UserService(UserRepository(conn), UserMapper(encoder))


def get_auth_service(
    conn=Depends(db_dependency),
    encoder: PasswordEncoder = Depends(get_password_encoder),
) -> AuthService:
    return AuthService(UserRepository(conn), encoder)


def get_order_service(conn=Depends(db_dependency)) -> OrderService:
    return OrderService(OrderRepository(conn), OrderMapper())


# ---------------------------------------------------------------------------
# Auth dependencies
# ---------------------------------------------------------------------------

def get_current_user(
    token: str = Depends(oauth2_scheme),
    conn=Depends(db_dependency),
) -> User:
    """
    Decode the Bearer access token and return the corresponding User.
    Raises HTTP 401 if the token is invalid, expired, or the user is not found.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = decode_token(token)
        if payload.get("type") != "access":
            logger.warning("Access token type mismatch")
            raise credentials_exception
        subject = payload.get("sub")
        if subject is None:
            logger.warning("Access token missing subject")
            raise credentials_exception
        user_uid = UUID(subject)
    except (JWTError, ValueError):
        logger.error("Failed to decode access token", exc_info=True)
        raise credentials_exception

    user = UserRepository(conn).get_by_uid(user_uid)
    if user is None:
        logger.warning("User not found for token subject")
        raise credentials_exception
    return user


def get_current_active_user(current_user: User = Depends(get_current_user)) -> User:
    """Raise HTTP 400 if the account is disabled."""
    if not current_user.is_enabled:
        logger.warning("Disabled user account uid=%s", current_user.uid)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User account is disabled",
        )
    return current_user


def require_roles(*roles: Role):
    """
    Factory that returns a dependency which enforces that the current user
    has one of the specified roles.

    Usage::
        @router.delete("/{uid}")
        def remove(user: User = Depends(require_roles(Role.ROLE_ADMIN))):
            ...
    """
    def _check(current_user: User = Depends(get_current_active_user)) -> User:
        if current_user.role not in roles:
            logger.warning(
                "User uid=%s lacks required roles: %s",
                current_user.uid,
                ", ".join(role.value for role in roles),
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="You do not have permission to perform this action",
            )
        return current_user
    return _check


require_admin = require_roles(Role.ROLE_ADMIN)
