"""
Authentication service: verifies credentials and issues access tokens.
"""
import logging

from fastapi import HTTPException, status

from storefront.core.security import PasswordEncoder, create_access_token
from storefront.repositories.user_repository import UserRepository
from storefront.schemas.token import Token

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(
        self, user_repository: UserRepository, password_encoder: PasswordEncoder
    ) -> None:
        logger.trace("Initializing AuthService")
        self._user_repo = user_repository
        self._password_encoder = password_encoder

    def login(self, username: str, password: str) -> Token:
        """Validate credentials and issue a new access token."""
        logger.info("Authenticating user '%s'", username)
        user = self._user_repo.get_by_username(username)

        if (
            not user
            or not user.password
            or not self._password_encoder.matches(password, user.password)
        ):
            logger.warning("Invalid login attempt for '%s'", username)
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Incorrect username or password",
                headers={"WWW-Authenticate": "Bearer"},
            )

        if not user.is_enabled:
            logger.warning("Disabled user attempted login uid=%s", user.uid)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="User account is disabled",
            )

        logger.info("User authenticated uid=%s", user.uid)
        return Token(access_token=create_access_token(str(user.uid), user.role.value))
