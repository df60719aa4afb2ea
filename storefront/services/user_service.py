"""
User management service: signup, retrieval and deletion.
"""
from uuid import UUID
import logging

from storefront.core.exceptions import (
    UserNotFoundError,
    UsernameTakenError,
    UserUuidTakenError,
)
from storefront.mappers.user_mapper import UserMapper
from storefront.models.user import User
from storefront.repositories.user_repository import UserRepository
from storefront.schemas.user import SignupRequest, UserResponse

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, user_repository: UserRepository, user_mapper: UserMapper) -> None:
        logger.trace("Initializing UserService")
        self._repo = user_repository
        self._mapper = user_mapper

    def signup(self, request: SignupRequest) -> UserResponse:
        """Register a new ROLE_USER account; the password is hashed by the mapper."""
        logger.info("Registering user %s", request.username)
        if self._repo.get_by_username(request.username):
            logger.warning("Duplicate username registration attempt: %s", request.username)
            raise UsernameTakenError.for_username(request.username)
        if request.uuid is not None and self._repo.get_by_uid(request.uuid):
            logger.warning("Duplicate user uuid registration attempt: %s", request.uuid)
            raise UserUuidTakenError.for_uid(request.uuid)
        user = self._repo.create(self._mapper.map_signup_request_to_user(request))
        logger.info("User registered uid=%s", user.uid)
        return self._mapper.map_user_to_user_response(user)

    def get_users(self) -> list[UserResponse]:
        logger.info("Listing users")
        return [self._mapper.map_user_to_user_response(u) for u in self._repo.list_all()]

    def get_user_by_uuid(self, user_uid: UUID) -> UserResponse:
        logger.info("Fetching user uid=%s", user_uid)
        return self._mapper.map_user_to_user_response(self._get_user(user_uid))

    def delete_user_by_uuid(self, user_uid: UUID) -> None:
        logger.info("Deleting user uid=%s", user_uid)
        user = self._get_user(user_uid)
        if not self._repo.delete(user.id):
            raise UserNotFoundError.for_uid(user_uid)
        logger.info("User deleted uid=%s", user_uid)

    def _get_user(self, user_uid: UUID) -> User:
        user = self._repo.get_by_uid(user_uid)
        if user is None:
            logger.warning("User uid=%s not found", user_uid)
            raise UserNotFoundError.for_uid(user_uid)
        return user
