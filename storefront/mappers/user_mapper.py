"""
Translation between User entities and their transfer objects.

The signup direction is the only mapping with a side effect: the plaintext
password goes through the injected PasswordEncoder before it reaches the
entity.
"""
from typing import Optional
import uuid

from storefront.core.security import PasswordEncoder
from storefront.models.user import Role, User
from storefront.schemas.user import SignupRequest, UserResponse


class UserMapper:
    def __init__(self, password_encoder: PasswordEncoder) -> None:
        self._password_encoder = password_encoder

    def map_user_to_user_response(self, user: Optional[User]) -> Optional[UserResponse]:
        if user is None:
            return None
        return UserResponse(
            uuid=user.uid,
            first_name=user.first_name,
            last_name=user.last_name,
            username=user.username,
            role=user.role,
            is_enabled=user.is_enabled,
        )

    def map_signup_request_to_user(self, request: Optional[SignupRequest]) -> Optional[User]:
        if request is None:
            return None
        password = (
            self._password_encoder.encode(request.password)
            if request.password is not None
            else None
        )
        return User(
            uid=request.uuid or uuid.uuid4(),
            first_name=request.first_name,
            last_name=request.last_name,
            username=request.username,
            role=Role.ROLE_USER,
            password=password,
            is_enabled=True,
        )
