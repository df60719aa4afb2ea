"""
Authentication endpoints:
  POST /auth/signup   – Register a new user account
  POST /auth/login    – OAuth2 password flow, returns an access token
  GET  /auth/me       – Return the currently authenticated user's profile
"""
from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
import logging

from storefront.core.dependencies import (
    get_auth_service,
    get_current_active_user,
    get_user_service,
)
from storefront.models.user import User
from storefront.schemas.token import Token
from storefront.schemas.user import SignupRequest, UserResponse
from storefront.services.auth_service import AuthService
from storefront.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/signup",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user account",
)
def signup(data: SignupRequest, service: UserService = Depends(get_user_service)):
    """
    Create a `ROLE_USER` account. The username is an e-mail address and must be
    unique; the password is stored hashed.
    """
    logger.info("Signup requested for username=%s", data.username)
    return service.signup(data)


@router.post(
    "/login",
    response_model=Token,
    summary="Login with username and password (OAuth2 Password Flow)",
)
def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    service: AuthService = Depends(get_auth_service),
):
    logger.info("Login requested for username=%s", form_data.username)
    return service.login(form_data.username, form_data.password)


@router.get(
    "/me",
    response_model=UserResponse,
    summary="Get the current authenticated user's profile",
)
def get_me(
    current_user: User = Depends(get_current_active_user),
    service: UserService = Depends(get_user_service),
):
    logger.info("Returning profile for user uid=%s", current_user.uid)
    return service.get_user_by_uuid(current_user.uid)
