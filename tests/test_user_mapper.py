import uuid

from storefront.mappers.user_mapper import UserMapper
from storefront.models.user import Role, User
from storefront.schemas.user import SignupRequest

SUPPLIED_UUID = uuid.UUID("f97b6441-6ce0-4c95-93b7-9cf9aafa6712")


def _mapper(password_encoder) -> UserMapper:
    return UserMapper(password_encoder)


def test_returns_none_for_none_user(password_encoder):
    assert _mapper(password_encoder).map_user_to_user_response(None) is None


def test_maps_user_to_response(password_encoder):
    user = User(
        id=42,
        uid=uuid.uuid4(),
        first_name="Maciej",
        last_name="Marciniak",
        username="genger@wp.pl",
        password=password_encoder.encode("ala ma kota"),
        is_enabled=True,
        role=Role.ROLE_USER,
    )

    response = _mapper(password_encoder).map_user_to_user_response(user)

    assert response.first_name == user.first_name
    assert response.last_name == user.last_name
    assert response.uuid == user.uid
    assert response.role == user.role
    assert response.username == user.username
    assert "id" not in response.model_dump()
    assert "password" not in response.model_dump()


def test_partial_user_maps_without_raising(password_encoder):
    response = _mapper(password_encoder).map_user_to_user_response(User(first_name="Maciej"))

    assert response.uuid is None
    assert response.first_name == "Maciej"
    assert response.username is None
    assert response.role is None

def test_returns_none_for_none_signup_request(password_encoder):
    assert _mapper(password_encoder).map_signup_request_to_user(None) is None


def test_maps_signup_request_with_encoded_password(password_encoder):
    request = SignupRequest(
        first_name="Maciej",
        last_name="Marciniak",
        username="genger@wp.pl",
        password="ala ma kota",
        uuid=SUPPLIED_UUID,
    )

    user = _mapper(password_encoder).map_signup_request_to_user(request)

    assert user.first_name == request.first_name
    assert user.last_name == request.last_name
    assert user.username == request.username
    assert user.uid == SUPPLIED_UUID
    assert user.password != request.password
    assert user.password == password_encoder.encode(request.password)
    assert user.role == Role.ROLE_USER
    assert user.is_enabled is True
    assert user.id is None


def test_generates_uuid_when_signup_request_has_none(password_encoder):
    request = SignupRequest(
        first_name="Jan",
        last_name="Kowalski",
        username="jan@example.com",
        password="Secret123",
    )

    first = _mapper(password_encoder).map_signup_request_to_user(request)
    second = _mapper(password_encoder).map_signup_request_to_user(request)

    assert isinstance(first.uid, uuid.UUID)
    assert first.uid != second.uid


def test_partial_signup_request_does_not_raise(password_encoder):
    # Bypasses validation to simulate a request with optional data missing.
    request = SignupRequest.model_construct(
        first_name="Maciej", last_name="Marciniak", username="genger@wp.pl",
        password=None, uuid=None,
    )

    user = _mapper(password_encoder).map_signup_request_to_user(request)

    assert user.password is None
    assert user.first_name == "Maciej"
