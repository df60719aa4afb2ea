import uuid

import pytest

from storefront.core.exceptions import (
    STATUS_BY_KIND,
    CategoryNotFoundError,
    ErrorKind,
    OrderNotFoundError,
    ParentCategoryNotFoundError,
    ProductNotFoundError,
    StorefrontError,
    UserNotFoundError,
    UsernameTakenError,
    UserUuidTakenError,
    ValidationFailureError,
)


def test_every_kind_has_a_status():
    assert set(STATUS_BY_KIND) == set(ErrorKind)


@pytest.mark.parametrize(
    "error_class, expected_status",
    [
        (ProductNotFoundError, 404),
        (CategoryNotFoundError, 404),
        (ParentCategoryNotFoundError, 404),
        (UserNotFoundError, 404),
        (OrderNotFoundError, 404),
        (ValidationFailureError, 400),
        (UsernameTakenError, 409),
        (UserUuidTakenError, 409),
    ],
)
def test_status_is_fixed_per_failure(error_class, expected_status):
    assert error_class("boom").status_code == expected_status
    assert issubclass(error_class, StorefrontError)


def test_message_names_the_identifier():
    uid = uuid.uuid4()

    error = ProductNotFoundError.for_uid(uid)

    assert str(uid) in error.message
    assert str(error) == error.message
    assert error.errors == []


def test_parent_category_failure_is_distinct_from_category_failure():
    uid = uuid.uuid4()
    assert ParentCategoryNotFoundError.for_uid(uid).kind is ErrorKind.PARENT_CATEGORY_NOT_FOUND
    assert CategoryNotFoundError.for_uid(uid).kind is ErrorKind.CATEGORY_NOT_FOUND
