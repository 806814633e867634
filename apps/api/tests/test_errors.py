import pytest
from django.db import DatabaseError, IntegrityError

from apps.api.common.errors import (
    AlreadySubmitted,
    DomainError,
    NotFound,
    OutOfRange,
    StoreError,
    ValidationError,
)
from apps.api.common.exception_handler import domain_exception_handler
from apps.api.common.store import store_errors


def test_store_errors_wraps_database_error():
    with pytest.raises(StoreError) as exc:
        with store_errors("save answer"):
            raise IntegrityError("duplicate key")

    assert exc.value.message == "Failed to save answer: duplicate key"
    assert isinstance(exc.value.__cause__, DatabaseError)


def test_store_errors_passes_domain_errors_through():
    with pytest.raises(NotFound):
        with store_errors("save answer"):
            raise NotFound("Answer sheet not found")


def test_out_of_range_is_a_validation_error():
    err = OutOfRange("question_number 9 is out of range (1..3)")
    assert isinstance(err, ValidationError)
    assert err.http_status == 400
    assert err.to_dict() == {
        "detail": "question_number 9 is out of range (1..3)",
        "code": "out_of_range",
    }


def test_code_and_status_override():
    err = DomainError("teapot", code="teapot", http_status=418)
    assert (err.code, err.http_status) == ("teapot", 418)


@pytest.mark.parametrize(
    "exc, status",
    [
        (ValidationError("bad"), 400),
        (NotFound("missing"), 404),
        (AlreadySubmitted("done"), 409),
        (StoreError("db down"), 503),
    ],
)
def test_handler_renders_domain_errors(exc, status):
    res = domain_exception_handler(exc, {"view": None})

    assert res.status_code == status
    assert res.data == {"detail": exc.message, "code": exc.code}


def test_handler_defers_to_drf_for_other_errors():
    from rest_framework.exceptions import NotAuthenticated

    res = domain_exception_handler(NotAuthenticated(), {"view": None})
    assert res.status_code == 401

    assert domain_exception_handler(RuntimeError("boom"), {"view": None}) is None
