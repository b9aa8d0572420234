"""
Test Error Definitions
"""

from crud_backend.common.errors import (
    AppError,
    BadRequestError,
    InternalServerError,
    NotFoundError,
)


def test_status_codes():
    assert BadRequestError().status_code == 400
    assert NotFoundError().status_code == 404
    assert InternalServerError().status_code == 500
    assert isinstance(NotFoundError(), AppError)


def test_to_dict_hides_details_on_request():
    err = BadRequestError("Invalid ID format", code="invalid_id", details={"id": "42"})

    assert err.to_dict() == {
        "error": {
            "message": "Invalid ID format",
            "type": "bad_request_error",
            "code": "invalid_id",
            "details": {"id": "42"},
        }
    }
    assert "details" not in err.to_dict(include_details=False)["error"]


def test_message_is_exception_text():
    err = NotFoundError("Entity with id x not found", code="product_not_found")
    assert str(err) == "Entity with id x not found"
    assert err.error_type == "not_found_error"
