from cwmanage import (
    ApplicationError,
    ConnectWiseError,
    CustomFieldNotFoundError,
    HTTPStatusError,
    NotFoundError,
)


def test_status_error_keeps_context():
    error = HTTPStatusError("not found", http_status=404, raw_error={"code": "NotFound"})
    assert str(error) == "not found"
    assert error.http_status == 404
    assert error.raw_error == {"code": "NotFound"}
    assert isinstance(error, ConnectWiseError)


def test_application_error_errors_default():
    error = ApplicationError("bad")
    assert error.errors == []
    assert error.message == "bad"


def test_custom_field_not_found():
    error = CustomFieldNotFoundError("Missing", path="/company/companies/1")
    assert error.caption == "Missing"
    assert "Missing" in str(error)
    assert "/company/companies/1" in str(error)
    assert isinstance(error, NotFoundError)
