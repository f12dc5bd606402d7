import pytest

from canva_connect.errors import (
    ApiError,
    ApiErrorBody,
    ApiErrorCode,
    AuthError,
    CanvaError,
    CanvaIOError,
    ClientBuildError,
    HttpError,
    InvalidHeaderError,
    InvalidUrlError,
    JsonError,
    RateLimitError,
)


def test_error_display():
    assert str(AuthError("Invalid token")) == "Authentication error: Invalid token"
    assert str(CanvaError("Something went wrong")) == "Something went wrong"
    assert str(RateLimitError()) == "Rate limit exceeded"


def test_api_error_code_display():
    assert f"{ApiErrorCode.NOT_FOUND}" == "NOT_FOUND"
    assert str(ApiErrorCode.UNAUTHORIZED) == "UNAUTHORIZED"
    assert str(ApiErrorCode.FORBIDDEN) == "FORBIDDEN"
    assert str(ApiErrorCode.TOO_MANY_REQUESTS) == "TOO_MANY_REQUESTS"
    assert str(ApiErrorCode.INTERNAL_SERVER_ERROR) == "INTERNAL_SERVER_ERROR"
    assert str(ApiErrorCode.parse("CUSTOM")) == "CUSTOM"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("NOT_FOUND", ApiErrorCode.NOT_FOUND),
        ("UNAUTHORIZED", ApiErrorCode.UNAUTHORIZED),
        ("FORBIDDEN", ApiErrorCode.FORBIDDEN),
        ("TOO_MANY_REQUESTS", ApiErrorCode.TOO_MANY_REQUESTS),
        ("INTERNAL_SERVER_ERROR", ApiErrorCode.INTERNAL_SERVER_ERROR),
        ("INVALID_REQUEST", ApiErrorCode.INVALID_REQUEST),
        ("METHOD_NOT_ALLOWED", ApiErrorCode.METHOD_NOT_ALLOWED),
        ("CONFLICT", ApiErrorCode.CONFLICT),
        ("UNPROCESSABLE_ENTITY", ApiErrorCode.UNPROCESSABLE_ENTITY),
        ("SERVICE_UNAVAILABLE", ApiErrorCode.SERVICE_UNAVAILABLE),
    ],
)
def test_api_error_code_from_string(text, expected):
    assert ApiErrorCode.parse(text) is expected


def test_unknown_api_error_code_keeps_text():
    code = ApiErrorCode.parse("UNKNOWN_CODE")
    assert code == "UNKNOWN_CODE"
    assert not isinstance(code, ApiErrorCode)


def test_api_error_code_equality():
    assert ApiErrorCode.NOT_FOUND == ApiErrorCode.NOT_FOUND
    assert ApiErrorCode.NOT_FOUND != ApiErrorCode.UNAUTHORIZED
    assert ApiErrorCode.parse("CUSTOM") == ApiErrorCode.parse("CUSTOM")
    assert ApiErrorCode.parse("CUSTOM") != ApiErrorCode.parse("OTHER")


def test_api_error_creation():
    error = ApiError(ApiErrorCode.NOT_FOUND, "Resource not found")
    text = str(error)
    assert "NOT_FOUND" in text
    assert "Resource not found" in text
    assert text == "API error: NOT_FOUND - Resource not found"


def test_api_error_parses_string_code():
    error = ApiError("FORBIDDEN", "nope")
    assert error.code is ApiErrorCode.FORBIDDEN
    assert error.message == "nope"


def test_api_error_from_api_error_body():
    body = ApiErrorBody(code="UNAUTHORIZED", message="Invalid credentials")
    error = body.to_error()
    assert isinstance(error, ApiError)
    assert error.code is ApiErrorCode.UNAUTHORIZED
    assert error.message == "Invalid credentials"


def test_error_debug():
    error = AuthError("Test auth error")
    debug = repr(error)
    assert "Auth" in debug
    assert "Test auth error" in debug


def test_error_source():
    io_error = FileNotFoundError("File not found")
    error = CanvaIOError(io_error)
    assert error.__cause__ is io_error
    assert str(error) == "IO error: File not found"


def test_json_error_conversion():
    with pytest.raises(JsonError) as info:
        ApiErrorBody.from_json('{"incomplete": json')
    assert str(info.value).startswith("JSON error: ")
    assert isinstance(info.value, CanvaError)


def test_error_variants():
    assert AuthError("auth error").message == "auth error"
    assert str(CanvaError("generic error")) == "generic error"
    with pytest.raises(RateLimitError):
        raise RateLimitError()


def test_api_error_deserialization():
    body = ApiErrorBody.from_json('{"code": "NOT_FOUND", "message": "Resource not found"}')
    assert body.code == "NOT_FOUND"
    assert body.message == "Resource not found"


def test_api_error_body_missing_field():
    with pytest.raises(JsonError) as info:
        ApiErrorBody.from_dict({"code": "NOT_FOUND"})
    assert "message" in str(info.value)


def test_api_error_body_rejects_non_object():
    with pytest.raises(JsonError):
        ApiErrorBody.from_json("[1, 2]")


@pytest.mark.parametrize(
    "cls, prefix",
    [
        (HttpError, "HTTP request failed: "),
        (InvalidUrlError, "Invalid URL: "),
        (InvalidHeaderError, "Invalid header value: "),
        (ClientBuildError, "Failed to build HTTP client: "),
    ],
)
def test_wrapped_error_messages(cls, prefix):
    cause = ValueError("boom")
    error = cls(cause)
    assert str(error) == prefix + "boom"
    assert error.cause is cause