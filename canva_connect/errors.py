"""Exceptions raised by the Canva Connect client."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Union


class ApiErrorCode(str, Enum):
    """Error codes known to be returned by the Canva Connect API."""

    INVALID_REQUEST = "INVALID_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    CONFLICT = "CONFLICT"
    UNPROCESSABLE_ENTITY = "UNPROCESSABLE_ENTITY"
    TOO_MANY_REQUESTS = "TOO_MANY_REQUESTS"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"

    def __str__(self) -> str:
        return self.value

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)

    @classmethod
    def parse(cls, code: str) -> Union["ApiErrorCode", str]:
        """Return the matching code, or the raw string for an unknown one."""
        try:
            return cls(code)
        except ValueError:
            return str(code)


class CanvaError(Exception):
    """Base class for every error raised by the client."""


class _WrappedError(CanvaError):
    """An error caused by another error, whose text follows a fixed prefix."""

    _prefix = ""

    def __init__(self, cause: object) -> None:
        self.cause = cause
        super().__init__(f"{self._prefix}{cause}")
        if isinstance(cause, BaseException):
            self.__cause__ = cause


class HttpError(_WrappedError):
    """An HTTP request failed."""

    _prefix = "HTTP request failed: "


class JsonError(_WrappedError):
    """A JSON document could not be encoded or decoded."""

    _prefix = "JSON error: "


class InvalidUrlError(_WrappedError):
    """A URL could not be parsed."""

    _prefix = "Invalid URL: "


class CanvaIOError(_WrappedError):
    """An I/O operation failed."""

    _prefix = "IO error: "


class InvalidHeaderError(_WrappedError):
    """A header value was not valid."""

    _prefix = "Invalid header value: "


class ClientBuildError(_WrappedError):
    """The HTTP client could not be built."""

    _prefix = "Failed to build HTTP client: "


class ApiError(CanvaError):
    """An error response returned by the Canva API."""

    def __init__(self, code: Union[ApiErrorCode, str], message: str) -> None:
        self.code = ApiErrorCode.parse(code)
        self.message = message
        super().__init__(f"API error: {self.code} - {message}")


class AuthError(CanvaError):
    """Authentication failed."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Authentication error: {message}")


class RateLimitError(CanvaError):
    """The API rate limit was exceeded."""

    def __init__(self) -> None:
        super().__init__("Rate limit exceeded")


@dataclass(frozen=True)
class ApiErrorBody:
    """The JSON body of an API error response."""

    code: str
    message: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ApiErrorBody":
        if not isinstance(data, Mapping):
            raise JsonError("expected an object")
        values = {}
        for field in ("code", "message"):
            if field not in data:
                raise JsonError(f"missing field `{field}`")
            value = data[field]
            if not isinstance(value, str):
                raise JsonError(f"invalid type for `{field}`, expected a string")
            values[field] = value
        return cls(**values)

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "ApiErrorBody":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise JsonError(exc) from exc
        return cls.from_dict(data)

    def to_error(self) -> ApiError:
        """Turn the response body into the exception it describes."""
        return ApiError(self.code, self.message)