# canva_connect

Building blocks for working with the Canva Connect API from Python:

- `canva_connect.models`: dataclasses for assets, designs, brand templates,
  folders, users and comment threads. Each has `from_dict` to decode the
  API's JSON objects and `to_dict` to encode them again. Tagged unions are
  decoded with `parse_design_type_input`, `parse_comment_thread_type` and
  `parse_folder_item`. Malformed input raises `JsonError`.
- `canva_connect.errors`: the exceptions, with `CanvaError` at the root,
  `ApiErrorCode` for the API's error codes and `ApiErrorBody` for error
  response bodies.
- `canva_connect.rate_limit`: `ApiRateLimiter`, a client-side per-minute
  request limiter, and `RateLimitInfo`, a parser for the `x-ratelimit-*`
  response headers.
- `canva_connect.observability`: `init_tracing`, which returns a
  `TracingGuard` to use as a context manager.

The package has no runtime dependencies.

## Installation

```
pip install canva_connect
```

## Parsing responses

```python
from canva_connect.models import Asset, AssetType

asset = Asset.from_dict({
    "id": "asset_123",
    "name": "test_asset",
    "tags": [],
    "type": "image",
    "thumbnail": None,
    "created_at": 1640995200,
    "updated_at": 1640995200,
})
assert asset.asset_type is AssetType.IMAGE
print(asset.name, asset.created_at.isoformat())   # 2022-01-01T00:00:00+00:00
```

Timestamps given as Unix seconds become timezone-aware `datetime` objects
in UTC, and `to_dict` writes them back as whole seconds. Folder timestamps
stay plain integers.

Objects whose shape depends on a `type` field are decoded through the
matching parse function:

```python
from canva_connect.models import CustomDesignType, parse_design_type_input

design_type = parse_design_type_input({"type": "custom", "width": 800, "height": 600})
assert isinstance(design_type, CustomDesignType)
assert design_type.to_dict() == {"type": "custom", "width": 800, "height": 600}
```

## Errors

An error body returned by the API becomes an exception:

```python
from canva_connect.errors import ApiError, ApiErrorBody, ApiErrorCode

body = ApiErrorBody.from_json('{"code": "NOT_FOUND", "message": "Resource not found"}')
error = body.to_error()
assert isinstance(error, ApiError)
assert error.code is ApiErrorCode.NOT_FOUND
print(error)   # API error: NOT_FOUND - Resource not found
```

`ApiErrorCode.parse` returns a known code as its enum member and keeps any
other code as the plain string it came as. The other exceptions are
`AuthError`, `RateLimitError`, `HttpError`, `JsonError`, `InvalidUrlError`,
`CanvaIOError`, `InvalidHeaderError` and `ClientBuildError`, all subclasses
of `CanvaError`.

## Rate limiting

```python
from canva_connect.rate_limit import ApiRateLimiter, RateLimitInfo

limiter = ApiRateLimiter.conservative()   # 30 requests per minute
# ApiRateLimiter.permissive() allows 100; ApiRateLimiter(0) falls back to 60


async def send(request):
    await limiter.wait_for_request()
    ...


info = RateLimitInfo.from_headers({
    "X-RateLimit-Remaining": "5",
    "X-RateLimit-Limit": "100",
    "X-RateLimit-Reset": "1893456000",
})
if info.is_near_limit():   # more than 80% of the window used
    print("slow down; resets in", info.time_until_reset())
```

`can_make_request()` takes a slot if one is free right now and reports
whether it did. Header names are matched without regard to case; missing or
malformed headers are left as `None`.

## Tracing

```python
from canva_connect.observability import init_tracing

with init_tracing("my-app", "http://localhost:4317"):
    ...
```

Tracing export is not active: `init_tracing` prints a warning to standard
error and returns a guard that does nothing but record that it was closed.

## What this package does not do

It sends no HTTP requests. There is no API client, no endpoint wrappers,
no OAuth flow and no token storage; the models, errors and rate-limit helpers
are meant to be used with whatever HTTP library you choose. Models for export
formats, asynchronous jobs, asset uploads and design autofill are not
included.

## Running the tests

```
pip install -e ".[test]"
pytest
```