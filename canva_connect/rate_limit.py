"""Client-side rate limiting and rate-limit header parsing."""

from __future__ import annotations

import asyncio
import re
import threading
import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping, Optional

_WINDOW_SECONDS = 60.0
_FALLBACK_RATE = 60
_U32_MAX = 2**32 - 1
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")
_SIGNED = re.compile(r"[+-]?[0-9]+")


class ApiRateLimiter:
    """A per-minute request quota that allows bursts up to the full quota."""

    def __init__(self, requests_per_minute: int = 30) -> None:
        if requests_per_minute < 0:
            raise ValueError("requests_per_minute must not be negative")
        rate = requests_per_minute or _FALLBACK_RATE
        self._rate = rate
        self._interval = _WINDOW_SECONDS / rate
        self._tolerance = self._interval * (rate - 1)
        self._next_free: Optional[float] = None
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"ApiRateLimiter(requests_per_minute={self._rate})"

    @classmethod
    def conservative(cls) -> "ApiRateLimiter":
        """A limiter allowing 30 requests per minute."""
        return cls(30)

    @classmethod
    def permissive(cls) -> "ApiRateLimiter":
        """A limiter allowing 100 requests per minute."""
        return cls(100)

    def _acquire(self) -> float:
        """Take a slot and return 0, or return the seconds until one is free."""
        with self._lock:
            now = time.monotonic()
            arrival = now if self._next_free is None else max(self._next_free, now)
            wait = arrival - self._tolerance - now
            if wait > 0:
                return wait
            self._next_free = arrival + self._interval
            return 0.0

    async def wait_for_request(self) -> None:
        """Wait until a request may be made, then take its slot."""
        while True:
            delay = self._acquire()
            if delay <= 0:
                return
            await asyncio.sleep(delay)

    def can_make_request(self) -> bool:
        """Take a slot if one is free now; report whether it was."""
        return self._acquire() <= 0


def _header_text(headers: Mapping[str, Any], name: str) -> Optional[str]:
    for key, value in headers.items():
        if str(key).lower() != name:
            continue
        if isinstance(value, (bytes, bytearray)):
            raw = bytes(value)
        else:
            raw = str(value).encode("utf-8")
        if all(32 <= b < 127 or b == 9 for b in raw):
            return raw.decode("ascii")
        return None
    return None


def _parse_u32(text: Optional[str]) -> Optional[int]:
    if text is None or not _UNSIGNED.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _U32_MAX else None


def _parse_i64(text: Optional[str]) -> Optional[int]:
    if text is None or not _SIGNED.fullmatch(text):
        return None
    value = int(text)
    return value if _I64_MIN <= value <= _I64_MAX else None


@dataclass
class RateLimitInfo:
    """Rate limit state reported by the API's response headers."""

    remaining: Optional[int] = None
    reset_at: Optional[datetime] = None
    limit: Optional[int] = None

    @classmethod
    def from_headers(cls, headers: Mapping[str, Any]) -> "RateLimitInfo":
        """Read the x-ratelimit-* headers; missing or malformed ones become None."""
        remaining = _parse_u32(_header_text(headers, "x-ratelimit-remaining"))
        limit = _parse_u32(_header_text(headers, "x-ratelimit-limit"))
        reset_at = None
        timestamp = _parse_i64(_header_text(headers, "x-ratelimit-reset"))
        if timestamp is not None:
            try:
                reset_at = datetime.fromtimestamp(timestamp, tz=timezone.utc)
            except (OverflowError, OSError, ValueError):
                reset_at = None
        return cls(remaining=remaining, reset_at=reset_at, limit=limit)

    def is_near_limit(self) -> bool:
        """True when more than 80% of the window's requests are used."""
        if self.remaining is None or self.limit is None or self.limit == 0:
            return False
        usage = (self.limit - self.remaining) / self.limit
        return usage > 0.8

    def time_until_reset(self) -> Optional[timedelta]:
        """Time left until the window resets, or None if it is not in the future."""
        if self.reset_at is None:
            return None
        now = datetime.now(timezone.utc)
        if self.reset_at > now:
            return self.reset_at - now
        return None