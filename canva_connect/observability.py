"""Tracing hooks for the client; tracing export is not enabled in this build."""

from __future__ import annotations

import sys
from typing import Any

_DISABLED_WARNING = (
    "Warning: Observability feature not enabled. Tracing will not be active."
)


class TracingGuard:
    """Keeps tracing alive while held; closing it ends the tracing session."""

    def __init__(self) -> None:
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """End the tracing session. Closing twice is harmless."""
        self._closed = True

    def __enter__(self) -> "TracingGuard":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


def init_tracing(service_name: str, otlp_endpoint: str) -> TracingGuard:
    """Set up tracing for a service; warns that exporting is not active."""
    print(_DISABLED_WARNING, file=sys.stderr)
    return TracingGuard()