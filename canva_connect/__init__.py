"""Models, errors, rate limiting and tracing helpers for the Canva Connect API."""

__version__ = "0.1.0"

__all__ = ["errors", "models", "observability", "rate_limit"]