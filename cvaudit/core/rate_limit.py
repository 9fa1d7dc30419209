from __future__ import annotations

from slowapi import Limiter
from slowapi.util import get_remote_address

from cvaudit.core.config import settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def rate_limit(limit: str | None = None):
    """Per-route slowapi limit; ``limit`` overrides ``RATE_LIMIT``, and disabled limiting is a no-op."""
    if settings.rate_limit_enabled:
        return limiter.limit(limit or settings.rate_limit)

    def decorator(func):
        return func

    return decorator
