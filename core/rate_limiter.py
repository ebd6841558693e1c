"""Rate limiting configuration for the API.

Uses SlowAPI with in-memory storage (suitable for single-instance deployments).
For multi-instance deployments, configure Redis backend.

Rate limits are defined per endpoint type:
- Critical: Computationally expensive endpoints (route search) and login
- Medium: Catalog CRUD endpoints
- Low: Lightweight endpoints (health)
"""

import logging
import os
from http import HTTPStatus

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from fastapi import Request
from fastapi.responses import JSONResponse

from core.exceptions import error_body

logger = logging.getLogger(__name__)


def get_client_identifier(request: Request) -> str:
    """Get client identifier for rate limiting.

    Uses X-Forwarded-For header if behind a proxy, otherwise remote address.
    """
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        # Take the first IP (original client)
        return forwarded.split(",")[0].strip()

    cf_connecting_ip = request.headers.get("CF-Connecting-IP")
    if cf_connecting_ip:
        return cf_connecting_ip

    return get_remote_address(request)


# For Redis: Set RATE_LIMIT_STORAGE_URI=redis://localhost:6379
rate_limit_storage = os.getenv("RATE_LIMIT_STORAGE_URI", "memory://")
limiter = Limiter(
    key_func=get_client_identifier,
    default_limits=["200/minute"],
    storage_uri=rate_limit_storage,
    strategy="fixed-window",
    enabled=os.getenv("RATE_LIMIT_ENABLED", "1") == "1",
)


class RateLimits:
    """Centralized rate limit definitions."""

    # Critical
    ROUTE_SEARCH = "60/minute"       # Batch edge fetches + enumeration
    LOGIN = "10/minute"              # Password hashing, brute-force guard

    # Medium
    CATALOG = "200/minute"

    # Low
    HEALTH = "1000/minute"
    DEFAULT = "200/minute"


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """429 with the common error body plus Retry-After."""
    retry_after = getattr(exc, "retry_after", 60)
    logger.warning(f"Rate limit exceeded on {request.url.path} for {get_client_identifier(request)}: {exc.detail}")
    return JSONResponse(
        status_code=HTTPStatus.TOO_MANY_REQUESTS.value,
        content=error_body(
            HTTPStatus.TOO_MANY_REQUESTS,
            f"Rate limit exceeded: {exc.detail}",
            request.url.path,
        ),
        headers={
            "Retry-After": str(retry_after),
            "X-RateLimit-Limit": str(exc.detail) if exc.detail else "unknown",
        }
    )
