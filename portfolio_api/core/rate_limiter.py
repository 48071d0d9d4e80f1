"""Rate limiting using a Redis sliding window."""

import hashlib
import logging
import time
from typing import Callable
from uuid import uuid4

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from portfolio_api.config import settings

logger = logging.getLogger(__name__)

EXEMPT_PATHS = {"/health", f"{settings.API_PREFIX}/health"}

# Set while Redis is unreachable so the outage is logged once
_limiter_degraded = False


def get_client_ip(request: Request) -> str:
    """Best-effort client IP, preferring proxy headers."""
    for header in ("cf-connecting-ip", "x-forwarded-for", "x-real-ip"):
        value = request.headers.get(header)
        if value:
            return value.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


async def check_rate_limit(
    key: str, limit: int, window: int
) -> tuple[bool, int, int]:
    """Check and record a hit against a sliding window counter.

    Returns:
        Tuple of (is_allowed, remaining_requests, reset_time_seconds)
    """
    global _limiter_degraded

    try:
        from portfolio_api.db.redis import get_redis

        redis = get_redis()
        redis_key = f"ratelimit:{key}"
        now = time.time()
        window_start = now - window
        member = f"{now:.6f}:{uuid4().hex}"

        pipe = redis.pipeline()
        # Remove old entries outside the window
        pipe.zremrangebyscore(redis_key, 0, window_start)
        # Count requests in current window
        pipe.zcard(redis_key)
        # Add current request
        pipe.zadd(redis_key, {member: now})
        pipe.expire(redis_key, window)

        results = await pipe.execute()
        request_count = results[1]

        if request_count >= limit:
            # Over limit, so the hit we just added does not count
            await redis.zrem(redis_key, member)
            allowed, remaining = False, 0
        else:
            allowed, remaining = True, max(0, limit - request_count - 1)

    except Exception as e:
        # Fail open when Redis is unavailable, warning once per outage
        if not _limiter_degraded:
            logger.warning(f"Rate limiting disabled, Redis unavailable: {e}")
            _limiter_degraded = True
        return True, limit, window

    if _limiter_degraded:
        logger.info("Redis reachable again, rate limiting resumed")
        _limiter_degraded = False
    return allowed, remaining, window


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Redis-based sliding window rate limiting middleware."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if not settings.RATE_LIMIT_ENABLED or request.url.path in EXEMPT_PATHS:
            return await call_next(request)

        client_id = self._get_client_id(request)
        is_allowed, remaining, reset_time = await check_rate_limit(
            client_id, settings.RATE_LIMIT_REQUESTS, settings.RATE_LIMIT_WINDOW
        )

        if not is_allowed:
            logger.warning(f"Rate limit exceeded for {client_id}")
            return JSONResponse(
                status_code=429,
                content={
                    "success": False,
                    "error": "Rate limit exceeded",
                    "retry_after": reset_time,
                },
                headers={
                    "X-RateLimit-Limit": str(settings.RATE_LIMIT_REQUESTS),
                    "X-RateLimit-Remaining": "0",
                    "X-RateLimit-Reset": str(reset_time),
                    "Retry-After": str(reset_time),
                },
            )

        response = await call_next(request)

        response.headers["X-RateLimit-Limit"] = str(settings.RATE_LIMIT_REQUESTS)
        response.headers["X-RateLimit-Remaining"] = str(remaining)
        response.headers["X-RateLimit-Reset"] = str(reset_time)

        return response

    def _get_client_id(self, request: Request) -> str:
        """Get client identifier for rate limiting."""
        auth_header = request.headers.get("Authorization", "")
        if auth_header.startswith("Bearer "):
            digest = hashlib.sha256(auth_header.encode()).hexdigest()[:16]
            return f"user:{digest}"

        return f"ip:{get_client_ip(request)}"
