"""Rate limiting + security headers middleware."""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from app.auth import get_client_ip
from app.config import settings
from app.redis import redis as redis_client

logger = logging.getLogger(__name__)

_EXEMPT_PATHS = {"/", "/health"}

_SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
}


def _error(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": {"code": status_code, "message": message}},
        headers={**_SECURITY_HEADERS, **(headers or {})},
    )


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)
        for header, value in _SECURITY_HEADERS.items():
            response.headers[header] = value
        return response


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Sliding window rate limiter using Redis sorted sets.

    - RATE_LIMIT_PER_MINUTE requests/min per IP
    - Fails closed (503) when Redis is unavailable
    """

    WINDOW_SECONDS = 60

    def __init__(self, app, limit: int | None = None):
        super().__init__(app)
        self.limit = limit or settings.rate_limit_per_minute

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.url.path in _EXEMPT_PATHS:
            return await call_next(request)

        client_ip = get_client_ip(request)
        key = f"ratelimit:{client_ip}"
        now = time.time()
        window_start = now - self.WINDOW_SECONDS

        try:
            pipe = redis_client.pipeline()
            pipe.zremrangebyscore(key, 0, window_start)
            pipe.zcard(key)
            pipe.zadd(key, {f"{now}": now})
            pipe.expire(key, self.WINDOW_SECONDS + 1)
            results = await pipe.execute()
            current_count = results[1]
        except Exception:
            logger.error("Redis unavailable for rate limiting — denying request")
            return _error(503, "Service temporarily unavailable. Please try again.")

        remaining = max(0, self.limit - current_count - 1)
        reset_at = int(now + self.WINDOW_SECONDS)
        limit_headers = {
            "X-RateLimit-Limit": str(self.limit),
            "X-RateLimit-Remaining": str(remaining),
            "X-RateLimit-Reset": str(reset_at),
        }

        if current_count >= self.limit:
            return _error(429, "Too many requests. Please retry later.", limit_headers)

        response = await call_next(request)
        response.headers.update(limit_headers)
        return response


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """Reject requests with bodies larger than MAX_BODY_BYTES."""

    async def dispatch(self, request: Request, call_next) -> Response:
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > settings.max_body_bytes:
            return _error(
                413,
                f"Request body too large. Max size is {settings.max_body_bytes // 1024} KB.",
            )

        return await call_next(request)
