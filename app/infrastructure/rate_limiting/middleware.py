"""
Rate limiting middleware for FastAPI applications.
"""

from typing import List, Optional, Callable
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from fastapi import status

from .limiter import RateLimit, RateLimiter


RATE_LIMIT_EXCEEDED = "Too many requests from this IP, please try again later."


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Middleware for applying one rate limit to a set of path prefixes."""

    def __init__(
        self,
        app,
        rate_limit: RateLimit,
        paths: List[str],
        limiter: Optional[RateLimiter] = None,
        key_func: Optional[Callable[[Request], str]] = None
    ):
        super().__init__(app)
        self.rate_limit = rate_limit
        self.paths = [path.rstrip("/") or "/" for path in paths]
        self.limiter = limiter or RateLimiter()
        self.key_func = key_func

    async def dispatch(self, request: Request, call_next) -> Response:
        """Apply rate limiting to requests."""
        if not self._is_limited_path(request.url.path):
            return await call_next(request)

        status_result = self.limiter.check_rate_limit(request, self.rate_limit, self.key_func)

        if not status_result.allowed:
            return JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content={"error": RATE_LIMIT_EXCEEDED},
                headers=status_result.to_headers()
            )

        response = await call_next(request)

        # Add rate limit headers
        for header_name, header_value in status_result.to_headers().items():
            response.headers[header_name] = header_value

        return response

    def _is_limited_path(self, path: str) -> bool:
        """Prefix match on whole path segments."""
        return any(path == prefix or path.startswith(prefix + "/") for prefix in self.paths)
