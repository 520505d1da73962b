"""
Rate limiting package for FastAPI applications.
"""

from .limiter import (
    RateLimit, RateLimitStatus,
    InMemoryRateLimiter, RedisRateLimiter, RateLimiter
)
from .middleware import RateLimitMiddleware, RATE_LIMIT_EXCEEDED

__all__ = [
    'RateLimit',
    'RateLimitStatus',
    'InMemoryRateLimiter',
    'RedisRateLimiter',
    'RateLimiter',
    'RateLimitMiddleware',
    'RATE_LIMIT_EXCEEDED',
]
