"""
Per-client rate limiting with in-memory or Redis counters.
"""

import time
import logging
from typing import Optional, Dict, Callable
from dataclasses import dataclass

import redis
from starlette.requests import Request

logger = logging.getLogger(__name__)


@dataclass
class RateLimit:
    """Rate limit configuration."""
    requests: int  # Number of requests allowed
    window: int    # Time window in seconds


@dataclass
class RateLimitStatus:
    """Current rate limit status."""
    limit: int
    remaining: int
    reset_time: int
    retry_after: Optional[int] = None

    @property
    def allowed(self) -> bool:
        return self.retry_after is None

    def to_headers(self) -> Dict[str, str]:
        """Convert to HTTP headers."""
        headers = {
            'X-RateLimit-Limit': str(self.limit),
            'X-RateLimit-Remaining': str(self.remaining),
            'X-RateLimit-Reset': str(self.reset_time)
        }
        if self.retry_after is not None:
            headers['Retry-After'] = str(self.retry_after)
        return headers


class InMemoryRateLimiter:
    """Fixed-window counters kept in process memory."""

    def __init__(self, clock: Callable[[], float] = time.time):
        self.clock = clock
        self.requests: Dict[str, int] = {}
        self.reset_times: Dict[str, int] = {}
        self._next_sweep = 0

    def sweep(self, current_time: int) -> None:
        """Drop every counter whose window has ended."""
        expired = [key for key, reset_time in self.reset_times.items() if reset_time <= current_time]
        for key in expired:
            self.requests.pop(key, None)
            self.reset_times.pop(key, None)

    def is_allowed(self, key: str, rate_limit: RateLimit) -> RateLimitStatus:
        """Check if request is allowed under rate limit."""
        current_time = int(self.clock())

        # Clients that never come back are dropped at most once per window
        if current_time >= self._next_sweep:
            self.sweep(current_time)
            self._next_sweep = current_time + rate_limit.window

        # Window expired: start over
        if key in self.reset_times and self.reset_times[key] <= current_time:
            self.requests.pop(key, None)
            self.reset_times.pop(key, None)

        if key not in self.requests:
            self.requests[key] = 0
            self.reset_times[key] = current_time + rate_limit.window

        current_count = self.requests[key]

        if current_count >= rate_limit.requests:
            return RateLimitStatus(
                limit=rate_limit.requests,
                remaining=0,
                reset_time=self.reset_times[key],
                retry_after=max(1, self.reset_times[key] - current_time)
            )

        self.requests[key] += 1

        return RateLimitStatus(
            limit=rate_limit.requests,
            remaining=rate_limit.requests - (current_count + 1),
            reset_time=self.reset_times[key]
        )


class RedisRateLimiter:
    """Redis-based rate limiter shared between processes."""

    def __init__(self, redis_client: redis.Redis, clock: Callable[[], float] = time.time):
        self.redis = redis_client
        self.clock = clock

    def is_allowed(self, key: str, rate_limit: RateLimit) -> RateLimitStatus:
        """Fixed window aligned to multiples of the window length."""
        current_time = int(self.clock())
        window = current_time - (current_time % rate_limit.window)

        pipe = self.redis.pipeline()
        window_key = f"{key}:{window}"

        pipe.incr(window_key)
        pipe.expire(window_key, rate_limit.window)
        results = pipe.execute()

        current_count = results[0]
        reset_time = window + rate_limit.window

        if current_count > rate_limit.requests:
            return RateLimitStatus(
                limit=rate_limit.requests,
                remaining=0,
                reset_time=reset_time,
                retry_after=max(1, reset_time - current_time)
            )

        return RateLimitStatus(
            limit=rate_limit.requests,
            remaining=max(0, rate_limit.requests - current_count),
            reset_time=reset_time
        )


class RateLimiter:
    """Main rate limiter class that handles both Redis and in-memory backends."""

    def __init__(self, redis_url: Optional[str] = None):
        self.redis_client = None
        self.limiter = InMemoryRateLimiter()

        if redis_url:
            try:
                self.redis_client = redis.from_url(redis_url)
                self.redis_client.ping()
                self.limiter = RedisRateLimiter(self.redis_client)
                logger.info("Using Redis rate limiter")
            except (redis.RedisError, ValueError) as e:
                logger.warning(f"Failed to connect to Redis, using in-memory limiter: {e}")
        else:
            logger.info("Using in-memory rate limiter")

    def check_rate_limit(self, request: Request, rate_limit: RateLimit,
                         key_func: Optional[Callable[[Request], str]] = None) -> RateLimitStatus:
        """Check if request is within rate limit."""
        if key_func:
            key = key_func(request)
        else:
            key = self._default_key(request)

        return self.limiter.is_allowed(key, rate_limit)

    def _default_key(self, request: Request) -> str:
        """Per source address; one counter across every limited path."""
        client_ip = request.client.host if request.client else 'unknown'
        return f"rate_limit:{client_ip}"
