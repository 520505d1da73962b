"""
Unit tests for the in-memory rate limiter.
"""

import redis

from app.infrastructure.rate_limiting import (
    InMemoryRateLimiter,
    RateLimit,
    RateLimiter,
    RateLimitStatus,
    RedisRateLimiter,
)


class FakeClock:
    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class TestInMemoryRateLimiter:
    """Test cases for InMemoryRateLimiter."""

    def setup_method(self):
        """Set up test fixtures."""
        self.clock = FakeClock()
        self.limiter = InMemoryRateLimiter(clock=self.clock)
        self.rate_limit = RateLimit(requests=3, window=60)

    def test_allows_up_to_limit(self):
        statuses = [self.limiter.is_allowed("ip:1", self.rate_limit) for _ in range(3)]

        assert all(status.allowed for status in statuses)
        assert [status.remaining for status in statuses] == [2, 1, 0]

    def test_blocks_over_limit(self):
        for _ in range(3):
            self.limiter.is_allowed("ip:1", self.rate_limit)

        status = self.limiter.is_allowed("ip:1", self.rate_limit)

        assert status.allowed is False
        assert status.remaining == 0
        assert status.retry_after == 60

    def test_keys_are_independent(self):
        for _ in range(3):
            self.limiter.is_allowed("ip:1", self.rate_limit)

        assert self.limiter.is_allowed("ip:2", self.rate_limit).allowed

    def test_window_resets(self):
        for _ in range(4):
            self.limiter.is_allowed("ip:1", self.rate_limit)

        self.clock.now += 61

        status = self.limiter.is_allowed("ip:1", self.rate_limit)
        assert status.allowed
        assert status.remaining == 2

    def test_expired_counters_are_dropped(self):
        self.limiter.is_allowed("ip:1", self.rate_limit)
        self.limiter.is_allowed("ip:2", self.rate_limit)

        self.clock.now += 61
        self.limiter.is_allowed("ip:3", self.rate_limit)

        assert set(self.limiter.requests) == {"ip:3"}
        assert set(self.limiter.reset_times) == {"ip:3"}

    def test_live_counters_survive_sweep(self):
        self.limiter.is_allowed("ip:1", self.rate_limit)
        self.clock.now += 61
        self.limiter.is_allowed("ip:2", self.rate_limit)

        self.clock.now += 30
        self.limiter.sweep(int(self.clock.now))

        assert set(self.limiter.requests) == {"ip:2"}


class FakePipeline:
    def __init__(self, store):
        self.store = store
        self.commands = []

    def incr(self, key):
        self.commands.append(("incr", key))

    def expire(self, key, seconds):
        self.commands.append(("expire", key, seconds))

    def execute(self):
        results = []
        for command in self.commands:
            if command[0] == "incr":
                self.store.counts[command[1]] = self.store.counts.get(command[1], 0) + 1
                results.append(self.store.counts[command[1]])
            else:
                self.store.expirations[command[1]] = command[2]
                results.append(True)
        self.commands = []
        return results


class FakeRedis:
    def __init__(self, ping_error=None):
        self.ping_error = ping_error
        self.counts = {}
        self.expirations = {}

    def pipeline(self):
        return FakePipeline(self)

    def ping(self):
        if self.ping_error:
            raise self.ping_error
        return True


class TestRedisRateLimiter:
    """Test cases for RedisRateLimiter against an in-process Redis double."""

    def setup_method(self):
        """Set up test fixtures."""
        self.clock = FakeClock(1_000_000.0)
        self.redis = FakeRedis()
        self.limiter = RedisRateLimiter(self.redis, clock=self.clock)
        self.rate_limit = RateLimit(requests=3, window=60)

    def test_counts_per_aligned_window(self):
        statuses = [self.limiter.is_allowed("rate_limit:1.2.3.4", self.rate_limit) for _ in range(3)]

        assert all(status.allowed for status in statuses)
        assert [status.remaining for status in statuses] == [2, 1, 0]
        assert self.redis.counts == {"rate_limit:1.2.3.4:999960": 3}
        assert self.redis.expirations == {"rate_limit:1.2.3.4:999960": 60}

    def test_blocks_over_limit(self):
        for _ in range(3):
            self.limiter.is_allowed("rate_limit:1.2.3.4", self.rate_limit)

        status = self.limiter.is_allowed("rate_limit:1.2.3.4", self.rate_limit)

        assert status.allowed is False
        assert status.remaining == 0
        assert status.reset_time == 1_000_020
        assert status.retry_after == 20

    def test_next_window_starts_fresh(self):
        for _ in range(4):
            self.limiter.is_allowed("rate_limit:1.2.3.4", self.rate_limit)

        self.clock.now += 20

        status = self.limiter.is_allowed("rate_limit:1.2.3.4", self.rate_limit)
        assert status.allowed
        assert status.remaining == 2


class TestRateLimiterBackend:
    """Test cases for choosing the rate limiter backend."""

    def test_in_memory_without_redis_url(self):
        assert isinstance(RateLimiter().limiter, InMemoryRateLimiter)

    def test_redis_when_reachable(self, monkeypatch):
        client = FakeRedis()
        monkeypatch.setattr(redis, "from_url", lambda url: client)

        limiter = RateLimiter("redis://cache:6379/0")

        assert isinstance(limiter.limiter, RedisRateLimiter)
        assert limiter.limiter.redis is client

    def test_falls_back_when_redis_is_down(self, monkeypatch):
        client = FakeRedis(ping_error=redis.ConnectionError("Connection refused"))
        monkeypatch.setattr(redis, "from_url", lambda url: client)

        limiter = RateLimiter("redis://cache:6379/0")

        assert isinstance(limiter.limiter, InMemoryRateLimiter)


class TestRateLimitStatus:
    """Test cases for RateLimitStatus headers."""

    def test_headers_when_allowed(self):
        headers = RateLimitStatus(limit=50, remaining=49, reset_time=123).to_headers()

        assert headers == {
            "X-RateLimit-Limit": "50",
            "X-RateLimit-Remaining": "49",
            "X-RateLimit-Reset": "123",
        }

    def test_headers_when_blocked(self):
        headers = RateLimitStatus(limit=50, remaining=0, reset_time=123, retry_after=30).to_headers()
        assert headers["Retry-After"] == "30"
