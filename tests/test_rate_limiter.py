"""Unit tests for the per-key rate limiter - fake clock, no real sleeping."""

import asyncio

import pytest

from profilecheck.core.rate_limiter import RateLimiter


class FakeClock:
    """Monotonic clock whose sleep advances time instantly."""

    def __init__(self, start: float = 100.0):
        self.now = start
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds
        await asyncio.sleep(0)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def limiter(clock):
    return RateLimiter(interval_ms=2000, clock=clock, sleep=clock.sleep)


class TestSequentialAcquire:
    """Test spacing between sequential callers."""

    @pytest.mark.asyncio
    async def test_first_acquire_does_not_wait(self, limiter, clock):
        await limiter.acquire("instagram")
        assert clock.sleeps == []
        assert limiter.last_call("instagram") == 100.0

    @pytest.mark.asyncio
    async def test_immediate_second_acquire_waits_full_interval(self, limiter, clock):
        await limiter.acquire("instagram")
        await limiter.acquire("instagram")
        assert clock.sleeps == [2.0]
        assert limiter.last_call("instagram") == 102.0

    @pytest.mark.asyncio
    async def test_partial_elapsed_waits_remainder(self, limiter, clock):
        await limiter.acquire("tiktok")
        clock.now += 1.5
        await limiter.acquire("tiktok")
        assert clock.sleeps == [pytest.approx(0.5)]

    @pytest.mark.asyncio
    async def test_no_wait_after_interval_elapsed(self, limiter, clock):
        await limiter.acquire("tiktok")
        clock.now += 5
        await limiter.acquire("tiktok")
        assert clock.sleeps == []

    @pytest.mark.asyncio
    async def test_keys_are_independent(self, limiter, clock):
        await limiter.acquire("instagram")
        await limiter.acquire("tiktok")
        await limiter.acquire("youtube")
        assert clock.sleeps == []

    @pytest.mark.asyncio
    async def test_zero_interval_never_waits(self, clock):
        limiter = RateLimiter(interval_ms=0, clock=clock, sleep=clock.sleep)
        for _ in range(5):
            await limiter.acquire("instagram")
        assert clock.sleeps == []


class TestConcurrentAcquire:
    """Test that concurrent callers on one key are serialized."""

    @pytest.mark.asyncio
    async def test_concurrent_same_key_spaced(self, limiter, clock):
        stamps = []

        async def worker():
            await limiter.acquire("instagram")
            stamps.append(clock())

        await asyncio.gather(*(worker() for _ in range(4)))

        assert sorted(stamps) == [100.0, 102.0, 104.0, 106.0]
        assert clock.sleeps == [2.0, 2.0, 2.0]

    @pytest.mark.asyncio
    async def test_concurrent_different_keys_not_blocked(self, limiter, clock):
        await asyncio.gather(
            limiter.acquire("instagram"),
            limiter.acquire("tiktok"),
            limiter.acquire("youtube"),
            limiter.acquire("twitter"),
        )
        assert clock.sleeps == []


class TestReset:
    """Test forgetting recorded timestamps."""

    @pytest.mark.asyncio
    async def test_reset_single_key(self, limiter, clock):
        await limiter.acquire("instagram")
        await limiter.acquire("tiktok")
        limiter.reset("instagram")
        assert limiter.last_call("instagram") is None
        assert limiter.last_call("tiktok") == 100.0

        await limiter.acquire("instagram")
        assert clock.sleeps == []

    @pytest.mark.asyncio
    async def test_reset_all(self, limiter):
        await limiter.acquire("instagram")
        await limiter.acquire("tiktok")
        limiter.reset()
        assert limiter.last_call("instagram") is None
        assert limiter.last_call("tiktok") is None
