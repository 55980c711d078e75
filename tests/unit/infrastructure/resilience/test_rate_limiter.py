import pytest

from sportmonks_sdk.infrastructure.resilience.rate_limiter import RateLimiter


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    async def sleep(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.mark.asyncio
async def test_grants_requests_within_budget(clock):
    limiter = RateLimiter(max_requests=3, time_window=60, clock=clock, sleep=clock.sleep)

    for _ in range(3):
        await limiter.wait_for_permission()

    assert clock.now == 1000.0
    assert len(limiter.timestamps) == 3


@pytest.mark.asyncio
async def test_waits_for_oldest_request_to_leave_window(clock):
    limiter = RateLimiter(max_requests=2, time_window=60, clock=clock, sleep=clock.sleep)
    await limiter.wait_for_permission()
    clock.now += 10
    await limiter.wait_for_permission()

    assert await limiter.get_wait_time() == pytest.approx(50.0)
    await limiter.wait_for_permission()

    assert clock.now == pytest.approx(1060.0)
    assert len(limiter.timestamps) == 2


@pytest.mark.asyncio
async def test_no_wait_when_window_is_free(clock):
    limiter = RateLimiter(max_requests=1, time_window=60, clock=clock, sleep=clock.sleep)
    assert await limiter.get_wait_time() == 0.0


def test_rejects_empty_budget():
    with pytest.raises(ValueError):
        RateLimiter(max_requests=0)
