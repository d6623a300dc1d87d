import pytest

from api.rate_limit import FixedWindowRateLimiter


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def limiter(clock):
    return FixedWindowRateLimiter(max_requests=3, window_s=60, clock=clock)


def test_allows_up_to_max_then_rejects(limiter):
    decisions = [limiter.hit("1.2.3.4") for _ in range(4)]

    assert [d.allowed for d in decisions] == [True, True, True, False]
    assert [d.remaining for d in decisions] == [2, 1, 0, 0]
    assert all(d.limit == 3 for d in decisions)


def test_retry_after_counts_down_to_window_end(limiter, clock):
    for _ in range(3):
        limiter.hit("ip")
    clock.advance(20.5)
    decision = limiter.hit("ip")

    assert not decision.allowed
    assert decision.retry_after == 40


def test_window_resets_after_expiry(limiter, clock):
    for _ in range(4):
        limiter.hit("ip")
    clock.advance(60)

    decision = limiter.hit("ip")
    assert decision.allowed
    assert decision.remaining == 2


def test_keys_are_independent(limiter):
    for _ in range(4):
        limiter.hit("a")
    assert limiter.hit("b").allowed


def test_reset_forgets_all_clients(limiter):
    for _ in range(4):
        limiter.hit("a")
    limiter.reset()

    assert len(limiter) == 0
    assert limiter.hit("a").allowed


def test_expired_buckets_are_pruned_when_full(clock):
    limiter = FixedWindowRateLimiter(max_requests=1, window_s=10, clock=clock, max_keys=2)
    limiter.hit("a")
    limiter.hit("b")
    clock.advance(10)

    limiter.hit("c")
    assert len(limiter) == 1


@pytest.mark.parametrize("max_requests, window_s", [(0, 60), (10, 0)])
def test_invalid_configuration(max_requests, window_s):
    with pytest.raises(ValueError):
        FixedWindowRateLimiter(max_requests=max_requests, window_s=window_s)
