"""Unit tests for RateLimiter."""

from concurrent.futures import ThreadPoolExecutor

from margin.domain.service import RateLimiter


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class TestRateLimiter:
    """Tests for the fixed-window rate limiter."""

    def test_first_request_is_admitted(self):
        limiter = RateLimiter(window_seconds=60, clock=FakeClock())

        assert limiter.admit("1.2.3.4", limit=1) is True

    def test_second_request_in_window_is_refused(self):
        # Arrange
        limiter = RateLimiter(window_seconds=60, clock=FakeClock())
        limiter.admit("1.2.3.4", limit=1)

        # Act / Assert
        assert limiter.admit("1.2.3.4", limit=1) is False

    def test_clients_are_counted_separately(self):
        limiter = RateLimiter(window_seconds=60, clock=FakeClock())
        limiter.admit("1.2.3.4", limit=1)

        assert limiter.admit("5.6.7.8", limit=1) is True

    def test_admits_up_to_limit(self):
        limiter = RateLimiter(window_seconds=60, clock=FakeClock())

        results = [limiter.admit("1.2.3.4", limit=3) for _ in range(4)]

        assert results == [True, True, True, False]

    def test_window_expiry_admits_again(self):
        # Arrange
        clock = FakeClock()
        limiter = RateLimiter(window_seconds=60, clock=clock)
        limiter.admit("1.2.3.4", limit=1)

        # Act
        clock.now += 60

        # Assert
        assert limiter.admit("1.2.3.4", limit=1) is True

    def test_window_does_not_slide_on_refusals(self):
        """Refused requests must not extend the window."""
        clock = FakeClock()
        limiter = RateLimiter(window_seconds=60, clock=clock)
        limiter.admit("1.2.3.4", limit=1)

        clock.now += 59
        assert limiter.admit("1.2.3.4", limit=1) is False
        clock.now += 1
        assert limiter.admit("1.2.3.4", limit=1) is True

    def test_expired_windows_are_pruned(self):
        clock = FakeClock()
        limiter = RateLimiter(window_seconds=60, clock=clock)
        limiter.admit("1.2.3.4", limit=1)
        limiter.admit("5.6.7.8", limit=1)
        assert limiter.tracked_clients() == 2

        clock.now += 120

        assert limiter.tracked_clients() == 0

    def test_concurrent_requests_admit_exactly_limit(self):
        """Simultaneous requests from one client never both pass."""
        limiter = RateLimiter(window_seconds=60)

        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(lambda _: limiter.admit("9.9.9.9", 1), range(64)))

        assert results.count(True) == 1
