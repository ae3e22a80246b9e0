"""
Test suite for TTLCache.

System role: Verification of exchange rate cache expiry
"""

import pytest

from tutorschool.core.cache import TTLCache


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> TTLCache:
    return TTLCache(ttl_seconds=60, clock=clock)


class TestTTLCache:
    """Test suite for TTLCache."""

    def test_get_should_return_none_for_missing_key(self, cache: TTLCache) -> None:
        assert cache.get("USD") is None

    def test_get_should_return_value_within_ttl(self, cache: TTLCache, clock: FakeClock) -> None:
        cache.set("USD", {"EUR": 0.9})
        clock.now = 59.9

        assert cache.get("USD") == {"EUR": 0.9}
        assert "USD" in cache

    def test_get_should_expire_entry_at_ttl(self, cache: TTLCache, clock: FakeClock) -> None:
        # Arrange
        cache.set("USD", {"EUR": 0.9})

        # Act
        clock.now = 60

        # Assert
        assert cache.get("USD") is None
        assert len(cache) == 0

    def test_set_should_restart_lifetime(self, cache: TTLCache, clock: FakeClock) -> None:
        cache.set("USD", 1)
        clock.now = 50
        cache.set("USD", 2)
        clock.now = 100

        assert cache.get("USD") == 2

    def test_invalidate_and_clear(self, cache: TTLCache) -> None:
        cache.set("USD", 1)
        cache.set("EUR", 2)

        cache.invalidate("USD")
        cache.invalidate("missing")
        assert cache.get("USD") is None
        assert len(cache) == 1

        cache.clear()
        assert len(cache) == 0

    @pytest.mark.parametrize("ttl", [0, -1])
    def test_init_should_reject_non_positive_ttl(self, ttl: float) -> None:
        with pytest.raises(ValueError):
            TTLCache(ttl_seconds=ttl)
