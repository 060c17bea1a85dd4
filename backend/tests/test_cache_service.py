"""Unit tests for the weekly events cache."""

from datetime import date
from unittest.mock import AsyncMock, patch

import pytest

from app.config import settings
from app.services.cache_service import CacheService

WEEK = date(2026, 10, 19)
FP = "abc123"


@pytest.fixture
def redis_mock():
    r = AsyncMock()
    r.get.return_value = None
    return r


@pytest.fixture
def cache(redis_mock):
    service = CacheService()
    service._redis = redis_mock
    return service


class TestWeekEvents:
    def test_key(self, cache):
        assert cache.week_events_key("fam-1", WEEK, FP) == "events:fam-1:2026-10-19:abc123"

    @pytest.mark.asyncio
    async def test_set_uses_ttl(self, cache, redis_mock):
        assert await cache.set_week_events("fam-1", WEEK, FP, [{"event_name": "A"}])
        redis_mock.set.assert_awaited_once_with(
            "events:fam-1:2026-10-19:abc123",
            '[{"event_name": "A"}]',
            ex=settings.event_cache_ttl_hours * 3600,
        )

    @pytest.mark.asyncio
    async def test_get_hit(self, cache, redis_mock):
        redis_mock.get.return_value = '[{"event_name": "A"}]'
        assert await cache.get_week_events("fam-1", WEEK, FP) == [{"event_name": "A"}]

    @pytest.mark.asyncio
    async def test_get_miss(self, cache):
        assert await cache.get_week_events("fam-1", WEEK, FP) is None

    @pytest.mark.asyncio
    async def test_redis_errors_are_misses(self, cache, redis_mock):
        redis_mock.get.side_effect = ConnectionError("down")
        redis_mock.set.side_effect = ConnectionError("down")
        assert await cache.get_week_events("fam-1", WEEK, FP) is None
        assert await cache.set_week_events("fam-1", WEEK, FP, []) is False

    @pytest.mark.asyncio
    async def test_unreachable_redis_disables_cache(self):
        broken = AsyncMock()
        broken.ping.side_effect = ConnectionError("refused")
        with patch("app.services.cache_service.redis.from_url", return_value=broken):
            service = CacheService()
            assert await service.get_week_events("fam-1", WEEK, FP) is None
            assert await service.clear_week_events("fam-1", WEEK, FP) is False


class TestDiscoveryFingerprint:
    def test_stable_for_same_inputs(self):
        a = CacheService.discovery_fingerprint("Ancient Rome", 39.78, -89.65, 25.0)
        b = CacheService.discovery_fingerprint("  ancient rome ", 39.78, -89.65, 25)
        assert a == b
        assert len(a) == 12

    @pytest.mark.parametrize("theme,lat,lng,radius", [
        ("Ocean Tides", 39.78, -89.65, 25.0),
        ("Ancient Rome", 50.0, -89.65, 25.0),
        ("Ancient Rome", 39.78, -90.0, 25.0),
        ("Ancient Rome", 39.78, -89.65, 50.0),
    ])
    def test_changes_with_any_input(self, theme, lat, lng, radius):
        base = CacheService.discovery_fingerprint("Ancient Rome", 39.78, -89.65, 25.0)
        assert CacheService.discovery_fingerprint(theme, lat, lng, radius) != base
