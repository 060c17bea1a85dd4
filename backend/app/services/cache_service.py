"""Redis cache for discovered weekly events."""

import hashlib
import json
import logging
from datetime import date
from typing import Any

import redis.asyncio as redis

from app.config import settings

logger = logging.getLogger(__name__)


class CacheService:
    """Redis-backed JSON cache. Unavailable Redis means every lookup misses."""

    def __init__(self):
        self._redis: redis.Redis | None = None

    async def _get_redis(self) -> redis.Redis | None:
        if self._redis is None:
            try:
                self._redis = redis.from_url(
                    settings.redis_url,
                    encoding="utf-8",
                    decode_responses=True,
                )
                await self._redis.ping()
            except Exception as e:
                logger.warning(f"Redis unavailable, cache disabled: {e}")
                self._redis = None
                return None
        return self._redis

    async def get(self, key: str) -> Any | None:
        """Get a value from cache. Returns None on miss or error."""
        try:
            r = await self._get_redis()
            if r is None:
                return None
            raw = await r.get(key)
            if raw is None:
                return None
            return json.loads(raw)
        except Exception:
            return None

    async def set(self, key: str, value: Any, ttl: int) -> bool:
        """Set a value in cache with TTL. Returns False on error."""
        try:
            r = await self._get_redis()
            if r is None:
                return False
            await r.set(key, json.dumps(value, default=str), ex=ttl)
            return True
        except Exception:
            return False

    async def delete(self, key: str) -> bool:
        try:
            r = await self._get_redis()
            if r is None:
                return False
            await r.delete(key)
            return True
        except Exception:
            return False

    # Weekly events

    @staticmethod
    def discovery_fingerprint(theme: str, latitude: float, longitude: float, radius_km: float) -> str:
        """Short hash of the inputs that shape a week's discovery results."""
        raw = f"{theme.strip().lower()}|{latitude:.5f}|{longitude:.5f}|{radius_km:.3f}"
        return hashlib.md5(raw.encode()).hexdigest()[:12]

    def week_events_key(self, family_id: str, week_start: date, fingerprint: str) -> str:
        return f"events:{family_id}:{week_start.isoformat()}:{fingerprint}"

    async def get_week_events(
        self, family_id: str, week_start: date, fingerprint: str
    ) -> list[dict] | None:
        return await self.get(self.week_events_key(family_id, week_start, fingerprint))

    async def set_week_events(
        self, family_id: str, week_start: date, fingerprint: str, events: list[dict]
    ) -> bool:
        ttl = settings.event_cache_ttl_hours * 60 * 60
        return await self.set(self.week_events_key(family_id, week_start, fingerprint), events, ttl)

    async def clear_week_events(self, family_id: str, week_start: date, fingerprint: str) -> bool:
        return await self.delete(self.week_events_key(family_id, week_start, fingerprint))

    async def close(self):
        if self._redis is not None:
            await self._redis.aclose()
            self._redis = None


cache_service = CacheService()
