"""
Redis caching service for the current event.

CACHING STRATEGY
================

What we cache:
  - The public event details response (JSON-serialized)
  - Cache key: "event:current"

Why:
  - GET /event is hit on every page load, before sign-in
  - The row practically never changes during the registration window

Invalidation strategy:
  - TTL-based expiry only (REDIS_CACHE_TTL). Events are managed out of band,
    so a stale read lasts at most one TTL.

What is NOT cached:
  - Hotels, rooms and bookings. Room occupancy must be read live or the
    capacity check would accept bookings against stale counts.

Redis is advisory: any Redis failure is logged and treated as a cache miss.
"""

import json
from typing import Optional

import redis.asyncio as redis
from eventstay.core.config import get_settings
from eventstay.core.logging import get_logger
from eventstay.core.metrics import record_cache_operation

logger = get_logger(__name__)
settings = get_settings()

CURRENT_EVENT_KEY = "event:current"

_redis_client: Optional[redis.Redis] = None


async def get_redis() -> Optional[redis.Redis]:
    """Get or create Redis connection. Returns None if Redis is disabled or down."""
    global _redis_client

    if not settings.REDIS_ENABLED:
        return None

    if _redis_client is None:
        try:
            _redis_client = redis.from_url(
                settings.REDIS_URL,
                encoding="utf-8",
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=5,
                retry_on_timeout=True,
            )
            await _redis_client.ping()
            logger.info("redis_connected", url=settings.REDIS_URL)
        except Exception as e:
            logger.error("redis_connection_failed", error=str(e))
            _redis_client = None
            return None

    return _redis_client


async def close_redis() -> None:
    """Close Redis connection on shutdown."""
    global _redis_client
    if _redis_client:
        await _redis_client.aclose()
        _redis_client = None


async def get_cached_event() -> Optional[dict]:
    client = await get_redis()
    if not client:
        return None

    try:
        data = await client.get(CURRENT_EVENT_KEY)
        record_cache_operation("get", hit=data is not None)
        if data:
            logger.debug("cache_hit", key=CURRENT_EVENT_KEY)
            return json.loads(data)
        logger.debug("cache_miss", key=CURRENT_EVENT_KEY)
    except Exception as e:
        logger.error("cache_get_error", key=CURRENT_EVENT_KEY, error=str(e))

    return None


async def set_cached_event(data: dict) -> None:
    client = await get_redis()
    if not client:
        return

    try:
        await client.setex(CURRENT_EVENT_KEY, settings.REDIS_CACHE_TTL, json.dumps(data, default=str))
        logger.debug("cache_set", key=CURRENT_EVENT_KEY, ttl=settings.REDIS_CACHE_TTL)
    except Exception as e:
        logger.error("cache_set_error", key=CURRENT_EVENT_KEY, error=str(e))


async def get_cache_stats() -> dict:
    """Get Redis cache statistics for monitoring."""
    client = await get_redis()
    if not client:
        return {"status": "disabled"}

    try:
        info = await client.info("stats")
        hits = info.get("keyspace_hits", 0)
        misses = info.get("keyspace_misses", 0)
        return {
            "status": "connected",
            "hits": hits,
            "misses": misses,
            "hit_rate": round(hits / max(hits + misses, 1) * 100, 2),
        }
    except Exception as e:
        return {"status": "error", "error": str(e)}
