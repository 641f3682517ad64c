"""JSON cache wrapper over Django's default cache (Redis in production)."""

import json
import logging

from django.core.cache import caches
from django.core.serializers.json import DjangoJSONEncoder
from redis.exceptions import RedisError

logger = logging.getLogger(__name__)


def user_cache_key(user_id):
    return f"user:{user_id}"


class CacheService:
    """Get/set/delete JSON values by key with an optional TTL in seconds.

    The cache is never authoritative: when the Redis backend is unreachable
    the outage is logged and the call behaves like a miss.
    """

    def __init__(self, alias="default"):
        self.alias = alias

    @property
    def backend(self):
        return caches[self.alias]

    def get(self, key):
        """Return the decoded value for key, or None on a miss."""
        try:
            raw = self.backend.get(key)
        except RedisError as exc:
            logger.warning("Cache unavailable while reading %s: %s", key, exc)
            return None
        if raw is None:
            logger.debug("Cache miss: %s", key)
            return None
        logger.debug("Cache hit: %s", key)
        return json.loads(raw)

    def set(self, key, value, ttl=None):
        """Store value as JSON; ttl=None keeps it until deleted."""
        payload = json.dumps(value, cls=DjangoJSONEncoder)
        try:
            self.backend.set(key, payload, timeout=ttl)
        except RedisError as exc:
            logger.warning("Cache unavailable while writing %s: %s", key, exc)
            return False
        logger.debug("Cache key %s has been set", key)
        return True

    def delete(self, key):
        """Invalidate key."""
        try:
            self.backend.delete(key)
        except RedisError as exc:
            logger.warning("Cache unavailable while invalidating %s: %s", key, exc)
            return False
        logger.debug("Cache key %s invalidated", key)
        return True
