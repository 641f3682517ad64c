from unittest.mock import MagicMock, patch

from django.test import SimpleTestCase
from redis.exceptions import ConnectionError as RedisConnectionError

from recipes.services.cache import CacheService, user_cache_key


class CacheServiceTests(SimpleTestCase):
    def setUp(self):
        self.cache = CacheService()
        self.cache.delete("test:key")

    def test_user_cache_key(self):
        self.assertEqual(user_cache_key("abc"), "user:abc")

    def test_round_trip_json(self):
        self.assertTrue(self.cache.set("test:key", {"a": [1, 2]}, ttl=30))
        self.assertEqual(self.cache.get("test:key"), {"a": [1, 2]})

    def test_miss_returns_none(self):
        self.assertIsNone(self.cache.get("test:missing"))

    def test_delete(self):
        self.cache.set("test:key", "value")
        self.cache.delete("test:key")
        self.assertIsNone(self.cache.get("test:key"))

    def test_redis_outage_behaves_like_miss(self):
        backend = MagicMock()
        backend.get.side_effect = RedisConnectionError("down")
        backend.set.side_effect = RedisConnectionError("down")
        backend.delete.side_effect = RedisConnectionError("down")
        with patch.object(CacheService, "backend", backend):
            with self.assertLogs("recipes.services.cache", level="WARNING"):
                self.assertIsNone(self.cache.get("test:key"))
            self.assertFalse(self.cache.set("test:key", 1))
            self.assertFalse(self.cache.delete("test:key"))
