from unittest.mock import MagicMock

from django.conf import settings
from django.http import Http404
from django.test import TestCase
from rest_framework import exceptions

from recipes.models import Follow
from recipes.services.cache import CacheService, user_cache_key
from recipes.services.users import UserService, public_user_payload
from recipes.tests.helpers import make_user


class UserServiceTests(TestCase):
    def setUp(self):
        self.service = UserService()
        self.alice = make_user(username="alice", avatar_url="https://example.org/a.png")
        self.bob = make_user(username="bob")
        CacheService().delete(user_cache_key(self.alice.pk))

    def test_public_payload_is_json_safe(self):
        payload = public_user_payload(self.alice)
        self.assertEqual(payload["id"], str(self.alice.pk))
        self.assertEqual(payload["avatar_url"], "https://example.org/a.png")
        self.assertNotIn("email", payload)

    def test_find_one_populates_and_reads_cache(self):
        cache = MagicMock()
        cache.get.return_value = None
        service = UserService(cache=cache)

        payload = service.find_one(self.alice.pk)

        self.assertEqual(payload["username"], "alice")
        cache.set.assert_called_once_with(
            user_cache_key(self.alice.pk), payload, ttl=settings.USER_CACHE_TTL
        )

        cache.get.return_value = {"username": "cached"}
        self.assertEqual(service.find_one(self.alice.pk), {"username": "cached"})
        self.assertEqual(cache.set.call_count, 1)

    def test_find_one_missing_user(self):
        with self.assertRaises(Http404):
            self.service.find_one("00000000-0000-0000-0000-000000000000")

    def test_saving_user_invalidates_cache(self):
        self.service.find_one(self.alice.pk)
        self.alice.bio = "changed"
        self.alice.save()
        self.assertEqual(self.service.find_one(self.alice.pk)["bio"], "changed")

    def test_search_excludes_current_user(self):
        self.assertEqual(list(self.service.search(current_user=self.alice)), [self.bob])

    def test_public_profile(self):
        Follow.objects.create(follower=self.bob, following=self.alice)
        profile, is_followed = self.service.public_profile(self.alice.pk, self.bob)
        self.assertEqual(profile.followers_count, 1)
        self.assertTrue(is_followed)
        _, is_followed = self.service.public_profile(self.alice.pk, None)
        self.assertFalse(is_followed)

    def test_update_own_profile(self):
        profile = self.service.update(self.alice.pk, self.alice, {"bio": "Baker"})
        self.assertEqual(profile.bio, "Baker")

    def test_update_someone_else_is_forbidden(self):
        with self.assertRaises(exceptions.PermissionDenied):
            self.service.update(self.alice.pk, self.bob, {"bio": "hacked"})

    def test_followers_and_following(self):
        Follow.objects.create(follower=self.bob, following=self.alice)
        self.assertEqual([row.follower for row in self.service.followers(self.alice.pk)], [self.bob])
        self.assertEqual([row.following for row in self.service.following(self.bob.pk)], [self.alice])
        self.assertEqual(self.service.followed_by_viewer(self.bob, [self.alice]), {self.alice.pk})
