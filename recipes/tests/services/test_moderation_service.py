from django.http import Http404
from django.test import TestCase
from rest_framework import exceptions

from recipes.models import Recipe
from recipes.services.moderation import ModerationService
from recipes.tests.helpers import make_moderator, make_recipe, make_user


class ModerationServiceTests(TestCase):
    def setUp(self):
        self.moderator = make_moderator(username="moderator")
        self.service = ModerationService(self.moderator)
        self.author = make_user(username="author")
        self.pending = make_recipe(author=self.author, status=Recipe.STATUS_PENDING)

    def test_queue_lists_pending_only(self):
        make_recipe(author=self.author, status=Recipe.STATUS_DRAFT)
        self.assertEqual(list(self.service.queue()), [self.pending])

    def test_approve_publishes(self):
        recipe = self.service.approve(self.pending.pk)
        self.assertEqual(recipe.status, Recipe.STATUS_PUBLISHED)
        self.assertIsNotNone(recipe.published_at)

    def test_reject_stores_reason(self):
        recipe = self.service.reject(self.pending.pk, "Missing quantities")
        self.assertEqual(recipe.status, Recipe.STATUS_REJECTED)
        self.assertEqual(recipe.rejection_reason, "Missing quantities")

    def test_only_pending_recipes_can_be_reviewed(self):
        draft = make_recipe(author=self.author, status=Recipe.STATUS_DRAFT)
        with self.assertRaises(exceptions.ValidationError):
            self.service.approve(draft.pk)
        with self.assertRaises(exceptions.ValidationError):
            self.service.reject(draft.pk, "no")

    def test_missing_recipe(self):
        with self.assertRaises(Http404):
            self.service.approve(999999)

    def test_stats(self):
        make_recipe(author=self.author, status=Recipe.STATUS_PUBLISHED)
        make_user(is_active=False)
        self.assertEqual(
            self.service.stats(),
            {"pending": 1, "published": 1, "rejected": 0, "draft": 0, "banned_users": 1},
        )

    def test_ban_and_unban(self):
        user = self.service.set_active(self.author.pk, False)
        self.assertFalse(user.is_active)
        self.author.refresh_from_db()
        self.assertFalse(self.author.is_active)
        self.service.set_active(self.author.pk, True)
        self.author.refresh_from_db()
        self.assertTrue(self.author.is_active)

    def test_cannot_ban_self(self):
        with self.assertRaises(exceptions.ValidationError):
            self.service.set_active(self.moderator.pk, False)

    def test_cannot_ban_other_moderators(self):
        other = make_moderator()
        with self.assertRaises(exceptions.PermissionDenied):
            self.service.set_active(other.pk, False)
