from django.contrib.admin.sites import AdminSite
from django.test import RequestFactory, TestCase

from recipes.admin import CommentAdmin, RecipeAdmin, UserAdmin
from recipes.models import Comment, Recipe, User
from recipes.tests.helpers import make_moderator, make_recipe, make_user


class RecipeAdminTests(TestCase):
    def setUp(self):
        self.admin = RecipeAdmin(Recipe, AdminSite())
        self.request = RequestFactory().get("/admin/")
        self.pending = make_recipe(status=Recipe.STATUS_PENDING)
        self.draft = make_recipe(status=Recipe.STATUS_DRAFT)

    def test_publish_only_touches_pending(self):
        self.admin.publish_recipes(self.request, Recipe.objects.all())
        self.pending.refresh_from_db()
        self.draft.refresh_from_db()
        self.assertEqual(self.pending.status, Recipe.STATUS_PUBLISHED)
        self.assertIsNotNone(self.pending.published_at)
        self.assertEqual(self.draft.status, Recipe.STATUS_DRAFT)

    def test_reject(self):
        self.admin.reject_recipes(self.request, Recipe.objects.all())
        self.pending.refresh_from_db()
        self.assertEqual(self.pending.status, Recipe.STATUS_REJECTED)
        self.assertTrue(self.pending.rejection_reason)


class UserAdminTests(TestCase):
    def setUp(self):
        self.admin = UserAdmin(User, AdminSite())
        self.request = RequestFactory().get("/admin/")

    def test_ban_skips_moderators(self):
        user = make_user()
        moderator = make_moderator()
        self.admin.ban_users(self.request, User.objects.all())
        user.refresh_from_db()
        moderator.refresh_from_db()
        self.assertFalse(user.is_active)
        self.assertTrue(moderator.is_active)

        self.admin.unban_users(self.request, User.objects.all())
        user.refresh_from_db()
        self.assertTrue(user.is_active)


class CommentAdminTests(TestCase):
    def test_short_content(self):
        admin = CommentAdmin(Comment, AdminSite())
        comment = Comment(content="x" * 60, rating=3)
        self.assertEqual(admin.short_content(comment), "x" * 50 + "...")
        self.assertEqual(admin.short_content(Comment(content="short", rating=1)), "short")
