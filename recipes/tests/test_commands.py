from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from recipes.models import Comment, Follow, Ingredient, Recipe, RecipeStep, User


class SeedCommandTests(TestCase):
    def test_seed_then_unseed(self):
        out = StringIO()
        call_command("seed", users=6, recipes_per_user=2, stdout=out)

        self.assertEqual(User.objects.count(), 6)
        self.assertEqual(User.objects.filter(role=User.ROLE_MODERATOR).count(), 1)
        self.assertTrue(User.objects.get(username="chef_moderator").is_moderator)
        self.assertTrue(Recipe.objects.exists())
        self.assertFalse(Recipe.objects.exclude(status=Recipe.STATUS_PUBLISHED).exists())
        self.assertTrue(Ingredient.objects.exists())
        self.assertTrue(Follow.objects.exists())
        for recipe in Recipe.objects.all():
            indexes = list(recipe.steps.values_list("order_index", flat=True))
            self.assertEqual(indexes, list(range(1, len(indexes) + 1)))
            self.assertGreater(recipe.recipe_ingredients.count(), 0)
        self.assertFalse(Comment.objects.filter(rating__gt=5).exists())
        self.assertIn("Seeding complete", out.getvalue())

        call_command("unseed", stdout=StringIO())
        self.assertFalse(User.objects.exists())
        self.assertFalse(Recipe.objects.exists())
        self.assertFalse(RecipeStep.objects.exists())
        self.assertFalse(Ingredient.objects.exists())

    def test_unseed_keeps_staff(self):
        User.objects.create_superuser("admin", email="admin@example.org", password="Password123")
        call_command("seed", users=3, recipes_per_user=1, stdout=StringIO())
        call_command("unseed", stdout=StringIO())
        self.assertEqual(list(User.objects.values_list("username", flat=True)), ["admin"])
