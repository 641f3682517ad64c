from django.core.exceptions import ValidationError
from django.test import TestCase

from recipes.models import Comment, Like, Recipe, RecipeIngredient, RecipeStep
from recipes.tests.helpers import make_recipe, make_user


class RecipeModelTestCase(TestCase):
    def setUp(self):
        self.author = make_user(username="author")
        self.recipe = make_recipe(author=self.author, status=Recipe.STATUS_DRAFT)

    def test_new_recipe_defaults_to_draft(self):
        recipe = Recipe.objects.create(
            author=self.author,
            title="Soup",
            cooking_time=10,
            servings=1,
            thumbnail_url="https://example.org/soup.jpg",
        )
        self.assertEqual(recipe.status, Recipe.STATUS_DRAFT)
        self.assertFalse(recipe.is_published)
        self.assertIsNone(recipe.published_at)

    def test_is_owned_by(self):
        self.assertTrue(self.recipe.is_owned_by(self.author))
        self.assertFalse(self.recipe.is_owned_by(make_user()))
        self.assertFalse(self.recipe.is_owned_by(None))

    def test_str_is_title(self):
        self.assertEqual(str(self.recipe), "test recipe")

    def test_status_must_be_a_known_choice(self):
        self.recipe.status = "ARCHIVED"
        with self.assertRaises(ValidationError):
            self.recipe.full_clean()

    def test_ingredients_are_reachable_through_links(self):
        self.assertEqual(list(self.recipe.ingredients.values_list("name", flat=True)), ["salt"])

    def test_delete_cascades_to_children(self):
        Like.objects.create(user=self.author, recipe=self.recipe)
        Comment.objects.create(recipe=self.recipe, user=self.author, rating=4)
        self.recipe.delete()
        self.assertFalse(RecipeStep.objects.exists())
        self.assertFalse(RecipeIngredient.objects.exists())
        self.assertFalse(Like.objects.exists())
        self.assertFalse(Comment.objects.exists())

    def test_deleting_author_deletes_recipes(self):
        self.author.delete()
        self.assertFalse(Recipe.objects.exists())
