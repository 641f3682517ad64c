from decimal import Decimal

from django.db import IntegrityError
from django.test import SimpleTestCase, TestCase

from recipes.models import Ingredient, RecipeIngredient
from recipes.models.ingredient import normalize_ingredient_name
from recipes.tests.helpers import make_recipe


class NormalizeIngredientNameTests(SimpleTestCase):
    def test_trims_collapses_and_lowercases(self):
        self.assertEqual(normalize_ingredient_name("  Cherry   TOMATOES "), "cherry tomatoes")

    def test_blank_becomes_empty(self):
        self.assertEqual(normalize_ingredient_name("   "), "")


class IngredientModelTestCase(TestCase):
    def test_save_normalizes_name(self):
        ingredient = Ingredient.objects.create(name="  Olive   Oil")
        self.assertEqual(ingredient.name, "olive oil")

    def test_normalized_names_are_unique(self):
        Ingredient.objects.create(name="Garlic")
        with self.assertRaises(IntegrityError):
            Ingredient.objects.create(name=" garlic ")


class RecipeIngredientModelTestCase(TestCase):
    def setUp(self):
        self.recipe = make_recipe(ingredients=())
        self.ingredient = Ingredient.objects.create(name="flour")

    def test_quantity_must_be_positive(self):
        with self.assertRaises(IntegrityError):
            RecipeIngredient.objects.create(
                recipe=self.recipe, ingredient=self.ingredient, quantity=Decimal("0"), unit="g"
            )

    def test_ingredient_linked_once_per_recipe(self):
        RecipeIngredient.objects.create(
            recipe=self.recipe, ingredient=self.ingredient, quantity=Decimal("1"), unit="g"
        )
        with self.assertRaises(IntegrityError):
            RecipeIngredient.objects.create(
                recipe=self.recipe, ingredient=self.ingredient, quantity=Decimal("2"), unit="g"
            )
