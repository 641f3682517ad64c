from django.http import Http404
from django.test import TestCase
from rest_framework import exceptions

from recipes.models import Ingredient
from recipes.services.ingredients import IngredientService


class IngredientServiceTests(TestCase):
    def setUp(self):
        self.service = IngredientService()

    def test_upsert_is_idempotent_by_normalized_name(self):
        first, created = self.service.upsert_by_name("Red  Onion")
        self.assertTrue(created)
        second, created = self.service.upsert_by_name("  red onion ")
        self.assertFalse(created)
        self.assertEqual(first.pk, second.pk)
        self.assertEqual(Ingredient.objects.count(), 1)

    def test_upsert_blank_name(self):
        with self.assertRaises(exceptions.ValidationError):
            self.service.upsert_by_name("   ")

    def test_list_search_and_order(self):
        for name in ("tomato", "cherry tomato", "basil"):
            Ingredient.objects.create(name=name)
        self.assertEqual(
            list(self.service.list().values_list("name", flat=True)),
            ["basil", "cherry tomato", "tomato"],
        )
        self.assertEqual(
            list(self.service.list(search="TOMATO").values_list("name", flat=True)),
            ["cherry tomato", "tomato"],
        )

    def test_find_by_name_and_fetch(self):
        ingredient = Ingredient.objects.create(name="basil")
        self.assertEqual(self.service.find_by_name(" Basil"), ingredient)
        self.assertEqual(self.service.fetch(ingredient.pk), ingredient)
        with self.assertRaises(Http404):
            self.service.fetch(999999)
