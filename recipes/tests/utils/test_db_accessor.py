from django.core.exceptions import ObjectDoesNotExist
from django.test import TestCase

from recipes.db_accessor import DB_Accessor
from recipes.models import Ingredient


class DBAccessorTests(TestCase):

    def setUp(self):
        self.soup = Ingredient.objects.create(name="soup stock")
        self.cake = Ingredient.objects.create(name="cake flour")
        self.repo = DB_Accessor(Ingredient)

    # ---------- list() ----------

    def test_list_default_returns_queryset(self):
        qs = self.repo.list()
        self.assertEqual(qs.count(), 2)

    def test_list_filters(self):
        qs = self.repo.list(filters={"name": "soup stock"})
        self.assertEqual(qs.count(), 1)
        self.assertEqual(qs.first(), self.soup)

    def test_list_order_by(self):
        qs = self.repo.list(order_by=["-name"])
        self.assertEqual(list(qs.values_list("name", flat=True)), ["soup stock", "cake flour"])

    def test_list_limit_and_offset(self):
        self.assertEqual(len(self.repo.list(order_by=["name"], limit=1)), 1)
        self.assertEqual(list(self.repo.list(order_by=["name"], limit=1, offset=1)), [self.soup])

    def test_list_negative_offset_is_clamped(self):
        self.assertEqual(list(self.repo.list(order_by=["name"], offset=-5, limit=1)), [self.cake])

    def test_list_as_dict(self):
        rows = self.repo.list(filters={"name": "cake flour"}, as_dict=True)
        self.assertEqual(rows, [{"id": self.cake.id, "name": "cake flour"}])

    # ---------- single objects ----------

    def test_get_and_get_or_none(self):
        self.assertEqual(self.repo.get(id=self.soup.id), self.soup)
        self.assertIsNone(self.repo.get_or_none(name="missing"))
        with self.assertRaises(ObjectDoesNotExist):
            self.repo.get(name="missing")

    def test_exists_and_count(self):
        self.assertTrue(self.repo.exists(name="soup stock"))
        self.assertEqual(self.repo.count(), 2)

    # ---------- writes ----------

    def test_create_update_delete(self):
        obj = self.repo.create(name="salt")
        self.assertEqual(self.repo.update({"id": obj.id}, name="sea salt"), 1)
        self.assertEqual(Ingredient.objects.get(id=obj.id).name, "sea salt")
        self.assertEqual(self.repo.delete(id=obj.id), 1)
        self.assertFalse(Ingredient.objects.filter(id=obj.id).exists())
