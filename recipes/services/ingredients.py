"""Service helpers for the shared ingredient catalogue."""

import logging

from django.shortcuts import get_object_or_404
from rest_framework import exceptions

from recipes.models import Ingredient
from recipes.models.ingredient import normalize_ingredient_name

logger = logging.getLogger(__name__)


class IngredientService:
    """Look up and upsert ingredients by normalized name."""

    def list(self, search=None):
        qs = Ingredient.objects.all()
        if search:
            qs = qs.filter(name__icontains=normalize_ingredient_name(search))
        return qs.order_by("name")

    def fetch(self, ingredient_id):
        """Fetch an ingredient by id or raise 404."""
        return get_object_or_404(Ingredient, id=ingredient_id)

    def find_by_name(self, name):
        return Ingredient.objects.filter(name=normalize_ingredient_name(name)).first()

    def upsert_by_name(self, name):
        """Return (ingredient, created); at most one row per normalized name."""
        clean_name = normalize_ingredient_name(name)
        if not clean_name:
            raise exceptions.ValidationError({"name": ["Ingredient name may not be blank."]})
        ingredient, created = Ingredient.objects.get_or_create(name=clean_name)
        if created:
            logger.info("Ingredient %r added to catalogue", clean_name)
        return ingredient, created
