"""Helper utilities for assembling seed data objects without hitting the DB too often."""

import re
from decimal import Decimal
from random import choice, randint, sample
from typing import Dict, List

from django.utils import timezone

from recipes.models import Recipe, RecipeIngredient, RecipeStep
from .seed_data import BASE_INGREDIENT_POOL, units


class SeedHelpers:
    """Non-DB helpers that create model instances for bulk seeding."""

    def _build_recipe(self, author_id, thumbnail_pool: List[str]) -> Recipe:
        """Construct an unsaved published Recipe with randomized fields."""
        return Recipe(
            author_id=author_id,
            title=self.faker.sentence(nb_words=5).rstrip(".")[:255],
            description=self.faker.paragraph(nb_sentences=3)[:4000],
            cooking_time=randint(5, 120),
            servings=choice([1, 2, 4, 6, 8]),
            thumbnail_url=choice(thumbnail_pool),
            status=Recipe.STATUS_PUBLISHED,
            published_at=timezone.now(),
        )

    def _build_steps(self, recipe_id, *, min_steps: int, max_steps: int) -> List[RecipeStep]:
        """Steps numbered 1..N for one recipe."""
        return [
            RecipeStep(
                recipe_id=recipe_id,
                order_index=position,
                content=self.faker.sentence(nb_words=12)[:2000],
            )
            for position in range(1, randint(min_steps, max_steps) + 1)
        ]

    def _build_ingredient_links(self, recipe_id, ingredient_ids: Dict[str, int]) -> List[RecipeIngredient]:
        """Link a recipe to a handful of distinct catalogue ingredients."""
        names = sample(list(ingredient_ids), k=min(randint(3, 7), len(ingredient_ids)))
        return [
            RecipeIngredient(
                recipe_id=recipe_id,
                ingredient_id=ingredient_ids[name],
                quantity=Decimal(randint(1, 500)),
                unit=choice(units),
            )
            for name in names
        ]


def ingredient_pool() -> List[str]:
    return list(BASE_INGREDIENT_POOL)


def _slug(value):
    return re.sub(r"[^a-z0-9]", "", value.lower())


def create_username(first_name, last_name):
    """Build a simple lowercase username from a name."""
    return f"{_slug(first_name)}_{_slug(last_name)}"[:30]


def create_email(first_name, last_name):
    """Build a deterministic email for seeded users."""
    return f"{_slug(first_name)}.{_slug(last_name)}@example.org"
