"""Service helpers for recipe creation, updates, visibility and likes."""

import logging

from django.db import transaction
from django.http import Http404
from rest_framework import exceptions

from recipes.models import Recipe, RecipeIngredient, RecipeStep
from recipes.models.ingredient import normalize_ingredient_name
from recipes.repos.like_repo import LikeRepo
from recipes.repos.recipe_repo import RecipeRepo
from .ingredients import IngredientService

logger = logging.getLogger(__name__)

SCALAR_FIELDS = ("title", "description", "cooking_time", "servings", "thumbnail_url")


def check_step_order(steps):
    """Reject step lists whose order_index values are not exactly 1..N."""
    indexes = [step["order_index"] for step in steps]
    if not indexes:
        raise exceptions.ValidationError({"steps": ["At least one step is required"]})
    if len(set(indexes)) != len(indexes):
        raise exceptions.ValidationError({"steps": ["Step order indexes must be unique"]})
    if sorted(indexes) != list(range(1, len(indexes) + 1)):
        raise exceptions.ValidationError(
            {"steps": ["Step order indexes must start at 1 and be contiguous"]}
        )


def check_distinct_ingredients(ingredients):
    """Reject ingredient lists naming the same ingredient twice."""
    if not ingredients:
        raise exceptions.ValidationError({"ingredients": ["At least one ingredient is required"]})
    seen = set()
    for item in ingredients:
        name = normalize_ingredient_name(item["name"])
        if not name:
            raise exceptions.ValidationError({"ingredients": ["Ingredient name may not be blank"]})
        if name in seen:
            raise exceptions.ValidationError({"ingredients": [f"Duplicate ingredient: {name}"]})
        seen.add(name)


class RecipeService:
    """Encapsulate recipe lifecycle and engagement operations."""

    def __init__(self, recipe_repo=None, like_repo=None, ingredient_service=None):
        self.recipes = recipe_repo or RecipeRepo()
        self.likes = like_repo or LikeRepo()
        self.ingredients = ingredient_service or IngredientService()

    # Visibility

    def can_view(self, user, recipe):
        """Published recipes are public; others only for author and moderators."""
        if recipe.is_published:
            return True
        if not user or not getattr(user, "is_authenticated", False):
            return False
        return recipe.is_owned_by(user) or user.is_moderator

    def fetch_visible(self, recipe_id, user=None):
        """Return the recipe detail when the user may see it, else 404."""
        recipe = self.recipes.detail(recipe_id)
        if recipe is None or not self.can_view(user, recipe):
            raise Http404("Recipe not found")
        return recipe

    def _fetch_owned(self, recipe_id, user):
        recipe = self.recipes.get_or_none(id=recipe_id)
        if recipe is None:
            raise Http404("Recipe not found")
        if not recipe.is_owned_by(user):
            raise exceptions.PermissionDenied("You have no right to perform this action")
        return recipe

    # Creation and updates

    def create(self, author, data):
        """Write the recipe, its steps and ingredient links atomically."""
        steps = data.get("steps") or []
        ingredients = data.get("ingredients") or []
        check_step_order(steps)
        check_distinct_ingredients(ingredients)

        with transaction.atomic():
            recipe = Recipe.objects.create(
                author=author,
                title=data["title"],
                description=data.get("description") or "",
                cooking_time=data["cooking_time"],
                servings=data["servings"],
                thumbnail_url=data["thumbnail_url"],
                status=Recipe.STATUS_DRAFT,
            )
            self._write_steps(recipe, steps)
            self._write_ingredients(recipe, ingredients)

        logger.info("Recipe %s created by user %s", recipe.pk, author.pk)
        return self.recipes.detail(recipe.pk)

    def update(self, recipe_id, user, data):
        """Owner-only update; steps/ingredients, when given, replace the old rows."""
        recipe = self._fetch_owned(recipe_id, user)
        steps = data.get("steps")
        ingredients = data.get("ingredients")
        if steps is not None:
            check_step_order(steps)
        if ingredients is not None:
            check_distinct_ingredients(ingredients)

        with transaction.atomic():
            changed = [field for field in SCALAR_FIELDS if field in data]
            for field in changed:
                setattr(recipe, field, data[field])
            if changed:
                recipe.save(update_fields=changed + ["updated_at"])
            if steps is not None:
                recipe.steps.all().delete()
                self._write_steps(recipe, steps)
            if ingredients is not None:
                recipe.recipe_ingredients.all().delete()
                self._write_ingredients(recipe, ingredients)

        logger.info("Recipe %s updated by user %s", recipe.pk, user.pk)
        return self.recipes.detail(recipe.pk)

    def _write_steps(self, recipe, steps):
        RecipeStep.objects.bulk_create([
            RecipeStep(
                recipe=recipe,
                order_index=step["order_index"],
                content=step["content"],
                image_url=step.get("image_url") or "",
            )
            for step in sorted(steps, key=lambda s: s["order_index"])
        ])

    def _write_ingredients(self, recipe, ingredients):
        for item in ingredients:
            ingredient, _ = self.ingredients.upsert_by_name(item["name"])
            RecipeIngredient.objects.create(
                recipe=recipe,
                ingredient=ingredient,
                quantity=item["quantity"],
                unit=item.get("unit") or "",
            )

    def delete(self, recipe_id, user):
        """Authors delete their own recipes; moderators may delete any."""
        recipe = self.recipes.get_or_none(id=recipe_id)
        if recipe is None:
            raise Http404("Recipe not found")
        if not (recipe.is_owned_by(user) or user.is_moderator):
            raise exceptions.PermissionDenied("You have no right to perform this action")
        recipe.delete()
        logger.info("Recipe %s deleted by user %s", recipe_id, user.pk)

    def submit(self, recipe_id, user):
        """Send a draft (or rejected) recipe to the moderation queue."""
        recipe = self._fetch_owned(recipe_id, user)
        if recipe.status not in (Recipe.STATUS_DRAFT, Recipe.STATUS_REJECTED):
            raise exceptions.ValidationError(
                {"status": [f"Cannot submit a recipe that is {recipe.status.lower()}"]}
            )
        recipe.status = Recipe.STATUS_PENDING
        recipe.rejection_reason = ""
        recipe.save(update_fields=["status", "rejection_reason", "updated_at"])
        logger.info("Recipe %s submitted for review", recipe.pk)
        return self.recipes.detail(recipe.pk)

    # Listing

    def list_published(self, search=None):
        return self.recipes.list_published(search=search)

    def list_for_author(self, author_id, viewer=None):
        is_owner = bool(viewer and getattr(viewer, "is_authenticated", False) and str(viewer.pk) == str(author_id))
        return self.recipes.list_for_author(author_id, include_unpublished=is_owner)

    def liked_by(self, user_id):
        return self.recipes.list_liked_by(user_id)

    # Likes

    def is_liked(self, user, recipe):
        if not user or not getattr(user, "is_authenticated", False):
            return False
        return self.likes.has_liked(user_id=user.pk, recipe_id=recipe.pk)

    def liked_ids(self, user, recipes):
        """Ids among `recipes` that the user has liked."""
        if not user or not getattr(user, "is_authenticated", False):
            return set()
        ids = [recipe.pk for recipe in recipes]
        return set(
            self.likes.list(filters={"user_id": user.pk, "recipe_id__in": ids}).values_list("recipe_id", flat=True)
        )

    def toggle_like(self, user, recipe_id):
        """Toggle like/unlike; return (is_liked, likes_count)."""
        recipe = self.fetch_visible(recipe_id, user)
        if self.likes.unlike(user_id=user.pk, recipe_id=recipe.pk):
            is_liked = False
        else:
            self.likes.like(user_id=user.pk, recipe_id=recipe.pk)
            is_liked = True
        return is_liked, self.likes.count_for(recipe.pk)

    def set_like(self, user, recipe_id, liked):
        """Idempotent like (liked=True) or unlike (liked=False)."""
        recipe = self.fetch_visible(recipe_id, user)
        if liked:
            self.likes.like(user_id=user.pk, recipe_id=recipe.pk)
        else:
            self.likes.unlike(user_id=user.pk, recipe_id=recipe.pk)
        return liked, self.likes.count_for(recipe.pk)
