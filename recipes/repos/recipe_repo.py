"""Repository helpers for fetching recipes."""

from typing import Dict, Optional

from django.db.models import Avg, Count, Q, QuerySet

from recipes.db_accessor import DB_Accessor
from recipes.models import Like, Recipe


class RecipeRepo(DB_Accessor):
    """Repository for Recipe queries (feed, per-author, moderation queue)."""
    def __init__(self) -> None:
        """Initialise with the Recipe model."""
        super().__init__(Recipe)

    def queryset(self) -> QuerySet:
        return (
            self.model.objects.select_related("author")
            .annotate(
                likes_count=Count("likes", distinct=True),
                comments_count=Count("comments", distinct=True),
                average_rating=Avg("comments__rating"),
            )
        )

    def detail(self, recipe_id) -> Optional[Recipe]:
        """Recipe with counters, steps and ingredient links preloaded."""
        return (
            self.queryset()
            .prefetch_related("steps", "recipe_ingredients__ingredient")
            .filter(id=recipe_id)
            .first()
        )

    def list_published(self, *, search: Optional[str] = None) -> QuerySet:
        """Published recipes, newest first, optionally searched."""
        qs = self.queryset().filter(status=Recipe.STATUS_PUBLISHED)
        if search:
            term = search.strip()
            matching_ids = self.model.objects.filter(
                Q(title__icontains=term)
                | Q(description__icontains=term)
                | Q(recipe_ingredients__ingredient__name__icontains=term)
            ).values("id")
            qs = qs.filter(id__in=matching_ids)
        return qs.order_by("-published_at", "-created_at", "-id")

    def list_for_author(self, author_id, *, include_unpublished: bool = False) -> QuerySet:
        """Recipes authored by a given user."""
        qs = self.queryset().filter(author_id=author_id)
        if not include_unpublished:
            qs = qs.filter(status=Recipe.STATUS_PUBLISHED)
        return qs.order_by("-created_at", "-id")

    def list_liked_by(self, user_id) -> QuerySet:
        """Published recipes liked by user_id."""
        liked = Like.objects.filter(user_id=user_id).values("recipe_id")
        return (
            self.queryset()
            .filter(id__in=liked, status=Recipe.STATUS_PUBLISHED)
            .order_by("-created_at", "-id")
        )

    def pending_queue(self) -> QuerySet:
        """Recipes waiting for review, oldest submission first."""
        return self.queryset().filter(status=Recipe.STATUS_PENDING).order_by("updated_at", "id")

    def status_counts(self) -> Dict[str, int]:
        """Number of recipes in each status (zero-filled)."""
        counts = {status: 0 for status, _ in Recipe.STATUS_CHOICES}
        rows = self.model.objects.values("status").annotate(total=Count("id")).order_by()
        for row in rows:
            counts[row["status"]] = row["total"]
        return counts
