"""Model representing a user's like (favorite) on a recipe."""

from django.conf import settings
from django.db import models
from .recipe import Recipe


class Like(models.Model):
    """User like on a recipe."""
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        db_column='user_id',
        related_name='likes'
    )

    recipe = models.ForeignKey(
        Recipe,
        on_delete=models.CASCADE,
        db_column='recipe_id',
        related_name='likes'
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Enforce one like per user/recipe pair."""
        db_table = "like"
        constraints = [
            models.UniqueConstraint(fields=["user", "recipe"], name="uniq_like_user_recipe"),
        ]

    def __str__(self):
        """Readable representation for admin/debugging."""
        return f"{self.user_id} -> {self.recipe_id}"
