"""Model for user comments and ratings on recipes."""

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from .recipe import Recipe


class Comment(models.Model):
    """User-authored comment with a 0-5 rating on a recipe."""
    recipe = models.ForeignKey(
        Recipe,
        on_delete=models.CASCADE,
        db_column='recipe_id',
        related_name='comments'
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        db_column='user_id',
        related_name='comments'
    )

    content = models.TextField(max_length=2000, blank=True, default="")
    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(0), MaxValueValidator(5)]
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """DB table name and rating bounds for comments."""
        db_table = "comment"
        ordering = ["-created_at", "-id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(rating__gte=0, rating__lte=5),
                name="comment_rating_0_5",
            ),
        ]

    def __str__(self):
        """Readable identifier for admin/debugging."""
        return f"Comment by {self.user_id} on {self.recipe_id}"
