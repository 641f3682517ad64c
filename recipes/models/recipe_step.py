"""Model representing an individual recipe step with ordering."""

from django.db import models
from .recipe import Recipe


class RecipeStep(models.Model):
    """Ordered instruction step for a recipe."""
    recipe = models.ForeignKey(
        Recipe,
        on_delete=models.CASCADE,
        db_column='recipe_id',
        related_name='steps'
    )

    # 1-based position within the recipe
    order_index = models.PositiveIntegerField()

    content = models.TextField(max_length=2000)
    image_url = models.URLField(max_length=500, blank=True, default="")

    class Meta:
        """Uniqueness and ordering constraints for steps."""
        db_table = "step"
        ordering = ["order_index"]
        constraints = [
            models.UniqueConstraint(
                fields=["recipe", "order_index"],
                name="uniq_step_recipe_order_index",
            ),
            models.CheckConstraint(
                condition=models.Q(order_index__gt=0),
                name="step_order_index_gt_0",
            ),
        ]

    def __str__(self):
        """Readable snippet of the step for admin/debugging."""
        return f"Step {self.order_index}: {self.content[:30]}..."
