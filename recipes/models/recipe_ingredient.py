"""Join row linking a recipe to an ingredient with its amount."""

from django.db import models
from .recipe import Recipe
from .ingredient import Ingredient


class RecipeIngredient(models.Model):
    """Quantity and unit of one ingredient in one recipe."""
    recipe = models.ForeignKey(
        Recipe,
        on_delete=models.CASCADE,
        db_column='recipe_id',
        related_name='recipe_ingredients'
    )
    ingredient = models.ForeignKey(
        Ingredient,
        on_delete=models.CASCADE,
        db_column='ingredient_id',
        related_name='recipe_links'
    )

    quantity = models.DecimalField(max_digits=10, decimal_places=2)
    unit = models.CharField(max_length=50, blank=True, default="")

    class Meta:
        db_table = "recipe_ingredient"
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(
                fields=["recipe", "ingredient"],
                name="uniq_recipe_ingredient",
            ),
            models.CheckConstraint(
                condition=models.Q(quantity__gt=0),
                name="recipe_ingredient_quantity_gt_0",
            ),
        ]

    def __str__(self):
        """Readable ingredient string with quantity."""
        return f"{self.ingredient.name} ({self.quantity} {self.unit})".strip()
