"""Shared ingredient catalogue, one row per normalized name."""

from django.db import models


def normalize_ingredient_name(name):
    """Trim, collapse inner whitespace and lower-case an ingredient name."""
    if name is None:
        return ""
    return " ".join(str(name).split()).lower()


class Ingredient(models.Model):
    """Ingredient shared across recipes."""
    name = models.CharField(max_length=255, unique=True)

    class Meta:
        db_table = "ingredient"
        ordering = ["name"]

    def save(self, *args, **kwargs):
        """Normalise name before saving."""
        self.name = normalize_ingredient_name(self.name)
        super().save(*args, **kwargs)

    def __str__(self):
        return self.name
