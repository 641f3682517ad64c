"""
Recipe model.

A recipe is authored by one user and owns its ordered steps and its
ingredient links (see RecipeStep and RecipeIngredient).

Status lifecycle:
- DRAFT: created by the author, only visible to the author.
- PENDING: submitted by the author for review.
- PUBLISHED: approved by a moderator, visible to everyone.
- REJECTED: declined by a moderator; `rejection_reason` says why. The
  author may edit and resubmit.
"""

from django.conf import settings
from django.db import models


class Recipe(models.Model):
    STATUS_DRAFT = "DRAFT"
    STATUS_PENDING = "PENDING"
    STATUS_PUBLISHED = "PUBLISHED"
    STATUS_REJECTED = "REJECTED"

    STATUS_CHOICES = [
        (STATUS_DRAFT, "Draft"),
        (STATUS_PENDING, "Pending review"),
        (STATUS_PUBLISHED, "Published"),
        (STATUS_REJECTED, "Rejected"),
    ]

    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='recipes',
        db_column='author_id'
    )

    title = models.CharField(max_length=255)
    description = models.TextField(max_length=4000, blank=True, default="")

    # minutes
    cooking_time = models.PositiveIntegerField()
    servings = models.PositiveIntegerField()

    thumbnail_url = models.URLField(max_length=500)

    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default=STATUS_DRAFT,
    )
    rejection_reason = models.TextField(blank=True, default="")

    published_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    ingredients = models.ManyToManyField(
        'recipes.Ingredient',
        through='recipes.RecipeIngredient',
        related_name='recipes',
    )

    class Meta:
        db_table = 'recipe'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['status', '-created_at'], name='recipe_status_created_idx'),
        ]

    def __str__(self):
        return self.title

    @property
    def is_published(self):
        return self.status == self.STATUS_PUBLISHED

    def is_owned_by(self, user):
        return bool(user) and getattr(user, "pk", None) == self.author_id
