"""Service helpers for creating, editing and deleting comments."""

import logging

from django.http import Http404
from rest_framework import exceptions

from recipes.models import Comment

logger = logging.getLogger(__name__)


class CommentService:
    """Encapsulate comment CRUD for recipes."""

    def list_for_recipe(self, recipe):
        return (
            Comment.objects.filter(recipe=recipe)
            .select_related("user")
            .order_by("-created_at", "-id")
        )

    def fetch(self, recipe, comment_id):
        """Fetch a comment under recipe or raise 404."""
        comment = Comment.objects.select_related("user", "recipe").filter(id=comment_id, recipe=recipe).first()
        if comment is None:
            raise Http404("Comment does not exist")
        return comment

    def create_comment(self, recipe, user, data):
        comment = Comment.objects.create(
            recipe=recipe,
            user=user,
            content=data.get("content") or "",
            rating=data["rating"],
        )
        logger.info("New comment of recipe %s was created by user %s", recipe.pk, user.pk)
        return comment

    def can_edit(self, comment, user):
        """Only the comment's author may edit it."""
        return comment.user_id == user.pk

    def can_delete(self, comment, user):
        """Comment author, recipe author or a moderator may delete."""
        return (
            comment.user_id == user.pk
            or comment.recipe.author_id == user.pk
            or user.is_moderator
        )

    def update_comment(self, comment, user, data):
        if not self.can_edit(comment, user):
            raise exceptions.PermissionDenied("You have no right to update this comment")
        fields = []
        for field in ("content", "rating"):
            if field in data:
                setattr(comment, field, data[field])
                fields.append(field)
        if fields:
            comment.save(update_fields=fields + ["updated_at"])
        return comment

    def delete_comment(self, comment, user):
        """Delete the given comment; return the recipe id it belonged to."""
        if not self.can_delete(comment, user):
            raise exceptions.PermissionDenied("You have no right to delete this comment")
        comment_id, recipe_id = comment.pk, comment.recipe_id
        comment.delete()
        logger.info("Comment %s of recipe %s deleted by user %s", comment_id, recipe_id, user.pk)
        return recipe_id
