"""Moderator review of submitted recipes and account bans."""

import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from django.http import Http404
from django.utils import timezone
from rest_framework import exceptions

from recipes.models import Recipe
from recipes.repos.recipe_repo import RecipeRepo
from recipes.repos.user_repo import UserRepo

logger = logging.getLogger(__name__)

User = get_user_model()


class ModerationService:
    """Approve/reject pending recipes and ban/unban users."""

    def __init__(self, moderator, recipe_repo=None, user_repo=None):
        self.moderator = moderator
        self.recipes = recipe_repo or RecipeRepo()
        self.users = user_repo or UserRepo()

    def queue(self):
        return self.recipes.pending_queue()

    def _fetch_pending(self, recipe_id):
        recipe = Recipe.objects.select_for_update().filter(id=recipe_id).first()
        if recipe is None:
            raise Http404("Recipe not found")
        if recipe.status != Recipe.STATUS_PENDING:
            raise exceptions.ValidationError(
                {"status": [f"Only pending recipes can be reviewed (recipe is {recipe.status.lower()})"]}
            )
        return recipe

    @transaction.atomic
    def approve(self, recipe_id):
        recipe = self._fetch_pending(recipe_id)
        recipe.status = Recipe.STATUS_PUBLISHED
        recipe.rejection_reason = ""
        recipe.published_at = timezone.now()
        recipe.save(update_fields=["status", "rejection_reason", "published_at", "updated_at"])
        logger.info("Recipe %s approved by moderator %s", recipe.pk, self.moderator.pk)
        return self.recipes.detail(recipe.pk)

    @transaction.atomic
    def reject(self, recipe_id, reason):
        recipe = self._fetch_pending(recipe_id)
        recipe.status = Recipe.STATUS_REJECTED
        recipe.rejection_reason = reason
        recipe.save(update_fields=["status", "rejection_reason", "updated_at"])
        logger.info("Recipe %s rejected by moderator %s", recipe.pk, self.moderator.pk)
        return self.recipes.detail(recipe.pk)

    def stats(self):
        counts = self.recipes.status_counts()
        return {
            "pending": counts[Recipe.STATUS_PENDING],
            "published": counts[Recipe.STATUS_PUBLISHED],
            "rejected": counts[Recipe.STATUS_REJECTED],
            "draft": counts[Recipe.STATUS_DRAFT],
            "banned_users": self.users.count(is_active=False),
        }

    def _fetch_target(self, user_id):
        user = self.users.get_or_none(id=user_id)
        if user is None:
            raise Http404("User does not exist")
        if user.pk == self.moderator.pk:
            raise exceptions.ValidationError({"detail": "You cannot change your own account status"})
        if user.is_moderator:
            raise exceptions.PermissionDenied("Moderators cannot be banned")
        return user

    def set_active(self, user_id, is_active):
        user = self._fetch_target(user_id)
        user.is_active = is_active
        user.save(update_fields=["is_active"])
        logger.info(
            "User %s %s by moderator %s",
            user.pk,
            "unbanned" if is_active else "banned",
            self.moderator.pk,
        )
        return user
