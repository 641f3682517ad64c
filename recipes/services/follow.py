"""Follow / unfollow between users."""

import logging

from django.db import transaction
from rest_framework import exceptions

from recipes.repos.follow_repo import FollowRepo

logger = logging.getLogger(__name__)


class FollowService:
    def __init__(self, actor, follow_repo=None):
        self.actor = actor
        self.follows = follow_repo or FollowRepo()

    def _check_target(self, target):
        if target.pk == self.actor.pk:
            raise exceptions.ValidationError({"detail": "You cannot follow yourself"})

    def is_following(self, target):
        return self.follows.is_following(follower_id=self.actor.pk, following_id=target.pk)

    @transaction.atomic
    def follow_user(self, target):
        self._check_target(target)
        self.follows.follow(follower_id=self.actor.pk, following_id=target.pk)
        logger.info("User %s followed %s", self.actor.pk, target.pk)
        return {"status": "following"}

    @transaction.atomic
    def unfollow(self, target):
        self._check_target(target)
        self.follows.unfollow(follower_id=self.actor.pk, following_id=target.pk)
        logger.info("User %s unfollowed %s", self.actor.pk, target.pk)
        return {"status": "unfollowed"}

    @transaction.atomic
    def toggle_follow(self, target):
        if self.is_following(target):
            return self.unfollow(target)
        return self.follow_user(target)
