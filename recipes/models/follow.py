"""Model representing follower -> following relationships."""

from __future__ import annotations
from django.conf import settings
from django.db import models
from django.db.models import Q, F


class Follow(models.Model):
    """Follower relationship where `follower` subscribes to `following`."""

    follower = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="following",      # user.following -> Follow rows this user created (outbound)
        db_column="follower_id",
    )
    following = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="followers",      # user.followers -> Follow rows pointing to this user (inbound)
        db_column="following_id",
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """DB metadata and constraints for follow relationships."""
        db_table = "follow"
        constraints = [
            models.UniqueConstraint(fields=["follower", "following"], name="uniq_follow_follower_following"),
            models.CheckConstraint(condition=~Q(follower=F("following")), name="chk_follow_not_self"),
        ]
        indexes = [
            models.Index(fields=["follower"], name="follow_follower_idx"),
            models.Index(fields=["following"], name="follow_following_idx"),
        ]

    def __str__(self) -> str:
        """Readable representation for admin/debugging."""
        return f"Follow(follower={self.follower_id}, following={self.following_id})"
