"""Repository helpers for follow relationships."""

from typing import Iterable, Set

from django.db.models import QuerySet

from recipes.db_accessor import DB_Accessor
from recipes.models.follow import Follow


class FollowRepo(DB_Accessor):
    """Repository wrapper for follow relationships."""
    def __init__(self) -> None:
        """Initialise with the Follow model."""
        super().__init__(Follow)

    def is_following(self, *, follower_id, following_id) -> bool:
        """Return True if follower_id follows following_id."""
        return self.exists(follower_id=follower_id, following_id=following_id)

    def follow(self, *, follower_id, following_id) -> Follow:
        """Create a follow relation (no-op when it already exists)."""
        relation, _ = self.model.objects.get_or_create(follower_id=follower_id, following_id=following_id)
        return relation

    def unfollow(self, *, follower_id, following_id) -> int:
        """Remove a follow relation."""
        return self.delete(follower_id=follower_id, following_id=following_id)

    def followers_of(self, user_id) -> QuerySet:
        """Follow rows pointing at user_id, newest first."""
        return self.model.objects.filter(following_id=user_id).select_related("follower").order_by("-created_at", "-id")

    def following_of(self, user_id) -> QuerySet:
        """Follow rows created by user_id, newest first."""
        return self.model.objects.filter(follower_id=user_id).select_related("following").order_by("-created_at", "-id")

    def followed_ids(self, *, follower_id, among: Iterable) -> Set:
        """Subset of `among` user ids that follower_id follows."""
        return set(
            self.model.objects.filter(follower_id=follower_id, following_id__in=list(among))
            .values_list("following_id", flat=True)
        )
