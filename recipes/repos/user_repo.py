"""Repository helpers for user lookups."""

from typing import List, Optional

from django.db.models import Count, QuerySet

from recipes.db_accessor import DB_Accessor
from recipes.models.user import User


class UserRepo(DB_Accessor):
    """Repository for basic user queries."""
    def __init__(self) -> None:
        """Initialise with the User model."""
        super().__init__(User)

    def list_ids(self) -> List[str]:
        """Return all user IDs."""
        return list(self.model.objects.values_list("id", flat=True))

    def get_by_id(self, user_id) -> User:
        """Return a user by id."""
        return self.get(id=user_id)

    def get_by_username(self, username: str) -> User:
        """Return a user by username."""
        return self.get(username=username)

    def find_by_email(self, email: str) -> Optional[User]:
        """Return the user with this email (case-insensitive) or None."""
        return self.model.objects.filter(email__iexact=(email or "").strip()).first()

    def get_active(self, user_id) -> Optional[User]:
        """Return an active user by id or None."""
        return self.get_or_none(id=user_id, is_active=True)

    def with_counts(self) -> QuerySet:
        """Users annotated with follower/following/recipe counts."""
        return self.model.objects.annotate(
            followers_count=Count("followers", distinct=True),
            following_count=Count("following", distinct=True),
            recipes_count=Count("recipes", distinct=True),
        )

    def search_active(self, *, search: Optional[str] = None, exclude_id=None) -> QuerySet:
        """Active users, most followed first, optionally filtered by username."""
        qs = self.model.objects.filter(is_active=True)
        if exclude_id is not None:
            qs = qs.exclude(id=exclude_id)
        if search:
            qs = qs.filter(username__icontains=search.strip())
        return qs.annotate(followers_count=Count("followers")).order_by("-followers_count", "username")
