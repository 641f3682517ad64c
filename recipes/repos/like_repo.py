"""Repository helpers for recipe likes."""

from recipes.db_accessor import DB_Accessor
from recipes.models.like import Like


class LikeRepo(DB_Accessor):
    """Repository wrapper for user/recipe likes."""
    def __init__(self) -> None:
        super().__init__(Like)

    def has_liked(self, *, user_id, recipe_id) -> bool:
        return self.exists(user_id=user_id, recipe_id=recipe_id)

    def like(self, *, user_id, recipe_id) -> bool:
        """Create the like; return True when it did not exist yet."""
        _, created = self.model.objects.get_or_create(user_id=user_id, recipe_id=recipe_id)
        return created

    def unlike(self, *, user_id, recipe_id) -> int:
        return self.delete(user_id=user_id, recipe_id=recipe_id)

    def count_for(self, recipe_id) -> int:
        return self.count(recipe_id=recipe_id)
