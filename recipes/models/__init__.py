from .user import User
from .ingredient import Ingredient
from .recipe import Recipe
from .recipe_step import RecipeStep
from .recipe_ingredient import RecipeIngredient
from .like import Like
from .comment import Comment
from .follow import Follow

__all__ = [
    "User",
    "Ingredient",
    "Recipe",
    "RecipeStep",
    "RecipeIngredient",
    "Like",
    "Comment",
    "Follow",
]
