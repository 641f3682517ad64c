from .auth import AuthService
from .cache import CacheService
from .comments import CommentService
from .follow import FollowService
from .ingredients import IngredientService
from .moderation import ModerationService
from .recipes import RecipeService
from .tokens import TokenService
from .users import UserService

__all__ = [
    "AuthService",
    "CacheService",
    "CommentService",
    "FollowService",
    "IngredientService",
    "ModerationService",
    "RecipeService",
    "TokenService",
    "UserService",
]
