from .auth import LoginSerializer, RefreshSerializer, SignUpSerializer, TokenPairSerializer
from .comments import CommentSerializer, CommentWriteSerializer
from .ingredients import IngredientCreateSerializer, IngredientSerializer
from .moderation import ModerationStatsSerializer, RejectSerializer
from .recipes import RecipeDetailSerializer, RecipeListSerializer, RecipeWriteSerializer
from .users import (
    FollowUserSerializer,
    ProfileSerializer,
    PublicProfileSerializer,
    UserSummarySerializer,
    UserUpdateSerializer,
)

__all__ = [
    "CommentSerializer",
    "CommentWriteSerializer",
    "FollowUserSerializer",
    "IngredientCreateSerializer",
    "IngredientSerializer",
    "LoginSerializer",
    "ModerationStatsSerializer",
    "ProfileSerializer",
    "PublicProfileSerializer",
    "RecipeDetailSerializer",
    "RecipeListSerializer",
    "RecipeWriteSerializer",
    "RefreshSerializer",
    "RejectSerializer",
    "SignUpSerializer",
    "TokenPairSerializer",
    "UserSummarySerializer",
    "UserUpdateSerializer",
]
