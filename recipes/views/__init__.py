from .auth_views import LogInView, RefreshView, SignUpView
from .comment_views import CommentDetailView, RecipeCommentsView
from .ingredient_views import IngredientDetailView, IngredientListCreateView
from .moderation_views import (
    ApproveRecipeView,
    ModerationQueueView,
    ModerationStatsView,
    RejectRecipeView,
    UserBanView,
)
from .recipe_views import (
    RecipeDetailView,
    RecipeFavoriteView,
    RecipeLikeView,
    RecipeListCreateView,
    RecipeSubmitView,
    UserRecipesView,
)
from .root_view import api_root
from .user_views import (
    FollowListView,
    FollowToggleView,
    IsFollowingView,
    LikedRecipesView,
    MeView,
    UserDetailView,
    UserListView,
    UserProfileView,
)
