"""
URL configuration for the snapchef project.

All API routes live under /api and are declared without trailing slashes.
"""
from django.contrib import admin
from django.urls import path

from recipes import views

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api', views.api_root, name='api_root'),

    path('api/auth/sign-up', views.SignUpView.as_view(), name='sign_up'),
    path('api/auth/login', views.LogInView.as_view(), name='log_in'),
    path('api/auth/refresh', views.RefreshView.as_view(), name='refresh_token'),

    path('api/users', views.UserListView.as_view(), name='user_list'),
    path('api/users/me', views.MeView.as_view(), name='user_me'),
    path('api/users/<uuid:pk>', views.UserDetailView.as_view(), name='user_detail'),
    path('api/users/<uuid:pk>/profile', views.UserProfileView.as_view(), name='user_profile'),
    path('api/users/<uuid:pk>/follow', views.FollowToggleView.as_view(), name='toggle_follow'),
    path('api/users/<uuid:pk>/is-following', views.IsFollowingView.as_view(), name='is_following'),
    path('api/users/<uuid:pk>/followers',
         views.FollowListView.as_view(direction='followers'), name='user_followers'),
    path('api/users/<uuid:pk>/following',
         views.FollowListView.as_view(direction='following'), name='user_following'),
    path('api/users/<uuid:pk>/liked-recipes', views.LikedRecipesView.as_view(), name='user_liked_recipes'),

    path('api/recipes', views.RecipeListCreateView.as_view(), name='recipe_list'),
    path('api/recipes/user/<uuid:user_id>', views.UserRecipesView.as_view(), name='user_recipes'),
    path('api/recipes/<int:pk>', views.RecipeDetailView.as_view(), name='recipe_detail'),
    path('api/recipes/<int:pk>/submit', views.RecipeSubmitView.as_view(), name='recipe_submit'),
    path('api/recipes/<int:pk>/like', views.RecipeLikeView.as_view(), name='toggle_like'),
    path('api/recipes/<int:pk>/favorite', views.RecipeFavoriteView.as_view(), name='recipe_favorite'),
    path('api/recipes/<int:pk>/comments', views.RecipeCommentsView.as_view(), name='recipe_comments'),
    path('api/recipes/<int:pk>/comments/<int:comment_id>',
         views.CommentDetailView.as_view(), name='comment_detail'),

    path('api/ingredients', views.IngredientListCreateView.as_view(), name='ingredient_list'),
    path('api/ingredients/<int:pk>', views.IngredientDetailView.as_view(), name='ingredient_detail'),

    path('api/moderation/queue', views.ModerationQueueView.as_view(), name='moderation_queue'),
    path('api/moderation/queue/<int:pk>/approve',
         views.ApproveRecipeView.as_view(), name='moderation_approve'),
    path('api/moderation/queue/<int:pk>/reject',
         views.RejectRecipeView.as_view(), name='moderation_reject'),
    path('api/moderation/stats', views.ModerationStatsView.as_view(), name='moderation_stats'),
    path('api/moderation/users/<uuid:pk>/ban',
         views.UserBanView.as_view(is_active=False), name='moderation_ban'),
    path('api/moderation/users/<uuid:pk>/unban',
         views.UserBanView.as_view(is_active=True), name='moderation_unban'),
]
