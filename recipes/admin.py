from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils import timezone

from recipes.models.comment import Comment
from recipes.models.recipe import Recipe
from recipes.models.recipe_step import RecipeStep
from recipes.models.user import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin configuration for users with role and ban controls."""
    list_display = ('username', 'email', 'role', 'is_active', 'date_joined')
    list_filter = ('role', 'is_active')
    search_fields = ('username', 'email')
    ordering = ('username',)
    fieldsets = BaseUserAdmin.fieldsets + (
        ('Profile', {'fields': ('role', 'avatar_url', 'bio')}),
    )
    actions = ['ban_users', 'unban_users']

    @admin.action(description='Ban selected users')
    def ban_users(self, request, queryset):
        """Deactivate selected non-moderator accounts."""
        for user in queryset.exclude(role=User.ROLE_MODERATOR):
            user.is_active = False
            user.save(update_fields=['is_active'])

    @admin.action(description='Unban selected users')
    def unban_users(self, request, queryset):
        for user in queryset:
            user.is_active = True
            user.save(update_fields=['is_active'])


class RecipeStepInline(admin.TabularInline):
    model = RecipeStep
    extra = 0


@admin.register(Recipe)
class RecipeAdmin(admin.ModelAdmin):
    """Admin configuration for recipes with moderation actions."""
    list_display = ('title', 'author', 'status', 'created_at', 'published_at')
    list_filter = ('status', 'created_at')
    search_fields = ('title', 'description', 'author__username')
    actions = ['publish_recipes', 'reject_recipes']
    inlines = [RecipeStepInline]

    @admin.action(description='Publish selected pending recipes')
    def publish_recipes(self, request, queryset):
        """Mark selected pending recipes as published."""
        queryset.filter(status=Recipe.STATUS_PENDING).update(
            status=Recipe.STATUS_PUBLISHED,
            rejection_reason='',
            published_at=timezone.now(),
        )

    @admin.action(description='Reject selected pending recipes')
    def reject_recipes(self, request, queryset):
        queryset.filter(status=Recipe.STATUS_PENDING).update(
            status=Recipe.STATUS_REJECTED,
            rejection_reason='Rejected by moderator',
        )


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    """Admin configuration for comments."""
    list_display = ('short_content', 'user', 'recipe', 'rating', 'created_at')
    list_filter = ('rating', 'created_at')
    search_fields = ('content', 'user__username')

    def short_content(self, obj):
        """Shorten comment content for list display."""
        return obj.content[:50] + "..." if len(obj.content) > 50 else obj.content
