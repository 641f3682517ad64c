from django.contrib.auth import get_user_model
from rest_framework import serializers

from recipes.models import Comment

User = get_user_model()


class CommentUserSerializer(serializers.ModelSerializer):
    avatar_url = serializers.CharField(source="display_avatar_url", read_only=True)

    class Meta:
        model = User
        fields = ["id", "username", "avatar_url", "role"]
        read_only_fields = fields


class CommentSerializer(serializers.ModelSerializer):
    user = CommentUserSerializer(read_only=True)
    recipe_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Comment
        fields = ["id", "recipe_id", "content", "rating", "created_at", "updated_at", "user"]
        read_only_fields = fields


class CommentWriteSerializer(serializers.Serializer):
    """Input for creating a comment; used with partial=True for updates."""
    content = serializers.CharField(max_length=2000, required=False, allow_blank=True)
    rating = serializers.IntegerField(min_value=0, max_value=5)
