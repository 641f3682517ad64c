from django.contrib.auth import get_user_model
from rest_framework import serializers

from .auth import username_validator

User = get_user_model()


class UserSummarySerializer(serializers.ModelSerializer):
    """Compact user shape used in lists and as recipe author."""
    avatar_url = serializers.CharField(source="display_avatar_url", read_only=True)

    class Meta:
        model = User
        fields = ["id", "username", "avatar_url"]
        read_only_fields = fields


class FollowUserSerializer(UserSummarySerializer):
    """User summary plus whether the viewer follows them (context['followed_ids'])."""
    is_following = serializers.SerializerMethodField()

    class Meta(UserSummarySerializer.Meta):
        fields = UserSummarySerializer.Meta.fields + ["is_following"]
        read_only_fields = fields

    def get_is_following(self, obj):
        return obj.pk in self.context.get("followed_ids", ())


class ProfileSerializer(serializers.ModelSerializer):
    """The signed-in user's own profile, counters included."""
    avatar_url = serializers.CharField(source="display_avatar_url", read_only=True)
    followers_count = serializers.IntegerField(read_only=True, default=0)
    following_count = serializers.IntegerField(read_only=True, default=0)
    recipes_count = serializers.IntegerField(read_only=True, default=0)

    class Meta:
        model = User
        fields = [
            "id",
            "email",
            "username",
            "role",
            "avatar_url",
            "bio",
            "is_active",
            "date_joined",
            "followers_count",
            "following_count",
            "recipes_count",
        ]
        read_only_fields = fields


class PublicProfileSerializer(ProfileSerializer):
    class Meta(ProfileSerializer.Meta):
        fields = [f for f in ProfileSerializer.Meta.fields if f not in ("email", "role")]
        read_only_fields = fields


class UserUpdateSerializer(serializers.Serializer):
    username = serializers.CharField(max_length=30, required=False, validators=[username_validator])
    bio = serializers.CharField(max_length=500, required=False, allow_blank=True)
    avatar_url = serializers.URLField(max_length=500, required=False, allow_blank=True)

    def validate_username(self, value):
        user = self.context.get("user")
        clash = User.objects.filter(username__iexact=value)
        if user is not None:
            clash = clash.exclude(pk=user.pk)
        if clash.exists():
            raise serializers.ValidationError("A user with this username already exists.")
        return value
