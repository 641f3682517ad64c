from django.core.validators import RegexValidator
from rest_framework import serializers

username_validator = RegexValidator(
    regex=r'^\w{3,30}$',
    message='Username must consist of 3 to 30 alphanumericals',
)


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)


class SignUpSerializer(LoginSerializer):
    password = serializers.CharField(write_only=True, min_length=8, max_length=128, trim_whitespace=False)
    username = serializers.CharField(max_length=30, validators=[username_validator])
    avatar_url = serializers.URLField(max_length=500, required=False, allow_blank=True)


class RefreshSerializer(serializers.Serializer):
    refresh_token = serializers.CharField()


class TokenPairSerializer(serializers.Serializer):
    access_token = serializers.CharField(read_only=True)
    refresh_token = serializers.CharField(read_only=True)
