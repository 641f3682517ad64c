from django.contrib.auth import get_user_model
from rest_framework import authentication
from rest_framework import exceptions

from .services.tokens import TOKEN_TYPE_ACCESS, TokenService

User = get_user_model()


class JWTAuthentication(authentication.BaseAuthentication):
    """DRF authentication backend validating `Bearer <access token>` headers."""

    keyword = "Bearer"

    def __init__(self, token_service=None):
        self.tokens = token_service or TokenService()

    def authenticate(self, request):
        """Validate Authorization header token and return (user, claims)."""
        auth_header = authentication.get_authorization_header(request).split()
        if not auth_header:
            return None
        if auth_header[0].decode("latin-1").lower() != self.keyword.lower():
            return None
        if len(auth_header) != 2:
            raise exceptions.AuthenticationFailed("Invalid Authorization header")

        try:
            token = auth_header[1].decode()
        except UnicodeError:
            raise exceptions.AuthenticationFailed("Invalid Authorization header")

        payload = self.tokens.decode(token, expected_type=TOKEN_TYPE_ACCESS)

        user = User.objects.filter(pk=payload["sub"]).first()
        if user is None:
            raise exceptions.AuthenticationFailed("User not found")
        if not user.is_active:
            raise exceptions.PermissionDenied("User has been banned")
        return (user, payload)

    def authenticate_header(self, request):
        return f'{self.keyword} realm="api"'


class OptionalJWTAuthentication(JWTAuthentication):
    """Like JWTAuthentication, but a bad or expired token means anonymous."""

    def authenticate(self, request):
        try:
            return super().authenticate(request)
        except exceptions.AuthenticationFailed:
            return None
