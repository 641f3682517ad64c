"""Sign-up, login and token refresh."""

import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from rest_framework import exceptions

from recipes.repos.user_repo import UserRepo
from .tokens import TOKEN_TYPE_REFRESH, TokenService

logger = logging.getLogger(__name__)

User = get_user_model()

INVALID_CREDENTIALS = "Email or password is incorrect"
BANNED = "User has been banned"


class AuthService:
    """Verify credentials and hand out JWT pairs."""

    def __init__(self, user_repo=None, token_service=None):
        self.user_repo = user_repo or UserRepo()
        self.tokens = token_service or TokenService()

    @transaction.atomic
    def sign_up(self, *, email, password, username, avatar_url=""):
        """Create a regular user; email and username must be free."""
        email = email.strip().lower()
        errors = {}
        if self.user_repo.find_by_email(email):
            errors["email"] = ["A user with this email already exists."]
        if User.objects.filter(username__iexact=username).exists():
            errors["username"] = ["A user with this username already exists."]
        if errors:
            raise exceptions.ValidationError(errors)

        user = User.objects.create_user(
            username=username,
            email=email,
            password=password,
            avatar_url=avatar_url or "",
            role=User.ROLE_USER,
        )
        logger.info("User %s signed up", user.pk)
        return user

    def login(self, *, email, password):
        """Return a token pair for valid credentials of an active user."""
        user = self.user_repo.find_by_email(email)
        if not user or not user.has_usable_password():
            logger.warning("Login failed for unknown email")
            raise exceptions.AuthenticationFailed(INVALID_CREDENTIALS)
        if not user.check_password(password):
            logger.warning("Login failed for user %s", user.pk)
            raise exceptions.AuthenticationFailed(INVALID_CREDENTIALS)
        if not user.is_active:
            logger.warning("Login refused for banned user %s", user.pk)
            raise exceptions.PermissionDenied(BANNED)

        logger.info("User %s logged in", user.pk)
        return self.tokens.issue_pair(user)

    def refresh(self, refresh_token):
        """Exchange a valid refresh token for a new pair."""
        payload = self.tokens.decode(refresh_token, expected_type=TOKEN_TYPE_REFRESH)
        user = self.user_repo.get_or_none(id=payload["sub"])
        if user is None:
            raise exceptions.AuthenticationFailed("User not found")
        if not user.is_active:
            raise exceptions.PermissionDenied(BANNED)
        return self.tokens.issue_pair(user)
