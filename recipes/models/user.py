"""Custom user model with role, profile metadata and avatar helpers."""

import uuid

from django.contrib.auth.models import AbstractUser
from django.core.validators import MaxLengthValidator, RegexValidator
from django.db import models
from libgravatar import Gravatar


class User(AbstractUser):
    """Model for user auth, role and public profile info"""

    ROLE_USER = "USER"
    ROLE_MODERATOR = "MODERATOR"

    ROLE_CHOICES = [
        (ROLE_USER, "User"),
        (ROLE_MODERATOR, "Moderator"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    username = models.CharField(
        max_length=30,
        unique=True,
        validators=[RegexValidator(
            regex=r'^\w{3,}$',
            message='Username must consist of at least three alphanumericals'
        )]
    )
    email = models.EmailField(unique=True, blank=False)
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=ROLE_USER)
    avatar_url = models.URLField(max_length=500, blank=True, default="")
    bio = models.TextField(
        max_length=500,
        blank=True,
        help_text="short user bio shown on profile",
        validators=[MaxLengthValidator(500)]
    )

    REQUIRED_FIELDS = ['email']

    class Meta:
        """Default ordering for users."""
        db_table = 'users'
        ordering = ['username']

    def __str__(self):
        return self.username

    @property
    def is_moderator(self):
        """True when the user may review submissions and ban accounts."""
        return self.role == self.ROLE_MODERATOR

    def gravatar(self, size=120):
        """Return gravatar URL for the user's email."""
        gravatar_object = Gravatar(self.email)
        return gravatar_object.get_image(size=size, default='mp')

    @property
    def display_avatar_url(self):
        """Uploaded avatar URL, or a gravatar fallback."""
        return self.avatar_url or self.gravatar(size=200)
