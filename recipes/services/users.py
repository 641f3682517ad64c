"""Service helpers for user lookups, profiles and follow lists."""

import logging

from django.conf import settings
from django.contrib.auth import get_user_model
from django.http import Http404
from rest_framework import exceptions

from recipes.repos.follow_repo import FollowRepo
from recipes.repos.user_repo import UserRepo
from .cache import CacheService, user_cache_key

logger = logging.getLogger(__name__)

User = get_user_model()


def public_user_payload(user):
    """JSON-safe public fields of a user, as cached under user:<id>."""
    return {
        "id": str(user.pk),
        "username": user.username,
        "avatar_url": user.display_avatar_url,
        "bio": user.bio,
        "role": user.role,
        "is_active": user.is_active,
        "date_joined": user.date_joined.isoformat(),
    }


class UserService:
    """Encapsulate common user lookups and profile reads."""

    def __init__(self, user_repo=None, follow_repo=None, cache=None):
        self.users = user_repo or UserRepo()
        self.follows = follow_repo or FollowRepo()
        self.cache = cache or CacheService()

    def fetch(self, user_id):
        """Fetch a user by id or raise 404."""
        user = self.users.get_or_none(id=user_id)
        if user is None:
            raise Http404("User does not exist")
        return user

    def fetch_active(self, user_id):
        """Fetch an active (not banned) user by id or raise 404."""
        user = self.users.get_active(user_id)
        if user is None:
            raise Http404("User does not exist")
        return user

    def find_one(self, user_id):
        """Public user record, served from cache when possible."""
        key = user_cache_key(user_id)
        cached = self.cache.get(key)
        if cached is not None:
            return cached
        payload = public_user_payload(self.fetch(user_id))
        self.cache.set(key, payload, ttl=settings.USER_CACHE_TTL)
        return payload

    def search(self, *, search=None, current_user=None):
        exclude_id = current_user.pk if current_user and current_user.is_authenticated else None
        return self.users.search_active(search=search, exclude_id=exclude_id)

    def profile(self, user_id):
        """User with followers/following/recipes counts, or 404."""
        user = self.users.with_counts().filter(id=user_id).first()
        if user is None:
            raise Http404("User does not exist")
        return user

    def public_profile(self, target_id, current_user=None):
        """Return (profile, is_followed) for target as seen by current_user."""
        profile = self.profile(target_id)
        is_followed = False
        if current_user and current_user.is_authenticated:
            is_followed = self.follows.is_following(follower_id=current_user.pk, following_id=profile.pk)
        return profile, is_followed

    def editable(self, target_id, current_user):
        """Return the target user when current_user may edit it, else 404/403."""
        user = self.fetch(target_id)
        if user.pk != current_user.pk:
            raise exceptions.PermissionDenied("You have no right to perform this action")
        return user

    def update(self, target_id, current_user, data):
        """Users may only edit their own profile."""
        user = self.editable(target_id, current_user)
        for field, value in data.items():
            setattr(user, field, value)
        user.save(update_fields=list(data.keys()))
        logger.info("User %s updated profile fields %s", user.pk, sorted(data.keys()))
        return self.profile(user.pk)

    def followers(self, profile_id):
        self.fetch(profile_id)
        return self.follows.followers_of(profile_id)

    def following(self, profile_id):
        self.fetch(profile_id)
        return self.follows.following_of(profile_id)

    def followed_by_viewer(self, viewer, users):
        """Ids among `users` that viewer follows (empty for anonymous)."""
        if not viewer or not viewer.is_authenticated:
            return set()
        return self.follows.followed_ids(follower_id=viewer.pk, among=[u.pk for u in users])
