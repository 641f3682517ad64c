"""Issue and verify the access/refresh JWT pair."""

import logging
import re
import uuid
from datetime import datetime, timedelta, timezone

import jwt
from django.conf import settings
from rest_framework import exceptions

logger = logging.getLogger(__name__)

TOKEN_TYPE_ACCESS = "access"
TOKEN_TYPE_REFRESH = "refresh"

_DURATION_UNITS = {"s": 1, "m": 60, "h": 3600, "d": 86400}


def parse_lifetime(value):
    """Turn '15m', '30d', '3600' or a timedelta into a timedelta."""
    if isinstance(value, timedelta):
        return value
    match = re.fullmatch(r"\s*(\d+)\s*([smhd]?)\s*", str(value))
    if not match:
        raise ValueError(f"Invalid token lifetime: {value!r}")
    amount, unit = match.groups()
    return timedelta(seconds=int(amount) * _DURATION_UNITS[unit or "s"])


class TokenService:
    """Sign and decode JWTs carrying the user's identity and role."""

    def __init__(self, config=None):
        config = config or settings.JWT
        self.secret = config["SECRET"]
        self.algorithm = config.get("ALGORITHM", "HS256")
        self.access_lifetime = parse_lifetime(config["ACCESS_TOKEN_EXPIRES_IN"])
        self.refresh_lifetime = parse_lifetime(config["REFRESH_TOKEN_EXPIRES_IN"])

    def issue_pair(self, user):
        """Return {"access_token", "refresh_token"}, each with its own jti."""
        return {
            "access_token": self.encode(user, TOKEN_TYPE_ACCESS, self.access_lifetime),
            "refresh_token": self.encode(user, TOKEN_TYPE_REFRESH, self.refresh_lifetime),
        }

    def encode(self, user, token_type, lifetime):
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user.pk),
            "email": user.email,
            "username": user.username,
            "role": user.role,
            "type": token_type,
            "jti": str(uuid.uuid4()),
            "iat": now,
            "exp": now + lifetime,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode(self, token, expected_type=TOKEN_TYPE_ACCESS):
        """Verify signature, expiry and token type; return the claims."""
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["sub", "exp", "jti", "type"]},
            )
        except jwt.ExpiredSignatureError:
            raise exceptions.AuthenticationFailed("Token has expired")
        except jwt.InvalidTokenError as exc:
            logger.warning("Rejected malformed token: %s", exc)
            raise exceptions.AuthenticationFailed("Invalid token")

        if expected_type and payload.get("type") != expected_type:
            raise exceptions.AuthenticationFailed(f"Expected {expected_type} token")
        return payload
