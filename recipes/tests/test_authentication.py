from django.test import TestCase
from rest_framework import exceptions
from rest_framework.test import APIRequestFactory

from recipes.authentication import JWTAuthentication, OptionalJWTAuthentication
from recipes.tests.helpers import bearer, make_user


class JWTAuthenticationTests(TestCase):
    def setUp(self):
        self.auth = JWTAuthentication()
        self.factory = APIRequestFactory()
        self.user = make_user(username="user1")

    def _request(self, header=None):
        extra = {"HTTP_AUTHORIZATION": header} if header is not None else {}
        return self.factory.get("/api/users/me", **extra)

    def test_authenticate_success(self):
        user, payload = self.auth.authenticate(self._request(bearer(self.user)))
        self.assertEqual(user, self.user)
        self.assertEqual(payload["sub"], str(self.user.pk))

    def test_authenticate_no_header(self):
        self.assertIsNone(self.auth.authenticate(self._request()))

    def test_other_scheme_is_ignored(self):
        self.assertIsNone(self.auth.authenticate(self._request("Basic abc")))

    def test_header_without_token(self):
        with self.assertRaises(exceptions.AuthenticationFailed):
            self.auth.authenticate(self._request("Bearer"))

    def test_invalid_token(self):
        with self.assertRaises(exceptions.AuthenticationFailed):
            self.auth.authenticate(self._request("Bearer bad"))

    def test_refresh_token_is_not_a_bearer_token(self):
        with self.assertRaises(exceptions.AuthenticationFailed):
            self.auth.authenticate(self._request(bearer(self.user, "refresh")))

    def test_deleted_user(self):
        header = bearer(self.user)
        self.user.delete()
        with self.assertRaises(exceptions.AuthenticationFailed):
            self.auth.authenticate(self._request(header))

    def test_banned_user_is_forbidden(self):
        header = bearer(self.user)
        self.user.is_active = False
        self.user.save()
        with self.assertRaisesMessage(exceptions.PermissionDenied, "User has been banned"):
            self.auth.authenticate(self._request(header))

    def test_authenticate_header(self):
        self.assertEqual(self.auth.authenticate_header(self._request()), 'Bearer realm="api"')


class OptionalJWTAuthenticationTests(TestCase):
    def setUp(self):
        self.auth = OptionalJWTAuthentication()
        self.factory = APIRequestFactory()

    def test_bad_token_means_anonymous(self):
        request = self.factory.get("/api/recipes", HTTP_AUTHORIZATION="Bearer bad")
        self.assertIsNone(self.auth.authenticate(request))

    def test_banned_user_still_forbidden(self):
        user = make_user(is_active=False)
        request = self.factory.get("/api/recipes", HTTP_AUTHORIZATION=bearer(user))
        with self.assertRaises(exceptions.PermissionDenied):
            self.auth.authenticate(request)
