from rest_framework import generics, status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from recipes.authentication import JWTAuthentication
from recipes.serializers import (
    LoginSerializer,
    ProfileSerializer,
    RefreshSerializer,
    SignUpSerializer,
    TokenPairSerializer,
)
from recipes.services import AuthService, UserService


class AuthView(generics.GenericAPIView):
    """Credential endpoints never read the Authorization header."""
    authentication_classes = []
    permission_classes = [AllowAny]

    def get_authenticate_header(self, request):
        # keep failed credentials at 401 instead of DRF's 403 fallback
        return JWTAuthentication().authenticate_header(request)

    def validated(self, request):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return serializer.validated_data


class SignUpView(AuthView):
    serializer_class = SignUpSerializer

    def post(self, request):
        user = AuthService().sign_up(**self.validated(request))
        profile = UserService().profile(user.pk)
        return Response(ProfileSerializer(profile).data, status=status.HTTP_201_CREATED)


class LogInView(AuthView):
    serializer_class = LoginSerializer

    def post(self, request):
        tokens = AuthService().login(**self.validated(request))
        return Response(TokenPairSerializer(tokens).data)


class RefreshView(AuthView):
    serializer_class = RefreshSerializer

    def post(self, request):
        tokens = AuthService().refresh(self.validated(request)["refresh_token"])
        return Response(TokenPairSerializer(tokens).data)
