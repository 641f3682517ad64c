from rest_framework import generics
from rest_framework.permissions import IsAuthenticated, IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from rest_framework.views import APIView

from recipes.authentication import OptionalJWTAuthentication
from recipes.pagination import RecipePagination, UserPagination
from recipes.serializers import (
    FollowUserSerializer,
    ProfileSerializer,
    PublicProfileSerializer,
    RecipeListSerializer,
    UserSummarySerializer,
    UserUpdateSerializer,
)
from recipes.services import FollowService, RecipeService, UserService
from .mixins import PageContextMixin, RecipePageMixin


class UserListView(generics.ListAPIView):
    """Active users, most followed first, `?search=` on username."""
    authentication_classes = [OptionalJWTAuthentication]
    serializer_class = UserSummarySerializer
    pagination_class = UserPagination

    def get_queryset(self):
        search = self.request.query_params.get("search")
        return UserService().search(search=search, current_user=self.request.user)


class MeView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        profile = UserService().profile(request.user.pk)
        return Response(ProfileSerializer(profile).data)


class UserDetailView(APIView):
    """Cached public record on GET; self-service profile edit on PUT/PATCH."""
    authentication_classes = [OptionalJWTAuthentication]
    permission_classes = [IsAuthenticatedOrReadOnly]

    def get(self, request, pk):
        return Response(UserService().find_one(pk))

    def put(self, request, pk):
        return self._update(request, pk, partial=False)

    def patch(self, request, pk):
        return self._update(request, pk, partial=True)

    def _update(self, request, pk, partial):
        service = UserService()
        service.editable(pk, request.user)
        serializer = UserUpdateSerializer(
            data=request.data, partial=partial, context={"user": request.user}
        )
        serializer.is_valid(raise_exception=True)
        profile = service.update(pk, request.user, serializer.validated_data)
        return Response(ProfileSerializer(profile).data)


class UserProfileView(APIView):
    authentication_classes = [OptionalJWTAuthentication]

    def get(self, request, pk):
        profile, is_followed = UserService().public_profile(pk, request.user)
        return Response({
            "user": PublicProfileSerializer(profile).data,
            "is_followed": is_followed,
        })


class FollowToggleView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request, pk):
        target = UserService().fetch_active(pk)
        result = FollowService(request.user).toggle_follow(target)
        is_following = result["status"] == "following"
        return Response({
            "message": "User followed" if is_following else "User unfollowed",
            "is_following": is_following,
        })


class IsFollowingView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, pk):
        target = UserService().fetch(pk)
        return Response({"is_following": FollowService(request.user).is_following(target)})


class FollowListView(PageContextMixin, generics.ListAPIView):
    """Followers (or followed users) of a profile, flagged for the viewer."""
    authentication_classes = [OptionalJWTAuthentication]
    serializer_class = FollowUserSerializer
    pagination_class = UserPagination
    direction = "followers"

    def get_queryset(self):
        users = UserService()
        if self.direction == "followers":
            return users.followers(self.kwargs["pk"])
        return users.following(self.kwargs["pk"])

    def page_items(self, page):
        if self.direction == "followers":
            return [row.follower for row in page]
        return [row.following for row in page]

    def page_context(self, items):
        return {"followed_ids": UserService().followed_by_viewer(self.request.user, items)}


class LikedRecipesView(RecipePageMixin, generics.ListAPIView):
    authentication_classes = [OptionalJWTAuthentication]
    serializer_class = RecipeListSerializer
    pagination_class = RecipePagination

    def get_queryset(self):
        UserService().fetch(self.kwargs["pk"])
        return RecipeService().liked_by(self.kwargs["pk"])
