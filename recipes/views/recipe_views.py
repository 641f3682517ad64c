from rest_framework import generics, status
from rest_framework.permissions import IsAuthenticated, IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from rest_framework.views import APIView

from recipes.authentication import OptionalJWTAuthentication
from recipes.pagination import RecipePagination
from recipes.serializers import RecipeDetailSerializer, RecipeListSerializer, RecipeWriteSerializer
from recipes.services import RecipeService, UserService
from .mixins import RecipePageMixin


def recipe_detail_data(recipe, is_liked=False):
    context = {"liked_ids": {recipe.pk} if is_liked else set()}
    return RecipeDetailSerializer(recipe, context=context).data


class RecipeListCreateView(RecipePageMixin, generics.ListAPIView):
    """Published recipe feed (`?search=`) and recipe creation."""
    authentication_classes = [OptionalJWTAuthentication]
    permission_classes = [IsAuthenticatedOrReadOnly]
    serializer_class = RecipeListSerializer
    pagination_class = RecipePagination

    def get_queryset(self):
        return RecipeService().list_published(search=self.request.query_params.get("search"))

    def post(self, request):
        serializer = RecipeWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        recipe = RecipeService().create(request.user, serializer.validated_data)
        return Response(recipe_detail_data(recipe), status=status.HTTP_201_CREATED)


class RecipeDetailView(APIView):
    authentication_classes = [OptionalJWTAuthentication]
    permission_classes = [IsAuthenticatedOrReadOnly]

    def get(self, request, pk):
        service = RecipeService()
        recipe = service.fetch_visible(pk, request.user)
        return Response(recipe_detail_data(recipe, service.is_liked(request.user, recipe)))

    def put(self, request, pk):
        return self._update(request, pk, partial=False)

    def patch(self, request, pk):
        return self._update(request, pk, partial=True)

    def _update(self, request, pk, partial):
        serializer = RecipeWriteSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        service = RecipeService()
        recipe = service.update(pk, request.user, serializer.validated_data)
        return Response(recipe_detail_data(recipe, service.is_liked(request.user, recipe)))

    def delete(self, request, pk):
        RecipeService().delete(pk, request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)


class RecipeSubmitView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request, pk):
        recipe = RecipeService().submit(pk, request.user)
        return Response({
            "message": "Recipe submitted for review",
            "recipe": recipe_detail_data(recipe),
        })


def like_response(is_liked, likes_count):
    return Response({
        "message": "Recipe liked" if is_liked else "Recipe unliked",
        "is_liked": is_liked,
        "likes_count": likes_count,
    })


class RecipeLikeView(APIView):
    """Toggle the caller's like on a recipe."""
    permission_classes = [IsAuthenticated]

    def post(self, request, pk):
        return like_response(*RecipeService().toggle_like(request.user, pk))


class RecipeFavoriteView(APIView):
    """Idempotent like (POST) and unlike (DELETE)."""
    permission_classes = [IsAuthenticated]

    def post(self, request, pk):
        return like_response(*RecipeService().set_like(request.user, pk, True))

    def delete(self, request, pk):
        return like_response(*RecipeService().set_like(request.user, pk, False))


class UserRecipesView(RecipePageMixin, generics.ListAPIView):
    """A user's recipes; drafts and rejected ones only for the owner."""
    authentication_classes = [OptionalJWTAuthentication]
    serializer_class = RecipeListSerializer
    pagination_class = RecipePagination

    def get_queryset(self):
        author = UserService().fetch(self.kwargs["user_id"])
        return RecipeService().list_for_author(author.pk, viewer=self.request.user)
