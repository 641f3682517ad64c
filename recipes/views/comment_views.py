from rest_framework import generics, status
from rest_framework.permissions import IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from rest_framework.views import APIView

from recipes.authentication import OptionalJWTAuthentication
from recipes.pagination import CommentPagination
from recipes.serializers import CommentSerializer, CommentWriteSerializer
from recipes.services import CommentService, RecipeService


class RecipeCommentsView(generics.ListAPIView):
    """Comments of a visible recipe, newest first; POST adds one."""
    authentication_classes = [OptionalJWTAuthentication]
    permission_classes = [IsAuthenticatedOrReadOnly]
    serializer_class = CommentSerializer
    pagination_class = CommentPagination

    def get_queryset(self):
        recipe = RecipeService().fetch_visible(self.kwargs["pk"], self.request.user)
        return CommentService().list_for_recipe(recipe)

    def post(self, request, pk):
        recipe = RecipeService().fetch_visible(pk, request.user)
        serializer = CommentWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        comment = CommentService().create_comment(recipe, request.user, serializer.validated_data)
        return Response(
            {"message": "Comment created", "comment": CommentSerializer(comment).data},
            status=status.HTTP_201_CREATED,
        )


class CommentDetailView(APIView):
    authentication_classes = [OptionalJWTAuthentication]
    permission_classes = [IsAuthenticatedOrReadOnly]

    def get_comment(self, request, pk, comment_id):
        recipe = RecipeService().fetch_visible(pk, request.user)
        return CommentService().fetch(recipe, comment_id)

    def get(self, request, pk, comment_id):
        return Response(CommentSerializer(self.get_comment(request, pk, comment_id)).data)

    def patch(self, request, pk, comment_id):
        comment = self.get_comment(request, pk, comment_id)
        serializer = CommentWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        comment = CommentService().update_comment(comment, request.user, serializer.validated_data)
        return Response(CommentSerializer(comment).data)

    def delete(self, request, pk, comment_id):
        comment = self.get_comment(request, pk, comment_id)
        CommentService().delete_comment(comment, request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)
