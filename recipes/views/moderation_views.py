from rest_framework import generics
from rest_framework.response import Response
from rest_framework.views import APIView

from recipes.pagination import ModerationPagination
from recipes.permissions import IsModerator
from recipes.serializers import ModerationStatsSerializer, RecipeListSerializer, RejectSerializer
from recipes.services import ModerationService
from .recipe_views import recipe_detail_data


class ModerationQueueView(generics.ListAPIView):
    """Pending recipes, oldest submission first."""
    permission_classes = [IsModerator]
    serializer_class = RecipeListSerializer
    pagination_class = ModerationPagination

    def get_queryset(self):
        return ModerationService(self.request.user).queue()


class ApproveRecipeView(APIView):
    permission_classes = [IsModerator]

    def post(self, request, pk):
        recipe = ModerationService(request.user).approve(pk)
        return Response({"message": "Recipe approved", "recipe": recipe_detail_data(recipe)})


class RejectRecipeView(APIView):
    permission_classes = [IsModerator]

    def post(self, request, pk):
        serializer = RejectSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        recipe = ModerationService(request.user).reject(pk, serializer.validated_data["reason"])
        return Response({"message": "Recipe rejected", "recipe": recipe_detail_data(recipe)})


class ModerationStatsView(APIView):
    permission_classes = [IsModerator]

    def get(self, request):
        stats = ModerationService(request.user).stats()
        return Response(ModerationStatsSerializer(stats).data)


class UserBanView(APIView):
    """Ban (is_active=False) or unban a regular user."""
    permission_classes = [IsModerator]
    is_active = False

    def post(self, request, pk):
        user = ModerationService(request.user).set_active(pk, self.is_active)
        return Response({
            "message": "User unbanned" if self.is_active else "User banned",
            "id": str(user.pk),
            "is_active": user.is_active,
        })
