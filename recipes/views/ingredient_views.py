from rest_framework import generics, status
from rest_framework.permissions import IsAuthenticatedOrReadOnly
from rest_framework.response import Response

from recipes.authentication import OptionalJWTAuthentication
from recipes.pagination import IngredientPagination
from recipes.serializers import IngredientCreateSerializer, IngredientSerializer
from recipes.services import IngredientService


class IngredientListCreateView(generics.ListAPIView):
    """Ingredient catalogue by name; POST upserts by normalized name."""
    authentication_classes = [OptionalJWTAuthentication]
    permission_classes = [IsAuthenticatedOrReadOnly]
    serializer_class = IngredientSerializer
    pagination_class = IngredientPagination

    def get_queryset(self):
        return IngredientService().list(search=self.request.query_params.get("search"))

    def post(self, request):
        serializer = IngredientCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        ingredient, created = IngredientService().upsert_by_name(serializer.validated_data["name"])
        return Response(
            IngredientSerializer(ingredient).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )


class IngredientDetailView(generics.RetrieveAPIView):
    authentication_classes = [OptionalJWTAuthentication]
    serializer_class = IngredientSerializer

    def get_object(self):
        return IngredientService().fetch(self.kwargs["pk"])
