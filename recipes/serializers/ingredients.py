from rest_framework import serializers

from recipes.models import Ingredient


class IngredientSerializer(serializers.ModelSerializer):
    class Meta:
        model = Ingredient
        fields = ["id", "name"]
        read_only_fields = fields


class IngredientCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
