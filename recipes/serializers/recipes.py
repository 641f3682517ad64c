from rest_framework import serializers

from recipes.models import Recipe, RecipeIngredient, RecipeStep
from .users import UserSummarySerializer


class StepItemSerializer(serializers.Serializer):
    order_index = serializers.IntegerField(
        min_value=1, error_messages={"min_value": "Step order index must start at 1"}
    )
    content = serializers.CharField(max_length=2000)
    image_url = serializers.URLField(max_length=500, required=False, allow_blank=True)


class IngredientItemSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    quantity = serializers.DecimalField(max_digits=10, decimal_places=2)
    unit = serializers.CharField(max_length=50, allow_blank=True)

    def validate_quantity(self, value):
        if value <= 0:
            raise serializers.ValidationError("Quantity must be greater than 0")
        return value


class RecipeWriteSerializer(serializers.Serializer):
    """Input for creating a recipe; used with partial=True for updates."""
    title = serializers.CharField(max_length=255)
    description = serializers.CharField(max_length=4000, required=False, allow_blank=True)
    cooking_time = serializers.IntegerField(
        min_value=5, error_messages={"min_value": "Cooking time must be at least 5 minutes"}
    )
    servings = serializers.IntegerField(
        min_value=1, error_messages={"min_value": "Servings must be at least 1"}
    )
    thumbnail_url = serializers.URLField(max_length=500)
    ingredients = IngredientItemSerializer(many=True, allow_empty=False)
    steps = StepItemSerializer(many=True, allow_empty=False)

    def _full_items(self, serializer_class, field_name, value):
        # partial=True also skips required fields of nested items
        if not self.partial:
            return value
        items = serializer_class(data=self.initial_data[field_name], many=True)
        if not items.is_valid():
            raise serializers.ValidationError(items.errors)
        return items.validated_data

    def validate_ingredients(self, value):
        return self._full_items(IngredientItemSerializer, "ingredients", value)

    def validate_steps(self, value):
        return self._full_items(StepItemSerializer, "steps", value)


class StepSerializer(serializers.ModelSerializer):
    class Meta:
        model = RecipeStep
        fields = ["order_index", "content", "image_url"]


class RecipeIngredientSerializer(serializers.ModelSerializer):
    id = serializers.IntegerField(source="ingredient.id", read_only=True)
    name = serializers.CharField(source="ingredient.name", read_only=True)

    class Meta:
        model = RecipeIngredient
        fields = ["id", "name", "quantity", "unit"]


class RecipeListSerializer(serializers.ModelSerializer):
    """Recipe card: annotated counters come from RecipeRepo.queryset()."""
    author = UserSummarySerializer(read_only=True)
    likes_count = serializers.IntegerField(read_only=True, default=0)
    comments_count = serializers.IntegerField(read_only=True, default=0)
    average_rating = serializers.SerializerMethodField()
    is_liked = serializers.SerializerMethodField()

    class Meta:
        model = Recipe
        fields = [
            "id",
            "title",
            "description",
            "cooking_time",
            "servings",
            "thumbnail_url",
            "status",
            "author",
            "likes_count",
            "comments_count",
            "average_rating",
            "is_liked",
            "published_at",
            "created_at",
        ]
        read_only_fields = fields

    def get_average_rating(self, obj):
        value = getattr(obj, "average_rating", None)
        return round(float(value), 2) if value is not None else None

    def get_is_liked(self, obj):
        return obj.pk in self.context.get("liked_ids", ())


class RecipeDetailSerializer(RecipeListSerializer):
    steps = StepSerializer(many=True, read_only=True)
    ingredients = RecipeIngredientSerializer(source="recipe_ingredients", many=True, read_only=True)

    class Meta(RecipeListSerializer.Meta):
        fields = RecipeListSerializer.Meta.fields + [
            "rejection_reason",
            "updated_at",
            "steps",
            "ingredients",
        ]
        read_only_fields = fields
