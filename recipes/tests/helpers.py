from decimal import Decimal
import uuid

from django.utils import timezone

from recipes.models import Ingredient, Recipe, RecipeIngredient, RecipeStep, User
from recipes.services.tokens import TokenService


def make_user(**kwargs):
    username = kwargs.pop("username", f"user_{uuid.uuid4().hex[:8]}")
    email = kwargs.pop("email", f"{username}@example.org")
    password = kwargs.pop("password", "Password123")

    return User.objects.create_user(
        username=username,
        email=email,
        password=password,
        bio=kwargs.pop("bio", "Test bio"),
        **kwargs,
    )


def make_moderator(**kwargs):
    return make_user(role=User.ROLE_MODERATOR, **kwargs)


def make_recipe(
    *,
    author=None,
    title="test recipe",
    status=Recipe.STATUS_PUBLISHED,
    steps=("Chop", "Cook"),
    ingredients=(("salt", "1", "tsp"),),
    **extra,
):
    """
    creates and returns a recipe with ordered steps and ingredient links.
    published recipes get published_at set.
    """
    if author is None:
        author = make_user()

    recipe = Recipe.objects.create(
        author=author,
        title=title,
        description=extra.pop("description", "desc"),
        cooking_time=extra.pop("cooking_time", 20),
        servings=extra.pop("servings", 2),
        thumbnail_url=extra.pop("thumbnail_url", "https://example.org/thumb.jpg"),
        status=status,
        published_at=timezone.now() if status == Recipe.STATUS_PUBLISHED else None,
        **extra,
    )
    for position, content in enumerate(steps, start=1):
        RecipeStep.objects.create(recipe=recipe, order_index=position, content=content)
    for name, quantity, unit in ingredients:
        ingredient, _ = Ingredient.objects.get_or_create(name=name)
        RecipeIngredient.objects.create(
            recipe=recipe, ingredient=ingredient, quantity=Decimal(quantity), unit=unit
        )
    return recipe


def recipe_payload(**overrides):
    """Valid JSON body for creating a recipe."""
    payload = {
        "title": "Tomato pasta",
        "description": "Weeknight classic",
        "cooking_time": 25,
        "servings": 2,
        "thumbnail_url": "https://example.org/pasta.jpg",
        "ingredients": [
            {"name": "Pasta", "quantity": "200", "unit": "g"},
            {"name": "  Cherry   Tomatoes ", "quantity": "150.5", "unit": "g"},
        ],
        "steps": [
            {"order_index": 1, "content": "Boil the pasta"},
            {"order_index": 2, "content": "Add the tomatoes", "image_url": "https://example.org/2.jpg"},
        ],
    }
    payload.update(overrides)
    return payload


def bearer(user, token_type="access"):
    """Authorization header value for an access (or refresh) token of user."""
    tokens = TokenService().issue_pair(user)
    return f"Bearer {tokens[token_type + '_token']}"
