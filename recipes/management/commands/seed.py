"""Management command to seed the database with sample users, recipes, and related data."""

from random import choice, randint, sample
from typing import List

from django.core.management.base import BaseCommand
from django.db import IntegrityError, transaction
from faker import Faker

from recipes.models import Comment, Follow, Ingredient, Like, Recipe, RecipeIngredient, RecipeStep, User
from .seed_data import bio_phrases, comment_phrases, thumbnail_url_pool, user_fixtures
from .seed_utils import SeedHelpers, create_email, create_username, ingredient_pool


class Command(SeedHelpers, BaseCommand):
    """Management command to seed the database with sample users/recipes/data."""
    DEFAULT_PASSWORD = 'Password123'
    help = 'Seeds the database with sample data'

    def add_arguments(self, parser):
        parser.add_argument("--users", type=int, default=20, help="Total number of users to reach.")
        parser.add_argument(
            "--recipes-per-user", type=int, default=2, help="Upper bound of recipes created per user."
        )

    def __init__(self, *args, **kwargs):
        """Set up faker instance for generating seed content."""
        super().__init__(*args, **kwargs)
        self.faker = Faker('en_GB')

    def handle(self, *args, **options):
        """Run the full seeding sequence."""
        self.create_users(options["users"])
        self.seed_follows(follow_k=5)
        ingredient_ids = self.seed_ingredients()
        self.seed_recipes(per_user=options["recipes_per_user"], ingredient_ids=ingredient_ids)
        self.seed_likes(max_likes_per_recipe=10)
        self.seed_comments(max_comments_per_recipe=5)
        self.stdout.write(self.style.SUCCESS("Seeding complete"))

    def create_users(self, user_count):
        """Fixture users first (the first one is a moderator), then random ones."""
        for index, data in enumerate(user_fixtures[:user_count]):
            role = User.ROLE_MODERATOR if index == 0 else User.ROLE_USER
            self.try_create_user(data, role=role)
        attempts = 0
        while User.objects.count() < user_count and attempts < user_count * 5:
            attempts += 1
            first_name = self.faker.first_name()
            last_name = self.faker.last_name()
            self.try_create_user({
                'username': create_username(first_name, last_name),
                'email': create_email(first_name, last_name),
                'first_name': first_name,
                'last_name': last_name,
            })
        self.stdout.write(f"Users in database: {User.objects.count()}")

    def try_create_user(self, data, role=User.ROLE_USER):
        """Create a user, skipping duplicate usernames or emails."""
        if User.objects.filter(username__iexact=data['username']).exists():
            return
        if User.objects.filter(email__iexact=data['email']).exists():
            return
        try:
            with transaction.atomic():
                User.objects.create_user(
                    username=data['username'],
                    email=data['email'],
                    password=Command.DEFAULT_PASSWORD,
                    first_name=data['first_name'],
                    last_name=data['last_name'],
                    bio=choice(bio_phrases),
                    role=role,
                )
        except IntegrityError:
            self.stdout.write(self.style.WARNING(f"Skipped user {data['username']}"))

    def seed_follows(self, follow_k: int = 5) -> None:
        """Create follow edges between sample users."""
        ids = list(User.objects.values_list("id", flat=True))
        if len(ids) < 2:
            return
        k = max(0, min(follow_k, len(ids) - 1))
        rows = []
        for follower in ids:
            pool = [x for x in ids if x != follower]
            for following in sample(pool, k):
                rows.append(Follow(follower_id=follower, following_id=following))

        with transaction.atomic():
            Follow.objects.bulk_create(rows, ignore_conflicts=True, batch_size=1000)
        self.stdout.write(f"follows created (attempted): {len(rows)}")

    def seed_ingredients(self):
        """Make sure the shared catalogue holds the base pool; return name -> id."""
        rows = [Ingredient(name=name) for name in ingredient_pool()]
        Ingredient.objects.bulk_create(rows, ignore_conflicts=True, batch_size=500)
        return dict(Ingredient.objects.filter(name__in=ingredient_pool()).values_list("name", "id"))

    def seed_recipes(self, *, per_user: int, ingredient_ids) -> None:
        """Published recipes with steps and ingredient links for every user."""
        user_ids = list(User.objects.values_list("id", flat=True))
        if not user_ids or per_user < 1:
            return

        created = 0
        for author_id in user_ids:
            for _ in range(randint(1, per_user)):
                with transaction.atomic():
                    recipe = self._build_recipe(author_id, thumbnail_url_pool)
                    recipe.save()
                    RecipeStep.objects.bulk_create(self._build_steps(recipe.pk, min_steps=3, max_steps=7))
                    RecipeIngredient.objects.bulk_create(self._build_ingredient_links(recipe.pk, ingredient_ids))
                created += 1
        self.stdout.write(f"Recipes created: {created}")

    def seed_likes(self, max_likes_per_recipe: int = 10) -> None:
        """Create random likes for recipes up to a max per recipe."""
        users = list(User.objects.values_list("id", flat=True))
        recipes = list(Recipe.objects.values_list("id", flat=True))
        if not users or not recipes:
            return

        rows: List[Like] = []
        for recipe_id in recipes:
            for user_id in sample(users, randint(0, min(max_likes_per_recipe, len(users)))):
                rows.append(Like(user_id=user_id, recipe_id=recipe_id))

        with transaction.atomic():
            Like.objects.bulk_create(rows, ignore_conflicts=True, batch_size=1000)
        self.stdout.write(f"likes created: {len(rows)}")

    def seed_comments(self, max_comments_per_recipe: int = 5) -> None:
        """Generate random rated comments for each recipe."""
        users = list(User.objects.values_list("id", flat=True))
        recipes = list(Recipe.objects.values_list("id", flat=True))
        if not users or not recipes:
            return

        rows: List[Comment] = []
        for recipe_id in recipes:
            for user_id in sample(users, min(len(users), randint(0, max_comments_per_recipe))):
                rows.append(
                    Comment(
                        recipe_id=recipe_id,
                        user_id=user_id,
                        content=choice(comment_phrases),
                        rating=randint(0, 5),
                    )
                )

        Comment.objects.bulk_create(rows, batch_size=500)
        self.stdout.write(f"Comments created: {len(rows)}")
