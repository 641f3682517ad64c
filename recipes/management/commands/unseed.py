from django.core.management.base import BaseCommand
from django.db import transaction

from recipes.models import Ingredient, User


class Command(BaseCommand):
    """
    Management command to remove (unseed) sample data from the database.

    Deletes every non-staff user, which cascades to their recipes, steps,
    ingredient links, likes, comments and follows, then drops catalogue
    ingredients no recipe uses anymore. Staff accounts are preserved.
    """

    help = 'Removes seeded sample data'

    def handle(self, *args, **options):
        with transaction.atomic():
            _, per_model = User.objects.filter(is_staff=False).delete()
            deleted_ingredients, _ = Ingredient.objects.filter(recipe_links__isnull=True).delete()

        deleted_users = per_model.get(User._meta.label, 0)
        self.stdout.write(self.style.SUCCESS(
            f"Deleted {deleted_users} non-staff users and {deleted_ingredients} unused ingredients."
        ))
