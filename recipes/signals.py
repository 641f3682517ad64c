import logging

from django.contrib.auth import get_user_model
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from recipes.services.cache import CacheService, user_cache_key

logger = logging.getLogger(__name__)

User = get_user_model()


@receiver(post_save, sender=User)
@receiver(post_delete, sender=User)
def invalidate_user_cache(sender, instance, **kwargs):
    """Drop the cached public record whenever a user row changes."""
    CacheService().delete(user_cache_key(instance.pk))
    logger.debug("Invalidated cache for user %s", instance.pk)
