from django.conf import settings
from django.db.models.signals import post_save
from django.dispatch import receiver
import logging

from .models import StaffProfile

logger = logging.getLogger(__name__)


@receiver(post_save, sender=settings.AUTH_USER_MODEL)
def ensure_staff_profile(sender, instance, created, **kwargs):
    """
    Every user gets a StaffProfile; superusers start out as admins.
    """
    if not created:
        return
    role = StaffProfile.Role.ADMIN if instance.is_superuser else StaffProfile.Role.SALES_MANAGER
    StaffProfile.objects.get_or_create(user=instance, defaults={"role": role})
    logger.info(f"Created {role} profile for user {instance.get_username()}")
