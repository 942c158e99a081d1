from django.db import models
from django.conf import settings
from django.utils.translation import gettext_lazy as _


class StaffProfile(models.Model):
    """
    Dealership-specific details for a Django auth user.

    Created automatically for every user (see signals). The role drives
    authorization: only admins may delete inventory or customers and change
    other users' roles.
    """

    class Role(models.TextChoices):
        ADMIN = "admin", _("Admin")
        SALES_MANAGER = "sales_manager", _("Sales Manager")
        SALES_REP = "sales_rep", _("Sales Representative")
        INVENTORY_MANAGER = "inventory_manager", _("Inventory Manager")

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="profile",
    )
    role = models.CharField(
        max_length=32,
        choices=Role.choices,
        default=Role.SALES_MANAGER,
    )
    phone = models.CharField(max_length=32, blank=True)
    profile_image = models.CharField(
        max_length=500,
        blank=True,
        help_text="URL of the profile picture"
    )

    # ===== Social Accounts =====
    facebook_id = models.CharField(max_length=255, blank=True)
    instagram_id = models.CharField(max_length=255, blank=True)
    twitter_id = models.CharField(max_length=255, blank=True)
    linkedin_id = models.CharField(max_length=255, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = 'Staff Profile'
        verbose_name_plural = 'Staff Profiles'

    def __str__(self):
        return f"{self.user.get_username()} ({self.get_role_display()})"

    @property
    def is_admin(self):
        return self.role == self.Role.ADMIN


def is_admin_user(user) -> bool:
    """True for superusers and for users whose profile role is admin."""
    if not user or not user.is_authenticated:
        return False
    if user.is_superuser:
        return True
    profile = getattr(user, "profile", None)
    return bool(profile and profile.is_admin)
