from django.contrib import admin
from django.contrib.auth import get_user_model
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import StaffProfile

User = get_user_model()


class StaffProfileInline(admin.StackedInline):
    model = StaffProfile
    can_delete = False
    fieldsets = (
        ('Role & Contact', {
            'fields': ('role', 'phone', 'profile_image'),
        }),
        ('Social Accounts', {
            'fields': ('facebook_id', 'instagram_id', 'twitter_id', 'linkedin_id'),
            'classes': ('collapse',)
        }),
    )


admin.site.unregister(User)


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """
    Django's user admin with the dealership profile edited inline.
    """
    inlines = [StaffProfileInline]
    list_display = ['username', 'email', 'first_name', 'last_name', 'role', 'is_active']
    list_filter = BaseUserAdmin.list_filter + ('profile__role',)

    def role(self, obj):
        profile = getattr(obj, 'profile', None)
        return profile.get_role_display() if profile else '-'
    role.short_description = 'Role'
