from django.contrib import admin
from django.contrib.auth import get_user_model
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin

User = get_user_model()

# Re-register User with the admin-focused list below (idempotent).
try:
    admin.site.unregister(User)
except admin.sites.NotRegistered:
    pass


@admin.register(User)
class UserAdmin(DjangoUserAdmin):
    """
    User list focused on who may use the admin API:
    e-mail is the login name there, is_staff grants access.
    """
    list_display = (
        "id",
        "email",
        "username",
        "is_staff",
        "is_superuser",
        "is_active",
        "date_joined",
        "last_login",
    )
    ordering = ("-date_joined", "-id")
    search_fields = ("username", "email")
    list_filter = ("is_staff", "is_superuser", "is_active")
