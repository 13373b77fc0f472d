from django.apps import AppConfig


class AdminAuthAppConfig(AppConfig):
    name = "admin_auth_app"
    verbose_name = "Admin authentication"
    default_auto_field = "django.db.models.BigAutoField"
