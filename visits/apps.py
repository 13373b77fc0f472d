from django.apps import AppConfig


class VisitsConfig(AppConfig):
    name = "visits"
    verbose_name = "Visit requests"
    default_auto_field = "django.db.models.BigAutoField"
