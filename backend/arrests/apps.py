from django.apps import AppConfig


class ArrestsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "arrests"
    verbose_name = "Arrests"
