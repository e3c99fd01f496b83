from django.apps import AppConfig


class RacketsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "rackets"
