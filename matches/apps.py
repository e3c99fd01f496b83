from django.apps import AppConfig


class MatchesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "matches"

    def ready(self):
        # Register participant -> counter signal handlers
        from . import signals  # noqa: F401
