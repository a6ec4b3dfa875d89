# bear_coat/apps.py
from django.apps import AppConfig


class BearCoatConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "bear_coat"
    verbose_name = "Подтема Bear Coat"

    def ready(self):
        # Подтема наследует bear_skin: её хуки отрабатывают после хуков базовой темы
        from . import theme_hooks  # noqa: F401
