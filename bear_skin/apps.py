from django.apps import AppConfig


class BearSkinConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "bear_skin"
    verbose_name = "Тема Bear Skin"

    def ready(self):
        # Регистрируем хуки базовой темы в реестре (декораторы срабатывают при импорте)
        from .services import markup, preprocess  # noqa: F401
