from django.db import models
from django.utils import timezone


# --- БАЗА ДЛЯ ВСЕХ МОДЕЛЕЙ ---
class TimeStampedModel(models.Model):
    """Абстрактная база с датами создания/изменения."""
    created_at = models.DateTimeField(default=timezone.now, editable=False, verbose_name="Создано")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="Изменено")

    class Meta:
        abstract = True


class ThemeSettings(TimeStampedModel):
    """Настройки темы, редактируемые из админки (действует последняя запись)."""
    home_banner = models.BooleanField(default=False, verbose_name="Баннер на главной")
    home_banner_file = models.FileField(
        upload_to="bear_skin/banners/", blank=True, default="",
        verbose_name="Картинка баннера",
    )  # старые файлы подчищает django-cleanup
    login_popup = models.BooleanField(default=False, verbose_name="Всплывающий вход")
    breadcrumb_separator = models.CharField(max_length=10, default="›", verbose_name="Разделитель крошек")
    pager_quantity = models.PositiveSmallIntegerField(default=9, verbose_name="Номеров в пейджере")

    class Meta:
        verbose_name = "Настройки темы"
        verbose_name_plural = "Настройки темы"
        ordering = ["-updated_at", "-pk"]

    # нормализация: пустой разделитель заменяем стандартным, окно не меньше 1
    def save(self, *args, **kwargs):
        self.breadcrumb_separator = (self.breadcrumb_separator or "").strip() or "›"
        if not self.pager_quantity:
            self.pager_quantity = 1
        super().save(*args, **kwargs)

    @classmethod
    def load(cls) -> "ThemeSettings":
        """Последняя сохранённая запись или несохранённый экземпляр с дефолтами."""
        return cls.objects.order_by("-updated_at", "-pk").first() or cls()

    @property
    def home_banner_url(self) -> str:
        return self.home_banner_file.url if self.home_banner_file else ""

    def __str__(self) -> str:
        return f"Настройки темы от {self.updated_at:%d.%m.%Y %H:%M}" if self.pk else "Настройки темы"
