from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ThemeSettings",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now, editable=False, verbose_name="Создано")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Изменено")),
                ("home_banner", models.BooleanField(default=False, verbose_name="Баннер на главной")),
                ("home_banner_file", models.FileField(blank=True, default="", upload_to="bear_skin/banners/", verbose_name="Картинка баннера")),
                ("login_popup", models.BooleanField(default=False, verbose_name="Всплывающий вход")),
                ("breadcrumb_separator", models.CharField(default="›", max_length=10, verbose_name="Разделитель крошек")),
                ("pager_quantity", models.PositiveSmallIntegerField(default=9, verbose_name="Номеров в пейджере")),
            ],
            options={
                "verbose_name": "Настройки темы",
                "verbose_name_plural": "Настройки темы",
                "ordering": ["-updated_at", "-pk"],
            },
        ),
    ]
