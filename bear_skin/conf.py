# BS/bear_skin/conf.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: BS/bear_skin/conf.py
# Назначение: настройки темы (словарь BEAR_SKIN в settings + значения из БД)
# ─────────────────────────────────────────────────────────────────────────────

from typing import Any, Dict

from django.conf import settings

DEFAULTS: Dict[str, Any] = {
    "ACTIVE_THEME": "bear_coat",          # активная тема (подтема наследует bear_skin)
    "SITE_NAME": "Bear Skin",             # имя сайта для заголовка главной
    "PAGER_QUANTITY": 9,                  # сколько номеров страниц показывать
    "BREADCRUMB_SEPARATOR": "›",          # разделитель «хлебных крошек»
    "STYLESHEETS": {                      # подключаемые стили: путь → опции
        "bear_skin/css/bear_skin.css": {"media": "all"},
    },
    "EXCLUDED_CSS": [                     # стили, которые базовая тема выкидывает всегда
        "system/system.messages.css",
        "system/system.menus.css",
        "views/css/views.css",
    ],
}

# Эти значения можно переопределить в админке (модель ThemeSettings)
DB_OVERRIDES = {
    "PAGER_QUANTITY": "pager_quantity",
    "BREADCRUMB_SEPARATOR": "breadcrumb_separator",
}


def get_setting(name: str) -> Any:
    """Значение из settings.BEAR_SKIN с откатом к DEFAULTS."""
    user_settings = getattr(settings, "BEAR_SKIN", None) or {}
    if name in user_settings:
        return user_settings[name]
    return DEFAULTS[name]


def theme_setting(name: str) -> Any:
    """Как get_setting, но сохранённая в БД запись ThemeSettings имеет приоритет."""
    field = DB_OVERRIDES.get(name)
    if field:
        from .models import ThemeSettings  # локальный импорт: conf читается до готовности реестра приложений

        stored = ThemeSettings.load()
        if stored.pk is not None:
            return getattr(stored, field)
    return get_setting(name)
