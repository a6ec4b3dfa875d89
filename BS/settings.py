# BS/BS/settings.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: BS/BS/settings.py
# Назначение: глобальные настройки проекта Django + настройки темы bear_skin
#             и безопасная интеграция django-debug-toolbar
# Принципы: секреты и флаги: из .env, тулбар только при DEBUG и не в тестах
# ─────────────────────────────────────────────────────────────────────────────

from pathlib import Path  # стандартный модуль для работы с путями (Path-объект)
import os                 # модуль для чтения переменных окружения и работы с ОС
import socket             # модуль нужен для вычисления INTERNAL_IPS (Docker/WSL кейсы)
import sys                # проверка, запущены ли мы под pytest
from dotenv import load_dotenv  # загрузка значений из .env

# Назначаем кастомный обработчик 403 на функцию из приложения темы
handler403 = "bear_skin.views.custom_permission_denied"

# BASE_DIR: корень проекта. Используем для формирования других путей.
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Быстрая стартовая секция (важное для безопасности) ───────────────────────

# Подгружаем файл окружения .env, расположенный в корне проекта
load_dotenv(BASE_DIR / ".env")

# Флаг режима разработки. В продакшене DJANGO_DEBUG=0.
DEBUG = os.getenv("DJANGO_DEBUG", "1") == "1"

# Запуск под pytest: тулбар и прочие dev-украшения не нужны
RUNNING_TESTS = "pytest" in sys.modules

# Секретный ключ берём из переменной окружения KEY_DJ
SECRET_KEY = os.getenv("KEY_DJ")

# Без ключа в проде сразу падаем с понятной ошибкой; в Dev/тестах: временный ключ
if not SECRET_KEY:
    if not DEBUG:
        raise ValueError("❌ SECRET_KEY не найден в .env! Установите KEY_DJ.")
    SECRET_KEY = "dev-insecure-bear-skin-key"

# Список разрешённых хостов через запятую (в проде: обязательно заполнить)
ALLOWED_HOSTS: list[str] = [h for h in os.getenv("ALLOWED_HOSTS", "").split(",") if h]

# ── Приложения проекта ───────────────────────────────────────────────────────

INSTALLED_APPS = [
    "django.contrib.admin",            # админка Django (настройки темы)
    "django.contrib.auth",             # система аутентификации
    "django.contrib.contenttypes",     # контент-тайпы (связаны с моделями)
    "django.contrib.sessions",         # сессии
    "django.contrib.messages",         # сообщения (flash-сообщения)
    "django.contrib.staticfiles",      # работа со статикой
    "rest_framework",                  # DRF: API пейджера
    "bear_coat",                       # подтема: выше базовой, чтобы её шаблоны перекрывали bear_skin
    "bear_skin",                       # базовая тема
    "django_cleanup.apps.CleanupConfig",  # django-cleanup (удаление старых баннеров)
    # "debug_toolbar": подключим ниже условно, чтобы в проде не торчал
]

# Опциональный флажок для быстрой деактивации тулбара даже при DEBUG=True
ENABLE_DEBUG_TOOLBAR = os.getenv("ENABLE_DEBUG_TOOLBAR", "1") == "1" and not RUNNING_TESTS

# Подключим debug_toolbar только в режиме разработки и если не отключён переменной
if DEBUG and ENABLE_DEBUG_TOOLBAR:
    INSTALLED_APPS += ["debug_toolbar"]  # добавляем приложение тулбара

# ── Middleware ───────────────────────────────────────────────────────────────

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",        # базовая безопасность
    "django.contrib.sessions.middleware.SessionMiddleware", # поддержка сессий
    "django.middleware.common.CommonMiddleware",            # общие улучшения (ETag и пр.)
    "django.middleware.csrf.CsrfViewMiddleware",            # защита от CSRF
    "django.contrib.auth.middleware.AuthenticationMiddleware",  # аутентификация пользователя
    "django.contrib.messages.middleware.MessageMiddleware",     # флеш-сообщения
    "django.middleware.clickjacking.XFrameOptionsMiddleware",   # защита от clickjacking
    "bear_skin.middleware.XUACompatibleMiddleware",             # X-UA-Compatible для старых IE
]

# Если тулбар включён: вставляем его middleware сразу после SecurityMiddleware
if DEBUG and ENABLE_DEBUG_TOOLBAR:
    _dt_mw = "debug_toolbar.middleware.DebugToolbarMiddleware"  # название middleware тулбара
    sec_idx = MIDDLEWARE.index("django.middleware.security.SecurityMiddleware")
    if _dt_mw not in MIDDLEWARE:
        MIDDLEWARE.insert(sec_idx + 1, _dt_mw)  # вставляем на нужную позицию (рекомендация Django)

# ── Вход/выход ───────────────────────────────────────────────────────────────

LOGIN_URL = "login"                       # страница логина (оформлена темой)
LOGIN_REDIRECT_URL = "bear_skin:home"     # куда отправлять после логина
LOGOUT_REDIRECT_URL = "bear_skin:home"    # куда отправлять после логаута

# ── Урлы и WSGI ──────────────────────────────────────────────────────────────

ROOT_URLCONF = "BS.urls"              # корневой файл с маршрутами

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",  # бэкенд движка шаблонов
        "DIRS": [BASE_DIR / "templates"],  # дополнительная папка с шаблонами проекта
        "APP_DIRS": True,                  # включаем поиск шаблонов в приложениях
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",  # добавляет request в контекст
                "django.contrib.auth.context_processors.auth", # добавляет user/permissions
                "django.contrib.messages.context_processors.messages",  # для messages
                "bear_skin.context_processors.theme",          # {{ theme.* }}: классы body, стили
            ],
        },
    },
]

WSGI_APPLICATION = "BS.wsgi.application"  # точка входа WSGI-сервера

# ── База данных ──────────────────────────────────────────────────────────────
# SQLite хватает: в БД лежат только настройки темы, сессии и пользователи.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",    # движок БД
        "NAME": BASE_DIR / "db.sqlite3",           # путь до файла SQLite
        "CONN_MAX_AGE": 60,                        # удерживаем коннект некоторое время (секунды)
    }
}

# ── Валидаторы паролей ──────────────────────────────────────────────────────

AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator"},  # проверка на похожесть
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},            # минимальная длина
    {"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},           # запрет частых паролей
    {"NAME": "django.contrib.auth.password_validation.NumericPasswordValidator"},          # запрет чисто цифровых
]

# ── Локализация и часовой пояс ──────────────────────────────────────────────

LANGUAGE_CODE = "en-us"       # язык разметки темы
TIME_ZONE = "Europe/Moscow"   # часовой пояс проекта
USE_I18N = True               # поддержка интернационализации
USE_TZ = True                 # хранить даты/время в БД в UTC (рекомендовано)

# ── Статика ─────────────────────────────────────────────────────────────────

STATIC_URL = "static/"                 # URL-префикс для статики
STATIC_ROOT = BASE_DIR / "staticfiles"  # сюда collectstatic складывает файлы для nginx

# ── Первичный ключ по умолчанию ─────────────────────────────────────────────

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"  # тип авто-поля id

# ── DRF: базовые безопасные настройки ────────────────────────────────────────
REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",  # JSON рендерер
        # При необходимости можно добавить Browsable API:
        "rest_framework.renderers.BrowsableAPIRenderer",  # удобно при разработке
    ],
}

# ── Медиа (баннер главной и работа django-cleanup) ──────────────────────────
MEDIA_URL = "/media/"      # URL-префикс для медиа
MEDIA_ROOT = BASE_DIR / "media"  # директория хранения медиафайлов

# ── Тема ────────────────────────────────────────────────────────────────────
BEAR_SKIN = {
    "ACTIVE_THEME": os.getenv("BEAR_SKIN_THEME", "bear_coat"),  # активная тема (или базовая bear_skin)
    "SITE_NAME": os.getenv("SITE_NAME", "Bear Skin"),           # имя сайта
    "PAGER_QUANTITY": 9,                                        # номеров в пейджере (можно менять в админке)
    "BREADCRUMB_SEPARATOR": "›",                                # разделитель крошек
    "STYLESHEETS": {
        "bear_skin/css/bear_skin.css": {"media": "all"},
    },
}

# ── Логирование: в stdout (перехватит gunicorn/supervisor) ──────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {"console": {"class": "logging.StreamHandler"}},
    "loggers": {
        "bear_skin": {"handlers": ["console"], "level": os.getenv("BEAR_SKIN_LOG_LEVEL", "INFO")},
        "bear_coat": {"handlers": ["console"], "level": os.getenv("BEAR_SKIN_LOG_LEVEL", "INFO")},
    },
}

# ── Django Debug Toolbar: INTERNAL_IPS и конфигурация ───────────────────────

if DEBUG and ENABLE_DEBUG_TOOLBAR:
    # INTERNAL_IPS определяет, с каких IP показывать тулбар.
    INTERNAL_IPS = ["127.0.0.1", "localhost", "::1"]  # базовые локальные значения

    # Дополнительная «магия» для Docker/WSL: вычисляем подсеть и подставляем *.1
    try:
        hostname, _, ips = socket.gethostbyname_ex(socket.gethostname())  # получаем список IP
        INTERNAL_IPS += [ip[:-1] + "1" for ip in ips if "." in ip]        # 172.17.0.X -> 172.17.0.1
    except OSError:
        pass  # если не получилось: ничего страшного

    # Уберём дубликаты, сохраняя порядок
    INTERNAL_IPS = list(dict.fromkeys(INTERNAL_IPS))

    # Базовая конфигурация тулбара: панели свёрнуты по умолчанию
    DEBUG_TOOLBAR_CONFIG = {
        "SHOW_COLLAPSED": True,                         # панели свёрнуты по умолчанию
        "RESULTS_CACHE_SIZE": 50,                       # кэш последних результатов
        "ROOT_TAG_EXTRA_ATTRS": 'style="z-index:9999"', # перекрыть фиксированные хедеры
    }

    # Набор панелей: для темы важнее всего шаблоны и статика
    DEBUG_TOOLBAR_PANELS = [
        "debug_toolbar.panels.timer.TimerPanel",
        "debug_toolbar.panels.settings.SettingsPanel",
        "debug_toolbar.panels.headers.HeadersPanel",
        "debug_toolbar.panels.request.RequestPanel",
        "debug_toolbar.panels.sql.SQLPanel",
        "debug_toolbar.panels.templates.TemplatesPanel",
        "debug_toolbar.panels.staticfiles.StaticFilesPanel",
        "debug_toolbar.panels.logging.LoggingPanel",
    ]
