# BS/BS/urls.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: BS/BS/urls.py
# Назначение: корневые URL-маршруты проекта + безопасное подключение debug_toolbar
# ─────────────────────────────────────────────────────────────────────────────

from django.contrib import admin            # админка Django
from django.urls import path, include       # функции для описания маршрутов
from django.conf import settings            # доступ к settings для проверки DEBUG
from django.conf.urls.static import static  # helper для медиа-URL

from bear_skin.views import ThemedLoginView  # вход, оформленный темой

urlpatterns = [
    path("admin/", admin.site.urls),                                      # маршрут в админку
    path("accounts/login/", ThemedLoginView.as_view(), name="login"),     # логин (перекрывает стандартный)
    path("accounts/", include("django.contrib.auth.urls")),               # logout, смена пароля и пр.
    path("", include(("bear_skin.urls", "bear_skin"), namespace="bear_skin")),  # маршруты темы
]

# Подключаем URL-ы тулбара только если включён DEBUG и тулбар активирован
if settings.DEBUG and getattr(settings, "ENABLE_DEBUG_TOOLBAR", False):
    import debug_toolbar  # импортируем пакет только при необходимости
    urlpatterns = [path("__debug__/", include(debug_toolbar.urls))] + urlpatterns

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)

# Назначаем кастомный обработчик 403 (дублируем настройку как в settings)
handler403 = "bear_skin.views.custom_permission_denied"
