# BS/bear_skin/api_urls.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: BS/bear_skin/api_urls.py
# Назначение: маршруты API темы
# ─────────────────────────────────────────────────────────────────────────────

from django.urls import path                 # функции маршрутизации
from .api_views import PagerWindowView       # API пейджера

urlpatterns = [
    path("pager/", PagerWindowView.as_view(), name="pager"),  # слоты пейджера в JSON
]
