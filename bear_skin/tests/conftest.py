# BS/bear_skin/tests/conftest.py
import pytest
from django.contrib.auth.models import AnonymousUser
from django.contrib.messages.storage.cookie import CookieStorage
from mixer.backend.django import mixer as _mixer

from bear_skin.models import ThemeSettings


@pytest.fixture(autouse=True)
def _db(db):
    """Автоматически включаем БД для всех тестов в этом пакете."""
    pass


@pytest.fixture
def mixer():
    """Удобный алиас, чтобы писать mixer.blend(...) в тестах."""
    return _mixer


@pytest.fixture
def make_request(rf):
    """Запрос от RequestFactory с пользователем и хранилищем сообщений."""
    def _make(path="/", user=None, **params):
        request = rf.get(path, params)
        request.user = user or AnonymousUser()
        request._messages = CookieStorage(request)
        return request
    return _make


@pytest.fixture
def theme_settings(mixer):
    """Фабрика записи ThemeSettings с предсказуемыми значениями по умолчанию."""
    def _blend(**fields):
        values = dict(home_banner=False, home_banner_file="", login_popup=False,
                      breadcrumb_separator="›", pager_quantity=9)
        values.update(fields)
        return mixer.blend(ThemeSettings, **values)
    return _blend
