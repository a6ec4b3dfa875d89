# BS/bear_coat/tests/conftest.py
import pytest
from mixer.backend.django import mixer as _mixer

from bear_skin.models import ThemeSettings


@pytest.fixture(autouse=True)
def _db(db):
    """Автоматически включаем БД для всех тестов в этом пакете."""
    pass


@pytest.fixture
def popup_on():
    """Включённый всплывающий вход (баннер выключен)."""
    return _mixer.blend(ThemeSettings, login_popup=True, home_banner=False, home_banner_file="",
                        breadcrumb_separator="›", pager_quantity=9)


@pytest.fixture
def banner_on():
    """Баннер на главной без картинки: выводится заглушка .default."""
    return _mixer.blend(ThemeSettings, login_popup=False, home_banner=True, home_banner_file="",
                        breadcrumb_separator="›", pager_quantity=9)
