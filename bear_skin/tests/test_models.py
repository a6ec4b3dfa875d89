from bear_skin.conf import get_setting, theme_setting
from bear_skin.models import ThemeSettings


def test_load_without_rows_returns_defaults():
    stored = ThemeSettings.load()
    assert stored.pk is None
    assert stored.pager_quantity == 9
    assert stored.home_banner_url == ""


def test_save_normalises_values(theme_settings):
    stored = theme_settings(breadcrumb_separator="   ", pager_quantity=0)
    stored.refresh_from_db()
    assert stored.breadcrumb_separator == "›"
    assert stored.pager_quantity == 1


def test_latest_row_wins(theme_settings):
    theme_settings(pager_quantity=5)
    latest = theme_settings(pager_quantity=7)
    assert ThemeSettings.load() == latest
    assert theme_setting("PAGER_QUANTITY") == 7


def test_theme_setting_falls_back_to_settings():
    assert theme_setting("PAGER_QUANTITY") == get_setting("PAGER_QUANTITY") == 9
    assert theme_setting("SITE_NAME") == get_setting("SITE_NAME")


def test_str(theme_settings):
    assert str(ThemeSettings()) == "Настройки темы"
    assert str(theme_settings()).startswith("Настройки темы от ")
