import pytest
from django.core.exceptions import ImproperlyConfigured

from bear_skin.theme import ThemeRegistry, registry


@pytest.fixture
def themes():
    """Отдельный реестр: base <- child."""
    reg = ThemeRegistry()
    base = reg.theme("base")
    child = reg.theme("child", base="base")
    return reg, base, child


def test_chain_from_base_to_active(themes):
    reg, base, child = themes
    assert reg.chain("child") == [base, child]
    assert reg.chain("base") == [base]


def test_unknown_theme(themes):
    reg, _, _ = themes
    with pytest.raises(ImproperlyConfigured):
        reg.chain("missing")


def test_cycle_in_bases():
    reg = ThemeRegistry()
    reg.theme("a", base="b")
    reg.theme("b", base="a")
    with pytest.raises(ImproperlyConfigured):
        reg.chain("a")


def test_preprocess_runs_base_first(themes):
    reg, base, child = themes
    calls = []
    base.preprocess("page")(lambda v: calls.append("base"))
    child.preprocess("page")(lambda v: calls.append("child"))

    reg.preprocess("page", {}, active="child")
    assert calls == ["base", "child"]


def test_override_from_most_specific_theme(themes):
    reg, base, child = themes
    base.override("links")(lambda v: "base")
    assert reg.render("links", {}, active="child") == "base"

    child.override("links")(lambda v: "child")
    assert reg.render("links", {}, active="child") == "child"
    assert reg.render("links", {}, active="base") == "base"


def test_suggestion_falls_back_to_base_hook(themes):
    reg, base, _ = themes
    seen = []
    base.preprocess("links")(lambda v: seen.append("links"))
    base.preprocess("links__footer")(lambda v: seen.append("links__footer"))
    base.override("links")(lambda v: "plain")

    assert reg.render("links__footer", {}, active="child") == "plain"
    assert seen == ["links", "links__footer"]


def test_suggestion_override_wins(themes):
    reg, base, _ = themes
    base.override("links")(lambda v: "plain")
    base.override("links__footer")(lambda v: "footer")
    assert reg.render("links__footer", {}, active="base") == "footer"


def test_render_without_markup(themes):
    reg, _, _ = themes
    with pytest.raises(LookupError):
        reg.render("nothing", {}, active="child")


def test_alter_runs_whole_chain(themes):
    reg, base, child = themes
    base.alter("css")(lambda css, **ctx: css.pop("a.css", None))
    child.alter("css")(lambda css, **ctx: css.pop("b.css", None))
    assert reg.alter("css", {"a.css": {}, "b.css": {}, "c.css": {}}, active="child") == {"c.css": {}}


def test_theme_is_created_once(themes):
    reg, base, _ = themes
    assert reg.theme("base") is base


def test_installed_themes():
    # активная тема из settings.BEAR_SKIN: подтема поверх базовой
    assert [t.name for t in registry.chain()] == ["bear_skin", "bear_coat"]


def test_active_theme_from_settings(settings):
    settings.BEAR_SKIN = dict(settings.BEAR_SKIN, ACTIVE_THEME="bear_skin")
    assert [t.name for t in registry.chain()] == ["bear_skin"]
