# BS/bear_skin/services/preprocess.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: BS/bear_skin/services/preprocess.py
# Назначение: preprocess-хуки базовой темы: добавляют BEM-классы, ARIA-роли
#             и вспомогательные переменные в «мешок» переменных шаблона
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations

from typing import Any, Dict, List

from django.conf import settings
from django.urls import NoReverseMatch, reverse
from django.utils.translation import get_language, get_language_bidi, gettext as _

from ..conf import get_setting
from ..theme import registry
from .attributes import add_class, clean_css_identifier, html_class, join_classes, render_attributes

theme = registry.theme("bear_skin")


def _is_front(request) -> bool:
    return request is not None and request.path_info.strip("/") == ""


def _reverse_or_none(name: str):
    try:
        return reverse(name)
    except NoReverseMatch:
        return None


@theme.preprocess("html")
def preprocess_html(variables: Dict[str, Any]) -> None:
    """1. Язык и skip-link  2. Атрибуты <html>  3. Классы <body> по контексту."""
    request = variables.get("request")
    language = get_language() or settings.LANGUAGE_CODE

    variables["skip_link_anchor"] = "main-content"
    variables["language"] = language
    html_attrs = variables.setdefault("html_attributes_array", {})
    html_attrs["lang"] = language
    html_attrs["dir"] = "rtl" if get_language_bidi() else "ltr"

    classes: List[str] = variables.setdefault("classes_array", [])
    is_front = variables.setdefault("is_front", _is_front(request))
    classes.append("front" if is_front else "not-front")

    user = getattr(request, "user", None)
    classes.append("logged-in" if user is not None and user.is_authenticated else "not-logged-in")

    if not is_front and request is not None:
        # уникальный класс для раздела сайта: /styleguide/x -> section-styleguide
        section = request.path_info.strip("/").split("/", 1)[0]
        classes.append(html_class("section-" + section))

    variables["html_attributes"] = render_attributes(html_attrs)
    variables["body_classes"] = join_classes(classes)


@theme.preprocess("page")
def preprocess_page(variables: Dict[str, Any]) -> None:
    """1. Подсказки шаблонов  2. Заголовок для ARIA  3. Сайдбары  4. Меню и поиск."""
    from ..forms import SearchBlockForm  # формы тянут виджеты с шаблонами темы

    request = variables.get("request")
    page = variables.setdefault("page", {})

    suggestions = variables.setdefault("template_suggestions", [])
    content_type = variables.get("content_type")
    if content_type:
        suggestions.append(f"bear_skin/page--{html_class(content_type)}.html")

    # у главной без заголовка всё равно должен быть <h1> для скринридеров
    title = variables.get("title")
    if _is_front(request) and not title:
        variables["bear_page_title"] = f"{get_setting('SITE_NAME')} Homepage"
    else:
        variables["bear_page_title"] = title or ""

    variables["has_sidebar_first"] = bool(page.get("sidebar_first"))
    variables["has_sidebar_second"] = bool(page.get("sidebar_second"))

    variables["user_menu"] = registry.render("links__user_menu", {
        "request": request,
        "links": user_menu_links(request),
        "attributes": {"class": ["nav-user__list"], "aria-labelledby": "userMenuLabel"},
    })

    action = _reverse_or_none("bear_skin:styleguide")
    if action:
        data = request.GET if request is not None and "q" in request.GET else None
        page["bear_search_form"] = SearchBlockForm(data, action=action)


def user_menu_links(request) -> List[Dict[str, Any]]:
    user = getattr(request, "user", None)
    if user is None or not user.is_authenticated:
        login_url = _reverse_or_none(settings.LOGIN_URL) or settings.LOGIN_URL
        return [{"title": _("Log in"), "href": login_url}]
    links = []
    if user.is_staff and _reverse_or_none("admin:index"):
        links.append({"title": _("Administration"), "href": reverse("admin:index")})
    logout_url = _reverse_or_none("logout")
    if logout_url:
        links.append({"title": _("Log out"), "href": logout_url, "post": True})
    return links


@theme.preprocess("region")
def preprocess_region(variables: Dict[str, Any]) -> None:
    region = variables["region"]
    variables.setdefault("classes_array", []).append("region--" + region.replace("_", "-"))
    variables.setdefault("attributes_array", {})["role"] = "region"


@theme.preprocess("node")
def preprocess_node(variables: Dict[str, Any]) -> None:
    """Классы для материалов; тизерам: отдельный шаблон node--teaser."""
    view_mode = variables.get("view_mode", "full")
    node_type = variables["type"]
    classes = variables.setdefault("classes_array", [])
    title_attrs = variables.setdefault("title_attributes_array", {})
    suggestions = variables.setdefault("template_suggestions", [])

    if view_mode == "teaser":
        classes.append(f"node-{node_type}-teaser")
        add_class(title_attrs, "node-teaser__title", f"node-{node_type}-teaser__title")
        suggestions.insert(0, "bear_skin/node--teaser.html")

    if view_mode in ("full", "default"):
        classes.append("node-full")
        classes.append(f"node-{node_type}-full")


@theme.preprocess("block")
def preprocess_block(variables: Dict[str, Any]) -> None:
    block = variables["block"]
    module = f"{block['module'].replace('_', '-')}-{block['delta']}"
    region = block["region"].replace("_", "-")
    classes = variables.setdefault("classes_array", [])
    classes.append(f"block__{module}")
    classes.append(f"block__{module}--{region}")


@theme.preprocess("listing")
def preprocess_listing(variables: Dict[str, Any]) -> None:
    display = clean_css_identifier(variables["display"])
    variables.setdefault("classes_array", []).append(f"{variables['css_name']}-{display}-view")


@theme.preprocess("listing_rows")
def preprocess_listing_rows(variables: Dict[str, Any]) -> None:
    row_id = f"{clean_css_identifier(variables['name'])}-{clean_css_identifier(variables['display'])}"
    variables["classes_array"] = [
        f"{row_classes} {row_id}-view__row".strip() for row_classes in variables.get("classes_array", [])
    ]


@theme.preprocess("menu_block_wrapper")
def preprocess_menu_block_wrapper(variables: Dict[str, Any]) -> None:
    menu_name = variables["config"]["menu_name"]
    variables.setdefault("template_suggestions", []).append(
        "menu_block_wrapper__menu_" + menu_name.replace("-", "_")
    )
    variables["classes_array"] = [menu_name]
    if menu_name == "main-menu":
        variables["classes_array"].insert(0, "site-navigation")


@theme.preprocess("menu_link")
def preprocess_menu_link(variables: Dict[str, Any]) -> None:
    """Классы <li>/<a> по имени меню и глубине, ARIA-роли, data-атрибуты для дерева."""
    element = variables["element"]
    original = element.get("original_link") or {}
    menu_name = original.get("menu_name", "")
    depth = original.get("depth", "")

    li_attrs = element.setdefault("attributes", {})
    is_active = "active" in add_class(li_attrs)["class"]
    has_children = bool(original.get("expanded") and original.get("has_children"))

    # <li>
    li_attrs["class"] = [f"{menu_name}__item", f"level-{depth}"]
    if has_children:
        li_attrs["class"].append("parent")
    if is_active:
        li_attrs["class"].append("active")
    li_attrs["role"] = "presentation"

    # <a>
    a_attrs = element.setdefault("localized_options", {}).setdefault("attributes", {})
    a_attrs["class"] = [f"{menu_name}__link"]
    if is_active:
        a_attrs["class"].append("active")
    a_attrs["role"] = "menuitem"
    a_attrs["aria-haspopup"] = "true" if has_children else "false"

    # дерево меню заберёт имя и глубину отсюда
    li_attrs["data-menu-name"] = menu_name
    li_attrs["data-menu-depth"] = depth


@theme.preprocess("menu_tree")
def preprocess_menu_tree(variables: Dict[str, Any]) -> None:
    menu_name = menu_depth = ""
    for link in variables.get("links", []):
        attrs = link.get("attributes", {})
        menu_name = attrs.get("data-menu-name", "")
        menu_depth = attrs.get("data-menu-depth", "")
        break
    variables["menu_name"] = menu_name
    variables["menu_depth"] = str(menu_depth)
