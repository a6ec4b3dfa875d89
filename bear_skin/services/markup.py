# BS/bear_skin/services/markup.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: BS/bear_skin/services/markup.py
# Назначение: override-хуки базовой темы (разметка списков, меню, сообщений,
#             крошек, вкладок, полей) + alter для стилей
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations

import re
from typing import Any, Dict, List

from django.contrib import messages
from django.template.loader import render_to_string, select_template
from django.utils.html import conditional_escape, format_html, format_html_join
from django.utils.safestring import SafeData, mark_safe
from django.utils.translation import gettext as _, gettext_lazy

from ..conf import get_setting, theme_setting
from ..theme import registry
from .attributes import add_class, class_list, html_class, join_classes, render_attributes
from .pager_render import PagerItem, render_pager

theme = registry.theme("bear_skin")

_TITLE_RE = re.compile(r'title="(.*?)"')

STATUS_HEADINGS = {
    "success": gettext_lazy("Status message"),
    "error": gettext_lazy("Error message"),
    "warning": gettext_lazy("Warning message"),
}


def _attributes_from(variables: Dict[str, Any]) -> str:
    attrs = dict(variables.get("attributes_array") or {})
    add_class(attrs, *variables.get("classes_array", []))
    return render_attributes(attrs)


# ---------- ССЫЛКИ И МЕНЮ ----------
def _theme_links(variables: Dict[str, Any]) -> str:
    links = variables.get("links") or []
    rows = []
    for i, link in enumerate(links):
        li_classes = [html_class(link.get("key", f"link-{i}"))]
        if i == 0:
            li_classes.append("first")
        if i == len(links) - 1:
            li_classes.append("last")
        if link.get("active"):
            li_classes.append("active")
        rows.append({
            "li_attributes": render_attributes({"class": li_classes}),
            "attributes": render_attributes(link.get("attributes") or {}),
            "href": link.get("href"),
            "title": link.get("title", ""),
            "post": link.get("post", False),
        })
    return render_to_string(
        "bear_skin/links.html",
        {"links": rows, "attributes": render_attributes(variables.get("attributes") or {})},
        request=variables.get("request"),
    )


@theme.override("links")
def links(variables: Dict[str, Any]) -> str:
    """Уникальный класс меню (<классы>__list), ARIA-роли, обёртка <nav>."""
    attrs = variables.setdefault("attributes", {})
    classes = class_list(attrs.get("class"))
    if classes:
        menu_class = "-".join(classes)
        attrs["class"] = classes + [f"{menu_class}__list"]
    else:
        # классов нет: называем по функции, которая строит меню
        menu_class = "theme-links"
        attrs["class"] = [menu_class]
    attrs["role"] = "menubar"

    for link in variables.get("links") or []:
        link_attrs = link.setdefault("attributes", {})
        add_class(link_attrs, f"{menu_class}__link")
        link_attrs["role"] = "menuitem"

    return format_html('<nav role="navigation" class="{}">{}</nav>\n', menu_class, _theme_links(variables))


@theme.override("links__user_menu")
def links_user_menu(variables: Dict[str, Any]) -> str:
    variables.setdefault("attributes", {})["role"] = "menubar"
    for link in variables.get("links") or []:
        if not isinstance(link, dict):
            continue
        link_attrs = link.setdefault("attributes", {})
        add_class(link_attrs, "nav-user__link")
        link_attrs["role"] = "menuitem"
    return _theme_links(variables)


@theme.override("menu_link")
def menu_link(variables: Dict[str, Any]) -> str:
    element = variables["element"]
    below = ""
    if element.get("below"):
        below = render_menu(element["below"])
    a_attrs = element.get("localized_options", {}).get("attributes", {})
    return format_html(
        "<li{}><a href=\"{}\"{}>{}</a>{}</li>",
        render_attributes(element.get("attributes", {})),
        element.get("href", "#"),
        render_attributes(a_attrs),
        element.get("title", ""),
        below,
    )


@theme.override("menu_tree")
def menu_tree(variables: Dict[str, Any]) -> str:
    depth = variables["menu_depth"]
    role = "menubar" if depth in ("top", "one", "1") else "menu"
    return format_html(
        '<ul class="menu {}--level-{}" role="{}">{}</ul>',
        variables["menu_name"], depth, role, mark_safe(variables.get("tree", "")),
    )


def render_menu(elements: List[Dict[str, Any]]) -> str:
    """Дерево меню: каждый пункт через menu_link, затем обёртка menu_tree."""
    tree = "".join(registry.render("menu_link", {"element": el}) for el in elements)
    return registry.render("menu_tree", {"links": elements, "tree": tree})


# ---------- СООБЩЕНИЯ ----------
@theme.override("status_messages")
def status_messages(variables: Dict[str, Any]) -> str:
    """Сообщения django.contrib.messages с ролями WAI-ARIA.

    display: показать только один уровень; остальные выведет следующий вызов.
    Каждое сообщение выводится за запрос один раз.
    """
    request = variables["request"]
    display = variables.get("display")
    shown = request.__dict__.setdefault("_bear_skin_shown_messages", set())

    groups: Dict[str, List[Any]] = {}
    for message in messages.get_messages(request):
        level_tag = message.level_tag or "info"
        if id(message) in shown or (display and level_tag != display):
            continue
        shown.add(id(message))
        msg_type = "success" if level_tag == "info" else level_tag
        groups.setdefault(msg_type, []).append(message)

    blocks = [
        {
            "type": msg_type,
            "heading": STATUS_HEADINGS.get(msg_type),
            "live": "assertive" if msg_type == "error" else "polite",
            "messages": group,
        }
        for msg_type, group in groups.items()
    ]
    if not blocks:
        return ""
    return render_to_string("bear_skin/status_messages.html", {"blocks": blocks})


# ---------- СПИСКИ И ПЕЙДЖЕР ----------
@theme.override("item_list")
def item_list(variables: Dict[str, Any]) -> str:
    """Классы item-list__* и роли list/listitem; список с классом pager: навигация."""
    attrs = variables.setdefault("attributes", {})
    classes = class_list(attrs.get("class"))
    pager = "pager" in classes
    if pager:
        classes = []
    list_class = "pager" if pager else "item-list"
    attrs["class"] = [f"{list_class}__list"] + classes
    attrs["role"] = "menubar" if pager else "list"

    rows = []
    for item in variables.get("items") or []:
        if isinstance(item, PagerItem):
            rows.append({"attributes": item.li_attributes, "data": item.data})
            continue
        if not isinstance(item, dict):
            item = {"data": item}
        li_attrs = {k: v for k, v in item.items() if k != "data"}
        li_attrs["role"] = "presentation" if pager else "listitem"
        raw = item.get("data", "")
        data = conditional_escape(raw)
        if pager:
            # ARIA-подпись дописывается только в готовую разметку, обычный текст экранирован
            label = _TITLE_RE.search(data) if isinstance(raw, SafeData) else None
            if label:
                data = mark_safe(data.replace(
                    "<a ", f'<a aria-label="{label.group(1)}" class="{list_class}__link" ', 1))
        else:
            add_class(li_attrs, "item-list__item")
        rows.append({"attributes": render_attributes(li_attrs), "data": data})

    list_type = "ol" if variables.get("type") == "ol" else "ul"
    return render_to_string("bear_skin/item_list.html", {
        "pager": pager,
        "title": variables.get("title"),
        "list_type": list_type,
        "attributes": render_attributes(attrs),
        "items": rows,
    })


@theme.override("pager")
def pager(variables: Dict[str, Any]) -> str:
    request = variables.get("request")
    return render_pager(
        variables["state"],
        query=variables.get("query", request.GET if request is not None else None),
        path=variables.get("path", request.path if request is not None else ""),
        tags=variables.get("tags"),
    )


# ---------- КРОШКИ ----------
@theme.override("breadcrumb")
def breadcrumb(variables: Dict[str, Any]) -> str:
    crumbs = variables.get("breadcrumb") or []
    if not crumbs:
        return ""
    items = []
    for crumb in crumbs:
        if isinstance(crumb, (tuple, list)):
            title, href = crumb
            value = (format_html('<a class="breadcrumbs__link" href="{}">{}</a>', href, title)
                     if href else conditional_escape(title))
        else:
            value = mark_safe(conditional_escape(crumb).replace("<a", '<a class="breadcrumbs__link"'))
        items.append(value)
    separator = variables.get("separator") or theme_setting("BREADCRUMB_SEPARATOR")
    return render_to_string("bear_skin/breadcrumb.html", {"items": items, "separator": separator})


# ---------- ВКЛАДКИ ----------
@theme.override("menu_local_tasks")
def menu_local_tasks(variables: Dict[str, Any]) -> str:
    output = []
    for tab_type, label_id, heading in (
        ("primary", "primaryTabsLabel", _("Primary tabs")),
        ("secondary", "secondaryTabsLabel", _("Secondary tabs")),
    ):
        tasks = variables.get(tab_type) or []
        if not tasks:
            continue
        rendered = format_html_join("", "{}", (
            (registry.render("menu_local_task", {"element": {
                "link": task, "active": task.get("active", False), "type": f"tabs-{tab_type}",
            }}),)
            for task in tasks
        ))
        output.append(format_html(
            '<h2 class="visually-hidden" id="{0}">{1}</h2>'
            '<ul class="tabs-{2} tabs {2}" role="tablist" aria-labelledby="{0}">{3}</ul>',
            label_id, heading, tab_type, rendered,
        ))
    return mark_safe("".join(output))


@theme.override("menu_local_task")
def menu_local_task(variables: Dict[str, Any]) -> str:
    element = variables["element"]
    link = element["link"]
    tab_type = element.get("type")
    a_attrs = dict(link.get("attributes") or {})
    li_class = ""

    if tab_type:
        add_class(a_attrs, f"{tab_type}__tab-link")
        li_class = f"{tab_type}__tab"
    a_attrs["role"] = "tab"

    text = conditional_escape(link["title"])
    if element.get("active"):
        # текст для невизуальных пользователей
        text = format_html('{} <span class="visually-hidden">{}</span>', text, _("(active tab)"))
        if not tab_type:
            li_class = "active"
        else:
            add_class(a_attrs, "is-active")
            li_class += " is-active"

    li_attrs = render_attributes({"class": li_class}) if li_class else ""
    return format_html('<li{}><a href="{}"{}>{}</a></li>\n', li_attrs, link["href"], render_attributes(a_attrs), text)


# ---------- ПОЛЯ ----------
@theme.override("field")
def field(variables: Dict[str, Any]) -> str:
    """Классы поля по сущности/бандлу/режиму показа, aria-labelledby на подпись.

    body материала page в полном виде -> node-page-body,
    date материала event в тизере -> node-event-date-teaser.
    """
    element = variables["element"]
    if element["entity_type"] == "node":
        object_class = f"node-{element['bundle']}"
    else:
        object_class = element["entity_type"]
    object_class = f"{object_class}-{html_class(element['field_name'])}"
    if element.get("view_mode", "full") != "full":
        object_class = f"{object_class}-{element['view_mode']}"

    return render_to_string("bear_skin/field.html", {
        "classes": join_classes([variables.get("classes", "field"), object_class]),
        "object_class": object_class,
        "label": variables.get("label", ""),
        "label_hidden": variables.get("label_hidden", False),
        "items": variables.get("items") or [],
    })


# ---------- РЕГИОНЫ, БЛОКИ, МАТЕРИАЛЫ ----------
@theme.override("region")
def region(variables: Dict[str, Any]) -> str:
    if not variables.get("content"):
        return ""
    return format_html("<div{}>{}</div>", _attributes_from(variables), variables["content"])


@theme.override("block")
def block(variables: Dict[str, Any]) -> str:
    return render_to_string("bear_skin/block.html", {
        "classes": join_classes(["block"] + variables.get("classes_array", [])),
        "block": variables["block"],
    })


@theme.override("node")
def node(variables: Dict[str, Any]) -> str:
    names = variables.get("template_suggestions", []) + ["bear_skin/node.html"]
    context = dict(variables)
    context["classes"] = join_classes(["node"] + variables.get("classes_array", []))
    context["title_attributes"] = render_attributes(variables.get("title_attributes_array", {}))
    return select_template(names).render(context)


# ---------- СТИЛИ ----------
@theme.alter("css")
def css_alter(css: Dict[str, Any], **context: Any) -> None:
    """Убираем стандартные стили, которые тема переопределяет своими."""
    for path in get_setting("EXCLUDED_CSS"):
        css.pop(path, None)
