# BS/bear_skin/views.py
import logging
from typing import Any, Dict, List

from django.contrib import messages
from django.contrib.auth.views import LoginView
from django.core.paginator import Paginator
from django.shortcuts import render
from django.urls import reverse
from django.utils.safestring import mark_safe
from django.views.generic import TemplateView

from .forms import SearchBlockForm, StyleguideFilterForm
from .services.markup import render_menu
from .services.pager_render import current_page_index
from .theme import registry

logger = logging.getLogger(__name__)

# Заглушки для витрины: тема не хранит контент, только показывает разметку
SAMPLE_ENTRIES = [f"Sample entry {i}" for i in range(1, 238)]
SWATCHES = [f"Swatch {i}" for i in range(1, 61)]
SWATCHES_PER_PAGE = 6


# ---------- MIXINS ----------
class ThemePageMixin:
    """Собирает регионы страницы и прогоняет page-preprocess всех тем."""
    content_type = None

    def get_regions(self) -> Dict[str, List[dict]]:
        return {}

    def render_regions(self) -> Dict[str, Any]:
        page = {}
        for region_name, blocks in self.get_regions().items():
            rendered = "".join(
                registry.render("block", {"block": dict(block, region=region_name)}) for block in blocks
            )
            page[region_name] = registry.render("region", {"region": region_name, "content": mark_safe(rendered)})
        return page

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        self.page_vars = registry.preprocess("page", {
            "request": self.request,
            "title": ctx.get("title"),
            "page": self.render_regions(),
            "content_type": self.content_type,
        })
        ctx["page"] = self.page_vars["page"]
        ctx["page_vars"] = self.page_vars
        return ctx

    def get_template_names(self):
        names = super().get_template_names()
        page_vars = getattr(self, "page_vars", None) or {}
        return list(reversed(page_vars.get("template_suggestions", []))) + list(names)


# ---------- PAGES ----------
class HomeView(ThemePageMixin, TemplateView):
    template_name = "bear_skin/index.html"


class ThemedLoginView(ThemePageMixin, LoginView):
    template_name = "registration/login.html"

    def get_context_data(self, **kwargs):
        kwargs.setdefault("title", "Log in")
        return super().get_context_data(**kwargs)


class StyleguideView(ThemePageMixin, TemplateView):
    """Витрина компонентов темы: два независимых пейджера, крошки, вкладки, поля, меню."""
    template_name = "bear_skin/styleguide.html"
    content_type = "styleguide"

    def get_regions(self):
        return {
            "sidebar_first": [{
                "module": "bear_skin",
                "delta": "about",
                "subject": "About this theme",
                "content": "Accessible markup: BEM classes and ARIA roles.",
            }],
        }

    def get_entries(self) -> List[str]:
        form = SearchBlockForm(self.request.GET) if "q" in self.request.GET else None
        if form is None or not form.is_valid():
            return SAMPLE_ENTRIES
        needle = form.cleaned_data["q"].lower()
        entries = [e for e in SAMPLE_ENTRIES if needle in e.lower()]
        if not entries:
            messages.warning(self.request, f"No entries match “{form.cleaned_data['q']}”.")
        return entries

    def get_context_data(self, **kwargs: Any) -> Dict[str, Any]:
        kwargs.setdefault("title", "Styleguide")
        ctx = super().get_context_data(**kwargs)

        filter_form = StyleguideFilterForm(self.request.GET or None)
        per = 10
        if filter_form.is_valid() and filter_form.cleaned_data.get("per"):
            per = filter_form.cleaned_data["per"]

        # каждый пейджер читает свою позицию из ?page=a,b
        entries = Paginator(self.get_entries(), per)
        entries_page = entries.get_page(current_page_index(self.request, 0) + 1)
        swatches = Paginator(SWATCHES, SWATCHES_PER_PAGE)
        swatches_page = swatches.get_page(current_page_index(self.request, 1) + 1)
        logger.debug("styleguide: entries page %s/%s, swatches page %s/%s",
                     entries_page.number, entries.num_pages, swatches_page.number, swatches.num_pages)

        ctx.update(
            filter_form=filter_form,
            page_obj=entries_page,
            teasers=[
                registry.render("node", {"type": "sample", "view_mode": "teaser", "title": entry,
                                         "summary": f"Teaser markup for {entry.lower()}."})
                for entry in entries_page.object_list
            ],
            swatch_page_obj=swatches_page,
            breadcrumb=registry.render("breadcrumb", {"breadcrumb": [
                ("Home", reverse("bear_skin:home")),
                ("Styleguide", None),
            ]}),
            tabs=registry.render("menu_local_tasks", {
                "primary": [
                    {"title": "View", "href": reverse("bear_skin:styleguide"), "active": True},
                    {"title": "Log in", "href": reverse("login")},
                ],
            }),
            field=registry.render("field", {
                "element": {"entity_type": "node", "bundle": "page", "field_name": "tags", "view_mode": "full"},
                "label": "Tags",
                "items": ["Accessibility", "BEM", "ARIA"],
            }),
            menu=render_menu(self.get_menu()),
            item_list=registry.render("item_list", {"items": ["First item", "Second item"], "title": "Item list"}),
        )
        return ctx

    def get_menu(self) -> List[dict]:
        # пункты в том виде, как их отдаёт меню; классы и роли добавит menu_link
        def element(title, href, depth, below=None, active=False):
            return {
                "title": title,
                "href": href,
                "attributes": {"class": ["active"] if active else []},
                "original_link": {"menu_name": "main-menu", "depth": depth,
                                  "expanded": bool(below), "has_children": bool(below)},
                "below": below or [],
            }

        return [
            element("Home", reverse("bear_skin:home"), "top"),
            element("Styleguide", reverse("bear_skin:styleguide"), "top", active=True, below=[
                element("Pager API", reverse("bear_skin:bear_skin_api:pager"), "two"),
            ]),
        ]


def custom_permission_denied(request, exception=None):
    """
    Кастомный обработчик 403 Forbidden.
    Вызывается, когда у пользователя нет прав на действие/страницу.
    """
    context = {
        "title": "Access denied",
        "message": "You are not allowed to view this page.",
    }
    # используем шаблон templates/bear_skin/403.html
    return render(request, "bear_skin/403.html", context=context, status=403)
