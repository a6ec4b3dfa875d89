# BS/bear_skin/services/pager_render.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from django.http import QueryDict
from django.template.loader import render_to_string
from django.utils.html import format_html
from django.utils.translation import gettext, gettext_lazy as _

from .attributes import render_attributes
from .pager import PagerSlot, PagerState, SlotKind

PAGE_PARAM = "page"

DEFAULT_TAGS = {
    SlotKind.FIRST: _("« first"),
    SlotKind.PREVIOUS: _("‹ previous"),
    SlotKind.NEXT: _("next ›"),
    SlotKind.LAST: _("last »"),
}

TITLES = {
    SlotKind.FIRST: _("Go to first page"),
    SlotKind.PREVIOUS: _("Go to previous page"),
    SlotKind.NEXT: _("Go to next page"),
    SlotKind.LAST: _("Go to last page"),
}

ELLIPSIS = "…"


@dataclass
class PagerItem:
    """Готовый к выводу элемент пейджера (<li> и ссылка/текст внутри)."""
    slot: PagerSlot
    text: str
    href: Optional[str] = None
    title: Optional[str] = None
    extra: Dict[str, str] = field(default_factory=dict)

    @property
    def classes(self) -> List[str]:
        return self.slot.classes

    @property
    def aria_label(self) -> Optional[str]:
        return self.title

    @property
    def li_attributes(self) -> str:
        return render_attributes({"class": self.classes, "role": "presentation"})

    @property
    def link_attributes(self) -> str:
        attrs = {"class": ["pager__link" if self.href else "pager__text"], "href": self.href, "title": self.title, "aria-label": self.aria_label}
        attrs.update(self.extra)
        return render_attributes(attrs)

    @property
    def data(self) -> str:
        if self.href:
            return format_html("<a{}>{}</a>", self.link_attributes, self.text)
        if self.title or self.extra:
            return format_html("<span{}>{}</span>", self.link_attributes, self.text)
        return format_html("{}", self.text)


def parse_page_param(value: Optional[str]) -> List[int]:
    """'0,3' -> [0, 3]; мусор и отрицательные значения превращаются в 0."""
    pages = []
    for part in (value or "").split(","):
        try:
            pages.append(max(int(part), 0))
        except ValueError:
            pages.append(0)
    return pages


def current_page_index(request, element: int = 0) -> int:
    """Текущая страница (0-based) пейджера element из ?page=a,b,c."""
    pages = parse_page_param(request.GET.get(PAGE_PARAM))
    return pages[element] if element < len(pages) else 0


def pager_query(query: Optional[QueryDict], element: int, page_index: int) -> str:
    """Строка запроса, в которой пейджер element переставлен на page_index.

    Позиции остальных пейджеров на странице сохраняются.
    """
    params = query.copy() if query is not None else QueryDict(mutable=True)
    pages = parse_page_param(params.get(PAGE_PARAM))
    while len(pages) <= element:
        pages.append(0)
    pages[element] = page_index

    if any(pages):
        params[PAGE_PARAM] = ",".join(str(p) for p in pages)
    else:
        params.pop(PAGE_PARAM, None)
    return params.urlencode(safe=",")


def _href(path: str, query: Optional[QueryDict], element: int, page_index: int) -> str:
    encoded = pager_query(query, element, page_index)
    return f"{path}?{encoded}" if encoded else (path or "?")


def build_items(slots: List[PagerSlot], state: PagerState, query: Optional[QueryDict] = None,
                path: str = "", tags: Optional[Dict[SlotKind, str]] = None) -> List[PagerItem]:
    """Отображает слоты в элементы разметки (тексты, ссылки, title/aria)."""
    labels = dict(DEFAULT_TAGS)
    labels.update(tags or {})
    targets = {
        SlotKind.FIRST: 0,
        SlotKind.PREVIOUS: state.current_page - 1,
        SlotKind.NEXT: state.current_page + 1,
        SlotKind.LAST: state.total_pages - 1,
    }
    inactive = {
        SlotKind.FIRST: state.is_first,
        SlotKind.PREVIOUS: state.is_first,
        SlotKind.NEXT: state.is_last,
        SlotKind.LAST: state.is_last,
    }

    items: List[PagerItem] = []
    for slot in slots:
        if slot.kind is SlotKind.ELLIPSIS:
            items.append(PagerItem(slot, ELLIPSIS))
        elif slot.kind is SlotKind.CURRENT:
            items.append(PagerItem(slot, str(slot.number), extra={"aria-current": "page"}))
        elif slot.kind is SlotKind.NUMBER:
            items.append(PagerItem(
                slot, str(slot.number),
                href=_href(path, query, state.element, slot.number - 1),
                title=gettext("Go to page %(number)s") % {"number": slot.number},
            ))
        elif inactive[slot.kind]:
            items.append(PagerItem(slot, labels[slot.kind], title=TITLES[slot.kind],
                                   extra={"aria-disabled": "true"}))
        else:
            items.append(PagerItem(
                slot, labels[slot.kind],
                href=_href(path, query, state.element, targets[slot.kind]),
                title=TITLES[slot.kind],
            ))
    return items


def render_pager(state: PagerState, query: Optional[QueryDict] = None, path: str = "",
                 tags: Optional[Dict[SlotKind, str]] = None) -> str:
    """Считает окно и рендерит bear_skin/pager.html; без страниц: пустая строка."""
    slots = state.validate().slots()
    if not slots:
        return ""
    items = build_items(slots, state, query=query, path=path, tags=tags)
    return render_to_string("bear_skin/pager.html", {"items": items, "state": state})
