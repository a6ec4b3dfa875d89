# BS/bear_skin/services/attributes.py
from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List

from django.forms.utils import flatatt

_INVALID_CSS_CHARS = re.compile(r"[^\x2d0-9A-Z_a-z\xa1-\uffff]")
_CSS_REPLACEMENTS = {" ": "-", "_": "-", "/": "-", "[": "-", "]": ""}


def clean_css_identifier(value: Any) -> str:
    """Приводит строку к допустимому CSS-идентификатору (регистр сохраняется)."""
    ident = str(value)
    for needle, repl in _CSS_REPLACEMENTS.items():
        ident = ident.replace(needle, repl)
    return _INVALID_CSS_CHARS.sub("", ident)


def html_class(value: Any) -> str:
    """CSS-класс из произвольного текста: 'Section/News Item' -> 'section-news-item'."""
    return clean_css_identifier(str(value).lower())


def class_list(value: Any) -> List[str]:
    """None / строка / итерируемое -> список классов."""
    if not value:
        return []
    if isinstance(value, str):
        return value.split()
    return [str(v) for v in value]


def add_class(attributes: Dict[str, Any], *classes: str) -> Dict[str, Any]:
    """Нормализует attributes['class'] в список и дописывает классы."""
    attributes["class"] = class_list(attributes.get("class"))
    attributes["class"].extend(c for c in classes if c)
    return attributes


def render_attributes(attributes: Dict[str, Any]) -> str:
    """Безопасная строка атрибутов вида ` class="a b" role="list"`.

    Списки склеиваются пробелом, True даёт атрибут без значения,
    False и None пропускаются.
    """
    flat: Dict[str, Any] = {}
    for key, value in (attributes or {}).items():
        if value is None or value is False:
            continue
        if isinstance(value, (list, tuple)):
            value = " ".join(str(v) for v in value if v)
        flat[key] = value
    return flatatt(flat)


def join_classes(classes: Iterable[str]) -> str:
    return " ".join(c for c in classes if c)
