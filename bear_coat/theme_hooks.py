# BS/bear_coat/theme_hooks.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: BS/bear_coat/theme_hooks.py
# Назначение: хуки подтемы: расширенный список исключаемых стилей
#             и всплывающая форма входа в шапке
# ─────────────────────────────────────────────────────────────────────────────

from typing import Any, Dict

from django.contrib.auth.forms import AuthenticationForm
from django.template.loader import render_to_string

from bear_skin.models import ThemeSettings
from bear_skin.theme import registry

theme = registry.theme("bear_coat", base="bear_skin")

EXCLUDED_CSS = [
    "aggregator/aggregator.css",
    "comment/comment.css",
    "system/system.css",
    "system/system.menus.css",
    "system/system.messages.css",
    "system/system.theme.css",
    "user/user.css",
    "search/search.css",
    "filter/filter.css",
    "field/theme/field.css",
    "forum/forum.css",
    "misc/vertical-tabs.css",
]


@theme.alter("css")
def css_alter(css: Dict[str, Any], **context: Any) -> None:
    for path in EXCLUDED_CSS:
        css.pop(path, None)


@theme.preprocess("page")
def preprocess_page(variables: Dict[str, Any]) -> None:
    """Скрытое модальное окно входа: ошибки + форма AuthenticationForm."""
    request = variables.get("request")
    variables["loginpopup"] = ""
    if request is None or request.user.is_authenticated:
        return
    if not ThemeSettings.load().login_popup:
        return

    # сначала ошибки (только уровень error, остальные сообщения останутся странице)
    errors = registry.render("status_messages", {"request": request, "display": "error"})
    variables["loginpopup"] = render_to_string(
        "bear_coat/login_popup.html",
        {"form": AuthenticationForm(request), "errors": errors},
        request=request,
    )
