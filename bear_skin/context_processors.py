# BS/bear_skin/context_processors.py
from typing import Any, Dict

from .conf import get_setting
from .models import ThemeSettings
from .theme import registry


def theme(request) -> Dict[str, Any]:
    """Переменные уровня <html>/<body> для всех шаблонов: {{ theme.* }}."""
    bag = registry.preprocess("html", {"request": request})

    # стили после alter-хуков всех тем в цепочке
    css = dict(get_setting("STYLESHEETS"))
    registry.alter("css", css, request=request)

    bag["stylesheets"] = [{"path": path, "media": (opts or {}).get("media", "all")} for path, opts in css.items()]
    bag["site_name"] = get_setting("SITE_NAME")
    bag["settings"] = ThemeSettings.load()
    return {"theme": bag}
