# BS/bear_skin/theme.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: BS/bear_skin/theme.py
# Назначение: реестр тем и их хуков (preprocess / override / alter)
# Принципы: базовая тема отрабатывает первой, подтема после неё;
#           override берётся у самой «младшей» темы в цепочке.
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Callable, Dict, List, Optional

from django.core.exceptions import ImproperlyConfigured

from .conf import get_setting

logger = logging.getLogger(__name__)

Variables = Dict[str, Any]


class Theme:
    """Набор хуков одной темы."""

    def __init__(self, name: str, base: Optional[str] = None):
        self.name = name
        self.base = base
        self.preprocessors: Dict[str, List[Callable]] = defaultdict(list)
        self.overrides: Dict[str, Callable] = {}
        self.alters: Dict[str, List[Callable]] = defaultdict(list)

    def preprocess(self, hook: str):
        """Декоратор: func(variables) дополняет «мешок» переменных хука."""
        def decorator(func):
            self.preprocessors[hook].append(func)
            logger.debug("theme %s: preprocess %s -> %s", self.name, hook, func.__name__)
            return func
        return decorator

    def override(self, hook: str):
        """Декоратор: func(variables) -> str, разметка хука."""
        def decorator(func):
            self.overrides[hook] = func
            logger.debug("theme %s: override %s -> %s", self.name, hook, func.__name__)
            return func
        return decorator

    def alter(self, kind: str):
        """Декоратор: func(data, **context) правит данные на месте (css, form)."""
        def decorator(func):
            self.alters[kind].append(func)
            return func
        return decorator

    def __repr__(self) -> str:
        return f"<Theme {self.name} base={self.base}>"


class ThemeRegistry:
    def __init__(self):
        self._themes: Dict[str, Theme] = {}

    def theme(self, name: str, base: Optional[str] = None) -> Theme:
        """Возвращает тему по имени, создавая её при первом обращении."""
        theme = self._themes.get(name)
        if theme is None:
            theme = self._themes[name] = Theme(name, base)
        elif base is not None:
            theme.base = base
        return theme

    def chain(self, active: Optional[str] = None) -> List[Theme]:
        """Цепочка тем от корневой базовой до активной."""
        name = active or get_setting("ACTIVE_THEME")
        chain: List[Theme] = []
        seen = set()
        while name:
            if name in seen:
                raise ImproperlyConfigured(f"Цикл в базовых темах: {name}")
            seen.add(name)
            theme = self._themes.get(name)
            if theme is None:
                raise ImproperlyConfigured(f"Тема {name!r} не зарегистрирована")
            chain.append(theme)
            name = theme.base
        chain.reverse()
        return chain

    def preprocess(self, hook: str, variables: Variables, active: Optional[str] = None) -> Variables:
        for theme in self.chain(active):
            for func in theme.preprocessors.get(hook, ()):
                func(variables)
        return variables

    def render(self, hook: str, variables: Variables, active: Optional[str] = None) -> str:
        """Preprocess + разметка. 'links__user_menu' откатывается к 'links'."""
        chain = self.chain(active)
        base_hook = hook.split("__", 1)[0]
        candidates = [hook] if base_hook == hook else [hook, base_hook]

        for name in reversed(candidates):
            self.preprocess(name, variables, active)
        for name in candidates:
            for theme in reversed(chain):
                func = theme.overrides.get(name)
                if func is not None:
                    return func(variables)
        raise LookupError(f"Нет разметки для хука {hook!r}")

    def alter(self, kind: str, data: Any, active: Optional[str] = None, **context: Any) -> Any:
        for theme in self.chain(active):
            for func in theme.alters.get(kind, ()):
                func(data, **context)
        return data

    def clear(self) -> None:
        self._themes.clear()


registry = ThemeRegistry()
