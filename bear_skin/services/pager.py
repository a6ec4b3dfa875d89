# BS/bear_skin/services/pager.py
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class InvalidArgument(ValueError):
    """Некорректное состояние пейджера (нарушен контракт вызывающего кода)."""


class SlotKind(str, Enum):
    FIRST = "first"
    PREVIOUS = "previous"
    ELLIPSIS = "ellipsis"
    NUMBER = "number"
    CURRENT = "current"
    NEXT = "next"
    LAST = "last"


# модификаторы BEM для каждого вида слота (NUMBER: без модификатора)
SLOT_MODIFIERS = {
    SlotKind.FIRST: "pager--first",
    SlotKind.PREVIOUS: "pager--previous",
    SlotKind.ELLIPSIS: "pager--ellipsis",
    SlotKind.CURRENT: "pager--current",
    SlotKind.NEXT: "pager--next",
    SlotKind.LAST: "pager--last",
}


@dataclass(frozen=True)
class PagerSlot:
    """Один элемент пейджера: ссылка, текущая страница или многоточие.

    ``number``: номер страницы (1-based) для NUMBER/CURRENT.
    """
    kind: SlotKind
    number: Optional[int] = None

    @property
    def classes(self) -> List[str]:
        modifier = SLOT_MODIFIERS.get(self.kind)
        return ["pager__item", modifier] if modifier else ["pager__item"]


def _check_int(name: str, value) -> None:
    # bool: подкласс int, но как счётчик страниц не годится
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")


@dataclass(frozen=True)
class PagerState:
    """Состояние одного пейджера на странице.

    Parameters
    ----------
    current_page : int
        Текущая страница (0-based).
    total_pages : int
        Общее число страниц.
    window_size : int
        Сколько номеров страниц показывать вокруг текущей.
    element : int
        Номер пейджера, если на странице их несколько.
    """
    current_page: int
    total_pages: int
    window_size: int = 9
    element: int = 0

    def validate(self) -> "PagerState":
        for name in ("current_page", "total_pages", "window_size", "element"):
            _check_int(name, getattr(self, name))
        if self.current_page < 0:
            raise InvalidArgument(f"current_page must be >= 0, got {self.current_page}")
        if self.total_pages < 0:
            raise InvalidArgument(f"total_pages must be >= 0, got {self.total_pages}")
        if self.window_size <= 0:
            raise InvalidArgument(f"window_size must be >= 1, got {self.window_size}")
        if self.element < 0:
            raise InvalidArgument(f"element must be >= 0, got {self.element}")
        if self.total_pages > 0 and self.current_page >= self.total_pages:
            raise InvalidArgument(
                f"current_page {self.current_page} is out of range for {self.total_pages} pages"
            )
        return self

    @property
    def is_first(self) -> bool:
        return self.current_page == 0

    @property
    def is_last(self) -> bool:
        return self.current_page >= self.total_pages - 1

    def slots(self) -> List[PagerSlot]:
        return compute_window(self.current_page, self.total_pages, self.window_size)


def compute_window(current_page: int, total_pages: int, window_size: int) -> List[PagerSlot]:
    """Возвращает упорядоченный список слотов пейджера.

    Parameters
    ----------
    current_page : int
        Текущая страница (0-based).
    total_pages : int
        Общее число страниц.
    window_size : int
        Ширина окна номеров (чётная или нечётная).

    Returns
    -------
    List[PagerSlot]
        Пустой список, если страниц не больше одной.

    Raises
    ------
    InvalidArgument
        Отрицательные значения, нулевое окно или страница вне диапазона.
    """
    PagerState(current_page, total_pages, window_size).validate()
    if total_pages <= 1:
        return []

    current = current_page + 1
    middle = math.ceil(window_size / 2)
    first = current - middle + 1
    last = current + window_size - middle

    # Сдвигаем «центр» у конца списка, затем у начала (порядок важен)
    if last > total_pages:
        first = first + (total_pages - last)
        last = total_pages
    if first <= 0:
        last = last + (1 - first)
        first = 1

    slots = [PagerSlot(SlotKind.FIRST), PagerSlot(SlotKind.PREVIOUS)]

    if first != total_pages:
        if first > 1:
            slots.append(PagerSlot(SlotKind.ELLIPSIS))
        i = first
        while i <= last and i <= total_pages:
            if i < current:
                slots.append(PagerSlot(SlotKind.NUMBER, i))
            elif i == current:
                slots.append(PagerSlot(SlotKind.CURRENT, i))
            else:
                slots.append(PagerSlot(SlotKind.NUMBER, i))
            i += 1
        if i < total_pages:
            slots.append(PagerSlot(SlotKind.ELLIPSIS))

    slots.append(PagerSlot(SlotKind.NEXT))
    slots.append(PagerSlot(SlotKind.LAST))
    return slots
