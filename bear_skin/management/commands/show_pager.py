import logging

from django.core.management.base import BaseCommand, CommandError, CommandParser

from bear_skin.conf import theme_setting
from bear_skin.services.pager import InvalidArgument, SlotKind, compute_window

logger = logging.getLogger(__name__)

SYMBOLS = {
    SlotKind.FIRST: "«",
    SlotKind.PREVIOUS: "‹",
    SlotKind.ELLIPSIS: "…",
    SlotKind.NEXT: "›",
    SlotKind.LAST: "»",
}


class Command(BaseCommand):
    help = "Показывает слоты пейджера для заданной страницы (0-based), числа страниц и ширины окна."

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument("--page", type=int, default=0, help="Текущая страница, с нуля")
        parser.add_argument("--total", type=int, required=True, help="Всего страниц")
        parser.add_argument("--window", type=int, default=None, help="Ширина окна (по умолчанию из настроек темы)")
        parser.add_argument("--classes", action="store_true", help="Печатать CSS-классы каждого слота")

    def handle(self, *args, **opts):
        page: int = opts["page"]
        total: int = opts["total"]
        window: int = opts["window"] or theme_setting("PAGER_QUANTITY")

        try:
            slots = compute_window(page, total, window)
        except InvalidArgument as exc:
            raise CommandError(str(exc)) from exc

        if not slots:
            self.stdout.write(self.style.WARNING("! Страниц меньше двух, пейджер не выводится"))
            return

        for slot in slots:
            if slot.kind is SlotKind.CURRENT:
                label = f"[{slot.number}]"
            else:
                label = str(slot.number) if slot.number is not None else SYMBOLS[slot.kind]
            if opts["classes"]:
                label = f"{label:>6}  {' '.join(slot.classes)}"
            self.stdout.write(label)

        msg = f"Готово: {len(slots)} слотов для страницы {page + 1} из {total} (окно {window})."
        logger.info(msg)
        self.stdout.write(self.style.SUCCESS(msg))
