# BS/bear_skin/serializers.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: BS/bear_skin/serializers.py
# Назначение: DRF-сериализаторы для API пейджера
# ─────────────────────────────────────────────────────────────────────────────

from rest_framework import serializers  # импорт базового сериализатора

# верхние границы параметров анонимного API
MAX_WINDOW = 100
MAX_TOTAL = 10**6


class PagerQuerySerializer(serializers.Serializer):
    """Параметры запроса: ?page= (0-based), ?total=, ?window=."""
    page = serializers.IntegerField(min_value=0, max_value=MAX_TOTAL, required=False, default=0)  # текущая страница
    total = serializers.IntegerField(min_value=0, max_value=MAX_TOTAL)                          # всего страниц
    window = serializers.IntegerField(min_value=1, max_value=MAX_WINDOW, required=False, default=9)  # ширина окна


class PagerSlotSerializer(serializers.Serializer):
    """Слот пейджера: вид, номер страницы (для number/current) и CSS-классы."""
    kind = serializers.CharField(source="kind.value", read_only=True)
    number = serializers.IntegerField(allow_null=True, read_only=True)
    classes = serializers.ListField(child=serializers.CharField(), read_only=True)
