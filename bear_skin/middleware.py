# BS/bear_skin/middleware.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: BS/bear_skin/middleware.py
# Назначение: заголовок X-UA-Compatible для всех ответов сайта
# ─────────────────────────────────────────────────────────────────────────────


class XUACompatibleMiddleware:
    """Заголовок X-UA-Compatible: IE без режима совместимости (если его ещё нет)."""

    header = "X-UA-Compatible"
    value = "IE=edge,chrome=1"

    def __init__(self, get_response):
        self.get_response = get_response  # следующий обработчик в цепочке middleware

    def __call__(self, request):
        response = self.get_response(request)
        if not response.has_header(self.header):
            response[self.header] = self.value
        return response
