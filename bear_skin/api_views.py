# BS/bear_skin/api_views.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: BS/bear_skin/api_views.py
# Назначение: DRF-представления: слоты пейджера в JSON для фронтенда
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations  # поддержка современных аннотаций

import logging

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response  # DRF-ответ
from rest_framework.views import APIView

from .serializers import PagerQuerySerializer, PagerSlotSerializer
from .services.pager import InvalidArgument, compute_window

logger = logging.getLogger(__name__)


class PagerWindowView(APIView):
    """GET /api/pager/?page=9&total=20&window=9 → {"slots": [...]}."""
    permission_classes = [AllowAny]

    def get(self, request: Request) -> Response:
        query = PagerQuerySerializer(data=request.query_params)
        if not query.is_valid():
            logger.warning("pager api: bad query %s: %s", dict(request.query_params), query.errors)
            return Response({"error": query.errors}, status=status.HTTP_400_BAD_REQUEST)

        data = query.validated_data
        try:
            slots = compute_window(data["page"], data["total"], data["window"])
        except InvalidArgument as exc:
            logger.warning("pager api: %s", exc)
            return Response({"error": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({
            "page": data["page"],
            "total": data["total"],
            "window": data["window"],
            "slots": PagerSlotSerializer(slots, many=True).data,
        })
