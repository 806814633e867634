"""
공통 API 뷰
"""
import logging

from django.conf import settings
from django.db import DatabaseError, connection
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def health_check(request):
    """
    GET /health/  (인증 없음)

    200: DB 조회 가능
    503: DB 조회 실패 (원인은 로그에만)
    """
    checks = {"database": "ok"}
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError:
        logger.exception("Health check: database unreachable")
        checks["database"] = "unreachable"

    healthy = all(v == "ok" for v in checks.values())
    return JsonResponse(
        {
            "status": "healthy" if healthy else "unhealthy",
            "service": "grading-api",
            "checks": checks,
            "limits": {
                "max_questions": getattr(settings, "ANSWER_SHEET_MAX_QUESTIONS", 200),
                "mcq_option_max": getattr(settings, "GRADING_MCQ_OPTION_MAX", 5),
            },
        },
        status=200 if healthy else 503,
    )
