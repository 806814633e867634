# apps/api/common/middleware.py
# DRF 밖(일반 Django 뷰, 미들웨어)에서 새어 나온 예외를 JSON 으로 변환.
# process_exception 응답은 CorsMiddleware를 거치지 않으므로 여기서 CORS 헤더 추가.
from __future__ import annotations

import logging

from django.conf import settings
from django.http import JsonResponse

from apps.api.common.errors import DomainError

logger = logging.getLogger(__name__)


def _add_cors_headers_to_response(request, response):
    origin = (request.META.get("HTTP_ORIGIN") or "").strip()
    if not origin:
        return response

    allowed = getattr(settings, "CORS_ALLOWED_ORIGINS", []) or []
    if getattr(settings, "CORS_ALLOW_ALL_ORIGINS", False) or origin in allowed:
        response["Access-Control-Allow-Origin"] = origin
        if getattr(settings, "CORS_ALLOW_CREDENTIALS", False):
            response["Access-Control-Allow-Credentials"] = "true"
    return response


class UnhandledExceptionMiddleware:
    """
    - DomainError -> exception_handler 와 같은 {"detail", "code"} 본문
    - 그 외        -> 500 {"detail", "code": "internal_error"} (DEBUG 면 error 포함)
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if isinstance(exception, DomainError):
            logger.info("%s %s -> %s: %s", request.method, request.path, exception.code, exception.message)
            resp = JsonResponse(exception.to_dict(), status=exception.http_status)
            return _add_cors_headers_to_response(request, resp)

        logger.exception("Unhandled exception on %s %s", request.method, request.path)
        body = {"detail": "Internal server error", "code": "internal_error"}
        if settings.DEBUG:
            body["error"] = str(exception)
        return _add_cors_headers_to_response(request, JsonResponse(body, status=500))
