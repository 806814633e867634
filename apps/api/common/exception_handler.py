# PATH: apps/api/common/exception_handler.py
from __future__ import annotations

import logging

from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from apps.api.common.errors import DomainError, StoreError

logger = logging.getLogger(__name__)


def domain_exception_handler(exc, context):
    """
    REST_FRAMEWORK["EXCEPTION_HANDLER"]

    - DomainError -> {"detail", "code"} + http_status
    - 그 외는 DRF 기본 처리 (serializer ValidationError, NotAuthenticated 등)
    """
    if isinstance(exc, DomainError):
        view = context.get("view")
        view_name = type(view).__name__ if view is not None else "-"
        if isinstance(exc, StoreError):
            logger.error("[%s] %s", view_name, exc.message)
        else:
            logger.info("[%s] %s: %s", view_name, exc.code, exc.message)
        return Response(exc.to_dict(), status=exc.http_status)

    return drf_exception_handler(exc, context)
