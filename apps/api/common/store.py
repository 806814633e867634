# PATH: apps/api/common/store.py
from __future__ import annotations

import logging
from contextlib import contextmanager

from django.db import DatabaseError

from apps.api.common.errors import StoreError

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(action: str):
    """
    ORM 호출을 감싸서 DatabaseError 를 StoreError 로 바꾼다.

    예)
        with store_errors("save answer"):
            AnswerSheetResponse.objects.update_or_create(...)

    -> StoreError("Failed to save answer: <원본 메시지>")
    """
    try:
        yield
    except DatabaseError as e:
        logger.error("Store failure during %s: %s", action, e)
        raise StoreError(f"Failed to {action}: {e}") from e
