# apps/domains/answer_sheets/tasks.py
import logging

from celery import shared_task

from apps.domains.answer_sheets.services import sheet_service

logger = logging.getLogger(__name__)


@shared_task(name="answer_sheets.refresh_sheet_stats", ignore_result=True)
def refresh_sheet_stats_task(sheet_id: int) -> bool:
    """
    update_sheet_stats: 캐시 통계 컬럼 갱신.
    실패는 로그만 남긴다 (다음 저장 때 다시 계산됨).
    """
    try:
        sheet_service.refresh_sheet_stats(int(sheet_id))
    except Exception:
        logger.exception("Sheet stats refresh failed: sheet=%s", sheet_id)
        return False
    return True
