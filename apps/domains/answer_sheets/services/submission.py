# PATH: apps/domains/answer_sheets/services/submission.py
"""
제출 파이프라인

1) 모든 답 검증 (write 전)
2) draft 확인 -> 아니면 AlreadySubmitted (답도 건드리지 않음)
3) 답 upsert
4) draft -> submitted 조건부 UPDATE (영향 행 0 이면 AlreadySubmitted, 전체 롤백)
5) 자동 채점 (best-effort, results 도메인)

1~4 는 한 트랜잭션. 5 의 실패는 제출을 되돌리지 않는다.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Iterable, Optional

from django.db import transaction
from django.utils import timezone

from apps.api.common.errors import AlreadySubmitted, NotFound, ValidationError
from apps.api.common.store import store_errors
from apps.domains.answer_sheets.models import AnswerSheet
from apps.domains.answer_sheets.services import sheet_service
from apps.domains.answer_sheets.services.answer_input import AnswerInput, validate_answer
from apps.domains.results.services import grading_service
from apps.domains.results.services.outcome import SubmissionOutcome

logger = logging.getLogger(__name__)


def _validate_all(answers: Iterable[Dict[str, Any]]) -> Dict[int, AnswerInput]:
    by_number: Dict[int, AnswerInput] = {}
    for raw in answers or []:
        if not isinstance(raw, dict):
            raise ValidationError("answers must be a list of objects")
        qtype = str(raw.get("question_type") or "").lower()
        value = raw.get("value")
        if value is None:
            value = raw.get("mcq_option") if qtype == "mcq" else raw.get("text_answer")
        answer = validate_answer(raw.get("question_number"), qtype, value)
        # 같은 번호가 두 번 오면 뒤의 것
        by_number[answer.question_number] = answer
    return by_number


def submit_sheet(
    sheet_id: int,
    answers: Optional[Iterable[Dict[str, Any]]] = None,
    *,
    now: Optional[datetime] = None,
) -> SubmissionOutcome:
    validated = _validate_all(answers or [])
    now = now or timezone.now()

    with store_errors("submit answer sheet"), transaction.atomic():
        sheet = AnswerSheet.objects.filter(id=sheet_id).first()
        if sheet is None:
            raise NotFound("Answer sheet not found")
        if not sheet.is_draft:
            raise AlreadySubmitted(sheet_service.ALREADY_SUBMITTED_MESSAGE)

        for number in sorted(validated):
            sheet_service.check_in_range(sheet, number)

        for number in sorted(validated):
            sheet_service.upsert_answer(sheet, validated[number])

        updated = AnswerSheet.objects.filter(
            id=sheet.id,
            status=AnswerSheet.Status.DRAFT,
        ).touch(
            now=now,
            status=AnswerSheet.Status.SUBMITTED,
            submitted_at=now,
        )
        if updated != 1:
            # 동시에 다른 제출이 먼저 끝남 -> 위 upsert 까지 롤백
            raise AlreadySubmitted(sheet_service.ALREADY_SUBMITTED_MESSAGE)

    if validated:
        sheet_service.schedule_stats_refresh(sheet.id)
    logger.info("Answer sheet submitted: id=%s answers=%s", sheet.id, len(validated))

    return grading_service.auto_grade(sheet.id, now=now)
