# apps/domains/results/services/grading_service.py
"""
Grading Engine

- auto_grade : 제출 직후 best-effort 자동 채점 (실패는 로그 후 삼킴)
- grade_sheet: 관리자 수동 채점 (정답지 직접 지정, 실패는 그대로 전파)
- get_grade_history: 채점 이력 조회

채점 1회 = 점수 계산 + 답안지 반영 + 성적 이력 upsert + 이력 로그 1행
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional, Tuple

from django.db import transaction
from django.utils import timezone

from apps.api.common.errors import NotFound, ValidationError
from apps.api.common.store import store_errors
from apps.core.authorization import is_admin, require_admin
from apps.domains.answer_keys.models import AnswerKeyTemplate, performance_kind
from apps.domains.answer_keys.services.template_selector import select_active_template
from apps.domains.answer_sheets.models import AnswerSheet
from apps.domains.results.models import GradeUsageLog, TestResultRecord
from apps.domains.results.services import grader
from apps.domains.results.services.applier import ResultApplier
from apps.domains.results.services.outcome import (
    SubmissionOutcome,
    Submitted,
    SubmittedAndGraded,
    SubmittedGradeFailed,
)

logger = logging.getLogger(__name__)


# ============================================================
# core
# ============================================================

def score_sheet(sheet: AnswerSheet, template: AnswerKeyTemplate) -> grader.GradeResult:
    return grader.grade(
        template.responses.all(),
        sheet.responses.all(),
        max_score=float(template.total_questions),
    )


def _grade_and_record(
    sheet: AnswerSheet,
    template: AnswerKeyTemplate,
    *,
    graded_by=None,
    now: Optional[datetime] = None,
) -> grader.GradeResult:
    """
    호출하는 쪽에서 transaction.atomic 으로 감싼다.
    """
    now = now or timezone.now()
    result = score_sheet(sheet, template)

    # status: submitted|graded -> graded (draft 는 건드리지 않음)
    AnswerSheet.objects.filter(id=sheet.id).exclude(
        status=AnswerSheet.Status.DRAFT,
    ).touch(
        now=now,
        status=AnswerSheet.Status.GRADED,
        score=result.score,
    )

    taken_at = sheet.submitted_at or now
    record = ResultApplier.upsert_test_record(
        owner=sheet.owner,
        subject=sheet.subject,
        exam_kind=performance_kind(sheet.exam_kind),
        test_name=sheet.sheet_name,
        test_date=timezone.localdate(taken_at),
    )
    ResultApplier.upsert_test_result(
        test=record,
        owner=sheet.owner,
        raw_score=result.score,
    )

    GradeUsageLog.objects.create(
        sheet=sheet,
        template=template,
        graded_by=graded_by,
        graded_at=now,
        score=result.score,
        max_score=result.max_score,
        correct_count=result.correct_count,
    )
    return result


# ============================================================
# auto
# ============================================================

def _load_sheet(sheet_id: int) -> AnswerSheet:
    return AnswerSheet.objects.select_related("owner").get(id=sheet_id)


def auto_grade(sheet_id: int, *, now: Optional[datetime] = None) -> SubmissionOutcome:
    """
    제출 이후 단계. 어떤 실패도 제출을 되돌리지 않는다.

    - 매칭 정답지 없음 -> Submitted (답안지는 submitted 로 남음)
    - 성공            -> SubmittedAndGraded
    - 실패            -> SubmittedGradeFailed(reason), 자체 savepoint 만 롤백
    """
    now = now or timezone.now()
    sheet = None

    try:
        sheet = _load_sheet(sheet_id)
        template = select_active_template(sheet.subject, sheet.exam_kind, now)
        if template is None:
            logger.info(
                "No active answer key for sheet=%s (subject=%s kind=%s), left ungraded",
                sheet.id, sheet.subject, sheet.exam_kind,
            )
            return Submitted(sheet=sheet)

        with transaction.atomic():
            result = _grade_and_record(sheet, template, graded_by=None, now=now)
    except Exception as e:
        # savepoint 롤백 후라 메모리의 sheet 는 제출 직후 상태 그대로
        logger.exception("Auto-grading failed for sheet=%s", sheet_id)
        return SubmittedGradeFailed(sheet=sheet, reason=str(e) or e.__class__.__name__)

    # _grade_and_record 가 DB 에 쓴 값과 동일 (재조회 없이)
    sheet.status = AnswerSheet.Status.GRADED
    sheet.score = result.score
    sheet.updated_at = now
    logger.info(
        "Sheet auto-graded: sheet=%s template=%s score=%s/%s",
        sheet.id, template.id, result.score, result.max_score,
    )
    return SubmittedAndGraded(sheet=sheet, result=result, template_id=template.id)


# ============================================================
# manual
# ============================================================

def grade_sheet(actor, sheet_id: int, template_id: int) -> Tuple[AnswerSheet, grader.GradeResult]:
    require_admin(actor, "grade answer sheets")

    sheet = AnswerSheet.objects.select_related("owner").filter(id=sheet_id).first()
    if sheet is None:
        raise NotFound("Answer sheet not found")
    template = AnswerKeyTemplate.objects.filter(id=template_id).first()
    if template is None:
        raise NotFound("Answer key template not found")

    if sheet.is_draft:
        raise ValidationError("Answer sheet must be submitted before grading")

    with store_errors("grade answer sheet"), transaction.atomic():
        result = _grade_and_record(sheet, template, graded_by=actor)

    sheet.refresh_from_db()
    logger.info(
        "Sheet graded manually: sheet=%s template=%s by=%s score=%s/%s",
        sheet.id, template.id, getattr(actor, "id", None), result.score, result.max_score,
    )
    return sheet, result


# ============================================================
# history
# ============================================================

def get_grade_history(
    actor,
    *,
    sheet_id: Optional[int] = None,
    template_id: Optional[int] = None,
    limit: Optional[int] = None,
    offset: Optional[int] = None,
) -> List[GradeUsageLog]:
    """
    최신순. 관리자는 전체, 학습자는 본인 답안지의 이력만.
    """
    qs = GradeUsageLog.objects.select_related("sheet", "template", "graded_by")

    if not is_admin(actor):
        qs = qs.filter(sheet__owner_id=getattr(actor, "id", None))
    if sheet_id is not None:
        qs = qs.filter(sheet_id=sheet_id)
    if template_id is not None:
        qs = qs.filter(template_id=template_id)

    qs = qs.order_by("-graded_at", "-id")

    start = max(0, int(offset or 0))
    if limit is not None:
        return list(qs[start:start + max(0, int(limit))])
    return list(qs[start:])


def list_my_test_results(owner) -> List[TestResultRecord]:
    """
    성적 이력 (TestRecord + 본인 TestResultRecord)
    """
    return list(
        TestResultRecord.objects
        .filter(owner=owner)
        .select_related("test")
        .order_by("-test__test_date", "-id")
    )
