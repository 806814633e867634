# PATH: apps/domains/answer_sheets/services/sheet_service.py
"""
Answer Sheet Store

- 답안지 생성/수정/삭제
- 문항별 답 저장/삭제 (draft 에서만)
- 진행 통계: get_stats (실시간) / refresh_sheet_stats (캐시 컬럼 갱신)

❌ 채점 없음 (results 도메인)
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

from django.conf import settings
from django.db import transaction
from django.db.models import Count, Prefetch, Q, QuerySet

from apps.api.common.errors import AlreadySubmitted, NotFound, ValidationError
from apps.api.common.store import store_errors
from apps.core.authorization import is_admin
from apps.domains.answer_keys.models import ExamKind
from apps.domains.answer_sheets.models import AnswerSheet, AnswerSheetResponse
from apps.domains.answer_sheets.services.answer_input import AnswerInput, validate_answer
from apps.shared.contracts.question_config import MCQ, TEXT, QuestionConfig, resize

logger = logging.getLogger(__name__)

ALREADY_SUBMITTED_MESSAGE = "Answer sheet has already been submitted"

SHEET_META_FIELDS = ("sheet_name", "subject", "exam_kind", "grade")
SHEET_COUNT_FIELDS = ("total_questions", "mcq_count", "text_count", "question_config")


def _max_questions() -> int:
    return int(getattr(settings, "ANSWER_SHEET_MAX_QUESTIONS", 200))


# ============================================================
# counts
# ============================================================

def reconcile_counts(total: int, mcq: int, text: int) -> Tuple[int, int, int]:
    """
    mcq + text != total 이면 text 를 믿고 mcq 를 다시 계산한다.
    (total=20, mcq=20, text=5) -> (20, 15, 5)
    """
    total, mcq, text = int(total), int(mcq), int(text)

    if not (1 <= total <= _max_questions()):
        raise ValidationError(f"total_questions must be between 1 and {_max_questions()}")
    if mcq < 0 or text < 0:
        raise ValidationError("question counts must be >= 0")
    if text > total:
        raise ValidationError("text_count cannot exceed total_questions")

    reconciled = max(0, total - text)
    if reconciled != mcq:
        logger.warning(
            "Reconciling answer sheet counts: total=%s mcq=%s text=%s -> mcq=%s",
            total, mcq, text, reconciled,
        )
    return total, reconciled, text


def _parse_config(raw: Any) -> QuestionConfig:
    if not isinstance(raw, (list, tuple)):
        raise ValidationError("question_config must be a list")
    config = QuestionConfig.from_list(raw)
    if not (1 <= config.total <= _max_questions()):
        raise ValidationError(
            f"question_config must have between 1 and {_max_questions()} questions"
        )
    return config


# ============================================================
# lookup
# ============================================================

def _get_sheet(sheet_id: int) -> AnswerSheet:
    sheet = AnswerSheet.objects.filter(id=sheet_id).first()
    if sheet is None:
        raise NotFound("Answer sheet not found")
    return sheet


def get_sheet(sheet_id: int) -> AnswerSheet:
    sheet = (
        AnswerSheet.objects
        .filter(id=sheet_id)
        .prefetch_related(
            Prefetch(
                "responses",
                queryset=AnswerSheetResponse.objects.order_by("question_number"),
            )
        )
        .first()
    )
    if sheet is None:
        raise NotFound("Answer sheet not found")
    return sheet


def list_sheets(
    principal,
    *,
    subject: Optional[str] = None,
    exam_kind: Optional[str] = None,
    status: Optional[str] = None,
) -> QuerySet:
    """
    학습자는 본인 것만, 관리자는 전체.
    """
    qs = AnswerSheet.objects.all()
    if not is_admin(principal):
        qs = qs.filter(owner_id=getattr(principal, "id", None))

    if subject:
        qs = qs.filter(subject=subject)
    if exam_kind:
        qs = qs.filter(exam_kind=exam_kind)
    if status:
        qs = qs.filter(status=status)

    return qs.order_by("-created_at", "-id")


# ============================================================
# sheet CRUD
# ============================================================

def create_sheet(
    owner,
    *,
    subject: str,
    sheet_name: str,
    total_questions: Optional[int] = None,
    mcq_count: int = 0,
    text_count: int = 0,
    exam_kind: str = ExamKind.PRACTICE,
    question_config: Optional[list] = None,
) -> AnswerSheet:
    name = str(sheet_name or "").strip()
    if not name:
        raise ValidationError("sheet_name is required")
    if not subject:
        raise ValidationError("subject is required")

    if question_config is not None:
        config = _parse_config(question_config)
        total, mcq, text = config.total, config.mcq_count, config.text_count
        stored_config = config.to_list()
    else:
        if total_questions is None:
            raise ValidationError("total_questions is required")
        total, mcq, text = reconcile_counts(total_questions, mcq_count, text_count)
        stored_config = None

    with store_errors("create answer sheet"):
        sheet = AnswerSheet.objects.create(
            owner=owner,
            subject=subject,
            exam_kind=exam_kind or ExamKind.PRACTICE,
            sheet_name=name,
            total_questions=total,
            mcq_count=mcq,
            text_count=text,
            question_config=stored_config,
            status=AnswerSheet.Status.DRAFT,
        )

    logger.info(
        "Answer sheet created: id=%s owner=%s subject=%s kind=%s total=%s",
        sheet.id, sheet.owner_id, sheet.subject, sheet.exam_kind, total,
    )
    return sheet


def update_sheet(sheet_id: int, data: Dict[str, Any]) -> AnswerSheet:
    """
    메타(name / subject / kind / grade)는 언제든,
    문항 수 / 구성은 draft 에서만.

    status 는 여기서 바꿀 수 없다 (submit / grade 전용).
    """
    if "status" in data:
        raise ValidationError("status cannot be changed directly")

    sheet = _get_sheet(sheet_id)

    touches_layout = any(f in data for f in SHEET_COUNT_FIELDS)
    if touches_layout and not sheet.is_draft:
        raise AlreadySubmitted(ALREADY_SUBMITTED_MESSAGE)

    if "sheet_name" in data and not str(data.get("sheet_name") or "").strip():
        raise ValidationError("sheet_name cannot be empty")

    for f in SHEET_META_FIELDS:
        if f in data and (data[f] is not None or f == "grade"):
            setattr(sheet, f, data[f])

    if touches_layout:
        _apply_layout_update(sheet, data)

    with store_errors("update answer sheet"), transaction.atomic():
        sheet.save()
        # 줄어든 경우 범위 밖 답 정리
        stale = sheet.responses.filter(question_number__gt=sheet.total_questions).delete()[0]

    if stale:
        logger.info("Answer sheet %s: removed %s answers beyond question %s", sheet.id, stale, sheet.total_questions)
        schedule_stats_refresh(sheet.id)

    logger.info("Answer sheet updated: id=%s fields=%s", sheet.id, sorted(data.keys()))
    return sheet


def _apply_layout_update(sheet: AnswerSheet, data: Dict[str, Any]) -> None:
    if "question_config" in data and data["question_config"] is not None:
        config = _parse_config(data["question_config"])
    elif sheet.question_config is not None and data.get("question_config", sheet.question_config) is not None:
        # dynamic mode: total 변경은 resize, counts 는 config 에서
        config = sheet.get_question_config()
        if data.get("total_questions") is not None:
            total = int(data["total_questions"])
            if not (1 <= total <= _max_questions()):
                raise ValidationError(f"total_questions must be between 1 and {_max_questions()}")
            config = resize(config, total)
    else:
        # 기본 레이아웃: 부분 입력은 저장값과 합친 뒤 text 기준으로 맞춤
        total = data.get("total_questions")
        mcq = data.get("mcq_count")
        text = data.get("text_count")
        sheet.question_config = None
        sheet.total_questions, sheet.mcq_count, sheet.text_count = reconcile_counts(
            sheet.total_questions if total is None else total,
            sheet.mcq_count if mcq is None else mcq,
            sheet.text_count if text is None else text,
        )
        return

    sheet.question_config = config.to_list()
    sheet.total_questions = config.total
    sheet.mcq_count = config.mcq_count
    sheet.text_count = config.text_count


def delete_sheet(sheet_id: int) -> None:
    sheet = _get_sheet(sheet_id)
    with store_errors("delete answer sheet"):
        sheet.delete()
    logger.info("Answer sheet deleted: id=%s", sheet_id)


# ============================================================
# responses
# ============================================================

def upsert_answer(sheet: AnswerSheet, answer: AnswerInput) -> AnswerSheetResponse:
    """
    (sheet, question_number) 기준 upsert. 상태 / 범위 검사는 호출하는 쪽 책임.
    """
    obj, _ = AnswerSheetResponse.objects.update_or_create(
        sheet=sheet,
        question_number=answer.question_number,
        defaults=answer.defaults(),
    )
    return obj


def check_in_range(sheet: AnswerSheet, question_number: int) -> None:
    if question_number > int(sheet.total_questions):
        raise ValidationError(
            f"question_number {question_number} is out of range (1..{sheet.total_questions})"
        )


def save_response(sheet_id: int, question_number: int, question_type: str, value: Any) -> AnswerSheetResponse:
    answer = validate_answer(question_number, question_type, value)

    sheet = _get_sheet(sheet_id)
    if not sheet.is_draft:
        raise AlreadySubmitted(ALREADY_SUBMITTED_MESSAGE)
    check_in_range(sheet, answer.question_number)

    with store_errors("save answer"):
        obj = upsert_answer(sheet, answer)

    schedule_stats_refresh(sheet.id)
    logger.info(
        "Answer saved: sheet=%s q=%s type=%s",
        sheet.id, answer.question_number, answer.question_type,
    )
    return obj


def delete_response(sheet_id: int, question_number: int) -> None:
    sheet = _get_sheet(sheet_id)
    if not sheet.is_draft:
        raise AlreadySubmitted(ALREADY_SUBMITTED_MESSAGE)

    with store_errors("delete answer"):
        deleted, _ = AnswerSheetResponse.objects.filter(
            sheet=sheet,
            question_number=question_number,
        ).delete()

    if not deleted:
        raise NotFound(f"Answer for question {question_number} not found")

    schedule_stats_refresh(sheet.id)
    logger.info("Answer deleted: sheet=%s q=%s", sheet.id, question_number)


# ============================================================
# stats
# ============================================================

def _compute_stats(sheet: AnswerSheet) -> Dict[str, Any]:
    agg = AnswerSheetResponse.objects.filter(sheet=sheet).aggregate(
        mcq_answered=Count("id", filter=Q(question_type=MCQ, mcq_option__isnull=False)),
        text_answered=Count("id", filter=Q(question_type=TEXT, text_answer__isnull=False) & ~Q(text_answer="")),
    )
    mcq_answered = int(agg["mcq_answered"] or 0)
    text_answered = int(agg["text_answered"] or 0)
    answered = mcq_answered + text_answered

    total = int(sheet.total_questions or 0)
    completion = round(min(100.0, answered * 100.0 / total), 2) if total else 0.0

    return {
        "total_answered": answered,
        "mcq_answered": mcq_answered,
        "text_answered": text_answered,
        "completion_percentage": completion,
    }


def get_stats(sheet_id: int) -> Dict[str, Any]:
    sheet = _get_sheet(sheet_id)
    stats = _compute_stats(sheet)
    stats.update({
        "sheet_id": sheet.id,
        "total_questions": sheet.total_questions,
        "mcq_count": sheet.mcq_count,
        "text_count": sheet.text_count,
    })
    return stats


def refresh_sheet_stats(sheet_id: int) -> Optional[Dict[str, Any]]:
    """
    목록 화면용 캐시 컬럼 갱신. 답안지가 이미 지워졌으면 None.
    """
    sheet = AnswerSheet.objects.filter(id=sheet_id).first()
    if sheet is None:
        return None

    stats = _compute_stats(sheet)
    with store_errors("update sheet stats"):
        AnswerSheet.objects.filter(id=sheet_id).touch(
            answered_count=stats["total_answered"],
            mcq_answered=stats["mcq_answered"],
            text_answered=stats["text_answered"],
            completion_percentage=stats["completion_percentage"],
        )
    return stats


def schedule_stats_refresh(sheet_id: int) -> None:
    """
    커밋 이후 Celery 로 통계 갱신.
    실패해도 답 저장/삭제는 성공으로 둔다.
    """
    from apps.domains.answer_sheets.tasks import refresh_sheet_stats_task

    def _enqueue():
        try:
            refresh_sheet_stats_task.delay(sheet_id)
        except Exception:
            logger.exception("Failed to enqueue stats refresh for sheet %s", sheet_id)

    transaction.on_commit(_enqueue)
