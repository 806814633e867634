# PATH: apps/domains/answer_keys/services/answer_key_service.py
"""
Answer Key Store

정답지 템플릿 / 문항별 정답 / 분류 CRUD.

- 모든 변경은 관리자 전용 (apps.core.authorization.require_admin)
- 읽기는 권한 체크 없음
- DB 실패는 store_errors 로 StoreError 변환
"""
from __future__ import annotations

import logging
import re
from typing import Any, Dict, Iterable, List, Optional

from django.conf import settings
from django.db import transaction
from django.db.models import Avg, Count, Max, Min, Prefetch, QuerySet

from apps.api.common.errors import NotFound, ValidationError
from apps.api.common.store import store_errors
from apps.core.authorization import require_admin
from apps.domains.answer_keys.models import (
    AnswerKeyCategory,
    AnswerKeyResponse,
    AnswerKeyTemplate,
    ExamKind,
    QuestionType,
)
from apps.shared.contracts.question_config import QuestionConfig, resize

logger = logging.getLogger(__name__)

COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")

TEMPLATE_FIELDS = (
    "template_name",
    "subject",
    "exam_kind",
    "total_questions",
    "mcq_count",
    "text_count",
    "is_active",
    "description",
)


def _mcq_option_max() -> int:
    return int(getattr(settings, "GRADING_MCQ_OPTION_MAX", 5))


def _max_questions() -> int:
    return int(getattr(settings, "ANSWER_SHEET_MAX_QUESTIONS", 200))


# ============================================================
# lookup
# ============================================================

def get_template(template_id: int) -> AnswerKeyTemplate:
    """
    응답(번호순) + 분류까지 미리 로드.
    """
    template = (
        AnswerKeyTemplate.objects
        .filter(id=template_id)
        .prefetch_related(
            Prefetch(
                "responses",
                queryset=AnswerKeyResponse.objects.order_by("question_number"),
            ),
            "categories",
        )
        .first()
    )
    if template is None:
        raise NotFound("Answer key template not found")
    return template


def list_templates(
    *,
    subject: Optional[str] = None,
    exam_kind: Optional[str] = None,
    search: Optional[str] = None,
    is_active: Optional[bool] = None,
    include_stats: bool = False,
) -> QuerySet:
    qs = AnswerKeyTemplate.objects.prefetch_related("categories")

    if subject:
        qs = qs.filter(subject=subject)
    if exam_kind:
        qs = qs.filter(exam_kind=exam_kind)
    if search:
        qs = qs.filter(template_name__icontains=search)
    if is_active is not None:
        qs = qs.filter(is_active=is_active)

    if include_stats:
        qs = qs.annotate(
            response_count=Count("responses", distinct=True),
            usage_count=Count("usage_logs", distinct=True),
            average_score=Avg("usage_logs__score"),
        )

    return qs.order_by("-created_at", "-id")


def get_template_stats(template_id: int) -> Dict[str, Any]:
    template = AnswerKeyTemplate.objects.filter(id=template_id).first()
    if template is None:
        raise NotFound("Answer key template not found")

    agg = template.usage_logs.aggregate(
        usage_count=Count("id"),
        graded_sheet_count=Count("sheet", distinct=True),
        average_score=Avg("score"),
        max_score=Max("score"),
        min_score=Min("score"),
    )
    return {
        "template_id": template.id,
        "response_count": template.responses.count(),
        "usage_count": agg["usage_count"] or 0,
        "graded_sheet_count": agg["graded_sheet_count"] or 0,
        "average_score": agg["average_score"],
        "max_score": agg["max_score"],
        "min_score": agg["min_score"],
    }


# ============================================================
# template
# ============================================================

def _parse_config(raw: Any) -> QuestionConfig:
    if not isinstance(raw, (list, tuple)):
        raise ValidationError("question_config must be a list")
    config = QuestionConfig.from_list(raw)
    if not (1 <= config.total <= _max_questions()):
        raise ValidationError(
            f"question_config must have between 1 and {_max_questions()} questions"
        )
    return config


def _check_total(total: Any) -> int:
    try:
        total = int(total)
    except (TypeError, ValueError):
        raise ValidationError("total_questions must be an integer")
    if not (1 <= total <= _max_questions()):
        raise ValidationError(f"total_questions must be between 1 and {_max_questions()}")
    return total


def _check_count(value: Any, field: str) -> int:
    if value is None or value == "":
        return 0
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be an integer")
    try:
        count = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be an integer")
    if count < 0:
        raise ValidationError("question counts must be >= 0")
    return count


def _warn_count_mismatch(template_name: str, total: int, mcq: int, text: int) -> None:
    if mcq + text != total:
        logger.warning(
            "Answer key '%s': mcq_count(%s) + text_count(%s) != total_questions(%s), stored as given",
            template_name, mcq, text, total,
        )


def _resolve_categories(category_ids: Iterable[int]) -> List[AnswerKeyCategory]:
    ids = {int(x) for x in category_ids}
    categories = list(AnswerKeyCategory.objects.filter(id__in=ids))
    if len(categories) != len(ids):
        missing = sorted(ids - {c.id for c in categories})
        raise NotFound(f"Answer key category not found: {missing}")
    return categories


def create_template(author, data: Dict[str, Any]) -> AnswerKeyTemplate:
    """
    question_config 가 있으면 dynamic mode:
      - total / mcq / text 는 config 에서 계산 (선언값 무시)
    없으면 선언값 그대로 저장 (불일치는 warning 만)
    """
    require_admin(author, "create answer keys")

    name = str(data.get("template_name") or "").strip()
    if not name:
        raise ValidationError("template_name is required")
    if not data.get("subject"):
        raise ValidationError("subject is required")

    raw_config = data.get("question_config")
    if raw_config is not None:
        config = _parse_config(raw_config)
        total, mcq, text = config.total, config.mcq_count, config.text_count
        stored_config = config.to_list()
    else:
        total = _check_total(data.get("total_questions"))
        mcq = _check_count(data.get("mcq_count"), "mcq_count")
        text = _check_count(data.get("text_count"), "text_count")
        _warn_count_mismatch(name, total, mcq, text)
        stored_config = None

    categories = None
    if data.get("category_ids") is not None:
        categories = _resolve_categories(data["category_ids"])

    with store_errors("create answer key"), transaction.atomic():
        template = AnswerKeyTemplate.objects.create(
            author=author,
            template_name=name,
            subject=data["subject"],
            exam_kind=data.get("exam_kind") or ExamKind.MOCK,
            total_questions=total,
            mcq_count=mcq,
            text_count=text,
            question_config=stored_config,
            is_active=bool(data.get("is_active", True)),
            description=data.get("description") or "",
        )
        if categories is not None:
            template.categories.set(categories)

    logger.info(
        "Answer key created: id=%s name=%s subject=%s kind=%s total=%s",
        template.id, template.template_name, template.subject, template.exam_kind, total,
    )
    return template


@transaction.atomic
def _apply_template_update(template: AnswerKeyTemplate, data: Dict[str, Any], categories) -> None:
    for f in TEMPLATE_FIELDS:
        if f in data and data[f] is not None:
            setattr(template, f, data[f])

    if "question_config" in data:
        raw = data["question_config"]
        if raw is None:
            # 기본 레이아웃으로 복귀 (현재 counts 유지)
            template.question_config = None
        else:
            config = _parse_config(raw)
            template.question_config = config.to_list()

    if template.question_config is not None:
        config = QuestionConfig.from_list(template.question_config)
        if "total_questions" in data and data["total_questions"] is not None:
            config = resize(config, int(template.total_questions))
        template.question_config = config.to_list()
        template.total_questions = config.total
        template.mcq_count = config.mcq_count
        template.text_count = config.text_count
    else:
        _warn_count_mismatch(
            template.template_name,
            int(template.total_questions),
            int(template.mcq_count),
            int(template.text_count),
        )

    template.save()

    # 줄어든 total 밖의 정답은 채점에 끼지 않도록 제거
    stale, _ = template.responses.filter(question_number__gt=template.total_questions).delete()
    if stale:
        logger.info(
            "Answer key %s shrunk to %s questions, removed %s responses",
            template.id, template.total_questions, stale,
        )

    if categories is not None:
        template.categories.set(categories)


def update_template(author, template_id: int, data: Dict[str, Any]) -> AnswerKeyTemplate:
    """
    부분 수정.
    - dynamic mode 에서 total 변경 -> config resize (뒤에 MCQ 추가 / 뒤에서 잘라냄)
    - category_ids 가 오면 연결을 통째로 교체
    """
    require_admin(author, "update answer keys")
    template = get_template(template_id)

    if data.get("total_questions") is not None:
        data = {**data, "total_questions": _check_total(data["total_questions"])}
    for f in ("mcq_count", "text_count"):
        if data.get(f) is not None:
            data = {**data, f: _check_count(data[f], f)}
    if "template_name" in data and not str(data.get("template_name") or "").strip():
        raise ValidationError("template_name cannot be empty")

    categories = None
    if data.get("category_ids") is not None:
        categories = _resolve_categories(data["category_ids"])

    with store_errors("update answer key"):
        _apply_template_update(template, data, categories)

    logger.info("Answer key updated: id=%s fields=%s", template.id, sorted(data.keys()))
    return get_template(template.id)


def delete_template(author, template_id: int) -> None:
    require_admin(author, "delete answer keys")
    template = AnswerKeyTemplate.objects.filter(id=template_id).first()
    if template is None:
        raise NotFound("Answer key template not found")

    with store_errors("delete answer key"):
        template.delete()
    logger.info("Answer key deleted: id=%s", template_id)


# ============================================================
# responses (ground truth)
# ============================================================

def _normalize_key_response(entry: Dict[str, Any], total: int) -> Dict[str, Any]:
    """
    입력 1건 검증 + 저장용 dict 로 정리.
    선언된 question_type 에 맞는 정답 필드만 남긴다.
    """
    try:
        number = int(entry.get("question_number"))
    except (TypeError, ValueError):
        raise ValidationError("question_number must be an integer")
    if not (1 <= number <= total):
        raise ValidationError(f"question_number {number} is out of range (1..{total})")

    qtype = str(entry.get("question_type") or "").lower()
    if qtype not in QuestionType.values:
        raise ValidationError(f"Question {number}: unknown question_type {qtype!r}")

    correct_option = None
    correct_text_answers = None

    if qtype == QuestionType.MCQ:
        option = entry.get("correct_option")
        if option is None or isinstance(option, bool):
            raise ValidationError(f"Question {number}: correct_option is required for MCQ questions")
        try:
            correct_option = int(option)
        except (TypeError, ValueError):
            raise ValidationError(f"Question {number}: correct_option must be an integer")
        if correct_option != option and not isinstance(option, str):
            raise ValidationError(f"Question {number}: correct_option must be an integer")
        if not (1 <= correct_option <= _mcq_option_max()):
            raise ValidationError(
                f"Question {number}: correct_option must be between 1 and {_mcq_option_max()}"
            )
    else:
        answers = entry.get("correct_text_answers")
        if isinstance(answers, str):
            answers = [answers]
        if not answers:
            raise ValidationError(
                f"Question {number}: correct_text_answers is required for text questions"
            )
        cleaned = [str(a).strip() for a in answers if a is not None and str(a).strip()]
        if not cleaned:
            raise ValidationError(
                f"Question {number}: correct_text_answers must contain a non-empty answer"
            )
        correct_text_answers = cleaned

    points = entry.get("points_value", 1.0)
    try:
        points = float(1.0 if points is None else points)
    except (TypeError, ValueError):
        raise ValidationError(f"Question {number}: points_value must be a number")
    if points < 0:
        raise ValidationError(f"Question {number}: points_value must be >= 0")

    return {
        "question_number": number,
        "defaults": {
            "question_type": qtype,
            "correct_option": correct_option,
            "correct_text_answers": correct_text_answers,
            "points_value": points,
            "difficulty": entry.get("difficulty") or "medium",
            "explanation": entry.get("explanation") or "",
        },
    }


def upsert_responses(author, template_id: int, responses: List[Dict[str, Any]]) -> List[AnswerKeyResponse]:
    """
    (template, question_number) 기준 일괄 upsert.
    - 전부 검증한 뒤 한 트랜잭션으로 저장
    - 같은 번호가 배치 안에 두 번 오면 뒤의 것이 이긴다
    """
    require_admin(author, "edit answer keys")
    template = AnswerKeyTemplate.objects.filter(id=template_id).first()
    if template is None:
        raise NotFound("Answer key template not found")

    if not responses:
        raise ValidationError("At least one response is required")

    by_number: Dict[int, Dict[str, Any]] = {}
    for entry in responses:
        if not isinstance(entry, dict):
            raise ValidationError("responses must be a list of objects")
        normalized = _normalize_key_response(entry, int(template.total_questions))
        by_number[normalized["question_number"]] = normalized

    saved: List[AnswerKeyResponse] = []
    with store_errors("save answer key responses"), transaction.atomic():
        for number in sorted(by_number):
            obj, _ = AnswerKeyResponse.objects.update_or_create(
                template=template,
                question_number=number,
                defaults=by_number[number]["defaults"],
            )
            saved.append(obj)

    logger.info("Answer key responses upserted: template=%s count=%s", template.id, len(saved))
    return saved


def delete_response(author, template_id: int, question_number: int) -> None:
    require_admin(author, "edit answer keys")

    with store_errors("delete answer key response"):
        deleted, _ = AnswerKeyResponse.objects.filter(
            template_id=template_id,
            question_number=question_number,
        ).delete()

    if not deleted:
        raise NotFound(f"Answer key response for question {question_number} not found")
    logger.info("Answer key response deleted: template=%s q=%s", template_id, question_number)


# ============================================================
# categories
# ============================================================

def list_categories() -> QuerySet:
    return AnswerKeyCategory.objects.order_by("name")


def create_category(author, data: Dict[str, Any]) -> AnswerKeyCategory:
    require_admin(author, "create answer key categories")

    name = str(data.get("name") or "").strip()
    if not name:
        raise ValidationError("name is required")
    if AnswerKeyCategory.objects.filter(name=name).exists():
        raise ValidationError(f"Category '{name}' already exists")

    color = data.get("color") or "#007AFF"
    if not COLOR_RE.match(color):
        raise ValidationError("color must be #RRGGBB")

    with store_errors("create answer key category"):
        category = AnswerKeyCategory.objects.create(
            name=name,
            description=data.get("description") or "",
            color=color,
        )
    logger.info("Answer key category created: id=%s name=%s", category.id, category.name)
    return category
