# PATH: apps/domains/answer_keys/services/template_selector.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

from django.utils import timezone

from apps.domains.answer_keys.models import AnswerKeyTemplate, matching_key_kinds


def select_active_template(
    subject: str,
    exam_kind: str,
    now: Optional[datetime] = None,
) -> Optional[AnswerKeyTemplate]:
    """
    자동 채점용 정답지 선택 (순수 조회)

    - is_active 이고 created_at <= now 인 것 중 가장 최근 생성본
    - subject 일치, exam_kind 는 matching_key_kinds 기준 (practice -> practice|mock)
    - 없으면 None
    """
    now = now or timezone.now()
    return (
        AnswerKeyTemplate.objects
        .filter(
            subject=subject,
            exam_kind__in=matching_key_kinds(exam_kind),
            is_active=True,
            created_at__lte=now,
        )
        .order_by("-created_at", "-id")
        .first()
    )
