# PATH: apps/domains/answer_sheets/services/answer_input.py
"""
학습자 답 1건 검증 (DB 접근 없음)

save_response / submit_sheet 둘 다 여기를 거친다.
검증 실패는 어떤 write 보다도 먼저 ValidationError.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from django.conf import settings

from apps.api.common.errors import ValidationError
from apps.shared.contracts.question_config import MCQ, TEXT


@dataclass(frozen=True)
class AnswerInput:
    question_number: int
    question_type: str
    mcq_option: Optional[int] = None
    text_answer: Optional[str] = None

    def defaults(self) -> dict:
        return {
            "question_type": self.question_type,
            "mcq_option": self.mcq_option,
            "text_answer": self.text_answer,
        }


def validate_answer(question_number: Any, question_type: Any, value: Any) -> AnswerInput:
    if isinstance(question_number, bool):
        raise ValidationError("question_number must be an integer")
    try:
        number = int(question_number)
    except (TypeError, ValueError):
        raise ValidationError("question_number must be an integer")
    if number < 1:
        raise ValidationError("question_number must be >= 1")

    qtype = str(question_type or "").lower()

    if qtype == MCQ:
        if value is None or value == "" or isinstance(value, bool):
            raise ValidationError("MCQ option is required for MCQ questions")
        try:
            option = int(value)
        except (TypeError, ValueError):
            raise ValidationError("MCQ option must be an integer")
        if isinstance(value, float) and option != value:
            raise ValidationError("MCQ option must be an integer")
        option_max = int(getattr(settings, "GRADING_MCQ_OPTION_MAX", 5))
        if not (1 <= option <= option_max):
            raise ValidationError(f"MCQ option must be between 1 and {option_max}")
        return AnswerInput(number, MCQ, mcq_option=option)

    if qtype == TEXT:
        if not isinstance(value, str) or not value.strip():
            raise ValidationError("Text answer is required for text questions")
        return AnswerInput(number, TEXT, text_answer=value)

    raise ValidationError(f"unknown question type: {question_type!r}")
