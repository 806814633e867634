# apps/domains/answer_sheets/models/response.py
from __future__ import annotations

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from apps.api.common.models import TimestampModel
from apps.domains.answer_keys.models import QuestionType


class AnswerSheetResponse(TimestampModel):
    """
    문항별 학습자 답 (raw)
    - 정답/점수 판정 금지 (results 도메인 책임)
    - (sheet, question_number) 기준 upsert
    """

    sheet = models.ForeignKey(
        "answer_sheets.AnswerSheet",
        on_delete=models.CASCADE,
        related_name="responses",
    )

    question_number = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    question_type = models.CharField(max_length=10, choices=QuestionType.choices)

    mcq_option = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        validators=[MinValueValidator(1), MaxValueValidator(5)],
    )
    text_answer = models.TextField(null=True, blank=True)

    class Meta:
        db_table = "answer_sheet_responses"
        unique_together = ("sheet", "question_number")
        ordering = ["question_number"]

    def __str__(self) -> str:
        return f"AnswerSheetResponse(sheet={self.sheet_id}, q={self.question_number})"
