# apps/domains/answer_sheets/models/sheet.py
from __future__ import annotations

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from apps.api.common.models import BaseModel
from apps.domains.answer_keys.models import ExamKind, Subject
from apps.shared.contracts.question_config import QuestionConfig, initialize


class AnswerSheet(BaseModel):
    """
    학습자 답안지 (시험 1회 풀이)

    상태는 앞으로만 간다: draft -> submitted -> graded
    - draft: 문항별 저장/삭제 가능
    - submitted: 제출 완료, 채점 대기 (매칭 키가 없으면 여기서 멈춤)
    - graded: score 기록됨
    """

    class Status(models.TextChoices):
        DRAFT = "draft", "Draft"
        SUBMITTED = "submitted", "Submitted"
        GRADED = "graded", "Graded"

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="answer_sheets",
    )

    subject = models.CharField(max_length=20, choices=Subject.choices)
    exam_kind = models.CharField(
        max_length=20,
        choices=ExamKind.choices,
        default=ExamKind.PRACTICE,
    )
    sheet_name = models.CharField(max_length=255)

    total_questions = models.PositiveIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(200)],
    )
    mcq_count = models.PositiveIntegerField(default=0)
    text_count = models.PositiveIntegerField(default=0)
    question_config = models.JSONField(null=True, blank=True)

    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.DRAFT,
    )
    score = models.FloatField(null=True, blank=True)
    grade = models.CharField(max_length=10, null=True, blank=True)
    submitted_at = models.DateTimeField(null=True, blank=True)

    # update_sheet_stats 캐시 (목록 화면용). 정확한 값은 get_stats 로 계산.
    answered_count = models.PositiveIntegerField(default=0)
    mcq_answered = models.PositiveIntegerField(default=0)
    text_answered = models.PositiveIntegerField(default=0)
    completion_percentage = models.FloatField(default=0.0)

    class Meta:
        db_table = "answer_sheets"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["owner", "created_at"], name="answer_sheet_owner_idx"),
            models.Index(fields=["owner", "subject", "exam_kind"], name="answer_sheet_kind_idx"),
            models.Index(fields=["status"], name="answer_sheet_status_idx"),
        ]

    def __str__(self):
        return f"AnswerSheet({self.id}) {self.sheet_name} [{self.status}]"

    @property
    def is_draft(self) -> bool:
        return self.status == self.Status.DRAFT

    def get_question_config(self) -> QuestionConfig:
        if self.question_config is not None:
            return QuestionConfig.from_list(self.question_config)
        return initialize(int(self.mcq_count), int(self.text_count))
