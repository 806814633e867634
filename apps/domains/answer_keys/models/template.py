from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from apps.api.common.models import BaseModel
from apps.shared.contracts.question_config import QuestionConfig, initialize

from .choices import ExamKind, Subject


class AnswerKeyTemplate(BaseModel):
    """
    정답지 템플릿 (문항 구성 + 메타)

    - 관리자만 생성/수정
    - is_active 로 soft 비활성화 (hard delete 도 가능)
    - mcq_count + text_count == total_questions 가 원칙이지만
      생성 시 불일치는 경고만 남기고 그대로 저장한다.
    """

    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="answer_key_templates",
    )

    template_name = models.CharField(max_length=255)
    subject = models.CharField(max_length=20, choices=Subject.choices)
    exam_kind = models.CharField(
        max_length=20,
        choices=ExamKind.choices,
        default=ExamKind.MOCK,
    )

    total_questions = models.PositiveIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(200)],
    )
    mcq_count = models.PositiveIntegerField(default=0)
    text_count = models.PositiveIntegerField(default=0)

    # null = 기본 레이아웃(initialize), 값이 있으면 문항별 수동 설정 모드
    # 예: [{"question_number": 1, "type": "mcq"}, ...]
    question_config = models.JSONField(null=True, blank=True)

    is_active = models.BooleanField(default=True)
    description = models.TextField(blank=True, default="")

    categories = models.ManyToManyField(
        "answer_keys.AnswerKeyCategory",
        related_name="templates",
        blank=True,
    )

    class Meta:
        db_table = "answer_key_templates"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(
                fields=["subject", "exam_kind", "is_active", "created_at"],
                name="ak_tpl_select_idx",
            ),
        ]

    def __str__(self):
        return f"{self.template_name} ({self.subject}/{self.exam_kind})"

    @property
    def is_dynamic(self) -> bool:
        return self.question_config is not None

    def get_question_config(self) -> QuestionConfig:
        if self.question_config is not None:
            return QuestionConfig.from_list(self.question_config)
        return initialize(int(self.mcq_count), int(self.text_count))
