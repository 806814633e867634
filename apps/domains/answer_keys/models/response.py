from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from apps.api.common.models import BaseModel

from .choices import Difficulty, QuestionType


class AnswerKeyResponse(BaseModel):
    """
    문항별 정답 (ground truth)

    - (template, question_number) 당 1개. 재저장은 덮어쓰기.
    - mcq: correct_option 만 / text: correct_text_answers 만 채운다.
    """

    template = models.ForeignKey(
        "answer_keys.AnswerKeyTemplate",
        on_delete=models.CASCADE,
        related_name="responses",
    )

    question_number = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    question_type = models.CharField(max_length=10, choices=QuestionType.choices)

    correct_option = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        validators=[MinValueValidator(1), MaxValueValidator(5)],
    )
    # 예: ["blue", "Blue"]
    correct_text_answers = models.JSONField(null=True, blank=True)

    points_value = models.FloatField(default=1.0, validators=[MinValueValidator(0)])
    difficulty = models.CharField(
        max_length=10,
        choices=Difficulty.choices,
        default=Difficulty.MEDIUM,
    )
    explanation = models.TextField(blank=True, default="")

    class Meta:
        db_table = "answer_key_responses"
        unique_together = ("template", "question_number")
        ordering = ["question_number"]

    def __str__(self):
        return f"{self.template_id} Q{self.question_number} ({self.question_type})"
